"""Game events passed through the event manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Event(ABC):
    """Base for all game events; ``type`` names the channel it is sent on."""

    @property
    @abstractmethod
    def type(self) -> str:
        """The event type name."""


@dataclass(frozen=True)
class CollisionEvent(Event):
    """Two entities touched."""

    entity_a_id: int
    entity_b_id: int
    tag_a: str
    tag_b: str

    @property
    def type(self) -> str:
        return "collision"

    def involves(self, tag: str) -> bool:
        return tag in (self.tag_a, self.tag_b)

    def is_between(self, tag1: str, tag2: str) -> bool:
        return (self.tag_a, self.tag_b) in ((tag1, tag2), (tag2, tag1))


@dataclass(frozen=True)
class GameOverEvent(Event):
    """The game ended, won or lost."""

    won: bool
    reason: str = ""

    @property
    def type(self) -> str:
        return "game_over"


@dataclass(frozen=True)
class SoundEvent(Event):
    """A request to play a sound."""

    sound_id: str

    @property
    def type(self) -> str:
        return "sound"


class BorderSide(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class BorderEvent(Event):
    """An entity hit a world border."""

    entity_id: int
    side: BorderSide

    @property
    def type(self) -> str:
        return "border"