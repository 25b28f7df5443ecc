"""Input events delivered by controllers each tick."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class NoInput:
    """No input arrived this tick."""


@dataclass(frozen=True)
class KeyboardInput:
    """A key press, as a curses key code."""

    key: int


InputEvent = Union[NoInput, KeyboardInput]


def is_no_input(event: InputEvent) -> bool:
    return isinstance(event, NoInput)


def is_keyboard_input(event: InputEvent) -> bool:
    return isinstance(event, KeyboardInput)


def get_keyboard_input(event: InputEvent) -> Optional[KeyboardInput]:
    """The keyboard input carried by ``event``, or None."""
    return event if isinstance(event, KeyboardInput) else None