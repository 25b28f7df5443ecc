"""Frame-based sprite animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from termage.shape import Shape


@dataclass(frozen=True)
class Frame:
    """One animation frame shown for a number of ticks."""

    shape: Optional[Shape]
    duration_ticks: int
    offset_x: int = 0
    offset_y: int = 0


class Animation:
    """Steps through frames tick by tick, optionally looping."""

    def __init__(self, frames: Iterable[Frame] = (), looping: bool = True) -> None:
        self.frames = tuple(frames)
        self.looping = looping
        self.reset()

    def advance_tick(self) -> None:
        if not self.frames or self._finished:
            return
        self._ticks += 1
        if self._ticks < self.frames[self._index].duration_ticks:
            return
        self._ticks = 0
        if self._index + 1 < len(self.frames):
            self._index += 1
        elif self.looping:
            self._index = 0
        else:
            self._finished = True

    def reset(self) -> None:
        self._index = self._ticks = 0
        self._finished = False

    @property
    def _frame(self) -> Frame:
        return self.frames[self._index] if self.frames else Frame(None, 0)

    @property
    def current_shape(self) -> Optional[Shape]:
        return self._frame.shape

    @property
    def current_offset_x(self) -> int:
        return self._frame.offset_x

    @property
    def current_offset_y(self) -> int:
        return self._frame.offset_y

    def is_finished(self) -> bool:
        return self._finished

    def is_empty(self) -> bool:
        return not self.frames