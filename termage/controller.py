"""Input controllers."""

import curses
from abc import ABC, abstractmethod
from typing import Any, Optional

from termage.input_event import InputEvent, KeyboardInput, NoInput


class Controller(ABC):
    """Source of one input event per tick."""

    @abstractmethod
    def get_input(self) -> InputEvent:
        """The input for this tick, or NoInput."""


class CursesController(Controller):
    """Reads key presses from a curses window without blocking."""

    def __init__(self, window: Optional[Any] = None) -> None:
        self._window = window

    def get_input(self) -> InputEvent:
        if self._window is None:
            self._window = curses.initscr()
            self._window.nodelay(True)
            self._window.keypad(True)
        key = self._window.getch()
        return NoInput() if key == curses.ERR else KeyboardInput(key)