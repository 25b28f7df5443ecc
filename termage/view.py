"""Views that render the game."""

from __future__ import annotations

import curses
import locale
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from termage.drawable import Drawable

_BORDER = 1
_STATUS_ROWS = 3


class View(ABC):
    """Receives the frame to show after each tick."""

    @abstractmethod
    def notify(self, drawables: Sequence[Drawable], status_lines: Sequence[str]) -> None:
        """Show ``drawables`` and ``status_lines``."""


def _compose(drawables: Sequence[Drawable], width: int, height: int) -> List[str]:
    """Paint drawables in depth order on a blank grid; spaces are transparent."""
    grid = [[" "] * width for _ in range(height)]
    for d in sorted(drawables, key=lambda d: d.z):
        for r, line in enumerate(d.shape.rows if d.shape else ()):
            for c, char in enumerate(line):
                y, x = d.y + r, d.x + c
                if char != " " and 0 <= y < height and 0 <= x < width:
                    grid[y][x] = char
    return ["".join(row) for row in grid]


class CursesView(View):
    """Draws a bordered play area with status rows beneath it."""

    def __init__(self, width: int = 80, height: int = 25, *, screen: Optional[Any] = None) -> None:
        if width <= 2 * _BORDER or height <= _STATUS_ROWS + 2 * _BORDER:
            raise ValueError("view is too small")
        self._outer_width = width
        self.game_width = width - 2 * _BORDER
        self.game_height = height - _STATUS_ROWS - 2 * _BORDER
        self._owns_terminal = screen is None
        self._screen = screen if screen is not None else self._init_terminal()
        game_rows = height - _STATUS_ROWS
        self._game_window = self._screen.subwin(game_rows, width, 0, 0)
        self._status_window = self._screen.subwin(_STATUS_ROWS, width, game_rows, 0)
        self._previous: List[Optional[str]] = [None] * self.game_height
        self._closed = False

    @staticmethod
    def _init_terminal() -> Any:
        locale.setlocale(locale.LC_ALL, "")
        screen = curses.initscr()
        curses.noecho()
        curses.cbreak()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        screen.keypad(True)
        screen.nodelay(True)
        return screen

    def notify(self, drawables: Sequence[Drawable], status_lines: Sequence[str]) -> None:
        if self._closed:
            raise RuntimeError("view is closed")
        frame = _compose(drawables, self.game_width, self.game_height)
        self._game_window.box()
        for row, (line, old) in enumerate(zip(frame, self._previous)):
            if line != old:
                self._put(self._game_window, row + _BORDER, _BORDER, line)
        self._previous = list(frame)
        self._game_window.refresh()
        self._status_window.erase()
        for row, line in enumerate(status_lines[:_STATUS_ROWS]):
            self._put(self._status_window, row, 0, line[: self._outer_width])
        self._status_window.refresh()

    @staticmethod
    def _put(window: Any, y: int, x: int, text: str) -> None:
        try:
            window.addstr(y, x, text)
        except curses.error:
            pass  # the bottom-right cell moves the cursor off the window

    def close(self) -> None:
        """Restore the terminal if this view set it up."""
        if self._closed:
            return
        self._closed = True
        if self._owns_terminal:
            try:
                self._screen.keypad(False)
                curses.nocbreak()
                curses.echo()
            finally:
                curses.endwin()

    def __enter__(self) -> CursesView:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()