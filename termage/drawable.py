"""Render items handed to views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from termage.shape import Shape


@dataclass
class Drawable:
    """A shape placed at a screen position, with a depth for ordering."""

    shape: Optional[Shape] = None
    x: int = 0
    y: int = 0
    z: int = 0

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y