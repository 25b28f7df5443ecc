"""Integer grid positions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell on the game grid: x grows rightwards, y grows downwards."""

    x: int = 0
    y: int = 0