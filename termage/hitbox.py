"""Axis-aligned collision boxes relative to an owner's position."""

from __future__ import annotations

from dataclasses import dataclass

from termage.position import Position


@dataclass
class Hitbox:
    """A rectangle offset from its owner's position."""

    offset_x: int = 0
    offset_y: int = 0
    width: int = 0
    height: int = 0

    def set_offset(self, x: int, y: int) -> None:
        self.offset_x, self.offset_y = x, y

    def set_size(self, width: int, height: int) -> None:
        self.width, self.height = width, height

    def intersects(self, other: Hitbox, self_pos: Position, other_pos: Position) -> bool:
        """Whether the boxes overlap at the given world positions."""
        if min(self.width, self.height, other.width, other.height) <= 0:
            return False
        ax, ay = self_pos.x + self.offset_x, self_pos.y + self.offset_y
        bx, by = other_pos.x + other.offset_x, other_pos.y + other.offset_y
        return (ax < bx + other.width and bx < ax + self.width
                and ay < by + other.height and by < ay + self.height)