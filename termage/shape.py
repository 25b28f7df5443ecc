"""Character sprites."""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, init=False)
class Shape:
    """A named block of text rows; short rows read as spaces."""

    sprite_id: str
    rows: Tuple[str, ...]

    def __init__(self, sprite_id: str = "", pixels: Iterable[str] = ()) -> None:
        object.__setattr__(self, "sprite_id", sprite_id)
        object.__setattr__(self, "rows", tuple(pixels))

    @property
    def width(self) -> int:
        return max(map(len, self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    def at(self, row: int, col: int) -> str:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({row}, {col}) is outside shape {self.sprite_id!r}")
        return self.rows[row][col:col + 1] or " "