"""Registry of shared game resources."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from termage.shape import Shape


class ResourceManager:
    """Owns shapes by id, in registration order."""

    def __init__(self) -> None:
        self._shapes: Dict[str, Shape] = {}

    def register_shape(self, shape_id: str, pixels: Iterable[str]) -> Shape:
        """Create and store a shape, replacing any with the same id."""
        shape = Shape(shape_id, pixels)
        self._shapes[shape_id] = shape
        return shape

    def get_shape(self, shape_id: str) -> Optional[Shape]:
        return self._shapes.get(shape_id)

    def has_shape(self, shape_id: str) -> bool:
        return shape_id in self._shapes

    def shape_ids(self) -> List[str]:
        return list(self._shapes)

    def clear(self) -> None:
        self._shapes.clear()

    def shape_count(self) -> int:
        return len(self._shapes)