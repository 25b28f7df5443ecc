"""The play field: entities, borders, collisions and status text."""

from __future__ import annotations

from enum import Enum
from itertools import combinations
from typing import Iterable, List, Optional

from termage.drawable import Drawable
from termage.entity import Entity, Solidity
from termage.event_manager import EventManager
from termage.events import BorderEvent, BorderSide, CollisionEvent, Event
from termage.hitbox import Hitbox
from termage.input_event import InputEvent
from termage.position import Position
from termage.shape import Shape


class BorderMode(Enum):
    """SOLID keeps clamped entities inside; VIEW lets everything leave."""

    SOLID = "solid"
    VIEW = "view"


class World:
    """Holds entities and applies borders and collisions each tick."""

    def __init__(self, width: int = 78, height: int = 20, border_mode: BorderMode = BorderMode.SOLID) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("world dimensions must be positive")
        self.width, self.height = width, height
        self.border = Hitbox(0, 0, width, height)
        self.border_mode = border_mode
        self.tick_count = 0
        self._status_lines: List[str] = []
        self._entities: List[Entity] = []
        self.player: Optional[Entity] = None
        self.events: Optional[EventManager] = None

    @property
    def entities(self) -> tuple:
        return tuple(self._entities)

    def update(self, input_event: InputEvent) -> None:
        self.tick_count += 1
        for entity in list(self._entities):
            if entity.alive:
                entity.update(input_event)
                self.apply_border_rules(entity)
        self.handle_collisions()
        self.remove_dead_entities()

    def handle_collisions(self) -> None:
        """Report overlapping non-ghost entities; solid pairs are pushed back."""
        candidates = [e for e in self._entities if e.alive and e.solidity is not Solidity.GHOST]
        for a, b in combinations(candidates, 2):
            if not (a.alive and b.alive and a.hitbox.intersects(b.hitbox, a.position, b.position)):
                continue
            if a.solidity is b.solidity is Solidity.SOLID:
                a.position, b.position = a.prev_position, b.prev_position
            a.on_collision(b)
            b.on_collision(a)
            self._emit(CollisionEvent(a.id, b.id, a.tag, b.tag))

    def apply_border_rules(self, entity: Entity) -> None:
        """Report crossings, then clamp the entity or kill it once fully outside."""
        if not entity.alive:
            return
        box = entity.hitbox
        left, top = entity.position.x + box.offset_x, entity.position.y + box.offset_y
        crossed = {BorderSide.LEFT: left < 0, BorderSide.RIGHT: left + box.width > self.width,
                   BorderSide.TOP: top < 0, BorderSide.BOTTOM: top + box.height > self.height}
        sides = [side for side, hit in crossed.items() if hit]
        if not sides:
            return
        for side in sides:
            self._emit(BorderEvent(entity.id, side))
        if self.border_mode is BorderMode.SOLID and entity.clamp_to_borders:
            x = max(0, min(left, self.width - box.width))
            y = max(0, min(top, self.height - box.height))
            entity.set_position(x - box.offset_x, y - box.offset_y)
        elif (left + max(box.width, 1) <= 0 or top + max(box.height, 1) <= 0
              or left >= self.width or top >= self.height):
            entity.kill()

    def add_entity(self, entity: Entity) -> None:
        self._entities.append(entity)

    def create_entity(self, entity_id: int, tag: str, pos: Position, shape: Optional[Shape]) -> Entity:
        entity = Entity(entity_id, tag, pos, shape)
        self.add_entity(entity)
        return entity

    def remove_dead_entities(self) -> None:
        self._entities = [e for e in self._entities if e.alive]

    def collect_drawables(self) -> List[Drawable]:
        drawables = (e.to_drawable() for e in self._entities if e.alive)
        return [d for d in drawables if d.shape is not None]

    def collect_status_lines(self) -> List[str]:
        return list(self._status_lines)

    def clear_status_lines(self) -> None:
        self._status_lines.clear()

    def add_status_line(self, line: str) -> None:
        self._status_lines.append(line)

    def set_status_lines(self, lines: Iterable[str]) -> None:
        self._status_lines = list(lines)

    def find_entity(self, entity_id: int) -> Optional[Entity]:
        return next((e for e in self._entities if e.id == entity_id), None)

    def find_entities_by_tag(self, tag: str) -> List[Entity]:
        return [e for e in self._entities if e.tag == tag]

    def _emit(self, event: Event) -> None:
        if self.events is not None:
            self.events.emit(event)