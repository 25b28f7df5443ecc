"""Game objects and the movement behaviours that drive them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterable, List, Optional, Type, TypeVar

from termage.animation import Animation
from termage.drawable import Drawable
from termage.hitbox import Hitbox
from termage.input_event import InputEvent, get_keyboard_input
from termage.position import Position
from termage.shape import Shape


class Solidity(Enum):
    """SOLID blocks and reports, TRIGGER only reports, GHOST does neither."""

    SOLID = "solid"
    TRIGGER = "trigger"
    GHOST = "ghost"


CollisionCallback = Callable[["Entity", "Entity"], None]


class MovementComponent(ABC):
    """A behaviour that moves its entity once per tick."""

    @abstractmethod
    def apply(self, entity: Entity, input_event: InputEvent) -> None:
        """Move ``entity`` for one tick."""


class StraightMovement(MovementComponent):
    """Constant velocity in cells per tick; fractions carry over."""

    def __init__(self, vx: float, vy: float) -> None:
        self.set_velocity(vx, vy)
        self._acc_x = self._acc_y = 0.0

    def set_velocity(self, vx: float, vy: float) -> None:
        self.velocity_x, self.velocity_y = vx, vy

    def apply(self, entity: Entity, input_event: InputEvent) -> None:
        self._acc_x += self.velocity_x
        self._acc_y += self.velocity_y
        dx, dy = int(self._acc_x), int(self._acc_y)
        self._acc_x -= dx
        self._acc_y -= dy
        if dx or dy:
            entity.move(dx, dy)


class CycleMovement(MovementComponent):
    """Applies a repeating sequence of offsets, one every ``interval_ticks``."""

    def __init__(self, offsets: Iterable[Position], interval_ticks: int) -> None:
        if interval_ticks < 1:
            raise ValueError("interval_ticks must be at least 1")
        self._offsets: List[Position] = list(offsets)
        self._interval = interval_ticks
        self.reset()

    def apply(self, entity: Entity, input_event: InputEvent) -> None:
        if not self._offsets:
            return
        self._ticks += 1
        if self._ticks < self._interval:
            return
        self._ticks = 0
        offset = self._offsets[self._index]
        entity.move(offset.x, offset.y)
        self._index = (self._index + 1) % len(self._offsets)

    def reset(self) -> None:
        self._index = self._ticks = 0


class GravityMovement(MovementComponent):
    """Constant downward fall; fractions carry over."""

    def __init__(self, fall_speed: float) -> None:
        self.fall_speed = fall_speed
        self._acc = 0.0

    def apply(self, entity: Entity, input_event: InputEvent) -> None:
        self._acc += self.fall_speed
        dy = int(self._acc)
        self._acc -= dy
        if dy:
            entity.move(0, dy)


class PlayerControlledMovement(MovementComponent):
    """Moves the entity when one of its four direction keys is pressed."""

    def __init__(self, speed: float, left: int, right: int, up: int, down: int) -> None:
        self.move_speed = speed
        self._directions = {left: (-1, 0), right: (1, 0), up: (0, -1), down: (0, 1)}

    def apply(self, entity: Entity, input_event: InputEvent) -> None:
        keyboard = get_keyboard_input(input_event)
        direction = self._directions.get(keyboard.key) if keyboard else None
        if direction:
            step = int(self.move_speed)
            entity.move(direction[0] * step, direction[1] * step)


_M = TypeVar("_M", bound=MovementComponent)


class Entity:
    """A game object with a position, a sprite, movements and a lifetime."""

    def __init__(self, entity_id: int, tag: str, pos: Position, shape: Optional[Shape] = None) -> None:
        self.id = entity_id
        self.tag = tag
        self.position = self.prev_position = pos
        self.hitbox = Hitbox(0, 0, shape.width, shape.height) if shape else Hitbox()
        self.height = 0
        self.alive = True
        self.solidity = Solidity.SOLID
        self._base_shape = shape
        self._movements: List[MovementComponent] = []
        self.animation: Optional[Animation] = None
        self.collision_callback: Optional[CollisionCallback] = None
        self.age_ticks = 0
        self.max_age_ticks = 0  # 0 means never expires
        self.clamp_to_borders = True

    @property
    def base_shape(self) -> Optional[Shape]:
        return self._base_shape

    @base_shape.setter
    def base_shape(self, shape: Optional[Shape]) -> None:
        self._base_shape = shape
        if shape is not None:
            self.hitbox.set_size(shape.width, shape.height)

    @property
    def movements(self) -> tuple:
        return tuple(self._movements)

    def update(self, input_event: InputEvent) -> None:
        """Apply movements, advance the animation and age by one tick."""
        if not self.alive:
            return
        self.prev_position = self.position
        for movement in list(self._movements):
            movement.apply(self, input_event)
        if self.animation is not None:
            self.animation.advance_tick()
        self.age_ticks += 1
        if 0 < self.max_age_ticks <= self.age_ticks:
            self.kill()

    def on_collision(self, other: Entity) -> None:
        if self.collision_callback is not None:
            self.collision_callback(self, other)

    def to_drawable(self) -> Drawable:
        shape, dx, dy = self._base_shape, 0, 0
        anim = self.animation
        if anim is not None and not anim.is_empty():
            shape = anim.current_shape or shape
            dx, dy = anim.current_offset_x, anim.current_offset_y
        return Drawable(shape, self.position.x + dx, self.position.y + dy, self.height)

    def kill(self) -> None:
        self.alive = False

    def set_position(self, x: int, y: int) -> None:
        self.position = Position(x, y)

    def move(self, dx: int, dy: int) -> None:
        self.set_position(self.position.x + dx, self.position.y + dy)

    def add_movement(self, movement: MovementComponent) -> None:
        self._movements.append(movement)

    def clear_movements(self) -> None:
        self._movements.clear()

    def get_movement(self, kind: Type[_M]) -> Optional[_M]:
        return next((m for m in self._movements if isinstance(m, kind)), None)