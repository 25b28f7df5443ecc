"""Space Invaders played sideways: the ship holds the left edge, invaders advance from the right."""

from __future__ import annotations

import curses
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from termage.animation import Animation, Frame
from termage.controller import CursesController
from termage.engine import Engine
from termage.entity import Entity, Solidity, StraightMovement
from termage.events import CollisionEvent, Event, GameOverEvent, SoundEvent
from termage.input_event import InputEvent, get_keyboard_input
from termage.position import Position
from termage.shape import Shape
from termage.sound import MixerSoundSystem
from termage.view import CursesView
from termage.world import BorderMode, World

PLAYER_X = 2
PLAYER_SPEED = 1
BULLET_SPEED = 1.0
ENEMY_BULLET_SPEED = 1.0
SHOOT_COOLDOWN = 5
ANIM_INTERVAL_TICKS = 10
ENEMY_POINTS = 10
ENEMY_SPACING_X = 4
ENEMY_SPACING_Y = 3
ENEMY_TOP = 2
ENEMY_ADVANCE = 2
DANGER_X = PLAYER_X + 8
STAR_COUNT = 8


@dataclass(frozen=True)
class LevelConfig:
    enemy_rows: int
    enemy_cols: int
    shoot_interval: int
    enemy_speed: float


LEVELS = (
    LevelConfig(enemy_rows=3, enemy_cols=4, shoot_interval=45, enemy_speed=0.25),
    LevelConfig(enemy_rows=4, enemy_cols=5, shoot_interval=30, enemy_speed=0.4),
)

SOUND_DIR = Path("assets/sounds/space_invaders")
SOUND_IDS = ("shoot", "hit", "die", "win")

PLAYER_SHAPE_A = Shape("player_a", ["|>", "|==>", "|>"])
PLAYER_SHAPE_B = Shape("player_b", ["|)", "|==>", "|)"])
BULLET_SHAPE = Shape("bullet", ["-"])
ENEMY_BULLET_SHAPE = Shape("enemy_bullet", ["<"])
ENEMY_SHAPE_A = Shape("enemy_a", ["/=", "\\="])
ENEMY_SHAPE_B = Shape("enemy_b", ["\\=", "/="])
STAR_SHAPE_A = Shape("star_a", ["."])
STAR_SHAPE_B = Shape("star_b", ["+"])

_UP_KEYS = frozenset((ord("w"), ord("W"), curses.KEY_UP))
_DOWN_KEYS = frozenset((ord("s"), ord("S"), curses.KEY_DOWN))
_SHOOT_KEYS = frozenset((ord(" "),))


class SpaceAction(Enum):
    NONE = "none"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SHOOT = "shoot"


class SpaceInvadersGame:
    """Game rules for Space Invaders, driven by an engine."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._engine: Optional[Engine] = None
        self._player: Optional[Entity] = None
        self._next_entity_id = 1
        self._level = 1
        self._score = 0
        self._enemies_remaining = 0
        self._game_over = False
        self._victory = False
        self._shoot_cooldown = 0
        self._enemy_move_acc = 0.0
        self._enemy_direction = 1  # 1 = down, -1 = up
        self._enemy_shoot_timer = LEVELS[0].shoot_interval

    @property
    def level(self) -> int:
        return self._level

    @property
    def score(self) -> int:
        return self._score

    @property
    def enemies_remaining(self) -> int:
        return self._enemies_remaining

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def victory(self) -> bool:
        return self._victory

    @property
    def player(self) -> Optional[Entity]:
        return self._player

    def setup(self, engine: Engine) -> None:
        """Configure ``engine``'s world, build the first level and register the game logic."""
        self._engine = engine
        engine.world.border_mode = BorderMode.SOLID
        engine.events.subscribe("collision", self._on_collision)
        self._setup_level(1)
        engine.set_game_update(self._tick)
        self._update_status_lines()

    def translate_input(self, input_event: InputEvent) -> SpaceAction:
        keyboard = get_keyboard_input(input_event)
        if keyboard is None:
            return SpaceAction.NONE
        if keyboard.key in _UP_KEYS:
            return SpaceAction.MOVE_UP
        if keyboard.key in _DOWN_KEYS:
            return SpaceAction.MOVE_DOWN
        if keyboard.key in _SHOOT_KEYS:
            return SpaceAction.SHOOT
        return SpaceAction.NONE

    def status_lines(self) -> List[str]:
        if self._victory:
            return [
                "=== VICTORY! ===",
                f"Final Score: {self._score}",
                "You defeated all invaders!",
                "Press 'q' to quit",
            ]
        if self._game_over:
            return [
                "=== GAME OVER ===",
                f"Final Score: {self._score}",
                "The invaders have won...",
                "Press 'q' to quit",
            ]
        return [
            f"SPACE INVADERS | Level: {self._level} | Score: {self._score}"
            f" | Enemies: {self._enemies_remaining}",
            "W/S or UP/DOWN to move | SPACE to shoot",
            "Press 'q' to quit | 'm' to toggle mute",
        ]

    def run(self) -> None:
        """Play in the terminal until the player quits."""
        engine = Engine()
        sound = MixerSoundSystem()
        for sound_id in SOUND_IDS:
            sound.load_sound(sound_id, SOUND_DIR / f"{sound_id}.wav")
        engine.set_sound_system(sound)
        view = CursesView()
        try:
            engine.add_view(view)
            engine.controller = CursesController()
            self.setup(engine)
            engine.run()
        finally:
            view.close()
            sound.close()

    @property
    def _world(self) -> World:
        if self._engine is None:
            raise RuntimeError("game is not set up")
        return self._engine.world

    def _new_id(self) -> int:
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        return entity_id

    def _emit(self, event: Event) -> None:
        self._engine.events.emit(event)

    def _tick(self, dt: float, input_event: InputEvent) -> None:
        if self._shoot_cooldown > 0:
            self._shoot_cooldown -= 1
        self._handle_action(self.translate_input(input_event))
        self._update_enemy_movement()
        self._update_enemy_shooting()
        self._check_level_complete()
        self._check_enemy_reached_player()
        self._update_status_lines()

    def _setup_level(self, level: int) -> None:
        self._level = level
        world = self._world
        for entity in world.entities:
            entity.kill()
        self._enemy_move_acc = 0.0
        self._enemy_direction = 1
        self._shoot_cooldown = 0
        config = LEVELS[level - 1]
        self._enemy_shoot_timer = config.shoot_interval
        self._create_player()
        self._spawn_stars(STAR_COUNT)
        self._spawn_enemy_grid(config.enemy_rows, config.enemy_cols)

    def _create_player(self) -> None:
        world = self._world
        player = world.create_entity(self._new_id(), "player", Position(PLAYER_X, world.height // 2 - 1), PLAYER_SHAPE_A)
        player.solidity = Solidity.SOLID
        player.clamp_to_borders = True
        player.animation = Animation(
            [Frame(PLAYER_SHAPE_A, ANIM_INTERVAL_TICKS), Frame(PLAYER_SHAPE_B, ANIM_INTERVAL_TICKS)], looping=True
        )
        world.player = player
        self._player = player

    def _spawn_enemy_grid(self, rows: int, cols: int) -> None:
        world = self._world
        self._enemies_remaining = rows * cols
        start_x = world.width - cols * ENEMY_SPACING_X - 2
        for row in range(rows):
            for col in range(cols):
                pos = Position(start_x + col * ENEMY_SPACING_X, ENEMY_TOP + row * ENEMY_SPACING_Y)
                enemy = world.create_entity(self._new_id(), "enemy", pos, ENEMY_SHAPE_A)
                enemy.solidity = Solidity.SOLID
                enemy.animation = Animation(
                    [Frame(ENEMY_SHAPE_A, ANIM_INTERVAL_TICKS), Frame(ENEMY_SHAPE_B, ANIM_INTERVAL_TICKS)],
                    looping=True,
                )

    def _spawn_stars(self, count: int) -> None:
        world = self._world
        for _ in range(count):
            pos = Position(self._rng.randrange(DANGER_X, world.width), self._rng.randrange(world.height))
            star = world.create_entity(self._new_id(), "star", pos, STAR_SHAPE_A)
            star.solidity = Solidity.GHOST
            star.height = -1
            duration = self._rng.randint(ANIM_INTERVAL_TICKS, 2 * ANIM_INTERVAL_TICKS)
            star.animation = Animation([Frame(STAR_SHAPE_A, duration), Frame(STAR_SHAPE_B, duration)], looping=True)

    def _handle_action(self, action: SpaceAction) -> None:
        player = self._player
        if player is None or not player.alive or self._game_over or self._victory:
            return
        if action is SpaceAction.MOVE_UP:
            player.move(0, -PLAYER_SPEED)
        elif action is SpaceAction.MOVE_DOWN:
            player.move(0, PLAYER_SPEED)
        elif action is SpaceAction.SHOOT:
            self._shoot_player_bullet()

    def _shoot_player_bullet(self) -> None:
        if self._shoot_cooldown > 0:
            return
        pos = self._player.position
        bullet = self._world.create_entity(self._new_id(), "player_bullet", Position(pos.x + 4, pos.y + 1), BULLET_SHAPE)
        bullet.add_movement(StraightMovement(BULLET_SPEED, 0.0))
        bullet.solidity = Solidity.TRIGGER
        bullet.clamp_to_borders = False
        self._shoot_cooldown = SHOOT_COOLDOWN
        self._emit(SoundEvent("shoot"))

    def _living_enemies(self) -> List[Entity]:
        return [e for e in self._world.find_entities_by_tag("enemy") if e.alive]

    def _update_enemy_movement(self) -> None:
        enemies = self._living_enemies()
        if not enemies:
            return
        self._enemy_move_acc += LEVELS[self._level - 1].enemy_speed
        step = int(self._enemy_move_acc)
        if step < 1:
            return
        self._enemy_move_acc -= step
        dy = step * self._enemy_direction
        top = min(e.position.y for e in enemies)
        bottom = max(e.position.y + e.hitbox.height for e in enemies)
        if top + dy < 0 or bottom + dy > self._world.height:
            self._enemy_direction = -self._enemy_direction
            for enemy in enemies:
                enemy.move(-ENEMY_ADVANCE, 0)
        else:
            for enemy in enemies:
                enemy.move(0, dy)

    def _update_enemy_shooting(self) -> None:
        self._enemy_shoot_timer -= 1
        if self._enemy_shoot_timer > 0:
            return
        self._enemy_shoot_timer = LEVELS[self._level - 1].shoot_interval
        enemies = self._living_enemies()
        if not enemies or self._game_over or self._victory:
            return
        shooter = self._rng.choice(enemies)
        pos = Position(shooter.position.x - 1, shooter.position.y)
        bullet = self._world.create_entity(self._new_id(), "enemy_bullet", pos, ENEMY_BULLET_SHAPE)
        bullet.add_movement(StraightMovement(-ENEMY_BULLET_SPEED, 0.0))
        bullet.solidity = Solidity.TRIGGER
        bullet.clamp_to_borders = False

    def _on_collision(self, event: Event) -> None:
        if not isinstance(event, CollisionEvent) or self._game_over or self._victory:
            return
        world = self._world
        a = world.find_entity(event.entity_a_id)
        b = world.find_entity(event.entity_b_id)
        if a is None or b is None or not (a.alive and b.alive):
            return
        by_tag = {a.tag: a, b.tag: b}
        if event.is_between("player_bullet", "enemy_bullet"):
            a.kill()
            b.kill()
        elif event.is_between("player_bullet", "enemy"):
            a.kill()
            b.kill()
            self._score += ENEMY_POINTS
            self._enemies_remaining -= 1
            self._emit(SoundEvent("hit"))
        elif event.is_between("enemy_bullet", "player"):
            by_tag["enemy_bullet"].kill()
            self._trigger_game_over()
        elif event.is_between("enemy", "player"):
            self._trigger_game_over()

    def _check_level_complete(self) -> None:
        if self._enemies_remaining > 0 or self._victory or self._game_over:
            return
        if self._level < len(LEVELS):
            self._setup_level(self._level + 1)
            self._emit(SoundEvent("win"))
        else:
            self._victory = True
            self._emit(SoundEvent("win"))
            self._emit(GameOverEvent(True))

    def _check_enemy_reached_player(self) -> None:
        if self._game_over or self._victory:
            return
        if any(e.position.x <= DANGER_X for e in self._living_enemies()):
            self._trigger_game_over()

    def _trigger_game_over(self) -> None:
        if self._game_over:
            return
        self._game_over = True
        self._emit(SoundEvent("die"))
        self._emit(GameOverEvent(False))

    def _update_status_lines(self) -> None:
        self._world.set_status_lines(self.status_lines())


def run_space_invaders() -> None:
    SpaceInvadersGame().run()