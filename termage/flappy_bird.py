"""Flappy Bird: keep the bird in the air and fly it through the gaps between pipes."""

from __future__ import annotations

import curses
import random
from enum import Enum
from pathlib import Path
from typing import List, Optional

from termage.controller import CursesController
from termage.engine import Engine
from termage.entity import Entity, GravityMovement, Solidity, StraightMovement
from termage.animation import Animation, Frame
from termage.events import BorderEvent, BorderSide, CollisionEvent, Event, GameOverEvent, SoundEvent
from termage.input_event import InputEvent, get_keyboard_input
from termage.position import Position
from termage.shape import Shape
from termage.sound import MixerSoundSystem
from termage.view import CursesView
from termage.world import BorderMode

BIRD_X = 10
BIRD_START_Y = 10
FALL_SPEED = 0.3
FLAP_HEIGHT = 3
PIPE_SPEED = -0.5
PIPE_WIDTH = 3
PIPE_GAP = 6
MIN_PIPE_HEIGHT = 2
PIPE_SPAWN_DELAY = 60
PIPE_SPAWN_INTERVAL = 40

SOUND_DIR = Path("assets/sounds/flappy_bird")
SOUND_IDS = ("flap", "score", "die")

BIRD_SHAPE = Shape("bird", ["(o>", " ^ "])
BIRD_FLAP_SHAPE = Shape("bird_flap", ["(o>", " v "])

_FLAP_KEYS = frozenset((ord(" "), ord("w"), ord("W"), curses.KEY_UP))


class FlappyAction(Enum):
    NONE = "none"
    FLAP = "flap"


class FlappyBirdGame:
    """Game rules for Flappy Bird, driven by an engine."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._engine: Optional[Engine] = None
        self._bird: Optional[Entity] = None
        self._next_entity_id = 1
        self._pipe_spawn_timer = PIPE_SPAWN_DELAY
        self._score = 0
        self._game_over = False

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def bird(self) -> Optional[Entity]:
        return self._bird

    def setup(self, engine: Engine) -> None:
        """Configure ``engine``'s world, create the bird and register the game logic."""
        self._engine = engine
        engine.world.border_mode = BorderMode.SOLID
        engine.events.subscribe("collision", self._on_collision)
        engine.events.subscribe("border", self._on_border)
        self._create_bird()
        engine.set_game_update(self._tick)
        self._update_status_lines()

    def translate_input(self, input_event: InputEvent) -> FlappyAction:
        keyboard = get_keyboard_input(input_event)
        if keyboard is not None and keyboard.key in _FLAP_KEYS:
            return FlappyAction.FLAP
        return FlappyAction.NONE

    def status_lines(self) -> List[str]:
        if self._game_over:
            return [
                "=== GAME OVER ===",
                f"Final Score: {self._score}",
                "Press 'q' to quit",
            ]
        return [
            f"FLAPPY BIRD | Score: {self._score}",
            "Press SPACE or UP to flap",
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
    def _world(self):
        if self._engine is None:
            raise RuntimeError("game is not set up")
        return self._engine.world

    def _new_id(self) -> int:
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        return entity_id

    def _tick(self, dt: float, input_event: InputEvent) -> None:
        if self.translate_input(input_event) is FlappyAction.FLAP:
            self._flap()
        if not self._game_over:
            self._pipe_spawn_timer -= 1
            if self._pipe_spawn_timer <= 0:
                self._spawn_pipe_pair()
                self._pipe_spawn_timer = PIPE_SPAWN_INTERVAL
        self._update_status_lines()

    def _create_bird(self) -> None:
        world = self._world
        bird = world.create_entity(self._new_id(), "bird", Position(BIRD_X, BIRD_START_Y), BIRD_SHAPE)
        bird.add_movement(GravityMovement(FALL_SPEED))
        bird.solidity = Solidity.SOLID
        bird.animation = Animation([Frame(BIRD_SHAPE, 25), Frame(BIRD_FLAP_SHAPE, 15)], looping=True)
        bird.collision_callback = self._on_bird_collision
        world.player = bird
        self._bird = bird

    def _on_bird_collision(self, bird: Entity, other: Entity) -> None:
        if self._game_over or not other.alive or other.tag != "score_trigger":
            return
        other.kill()
        self._score += 1
        self._engine.events.emit(SoundEvent("score"))

    def _on_collision(self, event: Event) -> None:
        if isinstance(event, CollisionEvent) and event.is_between("bird", "pipe"):
            self._trigger_game_over()

    def _on_border(self, event: Event) -> None:
        if not isinstance(event, BorderEvent) or self._bird is None:
            return
        if event.entity_id == self._bird.id and event.side is BorderSide.BOTTOM:
            self._trigger_game_over()

    def _flap(self) -> None:
        bird = self._bird
        if bird is None or not bird.alive or self._game_over:
            return
        bird.move(0, -FLAP_HEIGHT)
        self._engine.events.emit(SoundEvent("flap"))

    def _spawn_pipe_pair(self) -> None:
        world = self._world
        gap_top = self._rng.randint(MIN_PIPE_HEIGHT, world.height - PIPE_GAP - MIN_PIPE_HEIGHT)
        bottom_y = gap_top + PIPE_GAP
        x = world.width - PIPE_WIDTH
        parts = (
            ("pipe", Position(x, 0), self._pipe_shape(gap_top, True), Solidity.SOLID),
            ("pipe", Position(x, bottom_y), self._pipe_shape(world.height - bottom_y, False), Solidity.SOLID),
            ("score_trigger", Position(x + PIPE_WIDTH // 2, gap_top), self._score_trigger_shape(), Solidity.TRIGGER),
        )
        for tag, pos, shape, solidity in parts:
            entity = world.create_entity(self._new_id(), tag, pos, shape)
            entity.add_movement(StraightMovement(PIPE_SPEED, 0.0))
            entity.solidity = solidity
            entity.clamp_to_borders = False

    def _pipe_shape(self, height: int, is_top: bool) -> Shape:
        resources = self._engine.resources
        shape_id = f"pipe_{'top' if is_top else 'bottom'}_{height}"
        existing = resources.get_shape(shape_id)
        if existing is not None:
            return existing
        body = ["| |"] * (height - 1)
        rows = body + ["==="] if is_top else ["==="] + body
        return resources.register_shape(shape_id, rows)

    def _score_trigger_shape(self) -> Shape:
        resources = self._engine.resources
        existing = resources.get_shape("score_trigger")
        if existing is not None:
            return existing
        return resources.register_shape("score_trigger", [" "] * PIPE_GAP)

    def _trigger_game_over(self) -> None:
        if self._game_over:
            return
        self._game_over = True
        self._engine.events.emit(SoundEvent("die"))
        self._engine.events.emit(GameOverEvent(False))
        self._update_status_lines()

    def _update_status_lines(self) -> None:
        self._world.set_status_lines(self.status_lines())


def run_flappy_bird() -> None:
    FlappyBirdGame().run()