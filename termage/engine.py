"""The engine: game state, subsystems and the main loop."""

from __future__ import annotations

from typing import Callable, List, Optional

from termage.clock import Clock
from termage.drawable import Drawable
from termage.event_manager import EventManager
from termage.events import Event, GameOverEvent, SoundEvent
from termage.input_event import InputEvent, NoInput, get_keyboard_input
from termage.model import Model
from termage.resources import ResourceManager
from termage.sound import NullSoundSystem, SoundSystem, TerminalSoundSystem
from termage.world import World

GameUpdateCallback = Callable[[float, InputEvent], None]

_QUIT_KEYS = frozenset((ord("q"), ord("Q")))
_MUTE_KEYS = frozenset((ord("m"), ord("M")))


class Engine(Model):
    """Owns the world and subsystems and runs the fixed-rate game loop."""

    def __init__(self, *, clock: Optional[Clock] = None) -> None:
        super().__init__()
        self.quit = False
        self.game_over = False
        self._won = False
        self._running = False
        self.level = 1
        self.score = 0
        self._refresh_rate = 60
        self._clock = clock if clock is not None else Clock()
        self._world = World()
        self._events = EventManager()
        self._resources = ResourceManager()
        self._sound: SoundSystem = TerminalSoundSystem()
        self._game_update: Optional[GameUpdateCallback] = None
        self._world.events = self._events
        self._events.subscribe("sound", self._on_sound)
        self._events.subscribe("game_over", self._on_game_over)

    @property
    def won(self) -> bool:
        return self._won

    @property
    def running(self) -> bool:
        return self._running

    @property
    def world(self) -> World:
        return self._world

    @property
    def events(self) -> EventManager:
        return self._events

    @property
    def resources(self) -> ResourceManager:
        return self._resources

    @property
    def sound(self) -> SoundSystem:
        return self._sound

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def refresh_rate(self) -> int:
        return self._refresh_rate

    @refresh_rate.setter
    def refresh_rate(self, rate: int) -> None:
        """Set ticks per second; the clock is re-paced to match."""
        if rate <= 0:
            raise ValueError("refresh rate must be positive")
        self._refresh_rate = rate
        self._clock = Clock(1.0 / rate)

    def add_score(self, delta: int) -> None:
        self.score += delta

    def set_game_update(self, callback: Optional[GameUpdateCallback]) -> None:
        """Register the per-tick game logic, run before the world updates."""
        self._game_update = callback

    def set_sound_system(self, sound: Optional[SoundSystem]) -> None:
        self._sound = sound if sound is not None else NullSoundSystem()

    def collect_drawables(self) -> List[Drawable]:
        return self._world.collect_drawables()

    def collect_status(self) -> List[str]:
        return self._world.collect_status_lines()

    def run(self) -> None:
        """Loop until quit: read input, update, dispatch events, render, wait."""
        self._running = True
        self._clock.reset()
        try:
            while not self.quit:
                dt = self._clock.tick()
                input_event = self.controller.get_input() if self.controller else NoInput()
                self._handle_engine_keys(input_event)
                if self.quit:
                    break
                if not self.game_over:
                    if self._game_update is not None:
                        self._game_update(dt, input_event)
                    self._world.update(input_event)
                self._events.process_events()
                self.notify_views()
                self._clock.sleep_until_next_tick()
        finally:
            self._running = False
            self._sound.stop_all()

    def _handle_engine_keys(self, input_event: InputEvent) -> None:
        keyboard = get_keyboard_input(input_event)
        if keyboard is None:
            return
        if keyboard.key in _QUIT_KEYS:
            self.quit = True
        elif keyboard.key in _MUTE_KEYS:
            self._sound.toggle_mute()

    def _on_sound(self, event: Event) -> None:
        if isinstance(event, SoundEvent):
            self._sound.play(event.sound_id)

    def _on_game_over(self, event: Event) -> None:
        if isinstance(event, GameOverEvent):
            self.game_over = True
            self._won = event.won