"""Sound playback back ends."""

from __future__ import annotations

import curses
import os
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class SoundSystem(ABC):
    """Plays named sounds and can be muted."""

    def __init__(self) -> None:
        self._muted = False

    @abstractmethod
    def play(self, sound_id: str) -> None:
        """Play the sound registered as ``sound_id``."""

    @abstractmethod
    def stop_all(self) -> None:
        """Stop every sound that is playing."""

    @property
    def muted(self) -> bool:
        return self._muted

    @muted.setter
    def muted(self, value: bool) -> None:
        self._muted = value

    def toggle_mute(self) -> None:
        self.muted = not self.muted


class SoundClip:
    """A sound file loaded into the mixer; invalid if it could not be loaded."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._sound: Optional[pygame.mixer.Sound]
        try:
            self._sound = pygame.mixer.Sound(str(self.path))
        except (pygame.error, OSError):
            self._sound = None

    def is_valid(self) -> bool:
        return self._sound is not None

    def play(self, channel: int = -1, loops: int = 0) -> None:
        """Play on ``channel``, or on any free channel when it is negative."""
        if self._sound is None:
            return
        if channel < 0:
            self._sound.play(loops=loops)
        else:
            pygame.mixer.Channel(channel).play(self._sound, loops=loops)


class MixerSoundSystem(SoundSystem):
    """Plays audio files through the pygame mixer."""

    def __init__(self) -> None:
        super().__init__()
        self._sounds: Dict[str, SoundClip] = {}
        try:
            pygame.mixer.init()
            self._initialized = True
        except pygame.error:
            self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def load_sound(self, sound_id: str, path: Union[str, Path]) -> None:
        """Load a file under ``sound_id``; files that fail to load are ignored."""
        if not self._initialized:
            return
        clip = SoundClip(path)
        if clip.is_valid():
            self._sounds[sound_id] = clip

    def has_sound(self, sound_id: str) -> bool:
        return sound_id in self._sounds

    def play(self, sound_id: str) -> None:
        if self._muted or not self._initialized:
            return
        clip = self._sounds.get(sound_id)
        if clip is not None:
            clip.play()

    def stop_all(self) -> None:
        if self._initialized:
            pygame.mixer.stop()

    def close(self) -> None:
        """Stop playback, drop loaded sounds and shut the mixer down."""
        if not self._initialized:
            return
        self.stop_all()
        self._sounds.clear()
        pygame.mixer.quit()
        self._initialized = False

    def __enter__(self) -> MixerSoundSystem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class TerminalSoundSystem(SoundSystem):
    """Rings the terminal bell for every sound."""

    def play(self, sound_id: str) -> None:
        if self._muted:
            return
        try:
            curses.beep()
        except curses.error:
            pass

    def stop_all(self) -> None:
        pass


class NullSoundSystem(SoundSystem):
    """Plays nothing."""

    def play(self, sound_id: str) -> None:
        pass

    def stop_all(self) -> None:
        pass


class SoundBackend(Enum):
    TERMINAL = "terminal"
    MIXER = "mixer"
    NULL = "null"


def create_sound_system(backend: SoundBackend = SoundBackend.TERMINAL) -> SoundSystem:
    if backend is SoundBackend.MIXER:
        return MixerSoundSystem()
    if backend is SoundBackend.NULL:
        return NullSoundSystem()
    return TerminalSoundSystem()