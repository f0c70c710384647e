"""Background music and sound effects."""

from __future__ import annotations

import os

import pygame


class SoundError(OSError):
    """A sound could not be played."""


class Sounds:
    """Plays music and effects through the mixer."""

    def __init__(self) -> None:
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        self.music: str | None = None

    def init_sounds(self) -> int:
        """Start the sound engine; failure is reported, not raised."""
        try:
            pygame.mixer.init()
        except pygame.error:
            print("ERROR: ** Sound Engine could not start")
        return 1

    @staticmethod
    def _ensure_ready() -> None:
        if not pygame.mixer.get_init():
            raise SoundError("sound engine is not running")

    def _sound(self, file_name) -> pygame.mixer.Sound:
        self._ensure_ready()
        key = os.fspath(file_name)
        if key not in self.sounds:
            try:
                self.sounds[key] = pygame.mixer.Sound(key)
            except (pygame.error, OSError) as exc:
                raise SoundError(f"cannot load sound {key!r}") from exc
        return self.sounds[key]

    def play_music(self, file_name) -> None:
        """Play a file as background music, looping forever."""
        self._ensure_ready()
        path = os.fspath(file_name)
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.play(-1)
        except (pygame.error, OSError) as exc:
            raise SoundError(f"cannot play music {path!r}") from exc
        self.music = path

    def play_sound(self, file_name):
        """Play a sound effect once; returns its channel."""
        return self._sound(file_name).play()

    def pause_sound(self, file_name):
        """Play a sound effect on repeat; returns its channel."""
        return self._sound(file_name).play(loops=-1)