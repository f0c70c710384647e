"""Full-window backgrounds that scroll by shifting texture coordinates."""

from __future__ import annotations

import pygame

from .textures import Texture
from .timer import Timer


class Parallax:
    """A background image that can scroll in four directions."""

    def __init__(self, timer: Timer | None = None) -> None:
        self.timer = timer if timer is not None else Timer()
        self.texture = Texture()
        self.x_min = 0.0
        self.x_max = 1.0
        self.y_min = 0.0
        self.y_max = 1.0
        self.speed = 0.005

    def load(self, file_name) -> None:
        """Load the background image."""
        self.texture.load(file_name)

    def scroll(self, auto: bool, direction: str, speed: float) -> None:
        """Shift the view by ``speed`` towards "up", "down", "left" or "right".

        Scrolling happens at most once every 50 ms, whether or not ``auto``
        is set.
        """
        if self.timer.ticks() <= 50:
            return
        if direction == "up":
            self.y_min += speed
            self.y_max += speed
        if direction == "down":
            self.y_min -= speed
            self.y_max -= speed
        if direction == "right":
            self.x_min += speed
            self.x_max += speed
        if direction == "left":
            self.x_min -= speed
            self.x_max -= speed
        self.timer.reset()

    def draw(self, surface: pygame.Surface) -> None:
        """Fill the surface with the visible part of the background."""
        size = surface.get_size()
        if 0 in size:
            return
        if self.texture.image is None:
            surface.fill((255, 255, 255))
            return
        image = self.texture.region(self.x_min, self.y_min, self.x_max, self.y_max)
        surface.blit(pygame.transform.scale(image, size), (0, 0))