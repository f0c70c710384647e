"""A menu button drawn from one frame of a button sprite sheet."""

from __future__ import annotations

import math

import pygame

from .common import Vec3, Viewport
from .textures import Texture


def _button_quad() -> list[Vec3]:
    return [
        Vec3(-0.5, -0.5, -1.0),
        Vec3(0.5, -0.5, -1.0),
        Vec3(0.5, 0.5, -1.0),
        Vec3(-0.5, 0.5, -1.0),
    ]


class Button:
    """A flat square button placed just below the middle of the screen."""

    def __init__(self) -> None:
        self.texture = Texture()
        self.vert = _button_quad()
        self.pos = Vec3(0.0, -0.2, -1.0)
        self.scale = Vec3(0.25, 0.25, 1.0)
        self.frames_x = 1
        self.frames_y = 1
        self._frame_coords()

    def _frame_coords(self) -> None:
        self.x_min = 0.0
        self.y_max = 2.0 / self.frames_y
        self.x_max = 1.0 / self.frames_x
        self.y_min = self.y_max - 1.0 / self.frames_y

    def setup(self, frames_x: int, frames_y: int, file_name) -> None:
        """Place the button and load a sheet of ``frames_x`` by ``frames_y`` frames."""
        if frames_x <= 0 or frames_y <= 0:
            raise ValueError("frame counts must be positive")
        self.pos = Vec3(0.0, -0.2, -1.0)
        self.scale = Vec3(0.25, 0.25, 1.0)
        self.frames_x = frames_x
        self.frames_y = frames_y
        self.texture.load(file_name)
        self._frame_coords()

    def _colour(self) -> tuple[int, int, int]:
        # Every corner of the quad samples the same texel, so the button
        # shows as one solid colour.
        image = self.texture.image
        if image is None:
            return (255, 255, 255)
        width, height = image.get_size()
        px = math.floor(self.x_min * width) % width
        py = math.floor(self.y_max * height) % height
        r, g, b, *_ = image.get_at((px, py))
        return (r, g, b)

    def _corner(self, vertex: Vec3) -> tuple[float, float, float]:
        return (
            self.pos.x + self.scale.x * vertex.x,
            self.pos.y + self.scale.y * vertex.y,
            self.pos.z + self.scale.z * vertex.z,
        )

    def draw(self, surface: pygame.Surface, viewport: Viewport) -> None:
        """Draw the button onto ``surface``."""
        left, bottom = viewport.to_screen(*self._corner(self.vert[0]))
        right, top = viewport.to_screen(*self._corner(self.vert[2]))
        rect = pygame.Rect(
            round(min(left, right)),
            round(min(top, bottom)),
            max(1, round(abs(right - left))),
            max(1, round(abs(bottom - top))),
        )
        surface.fill(self._colour(), rect)