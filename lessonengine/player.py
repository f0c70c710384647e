"""The player sprite and its animation states."""

from __future__ import annotations

from enum import IntEnum

import pygame

from .common import Vec3, Viewport
from .textures import Texture
from .timer import Timer


class PlayerAction(IntEnum):
    STAND = 0
    WALKUP = 1
    WALKDOWN = 2
    LEFTWALK = 3
    RIGHTWALK = 4
    RUN = 5
    JUMP = 6
    ATTACK = 7


def _unit_quad() -> list[Vec3]:
    return [
        Vec3(-1.0, -1.0, -1.0),
        Vec3(1.0, -1.0, -1.0),
        Vec3(1.0, 1.0, -1.0),
        Vec3(-1.0, 1.0, -1.0),
    ]


class Player:
    """A player drawn as one frame of a sprite sheet on a square."""

    def __init__(self, timer: Timer | None = None) -> None:
        self.timer = timer if timer is not None else Timer()
        self.texture = Texture()
        self.vert = _unit_quad()
        self.pos = Vec3(0.0, -0.65, -2.0)
        self.scale = Vec3(0.5, 0.5, 0.5)
        self.frames_x = 1
        self.frames_y = 1
        self.x_min = self.y_min = 0.0
        self.x_max = self.y_max = 1.0
        self.action = PlayerAction.STAND

    def _first_frame(self) -> None:
        self.x_min = 0.0
        self.x_max = 1.0 / self.frames_x
        self.y_max = 1.0 / self.frames_y
        self.y_min = self.y_max - 1.0 / self.frames_y

    def setup(self, frames_x: int, frames_y: int, file_name) -> None:
        """Place the player and load a sheet of ``frames_x`` by ``frames_y`` frames."""
        self.vert = _unit_quad()
        self.pos = Vec3(0.0, -0.65, -2.0)
        self.scale = Vec3(0.5, 0.5, 0.5)
        self.frames_x = frames_x
        self.frames_y = frames_y
        # WALKUP has no animation, so the player rests on its first frame.
        self.action = PlayerAction.WALKUP
        self._first_frame()
        self.texture.load(file_name)

    def actions(self) -> None:
        """Update the animation frame for the current action."""
        if self.action == PlayerAction.STAND:
            self._first_frame()
        elif self.action == PlayerAction.LEFTWALK and self.timer.ticks() > 70:
            self.x_max += 1.0 / self.frames_x
            self.x_min += 1.0 / self.frames_x
            self.timer.reset()

    def _corner(self, vertex: Vec3) -> tuple[float, float, float]:
        return (
            self.pos.x + self.scale.x * vertex.x,
            self.pos.y + self.scale.y * vertex.y,
            self.pos.z + self.scale.z * vertex.z,
        )

    def draw(self, surface: pygame.Surface, viewport: Viewport) -> None:
        """Draw the current frame; a white square when no sheet is loaded."""
        left, bottom = viewport.to_screen(*self._corner(self.vert[0]))
        right, top = viewport.to_screen(*self._corner(self.vert[2]))
        width = max(1, round(abs(right - left)))
        height = max(1, round(abs(bottom - top)))
        if self.texture.image is None:
            sprite = pygame.Surface((width, height))
            sprite.fill((255, 255, 255))
        else:
            image = self.texture.region(self.x_min, self.y_min, self.x_max, self.y_max)
            sprite = pygame.transform.scale(image, (width, height))
        surface.blit(sprite, (round(min(left, right)), round(min(top, bottom))))