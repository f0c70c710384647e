"""Walking and leaping enemies animated from a sprite sheet."""

from __future__ import annotations

import math
from enum import IntEnum

import pygame

from .common import GRAVITY, PI, Vec2, Vec3, Viewport
from .textures import Texture
from .timer import Timer

_GROUND = -0.65
_DRAW_DEPTH = -2.0


class EnemyAction(IntEnum):
    STAND = 0
    LEFTWALK = 1
    RIGHTWALK = 2
    ROTATELEFT = 3
    ROTATERIGHT = 4


def _render(image: pygame.Surface, width: float, height: float, rot: Vec3):
    sprite = pygame.transform.scale(image, (max(1, round(width)), max(1, round(height))))
    sprite = pygame.transform.rotate(sprite, rot.z)
    fold_x = math.cos(math.radians(rot.y))
    fold_y = math.cos(math.radians(rot.x))
    size = sprite.get_size()
    sprite = pygame.transform.scale(
        sprite,
        (max(1, round(size[0] * abs(fold_x))), max(1, round(size[1] * abs(fold_y)))),
    )
    return pygame.transform.flip(sprite, fold_x < 0, fold_y < 0)


class Enemy:
    """An enemy that walks between the screen edges or leaps across it."""

    def __init__(self, timer: Timer | None = None) -> None:
        self.timer = timer if timer is not None else Timer()
        self.texture = Texture()
        self.pos = Vec3(0.0, _GROUND, -5.0)
        self.scale = Vec2(0.25, 0.25)
        self.rot = Vec3()
        self.action = EnemyAction.LEFTWALK
        self.speed = 0.01
        self.frames = 7
        self.x_min = 0.0
        self.y_min = 0.0
        self.x_max = 1.0 / self.frames
        self.y_max = 0.5
        self.live = True
        self.vel = 35.0
        self.theta = 0.0
        self.t = 0.0

    def load(self, file_name) -> None:
        """Load the sprite sheet."""
        self.texture.load(file_name)

    def place(self, pos: Vec3) -> None:
        """Move the enemy to ``pos``."""
        self.pos = pos.copy()

    def _next_frame(self, top_row: bool) -> None:
        self.x_min += 1.0 / self.frames
        self.x_max += 1.0 / self.frames
        self.y_min, self.y_max = (0.0, 0.5) if top_row else (0.5, 1.0)

    def _leap(self, direction: int) -> None:
        self.theta = 30 * PI / 180.0
        self.pos.x += direction * self.vel * self.t * math.cos(self.theta) / 1500
        self.pos.y += (
            self.vel * self.t * math.sin(self.theta) - 0.5 * GRAVITY * self.t * self.t
        ) / 300
        if self.pos.y > -0.75:
            self.t += 0.3
        else:
            self.t = 0.0
            self.pos.y = _GROUND

    def actions(self) -> None:
        """Advance the current action by one step once its frame time has passed."""
        if self.action not in EnemyAction or self.timer.ticks() <= 60:
            return
        action = EnemyAction(self.action)
        if action is EnemyAction.RIGHTWALK:
            self._next_frame(top_row=False)
            if self.pos.x <= 1:
                self.pos.x += self.speed
            else:
                self.action = EnemyAction.LEFTWALK
            self.pos.y = _GROUND
        elif action is EnemyAction.LEFTWALK:
            self._next_frame(top_row=True)
            self.pos.x -= self.speed
            if self.pos.x >= -1:
                self.pos.x -= self.speed
            else:
                self.action = EnemyAction.RIGHTWALK
        elif action is EnemyAction.STAND:
            self.x_min = 0.0
            self.x_max = 1.0 / self.frames
            self.y_min, self.y_max = 0.0, 0.5
            self.action = EnemyAction.STAND
        elif action is EnemyAction.ROTATELEFT:
            self._next_frame(top_row=False)
            self._leap(-1)
            if self.pos.x < -3.2:
                self.action = EnemyAction.RIGHTWALK
        else:
            self._next_frame(top_row=True)
            self._leap(1)
            if self.pos.x > 3.2:
                self.action = EnemyAction.LEFTWALK
                self.pos.y = _GROUND
        self.timer.reset()

    def draw(
        self, surface: pygame.Surface, viewport: Viewport, texture: Texture | None = None
    ) -> None:
        """Draw the enemy, mirrored, at a fixed depth while it is alive."""
        if not self.live:
            return
        texture = texture if texture is not None else self.texture
        if texture.image is None:
            image = pygame.Surface((1, 1))
            image.fill((255, 255, 255))
        else:
            image = texture.region(self.x_max, self.y_min, self.x_min, self.y_max)
        unit = viewport.scale_at(_DRAW_DEPTH)
        sprite = _render(image, 2 * self.scale.x * unit, 2 * self.scale.y * unit, self.rot)
        cx, cy = viewport.to_screen(self.pos.x, self.pos.y, _DRAW_DEPTH)
        surface.blit(sprite, sprite.get_rect(center=(round(cx), round(cy))))