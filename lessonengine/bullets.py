"""Projectiles fired from a position towards a fixed destination."""

from __future__ import annotations

import math
from enum import IntEnum

import pygame

from .common import Vec3, Viewport
from .textures import Texture
from .timer import Timer


class BulletAction(IntEnum):
    IDLE = 0
    SHOOT = 1
    HIT = 2


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


class Bullet:
    """A bullet that flies along +x while shooting and returns when done."""

    def __init__(self, pos: Vec3, timer: Timer | None = None) -> None:
        self.timer = timer if timer is not None else Timer()
        self.texture = Texture()
        self.pos = pos.copy()
        self.dest = Vec3(5.0, 0.0, pos.z)
        self.scale = Vec3(0.15, 0.15, 1.0)
        self.rot = Vec3(0.0, 0.0, 90.0)
        self.x_min = self.y_min = 0.0
        self.x_max = self.y_max = 1.0
        self.live = False
        self.action = BulletAction.IDLE

    def reset(self, pos: Vec3) -> None:
        """Return the bullet to ``pos`` and make it idle."""
        self.pos = pos.copy()
        self.live = False
        self.action = BulletAction.IDLE

    def update(self, start: Vec3, dest: Vec3) -> None:
        """Advance a shot; past its own destination it goes back to ``start``.

        ``dest`` is the target of the shot; flight currently runs along x
        to the bullet's fixed destination.
        """
        self.apply_action()
        if self.action == BulletAction.SHOOT and self.timer.ticks() > 50:
            self.pos.x += 0.1
            if self.pos.x > self.dest.x:
                self.reset(start)
            self.timer.reset()

    def apply_action(self) -> None:
        """Set whether the bullet is live from its current action."""
        self.live = self.action == BulletAction.SHOOT

    def draw(
        self, surface: pygame.Surface, viewport: Viewport, texture: Texture | None = None
    ) -> None:
        """Draw the bullet if it is live."""
        if not self.live:
            return
        texture = texture if texture is not None else self.texture
        if texture.image is None:
            image = pygame.Surface((1, 1))
            image.fill((255, 255, 255))
        else:
            image = texture.region(self.x_min, self.y_min, self.x_max, self.y_max)
        unit = viewport.scale_at(self.pos.z)
        sprite = _render(image, 2 * self.scale.x * unit, 2 * self.scale.y * unit, self.rot)
        cx, cy = viewport.to_screen(self.pos.x, self.pos.y, self.pos.z)
        surface.blit(sprite, sprite.get_rect(center=(round(cx), round(cy))))