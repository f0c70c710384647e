"""Keyboard and mouse handling for the player, backgrounds and models."""

from __future__ import annotations

from enum import IntEnum

import pygame

from .model import Model
from .parallax import Parallax
from .player import Player, PlayerAction


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


_PLAYER_KEYS = {
    pygame.K_LEFT: PlayerAction.LEFTWALK,
    pygame.K_a: PlayerAction.LEFTWALK,
    pygame.K_RIGHT: PlayerAction.RIGHTWALK,
    pygame.K_d: PlayerAction.RIGHTWALK,
    pygame.K_UP: PlayerAction.WALKUP,
    pygame.K_w: PlayerAction.WALKUP,
    pygame.K_DOWN: PlayerAction.WALKDOWN,
    pygame.K_s: PlayerAction.WALKDOWN,
}

_SCROLL_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


class Inputs:
    """Turns key presses and mouse drags into actions and movement."""

    def __init__(self) -> None:
        self.prev_x = 0.0
        self.prev_y = 0.0
        self.is_translate = False
        self.is_rotation = False

    def key_pressed(self, player: Player, key: int) -> None:
        """Pick the player's action from arrow or WASD keys."""
        action = _PLAYER_KEYS.get(key)
        if action is not None:
            player.action = action

    def key_pressed_parallax(self, parallax: Parallax, key: int) -> None:
        """Scroll a background with the arrow keys."""
        direction = _SCROLL_KEYS.get(key)
        if direction is not None:
            parallax.scroll(False, direction, parallax.speed)

    def key_up(self, player: Player) -> None:
        """Any released key makes the player stand."""
        player.action = PlayerAction.STAND

    def mouse_down(self, model: Model, button: int, x: float, y: float) -> None:
        """Start rotating (left button) or moving (right button) a model."""
        self.prev_x = x
        self.prev_y = y
        if button == MouseButton.LEFT:
            self.is_rotation = True
        elif button == MouseButton.RIGHT:
            self.is_translate = True

    def mouse_up(self) -> None:
        """Stop any drag in progress."""
        self.is_rotation = False
        self.is_translate = False

    def mouse_move(self, model: Model, x: float, y: float) -> None:
        """Rotate or move the model by how far the pointer travelled."""
        dx = x - self.prev_x
        dy = y - self.prev_y
        if self.is_rotation:
            model.rotation.y += dx / 3.0
            model.rotation.x += dy / 3.0
        if self.is_translate:
            model.pos.x += dx / 100.0
            model.pos.y -= dy / 100.0
        self.prev_x = x
        self.prev_y = y

    def mouse_wheel(self, model: Model, delta: float) -> None:
        """Move the model nearer or further with the wheel."""
        model.pos.z += delta / 100