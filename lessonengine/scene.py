"""The game scene: menu pages, backgrounds, the player and key handling."""

from __future__ import annotations

import math
import sys
from enum import IntEnum
from pathlib import Path

import pygame

from .common import Viewport
from .menu import Menu, Page
from .parallax import Parallax
from .player import Player, PlayerAction
from .textures import TextureError

_DEFAULT_SIZE = (800, 600)


class Key(IntEnum):
    RETURN = pygame.K_RETURN
    ESCAPE = pygame.K_ESCAPE
    N = pygame.K_n
    H = pygame.K_h
    L = pygame.K_l


def _screen_size() -> tuple[int, int]:
    if pygame.display.get_init():
        info = pygame.display.Info()
        if info.current_w > 0 and info.current_h > 0:
            return info.current_w, info.current_h
    return _DEFAULT_SIZE


class Scene:
    """Draws the current page and moves between pages on key presses."""

    def __init__(self, width=None, height=None, image_dir="images") -> None:
        if width is None or height is None:
            width, height = _screen_size()
        self.screen_width = width
        self.screen_height = height
        self.image_dir = Path(image_dir)
        self.landing_page = Parallax()
        self.main_menu = Parallax()
        self.help_menu = Parallax()
        self.tut_map = Parallax()
        self.pause_menu = Parallax()
        self.menu = Menu()
        self.player = Player()
        self.paused = False
        self._exit_requested = False
        self.viewport = Viewport(width, height)

    def should_exit(self) -> bool:
        """True once the player has asked to quit."""
        return self._exit_requested

    def init_gl(self) -> bool:
        """Load the page backgrounds; images that fail to load are reported."""
        backgrounds = (
            (self.landing_page, "landingpage.png"),
            (self.main_menu, "menu_pg.png"),
            (self.help_menu, "helpmenu.png"),
            (self.tut_map, "gameplay.png"),
            (self.pause_menu, "pausemenu.png"),
        )
        for parallax, name in backgrounds:
            try:
                parallax.load(self.image_dir / name)
            except TextureError:
                print(f"Fail to Load Image: {self.image_dir / name}", file=sys.stderr)
        self.player.action = PlayerAction.STAND
        return True

    def resize(self, width: int, height: int) -> None:
        """Fit the camera to a window of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.viewport = Viewport(width, height)

    def _player_view(self) -> Viewport:
        # The player is drawn with x and y halved about the view centre.
        half_angle = math.radians(self.viewport.fov) / 2.0
        fov = 2.0 * math.degrees(math.atan(2.0 * math.tan(half_angle)))
        return Viewport(self.viewport.width, self.viewport.height, fov)

    def draw(self, surface: pygame.Surface) -> bool:
        """Draw the current page, or the pause screen while paused."""
        if self.paused:
            self.pause_game(surface)
            return True
        surface.fill((0, 0, 0))
        page = self.menu.page
        if page == Page.LANDING:
            self.landing_page.draw(surface)
        elif page == Page.MAIN_MENU:
            self.main_menu.draw(surface)
        elif page == Page.GAME:
            self.tut_map.draw(surface)
            self.player.draw(surface, self._player_view())
            self.player.actions()
        elif page == Page.HELP:
            self.help_menu.draw(surface)
        return True

    def pause_game(self, surface: pygame.Surface) -> None:
        """Draw the pause screen."""
        self.pause_menu.draw(surface)

    def key_down(self, key: int) -> None:
        """Move between pages or ask to quit."""
        page = self.menu.page
        if key == Key.RETURN:
            if page == Page.LANDING:
                self.menu.page = Page.MAIN_MENU
            elif self.paused:
                self._exit_requested = True
        elif key == Key.ESCAPE:
            if page == Page.HELP:
                self.menu.page = Page.MAIN_MENU
            elif page == Page.MAIN_MENU:
                self._exit_requested = True
        elif page == Page.MAIN_MENU:
            if key == Key.N:
                self.menu.page = Page.GAME
            elif key == Key.H:
                self.menu.page = Page.HELP
            elif key == Key.L:
                self.menu.page = Page.LANDING

    def key_up(self, key: int) -> None:
        """Releasing escape during the game pauses or resumes it."""
        if key == Key.ESCAPE and self.menu.page == Page.GAME:
            self.paused = not self.paused