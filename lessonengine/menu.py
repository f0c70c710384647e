"""The pages a game can show and the menu state that tracks them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Page(IntEnum):
    LANDING = 0
    MAIN_MENU = 1
    GAME = 2
    HELP = 3


@dataclass
class Menu:
    """Which page is on screen; a new menu opens on the landing page."""

    page: Page = Page.LANDING