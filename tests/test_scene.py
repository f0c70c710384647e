import pygame
import pytest

from lessonengine.menu import Page
from lessonengine.player import PlayerAction
from lessonengine.scene import Key, Scene

COLOURS = {
    "landingpage.png": (200, 0, 0),
    "menu_pg.png": (0, 200, 0),
    "helpmenu.png": (0, 0, 200),
    "gameplay.png": (90, 90, 90),
    "pausemenu.png": (200, 200, 0),
}


@pytest.fixture
def scene(tmp_path):
    for name, colour in COLOURS.items():
        image = pygame.Surface((4, 4))
        image.fill(colour)
        pygame.image.save(image, str(tmp_path / name))
    result = Scene(width=200, height=100, image_dir=tmp_path)
    result.init_gl()
    return result


def _drawn(scene):
    surface = pygame.Surface((200, 100))
    assert scene.draw(surface) is True
    return surface


def test_starts_on_landing_page(scene):
    assert scene.menu.page == Page.LANDING
    assert scene.player.action == PlayerAction.STAND
    assert not scene.should_exit()


def test_return_leads_to_main_menu(scene):
    scene.key_down(Key.RETURN)
    assert scene.menu.page == Page.MAIN_MENU


@pytest.mark.parametrize(
    "key, page",
    [(Key.N, Page.GAME), (Key.H, Page.HELP), (Key.L, Page.LANDING)],
)
def test_main_menu_keys(scene, key, page):
    scene.key_down(Key.RETURN)
    scene.key_down(key)
    assert scene.menu.page == page


def test_menu_keys_ignored_outside_main_menu(scene):
    scene.key_down(Key.N)
    scene.key_down(Key.H)
    assert scene.menu.page == Page.LANDING


def test_escape_from_help_returns_to_menu(scene):
    scene.key_down(Key.RETURN)
    scene.key_down(Key.H)
    scene.key_down(Key.ESCAPE)
    assert scene.menu.page == Page.MAIN_MENU
    assert not scene.should_exit()


def test_escape_on_main_menu_exits(scene):
    scene.key_down(Key.RETURN)
    scene.key_down(Key.ESCAPE)
    assert scene.should_exit()


def test_escape_release_toggles_pause_in_game(scene):
    scene.key_down(Key.RETURN)
    scene.key_down(Key.N)
    scene.key_up(Key.ESCAPE)
    assert scene.paused
    scene.key_up(Key.ESCAPE)
    assert not scene.paused


def test_escape_release_outside_game_does_not_pause(scene):
    scene.key_down(Key.RETURN)
    scene.key_up(Key.ESCAPE)
    assert not scene.paused


def test_return_while_paused_exits(scene):
    scene.key_down(Key.RETURN)
    scene.key_down(Key.N)
    scene.key_up(Key.ESCAPE)
    scene.key_down(Key.RETURN)
    assert scene.should_exit()


@pytest.mark.parametrize(
    "keys, name",
    [
        ([], "landingpage.png"),
        ([Key.RETURN], "menu_pg.png"),
        ([Key.RETURN, Key.H], "helpmenu.png"),
    ],
)
def test_draw_shows_page_background(scene, keys, name):
    for key in keys:
        scene.key_down(key)
    surface = _drawn(scene)
    assert tuple(surface.get_at((0, 0)))[:3] == COLOURS[name]


def test_draw_game_shows_map_and_player(scene):
    scene.key_down(Key.RETURN)
    scene.key_down(Key.N)
    surface = _drawn(scene)
    assert tuple(surface.get_at((0, 0)))[:3] == COLOURS["gameplay.png"]
    white = pygame.mask.from_threshold(surface, (255, 255, 255), (1, 1, 1, 255))
    assert white.count() > 0


def test_draw_while_paused_shows_pause_screen(scene):
    scene.key_down(Key.RETURN)
    scene.key_down(Key.N)
    scene.key_up(Key.ESCAPE)
    surface = _drawn(scene)
    assert tuple(surface.get_at((0, 0)))[:3] == COLOURS["pausemenu.png"]


def test_init_gl_reports_missing_images(tmp_path, capsys):
    scene = Scene(width=200, height=100, image_dir=tmp_path)
    assert scene.init_gl() is True
    assert "Fail to Load Image" in capsys.readouterr().err
    surface = _drawn(scene)
    assert tuple(surface.get_at((0, 0)))[:3] == (255, 255, 255)


def test_resize_updates_viewport(scene):
    scene.resize(400, 200)
    assert scene.viewport.aspect() == pytest.approx(400 / 200)


def test_resize_rejects_empty_window(scene):
    with pytest.raises(ValueError):
        scene.resize(100, 0)