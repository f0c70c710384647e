from unittest.mock import patch

import pygame
import pytest

from lessonengine.app import TITLE, Window, WindowError, main, parse_args
from lessonengine.menu import Page


@pytest.fixture(autouse=True)
def dummy_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.display.quit()


@pytest.fixture
def window(tmp_path):
    win = Window(320, 240, tmp_path)
    win.open(False)
    yield win
    win.close()


def test_open_creates_window_of_requested_size(window):
    assert window.surface.get_size() == (320, 240)
    assert window.fullscreen is False
    assert window.scene.viewport.width == 320
    assert window.scene.viewport.height == 240


def test_open_sets_title(window):
    assert TITLE == "Game Engine Lesson 01"
    caption = pygame.display.get_caption()[0]
    assert caption == TITLE
    assert window.surface is pygame.display.get_surface()
    assert window.surface.get_size() == (320, 240)


def test_close_releases_display(window):
    window.close()
    assert window.surface is None
    assert pygame.display.get_init() is False


def test_toggle_fullscreen_flips_mode(window):
    window.toggle_fullscreen()
    assert window.fullscreen is True
    assert window.surface is not None and pygame.display.get_init()
    window.toggle_fullscreen()
    assert window.fullscreen is False


def test_key_events_reach_scene_and_key_table(window):
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert window.scene.menu.page == Page.MAIN_MENU
    assert pygame.K_RETURN in window.keys
    window.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN))
    assert pygame.K_RETURN not in window.keys


def test_quit_event_ends_loop(window):
    window.handle_event(pygame.event.Event(pygame.QUIT))
    assert window.done is True


def test_resize_event_updates_viewport(window):
    window.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480)))
    assert (window.scene.viewport.width, window.scene.viewport.height) == (640, 480)


def test_zero_size_resize_is_ignored(window):
    window.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=0, h=0, size=(0, 0)))
    assert (window.scene.viewport.width, window.scene.viewport.height) == (320, 240)


def test_minimize_and_restore_change_active(window):
    window.handle_event(pygame.event.Event(pygame.WINDOWMINIMIZED))
    assert window.active is False
    window.handle_event(pygame.event.Event(pygame.WINDOWRESTORED))
    assert window.active is True


def test_run_stops_on_quit(window):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window.run() == 0
    assert window.surface is None


def test_run_stops_when_scene_asks_to_exit(window):
    window.scene.menu.page = Page.MAIN_MENU
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert window.run() == 0
    assert window.scene.should_exit() is True


def test_run_without_open_window_raises(tmp_path):
    win = Window(320, 240, tmp_path)
    with pytest.raises(WindowError):
        win.run()


def test_parse_args_defaults():
    args = parse_args([])
    assert args.fullscreen is False
    assert args.images == "images"
    assert args.width is None and args.height is None


def test_parse_args_values():
    args = parse_args(["--fullscreen", "--width", "640", "--height", "480", "--images", "art"])
    assert args.fullscreen is True
    assert (args.width, args.height) == (640, 480)
    assert args.images == "art"


def test_parse_args_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        parse_args(["--width", "0"])


def test_main_returns_zero_when_window_closed(tmp_path):
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        result = main(["--width", "320", "--height", "240", "--images", str(tmp_path)])
    assert result == 0
    assert pygame.display.get_init() is False