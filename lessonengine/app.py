"""The game window, its event loop and the command that starts it."""

from __future__ import annotations

import argparse
import sys

import pygame

from .scene import Scene

TITLE = "Game Engine Lesson 01"


class WindowError(RuntimeError):
    """The game window could not be created or is not open."""


class Window:
    """A window that shows a scene and feeds it keyboard and window events."""

    def __init__(self, width=None, height=None, image_dir="images", scene=None) -> None:
        if scene is None:
            if width is None or height is None:
                pygame.display.init()
            scene = Scene(width, height, image_dir)
        self.scene = scene
        self.width = int(scene.screen_width)
        self.height = int(scene.screen_height)
        self.surface: pygame.Surface | None = None
        self.fullscreen = False
        self.active = True
        self.done = False
        self.keys: set[int] = set()

    def open(self, fullscreen: bool) -> None:
        """Create the window and load the scene; raises WindowError on failure."""
        self.fullscreen = fullscreen
        pygame.display.init()
        flags = pygame.FULLSCREEN if fullscreen else pygame.RESIZABLE
        try:
            self.surface = pygame.display.set_mode((self.width, self.height), flags)
        except pygame.error as exc:
            self.close()
            raise WindowError("Window Creation Error.") from exc
        pygame.display.set_caption(TITLE)
        pygame.mouse.set_visible(True)
        self.scene.resize(self.width, self.height)
        if not self.scene.init_gl():
            self.close()
            raise WindowError("InitGL fail.")

    def close(self) -> None:
        """Destroy the window and give the display back."""
        self.surface = None
        if pygame.display.get_init():
            pygame.display.quit()

    def toggle_fullscreen(self) -> None:
        """Recreate the window, switching between fullscreen and windowed."""
        fullscreen = not self.fullscreen
        self.close()
        self.open(fullscreen)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window, keyboard or resize event."""
        if event.type == pygame.QUIT:
            self.done = True
        elif event.type == pygame.WINDOWMINIMIZED:
            self.active = False
        elif event.type == pygame.WINDOWRESTORED:
            self.active = True
        elif event.type == pygame.KEYDOWN:
            self.keys.add(event.key)
            self.scene.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.scene.key_up(event.key)
            self.keys.discard(event.key)
        elif event.type == pygame.VIDEORESIZE:
            if event.w > 0 and event.h > 0:
                self.scene.resize(event.w, event.h)

    def run(self) -> int:
        """Run until the window is closed or the scene asks to quit."""
        if self.surface is None:
            raise WindowError("window is not open")
        self.done = False
        while not self.done:
            events = pygame.event.get()
            if events:
                for event in events:
                    self.handle_event(event)
                    if self.done:
                        break
                continue
            surface = pygame.display.get_surface()
            if surface is not None:
                self.scene.draw(surface)
                pygame.display.flip()
            if self.scene.should_exit():
                self.done = True
            if pygame.K_F1 in self.keys:
                self.keys.discard(pygame.K_F1)
                self.toggle_fullscreen()
        self.close()
        return 0


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument(
        "--fullscreen", action="store_true", help="start in fullscreen mode"
    )
    parser.add_argument("--width", type=_positive_int, default=None, help="window width")
    parser.add_argument("--height", type=_positive_int, default=None, help="window height")
    parser.add_argument(
        "--images", default="images", help="directory holding the page images"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the game window and run it."""
    args = parse_args(argv)
    window = Window(args.width, args.height, args.images)
    try:
        window.open(args.fullscreen)
        return window.run()
    except WindowError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    finally:
        window.close()
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())