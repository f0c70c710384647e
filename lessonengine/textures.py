"""Images loaded from disk, sampled with repeating texture coordinates."""

from __future__ import annotations

import os
from dataclasses import dataclass

import pygame


class TextureError(OSError):
    """An image could not be loaded or is missing."""


@dataclass
class Texture:
    """An image whose parts are addressed by coordinates in [0, 1]."""

    image: pygame.Surface | None = None

    @property
    def width(self) -> int:
        return 0 if self.image is None else self.image.get_width()

    @property
    def height(self) -> int:
        return 0 if self.image is None else self.image.get_height()

    def load(self, file_name) -> None:
        """Read an image file; raises TextureError when it cannot be read."""
        try:
            image = pygame.image.load(os.fspath(file_name))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"failed to load image {file_name!r}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        self.image = image

    def region(
        self, x_min: float, y_min: float, x_max: float, y_max: float
    ) -> pygame.Surface:
        """Cut out a rectangle, repeating the image past its edges.

        Coordinates run from the top-left corner; a reversed pair mirrors
        the result along that axis.
        """
        if self.image is None:
            raise TextureError("no image loaded")
        width, height = self.image.get_size()
        if width == 0 or height == 0:
            raise TextureError("image is empty")
        left, right = sorted((x_min * width, x_max * width))
        top, bottom = sorted((y_min * height, y_max * height))
        out_w = max(1, round(right - left))
        out_h = max(1, round(bottom - top))
        out = pygame.Surface((out_w, out_h), pygame.SRCALPHA)
        offset_x = round(left) % width
        offset_y = round(top) % height
        for tile_x in range(-offset_x, out_w, width):
            for tile_y in range(-offset_y, out_h, height):
                out.blit(self.image, (tile_x, tile_y))
        flip_x, flip_y = x_max < x_min, y_max < y_min
        if flip_x or flip_y:
            out = pygame.transform.flip(out, flip_x, flip_y)
        return out