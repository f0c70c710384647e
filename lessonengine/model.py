"""A textured solid that can be turned and moved around with the mouse."""

from __future__ import annotations

import math
from itertools import pairwise

import pygame

from .common import Vec3, Viewport
from .textures import Texture

_SIZE = 2.5
_SEGMENTS = 16
_NEAR = 0.1
# Profile of a teapot body as (radius, height), top to bottom.
_PROFILE = (
    (0.0, 0.9),
    (0.55, 0.85),
    (0.9, 0.75),
    (1.25, 0.55),
    (1.45, 0.2),
    (1.5, 0.0),
    (1.4, -0.4),
    (1.1, -0.7),
    (0.0, -0.75),
)
_LIGHT_LEN = math.sqrt(2.0**2 + 5.0**2 + 5.0**2)
_LIGHT = (2.0 / _LIGHT_LEN, 5.0 / _LIGHT_LEN, 5.0 / _LIGHT_LEN)

Point = tuple[float, float, float]


def _lathe() -> tuple[tuple[Point, Point, Point, Point], ...]:
    factor = _SIZE * 0.5
    angles = [2 * math.pi * k / _SEGMENTS for k in range(_SEGMENTS + 1)]
    quads = []
    for (r0, y0), (r1, y1) in pairwise(_PROFILE):
        r0, y0, r1, y1 = r0 * factor, y0 * factor, r1 * factor, y1 * factor
        for a0, a1 in pairwise(angles):
            quads.append(
                (
                    (r0 * math.cos(a0), y0, r0 * math.sin(a0)),
                    (r1 * math.cos(a0), y1, r1 * math.sin(a0)),
                    (r1 * math.cos(a1), y1, r1 * math.sin(a1)),
                    (r0 * math.cos(a1), y0, r0 * math.sin(a1)),
                )
            )
    return tuple(quads)


_BODY = _lathe()


def _sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Point, b: Point) -> Point:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


class Model:
    """A teapot-shaped solid placed in front of the camera."""

    def __init__(self) -> None:
        self.rotation = Vec3()
        self.pos = Vec3(0.0, 0.0, -8.0)
        self.scale = Vec3(1.0, 1.0, 1.0)
        self.texture = Texture()

    def load(self, file_name) -> None:
        """Load the texture that colours the model."""
        self.texture.load(file_name)

    def _transform(self, point: Point) -> Point:
        x = point[0] * self.scale.x
        y = point[1] * self.scale.y
        z = point[2] * self.scale.z
        rz, ry, rx = (math.radians(a) for a in (self.rotation.z, self.rotation.y, self.rotation.x))
        c, s = math.cos(rz), math.sin(rz)
        x, y = x * c - y * s, x * s + y * c
        c, s = math.cos(ry), math.sin(ry)
        x, z = x * c + z * s, -x * s + z * c
        c, s = math.cos(rx), math.sin(rx)
        y, z = y * c - z * s, y * s + z * c
        return (x + self.pos.x, y + self.pos.y, z + self.pos.z)

    def _base_colour(self) -> tuple[int, int, int]:
        if self.texture.image is None:
            return (255, 255, 255)
        r, g, b, *_ = pygame.transform.average_color(self.texture.image)
        return (r, g, b)

    def draw(self, surface: pygame.Surface, viewport: Viewport) -> None:
        """Draw the shaded model; parts behind the camera are left out."""
        base = self._base_colour()
        faces = []
        for quad in _BODY:
            points = [self._transform(p) for p in quad]
            if any(p[2] > -_NEAR for p in points):
                continue
            normal = _cross(_sub(points[2], points[0]), _sub(points[3], points[1]))
            length = math.sqrt(_dot(normal, normal))
            if length == 0:
                continue
            shade = 0.25 + 0.75 * abs(_dot(normal, _LIGHT)) / length
            depth = sum(p[2] for p in points) / len(points)
            faces.append((depth, points, shade))
        faces.sort(key=lambda face: face[0])
        for _, points, shade in faces:
            colour = tuple(min(255, round(c * shade)) for c in base)
            pygame.draw.polygon(surface, colour, [viewport.to_screen(*p) for p in points])