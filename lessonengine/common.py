"""Shared vector types, physical constants and the camera projection."""

from __future__ import annotations

import math
from dataclasses import dataclass

PI = 3.14159
GRAVITY = 9.81


@dataclass
class Vec2:
    """A point or size in two dimensions."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Vec3:
    """A point, rotation or scale in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def copy(self) -> Vec3:
        """Return an independent copy of this vector."""
        return Vec3(self.x, self.y, self.z)


@dataclass
class Viewport:
    """A perspective camera looking down -z onto a window of given size."""

    width: int
    height: int
    fov: float = 45.0

    def aspect(self) -> float:
        """Width divided by height."""
        if self.height <= 0:
            raise ValueError("viewport height must be positive")
        return self.width / self.height

    def _focal(self) -> float:
        return 1.0 / math.tan(math.radians(self.fov) / 2.0)

    def scale_at(self, z: float) -> float:
        """Pixels covered by one world unit at depth ``z``."""
        if z >= 0:
            raise ValueError("point is not in front of the camera")
        return self._focal() / -z * self.height / 2.0

    def to_screen(self, x: float, y: float, z: float) -> tuple[float, float]:
        """Project a world point onto window pixel coordinates."""
        scale = self.scale_at(z)
        return self.width / 2.0 + x * scale, self.height / 2.0 - y * scale