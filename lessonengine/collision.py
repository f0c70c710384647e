"""Distance based collision tests between round objects."""

from __future__ import annotations

import math


def is_radial_col(p1, p2, r1: float, r2: float, threshold: float) -> bool:
    """True when two circles in the x/y plane come closer than ``threshold``."""
    distance = math.hypot(p1.x - p2.x, p1.y - p2.y)
    return distance - (r1 + r2) < threshold


def is_sphere_col(p1, p2, r1: float, r2: float, threshold: float) -> bool:
    """True when the gap between two spheres exceeds ``threshold``."""
    distance = math.sqrt(
        (p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2 + (p1.z - p2.z) ** 2
    )
    return distance - (r1 + r2) > threshold