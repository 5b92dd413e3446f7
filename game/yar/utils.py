"""
Small 2D vector helpers shared by the game systems
"""

from __future__ import annotations
import math
from typing import Tuple


def clamp(value: float, lo: float, hi: float) -> float:
    """Hard-limit ``value`` to [lo, hi]"""
    return min(max(value, lo), hi)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x1 - x2, y1 - y2)


def normalize(x: float, y: float) -> Tuple[float, float]:
    """Unit vector along (x, y); the zero vector stays zero"""
    length = math.hypot(x, y)
    if length > 0:
        return x / length, y / length
    return 0.0, 0.0


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """True when two circles overlap (touching does not count)"""
    return distance(x1, y1, x2, y2) < r1 + r2
