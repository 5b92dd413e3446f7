"""
Game entity dataclass
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Entity:
    """Circle entity shared by the player, bullets and enemies"""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = 0.0
    active: bool = True  # pool slot liveness
    color: Tuple[int, int, int] = (255, 255, 255)

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def move_to(self, x: float, y: float):
        self.x = x
        self.y = y
