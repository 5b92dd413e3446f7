"""
GameState store: player, fixed-size bullet and enemy pools, score
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from .config import (
    BLUE, BULLET_RADIUS, ENEMY_RADIUS, MAX_BULLETS, MAX_ENEMIES,
    PLAYER_RADIUS, RED, SCREEN_HEIGHT, SCREEN_WIDTH, YELLOW,
)
from .entities import Entity


class RandomSource(Protocol):
    """Uniform integer source; ``random.Random`` satisfies it"""

    def randint(self, a: int, b: int) -> int:
        """Return an integer in [a, b], both ends inclusive"""
        ...


@dataclass
class GameState:
    """Everything one run of the game mutates"""
    player: Entity
    bullets: List[Entity]
    enemies: List[Entity]
    score: int = 0
    game_over: bool = False

    def free_bullet_slot(self) -> int:
        """Index of the first inactive bullet, or -1 if the pool is full"""
        for i, b in enumerate(self.bullets):
            if not b.active:
                return i
        return -1

    def active_bullets(self) -> List[Entity]:
        return [b for b in self.bullets if b.active]


def random_field_position(rng: RandomSource):
    x = float(rng.randint(0, SCREEN_WIDTH))
    y = float(rng.randint(0, SCREEN_HEIGHT))
    return x, y


def new_game(rng: RandomSource) -> GameState:
    """Build a fresh game: player centered, bullets idle, enemies scattered"""
    player = Entity(
        x=SCREEN_WIDTH / 2.0,
        y=SCREEN_HEIGHT / 2.0,
        radius=PLAYER_RADIUS,
        color=BLUE,
    )

    bullets = [
        Entity(x=0.0, y=0.0, radius=BULLET_RADIUS, active=False, color=YELLOW)
        for _ in range(MAX_BULLETS)
    ]

    enemies = []
    for _ in range(MAX_ENEMIES):
        x, y = random_field_position(rng)
        enemies.append(Entity(x=x, y=y, radius=ENEMY_RADIUS, color=RED))

    return GameState(player=player, bullets=bullets, enemies=enemies)
