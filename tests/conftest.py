from __future__ import annotations

import random
from typing import Iterable, List, Optional

import pytest

from game.yar.controls import FrameInput
from game.yar.state import GameState, new_game


class ScriptedRandom:
    """RandomSource that replays fixed values, then falls back to a seeded generator"""

    def __init__(self, values: Iterable[int] = (), fallback_seed: int = 0) -> None:
        self.values: List[int] = list(values)
        self.calls: List[tuple[int, int]] = []
        self._fallback = random.Random(fallback_seed)

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self.values:
            return self._fallback.randint(a, b)
        v = self.values.pop(0)
        assert a <= v <= b, f"scripted value {v} outside [{a}, {b}]"
        return v


# Ten enemies parked in spots far from the field center
FAR_ENEMY_XY = [
    0, 0, 800, 0, 0, 600, 800, 600, 0, 300,
    800, 300, 400, 0, 400, 600, 100, 0, 700, 600,
]


def park_enemies(state: GameState, positions: Optional[list[tuple[float, float]]] = None) -> None:
    positions = positions or list(zip(FAR_ENEMY_XY[0::2], FAR_ENEMY_XY[1::2]))
    for e, (x, y) in zip(state.enemies, positions):
        e.x, e.y = float(x), float(y)


@pytest.fixture()
def state() -> GameState:
    s = new_game(ScriptedRandom(FAR_ENEMY_XY))
    return s


@pytest.fixture()
def idle() -> FrameInput:
    return FrameInput()
