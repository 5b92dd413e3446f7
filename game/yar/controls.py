"""
Input vocabulary: movement directions, key aliasing and the per-frame snapshot
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Tuple


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class KeyMap:
    """Maps backend key codes to directions; several keys may alias one direction"""

    def __init__(self, bindings: Dict[Direction, Iterable[int]]):
        self._lookup: Dict[int, Direction] = {}
        for direction, keys in bindings.items():
            for key in keys:
                self._lookup[key] = direction

    def directions(self, held_keys: Iterable[int]) -> FrozenSet[Direction]:
        """Directions requested by the currently held keys"""
        return frozenset(self._lookup[k] for k in held_keys if k in self._lookup)

    def __contains__(self, key: int) -> bool:
        return key in self._lookup


@dataclass(frozen=True)
class FrameInput:
    """What the player asked for during one frame"""
    held: FrozenSet[Direction] = field(default_factory=frozenset)
    fire: bool = False  # edge-triggered
    pointer: Tuple[float, float] = (0.0, 0.0)  # aim point in field coordinates
    restart: bool = False  # edge-triggered
