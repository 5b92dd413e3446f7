"""
Presentation adapter: draws a GameState through any Renderer backend.
Coordinates are field coordinates (origin top-left, y pointing down).
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Protocol, Tuple

from .config import BLACK, GRAY, RED, SCREEN_HEIGHT, SCREEN_WIDTH, WHITE
from .entities import Entity
from .state import GameState

Color = Tuple[int, int, int]


class Renderer(Protocol):
    def begin_frame(self) -> None: ...

    def end_frame(self) -> None: ...

    def clear(self, color: Color) -> None: ...

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None: ...


@contextmanager
def frame(renderer: Renderer):
    """Bracket draws between begin_frame and end_frame"""
    renderer.begin_frame()
    try:
        yield renderer
    finally:
        renderer.end_frame()


def _draw_entity(renderer: Renderer, e: Entity):
    renderer.draw_circle(e.x, e.y, e.radius, e.color)


def draw_game(state: GameState, renderer: Renderer):
    """Draw one frame of the game (or the game over screen)"""
    with frame(renderer):
        renderer.clear(BLACK)

        if state.game_over:
            cx, cy = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
            renderer.draw_text("GAME OVER", cx - 100, cy - 50, 40, RED)
            renderer.draw_text(f"Final Score: {state.score}", cx - 80, cy, 20, WHITE)
            renderer.draw_text("Press R to restart or ESC to quit", cx - 140, cy + 40, 16, GRAY)
            return

        _draw_entity(renderer, state.player)
        for b in state.active_bullets():
            _draw_entity(renderer, b)
        for e in state.enemies:
            if e.active:
                _draw_entity(renderer, e)

        # HUD
        renderer.draw_text(f"Score: {state.score}", 10, 10, 20, WHITE)
        renderer.draw_text("WASD/Arrows: Move", 10, SCREEN_HEIGHT - 60, 16, GRAY)
        renderer.draw_text("Mouse: Aim & Click to Shoot", 10, SCREEN_HEIGHT - 40, 16, GRAY)
        renderer.draw_text("ESC: Quit", 10, SCREEN_HEIGHT - 20, 16, GRAY)
