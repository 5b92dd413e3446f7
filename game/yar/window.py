"""
Arcade front-end: window, input polling and drawing for the YAR shooter.

Arcade puts the origin at the bottom-left with y pointing up; the game
field has its origin at the top-left with y pointing down, so every
coordinate crossing this module is flipped.
"""

from __future__ import annotations

from typing import Optional, Set

import arcade

from .config import WINDOW_CONFIG
from .controls import Direction, FrameInput, KeyMap
from .render import Color, draw_game
from .systems import Game

KEY_MAP = KeyMap({
    Direction.UP: (arcade.key.W, arcade.key.UP),
    Direction.DOWN: (arcade.key.S, arcade.key.DOWN),
    Direction.LEFT: (arcade.key.A, arcade.key.LEFT),
    Direction.RIGHT: (arcade.key.D, arcade.key.RIGHT),
})
QUIT_KEY = arcade.key.ESCAPE
RESTART_KEY = arcade.key.R


class ArcadeRenderer:
    """Renderer backed by arcade's immediate-mode draw calls"""

    def __init__(self, window: arcade.Window, flip: bool = False):
        self.window = window
        # arcade flips after on_draw itself; only manual loops need it here
        self.flip = flip

    def begin_frame(self):
        self.window.switch_to()

    def end_frame(self):
        if self.flip:
            self.window.flip()

    def clear(self, color: Color):
        self.window.clear(color=color)

    def draw_circle(self, x: float, y: float, radius: float, color: Color):
        arcade.draw_circle_filled(x, self.window.height - y, radius, color)

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color):
        arcade.draw_text(text, x, self.window.height - y, color, size, anchor_y="top")


class YarWindow(arcade.Window):
    """Arcade window running the frame loop"""

    def __init__(self, game: Optional[Game] = None, verbose: int = 1):
        super().__init__(
            WINDOW_CONFIG["width"],
            WINDOW_CONFIG["height"],
            WINDOW_CONFIG["title"],
            update_rate=WINDOW_CONFIG["update_rate"],
        )
        self.game = game if game is not None else Game()
        self.verbose = verbose
        self.renderer = ArcadeRenderer(self)

        # Input state between frames
        self._held_keys: Set[int] = set()
        self._pointer = (0.0, 0.0)
        self._fire = False
        self._restart = False
        self._reported_game_over = False

    # ----------------------------
    # Input events
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        self._held_keys.add(symbol)
        if symbol == RESTART_KEY:
            self._restart = True
        elif symbol == QUIT_KEY:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        self._held_keys.discard(symbol)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self._pointer = (float(x), float(self.height - y))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        self._pointer = (float(x), float(self.height - y))
        if button == arcade.MOUSE_BUTTON_LEFT:
            self._fire = True

    def poll_input(self) -> FrameInput:
        """Snapshot this frame's input and reset the edge-triggered flags"""
        frame = FrameInput(
            held=KEY_MAP.directions(self._held_keys),
            fire=self._fire,
            pointer=self._pointer,
            restart=self._restart,
        )
        self._fire = False
        self._restart = False
        return frame

    # ----------------------------
    # Frame loop
    # ----------------------------

    def on_update(self, delta_time: float):
        was_over = self.game.state.game_over
        self.game.tick(self.poll_input(), delta_time)

        state = self.game.state
        if state.game_over and not self._reported_game_over:
            self._reported_game_over = True
            if self.verbose > 0:
                print(f"[YAR] Game over - final score: {state.score}")
        elif was_over and not state.game_over:
            self._reported_game_over = False
            if self.verbose > 0:
                print("[YAR] Restarted")

    def on_draw(self):
        draw_game(self.game.state, self.renderer)


def main():
    """Open the game window and run until quit"""
    print("Starting YAR... WASD/Arrows to move, click to shoot, ESC to quit.")
    window = YarWindow()
    arcade.run()
    print(f"[YAR] Bye! Last score: {window.game.state.score}")


if __name__ == "__main__":
    main()
