"""
YarEnv - headless gymnasium wrapper around the YAR game core
------------------------------------------------------------
- Same Game/GameState/systems as the arcade window, stepped with a fixed dt
- Gymnasium API for scripted or automated play
- Discrete MultiDiscrete action space: [move(5), fire(2), aim(8)]
- Vector observation: player position + all enemies (nearest first) + bullet pool usage

Quick test:
    python -m game.yar.env
"""

from __future__ import annotations

import math
import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, MAX_BULLETS, MAX_ENEMIES, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_CONFIG
from .controls import Direction, FrameInput
from .systems import Game
from .utils import clamp

# move: 0 stay, 1 up, 2 down, 3 left, 4 right
MOVE_ACTIONS = (
    frozenset(),
    frozenset({Direction.UP}),
    frozenset({Direction.DOWN}),
    frozenset({Direction.LEFT}),
    frozenset({Direction.RIGHT}),
)

R_KILL = 1.0
R_DEATH = 5.0
R_TIME = 0.001


class YarEnv(gym.Env):
    """YAR arena as a gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = ENV_CONFIG["dt"],
        max_steps: int = ENV_CONFIG["max_steps"],
        aim_distance: float = ENV_CONFIG["aim_distance"],
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode
        self.dt = dt
        self.max_steps = max_steps
        self.aim_distance = aim_distance

        self.action_space = spaces.MultiDiscrete([5, 2, 8])

        # Player: pos(2); each enemy: rel pos(2); bullet pool usage(1)
        obs_dim = 2 + MAX_ENEMIES * 2 + 1
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.game: Game = None  # type: ignore
        self._step_count = 0
        self._window = None
        self._renderer = None

        # Precompute aim directions (8-way)
        self._aim_dirs = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._aim_dirs.append((math.cos(ang), math.sin(ang)))

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        # One seed drives the game and the sampled actions alike
        if seed is not None:
            self.action_space.seed(seed)

        self._step_count = 0
        self.game = Game(rng=random.Random(seed))

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire, aim = int(action[0]), int(action[1]), int(action[2])

        p = self.game.state.player
        dx, dy = self._aim_dirs[aim % 8]
        frame = FrameInput(
            held=MOVE_ACTIONS[move],
            fire=bool(fire),
            pointer=(p.x + dx * self.aim_distance, p.y + dy * self.aim_distance),
        )
        kills = self.game.tick(frame, self.dt)

        terminated = self.game.state.game_over
        reward = R_KILL * kills - R_TIME
        if terminated:
            reward -= R_DEATH

        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        state = self.game.state
        p = state.player

        obs_parts = [p.x / SCREEN_WIDTH * 2 - 1, p.y / SCREEN_HEIGHT * 2 - 1]

        enemies_sorted = sorted(
            state.enemies,
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2
        )
        for e in enemies_sorted:
            obs_parts += [
                clamp((e.x - p.x) / SCREEN_WIDTH, -1, 1),
                clamp((e.y - p.y) / SCREEN_HEIGHT, -1, 1),
            ]

        obs_parts.append(len(state.active_bullets()) / MAX_BULLETS * 2 - 1)

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "score": state.score,
            "game_over": state.game_over,
            "num_bullets": len(state.active_bullets()),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        # arcade is only needed once a window is actually shown
        import arcade
        from .render import draw_game
        from .window import ArcadeRenderer

        if self._window is None:
            self._window = arcade.Window(
                WINDOW_CONFIG["width"], WINDOW_CONFIG["height"], WINDOW_CONFIG["title"]
            )
            self._renderer = ArcadeRenderer(self._window, flip=True)

        self._window.dispatch_events()
        draw_game(self.game.state, self._renderer)
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
            self._renderer = None


def run_random_episode(render: bool = False, seed: Optional[int] = 42) -> float:
    """Play one episode with random actions and return its total reward"""
    env = YarEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.3f} (score {info['score']}, steps {info['step']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
