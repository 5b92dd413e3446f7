"""YAR - top-down arena shooter: game core, arcade front-end, gymnasium wrapper"""

from .state import GameState, new_game
from .systems import Game
from .env import YarEnv, run_random_episode

__all__ = ['Game', 'GameState', 'new_game', 'YarEnv', 'run_random_episode']
