"""
Game constants and settings for the YAR arena shooter
"""

# Field (also the window size)
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

# Speeds in units/s
PLAYER_SPEED = 200.0
BULLET_SPEED = 400.0
ENEMY_SPEED = 100.0

# Pool sizes
MAX_BULLETS = 20
MAX_ENEMIES = 10

PLAYER_RADIUS = 20.0
BULLET_RADIUS = 5.0
ENEMY_RADIUS = 15.0

KILL_SCORE = 10
RESPAWN_OFFSET = 50.0  # distance beyond the edge for respawned enemies
DIAGONAL_FACTOR = 0.70710678  # ~1/sqrt(2)

# Colors (RGB)
BLUE = (0, 121, 241)
YELLOW = (253, 249, 0)
RED = (230, 41, 55)
WHITE = (255, 255, 255)
GRAY = (130, 130, 130)
BLACK = (0, 0, 0)

# Window parameters
WINDOW_CONFIG = {
    "width": SCREEN_WIDTH,
    "height": SCREEN_HEIGHT,
    "title": "YAR - Yet Another RPG",
    "update_rate": 1 / 60,
}

# Headless environment parameters
ENV_CONFIG = {
    "dt": 1 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "aim_distance": 100.0,
}
