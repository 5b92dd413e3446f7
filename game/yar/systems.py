"""
Per-frame game systems
----------------------
- Player controller: held directions -> clamped motion
- Projectile system: fire into the first free slot, advance, cull off-field
- Enemy AI: straight-line homing on the player
- Collision & scoring: bullet x enemy kills with edge respawn, player x enemy game over

Every system takes the GameState it mutates; ``Game`` owns the state and the
random source and runs the systems in frame order.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional, Tuple

from .config import (
    BULLET_SPEED, DIAGONAL_FACTOR, ENEMY_SPEED, KILL_SCORE, PLAYER_SPEED,
    RESPAWN_OFFSET, SCREEN_HEIGHT, SCREEN_WIDTH,
)
from .controls import Direction, FrameInput
from .entities import Entity
from .state import GameState, RandomSource, new_game
from .utils import circle_collide, clamp, normalize


# ----------------------------
# Player controller
# ----------------------------

def movement_vector(held: Iterable[Direction]) -> Tuple[float, float]:
    """Sum the held directions; opposite keys cancel out"""
    mx, my = 0.0, 0.0
    held = set(held)
    if Direction.UP in held:
        my -= 1
    if Direction.DOWN in held:
        my += 1
    if Direction.LEFT in held:
        mx -= 1
    if Direction.RIGHT in held:
        mx += 1

    # normalize diagonal
    if mx != 0 and my != 0:
        mx *= DIAGONAL_FACTOR
        my *= DIAGONAL_FACTOR
    return mx, my


def update_player(state: GameState, held: Iterable[Direction], dt: float):
    p = state.player
    mx, my = movement_vector(held)
    p.x += mx * PLAYER_SPEED * dt
    p.y += my * PLAYER_SPEED * dt

    # Keep on screen
    r = p.radius
    p.x = clamp(p.x, r, SCREEN_WIDTH - r)
    p.y = clamp(p.y, r, SCREEN_HEIGHT - r)


# ----------------------------
# Projectile system
# ----------------------------

def fire_bullet(state: GameState, target: Tuple[float, float]) -> Optional[Entity]:
    """Spawn a bullet from the player toward ``target``.

    Returns the bullet, or None when every slot is busy (the shot is dropped).
    Aiming at the player itself yields a bullet with zero velocity.
    """
    p = state.player
    dx, dy = normalize(target[0] - p.x, target[1] - p.y)

    slot = state.free_bullet_slot()
    if slot < 0:
        return None

    b = state.bullets[slot]
    b.move_to(p.x, p.y)
    b.vx = dx * BULLET_SPEED
    b.vy = dy * BULLET_SPEED
    b.active = True
    return b


def update_bullets(state: GameState, dt: float):
    for b in state.bullets:
        if not b.active:
            continue

        b.x += b.vx * dt
        b.y += b.vy * dt

        # Out of bounds -> free the slot
        if b.x < 0 or b.x > SCREEN_WIDTH or b.y < 0 or b.y > SCREEN_HEIGHT:
            b.active = False


# ----------------------------
# Enemy AI
# ----------------------------

def update_enemies(state: GameState, dt: float):
    px, py = state.player.position

    for e in state.enemies:
        if not e.active:
            continue

        # Chase player; standing on the player gives a zero direction
        nx, ny = normalize(px - e.x, py - e.y)
        e.x += nx * ENEMY_SPEED * dt
        e.y += ny * ENEMY_SPEED * dt


# ----------------------------
# Collision & scoring
# ----------------------------

def respawn_enemy(enemy: Entity, rng: RandomSource):
    """Relocate a killed enemy just outside a random field edge; it stays active"""
    edge = rng.randint(0, 3)
    if edge == 0:  # top
        enemy.move_to(float(rng.randint(0, SCREEN_WIDTH)), -RESPAWN_OFFSET)
    elif edge == 1:  # right
        enemy.move_to(SCREEN_WIDTH + RESPAWN_OFFSET, float(rng.randint(0, SCREEN_HEIGHT)))
    elif edge == 2:  # bottom
        enemy.move_to(float(rng.randint(0, SCREEN_WIDTH)), SCREEN_HEIGHT + RESPAWN_OFFSET)
    else:  # left
        enemy.move_to(-RESPAWN_OFFSET, float(rng.randint(0, SCREEN_HEIGHT)))
    enemy.active = True


def check_collisions(state: GameState, rng: RandomSource) -> int:
    """Resolve bullet and player hits; returns the number of kills this frame"""
    kills = 0

    # Bullets vs enemies
    for b in state.bullets:
        if not b.active:
            continue
        for e in state.enemies:
            if not e.active:
                continue
            if circle_collide(b.x, b.y, b.radius, e.x, e.y, e.radius):
                b.active = False
                respawn_enemy(e, rng)
                state.score += KILL_SCORE
                kills += 1
                break

    # Player vs enemies
    p = state.player
    for e in state.enemies:
        if e.active and circle_collide(p.x, p.y, p.radius, e.x, e.y, e.radius):
            state.game_over = True

    return kills


# ----------------------------
# Frame step
# ----------------------------

class Game:
    """One play session: owns the GameState and the random source"""

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else random.Random()
        self.state = new_game(self.rng)

    def restart(self):
        self.state = new_game(self.rng)

    def tick(self, frame: FrameInput, dt: float) -> int:
        """Advance one frame; returns kills scored in it"""
        if self.state.game_over:
            if frame.restart:
                self.restart()
            return 0

        update_player(self.state, frame.held, dt)
        if frame.fire:
            fire_bullet(self.state, frame.pointer)
        update_bullets(self.state, dt)
        update_enemies(self.state, dt)
        return check_collisions(self.state, self.rng)
