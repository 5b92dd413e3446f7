from __future__ import annotations

import pytest

from game.yar.config import MAX_BULLETS
from game.yar.state import GameState
from game.yar.systems import fire_bullet, update_bullets


def _pool(state: GameState) -> list[tuple]:
    return [(b.x, b.y, b.vx, b.vy, b.active) for b in state.bullets]


def test_fire_spawns_from_player_toward_target(state: GameState) -> None:
    b = fire_bullet(state, (500.0, 300.0))

    assert b is state.bullets[0]
    assert b.active
    assert (b.x, b.y) == (400.0, 300.0)
    assert (b.vx, b.vy) == pytest.approx((400.0, 0.0))


def test_fire_normalizes_exactly(state: GameState) -> None:
    b = fire_bullet(state, (403.0, 304.0))
    assert (b.vx, b.vy) == pytest.approx((240.0, 320.0))


def test_fire_uses_first_free_slot(state: GameState) -> None:
    for _ in range(3):
        fire_bullet(state, (0.0, 0.0))
    state.bullets[1].active = False

    b = fire_bullet(state, (0.0, 0.0))
    assert b is state.bullets[1]
    assert [x.active for x in state.bullets[:4]] == [True, True, True, False]


def test_fire_with_full_pool_is_dropped(state: GameState) -> None:
    for _ in range(MAX_BULLETS):
        assert fire_bullet(state, (800.0, 0.0)) is not None
    before = _pool(state)

    assert fire_bullet(state, (0.0, 600.0)) is None
    assert _pool(state) == before
    assert len(state.bullets) == MAX_BULLETS


def test_bullet_aimed_at_player_never_leaves(state: GameState) -> None:
    b = fire_bullet(state, (400.0, 300.0))
    assert (b.vx, b.vy) == (0.0, 0.0)

    for _ in range(600):
        update_bullets(state, 1 / 60)
    assert b.active
    assert (b.x, b.y) == (400.0, 300.0)


def test_bullets_advance_by_velocity(state: GameState) -> None:
    b = fire_bullet(state, (400.0, 0.0))
    update_bullets(state, 0.25)
    assert (b.x, b.y) == pytest.approx((400.0, 200.0))
    assert b.active


@pytest.mark.parametrize(
    "pos, vel",
    [
        ((795.0, 300.0), (400.0, 0.0)),
        ((5.0, 300.0), (-400.0, 0.0)),
        ((400.0, 2.0), (0.0, -400.0)),
        ((400.0, 598.0), (0.0, 400.0)),
    ],
)
def test_bullets_leaving_field_are_freed(state: GameState, pos, vel) -> None:
    b = state.bullets[0]
    b.x, b.y = pos
    b.vx, b.vy = vel
    b.active = True

    update_bullets(state, 1 / 60)
    assert not b.active
    assert state.free_bullet_slot() == 0


def test_bullet_on_field_edge_stays_active(state: GameState) -> None:
    for b, pos in zip(state.bullets, [(0.0, 0.0), (800.0, 600.0), (800.0, 0.0)]):
        b.x, b.y = pos
        b.vx, b.vy = 0.0, 0.0
        b.active = True

    update_bullets(state, 1 / 60)
    assert all(b.active for b in state.bullets[:3])


def test_inactive_bullets_do_not_move(state: GameState) -> None:
    b = state.bullets[5]
    b.vx = 400.0
    update_bullets(state, 1.0)
    assert (b.x, b.y) == (0.0, 0.0)
    assert not b.active
