from __future__ import annotations

import os

import pytest

# Render offscreen; must be set before arcade is imported
os.environ.setdefault("ARCADE_HEADLESS", "1")

try:
    import arcade
    from game.yar.window import KEY_MAP, YarWindow
except Exception as exc:  # no GL/EGL available
    pytest.skip(f"arcade unavailable: {exc}", allow_module_level=True)

from game.yar.controls import Direction
from game.yar.systems import Game


@pytest.fixture(scope="module")
def window():
    try:
        w = YarWindow(game=Game(), verbose=0)
    except Exception as exc:
        pytest.skip(f"cannot open headless window: {exc}")
    yield w
    w.close()


def test_key_aliases_share_a_direction() -> None:
    assert KEY_MAP.directions({arcade.key.W}) == {Direction.UP}
    assert KEY_MAP.directions({arcade.key.UP}) == {Direction.UP}
    assert KEY_MAP.directions({arcade.key.S, arcade.key.LEFT}) == {Direction.DOWN, Direction.LEFT}
    assert KEY_MAP.directions({arcade.key.RIGHT, arcade.key.D}) == {Direction.RIGHT}


def test_press_flags_fire_once_and_pointer_is_flipped(window: YarWindow) -> None:
    window.on_key_press(arcade.key.R, 0)
    window.on_mouse_motion(100, 150, 0, 0)
    window.on_mouse_press(120, 100, arcade.MOUSE_BUTTON_LEFT, 0)

    first = window.poll_input()
    assert first.fire is True
    assert first.restart is True
    assert first.pointer == (120.0, float(window.height - 100))

    second = window.poll_input()
    assert second.fire is False
    assert second.restart is False
    assert second.pointer == first.pointer

    window.on_key_release(arcade.key.R, 0)


def test_held_keys_follow_press_and_release(window: YarWindow) -> None:
    window.on_key_press(arcade.key.A, 0)
    window.on_key_press(arcade.key.UP, 0)
    assert window.poll_input().held == {Direction.LEFT, Direction.UP}

    window.on_key_release(arcade.key.A, 0)
    assert window.poll_input().held == {Direction.UP}

    window.on_key_release(arcade.key.UP, 0)
    assert window.poll_input().held == frozenset()


def test_right_click_does_not_fire(window: YarWindow) -> None:
    window.on_mouse_press(10, 10, arcade.MOUSE_BUTTON_RIGHT, 0)
    frame = window.poll_input()
    assert frame.fire is False
    assert frame.pointer == (10.0, float(window.height - 10))
