# piperush/tests/player_unit.py
import math

import pytest

import piperush.game.player as player_mod
from piperush.game.player import Player


def make_player() -> Player:
    return Player(x=45.0, y=320.0, w=51, h=36)


def test_model_has_no_render_dependency():
    assert not hasattr(player_mod, "pygame")
    assert not hasattr(Player, "rect")


def test_move_then_clamp():
    p = make_player()
    p.move(-100.0, 0.0, 360, 640)
    assert p.position == (0.0, 320.0)
    p.move(0.0, 1000.0, 360, 640)
    assert p.position == (0.0, 604)


def test_place_and_non_finite_move():
    p = make_player()
    p.place(10, 20)
    assert p.position == (10.0, 20.0)
    with pytest.raises(ValueError):
        p.move(math.inf, 0.0, 360, 640)
    assert p.position == (10.0, 20.0)
