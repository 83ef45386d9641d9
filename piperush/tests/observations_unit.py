# piperush/tests/observations_unit.py
import numpy as np

from piperush.env.observations import (
    build_observation, upcoming_rows, OBS_SIZE, EMPTY_ROW, ROWS_OBSERVED
)
from piperush.game.config import WIDTH, HEIGHT, PLAYER_W, PLAYER_H, PIPE_HEIGHT
from piperush.game.simulation import GameSnapshot, RowView


def make_snapshot(rows, x=45.0, y=320.0, speed=2.0) -> GameSnapshot:
    return GameSnapshot(
        player_x=x, player_y=y, player_w=PLAYER_W, player_h=PLAYER_H,
        rows=tuple(rows), score=0, high_score=0, level=1, speed=speed,
        is_day=True, game_over=False, tick=0,
    )

def row(row_id, y, start=50.0, end=280.0) -> RowView:
    return RowView(row_id=row_id, y=y, left_gap_start=start, right_gap_end=end, crossed=False)


def test_shape_and_dtype():
    obs = build_observation(make_snapshot([row(0, 0.0)]))
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)


def test_head_normalization():
    obs = build_observation(make_snapshot([], x=WIDTH - PLAYER_W, y=0.0, speed=5.0))
    assert obs[0] == 1.0
    assert obs[1] == 0.0
    assert np.isclose(obs[2], 0.5)


def test_missing_rows_use_sentinel():
    obs = build_observation(make_snapshot([]))
    for i in range(ROWS_OBSERVED):
        assert tuple(obs[3 + 3 * i: 6 + 3 * i]) == EMPTY_ROW


def test_nearest_row_first_and_passed_rows_skipped():
    rows = [row(0, -260.0), row(1, 100.0, start=70.0, end=250.0), row(2, 400.0), row(3, -130.0)]
    snap = make_snapshot(rows, y=320.0)
    ahead = upcoming_rows(snap)
    # row 2 is below the player's bottom edge (356) -> already passed
    assert [r.row_id for r in ahead] == [1, 3, 0]

    obs = build_observation(snap)
    dy = (320.0 - (100.0 + PIPE_HEIGHT)) / HEIGHT
    assert np.isclose(obs[3], dy)
    assert np.isclose(obs[4], 70.0 / WIDTH)
    assert np.isclose(obs[5], 250.0 / WIDTH)


def test_overlap_gives_negative_dy_and_stays_in_bounds():
    obs = build_observation(make_snapshot([row(0, 300.0)], y=320.0))
    assert obs[3] < 0.0
    assert np.all(obs >= -1.0) and np.all(obs <= 1.0)
