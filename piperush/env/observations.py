# piperush/env/observations.py
"""
Vector observation for PipeRushEnv.

Layout (12,) float32:
    [x_norm, y_norm, speed_norm,
     dy@row0, gap_start@row0, gap_end@row0,
     dy@row1, gap_start@row1, gap_end@row1,
     dy@row2, gap_start@row2, gap_end@row2]

Rows are the ones still above the player's bottom edge, nearest first.
dy is the distance from the row's lower edge to the player's top, scaled by
field height (negative while overlapping). Missing rows use (1, 0, 1).
"""
from __future__ import annotations
from typing import Sequence
import numpy as np

from piperush.game.simulation import GameSnapshot, RowView
from piperush.game.config import WIDTH, HEIGHT, PIPE_HEIGHT

ROWS_OBSERVED = 3
SPEED_NORM = 10.0            # speeds above this saturate at 1.0
EMPTY_ROW = (1.0, 0.0, 1.0)
OBS_SIZE = 3 + 3 * ROWS_OBSERVED

OBS_LOW = np.array([0.0, 0.0, 0.0] + [-1.0, 0.0, 0.0] * ROWS_OBSERVED, dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0] + [1.0, 1.0, 1.0] * ROWS_OBSERVED, dtype=np.float32)


def upcoming_rows(snap: GameSnapshot) -> Sequence[RowView]:
    bottom = snap.player_y + snap.player_h
    ahead = [r for r in snap.rows if r.y < bottom]
    return sorted(ahead, key=lambda r: r.y, reverse=True)[:ROWS_OBSERVED]


def build_observation(snap: GameSnapshot, width: float = WIDTH, height: float = HEIGHT,
                      pipe_height: float = PIPE_HEIGHT) -> np.ndarray:
    x_norm = snap.player_x / max(1.0, width - snap.player_w)
    y_norm = snap.player_y / max(1.0, height - snap.player_h)
    head = [x_norm, y_norm, snap.speed / SPEED_NORM]

    blocks = []
    rows = list(upcoming_rows(snap))
    for i in range(ROWS_OBSERVED):
        if i < len(rows):
            r = rows[i]
            dy = (snap.player_y - (r.y + pipe_height)) / height
            blocks.extend([dy, r.left_gap_start / width, r.right_gap_end / width])
        else:
            blocks.extend(EMPTY_ROW)

    obs = np.asarray(head + blocks, dtype=np.float32)
    return np.clip(obs, OBS_LOW, OBS_HIGH)
