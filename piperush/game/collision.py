# piperush/game/collision.py
from __future__ import annotations
from typing import Iterable

from .config import PIPE_HEIGHT
from .player import Player
from .pipes import PipeRow


def overlaps_band(player: Player, row: PipeRow, pipe_height: float = PIPE_HEIGHT) -> bool:
    """Vertical interval overlap between the sprite and the row's thickness."""
    return player.y < row.y + pipe_height and player.y + player.h > row.y


def inside_gap(player: Player, row: PipeRow) -> bool:
    return player.x >= row.left_gap_start and player.x + player.w <= row.right_gap_end


def check_collision(player: Player, rows: Iterable[PipeRow],
                    pipe_height: float = PIPE_HEIGHT) -> bool:
    """
    True if the player touches any barrier: it overlaps a row's band without
    sitting fully inside that row's gap. Stops at the first hit (the result
    can only go from False to True within a tick).
    """
    for row in rows:
        if overlaps_band(player, row, pipe_height) and not inside_gap(player, row):
            return True
    return False
