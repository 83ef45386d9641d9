# piperush/game/pipes.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .config import FieldConfig

log = logging.getLogger(__name__)


@dataclass
class PipeRow:
    """
    One horizontal pair of barriers with a passable gap between them.
    Gap sizes are fixed at creation; only `y` moves (downwards).
    """
    y: float
    left_gap_size: float
    right_gap_size: float
    field_width: float
    crossed: bool = False
    row_id: int = 0

    @property
    def left_gap_start(self) -> float:
        return self.left_gap_size

    @property
    def right_gap_end(self) -> float:
        return self.field_width - self.right_gap_size

    @property
    def gap_width(self) -> float:
        return self.right_gap_end - self.left_gap_start


@dataclass(frozen=True)
class RowCrossed:
    """Emitted by `PipePool.advance` when a row passes the field midpoint."""
    row_id: int
    y: float


class PipePool:
    """
    Ordered set of active pipe rows scrolling down the field.
    Rows are spawned on crossing and reaped once below the field.
    """
    def __init__(self, cfg: FieldConfig, seed: int | None = None,
                 rng: Optional[random.Random] = None):
        if rng is None:
            if seed is None:
                seed = random.randrange(0, 2**32 - 1)
            rng = random.Random(seed)
        self.cfg = cfg
        self.seed = seed
        self.rng = rng
        self.rows: List[PipeRow] = []
        self._next_id = 0
        self.initialize()

    def initialize(self):
        """Drop every row and lay out the starting stack at 0, -S, -2S, ..."""
        self.rows.clear()
        self._next_id = 0
        for i in range(self.cfg.initial_rows):
            self._spawn(-i * self.cfg.row_spacing)

    def _random_gaps(self) -> tuple[float, float]:
        left = self.rng.randint(self.cfg.gap_min, self.cfg.gap_max)
        right = self.rng.randint(self.cfg.gap_min, self.cfg.gap_max)

        # Narrow fields: keep the corridor at least one sprite wide
        room = self.cfg.width - self.cfg.min_corridor
        if left + right > room:
            right = max(0.0, room - left)
            left = min(left, room)
        return float(left), float(right)

    def _spawn(self, y: float) -> PipeRow:
        left, right = self._random_gaps()
        row = PipeRow(y=float(y), left_gap_size=left, right_gap_size=right,
                      field_width=float(self.cfg.width), row_id=self._next_id)
        self._next_id += 1
        self.rows.append(row)
        return row

    def advance(self, speed: float) -> List[RowCrossed]:
        """
        Move every row down by `speed`. A row whose leading edge passes the
        midpoint for the first time is flagged, reported and replaced by a new
        row above the field. Rows spawned here are not moved until next tick.
        """
        events: List[RowCrossed] = []
        mid = self.cfg.midpoint
        for row in list(self.rows):
            row.y += speed
            if row.y > mid and not row.crossed:
                row.crossed = True
                events.append(RowCrossed(row_id=row.row_id, y=row.y))
                new_row = self._spawn(-self.cfg.row_spacing)
                log.debug("row %d crossed at y=%.1f, spawned row %d",
                          row.row_id, row.y, new_row.row_id)
        return events

    def reap(self) -> int:
        """Remove rows fully below the field. Returns how many were dropped."""
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.y <= self.cfg.height]
        return before - len(self.rows)

    def step(self, speed: float) -> List[RowCrossed]:
        events = self.advance(speed)
        self.reap()
        return events

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)
