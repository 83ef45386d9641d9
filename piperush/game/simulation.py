# piperush/game/simulation.py
from __future__ import annotations
import enum
import logging
import random
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import FieldConfig
from .collision import check_collision
from .pipes import PipePool, PipeRow
from .player import Player
from .score import ScoreTracker

log = logging.getLogger(__name__)


class Phase(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class RowView:
    """Read-only copy of a pipe row for renderers and observers."""
    row_id: int
    y: float
    left_gap_start: float
    right_gap_end: float
    crossed: bool

    @classmethod
    def of(cls, row: PipeRow) -> "RowView":
        return cls(row.row_id, row.y, row.left_gap_start, row.right_gap_end, row.crossed)


@dataclass(frozen=True)
class GameSnapshot:
    player_x: float
    player_y: float
    player_w: float
    player_h: float
    rows: Tuple[RowView, ...]
    score: int
    high_score: int
    level: int
    speed: float
    is_day: bool
    game_over: bool
    tick: int


@dataclass
class GameState:
    """Everything that changes during a run. Owned by one GameSimulation."""
    player: Player
    pool: PipePool
    score: ScoreTracker
    phase: Phase = Phase.RUNNING
    tick: int = 0


class GameSimulation:
    """
    Fixed-step driver. Call `update()` once per frame; input goes through
    `move_player()` / `restart()` and is applied immediately under the same
    lock as the tick, so a tick never sees a half-applied move. Read
    accessors take the lock too and are safe from any thread.
    """
    def __init__(self, cfg: Optional[FieldConfig] = None, seed: int | None = None,
                 rng: Optional[random.Random] = None):
        self.cfg = cfg or FieldConfig()
        self._lock = threading.Lock()
        start_x, start_y = self.cfg.player_start
        pool = PipePool(self.cfg, seed=seed, rng=rng)
        self.seed = pool.seed
        self.state = GameState(
            player=Player(x=start_x, y=start_y, w=self.cfg.player_w, h=self.cfg.player_h),
            pool=pool,
            score=ScoreTracker(base_speed=self.cfg.base_speed,
                               speed_increment=self.cfg.speed_increment,
                               score_per_level=self.cfg.score_per_level),
        )

    # -------------------- Commands --------------------

    def update(self) -> None:
        with self._lock:
            st = self.state
            if st.phase is Phase.GAME_OVER:
                return

            # 1) scroll + spawn + reap, score each crossing right away
            for _ in st.pool.step(st.score.speed):
                st.score.on_row_crossed()

            # 2) difficulty
            st.score.on_level_check()

            # 3) collisions
            if check_collision(st.player, st.pool, self.cfg.pipe_height):
                st.phase = Phase.GAME_OVER
                log.info("game over at tick %d: score=%d high=%d",
                         st.tick, st.score.score, st.score.high_score)

            st.tick += 1

    def move_player(self, dx: float, dy: float) -> None:
        with self._lock:
            if self.state.phase is Phase.GAME_OVER:
                return
            self.state.player.move(dx, dy, self.cfg.width, self.cfg.height)

    def restart(self) -> None:
        with self._lock:
            st = self.state
            st.player.place(*self.cfg.player_start)
            st.score.reset()
            st.pool.initialize()
            st.phase = Phase.RUNNING
            st.tick = 0
            log.debug("restart (high score %d)", st.score.high_score)

    # -------------------- Read accessors --------------------

    @property
    def phase(self) -> Phase:
        with self._lock:
            return self.state.phase

    @property
    def game_over(self) -> bool:
        with self._lock:
            return self.state.phase is Phase.GAME_OVER

    @property
    def player_position(self) -> Tuple[float, float]:
        with self._lock:
            return self.state.player.position

    @property
    def rows(self) -> Tuple[RowView, ...]:
        with self._lock:
            return tuple(RowView.of(r) for r in self.state.pool)

    @property
    def score(self) -> int:
        with self._lock:
            return self.state.score.score

    @property
    def high_score(self) -> int:
        with self._lock:
            return self.state.score.high_score

    @property
    def level(self) -> int:
        with self._lock:
            return self.state.score.level

    @property
    def speed(self) -> float:
        with self._lock:
            return self.state.score.speed

    @property
    def is_day(self) -> bool:
        with self._lock:
            return self.state.score.is_day

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            st = self.state
            return GameSnapshot(
                player_x=st.player.x,
                player_y=st.player.y,
                player_w=st.player.w,
                player_h=st.player.h,
                rows=tuple(RowView.of(r) for r in st.pool),
                score=st.score.score,
                high_score=st.score.high_score,
                level=st.score.level,
                speed=st.score.speed,
                is_day=st.score.is_day,
                game_over=st.phase is Phase.GAME_OVER,
                tick=st.tick,
            )
