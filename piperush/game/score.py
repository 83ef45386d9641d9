# piperush/game/score.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .config import BASE_SPEED, SPEED_INCREMENT, SCORE_PER_LEVEL

log = logging.getLogger(__name__)


@dataclass
class ScoreTracker:
    """
    Score, high score and difficulty. `level` and `is_day` are derived from
    `score` on every read; only `speed` and the applied-threshold marker are
    stored next to it.
    """
    base_speed: float = BASE_SPEED
    speed_increment: float = SPEED_INCREMENT
    score_per_level: int = SCORE_PER_LEVEL
    score: int = 0
    high_score: int = 0
    speed: float = field(init=False)
    _levels_applied: int = field(default=0, init=False)   # thresholds (10, 20, ...) already turned into speed

    def __post_init__(self):
        self.speed = self.base_speed

    @property
    def level(self) -> int:
        return self.score // self.score_per_level + 1

    @property
    def is_day(self) -> bool:
        return (self.score // self.score_per_level) % 2 == 0

    def on_row_crossed(self):
        self.score += 1
        if self.score > self.high_score:
            self.high_score = self.score

    def on_level_check(self) -> bool:
        """
        Speed up once for every threshold reached since the last check.
        Returns True if the speed changed.
        """
        reached = self.score // self.score_per_level
        if reached <= self._levels_applied:
            return False
        steps = reached - self._levels_applied
        self.speed += steps * self.speed_increment
        self._levels_applied = reached
        log.info("level %d reached, speed now %.1f", self.level, self.speed)
        return True

    def reset(self):
        """New run: score and speed back to defaults, high score kept."""
        self.score = 0
        self.speed = self.base_speed
        self._levels_applied = 0
