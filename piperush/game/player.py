# piperush/game/player.py
from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass
class Player:
    """
    Player sprite box. TOP-LEFT based:
    - (x, y) is the top-left corner in field coordinates
    - w, h never change after creation
    """
    x: float
    y: float
    w: float
    h: float

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def clamp(self, field_w: float, field_h: float):
        """Keep the whole sprite inside [0, field_w-w] x [0, field_h-h]."""
        if self.x < 0: self.x = 0.0
        if self.x > field_w - self.w: self.x = field_w - self.w
        if self.y < 0: self.y = 0.0
        if self.y > field_h - self.h: self.y = field_h - self.h

    def move(self, dx: float, dy: float, field_w: float, field_h: float):
        """Translate by (dx, dy) then clamp. Non-finite deltas are rejected."""
        if not (math.isfinite(dx) and math.isfinite(dy)):
            raise ValueError(f"Non-finite move ({dx}, {dy})")
        self.x += dx
        self.y += dy
        self.clamp(field_w, field_h)

    def place(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)
