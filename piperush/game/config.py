# piperush/game/config.py
from __future__ import annotations
from dataclasses import dataclass

# --- Display ---
WIDTH = 360
HEIGHT = 640
FPS = 60

# --- Player ---
PLAYER_W = 51
PLAYER_H = 36
MOVE_STEP = 20.0                  # px per arrow key press

# --- Pipe rows ---
PIPE_HEIGHT = 40                  # thickness of a row (px)
ROW_SPACING = 130                 # vertical distance between rows
INITIAL_ROWS = 5
GAP_MIN = 50                      # left/right barrier widths, inclusive range
GAP_MAX = 150

# --- Difficulty ---
BASE_SPEED = 2.0                  # px per tick
SPEED_INCREMENT = 0.5
SCORE_PER_LEVEL = 10
SEED_DEFAULT = 12345

# --- Debug ---
DEBUG_OVERLAY = False             # draw gap bounds + row ids on screen

# --- Colors (RGB) ---
COLOR_DAY = (112, 197, 206)
COLOR_NIGHT = (18, 24, 48)
COLOR_FG = (250, 250, 250)
COLOR_PLAYER = (246, 204, 52)
COLOR_PIPE = (84, 168, 62)
COLOR_PIPE_EDGE = (40, 96, 30)
COLOR_DANGER = (255, 86, 110)
COLOR_PANEL = (10, 20, 35, 170)


@dataclass(frozen=True)
class FieldConfig:
    """
    Geometry + tuning for one simulation. Defaults mirror the module constants;
    tests build smaller/narrower fields from it.
    """
    width: float = WIDTH
    height: float = HEIGHT
    player_w: float = PLAYER_W
    player_h: float = PLAYER_H
    pipe_height: float = PIPE_HEIGHT
    row_spacing: float = ROW_SPACING
    initial_rows: int = INITIAL_ROWS
    gap_min: int = GAP_MIN
    gap_max: int = GAP_MAX
    base_speed: float = BASE_SPEED
    speed_increment: float = SPEED_INCREMENT
    score_per_level: int = SCORE_PER_LEVEL

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field must have positive size, got {self.width}x{self.height}")
        if self.player_w <= 0 or self.player_h <= 0:
            raise ValueError("Player sprite must have positive size.")
        if self.player_w > self.width or self.player_h > self.height:
            raise ValueError("Player sprite does not fit inside the field.")
        if self.pipe_height <= 0 or self.row_spacing <= 0:
            raise ValueError("pipe_height and row_spacing must be positive.")
        if self.initial_rows < 1:
            raise ValueError("initial_rows must be >= 1")
        if self.gap_min < 0 or self.gap_max < self.gap_min:
            raise ValueError(f"Invalid gap range [{self.gap_min}, {self.gap_max}]")
        if self.base_speed <= 0 or self.speed_increment < 0:
            raise ValueError("base_speed must be > 0 and speed_increment >= 0")
        if self.score_per_level < 1:
            raise ValueError("score_per_level must be >= 1")

    @property
    def midpoint(self) -> float:
        """Row crossing line (half the field height)."""
        return self.height / 2

    @property
    def player_start(self) -> tuple[float, float]:
        return self.width / 8.0, self.height / 2.0

    @property
    def min_corridor(self) -> float:
        """Narrowest gap still passable by the player sprite."""
        return self.player_w
