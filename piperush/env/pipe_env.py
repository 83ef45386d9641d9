# piperush/env/pipe_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from piperush.game.config import WIDTH, HEIGHT, FPS, MOVE_STEP
from piperush.game.render import draw_frame
from piperush.game.simulation import GameSimulation
from piperush.env.observations import build_observation, OBS_LOW, OBS_HIGH

# action -> (dx, dy)
ACTION_MOVES = {
    0: (0.0, 0.0),
    1: (0.0, -MOVE_STEP),
    2: (0.0, MOVE_STEP),
    3: (-MOVE_STEP, 0.0),
    4: (MOVE_STEP, 0.0),
}

ALIVE_BONUS = 0.01
DEATH_PENALTY = -1.0


class PipeRushEnv(gym.Env):
    """
    Pipe Rush Gymnasium environment (vector observations).
    - One simulation tick per frame, FPS ticks per second.
    - Agent acts every `frame_skip` ticks; the move is applied before the first one.
    - Observation: shape (12,), float32 (see observations.py).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 1,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode {render_mode!r}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        # Actions: 0 = NOOP, 1 = UP, 2 = DOWN, 3 = LEFT, 4 = RIGHT
        self.action_space = gym.spaces.Discrete(len(ACTION_MOVES))
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[GameSimulation] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Seeding policy:
        # - If a seed is provided, the pipe pool uses it directly.
        # - If not, the pool randomizes itself (seed recorded in info).
        pool_seed = int(seed) if seed is not None else None

        self.sim = GameSimulation(seed=pool_seed)
        self.current_seed = self.sim.seed
        self.timestep = 0

        obs = self._get_obs()
        info = self._info()
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action):
        assert self.sim is not None, "Call reset() before step()"
        assert self.action_space.contains(action), f"Invalid action {action}"

        score_before = self.sim.score
        self.sim.move_player(*ACTION_MOVES[int(action)])
        for _ in range(self.frame_skip):
            self.sim.update()
            if self.sim.game_over:
                break

        crossed = self.sim.score - score_before
        alive = not self.sim.game_over
        reward = float(crossed) + (ALIVE_BONUS if alive else DEATH_PENALTY)

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = self._info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None
        cfg = self.sim.cfg
        return build_observation(self.sim.snapshot(), cfg.width, cfg.height, cfg.pipe_height)

    def _info(self) -> Dict[str, Any]:
        assert self.sim is not None
        return {
            "seed": self.current_seed,
            "score": self.sim.score,
            "high_score": self.sim.high_score,
            "level": self.sim.level,
            "tick": self.sim.state.tick,
            "timestep": self.timestep,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Pipe Rush - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            pygame.font.init()
            self.font = pygame.font.SysFont("jetbrainsmono", 16)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()

        draw_frame(self.screen, self.sim.snapshot(), self.font, self.sim.cfg.pipe_height)

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", FPS))
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
