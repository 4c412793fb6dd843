"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import (
    GRAVITY, JUMP_IMPULSE, BIRD_SIZE, PIPE_WIDTH, PIPE_SPEED,
    INITIAL_GAP_HEIGHT, MIN_GAP_HEIGHT, GAP_SHRINK_RATE, MIN_PIPE_SEGMENT
)
from .data_models import Box, GameState


@dataclass
class PhysicsCore:
    """
    Kinematics and geometry rules shared by the engine.
    Every tunable defaults to the value in constants.py.
    """

    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    bird_size: float = BIRD_SIZE
    pipe_width: float = PIPE_WIDTH
    pipe_speed: float = PIPE_SPEED
    initial_gap_height: float = INITIAL_GAP_HEIGHT
    min_gap_height: float = MIN_GAP_HEIGHT
    gap_shrink_rate: float = GAP_SHRINK_RATE
    min_pipe_segment: float = MIN_PIPE_SEGMENT

    @property
    def min_playfield_height(self) -> float:
        return 2 * self.min_pipe_segment + self.min_gap_height

    def clamp_bird_y(self, y: float, playfield_height: float) -> float:
        return min(max(y, 0.0), playfield_height - self.bird_size)

    def apply_gravity_and_movement(
        self, y: float, velocity: float, playfield_height: float
    ) -> Tuple[float, float]:
        """
        Calculates new position and velocity after one tick.
        Velocity is updated first and the new position is clamped to the playfield.
        """
        velocity += self.gravity
        y = self.clamp_bird_y(y + velocity, playfield_height)
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity after a flap (an override, not an addition)."""
        return self.jump_impulse

    def gap_for_score(self, score: int) -> float:
        """Gap height derived directly from the score, floored at min_gap_height."""
        return max(self.initial_gap_height - score * self.gap_shrink_rate, self.min_gap_height)

    def max_gap_for(self, playfield_height: float) -> float:
        """Largest gap that still leaves room for both minimum pipe segments."""
        return playfield_height - 2 * self.min_pipe_segment

    def check_playfield(self, playfield_height: float):
        if playfield_height < self.min_playfield_height:
            raise ValueError(
                f"Playfield height {playfield_height} is too small; "
                f"need at least {self.min_playfield_height}"
            )

    # -------- Geometry --------

    def bird_box(self, state: GameState) -> Box:
        half = self.bird_size / 2
        return Box(state.bird_x - half, state.bird_y - half, self.bird_size, self.bird_size)

    def top_pipe_box(self, state: GameState) -> Box:
        return Box(state.pipe_x, 0.0, self.pipe_width, state.top_pipe_height)

    def bottom_pipe_box(self, state: GameState, playfield_height: float) -> Box:
        return Box(
            state.pipe_x, state.bottom_pipe_y,
            self.pipe_width, playfield_height - state.bottom_pipe_y
        )

    def is_out_of_bounds(self, y: float, playfield_height: float) -> bool:
        """Touching either clamp bound counts as out of bounds."""
        return y <= 0 or y >= playfield_height - self.bird_size
