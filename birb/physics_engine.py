"""
physics_engine.py: The authoritative game simulation.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .data_models import GameState, StepReport
from .physics_core import PhysicsCore


@dataclass
class GameEngine(PhysicsCore):
    """
    The engine that owns and advances the game state.
    Inherits kinematics and collision geometry from PhysicsCore.

    Callers must serialize reset(), jump() and step(); the engine does no locking.
    """
    state: GameState = field(default_factory=GameState)
    rng: random.Random = field(default_factory=random.Random)

    def reset(self, playfield_width: float, playfield_height: float):
        """Reinitializes the state in place for a new run."""
        self.check_playfield(playfield_height)

        state = self.state
        state.bird_y = playfield_height / 2
        state.bird_velocity = 0.0
        state.pipe_x = float(playfield_width)
        state.gap_height = self.initial_gap_height
        self.regenerate_pipe(playfield_height)
        state.score = 0
        state.game_over = False
        state.tick_count = 0

    def jump(self):
        if self.state.game_over:
            return
        self.state.bird_velocity = self.flap()

    def regenerate_pipe(self, playfield_height: float):
        """Picks a new random top pipe height for the current gap."""
        self.check_playfield(playfield_height)

        state = self.state
        state.gap_height = min(state.gap_height, self.max_gap_for(playfield_height))

        low = self.min_pipe_segment
        high = playfield_height - state.gap_height - self.min_pipe_segment
        state.top_pipe_height = self.rng.uniform(low, high)
        state.bottom_pipe_y = state.top_pipe_height + state.gap_height

    def step(self, playfield_width: float, playfield_height: float) -> Optional[StepReport]:
        """
        Advances the simulation by one tick.
        Returns the tick's collision report, or None if the game is already over.
        """
        state = self.state
        if state.game_over:
            return None

        self.check_playfield(playfield_height)
        state.tick_count += 1

        # 1-2. Gravity, then integrate and clamp
        state.bird_y, state.bird_velocity = self.apply_gravity_and_movement(
            state.bird_y, state.bird_velocity, playfield_height)

        # 3. Scroll
        state.pipe_x -= self.pipe_speed

        # 4. Recycle the pipe pair once it has fully left the screen
        if state.pipe_x <= -self.pipe_width:
            state.pipe_x = float(playfield_width)
            state.score += 1
            state.gap_height = self.gap_for_score(state.score)
            self.regenerate_pipe(playfield_height)

        # 5-7. Collision against post-update positions
        bird = self.bird_box(state)
        report = StepReport(
            collides_top=bird.intersects(self.top_pipe_box(state)),
            collides_bottom=bird.intersects(self.bottom_pipe_box(state, playfield_height)),
            out_of_bounds=self.is_out_of_bounds(state.bird_y, playfield_height),
        )

        # 8. Game over
        if report.fatal:
            state.game_over = True

        return report

    def debug_lines(self, report: Optional[StepReport] = None) -> List[str]:
        """Human-readable diagnostics for the debug overlay."""
        state = self.state
        lines = [
            f"Bird: x={int(state.bird_x)}, y={int(state.bird_y)}",
            f"Pipe: x={int(state.pipe_x)}",
            f"Gap Height: {int(state.gap_height)}",
        ]
        if report is not None:
            lines += [
                f"Collides Top: {report.collides_top}",
                f"Collides Bottom: {report.collides_bottom}",
                f"Out of Bounds: {report.out_of_bounds}",
            ]
        return lines
