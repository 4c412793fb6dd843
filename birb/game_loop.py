"""
game_loop.py: Fixed timestep accumulator that decouples simulation rate from render rate.
"""

from dataclasses import dataclass

from .constants import TICK_TIME, MAX_TICKS_PER_FRAME


@dataclass
class FixedTimestep:
    """
    Turns variable frame durations into a whole number of fixed ticks.

    Leftover time is carried to the next frame. If a frame would need more than
    max_ticks ticks, the backlog is dropped instead of replayed.
    """
    tick_time: float = TICK_TIME
    max_ticks: int = MAX_TICKS_PER_FRAME
    accumulator: float = 0.0

    def advance(self, frame_time: float) -> int:
        """Adds frame_time (seconds) and returns how many ticks to run now."""
        self.accumulator += max(frame_time, 0.0)

        ticks = 0
        while self.accumulator >= self.tick_time and ticks < self.max_ticks:
            self.accumulator -= self.tick_time
            ticks += 1

        if ticks == self.max_ticks and self.accumulator >= self.tick_time:
            self.accumulator = 0.0

        return ticks

    def reset(self):
        self.accumulator = 0.0
