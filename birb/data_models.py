"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass

from .constants import BIRD_X, INITIAL_GAP_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH


@dataclass
class GameState:
    """The single mutable game state. Owned by the engine, read by the renderer."""
    bird_x: float = BIRD_X
    bird_y: float = SCREEN_HEIGHT / 2
    bird_velocity: float = 0.0             # Pixels per tick, negative is up
    pipe_x: float = SCREEN_WIDTH            # Leading edge of the pipe pair
    top_pipe_height: float = 0.0
    bottom_pipe_y: float = 0.0              # Where the bottom segment starts
    gap_height: float = INITIAL_GAP_HEIGHT
    score: int = 0
    game_over: bool = False
    tick_count: int = 0


@dataclass(frozen=True)
class Box:
    """Axis-aligned bounding box in screen coordinates (y grows downward)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Box") -> bool:
        """Strict overlap on both axes; boxes that only share an edge do not intersect."""
        return (
            self.left < other.right and other.left < self.right
            and self.top < other.bottom and other.top < self.bottom
        )


@dataclass(frozen=True)
class StepReport:
    """Collision checks computed during one tick."""
    collides_top: bool
    collides_bottom: bool
    out_of_bounds: bool

    @property
    def fatal(self) -> bool:
        return self.collides_top or self.collides_bottom or self.out_of_bounds
