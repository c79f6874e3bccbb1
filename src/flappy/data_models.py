"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import SCREEN_HEIGHT, SCREEN_WIDTH


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass
class Bird:
    """The controlled body. X and size are fixed by the physics core."""
    y: float = 0.0
    velocity: float = 0.0


@dataclass
class Pipe:
    """A top/bottom pipe pair sharing one gap."""
    x: float
    gap_y: float
    scored: bool = False


@dataclass
class GameState:
    """Everything a run owns. Reset as a whole on restart."""
    phase: Phase = Phase.NOT_STARTED
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)  # oldest first
    score: int = 0
    ticks: int = 0

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER

    def to_dict(self):
        """Prepares a minimal state dictionary for logging and debugging."""
        return {
            "phase": self.phase.value,
            "y": round(self.bird.y, 2),
            "v": round(self.bird.velocity, 2),
            "score": self.score,
            "ticks": self.ticks,
            "pipes": [{"x": round(p.x, 2), "gap_y": round(p.gap_y, 2)} for p in self.pipes],
        }


@dataclass(frozen=True)
class Box:
    """Axis-aligned box in screen coordinates (y grows downward)."""
    left: float
    top: float
    right: float
    bottom: float

    def intersects(self, other: "Box") -> bool:
        """Open intersection: boxes that only share an edge do not intersect."""
        return (self.left < other.right and other.left < self.right
                and self.top < other.bottom and other.top < self.bottom)


@dataclass
class Viewport:
    """A play area of fixed size. The pygame host supplies a live one instead."""
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
