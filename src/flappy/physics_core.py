"""
physics_core.py: The deterministic bird kinematics and collision logic.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

from .constants import (
    GRAVITY_ACCEL, JUMP_IMPULSE, PRECISION,
    BIRD_X, BIRD_WIDTH, BIRD_HEIGHT
)
from .data_models import Bird, Box, Pipe


@dataclass
class PhysicsCore:
    """
    Fixed-step physics for the bird plus the box collision test.
    One call to integrate() is one tick; nothing here is time-scaled.
    """
    gravity: float = GRAVITY_ACCEL
    jump_impulse: float = JUMP_IMPULSE
    bird_x: float = BIRD_X
    bird_width: float = BIRD_WIDTH
    bird_height: float = BIRD_HEIGHT

    def integrate(self, bird: Bird) -> Bird:
        """
        Advances the bird by one tick. Mutates and returns the bird.
        """
        bird.velocity = round(bird.velocity + self.gravity, PRECISION)
        bird.y = round(bird.y + bird.velocity, PRECISION)
        return bird

    def flap(self, bird: Bird) -> Bird:
        """Replaces the current velocity with the jump impulse."""
        bird.velocity = self.jump_impulse
        return bird

    def out_of_bounds(self, bird: Bird, play_height: float) -> bool:
        return bird.y < 0 or bird.y > play_height

    def bird_box(self, bird: Bird) -> Box:
        return Box(self.bird_x, bird.y,
                   self.bird_x + self.bird_width, bird.y + self.bird_height)

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe],
                        segment_boxes: Callable[[Pipe], Tuple[Box, Box]]) -> bool:
        """Checks the bird against both segments of every pipe."""
        box = self.bird_box(bird)
        for pipe in pipes:
            top, bottom = segment_boxes(pipe)
            if box.intersects(top) or box.intersects(bottom):
                return True
        return False
