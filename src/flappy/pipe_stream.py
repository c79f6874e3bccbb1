"""
pipe_stream.py: Spawning, scrolling, recycling and scoring of pipes.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import (
    PIPE_SPEED, PIPE_WIDTH, PIPE_HEIGHT, PIPE_GAP,
    PIPE_SPACING, FIRST_PIPE_OFFSET, GAP_MARGIN, PRECISION
)
from .data_models import Box, GameState, Pipe

logger = logging.getLogger(__name__)


@dataclass
class PipeStream:
    """
    Owns the rules for the ordered pipe collection in a GameState.

    The collection is kept oldest first: pipes are only appended to the end,
    only removed from the front, and all move at the same speed, so they
    never overtake each other.
    """
    speed: float = PIPE_SPEED
    width: float = PIPE_WIDTH
    height: float = PIPE_HEIGHT
    gap: float = PIPE_GAP
    spacing: float = PIPE_SPACING
    first_offset: float = FIRST_PIPE_OFFSET
    margin: float = GAP_MARGIN
    rng: random.Random = field(default_factory=random.Random)

    def random_gap_y(self, play_height: float) -> float:
        """
        Draws a gap center in [margin, play_height - margin), in whole pixels.
        Falls back to the middle of the play area when that range is empty.
        """
        span = int(play_height - 2 * self.margin)
        if span < 1:
            return play_height / 2
        return float(self.margin + self.rng.randrange(span))

    def spawn(self, state: GameState, x: float, play_height: float) -> Pipe:
        """Appends a new pipe at x with a fresh gap center."""
        pipe = Pipe(x=float(x), gap_y=self.random_gap_y(play_height))
        state.pipes.append(pipe)
        return pipe

    def spawn_if_needed(self, state: GameState, play_width: float,
                        play_height: float) -> Optional[Pipe]:
        """
        Spawns the first pipe past the right edge, or one more pipe once the
        newest has crossed the middle of the screen. At most one per call.
        """
        if not state.pipes:
            pipe = self.spawn(state, play_width + self.first_offset, play_height)
            logger.debug("Added first pipe at x=%s", pipe.x)
            return pipe

        newest = state.pipes[-1]
        if newest.x < play_width / 2:
            return self.spawn(state, newest.x + self.spacing, play_height)
        return None

    def advance(self, state: GameState):
        """Moves every pipe left by one fixed step."""
        for pipe in state.pipes:
            pipe.x = round(pipe.x - self.speed, PRECISION)

    def reap_offscreen(self, state: GameState) -> Optional[Pipe]:
        """Drops the oldest pipe once its trailing edge is past the left edge."""
        if state.pipes and state.pipes[0].x + self.width < 0:
            return state.pipes.pop(0)
        return None

    def score_passed(self, state: GameState, bird_x: float) -> int:
        """Scores every pipe whose trailing edge is behind the bird, once each."""
        scored = 0
        for pipe in state.pipes:
            if not pipe.scored and pipe.x + self.width < bird_x:
                pipe.scored = True
                scored += 1
        state.score += scored
        return scored

    def segment_boxes(self, pipe: Pipe) -> Tuple[Box, Box]:
        """Returns the (top, bottom) segment boxes of a pipe."""
        top_bottom_y = pipe.gap_y - self.gap / 2
        bottom_top_y = pipe.gap_y + self.gap / 2
        top = Box(pipe.x, top_bottom_y - self.height, pipe.x + self.width, top_bottom_y)
        bottom = Box(pipe.x, bottom_top_y, pipe.x + self.width, bottom_top_y + self.height)
        return top, bottom
