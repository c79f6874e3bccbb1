"""
game_engine.py: The game state machine driving the simulation.
"""

import logging
from dataclasses import dataclass, field

from .data_models import Bird, GameState, Phase, Viewport
from .physics_core import PhysicsCore
from .pipe_stream import PipeStream

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Owns the rules, not the state: every method takes the GameState it acts on.

    NOT_STARTED --tap--> RUNNING --contact--> OVER --tap--> RUNNING
    Ticks only change anything while RUNNING.
    """
    viewport: Viewport = field(default_factory=Viewport)
    physics: PhysicsCore = field(default_factory=PhysicsCore)
    stream: PipeStream = field(default_factory=PipeStream)

    def new_state(self) -> GameState:
        return GameState(bird=Bird(y=self.viewport.height / 2))

    def reset(self, state: GameState) -> GameState:
        """Puts the run back at its start, in place, and enters RUNNING."""
        state.bird.y = self.viewport.height / 2
        state.bird.velocity = 0.0
        state.pipes.clear()
        state.score = 0
        state.ticks = 0
        state.phase = Phase.RUNNING
        return state

    def handle_tap(self, state: GameState) -> GameState:
        """Applies one tap. Taps are the only input."""
        if state.phase is Phase.RUNNING:
            self.physics.flap(state.bird)
        else:
            restarting = state.phase is Phase.OVER
            self.reset(state)
            logger.info("Run %s", "restarted" if restarting else "started")
        return state

    def tick(self, state: GameState) -> GameState:
        """
        The main simulation step. Mutates and returns the state.
        """
        if state.phase is not Phase.RUNNING:
            return state

        width = self.viewport.width
        height = self.viewport.height
        state.ticks += 1

        # 1. Move, spawn and recycle pipes
        self.stream.advance(state)
        self.stream.spawn_if_needed(state, width, height)
        self.stream.reap_offscreen(state)

        # 2. Move the bird
        self.physics.integrate(state.bird)

        # 3. Contact checks
        hit = self.physics.check_collision(
            state.bird, state.pipes, self.stream.segment_boxes)
        if hit:
            logger.debug("Collision detected at y=%s", state.bird.y)
        elif self.physics.out_of_bounds(state.bird, height):
            hit = True
            logger.debug("Bird off-screen: y=%s, height=%s", state.bird.y, height)

        # 4. Score update
        self.stream.score_passed(state, self.physics.bird_x)

        if hit:
            state.phase = Phase.OVER
            logger.info("Game over, score %d", state.score)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Final state: %s", state.to_dict())
        return state

    def step(self, state: GameState, tap: bool = False) -> GameState:
        """Applies an optional tap, then runs one tick."""
        if tap:
            self.handle_tap(state)
        return self.tick(state)
