"""
Flappy: a side-scrolling tap-to-fly game.

The simulation (data_models, physics_core, pipe_stream, game_engine) has no
pygame dependency; flappy_client hosts it in a pygame window.
"""

from .data_models import Bird, Box, GameState, Phase, Pipe, Viewport
from .game_engine import GameEngine
from .physics_core import PhysicsCore
from .pipe_stream import PipeStream

__all__ = [
    "Bird", "Box", "GameState", "Phase", "Pipe", "Viewport",
    "GameEngine", "PhysicsCore", "PipeStream",
]
