#!/usr/bin/env python3
"""
flappy_client.py

Pygame host for the simulation: sprites, drawing, tap input and the frame loop.
The game rules live in game_engine; this module only feeds it taps and ticks
and draws whatever state it holds.
"""

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, TICK_TIME, MAX_TICKS_PER_FRAME,
    WINDOW_TITLE, TEXT_COLOR, GAME_OVER_COLOR, HUD_FONT_SIZE, TITLE_FONT_SIZE,
    HINT_FONT_SIZE, BIRD_IMAGE, BACKGROUND_IMAGE, PIPE_TOP_IMAGE,
    PIPE_BOTTOM_IMAGE, BIRD_FALLBACK_COLOR, PIPE_FALLBACK_COLOR,
    BACKGROUND_FALLBACK_COLOR
)
from .data_models import GameState, Phase
from .game_engine import GameEngine
from .pipe_stream import PipeStream

logger = logging.getLogger(__name__)

TAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


# ----------------- Assets -----------------

def solid_surface(size: Optional[Tuple[int, int]], color) -> pygame.Surface:
    surface = pygame.Surface(size or (SCREEN_WIDTH, SCREEN_HEIGHT))
    surface.fill(color)
    return surface


def load_image(path: Path, size: Optional[Tuple[int, int]], fallback_color) -> pygame.Surface:
    """
    Loads a sprite scaled to size. A missing or unreadable file becomes a
    solid surface of fallback_color so the game stays playable.
    """
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        logger.warning("Error loading %s: %s. Using fallback color.", path, e)
        return solid_surface(size, fallback_color)

    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    if size is not None:
        image = pygame.transform.scale(image, size)
    return image


@dataclass
class Sprites:
    bird: pygame.Surface
    background: pygame.Surface
    pipe_top: pygame.Surface
    pipe_bottom: pygame.Surface

    @classmethod
    def load(cls, asset_dir: Optional[Path], engine: GameEngine) -> "Sprites":
        """Loads sprites from asset_dir, or plain colored shapes when it is None."""
        physics, stream = engine.physics, engine.stream
        bird_size = (int(physics.bird_width), int(physics.bird_height))
        pipe_size = (int(stream.width), int(stream.height))
        if asset_dir is None:
            return cls(
                bird=solid_surface(bird_size, BIRD_FALLBACK_COLOR),
                background=solid_surface(None, BACKGROUND_FALLBACK_COLOR),
                pipe_top=solid_surface(pipe_size, PIPE_FALLBACK_COLOR),
                pipe_bottom=solid_surface(pipe_size, PIPE_FALLBACK_COLOR),
            )
        return cls(
            bird=load_image(asset_dir / BIRD_IMAGE, bird_size, BIRD_FALLBACK_COLOR),
            background=load_image(asset_dir / BACKGROUND_IMAGE, None, BACKGROUND_FALLBACK_COLOR),
            pipe_top=load_image(asset_dir / PIPE_TOP_IMAGE, pipe_size, PIPE_FALLBACK_COLOR),
            pipe_bottom=load_image(asset_dir / PIPE_BOTTOM_IMAGE, pipe_size, PIPE_FALLBACK_COLOR),
        )


# ----------------- Viewport -----------------

class DisplayViewport:
    """Play area bound to the live display surface; follows window resizes."""

    @property
    def width(self) -> float:
        return float(pygame.display.get_surface().get_width())

    @property
    def height(self) -> float:
        return float(pygame.display.get_surface().get_height())


def is_tap(event) -> bool:
    """True for the events that count as the single game action."""
    if event.type == pygame.KEYDOWN:
        return event.key in TAP_KEYS
    if event.type == pygame.MOUSEBUTTONDOWN:
        # Touches also arrive as FINGERDOWN; skip their emulated mouse clicks.
        return event.button == 1 and not getattr(event, "touch", False)
    return event.type == pygame.FINGERDOWN


# ----------------- Game Client (rendering / loop) -----------------

class FlappyClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 fps: int = RENDER_FPS, seed: Optional[int] = None,
                 asset_dir: Optional[Path] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        # --- Game Logic ---
        stream = PipeStream()
        stream.rng.seed(seed)
        self.engine = GameEngine(viewport=DisplayViewport(), stream=stream)
        self.state: GameState = self.engine.new_state()

        self.sprites = Sprites.load(asset_dir, self.engine)
        self._background_cache: Optional[pygame.Surface] = None

        self.hud_font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.title_font = pygame.font.Font(None, TITLE_FONT_SIZE)
        self.hint_font = pygame.font.Font(None, HINT_FONT_SIZE)

        # Time Management
        self.fps = fps
        self.clock = pygame.time.Clock()
        self.tick_timer = 0.0

    def run(self, max_frames: Optional[int] = None):
        """The main client execution loop. Stops after max_frames if given."""
        frames = 0
        running = True
        while running:
            self.tick_timer += self.clock.tick(self.fps) / 1000.0

            # Input is applied between ticks, never during one
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif is_tap(event):
                    self.engine.handle_tap(self.state)

            # --- Simulation (Fixed Timestep) ---
            ticks = 0
            while self.tick_timer >= TICK_TIME and ticks < MAX_TICKS_PER_FRAME:
                self.tick_timer -= TICK_TIME
                self.engine.tick(self.state)
                ticks += 1
            if self.tick_timer >= TICK_TIME:
                # Still behind after the cap: drop the backlog
                self.tick_timer = 0.0

            self._draw_game()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False

        pygame.quit()

    def _background(self) -> pygame.Surface:
        """Background stretched to the window, rescaled only when the size changes."""
        size = self.screen.get_size()
        if self._background_cache is None or self._background_cache.get_size() != size:
            self._background_cache = pygame.transform.scale(self.sprites.background, size)
        return self._background_cache

    def _blit_centered(self, surface: pygame.Surface, center_y: float):
        self.screen.blit(surface, (self.screen.get_width() // 2 - surface.get_width() // 2,
                                   int(center_y) - surface.get_height() // 2))

    def _draw_game(self):
        """Renders the game state using Pygame."""
        self.screen = pygame.display.get_surface()
        screen = self.screen
        height = screen.get_height()
        state = self.state

        screen.blit(self._background(), (0, 0))

        if state.phase is Phase.NOT_STARTED:
            start = self.hud_font.render("Tap to Start", True, TEXT_COLOR)
            self._blit_centered(start, height / 2)
            pygame.display.flip()
            return

        # Draw Pipes
        for pipe in state.pipes:
            top, bottom = self.engine.stream.segment_boxes(pipe)
            screen.blit(self.sprites.pipe_top, (int(top.left), int(top.top)))
            screen.blit(self.sprites.pipe_bottom, (int(bottom.left), int(bottom.top)))

        # Draw Bird
        screen.blit(self.sprites.bird, (int(self.engine.physics.bird_x), int(state.bird.y)))

        # HUD
        score_text = self.hud_font.render(f"Score: {state.score}", True, TEXT_COLOR)
        screen.blit(score_text, (50, 50))

        if state.phase is Phase.OVER:
            over = self.title_font.render("Game Over", True, GAME_OVER_COLOR)
            self._blit_centered(over, height / 2)
            hint = self.hint_font.render("Tap to Restart", True, TEXT_COLOR)
            self._blit_centered(hint, height / 2 + 100)

        pygame.display.flip()


# ----------------- Command Line -----------------

def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="flappy", description="Tap to keep the bird between the pipes.")
    ap.add_argument("--width", type=positive_int, default=SCREEN_WIDTH)
    ap.add_argument("--height", type=positive_int, default=SCREEN_HEIGHT)
    ap.add_argument("--fps", type=positive_int, default=RENDER_FPS)
    ap.add_argument("--seed", type=int, default=None, help="seed for the pipe gap positions")
    ap.add_argument("--assets", type=Path, default=None,
                    help="directory holding bird.png, background.png, pipe_top.png, pipe_bottom.png "
                         "(default: plain colored shapes)")
    ap.add_argument("--headless-frames", type=positive_int, default=None,
                    help="run this many frames without a visible window, then exit")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.headless_frames is not None:
        os.environ["SDL_VIDEODRIVER"] = "dummy"

    client = FlappyClient(width=args.width, height=args.height, fps=args.fps,
                          seed=args.seed, asset_dir=args.assets)
    client.run(max_frames=args.headless_frames)


if __name__ == "__main__":
    main()
