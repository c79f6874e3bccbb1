"""
constants.py: Centralized configuration for the simulation and the pygame host.
"""

# -------- Window / Host Config --------
SCREEN_WIDTH = 540
SCREEN_HEIGHT = 960
RENDER_FPS = 60                 # Upper bound on drawn frames per second
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step fed by the host
MAX_TICKS_PER_FRAME = 5         # Catch-up cap after a stall
WINDOW_TITLE = "Flappy Bird"

# -------- Bird Config --------
BIRD_X = 100                    # Fixed bird X position (left edge)
BIRD_WIDTH = 100                # Sprite bounds
BIRD_HEIGHT = 100

# -------- Pipe Config --------
PIPE_WIDTH = 250
PIPE_HEIGHT = 2400              # Each segment, top and bottom
PIPE_GAP = 350                  # Height of the passable opening
PIPE_SPEED = 5.0                # Horizontal step (pixels/tick)
PIPE_SPACING = 600              # Offset from the previous pipe's position
FIRST_PIPE_OFFSET = 500         # First pipe spawns this far past the right edge
GAP_MARGIN = 200                # Minimum gap center distance from top/bottom

# -------- Physics Config (Pixels / Tick) --------
GRAVITY_ACCEL = 0.8             # Added to velocity every tick
JUMP_IMPULSE = -12.0            # Velocity set by a flap (overrides, not additive)
PRECISION = 4                   # Decimal places kept after each step

# -------- HUD Config --------
TEXT_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)
HUD_FONT_SIZE = 50
TITLE_FONT_SIZE = 100
HINT_FONT_SIZE = 40

# -------- Asset Config --------
BIRD_IMAGE = "bird.png"
BACKGROUND_IMAGE = "background.png"
PIPE_TOP_IMAGE = "pipe_top.png"
PIPE_BOTTOM_IMAGE = "pipe_bottom.png"
BIRD_FALLBACK_COLOR = (255, 255, 0)
PIPE_FALLBACK_COLOR = (0, 255, 0)
BACKGROUND_FALLBACK_COLOR = (0, 255, 255)
