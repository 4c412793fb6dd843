"""
constants.py: Centralized configuration for the simulation and the game window.
"""

# -------- Timing Config --------
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (Delta Time)
MAX_TICKS_PER_FRAME = 5         # Catch-up cap for slow frames
RENDER_FPS = 60

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
BIRD_X = 100                    # Fixed bird X position
BIRD_SIZE = 40                  # Square hitbox edge

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_SPEED = 3                  # Pixels per tick
INITIAL_GAP_HEIGHT = 300
MIN_GAP_HEIGHT = 150
GAP_SHRINK_RATE = 5             # Gap lost per point scored
MIN_PIPE_SEGMENT = 50           # Shortest visible pipe segment

MIN_PLAYFIELD_WIDTH = BIRD_X + PIPE_WIDTH

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.7                   # Velocity gained every tick
JUMP_IMPULSE = -15.0            # Velocity override on jump

# -------- Colors --------
SKY_COLOR = (0, 122, 255)
PIPE_COLOR = (52, 199, 89)
BIRD_COLOR = (255, 204, 0)
TEXT_COLOR = (255, 255, 255)
