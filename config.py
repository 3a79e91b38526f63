"""
Configuration settings for Rock Field.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Window / field settings (the field is centred on the origin, y up)
FIELD_WIDTH = 800
FIELD_HEIGHT = 600
FPS = 60
PROTOTYPE_VERSION = "1.0.0"
GAME_TITLE = f"Rock Field (Prototype v{PROTOTYPE_VERSION})"

# Radius of the no-spawn circle around the field centre
SAFE_ZONE_SIZE = 100.0

# Colors
COLOR_SPACE = (5, 7, 10)
COLOR_ASTEROID = (245, 245, 245)
COLOR_ASTEROID_FILL = (40, 40, 48)
COLOR_DEBRIS = (220, 220, 220)
COLOR_UI = (200, 200, 200)

# Asteroid generation
ASTEROID_RADIUS_PER_SIZE = 16.0
ASTEROID_RADIUS_JITTER = 0.05  # actual radius within +/-5% of size * radius_per_size
ASTEROID_MIN_SPEED = 60.0
ASTEROID_MAX_SPEED = 180.0  # divided by size**2
ASTEROID_MAX_SPIN = 0.5  # radians/sec either way
ASTEROID_MIN_VERTICES = 10
ASTEROID_MAX_VERTICES = 16
ASTEROID_ANGLE_JITTER = 0.3  # fraction of a vertex sector
ASTEROID_VERTEX_RADIUS_JITTER = 0.2

# Initial population
START_COUNT_MIN = 2
START_COUNT_MAX = 3
START_SIZE_MIN = 4
START_SIZE_MAX = 5

# Fission
SPLIT_CHILDREN_MIN = 1
SPLIT_CHILDREN_MAX = 3

# Debris
DEBRIS_MIN_SPEED = 20.0
DEBRIS_MAX_SPEED = 80.0
DEBRIS_MIN_LIFE = 0.35
DEBRIS_MAX_LIFE = 0.6

# Determinism / debugging
SIM_SEED = int(os.getenv("ROCKFIELD_SEED", "1"))
DEBUG_SIM = os.getenv("ROCKFIELD_DEBUG", "0").strip().lower() in ("1", "true", "yes", "on")
