# --- Constants ---
WIDTH, HEIGHT = 500, 500
FPS = 60

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BACKGROUND_COLOR = BLACK

# Radial fade for a single particle: (offset, (r, g, b, alpha 0..1))
PARTICLE_GRADIENT_STOPS = (
    (0.0, (255, 255, 255, 0.5)),
    (0.5, (255, 255, 255, 0.25)),
    (1.0, (255, 255, 255, 0.0)),
)

# --- Emitter defaults ---
EMITTER_MAX_AMOUNT = 100
EMITTER_CREATION_AMOUNT = 1
EMITTER_PARTICLE_SIZE = 50
EMITTER_SCATTER = 1.5
EMITTER_FORCE = 5

# --- Mouse wheel tuning ---
WHEEL_DELTA_PER_NOTCH = 120  # browser wheelDelta units per notch
PARTICLE_SIZE_WHEEL_SCALE = 100
SCATTER_WHEEL_SCALE = 1000
MIN_PARTICLE_SIZE = 1
MIN_SCATTER = 0.0

# --- Logging ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_FILE = None  # e.g. 'logs/particlefx.log'

# --- Rendering ---
SPRITE_CACHE_SIZE = 128  # gradient sprites kept, one per radius

ENABLE_CONTROL_PANEL = True
