# Size of chunks used to partition the world.
# CHUNK_SIZE must be a power of two; LOG2_OF_CHUNK_SIZE is used for fast division.
LOG2_OF_CHUNK_SIZE = 4
CHUNK_SIZE = 1 << LOG2_OF_CHUNK_SIZE #width, height and depth (x, y and z)

# Largest initial radius accepted by Area (signed 32-bit range).
MAX_RADIUS = 2**31 - 1

# Default world settings, overridable from the command line.
DEFAULT_SEED = 42
INITIAL_RADIUS = 2

# Terrain generation
# Noise inputs are divided by this so terrain features span many tiles.
NOISE_SCALING_FACTOR = 64.0
# Height map = noise * HEIGHT_SCALE + HEIGHT_OFFSET (noise is in [-1, 1]).
HEIGHT_SCALE = 16.0
HEIGHT_OFFSET = 0.0
# Number of grass layers on top of the stone.
TOPSOIL_DEPTH = 3

# Column generation workers (1 generates on the calling thread).
GEN_WORKERS = 1

# Lowest level printed: DEBUG, INFO, WARN or ERROR.
LOG_LEVEL = "INFO"

# Enable ANSI colors in logs.
LOG_COLOR = True

# Log area generation start/end.
LOG_GENERATION = True
# Log per-column generation timings.
LOG_COLUMNS = False
