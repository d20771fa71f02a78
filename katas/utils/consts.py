# IN THIS FILE: ALL CONSTANTS

# -----------------------------------------------------------------------------
# 1. ROVER DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_X = 0
DEFAULT_Y = 0

# Quarter-turn offsets applied to the heading cycle N -> E -> S -> W
TURN_RIGHT_STEPS = 1
TURN_LEFT_STEPS = -1

# -----------------------------------------------------------------------------
# 2. SERVER
# -----------------------------------------------------------------------------
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
EXECUTE_PATH = "/rover/execute"
DEFAULT_API_URL = f"http://localhost:{SERVER_PORT}{EXECUTE_PATH}"
REQUEST_TIMEOUT = 5  # seconds

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
