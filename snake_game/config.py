"""Fixed game settings. The board, speed and rules are not user-tunable."""

# ---------- Board ----------
WIDTH, HEIGHT = 40, 20          # boundary ring sits on x in {0, WIDTH}, y in {0, HEIGHT}

# ---------- Timing (seconds) ----------
FRAME_DURATION = 0.3            # one simulation tick
POLL_TIMEOUT = 0.01             # main loop wait for a command key
LISTENER_TIMEOUT = 0.05         # keyboard read slice, bounds listener shutdown
TIME_LIMIT = 60.0               # active play time per game

# ---------- Rules ----------
FOOD_COUNT = 15
WIN_SCORE = 20
MAX_SPAWN_ATTEMPTS = 10_000     # random picks before scanning for a free cell

# ---------- Markers ----------
SNAKE_CHAR = "O"
FOOD_CHAR = "*"
WALL_CHAR = "#"
EMPTY_CHAR = " "

# ---------- Keys ----------
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_ESCAPE = "KEY_ESCAPE"
KEY_ENTER = "KEY_ENTER"
KEY_PAUSE = "p"
KEY_RETRY = "r"
