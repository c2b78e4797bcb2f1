"""Global constants for the application."""

# Frame settings
FRAME_WIDTH = 400  # Width of the output frame in pixels
FRAME_HEIGHT = 300  # Height of the output frame in pixels
TICK_DELAY_MS = 20  # Delay between ticks, ~50 ticks per second
GAME_OVER_PAUSE_MS = 1000  # Pause after the final frame before the end screen
BACKGROUND_COLOR = (0, 0, 0, 255)  # Used when no background image is supplied

# Enemy formation layout
ENEMY_COLUMNS = 8  # Enemies per row
ENEMY_ROWS = 3  # Rows in the formation
ENEMY_START_X = 100  # X of the first column
ENEMY_START_Y = 30  # Y of the front row
ENEMY_ROW_PITCH = 25  # Vertical distance between rows
ENEMY_SIZE = 30  # Column spacing, also the sweep boundary margin
ENEMY_ROW_POINTS = (30, 20, 10)  # Points per row, front row first
ENEMY_STEP_X = 3  # Pixels the formation moves per tick
ENEMY_DROP_Y = 10  # Pixels the formation drops on every flip
GROUND_Y = 180  # Leading enemy below this line ends the game

# Player
CANNON_START_X = 50
CANNON_Y = 250  # Cannon only moves horizontally
CANNON_STEP = 10  # Pixels per move event, no wall clamping
BEAM_OFFSET_X = 7  # Beam leaves the middle of the cannon
BEAM_SPEED = 10  # Pixels per tick upwards

# Bombs
BOMB_PROBABILITY = 0.005  # Chance per live enemy per tick
BOMB_SPEED = 10  # Pixels per tick downwards
BOMB_OFFSET_X = 7  # Bomb leaves the middle of the enemy

# Input
EVENT_QUEUE_SIZE = 1000  # Pending input tokens before producers start dropping

# Randomness
DEFAULT_SEED = 20  # Used only when no time-derived seed is available

# Sound cues
SHOOT_CUE = "shoot"
INVADER_KILLED_CUE = "invaderkilled"
EXPLOSION_CUE = "explosion"

# End screen
END_SCREEN_COLOR = (255, 0, 0)
END_SCREEN_BACKGROUND = (0, 0, 0)
END_SCREEN_LINE_HEIGHT = 20
END_SCREEN_TOP = 220

# Headless recordings
MAX_SIMULATION_TICKS = 5000  # Stop a recording even if the session never ends
