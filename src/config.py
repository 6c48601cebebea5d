WIDTH = 480
HEIGHT = 480
TITLE = "Simple platformer"
# Pause between session loop iterations (roughly 100 ticks per second)
TICK_DELAY_MS = 10
SHOW_HUD = True
VERBOSE = False
SEED = None  # None = fresh entropy per session

# Simulation
SPAWN_DELAY = 150  # ticks between obstacle batches
SPAWN_COUNT_RANGE = (2, 10)  # half-open, obstacles per batch
OBSTACLE_SIZE_RANGE = (5, 32)  # half-open, per side
PLAYER_SIZE = (5, 5)

# Colors (RGB 0-255)
BACKGROUND_COLOR = (0, 0, 0)
OBSTACLE_COLOR = (255, 0, 0)
PLAYER_COLOR = (0, 255, 255)
HUD_COLOR = (255, 255, 255, 255)
DIALOG_BORDER_COLOR = (255, 255, 255)
DIALOG_DEFAULT_BUTTON_COLOR = (0, 255, 255)
DIALOG_SIZE = (320, 160)
DIALOG_BUTTON_SIZE = (110, 32)
