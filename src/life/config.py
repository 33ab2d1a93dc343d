"""Default dimensions, timing and colors shared by the drivers."""

COLS = 70                  # grid width in cells
ROWS = 70                  # grid height in cells
CELL_SIZE = 4              # cell size in pixels

TICK_SECONDS = 0.04        # 25 ticks per second
ALIVE_PROBABILITY = 0.5    # initial seeding density

WINDOW_WIDTH = 500
WINDOW_HEIGHT = 300
WINDOW_TITLE = "Cells"

WHITE = (255, 255, 255)    # alive cells
BLACK = (0, 0, 0)          # dead cells
DARK_GREEN = (0, 100, 0)   # background
YELLOW = (255, 255, 0)     # paused UI
