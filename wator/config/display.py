"""Display and UI configuration constants."""

# Pixel size of one grid cell in the viewer window
CELL_SIZE = 12

# The frame rate for the viewer loop, in frames per second
FRAME_RATE = 15

# Height of the stats strip under the grid, in pixels
HUD_HEIGHT = 28

# Width of the "=====" banners in log output
SEPARATOR_WIDTH = 60

# Colors (RGB)
WATER_COLOR = (10, 30, 50)
FISH_COLOR = (80, 220, 120)
SHARK_COLOR = (200, 40, 40)
HUD_BACKGROUND_COLOR = (0, 0, 0)
HUD_TEXT_COLOR = (230, 230, 230)
PAUSED_TEXT_COLOR = (255, 255, 100)
