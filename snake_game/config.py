"""Window, timing and colour settings for the pygame front end."""

import os

# Constants
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
CELL_SIZE = 25
SCORE_BAR_ROWS = 1
FPS = 60
MAX_CATCH_UP_TICKS = 3
HEADLESS_FRAMES = 120
CAPTION = "Snake"

# Colors
BACKGROUND_COLOR = (155, 186, 90)
TEXT_COLOR = (43, 51, 26)
SNAKE_COLOR = (43, 51, 26)
FOOD_COLOR = (220, 20, 60)

# Fonts: preferred faces for SysFont, pygame's bundled font if that fails
FONT_NAME = "showcardgothic,arial"
TITLE_FONT_SIZE = 90
BUTTON_FONT_SIZE = 30
SCORE_FONT_SIZE = 20

# Welcome screen button row
BUTTON_HEIGHT = 40
BUTTON_SPACING = 60
BUTTON_PADDING = 10


def is_headless(requested: bool = False) -> bool:
    """Headless when asked on the command line or when SDL already uses the dummy driver"""
    return requested or os.environ.get('SDL_VIDEODRIVER') == 'dummy'


def use_dummy_drivers():
    """Point SDL at the dummy drivers; must run before pygame.init()"""
    os.environ['SDL_VIDEODRIVER'] = 'dummy'
    os.environ['SDL_AUDIODRIVER'] = 'dummy'
