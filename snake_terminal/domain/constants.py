"""
Game constants for the terminal Snake game.
"""

# Glyphs
BORDER_CHAR = '#'
SNAKE_CHAR = '*'
FRUIT_CHAR = 'o'
EMPTY_CHAR = ' '

# Game settings
READ_TIME_MS = 100  # one tick
INITIAL_LENGTH = 3
GAME_OVER_TEXT = " GAME OVER!"

# Smallest play area (border included, score row excluded) that fits the
# initial snake and a fruit
MIN_WIDTH = 3
MIN_HEIGHT = 7

# Death reasons
WALL = "wall"
SELF = "self"
