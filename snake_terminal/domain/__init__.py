"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
infrastructure concerns (terminal I/O, configuration, etc.).
"""

from .constants import (
    BORDER_CHAR, SNAKE_CHAR, FRUIT_CHAR, EMPTY_CHAR,
    READ_TIME_MS, INITIAL_LENGTH, WALL, SELF,
)
from .geometry import Point, Direction
from .snake import Snake, SnakeEmptyError, initialize_snake
from .game_state import GameState

__all__ = [
    'BORDER_CHAR', 'SNAKE_CHAR', 'FRUIT_CHAR', 'EMPTY_CHAR',
    'READ_TIME_MS', 'INITIAL_LENGTH', 'WALL', 'SELF',
    'Point', 'Direction',
    'Snake', 'SnakeEmptyError', 'initialize_snake',
    'GameState',
]
