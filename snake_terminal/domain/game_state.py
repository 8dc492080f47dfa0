"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional

from .constants import BORDER_CHAR, EMPTY_CHAR, FRUIT_CHAR, SNAKE_CHAR
from .geometry import Direction, Point


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of ticks played so far
        snake_positions: list of Points, head first
        fruit: position of the fruit, or None before it is placed
        width, height: board dimensions (border included, score row excluded)
        score: snake length minus the initial length
        direction: the direction the snake is moving in
        alive: whether the snake is still alive
        death_reason: 'wall' or 'self' once the snake has crashed
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Point],
        fruit: Optional[Point],
        width: int,
        height: int,
        score: int,
        direction: Direction,
        alive: bool = True,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.snake_positions = snake_positions
        self.fruit = fruit
        self.width = width
        self.height = height
        self.score = score
        self.direction = direction
        self.alive = alive
        self.death_reason = death_reason

    def print_board(self) -> str:
        """
        Returns a string representation of the board using the on-screen glyphs:
        # = border
        o = fruit
        * = snake body
        @ = snake head
        Rows are printed top to bottom, as they appear in the terminal.
        """
        board = [[EMPTY_CHAR for _ in range(self.width)] for _ in range(self.height)]

        for x in range(self.width):
            board[0][x] = BORDER_CHAR
            board[self.height - 1][x] = BORDER_CHAR
        for y in range(self.height):
            board[y][0] = BORDER_CHAR
            board[y][self.width - 1] = BORDER_CHAR

        if self.fruit is not None:
            board[self.fruit.y][self.fruit.x] = FRUIT_CHAR

        for pos_idx, point in enumerate(self.snake_positions):
            # A crashing head may sit on (or past) the border
            if not (0 <= point.x < self.width and 0 <= point.y < self.height):
                continue
            board[point.y][point.x] = '@' if pos_idx == 0 else SNAKE_CHAR

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, fruit={self.fruit}, "
            f"length={len(self.snake_positions)}, score={self.score}, alive={self.alive}>"
        )
