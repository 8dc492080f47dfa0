"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, Optional, Set

from .constants import INITIAL_LENGTH
from .geometry import Point


class SnakeEmptyError(RuntimeError):
    """Raised when the head or tail of a snake with no segments is requested."""


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Points from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: 'wall' or 'self' once the snake has crashed
        death_tick: the tick number when the snake died
    """

    def __init__(self, positions: Iterable[Point]):
        self.positions = deque(positions)
        # Mirrors `positions` for O(1) membership tests.
        self._occupied: Set[Point] = set(self.positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        if not self.positions:
            raise SnakeEmptyError("Snake is empty")
        return self.positions[0]

    def push_head(self, point: Point) -> None:
        self.positions.appendleft(point)
        self._occupied.add(point)

    def pop_tail(self) -> Point:
        """Remove and return the last segment."""
        if not self.positions:
            raise SnakeEmptyError("Snake is empty")
        tail = self.positions.pop()
        self._occupied.discard(tail)
        return tail

    def kill(self, reason: str, tick: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_tick = tick

    def __contains__(self, point: Point) -> bool:
        return point in self._occupied

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake len={len(self.positions)}, alive={self.alive}>"


def initialize_snake(width: int, height: int, length: int = INITIAL_LENGTH) -> Snake:
    """
    Build a vertical snake centered on the board, head on top.

    The snake occupies x = width // 2 and y = height // 2 .. height // 2 + length - 1.
    """
    middle_width = width // 2
    middle_height = height // 2
    return Snake(Point(middle_width, y) for y in range(middle_height, middle_height + length))
