"""
Grid geometry: points and the four movement directions.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """A zero-based (x, y) cell on the board. y grows downwards."""

    x: int
    y: int

    def offset(self, direction: "Direction") -> "Point":
        """Return the neighbouring point one cell away in `direction`."""
        dx, dy = direction.value
        return Point(self.x + dx, self.y + dy)


class Direction(Enum):
    """Movement directions, valued by their (dx, dy) unit offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: "Direction") -> bool:
        return other is self.opposite
