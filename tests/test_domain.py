"""
Tests for the domain entities: Point, Direction, Snake and GameState.
"""

import pytest
import sys
import os
from collections import deque
from itertools import product

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_terminal.domain import (
    Point,
    Direction,
    Snake,
    SnakeEmptyError,
    GameState,
    initialize_snake,
    INITIAL_LENGTH,
)


class TestPoint:
    """Tests for the Point value type."""

    def test_points_compare_by_coordinates(self):
        """Points with the same coordinates are equal and hash alike."""
        assert Point(3, 4) == Point(3, 4)
        assert Point(3, 4) != Point(4, 3)
        assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2

    def test_point_is_immutable(self):
        """Points cannot be modified after creation."""
        point = Point(1, 2)
        with pytest.raises(AttributeError):
            point.x = 5

    @pytest.mark.parametrize("direction,expected", [
        (Direction.UP, Point(5, 4)),
        (Direction.DOWN, Point(5, 6)),
        (Direction.LEFT, Point(4, 5)),
        (Direction.RIGHT, Point(6, 5)),
    ])
    def test_offset(self, direction, expected):
        """offset() moves one cell; y grows downwards."""
        assert Point(5, 5).offset(direction) == expected

    def test_offset_does_not_wrap_at_zero(self):
        """Moving past the origin gives negative coordinates, not a wrapped value."""
        assert Point(0, 0).offset(Direction.UP) == Point(0, -1)
        assert Point(0, 0).offset(Direction.LEFT) == Point(-1, 0)


class TestDirection:
    """Tests for the Direction enum."""

    CANONICAL_PAIRS = {
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    }

    def test_direction_is_not_opposite_of_itself(self):
        """No direction is opposite to itself."""
        for direction in Direction:
            assert direction.is_opposite(direction) is False

    def test_only_canonical_pairs_are_opposite(self):
        """Exactly the four canonical ordered pairs are opposite."""
        opposite_pairs = {
            (a, b) for a, b in product(Direction, repeat=2) if a.is_opposite(b)
        }
        assert opposite_pairs == self.CANONICAL_PAIRS

    def test_remaining_pairs_are_not_opposite(self):
        """The other 12 ordered pairs are not opposite."""
        others = [
            (a, b) for a, b in product(Direction, repeat=2)
            if (a, b) not in self.CANONICAL_PAIRS
        ]
        assert len(others) == 12
        assert not any(a.is_opposite(b) for a, b in others)

    def test_opposite_property(self):
        """opposite returns the reverse direction."""
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT
        for direction in Direction:
            assert direction.opposite.opposite is direction


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization(self):
        """Snake keeps the given positions in order, head first."""
        positions = [Point(5, 5), Point(5, 6), Point(5, 7)]
        snake = Snake(positions)
        assert list(snake.positions) == positions
        assert snake.head == Point(5, 5)
        assert len(snake) == 3
        assert snake.alive is True
        assert snake.death_reason is None
        assert snake.death_tick is None

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for push front / pop back."""
        snake = Snake([Point(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_push_head_and_pop_tail(self):
        """push_head() prepends, pop_tail() removes the last segment."""
        snake = Snake([Point(5, 5), Point(5, 6)])
        snake.push_head(Point(5, 4))
        assert snake.head == Point(5, 4)
        assert Point(5, 4) in snake

        tail = snake.pop_tail()
        assert tail == Point(5, 6)
        assert Point(5, 6) not in snake
        assert list(snake) == [Point(5, 4), Point(5, 5)]

    def test_membership_matches_positions(self):
        """Membership tests agree with the ordered positions after moves."""
        snake = Snake([Point(2, 2), Point(2, 3), Point(2, 4)])
        for point in [Point(3, 2), Point(4, 2), Point(4, 3)]:
            snake.push_head(point)
            snake.pop_tail()
        for x, y in product(range(6), repeat=2):
            assert (Point(x, y) in snake) == (Point(x, y) in snake.positions)

    def test_empty_snake_head_raises(self):
        """Reading the head of an empty snake is an invariant violation."""
        snake = Snake([])
        with pytest.raises(SnakeEmptyError):
            snake.head

    def test_empty_snake_pop_raises(self):
        """Popping the tail of an empty snake is an invariant violation."""
        with pytest.raises(SnakeEmptyError):
            Snake([]).pop_tail()

    def test_kill(self):
        """kill() records the death reason and tick."""
        snake = Snake([Point(1, 1)])
        snake.kill("wall", 7)
        assert snake.alive is False
        assert snake.death_reason == "wall"
        assert snake.death_tick == 7

    def test_initialize_snake_is_vertical_and_centered(self):
        """The initial snake is three cells stacked downwards from the center."""
        snake = initialize_snake(20, 20)
        assert list(snake) == [Point(10, 10), Point(10, 11), Point(10, 12)]
        assert len(snake) == INITIAL_LENGTH

    def test_initialize_snake_odd_dimensions(self):
        """Centering uses integer division."""
        snake = initialize_snake(11, 9)
        assert list(snake) == [Point(5, 4), Point(5, 5), Point(5, 6)]


class TestGameState:
    """Tests for the GameState snapshot."""

    def make_state(self, **overrides):
        values = dict(
            tick=4,
            snake_positions=[Point(2, 2), Point(2, 3)],
            fruit=Point(3, 1),
            width=5,
            height=5,
            score=0,
            direction=Direction.UP,
        )
        values.update(overrides)
        return GameState(**values)

    def test_gamestate_initialization(self):
        """GameState keeps all attributes."""
        state = self.make_state()
        assert state.tick == 4
        assert state.snake_positions == [Point(2, 2), Point(2, 3)]
        assert state.fruit == Point(3, 1)
        assert state.width == 5
        assert state.height == 5
        assert state.direction is Direction.UP
        assert state.alive is True
        assert state.death_reason is None

    def test_print_board(self):
        """print_board() draws the border, fruit, head and body."""
        board = self.make_state().print_board()
        assert board.split("\n") == [
            "#####",
            "#  o#",
            "# @ #",
            "# * #",
            "#####",
        ]

    def test_print_board_without_fruit(self):
        """A board before fruit placement has no fruit glyph."""
        board = self.make_state(fruit=None).print_board()
        assert "o" not in board

    def test_print_board_crash_on_border(self):
        """A head that crashed into the border is shown on the border."""
        board = self.make_state(snake_positions=[Point(2, 0), Point(2, 1)]).print_board()
        assert board.split("\n")[0] == "##@##"

    def test_gamestate_repr(self):
        """GameState has a useful string representation."""
        repr_str = repr(self.make_state())
        assert "tick=4" in repr_str
        assert "length=2" in repr_str
