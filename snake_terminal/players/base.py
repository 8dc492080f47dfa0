"""
Base player interface for the game engine.
"""

from typing import Optional

from snake_terminal.domain.geometry import Direction
from snake_terminal.services.terminal import QUIT_KEY


class Player:
    """
    Base class/interface for player logic.

    A player turns the key code read during a tick into a decision for the
    snake: a new direction, a request to quit, or nothing.
    """

    def get_move(self, key: Optional[str]) -> Optional[Direction]:
        """
        Return the direction requested by `key`.

        Args:
            key: key code returned by TerminalAdapter.poll_input(), or None

        Returns:
            A Direction, or None when the key does not steer the snake
        """
        raise NotImplementedError

    def wants_quit(self, key: Optional[str]) -> bool:
        return key == QUIT_KEY
