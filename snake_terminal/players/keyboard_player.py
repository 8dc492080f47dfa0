"""
Keyboard player - steers with the arrow keys or WASD.
"""

from typing import Dict, Optional

from snake_terminal.domain.geometry import Direction
from .base import Player

KEY_BINDINGS: Dict[str, Direction] = {
    'KEY_UP': Direction.UP,
    'KEY_DOWN': Direction.DOWN,
    'KEY_LEFT': Direction.LEFT,
    'KEY_RIGHT': Direction.RIGHT,
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}


class KeyboardPlayer(Player):
    """
    Maps arrow keys and lowercase w/a/s/d to directions. Any other key is ignored.
    """

    def __init__(self, bindings: Optional[Dict[str, Direction]] = None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)

    def get_move(self, key: Optional[str]) -> Optional[Direction]:
        if key is None:
            return None
        return self.bindings.get(key)
