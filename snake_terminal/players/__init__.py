"""
Player implementations for the terminal Snake game.

A player interprets the key read on each tick.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_BINDINGS

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_BINDINGS',
]
