"""
Infrastructure services for the terminal Snake game.
"""

from .terminal import TerminalAdapter, QUIT_KEY

__all__ = ['TerminalAdapter', 'QUIT_KEY']
