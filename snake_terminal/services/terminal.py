"""
Terminal I/O adapter built on blessed.

All drawing is buffered and only reaches the terminal on flush(). Any failure
of the underlying device surfaces as an OSError from the call that hit it.
"""

import logging
import time
from contextlib import ExitStack
from typing import Callable, List, Optional, Tuple

import blessed

from snake_terminal.domain.geometry import Point

logger = logging.getLogger(__name__)

# Key name reported for Esc; a terminal resize is reported as this key too.
QUIT_KEY = 'KEY_ESCAPE'


class TerminalAdapter:
    """
    Narrow wrapper around a blessed.Terminal used by the game engine.

    `clock` and `sleep` default to time.monotonic / time.sleep and can be
    replaced in tests.
    """

    def __init__(
        self,
        term: Optional[blessed.Terminal] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.term = term if term is not None else blessed.Terminal()
        self._clock = clock
        self._sleep = sleep
        self._buffer: List[str] = []
        self._modes = ExitStack()
        self._captured_size: Optional[Tuple[int, int]] = None

    def size(self) -> Tuple[int, int]:
        """Return the current terminal size as (width, height)."""
        return self.term.width, self.term.height

    def setup(self) -> None:
        """Enter cbreak mode, clear the screen and hide the cursor."""
        self._modes.enter_context(self.term.cbreak())
        self._captured_size = self.size()
        logger.debug(f"Terminal set up at {self._captured_size[0]}x{self._captured_size[1]}")
        self.write(self.term.clear)
        self.write(self.term.hide_cursor)

    def draw_at(self, point: Point, glyph: str) -> None:
        """Queue a single character at `point`."""
        if len(glyph) != 1:
            raise ValueError(f"Expected a single character glyph, got {glyph!r}")
        self.write_at(point, glyph)

    def write_at(self, point: Point, text: str) -> None:
        self._buffer.append(self.term.move_xy(point.x, point.y))
        self._buffer.append(text)

    def write(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> None:
        """Send everything queued so far to the terminal."""
        stream = self.term.stream
        if self._buffer:
            stream.write(''.join(self._buffer))
            self._buffer.clear()
        stream.flush()

    def poll_input(self, timeout_ms: int) -> Optional[str]:
        """
        Wait for one key press and return its key code, or None on timeout.

        Arrow keys and Esc come back as blessed key names ('KEY_UP', 'KEY_ESCAPE'),
        printable keys as the character itself. The call always takes at least
        `timeout_ms`; when a key arrives early the rest of the interval is slept
        so that every tick lasts the same time.
        """
        duration = timeout_ms / 1000.0
        start = self._clock()
        key = self._read_key(duration)
        elapsed = self._clock() - start
        if elapsed < duration:
            self._sleep(duration - elapsed)
        return key

    def _read_key(self, timeout: float) -> Optional[str]:
        keystroke = self.term.inkey(timeout=timeout)

        # The board was laid out for the captured size; stop instead of drawing
        # against stale bounds.
        if self._captured_size is not None and self.size() != self._captured_size:
            logger.info(f"Terminal resized from {self._captured_size} to {self.size()}, quitting")
            return QUIT_KEY

        if not keystroke:
            return None
        if keystroke.is_sequence:
            return keystroke.name
        return str(keystroke)

    def clear_all(self) -> None:
        """Clear the whole screen immediately."""
        self.write(self.term.home)
        self.write(self.term.clear)
        self.flush()

    def restore(self) -> None:
        """Show the cursor, reset attributes and leave cbreak mode."""
        self.write(self.term.normal)
        self.write(self.term.normal_cursor)
        try:
            self.flush()
        finally:
            self._modes.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False
