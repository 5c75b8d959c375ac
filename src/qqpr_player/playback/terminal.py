"""
Terminal Output
===============

ANSI terminal writer used by the playback engine.

This is the ONLY place that knows about escape sequences. The engine
talks to any text stream through it, which keeps tests on io.StringIO.
"""

import sys
from typing import Optional, TextIO


# ANSI escape codes
CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


class TerminalWriter:
    """
    Writes frames and cursor/screen control sequences to a text stream.

    Attributes:
        stream: Destination stream (defaults to sys.stdout at call time)
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def hide_cursor(self) -> None:
        self._emit(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._emit(SHOW_CURSOR)

    def clear_screen(self) -> None:
        self._emit(CLEAR_SCREEN)

    def render(self, content: str) -> None:
        """Clear the screen and draw one frame."""
        # Clear screen and move cursor to top
        self._emit(CLEAR_SCREEN + content)
