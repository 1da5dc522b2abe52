"""
ANSI terminal output for the waterfall.

Everything is queued into a frame buffer and written in one go by flush().
"""
import os
import sys
from typing import List, Optional, Tuple

from .color import Color

# ANSI escape helpers
CSI = "\x1b["


class TerminalError(Exception):
    """A terminal operation failed; ``operation`` says which one."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        msg = operation if cause is None else f"{operation}: {cause}"
        super().__init__(msg)


def terminal_size(stream=None) -> Tuple[int, int]:
    stream = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError, AttributeError) as e:
        raise TerminalError("determine terminal size", e) from e
    return size.columns, size.lines


def set_rgb(color: Color) -> str:
    # 38;2 is truecolor foreground
    return f"{CSI}38;2;{color.r};{color.g};{color.b}m"


def set_bg_rgb(color: Color) -> str:
    return f"{CSI}48;2;{color.r};{color.g};{color.b}m"


class AnsiTerminal:
    def __init__(self, stream=None, size: Optional[Tuple[int, int]] = None):
        self.stream = stream if stream is not None else sys.stdout
        if size is None:
            size = terminal_size(self.stream)
        self.width, self.height = size
        self._frame: List[str] = []

    def hide_cursor(self):
        self._frame.append(CSI + '?25l')

    def show_cursor(self):
        self._frame.append(CSI + '?25h')

    def move_home(self):
        self._frame.append(CSI + 'H')

    def set_foreground(self, color: Color):
        self._frame.append(set_rgb(color))

    def set_background(self, color: Color):
        self._frame.append(set_bg_rgb(color))

    def put(self, character: str):
        self._frame.append(character)

    def flush(self):
        frame = ''.join(self._frame)
        self._frame = []
        try:
            self.stream.write(frame)
        except (OSError, ValueError) as e:
            raise TerminalError("write glyphs", e) from e
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise TerminalError("flush output", e) from e

    def restore(self):
        """Drop any partial frame, reset colors, show the cursor and clear the screen."""
        self._frame = []
        self._frame.append(CSI + '0m')
        self.show_cursor()
        self._frame.append(CSI + '2J' + CSI + 'H')
        self.flush()
