"""
Terminal Surface
=================
The narrow set of terminal primitives the renderer and game loop need,
backed by blessed. Output is accumulated and written in one flush.
"""

import sys
from typing import List, Optional, TextIO

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")


class TerminalSurface:
    """Cursor positioning, coloured character output and non-blocking keys."""

    def __init__(self, term: Optional[Terminal] = None, stream: Optional[TextIO] = None):
        self.term = term if term is not None else Terminal()
        self.stream = stream if stream is not None else sys.stdout
        self.foreground: Optional[int] = None
        self._pending: List[str] = []

    def set_cursor(self, row: int, col: int):
        self._pending.append(self.term.move_yx(row, col))

    def set_foreground(self, color: Optional[int]):
        """Switch the foreground colour; None resets to the terminal default."""
        if color is None:
            self._pending.append(self.term.normal)
        elif color != self.foreground:
            self._pending.append(self.term.color(color))
        self.foreground = color

    def write_char(self, char: str, color: int):
        self.set_foreground(color)
        self._pending.append(char if char else ' ')

    def clear_screen(self):
        self._pending.append(self.term.home + self.term.clear)

    def hide_cursor(self):
        self._pending.append(self.term.hide_cursor)

    def restore(self):
        """Reset colours and show the cursor again."""
        self._pending.append(self.term.normal + self.term.normal_cursor)
        self.foreground = None
        self.flush()

    def flush(self):
        """Write everything queued since the last flush."""
        if not self._pending:
            return
        output = ''.join(self._pending)
        self._pending.clear()
        print(output, end='', flush=True, file=self.stream)

    def get_key_if_available(self):
        """Return the next pending keystroke, or None without blocking."""
        key = self.term.inkey(timeout=0)
        return key if key else None
