"""
Grid Renderer
==============
Bordered, fixed-size character grid with dirty-cell tracking.

Entities write into the buffer through fill_pixel(); render() then pushes
only the cells that changed since the previous render to the terminal.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Tuple
import logging

from .terminal import TerminalSurface


logger = logging.getLogger(__name__)


# 16-colour terminal palette
BLACK = 0
RED = 9
WHITE = 15

DEFAULT_COLOR = WHITE
BLANK = ' '


class InvalidDimension(ValueError):
    """Grid size outside the supported range."""


@dataclass
class Cell:
    """A single cell in the render buffer."""
    char: str = BLANK
    color: int = DEFAULT_COLOR

    def matches(self, char: str, color: int) -> bool:
        """Check if the cell already shows this character in this colour."""
        return self.char == char and self.color == color


class Grid:
    """
    Playfield of rows x cols cells surrounded by a one-cell border.

    Buffer coordinates include the top/left margins and the border;
    playfield coordinates passed to fill_pixel() do not.
    """

    TOP_MARGIN = 1
    BOTTOM_MARGIN = 0
    LEFT_MARGIN = 1
    RIGHT_MARGIN = 0
    BORDER = 1

    MIN_ROWS = 8
    MAX_ROWS = 32
    MIN_COLS = 16
    MAX_COLS = 64

    TOP_LEFT = '╔'
    TOP_RIGHT = '╗'
    BOTTOM_LEFT = '╚'
    BOTTOM_RIGHT = '╝'
    VERTICAL = '║'
    HORIZONTAL = '═'

    def __init__(self, rows: int, cols: int, surface: TerminalSurface):
        if not self.MIN_ROWS <= rows <= self.MAX_ROWS:
            logger.error('Rejected grid rows=%d', rows)
            raise InvalidDimension(
                f'The number of grid rows ({rows}) is not within the acceptable '
                f'range of values ({self.MIN_ROWS} to {self.MAX_ROWS}).'
            )
        if not self.MIN_COLS <= cols <= self.MAX_COLS:
            logger.error('Rejected grid cols=%d', cols)
            raise InvalidDimension(
                f'The number of grid columns ({cols}) is not within the acceptable '
                f'range of values ({self.MIN_COLS} to {self.MAX_COLS}).'
            )

        self.rows = rows
        self.cols = cols
        self.surface = surface
        self.height = self.TOP_MARGIN + self.BOTTOM_MARGIN + 2 * self.BORDER + rows
        self.width = self.LEFT_MARGIN + self.RIGHT_MARGIN + 2 * self.BORDER + cols
        self.cells: List[List[Cell]] = []
        self.dirty: Deque[Tuple[int, int]] = deque()

        self._init_buffer()
        self._draw_border()
        logger.info('Grid %dx%d (buffer %dx%d)', rows, cols, self.height, self.width)

    @property
    def row_offset(self) -> int:
        return self.TOP_MARGIN + self.BORDER

    @property
    def col_offset(self) -> int:
        return self.LEFT_MARGIN + self.BORDER

    @property
    def pending(self) -> int:
        """Number of queued dirty cells."""
        return len(self.dirty)

    def char_at(self, row: int, col: int) -> str:
        """Character at a buffer coordinate."""
        return self.cells[row][col].char

    def color_at(self, row: int, col: int) -> int:
        """Colour at a buffer coordinate."""
        return self.cells[row][col].color

    def initialize_window(self):
        """Hide the cursor and clear the screen."""
        self.surface.clear_screen()
        self.surface.hide_cursor()
        self.surface.flush()

    def fill_pixel(self, char: str, color: int, row: int, col: int):
        """Set a playfield cell, queueing it for the next render if it changed."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f'Cell ({row}, {col}) is outside the {self.rows}x{self.cols} playfield')

        buf_row = row + self.row_offset
        buf_col = col + self.col_offset
        cell = self.cells[buf_row][buf_col]
        if cell.matches(char, color):
            return
        cell.char = char
        cell.color = color
        self.dirty.append((buf_row, buf_col))

    def render(self):
        """Write every dirty cell to the terminal, oldest first."""
        if not self.dirty:
            return

        surface = self.surface
        previous_color = surface.foreground
        while self.dirty:
            row, col = self.dirty.popleft()
            cell = self.cells[row][col]
            surface.set_cursor(row, col)
            surface.write_char(cell.char, cell.color)
        surface.set_foreground(previous_color)
        surface.flush()

    def clear(self):
        """Blank the whole buffer, redraw the border and repaint immediately."""
        self._init_buffer()
        self._draw_border()
        logger.info('Grid cleared')
        self.render()

    def _init_buffer(self):
        """Fill the buffer with blanks and queue every cell."""
        self.cells = [
            [Cell() for _ in range(self.width)]
            for _ in range(self.height)
        ]
        for row in range(self.height):
            for col in range(self.width):
                self.dirty.append((row, col))

    def _draw_border(self):
        """Write the border glyphs straight into the buffer."""
        top = self.TOP_MARGIN
        bottom = self.TOP_MARGIN + self.BORDER + self.rows
        left = self.LEFT_MARGIN
        right = self.LEFT_MARGIN + self.BORDER + self.cols

        self._set_border(top, left, self.TOP_LEFT)
        self._set_border(top, right, self.TOP_RIGHT)
        self._set_border(bottom, left, self.BOTTOM_LEFT)
        self._set_border(bottom, right, self.BOTTOM_RIGHT)
        for row in range(top + 1, bottom):
            self._set_border(row, left, self.VERTICAL)
            self._set_border(row, right, self.VERTICAL)
        for col in range(left + 1, right):
            self._set_border(top, col, self.HORIZONTAL)
            self._set_border(bottom, col, self.HORIZONTAL)

    def _set_border(self, row: int, col: int, char: str):
        cell = self.cells[row][col]
        cell.char = char
        cell.color = DEFAULT_COLOR
