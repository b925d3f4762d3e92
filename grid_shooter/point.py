"""
Point
======
Integer (row, column) coordinate with translation.
"""

from dataclasses import dataclass
from typing import Union


@dataclass
class Point:
    """A cell coordinate; row 0 is the top row, column 0 the left column."""
    row: int = 0
    col: int = 0

    def shift(self, d_row: Union['Point', int], d_col: int = 0,
              in_place: bool = False) -> 'Point':
        """
        Translate by (d_row, d_col), or by another point used as a vector.

        Returns a new point unless in_place is set, in which case this point
        is moved and returned.
        """
        if isinstance(d_row, Point):
            # shift(vector, in_place) form
            if isinstance(d_col, bool):
                in_place = d_col
            d_row, d_col = d_row.row, d_row.col

        if not in_place:
            return Point(self.row + d_row, self.col + d_col)

        self.row += d_row
        self.col += d_col
        return self
