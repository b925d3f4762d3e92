"""
Component Definitions
======================
Plain data pieces an entity is assembled from.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from .grid import WHITE


class EntityKind(Enum):
    """Closed set of entity variants."""
    PLAYER = auto()
    ENEMY = auto()
    PROJECTILE = auto()


@dataclass
class Health:
    """Hit points of a creature."""
    current: int = 1


@dataclass
class Sprite:
    """
    Character shape and its parallel colour map.

    The shape is a list of text rows; rows may differ in length.
    """
    shape: List[str] = field(default_factory=lambda: ['?'])
    color_map: List[List[int]] = field(default_factory=list)

    @property
    def height(self) -> int:
        return len(self.shape)

    @property
    def width(self) -> int:
        """Widest row of the shape."""
        return max(len(row) for row in self.shape)

    def fill(self, color: int = WHITE):
        """Replace the colour map with a single colour sized to the shape."""
        self.color_map = [[color] * len(row) for row in self.shape]

    def colors(self) -> List[List[int]]:
        """Colour map, regenerated in white if it no longer fits the shape."""
        if len(self.color_map) != len(self.shape) or any(
            len(colors) != len(row) for colors, row in zip(self.color_map, self.shape)
        ):
            self.fill()
        return self.color_map
