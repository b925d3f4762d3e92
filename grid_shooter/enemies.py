"""
Enemy Archetypes
=================
The invader: a stationary 4x4 block glyph with a single hit point.
"""

from .components import EntityKind
from .config import ENEMY_HP
from .entity import Entity
from .grid import WHITE
from .point import Point


ENEMY_SHAPE = [
    '▐██▌',
    '█▐▌█',
    '████',
    '▌▌▐▐',
]


def create_enemy(game, location: Point, color: int = WHITE, hp: int = ENEMY_HP) -> Entity:
    """Create an enemy at a location with zero velocity."""
    return Entity(
        game,
        game.entities.next_id(),
        EntityKind.ENEMY,
        ENEMY_SHAPE,
        location=location,
        velocity=Point(0, 0),
        hp=hp,
        color=color,
    )
