"""
Projectiles
============
Single-glyph shots fired upward from the player.
"""

import logging
from typing import List

from .components import EntityKind
from .config import KILLS_PER_BURST_SHIFT, KILLS_PER_EXTRA_PROJECTILE
from .entity import Entity
from .grid import RED
from .point import Point


logger = logging.getLogger(__name__)

PROJECTILE_SHAPE = ['|']
UPWARD = Point(-1, 0)


def create_projectile(game, location: Point, velocity: Point, color: int = RED) -> Entity:
    """Create a projectile; it expires once its next step leaves the playfield."""
    return Entity(
        game,
        game.entities.next_id(),
        EntityKind.PROJECTILE,
        PROJECTILE_SHAPE,
        location=location,
        velocity=velocity,
        color=color,
    )


def burst_size(kill_count: int) -> int:
    """One projectile, plus one more for every few kills."""
    return kill_count // KILLS_PER_EXTRA_PROJECTILE + 1


def fire(game, shooter: Entity, kill_count: int) -> List[Entity]:
    """
    Spawn a burst of projectiles just above the shooter.

    Each projectile goes to the front of the roster so it is drawn
    before the other entities. Returns the new projectiles.
    """
    spawned = []
    shift = kill_count // KILLS_PER_BURST_SHIFT
    for i in range(burst_size(kill_count)):
        bullet = create_projectile(
            game,
            shooter.location.shift(-1, 1 + i - shift),
            UPWARD,
        )
        game.entities.add_front(bullet)
        spawned.append(bullet)

    logger.debug('Fired %d projectile(s) from %s', len(spawned), shooter.location)
    return spawned
