"""
Tick Systems
=============
Functions run once per tick, in order, over the roster:

    collision_system -> expiry_system -> (wave respawn) -> movement_render_system
"""

import logging
from typing import List

from .components import EntityKind
from .entity import Entity
from .roster import Roster


logger = logging.getLogger(__name__)


def collision_system(roster: Roster) -> List[Entity]:
    """
    Match enemies against live projectiles.

    Each enemy consumes at most one projectile; both are flagged as
    expiring. Returns the enemies that were hit.
    """
    projectiles = list(roster.query(EntityKind.PROJECTILE))
    hits = []

    for enemy in roster.query(EntityKind.ENEMY):
        for projectile in projectiles:
            if projectile.is_expiring or not projectile.is_colliding(enemy):
                continue
            projectile.is_expiring = True
            enemy.is_expiring = True
            hits.append(enemy)
            logger.debug('Projectile %d hit enemy %d', projectile.id, enemy.id)
            break

    return hits


def expiry_system(roster: Roster) -> List[Entity]:
    """
    Remove expiring entities.

    Each one takes a final step and erases itself first, so its last
    drawn image does not linger on the grid.
    """
    def retire(entity: Entity) -> bool:
        if not entity.is_expiring:
            return False
        entity.next_frame()
        entity.erase_previous_image()
        return True

    return roster.remove_where(retire)


def movement_render_system(roster: Roster):
    """Advance every entity, then draw them in roster order."""
    for entity in roster:
        entity.next_frame()
    for entity in roster:
        entity.draw()
