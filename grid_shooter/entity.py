"""
Entities
=========
One entity type for every game object. The variant is carried in
Entity.kind; creatures additionally carry a Health component.

Variant-specific behaviour (expiry, one-shot velocity) is looked up by
kind instead of being spread across subclasses.
"""

from typing import Callable, Dict, Iterable, Optional

from .components import EntityKind, Health, Sprite
from .grid import BLACK, BLANK, WHITE
from .point import Point


class Entity:
    """
    A sprite on the playfield with a position, velocity and expiry state.

    Holds a non-owning reference to the game for bounds (max_row, max_col)
    and for the grid it draws into.
    """

    def __init__(self, game, entity_id: int, kind: EntityKind, shape: Iterable[str],
                 location: Optional[Point] = None, velocity: Optional[Point] = None,
                 hp: Optional[int] = None, color: int = WHITE):
        self.game = game
        self.id = entity_id
        self.kind = kind
        self.sprite = Sprite(shape=list(shape))
        self.sprite.fill(color)
        self.health = Health(hp) if hp is not None else None
        self.velocity = velocity if velocity is not None else Point(0, 0)
        self.frame = 0
        self._expiring = False
        self._location = Point(0, 0)
        self.previous_location = Point(0, 0)
        if location is not None:
            self.location = location

    def __repr__(self) -> str:
        return f'Entity(id={self.id}, kind={self.kind.name}, location={self._location})'

    # -------------------------------------------------------------------------
    # Position
    # -------------------------------------------------------------------------

    @property
    def shape(self):
        return self.sprite.shape

    @property
    def color_map(self):
        return self.sprite.colors()

    @property
    def location(self) -> Point:
        """Top-left cell of the sprite."""
        return self._location

    @location.setter
    def location(self, value: Point):
        # Clamp so the whole sprite stays on the playfield
        self.previous_location = self._location
        max_row, max_col = self._max_origin()
        self._location = Point(
            max(0, min(value.row, max_row)),
            max(0, min(value.col, max_col)),
        )

    def _max_origin(self):
        return (
            self.game.max_row - self.sprite.height + 1,
            self.game.max_col - self.sprite.width + 1,
        )

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def draw(self):
        """Erase the previous image, then paint the sprite at its location."""
        self.erase_previous_image()
        grid = self.game.grid
        origin = self._location
        colors = self.color_map
        for r, row in enumerate(self.sprite.shape):
            for c, char in enumerate(row):
                grid.fill_pixel(char, colors[r][c], origin.row + r, origin.col + c)

    def erase_previous_image(self):
        grid = self.game.grid
        origin = self.previous_location
        for r, row in enumerate(self.sprite.shape):
            for c in range(len(row)):
                grid.fill_pixel(BLANK, BLACK, origin.row + r, origin.col + c)

    def set_color(self, color: int = WHITE):
        self.sprite.fill(color)

    # -------------------------------------------------------------------------
    # Motion
    # -------------------------------------------------------------------------

    def next_frame(self):
        """Advance one tick along the current velocity."""
        self.location = self._location.shift(self.velocity)
        self.frame += 1
        if self.kind in ONE_SHOT_VELOCITY:
            self.velocity = Point(0, 0)

    def move(self, displacement: Point):
        """Move by the displacement on the next tick only."""
        if self.kind not in ONE_SHOT_VELOCITY:
            raise TypeError(f'{self.kind.name} entities cannot be moved directly')
        self.velocity = displacement

    def is_out_of_bound(self) -> bool:
        """Whether the next unclamped step would push the sprite off the playfield."""
        projected = self._location.shift(self.velocity)
        max_row, max_col = self._max_origin()
        return not (0 <= projected.row <= max_row and 0 <= projected.col <= max_col)

    def is_colliding(self, other: 'Entity') -> bool:
        """Bounding-box test using each sprite's full row and column span."""
        rows = _spans_overlap(self._location.row, self.sprite.height,
                              other.location.row, other.sprite.height)
        cols = _spans_overlap(self._location.col, self.sprite.width,
                              other.location.col, other.sprite.width)
        return rows and cols

    # -------------------------------------------------------------------------
    # Expiry
    # -------------------------------------------------------------------------

    @property
    def is_expiring(self) -> bool:
        return EXPIRY_PREDICATES[self.kind](self)

    @is_expiring.setter
    def is_expiring(self, value: bool):
        self._expiring = value


def _spans_overlap(start: int, span: int, other_start: int, other_span: int) -> bool:
    # Half-open [start, start + span); boxes that only touch do not overlap
    return start < other_start + other_span and other_start < start + span


# =============================================================================
# PER-KIND BEHAVIOUR
# =============================================================================

def _never_expires(entity: Entity) -> bool:
    return False


def _creature_expired(entity: Entity) -> bool:
    if entity._expiring:
        return True
    return entity.health is not None and entity.health.current <= 0


def _projectile_expired(entity: Entity) -> bool:
    return entity._expiring or entity.is_out_of_bound()


EXPIRY_PREDICATES: Dict[EntityKind, Callable[[Entity], bool]] = {
    EntityKind.PLAYER: _never_expires,
    EntityKind.ENEMY: _creature_expired,
    EntityKind.PROJECTILE: _projectile_expired,
}

# Kinds whose velocity only lasts for a single tick
ONE_SHOT_VELOCITY = frozenset({EntityKind.PLAYER})
