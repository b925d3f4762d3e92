"""
Entity Roster
==============
Ordered collection of live entities. Order is draw order: entities
earlier in the roster are painted first.
"""

from typing import Callable, Iterator, List, Optional

from .components import EntityKind
from .entity import Entity


class Roster:
    """
    Owns every entity in a game session and hands out entity IDs.

    IDs are unique for the lifetime of the roster and never reused.
    """

    def __init__(self):
        self._next_entity_id: int = 0
        self._entities: List[Entity] = []

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __getitem__(self, index: int) -> Entity:
        return self._entities[index]

    def next_id(self) -> int:
        """Reserve the next entity ID."""
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        return entity_id

    def add(self, entity: Entity) -> Entity:
        """Append an entity (drawn last)."""
        self._entities.append(entity)
        return entity

    def add_front(self, entity: Entity) -> Entity:
        """Insert an entity at the front (drawn first)."""
        self._entities.insert(0, entity)
        return entity

    def query(self, kind: EntityKind) -> Iterator[Entity]:
        """Yield all entities of a kind, in roster order."""
        for entity in self._entities:
            if entity.kind is kind:
                yield entity

    def count(self, kind: Optional[EntityKind] = None) -> int:
        if kind is None:
            return len(self._entities)
        return sum(1 for _ in self.query(kind))

    def remove_where(self, predicate: Callable[[Entity], bool]) -> List[Entity]:
        """Drop every entity matching the predicate and return them in order."""
        removed = []
        kept = []
        for entity in self._entities:
            if predicate(entity):
                removed.append(entity)
            else:
                kept.append(entity)
        self._entities = kept
        return removed
