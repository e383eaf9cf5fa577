"""Keeps the entities of the game and updates them every frame."""

from __future__ import annotations

from collections.abc import Iterator

from piggyplat.entity import Entity


class EntityManager:
    """Holds a list of entities and updates each of them per frame."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    def add_entity(self, entity: Entity) -> None:
        self._entities.append(entity)

    def update(self, delta_t: float) -> None:
        """Update every entity, in the order they were added."""
        for entity in self._entities:
            entity.update(delta_t)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)