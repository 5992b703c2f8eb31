"""Entities and the system that owns and updates them."""

from __future__ import annotations

from typing import TypeVar

E = TypeVar("E", bound="Entity")


class Entity:
    """Base class for game objects managed by an :class:`EntitySystem`."""

    def __init__(self) -> None:
        self._type_key: type | None = None
        self._entity_system: EntitySystem | None = None
        self.age: float = 0.0

    def release(self) -> None:
        """Schedule this entity for removal at the next system update."""
        if self._entity_system is None:
            raise RuntimeError("entity is not owned by an entity system")
        self._entity_system._remove_entity(self)

    @property
    def entity_system(self) -> EntitySystem | None:
        return self._entity_system

    def on_create(self) -> None:
        """Called once, right after the entity is registered; resets its age."""
        self.age = 0.0

    def on_update(self, delta_time: float) -> None:
        """Called once per frame with the elapsed seconds; advances its age."""
        self.age += delta_time


class EntitySystem:
    """Creates entities, updates them every frame and removes released ones."""

    def __init__(self) -> None:
        self._entities: dict[type, dict[Entity, None]] = {}
        self._to_destroy: dict[Entity, None] = {}

    def create_entity(self, entity_type: type[E]) -> E:
        if not (isinstance(entity_type, type) and issubclass(entity_type, Entity)):
            raise TypeError("entity_type must derive from Entity")
        entity = entity_type()
        self._entities.setdefault(entity_type, {})[entity] = None
        entity._type_key = entity_type
        entity._entity_system = self
        entity.on_create()
        return entity

    def _remove_entity(self, entity: Entity) -> None:
        self._to_destroy[entity] = None

    def update(self, delta_time: float) -> None:
        """Drop released entities, then update every remaining one."""
        for entity in self._to_destroy:
            group = self._entities.get(entity._type_key)
            if group is not None:
                group.pop(entity, None)
        self._to_destroy.clear()

        for entity in self.entities():
            entity.on_update(delta_time)

    def entities(self) -> list[Entity]:
        """All live entities, grouped by type in creation order."""
        return [e for group in self._entities.values() for e in group]