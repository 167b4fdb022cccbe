"""
World container for entities and systems.

The World holds:
- All entities, indexed by component type and tag
- All systems, run in priority order once per tick

Game code subclasses World to keep typed handles on the entities
it cares about (see puri_platformer.world.level.PlatformerWorld).

Usage:
    world = World()
    world.add_system(DriftSystem())

    crate = world.add_entity(Entity("crate"))
    crate.add(Transform(x=100, y=100))

    # Once per tick:
    world.update(dt)
    world.render(alpha)
"""

from __future__ import annotations

import logging
from typing import Iterator

from puri_engine.core.entity import Entity
from puri_engine.core.component import Component
from puri_engine.core.system import System, RenderSystem
from puri_engine.core.events import EventBus, EngineEvent


logger = logging.getLogger(__name__)


class World:
    """
    Container for entities and systems.

    Provides:
    - Entity management (add, destroy, query)
    - System management (add, remove, ordered update)
    - Component and tag indices for queries
    - Event bus integration
    """

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus or EventBus()

        self._entities: dict[int, Entity] = {}
        self._entities_to_destroy: list[int] = []

        # component_type -> entity ids
        self._component_index: dict[type[Component], set[int]] = {}
        # tag -> entity ids
        self._tag_index: dict[str, set[int]] = {}

        self._systems: list[System] = []
        self._render_systems: list[RenderSystem] = []

    # Entity management

    def add_entity(self, entity: Entity) -> Entity:
        """
        Add an entity to this world.

        Raises:
            ValueError: If the entity is already in the world
        """
        if entity.id in self._entities:
            raise ValueError(f"Entity {entity.id} already in world")

        self._on_entity_added(entity)

        entity._world = self
        self._entities[entity.id] = entity

        for component in entity.components:
            self._index_component(entity, type(component))
        for tag in entity.tags:
            self._index_tag(entity, tag)

        self.event_bus.publish(EngineEvent.ENTITY_CREATED, entity=entity)
        return entity

    def destroy_entity(self, entity: Entity | int) -> None:
        """Mark an entity for removal at the end of the current update."""
        entity_id = entity.id if isinstance(entity, Entity) else entity

        if entity_id in self._entities and entity_id not in self._entities_to_destroy:
            self._entities_to_destroy.append(entity_id)

    def _process_destroyed_entities(self) -> None:
        for entity_id in self._entities_to_destroy:
            entity = self._entities.pop(entity_id, None)
            if entity is None:
                continue

            for component in entity.components:
                self._unindex_component(entity, type(component))
            for tag in entity.tags:
                self._unindex_tag(entity, tag)

            self._on_entity_removed(entity)
            entity._world = None
            self.event_bus.publish(EngineEvent.ENTITY_DESTROYED, entity=entity)

        self._entities_to_destroy.clear()

    def _on_entity_added(self, entity: Entity) -> None:
        """Hook for subclasses. Raise to reject the entity."""

    def _on_entity_removed(self, entity: Entity) -> None:
        """Hook for subclasses."""

    def get_entity(self, entity_id: int) -> Entity | None:
        return self._entities.get(entity_id)

    @property
    def entities(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    # Indexing

    def _index_component(self, entity: Entity, component_type: type[Component]) -> None:
        self._component_index.setdefault(component_type, set()).add(entity.id)

    def _unindex_component(self, entity: Entity, component_type: type[Component]) -> None:
        if component_type in self._component_index:
            self._component_index[component_type].discard(entity.id)

    def _on_component_added(self, entity: Entity, component: Component) -> None:
        self._index_component(entity, type(component))
        self.event_bus.publish(
            EngineEvent.COMPONENT_ADDED,
            entity=entity,
            component=component
        )

    def _on_component_removed(self, entity: Entity, component: Component) -> None:
        self._unindex_component(entity, type(component))
        self.event_bus.publish(
            EngineEvent.COMPONENT_REMOVED,
            entity=entity,
            component=component
        )

    def _index_tag(self, entity: Entity, tag: str) -> None:
        self._tag_index.setdefault(tag, set()).add(entity.id)

    def _unindex_tag(self, entity: Entity, tag: str) -> None:
        if tag in self._tag_index:
            self._tag_index[tag].discard(entity.id)

    # Queries

    def get_entities_with(self, *component_types: type[Component]) -> Iterator[Entity]:
        """Entities that have ALL of the given components, in id order."""
        if not component_types:
            return

        ids: set[int] | None = None
        for comp_type in component_types:
            found = self._component_index.get(comp_type)
            if not found:
                return
            ids = set(found) if ids is None else ids & found

        for entity_id in sorted(ids or ()):
            entity = self._entities.get(entity_id)
            if entity:
                yield entity

    def get_entities_with_tag(self, tag: str) -> Iterator[Entity]:
        for entity_id in sorted(self._tag_index.get(tag, ())):
            entity = self._entities.get(entity_id)
            if entity:
                yield entity

    # Systems

    def add_system(self, system: System) -> None:
        """
        Add a system.

        Systems run highest priority first; equal priorities run in
        the order they were added.
        """
        if isinstance(system, RenderSystem):
            self._render_systems.append(system)
            self._render_systems.sort(key=lambda s: -s.priority)
        else:
            self._systems.append(system)
            self._systems.sort(key=lambda s: -s.priority)

        system.on_add(self)
        logger.debug("Added %r", system)

    def remove_system(self, system: System) -> None:
        systems: list = self._render_systems if isinstance(system, RenderSystem) else self._systems
        if system in systems:
            systems.remove(system)
            system.on_remove()

    def get_system(self, system_type: type[System]) -> System | None:
        for system in [*self._systems, *self._render_systems]:
            if isinstance(system, system_type):
                return system
        return None

    @property
    def systems(self) -> list[System]:
        """Logic systems in execution order."""
        return list(self._systems)

    # Tick

    def update(self, dt: float) -> None:
        """
        Run one tick: every enabled logic system, in order.

        Args:
            dt: Delta time in seconds (>= 0)
        """
        for system in self._systems:
            if system.enabled:
                system.update(dt)

        self._process_destroyed_entities()

    def render(self, alpha: float) -> None:
        for system in self._render_systems:
            if system.enabled:
                system.render(alpha)

    def clear(self) -> None:
        """Remove all entities and systems."""
        for entity_id in list(self._entities.keys()):
            self.destroy_entity(entity_id)
        self._process_destroyed_entities()

        for system in [*self._systems, *self._render_systems]:
            self.remove_system(system)

        self._component_index.clear()
        self._tag_index.clear()
