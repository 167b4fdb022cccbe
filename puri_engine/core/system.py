"""
System base class for logic processors.

Systems hold all game logic. The World runs them once per tick
in priority order (higher first), so a system's priority is its
place in the tick.

Usage:
    class DriftSystem(System):
        required_components = [Transform, Drift]
        priority = 10

        def process_entity(self, entity: Entity, dt: float) -> None:
            entity.get(Transform).x += entity.get(Drift).speed * dt
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Iterator

from puri_engine.core.component import Component

if TYPE_CHECKING:
    from puri_engine.core.entity import Entity
    from puri_engine.core.world import World


class System(ABC):
    """
    Base class for all logic systems.

    Override required_components to choose the entities to process
    and process_entity to define what happens to each of them.
    Override get_entities when the set is not a component query.
    """

    required_components: ClassVar[list[type[Component]]] = []

    # Execution order within a tick (higher = earlier)
    priority: ClassVar[int] = 0

    enabled: bool = True

    def __init__(self):
        self._world: World | None = None

    @property
    def world(self) -> World:
        """Get the world this system belongs to."""
        if self._world is None:
            raise RuntimeError(f"System {self.__class__.__name__} not attached to world")
        return self._world

    def on_add(self, world: World) -> None:
        """Called when the system is added to a world."""
        self._world = world

    def on_remove(self) -> None:
        """Called when the system is removed from a world."""
        self._world = None

    def get_entities(self) -> Iterator[Entity]:
        """Entities matching required_components."""
        if not self._world:
            return iter([])

        if not self.required_components:
            return iter(self._world.entities)

        return self._world.get_entities_with(*self.required_components)

    def update(self, dt: float) -> None:
        """
        Run this system for one tick.

        Args:
            dt: Delta time in seconds
        """
        if not self.enabled:
            return

        for entity in list(self.get_entities()):
            if entity.active:
                self.process_entity(entity, dt)

    @abstractmethod
    def process_entity(self, entity: Entity, dt: float) -> None:
        """Process a single entity."""

    def __repr__(self) -> str:
        required = ", ".join(c.__name__ for c in self.required_components)
        return f"{self.__class__.__name__}(priority={self.priority}, requires=[{required}])"


class RenderSystem(System):
    """
    Base class for render systems.

    Render systems run after the tick, read component state and
    never write it. They receive the interpolation alpha instead of dt.
    """

    def update(self, dt: float) -> None:
        """Render systems don't update - use render instead."""

    def process_entity(self, entity: Entity, dt: float) -> None:
        """Render systems don't process - use render_entity instead."""

    def render(self, alpha: float) -> None:
        """
        Render every matching entity.

        Args:
            alpha: Interpolation factor (0-1)
        """
        if not self.enabled:
            return

        self.pre_render(alpha)

        for entity in self.get_entities():
            if entity.active:
                self.render_entity(entity, alpha)

        self.post_render(alpha)

    def pre_render(self, alpha: float) -> None:
        """Called before rendering entities."""

    def post_render(self, alpha: float) -> None:
        """Called after rendering entities."""

    @abstractmethod
    def render_entity(self, entity: Entity, alpha: float) -> None:
        """Render a single entity."""
