"""
Entity class - a container for components.

An entity has an id, a name, a set of tags and at most one
component per component type. Game code subclasses Entity to
give an actor a fixed, typed shape (see puri_platformer.world).

Usage:
    entity = Entity("crate")
    entity.add(Transform(x=10, y=0))

    transform = entity.get(Transform)
    if entity.has(Hitbox):
        ...
"""

from __future__ import annotations

from typing import TypeVar, Iterator, Any
import itertools

from puri_engine.core.component import Component


C = TypeVar('C', bound=Component)


class Entity:
    """
    A container for components.

    Entities carry no behaviour. Adding or removing a component
    while the entity lives in a World keeps the world's indices
    up to date.
    """

    _id_counter = itertools.count(1)

    def __init__(self, name: str = ""):
        self._id = next(Entity._id_counter)
        self._name = name or f"Entity_{self._id}"
        self._components: dict[type[Component], Component] = {}
        self._tags: set[str] = set()
        self._active = True
        self._world = None  # Set by World when added

    @property
    def id(self) -> int:
        """Unique entity identifier."""
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def active(self) -> bool:
        """Whether systems process this entity."""
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = value

    @property
    def world(self) -> Any:
        """The World this entity belongs to."""
        return self._world

    def add(self, component: C) -> C:
        """
        Attach a component.

        Raises:
            ValueError: If a component of the same type is attached
        """
        comp_type = type(component)

        if comp_type in self._components:
            raise ValueError(
                f"Entity {self._name} already has component {comp_type.__name__}"
            )

        component._entity_id = self._id
        self._components[comp_type] = component

        if self._world:
            self._world._on_component_added(self, component)

        return component

    def remove(self, component_type: type[C]) -> C | None:
        """Detach a component, returning it (or None if absent)."""
        component = self._components.pop(component_type, None)

        if component:
            component._entity_id = None
            if self._world:
                self._world._on_component_removed(self, component)

        return component

    def get(self, component_type: type[C]) -> C:
        """
        Get a component by type.

        Raises:
            KeyError: If the component is not attached
        """
        if component_type not in self._components:
            raise KeyError(
                f"Entity {self._name} does not have component {component_type.__name__}"
            )
        return self._components[component_type]  # type: ignore

    def try_get(self, component_type: type[C]) -> C | None:
        """Get a component by type, or None."""
        return self._components.get(component_type)  # type: ignore

    def has(self, *component_types: type[Component]) -> bool:
        """Check that every listed component type is attached."""
        return all(ct in self._components for ct in component_types)

    @property
    def components(self) -> Iterator[Component]:
        return iter(self._components.values())

    # Tags

    def add_tag(self, tag: str) -> None:
        self._tags.add(tag)
        if self._world:
            self._world._index_tag(self, tag)

    def has_tag(self, tag: str) -> bool:
        return tag in self._tags

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._tags)

    def __repr__(self) -> str:
        components = ", ".join(c.__name__ for c in self._components.keys())
        return f"{self.__class__.__name__}({self._name}, id={self._id}, components=[{components}])"

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self._id == other._id
        return False
