"""
Component base class for data-only components.

Components hold state and nothing else. Systems read and write
them once per tick; rendering reads them after the tick.

Usage:
    class Transform(Component):
        x: float = 0.0
        y: float = 0.0

    class Hitbox(Component):
        width: float = Field(default=0.0, ge=0.0)
        height: float = Field(default=0.0, ge=0.0)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Pydantic gives every component:
    - validation at construction and on assignment
    - typed defaults

    Keep behaviour out of components. A helper that derives a value
    (bounds, frame duration) is fine, mutation belongs in a System.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )

    # Owning entity id, set by Entity.add
    _entity_id: int | None = None

    @property
    def entity_id(self) -> int | None:
        """Id of the entity this component is attached to."""
        return self._entity_id
