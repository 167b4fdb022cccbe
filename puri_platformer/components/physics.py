"""
Physics components - hitboxes and the player's vertical state.
"""

from __future__ import annotations

from enum import Enum, auto

from pydantic import Field, model_validator

from puri_engine.core.component import Component


class VerticalState(Enum):
    """Where the player is in its jump/fall cycle."""
    GROUNDED = auto()   # Last descent attempt was blocked
    ASCENDING = auto()  # Spending jump energy
    FALLING = auto()    # Descending freely


class Hitbox(Component):
    """
    Axis-aligned collision rectangle centered on the entity's Transform.

    Attributes:
        width: Full width (world units, >= 0)
        height: Full height (world units, >= 0)
    """
    width: float = Field(default=0.0, ge=0.0)
    height: float = Field(default=0.0, ge=0.0)

    @property
    def half_extents(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def get_bounds(self, x: float, y: float) -> tuple[float, float, float, float]:
        """
        Get bounds when centered at (x, y).

        Returns:
            (left, bottom, right, top)
        """
        half_w, half_h = self.half_extents
        return (x - half_w, y - half_h, x + half_w, y + half_h)


class VerticalMotion(Component):
    """
    Explicit vertical state of the player.

    jump_energy is the remaining rise budget; it is positive only
    while ASCENDING and zero otherwise.
    """
    state: VerticalState = VerticalState.GROUNDED
    jump_energy: float = Field(default=0.0, ge=0.0)

    @model_validator(mode='after')
    def _energy_matches_state(self) -> VerticalMotion:
        if self.state != VerticalState.ASCENDING and self.jump_energy != 0.0:
            raise ValueError(f"jump_energy must be 0 while {self.state.name}")
        return self

    @property
    def is_ascending(self) -> bool:
        return self.state == VerticalState.ASCENDING

    # Assignments are validated one at a time, so each transition
    # orders its writes to stay valid in between.

    def begin_ascent(self, energy: float) -> None:
        """Enter ASCENDING with a fresh energy budget."""
        self.state = VerticalState.ASCENDING
        self.jump_energy = energy

    def end_ascent(self, next_state: VerticalState = VerticalState.FALLING) -> None:
        """Leave ASCENDING with the budget spent."""
        self.jump_energy = 0.0
        self.state = next_state


class Grounded(Component):
    """True when the player's height did not change since the previous tick."""
    value: bool = True
