"""
Transform component - world position.

World space is +x right, +y up. The renderer flips y for the screen.
"""

from __future__ import annotations

import math

from pydantic import field_validator

from puri_engine.core.component import Component


class Transform(Component):
    """
    Position in world space.

    Attributes:
        x: Horizontal position (world units)
        y: Vertical position (world units, up is positive)
        z: Draw order (higher = on top)
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @field_validator('x', 'y')
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"position must be finite, got {value}")
        return value

    @property
    def position(self) -> tuple[float, float]:
        """Get position as tuple."""
        return (self.x, self.y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = value

    def move(self, dx: float, dy: float) -> None:
        """Move by delta."""
        self.x += dx
        self.y += dy
