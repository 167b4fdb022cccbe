"""
Tuning constants for player physics.

All distances are world units, all times seconds.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


MOVE_SPEED = 100.0
FALL_SPEED = 98.0
JUMP_ENERGY = 100.0


class PhysicsConfig(BaseModel):
    """
    Player physics tuning.

    Attributes:
        move_speed: Horizontal speed while a move action is held
        fall_speed: Constant descent speed (no acceleration)
        jump_energy: Rise budget granted by a jump
        jump_speed_factor: Ascent speed as a multiple of fall_speed
        released_drain_factor: Energy drain multiplier once jump is released
        allow_air_jump: Whether a jump can start while falling
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    move_speed: float = Field(default=MOVE_SPEED, ge=0.0)
    fall_speed: float = Field(default=FALL_SPEED, ge=0.0)
    jump_energy: float = Field(default=JUMP_ENERGY, gt=0.0)
    jump_speed_factor: float = Field(default=2.0, ge=0.0)
    released_drain_factor: float = Field(default=2.0, ge=1.0)
    allow_air_jump: bool = True


DEFAULT_PHYSICS = PhysicsConfig()
