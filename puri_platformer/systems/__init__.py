"""
Platformer systems - logic-only processors.

One tick runs, in priority order:
    MovementSystem -> JumpSystem -> FallSystem
    -> GroundDetectionSystem -> AnimationSystem
Rendering runs afterwards and never feeds back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from puri_platformer.config import DEFAULT_PHYSICS, PhysicsConfig
from puri_platformer.systems.base import PlayerSystem
from puri_platformer.systems.collision import check_hit, first_hit
from puri_platformer.systems.movement import MovementSystem
from puri_platformer.systems.jump import JumpSystem
from puri_platformer.systems.fall import FallSystem
from puri_platformer.systems.ground import GroundDetectionSystem
from puri_platformer.systems.animation import AnimationSystem, AnimationEvent

if TYPE_CHECKING:
    from puri_engine.core import System, World
    from puri_engine.input.handler import ActionInput


def create_simulation_systems(
    input_source: ActionInput,
    config: PhysicsConfig = DEFAULT_PHYSICS,
) -> list[System]:
    """The per-tick systems, in tick order."""
    return [
        MovementSystem(input_source, config),
        JumpSystem(input_source, config),
        FallSystem(config),
        GroundDetectionSystem(),
        AnimationSystem(),
    ]


def install_simulation(
    world: World,
    input_source: ActionInput,
    config: PhysicsConfig = DEFAULT_PHYSICS,
) -> list[System]:
    """Add the per-tick systems to a world."""
    systems = create_simulation_systems(input_source, config)
    for system in systems:
        world.add_system(system)
    return systems


__all__ = [
    "PlayerSystem",
    "check_hit",
    "first_hit",
    "MovementSystem",
    "JumpSystem",
    "FallSystem",
    "GroundDetectionSystem",
    "AnimationSystem",
    "AnimationEvent",
    "create_simulation_systems",
    "install_simulation",
]
