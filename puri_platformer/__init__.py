"""
Puri Platformer - player movement, jump, fall/collision, ground
detection and sprite animation on top of puri_engine.

Headless use (no window):
    from puri_engine.core.actions import Action
    from puri_engine.graphics import build_default_registry
    from puri_platformer import PlatformerWorld, build_level, install_simulation

    world = PlatformerWorld()
    install_simulation(world, my_input)
    player = build_level(world, build_default_registry())
    world.update(1 / 60)
"""

from puri_platformer.config import (
    MOVE_SPEED,
    FALL_SPEED,
    JUMP_ENERGY,
    PhysicsConfig,
    DEFAULT_PHYSICS,
)
from puri_platformer.events import PlatformerEvent
from puri_platformer.systems import create_simulation_systems, install_simulation
from puri_platformer.world import (
    Player,
    StaticObstacle,
    PlatformerWorld,
    build_level,
)

__version__ = "0.1.0"

__all__ = [
    "MOVE_SPEED",
    "FALL_SPEED",
    "JUMP_ENERGY",
    "PhysicsConfig",
    "DEFAULT_PHYSICS",
    "PlatformerEvent",
    "create_simulation_systems",
    "install_simulation",
    "Player",
    "StaticObstacle",
    "PlatformerWorld",
    "build_level",
]
