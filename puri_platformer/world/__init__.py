"""Level entities and setup."""

from puri_platformer.world.player import Player, PLAYER_HITBOX
from puri_platformer.world.obstacle import StaticObstacle
from puri_platformer.world.level import (
    PlatformerWorld,
    DEFAULT_PLATFORMS,
    spawn_map,
    spawn_player,
    build_level,
)

__all__ = [
    "Player",
    "PLAYER_HITBOX",
    "StaticObstacle",
    "PlatformerWorld",
    "DEFAULT_PLATFORMS",
    "spawn_map",
    "spawn_player",
    "build_level",
]
