"""
Platformer world and level setup.

PlatformerWorld is a World that keeps typed handles on the one
Player and on the static obstacles. build_level() spawns the
default level: a floor platform under the player.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puri_engine.core import Entity, World, EventBus
from puri_platformer.world.player import Player
from puri_platformer.world.obstacle import StaticObstacle

if TYPE_CHECKING:
    from puri_engine.graphics.animation import AnimationRegistry


logger = logging.getLogger(__name__)


# (x, y, width, height) of each platform in the default level
DEFAULT_PLATFORMS: list[tuple[float, float, float, float]] = [
    (0.0, -16.0, 200.0, 5.0),
]


class PlatformerWorld(World):
    """
    World with at most one Player and a list of StaticObstacles.

    Obstacles are kept in spawn order; collision tests iterate them
    in that order.
    """

    def __init__(self, event_bus: EventBus | None = None):
        super().__init__(event_bus)
        self._player: Player | None = None
        self._obstacles: list[StaticObstacle] = []

    def _on_entity_added(self, entity: Entity) -> None:
        if isinstance(entity, Player):
            if self._player is not None:
                raise ValueError(
                    f"World already has a player ({self._player.name}); "
                    f"cannot add {entity.name}"
                )
            self._player = entity
        elif isinstance(entity, StaticObstacle):
            self._obstacles.append(entity)

    def _on_entity_removed(self, entity: Entity) -> None:
        if entity is self._player:
            self._player = None
        elif isinstance(entity, StaticObstacle) and entity in self._obstacles:
            self._obstacles.remove(entity)

    @property
    def player(self) -> Player:
        """
        The single Player.

        Raises:
            RuntimeError: If no Player has been spawned
        """
        if self._player is None:
            raise RuntimeError("World has no player; spawn one before running the simulation")
        return self._player

    @property
    def has_player(self) -> bool:
        return self._player is not None

    @property
    def obstacles(self) -> tuple[StaticObstacle, ...]:
        """Static obstacles in spawn order."""
        return tuple(self._obstacles)


def spawn_map(
    world: PlatformerWorld,
    platforms: list[tuple[float, float, float, float]] | None = None,
) -> list[StaticObstacle]:
    """Spawn the level geometry. Defaults to DEFAULT_PLATFORMS."""
    if platforms is None:
        platforms = DEFAULT_PLATFORMS

    spawned = []
    for i, (x, y, width, height) in enumerate(platforms):
        obstacle = StaticObstacle(x, y, width, height, name=f"Platform_{i}")
        world.add_entity(obstacle)
        spawned.append(obstacle)

    logger.info("Spawned %d platform(s)", len(spawned))
    return spawned


def spawn_player(world: PlatformerWorld, registry: AnimationRegistry) -> Player:
    """
    Spawn the player at the origin.

    Raises:
        KeyError: If the player animation is not registered
        ValueError: If the world already has a player
    """
    player = Player.spawn(registry)
    world.add_entity(player)
    return player


def build_level(world: PlatformerWorld, registry: AnimationRegistry) -> Player:
    """Spawn the default map and the player."""
    spawn_map(world)
    return spawn_player(world, registry)
