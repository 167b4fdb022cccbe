"""
Ground detection - "did the player's height change since last tick?"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from puri_engine.core.world import World
from puri_platformer.events import PlatformerEvent
from puri_platformer.systems.base import PlayerSystem

if TYPE_CHECKING:
    from puri_platformer.world.player import Player


class GroundDetectionSystem(PlayerSystem):
    """
    Sets Grounded to whether y is exactly equal to last tick's y.

    This is not a contact test: a player stalled under a ceiling is
    "grounded" too. The previous height lives on this instance only
    and starts at 0.0 whenever the system is attached, so a player
    spawned off the origin reads not grounded on its first tick.
    """

    priority = 20

    def __init__(self):
        super().__init__()
        self._last_y = 0.0

    @property
    def last_y(self) -> float:
        return self._last_y

    def on_add(self, world: World) -> None:
        super().on_add(world)
        self._last_y = 0.0

    def on_remove(self) -> None:
        super().on_remove()
        self._last_y = 0.0

    def process_entity(self, entity: Player, dt: float) -> None:
        y = entity.transform.y
        current = y == self._last_y

        grounded = entity.grounded
        if current != grounded.value:
            grounded.value = current
            self.world.event_bus.publish(
                PlatformerEvent.GROUNDED_CHANGED,
                entity=entity,
                grounded=current,
            )

        self._last_y = y
