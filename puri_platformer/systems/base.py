"""
Base class for systems that act on the player only.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterator

from puri_engine.core import System

if TYPE_CHECKING:
    from puri_platformer.world.level import PlatformerWorld
    from puri_platformer.world.player import Player


class PlayerSystem(System):
    """
    A System whose only entity is the world's Player.

    Running one without a Player raises RuntimeError: a missing
    player is a setup error, not something to skip over.
    """

    @property
    def world(self) -> PlatformerWorld:
        return super().world  # type: ignore[return-value]

    def get_entities(self) -> Iterator[Player]:
        yield self.world.player

    @abstractmethod
    def process_entity(self, entity: Player, dt: float) -> None:  # type: ignore[override]
        """Process the player for one tick."""
