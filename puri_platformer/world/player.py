"""
Player entity - the single controllable actor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puri_engine.core import Entity
from puri_engine.graphics.animation import AnimationId
from puri_platformer.components import (
    Transform,
    Hitbox,
    VerticalMotion,
    Grounded,
    SpriteAnimation,
    FrameTimer,
)

if TYPE_CHECKING:
    from puri_engine.graphics.animation import AnimationRegistry


logger = logging.getLogger(__name__)


PLAYER_HITBOX = (18.0, 32.0)


class Player(Entity):
    """
    The player: position, hitbox, vertical state, grounded flag and
    an animated sprite, all attached at construction.

    The typed properties below are the only way systems reach these
    components, so a Player can never be missing one of them.
    """

    TAG = "player"

    def __init__(
        self,
        animation: SpriteAnimation,
        x: float = 0.0,
        y: float = 0.0,
        hitbox: tuple[float, float] = PLAYER_HITBOX,
        name: str = "Player",
    ):
        super().__init__(name)
        self._transform = self.add(Transform(x=x, y=y, z=1.0))
        self._hitbox = self.add(Hitbox(width=hitbox[0], height=hitbox[1]))
        self._motion = self.add(VerticalMotion())
        self._grounded = self.add(Grounded(value=True))
        self._animation = self.add(animation)
        self._frame_timer = self.add(FrameTimer())
        self.add_tag(self.TAG)

    @classmethod
    def spawn(
        cls,
        registry: AnimationRegistry,
        animation_id: AnimationId = AnimationId.PLAYER_IDLE,
        x: float = 0.0,
        y: float = 0.0,
    ) -> Player:
        """
        Build a player whose sprite comes from the registry.

        Raises:
            KeyError: If animation_id is not registered
        """
        sheet, descriptor = registry.get(animation_id)
        player = cls(
            SpriteAnimation.from_registry_entry(animation_id, sheet, descriptor),
            x=x,
            y=y,
        )
        logger.info("Spawned %s at (%.1f, %.1f) with %s", player.name, x, y, animation_id.value)
        return player

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def hitbox(self) -> Hitbox:
        return self._hitbox

    @property
    def motion(self) -> VerticalMotion:
        return self._motion

    @property
    def grounded(self) -> Grounded:
        return self._grounded

    @property
    def animation(self) -> SpriteAnimation:
        return self._animation

    @property
    def frame_timer(self) -> FrameTimer:
        return self._frame_timer
