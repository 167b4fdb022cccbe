"""
Fall system - gravity gated by collision.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puri_platformer.config import DEFAULT_PHYSICS, PhysicsConfig
from puri_platformer.components import VerticalState
from puri_platformer.systems.base import PlayerSystem
from puri_platformer.systems.collision import first_hit

if TYPE_CHECKING:
    from puri_platformer.world.player import Player


logger = logging.getLogger(__name__)


class FallSystem(PlayerSystem):
    """
    Lowers a player that is not ascending by fall_speed * dt.

    The step is all or nothing: if the lowered hitbox would overlap
    any obstacle the player stays where it is for this tick and is
    marked GROUNDED. There is no clamping onto the surface, so the
    player comes to rest up to one step above it.
    """

    priority = 30

    def __init__(self, config: PhysicsConfig = DEFAULT_PHYSICS):
        super().__init__()
        self.config = config

    def process_entity(self, entity: Player, dt: float) -> None:
        motion = entity.motion
        if motion.is_ascending:
            return

        transform = entity.transform
        step = self.config.fall_speed * dt
        candidate = (transform.x, transform.y - step)

        blocker = first_hit(entity.hitbox, candidate, self.world.obstacles)
        if blocker is not None:
            if motion.state != VerticalState.GROUNDED:
                logger.debug("%s landed on %s at y=%.2f", entity.name, blocker.name, transform.y)
                motion.state = VerticalState.GROUNDED
            return

        transform.y = candidate[1]
        if step > 0:
            motion.state = VerticalState.FALLING
