"""
Jump system - spends jump energy to raise the player.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puri_engine.core.actions import Action
from puri_platformer.config import DEFAULT_PHYSICS, PhysicsConfig
from puri_platformer.events import PlatformerEvent
from puri_platformer.systems.base import PlayerSystem

if TYPE_CHECKING:
    from puri_engine.input.handler import ActionInput
    from puri_platformer.world.player import Player


logger = logging.getLogger(__name__)


class JumpSystem(PlayerSystem):
    """
    Raises an ASCENDING player.

    Each tick the player rises by
        jump_power = min(dt * fall_speed * jump_speed_factor, energy)
    and energy drops by jump_power while JUMP is held, or by
    jump_power * released_drain_factor once it is released, so a
    held jump goes higher than a tapped one. At zero energy the
    player starts falling.
    """

    priority = 40

    def __init__(self, input_source: ActionInput, config: PhysicsConfig = DEFAULT_PHYSICS):
        super().__init__()
        self.input = input_source
        self.config = config

    def process_entity(self, entity: Player, dt: float) -> None:
        motion = entity.motion
        if not motion.is_ascending:
            return

        cfg = self.config
        jump_power = min(dt * cfg.fall_speed * cfg.jump_speed_factor, motion.jump_energy)
        entity.transform.y += jump_power

        if self.input.is_action_pressed(Action.JUMP):
            drain = jump_power
        else:
            drain = jump_power * cfg.released_drain_factor

        remaining = motion.jump_energy - drain
        if remaining > 0:
            motion.jump_energy = remaining
            return

        motion.end_ascent()
        logger.debug("%s reached jump apex at y=%.2f", entity.name, entity.transform.y)
        self.world.event_bus.publish(
            PlatformerEvent.JUMP_ENDED,
            entity=entity,
            y=entity.transform.y,
        )
