"""
Movement system - horizontal input and jump trigger.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puri_engine.core.actions import Action
from puri_platformer.config import DEFAULT_PHYSICS, PhysicsConfig
from puri_platformer.components import VerticalState
from puri_platformer.events import PlatformerEvent
from puri_platformer.systems.base import PlayerSystem

if TYPE_CHECKING:
    from puri_engine.input.handler import ActionInput
    from puri_platformer.world.player import Player


logger = logging.getLogger(__name__)


class MovementSystem(PlayerSystem):
    """
    First system of the tick.

    A JUMP press takes the whole tick: the player starts ascending
    with a full energy budget, replacing whatever was left of an
    ascent in progress, and does not move sideways. Otherwise
    a held MOVE_LEFT or MOVE_RIGHT moves the player at move_speed;
    left wins when both are held. Never changes height.
    """

    priority = 50

    def __init__(self, input_source: ActionInput, config: PhysicsConfig = DEFAULT_PHYSICS):
        super().__init__()
        self.input = input_source
        self.config = config

    def process_entity(self, entity: Player, dt: float) -> None:
        if self.input.is_action_just_pressed(Action.JUMP):
            self._trigger_jump(entity)
            return

        step = self.config.move_speed * dt
        if self.input.is_action_pressed(Action.MOVE_LEFT):
            entity.transform.x -= step
        elif self.input.is_action_pressed(Action.MOVE_RIGHT):
            entity.transform.x += step

    def _trigger_jump(self, player: Player) -> None:
        motion = player.motion

        if motion.state == VerticalState.FALLING and not self.config.allow_air_jump:
            return

        motion.begin_ascent(self.config.jump_energy)
        logger.debug("%s jumped from y=%.2f", player.name, player.transform.y)

        self.world.event_bus.publish(
            PlatformerEvent.JUMP_STARTED,
            entity=player,
            energy=motion.jump_energy,
        )
