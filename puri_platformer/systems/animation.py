"""
Animation system - advances sprite frames on a fixed-rate timer.
"""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import TYPE_CHECKING

from puri_engine.core import System
from puri_platformer.components import SpriteAnimation, FrameTimer

if TYPE_CHECKING:
    from puri_engine.core.entity import Entity


class AnimationEvent(Enum):
    """Animation system events."""
    ANIMATION_LOOPED = auto()  # entity, animation_id


class AnimationSystem(System):
    """
    Advances every SpriteAnimation + FrameTimer pair.

    Time accumulates in FrameTimer.elapsed. Once at least one frame
    duration has built up, the index jumps by all whole frames at
    once (a long tick can skip frames), wraps modulo frame_count,
    and the leftover time carries to the next tick.
    """

    required_components = [SpriteAnimation, FrameTimer]
    priority = 10

    def process_entity(self, entity: Entity, dt: float) -> None:
        animation = entity.get(SpriteAnimation)
        timer = entity.get(FrameTimer)

        duration = animation.frame_duration
        elapsed = timer.elapsed + dt
        index = timer.frame_index
        looped = False

        while elapsed >= duration:
            frames = max(1, math.floor(elapsed / duration))
            index += frames
            if index >= animation.frame_count:
                index %= animation.frame_count
                looped = True
            elapsed = max(0.0, elapsed - frames * duration)

        timer.frame_index = index
        timer.elapsed = elapsed

        if looped and self._world is not None:
            self._world.event_bus.publish(
                AnimationEvent.ANIMATION_LOOPED,
                entity=entity,
                animation_id=animation.animation_id,
            )
