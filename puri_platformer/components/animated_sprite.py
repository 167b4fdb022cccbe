"""
Sprite components - what to draw and how the frame advances.

SpriteAnimation is the immutable part copied from the registry at
spawn; FrameTimer is the runtime part the AnimationSystem advances.
"""

from __future__ import annotations

from enum import Enum, auto

from pydantic import ConfigDict, Field

from puri_engine.core.component import Component
from puri_engine.graphics.animation import AnimationDescriptor, AnimationId, SpriteSheet


class SpriteLayer(Enum):
    """Rendering layers for sprites."""
    BACKGROUND = auto()
    ENTITY = auto()
    OVERLAY = auto()


class SpriteAnimation(Component):
    """
    Animation attached to an entity.

    DATA ONLY - frames are advanced by AnimationSystem.

    Attributes:
        animation_id: Registry key it was resolved from
        sheet: Visual asset handle
        frame_count: Frames in the loop
        frame_duration: Seconds per frame
    """
    model_config = ConfigDict(frozen=True)

    animation_id: AnimationId
    sheet: SpriteSheet
    frame_count: int = Field(ge=1)
    frame_duration: float = Field(gt=0.0)

    @classmethod
    def from_registry_entry(
        cls,
        animation_id: AnimationId,
        sheet: SpriteSheet,
        descriptor: AnimationDescriptor,
    ) -> SpriteAnimation:
        return cls(
            animation_id=animation_id,
            sheet=sheet,
            frame_count=descriptor.frame_count,
            frame_duration=descriptor.frame_duration,
        )


class FrameTimer(Component):
    """
    Animation runtime.

    Attributes:
        frame_index: Current frame, always in [0, frame_count)
        elapsed: Time accumulated toward the next frame
    """
    frame_index: int = Field(default=0, ge=0)
    elapsed: float = Field(default=0.0, ge=0.0)


class Sprite(Component):
    """
    Solid-color rectangle, used for level geometry.

    Attributes:
        width: Drawn width (world units)
        height: Drawn height (world units)
        color: RGB
    """
    width: float = Field(default=0.0, ge=0.0)
    height: float = Field(default=0.0, ge=0.0)
    color: tuple[int, int, int] = (255, 255, 255)
    layer: SpriteLayer = SpriteLayer.ENTITY
    visible: bool = True
