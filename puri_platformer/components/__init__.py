"""
Platformer components - data-only definitions.

All components are Pydantic models containing only data.
Logic lives in Systems, not in components.
"""

from puri_platformer.components.transform import Transform
from puri_platformer.components.physics import (
    Hitbox,
    VerticalMotion,
    VerticalState,
    Grounded,
)
from puri_platformer.components.animated_sprite import (
    SpriteAnimation,
    FrameTimer,
    Sprite,
    SpriteLayer,
)

__all__ = [
    # Transform
    "Transform",
    # Physics
    "Hitbox",
    "VerticalMotion",
    "VerticalState",
    "Grounded",
    # Sprites
    "SpriteAnimation",
    "FrameTimer",
    "Sprite",
    "SpriteLayer",
]
