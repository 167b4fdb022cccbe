"""
Graphics module.

Exports:
- AnimationId, AnimationDescriptor, SpriteSheet: animation data
- AnimationRegistry, build_default_registry: animation lookup
"""

from puri_engine.graphics.animation import (
    AnimationId,
    AnimationDescriptor,
    SpriteSheet,
    AnimationRegistry,
    DEFAULT_ANIMATIONS,
    build_default_registry,
)

__all__ = [
    "AnimationId",
    "AnimationDescriptor",
    "SpriteSheet",
    "AnimationRegistry",
    "DEFAULT_ANIMATIONS",
    "build_default_registry",
]
