"""
Sprite animation data and the animation registry.

An animation is a sprite sheet (the visual handle) plus a
descriptor saying how many frames it has and how fast to play
them. The registry maps animation ids to both and is filled once
at startup, before any entity asks for an animation.

Usage:
    registry = build_default_registry()
    sheet, descriptor = registry.get(AnimationId.PLAYER_IDLE)
    descriptor.frame_duration  # 0.2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


logger = logging.getLogger(__name__)


class AnimationId(Enum):
    """Known animations."""
    PLAYER_IDLE = "PlayerIdle"


@dataclass(frozen=True)
class AnimationDescriptor:
    """
    Immutable playback description of one animation.

    Attributes:
        frame_count: Number of frames in the loop (>= 1)
        fps: Frames per second (> 0)

    Raises:
        ValueError: On a zero-length or zero-rate animation
    """
    frame_count: int
    fps: float

    def __post_init__(self) -> None:
        if self.frame_count < 1:
            raise ValueError(f"Animation needs at least one frame, got {self.frame_count}")
        if self.fps <= 0:
            raise ValueError(f"Animation fps must be positive, got {self.fps}")

    @property
    def frame_duration(self) -> float:
        """Seconds each frame is shown."""
        return 1.0 / self.fps


@dataclass(frozen=True)
class SpriteSheet:
    """
    Handle to a grid of equally sized frames in one image.

    Frames are numbered left to right, top to bottom. The image is
    loaded lazily by the renderer; the handle itself is plain data.
    """
    path: str
    frame_width: int
    frame_height: int
    columns: int
    rows: int = 1

    @property
    def frame_total(self) -> int:
        return self.columns * self.rows

    def frame_rect(self, index: int) -> tuple[int, int, int, int]:
        """
        Pixel rectangle (x, y, w, h) of a frame.

        Raises:
            IndexError: If the sheet has no such frame
        """
        if not 0 <= index < self.frame_total:
            raise IndexError(f"Frame {index} out of range for {self.path} ({self.frame_total} frames)")
        col = index % self.columns
        row = index // self.columns
        return (
            col * self.frame_width,
            row * self.frame_height,
            self.frame_width,
            self.frame_height,
        )


class AnimationRegistry:
    """
    Read-only mapping from AnimationId to (SpriteSheet, AnimationDescriptor).

    Populate with register() during bootstrap, then only read.
    """

    def __init__(self):
        self._entries: dict[AnimationId, tuple[SpriteSheet, AnimationDescriptor]] = {}

    def register(
        self,
        animation_id: AnimationId,
        sheet: SpriteSheet,
        descriptor: AnimationDescriptor,
    ) -> None:
        """
        Register an animation.

        Raises:
            ValueError: If the id is taken or the sheet is too small
        """
        if animation_id in self._entries:
            raise ValueError(f"Animation {animation_id.value} already registered")
        if descriptor.frame_count > sheet.frame_total:
            raise ValueError(
                f"Animation {animation_id.value} has {descriptor.frame_count} frames "
                f"but {sheet.path} only holds {sheet.frame_total}"
            )
        self._entries[animation_id] = (sheet, descriptor)

    def get(self, animation_id: AnimationId) -> tuple[SpriteSheet, AnimationDescriptor]:
        """
        Look up an animation.

        Raises:
            KeyError: If the id was never registered
        """
        try:
            return self._entries[animation_id]
        except KeyError:
            raise KeyError(f"Animation {animation_id.value} is not registered") from None

    def __contains__(self, animation_id: object) -> bool:
        return animation_id in self._entries

    def __iter__(self) -> Iterator[AnimationId]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# (id, image, frame size, columns, rows, frame_count, fps)
DEFAULT_ANIMATIONS: list[tuple[AnimationId, str, int, int, int, int, float]] = [
    (AnimationId.PLAYER_IDLE, "puri.png", 32, 6, 1, 6, 5),
]


def build_default_registry() -> AnimationRegistry:
    """Build the registry from DEFAULT_ANIMATIONS."""
    registry = AnimationRegistry()

    for anim_id, path, size, columns, rows, frame_count, fps in DEFAULT_ANIMATIONS:
        registry.register(
            anim_id,
            SpriteSheet(path=path, frame_width=size, frame_height=size, columns=columns, rows=rows),
            AnimationDescriptor(frame_count=frame_count, fps=fps),
        )

    logger.info("Animation registry built with %d animation(s)", len(registry))
    return registry
