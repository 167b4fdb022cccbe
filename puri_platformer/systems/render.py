"""
Render systems - draw entities onto a pygame surface.

SpriteRenderSystem is the simulation's output sink: it reads
Transform, SpriteAnimation/FrameTimer and Sprite components and
never writes them. collect() exposes what would be drawn without
touching a display, which is what tests and headless runs use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable

import pygame

from puri_engine.core import RenderSystem
from puri_engine.graphics.animation import SpriteSheet
from puri_platformer.components import (
    Transform,
    SpriteAnimation,
    FrameTimer,
    Sprite,
    SpriteLayer,
)

if TYPE_CHECKING:
    from puri_engine.core.entity import Entity


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpriteDraw:
    """One thing to draw this frame."""
    position: tuple[float, float]
    size: tuple[float, float]
    z: float
    sheet: SpriteSheet | None = None
    frame_index: int | None = None
    color: tuple[int, int, int] = (255, 255, 255)
    layer: SpriteLayer = SpriteLayer.ENTITY


class Camera:
    """
    Maps world units to screen pixels.

    World origin sits at the screen center and +y points up.
    """

    def __init__(self, scale: float = 1.0, center: tuple[float, float] = (0.0, 0.0)):
        self.scale = scale
        self.center = center

    def world_to_screen(
        self,
        position: tuple[float, float],
        screen_size: tuple[int, int],
    ) -> tuple[float, float]:
        x, y = position
        cx, cy = self.center
        return (
            screen_size[0] / 2 + (x - cx) * self.scale,
            screen_size[1] / 2 - (y - cy) * self.scale,
        )


class SpriteSheetCache:
    """
    Loads sprite sheet images on first use.

    A missing image is logged once and drawn as a placeholder
    rectangle; it never stops the game.
    """

    def __init__(self, asset_dir: str | Path = "assets"):
        self.asset_dir = Path(asset_dir)
        self._surfaces: dict[str, pygame.Surface | None] = {}

    def get(self, sheet: SpriteSheet) -> pygame.Surface | None:
        if sheet.path not in self._surfaces:
            file_path = self.asset_dir / sheet.path
            try:
                self._surfaces[sheet.path] = pygame.image.load(str(file_path)).convert_alpha()
            except (pygame.error, FileNotFoundError) as e:
                logger.warning("Sprite sheet not loaded, drawing placeholder: %s (%s)", file_path, e)
                self._surfaces[sheet.path] = None
        return self._surfaces[sheet.path]


class SpriteRenderSystem(RenderSystem):
    """Draws every entity with a Transform and either a sprite sheet frame or a rectangle."""

    required_components = [Transform]

    PLACEHOLDER_COLOR = (255, 0, 255)

    def __init__(
        self,
        surface_provider: Callable[[], pygame.Surface],
        camera: Camera | None = None,
        sheets: SpriteSheetCache | None = None,
    ):
        super().__init__()
        self._surface_provider = surface_provider
        self.camera = camera or Camera()
        self.sheets = sheets or SpriteSheetCache()

    def collect(self) -> list[SpriteDraw]:
        """Everything to draw this frame, back to front: by layer, then z."""
        draws = [d for d in (self._draw_for(e) for e in self.get_entities()) if d is not None]
        draws.sort(key=lambda d: (d.layer.value, d.z))
        return draws

    def _draw_for(self, entity: Entity) -> SpriteDraw | None:
        if not entity.active:
            return None

        transform = entity.get(Transform)
        animation = entity.try_get(SpriteAnimation)

        if animation is not None:
            timer = entity.try_get(FrameTimer)
            return SpriteDraw(
                position=transform.position,
                size=(animation.sheet.frame_width, animation.sheet.frame_height),
                z=transform.z,
                sheet=animation.sheet,
                frame_index=timer.frame_index if timer else 0,
            )

        sprite = entity.try_get(Sprite)
        if sprite is not None and sprite.visible:
            return SpriteDraw(
                position=transform.position,
                size=(sprite.width, sprite.height),
                z=transform.z,
                color=sprite.color,
                layer=sprite.layer,
            )

        return None

    def render(self, alpha: float) -> None:
        if not self.enabled:
            return

        surface = self._surface_provider()
        screen_size = surface.get_size()

        for draw in self.collect():
            self._blit(surface, screen_size, draw)

    def render_entity(self, entity: Entity, alpha: float) -> None:
        draw = self._draw_for(entity)
        if draw is not None:
            surface = self._surface_provider()
            self._blit(surface, surface.get_size(), draw)

    def _blit(self, surface: pygame.Surface, screen_size: tuple[int, int], draw: SpriteDraw) -> None:
        scale = self.camera.scale
        cx, cy = self.camera.world_to_screen(draw.position, screen_size)
        w, h = draw.size[0] * scale, draw.size[1] * scale
        dest = pygame.Rect(round(cx - w / 2), round(cy - h / 2), round(w), round(h))

        if draw.sheet is None:
            pygame.draw.rect(surface, draw.color, dest)
            return

        image = self.sheets.get(draw.sheet)
        if image is None:
            pygame.draw.rect(surface, self.PLACEHOLDER_COLOR, dest, width=1)
            return

        frame = image.subsurface(pygame.Rect(draw.sheet.frame_rect(draw.frame_index or 0)))
        if scale != 1.0:
            frame = pygame.transform.scale(frame, dest.size)
        surface.blit(frame, dest)


class DebugOverlaySystem(RenderSystem):
    """
    Text overlay with fps and the player's physics state.

    Disabled by default; the scene flips `enabled` from the
    DEBUG_TOGGLE action.
    """

    priority = -10

    def __init__(
        self,
        surface_provider: Callable[[], pygame.Surface],
        fps_provider: Callable[[], float] = lambda: 0.0,
    ):
        super().__init__()
        self.enabled = False
        self._surface_provider = surface_provider
        self._fps_provider = fps_provider
        self._font: pygame.font.Font | None = None

    def lines(self) -> list[str]:
        """Overlay text, one entry per line."""
        lines = [f"fps {self._fps_provider():.1f}"]

        world = self.world
        if getattr(world, "has_player", False):
            player = world.player  # type: ignore[attr-defined]
            lines += [
                f"pos ({player.transform.x:.2f}, {player.transform.y:.2f})",
                f"state {player.motion.state.name} energy {player.motion.jump_energy:.1f}",
                f"grounded {player.grounded.value}",
                f"frame {player.frame_timer.frame_index}",
            ]
        return lines

    def render(self, alpha: float) -> None:
        if not self.enabled:
            return

        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 20)

        surface = self._surface_provider()
        for i, line in enumerate(self.lines()):
            text = self._font.render(line, True, (255, 255, 0))
            surface.blit(text, (8, 8 + i * 18))

    def render_entity(self, entity: Entity, alpha: float) -> None:
        """Overlay draws world state, not per-entity."""
