"""
The platformer scene: one level, one player.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puri_engine.core import Scene
from puri_engine.graphics.animation import AnimationRegistry, build_default_registry
from puri_platformer.config import DEFAULT_PHYSICS, PhysicsConfig
from puri_platformer.events import PlatformerEvent
from puri_platformer.systems import install_simulation
from puri_platformer.systems.render import (
    Camera,
    DebugOverlaySystem,
    SpriteRenderSystem,
    SpriteSheetCache,
)
from puri_platformer.world import PlatformerWorld, build_level

if TYPE_CHECKING:
    from puri_engine.core import Event, Game


logger = logging.getLogger(__name__)


class PlatformerScene(Scene):
    """
    Builds the world, the systems and the level.

    Setup errors (unknown animation, duplicate player) propagate out
    of __init__ before the loop starts.
    """

    def __init__(
        self,
        game: Game,
        registry: AnimationRegistry | None = None,
        physics: PhysicsConfig = DEFAULT_PHYSICS,
    ):
        super().__init__(game)
        self.registry = registry or build_default_registry()

        self.world = PlatformerWorld(game.event_bus)
        install_simulation(self.world, game.input, physics)

        self.renderer = SpriteRenderSystem(
            lambda: game.screen,
            camera=Camera(scale=game.config.scale),
            sheets=SpriteSheetCache(game.config.asset_dir),
        )
        self.overlay = DebugOverlaySystem(lambda: game.screen, lambda: game.fps)
        self.world.add_system(self.renderer)
        self.world.add_system(self.overlay)

        self.player = build_level(self.world, self.registry)

        game.event_bus.subscribe(PlatformerEvent.GROUNDED_CHANGED, self._on_grounded_changed)

    def update(self, dt: float) -> None:
        self.world.update(dt)

    def render(self, alpha: float) -> None:
        self.overlay.enabled = self.game.debug_mode
        self.world.render(alpha)

    def on_exit(self) -> None:
        self.game.event_bus.unsubscribe(PlatformerEvent.GROUNDED_CHANGED, self._on_grounded_changed)
        super().on_exit()

    def _on_grounded_changed(self, event: Event) -> None:
        logger.debug("grounded -> %s", event["grounded"])
