"""
Core Game class with the main loop.

The Game class is the clock and the window. It handles:
- Window creation (pygame display surface)
- Fixed timestep ticks with an accumulator (default), or one
  variable-length tick per frame
- Rendering once per frame
- Pause, quit and debug toggles from input Actions
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING

import pygame

from puri_engine.core.actions import Action, SHELL_ACTIONS
from puri_engine.core.events import EventBus, EngineEvent
from puri_engine.input.handler import InputHandler

if TYPE_CHECKING:
    from puri_engine.core.scene import Scene


logger = logging.getLogger(__name__)


class GameConfig:
    """
    Configuration for the game shell.

    Attributes:
        fixed_timestep: Seconds per tick, or None for one tick per
            frame with the measured frame time as dt
        max_frame_skip: Upper bound on ticks run for one frame
        scale: Screen pixels per world unit
    """

    def __init__(
        self,
        title: str = "Puri Platformer",
        width: int = 1280,
        height: int = 720,
        target_fps: int = 60,
        fixed_timestep: float | None = 1 / 60,
        max_frame_skip: int = 5,
        scale: float = 1.0,
        background: tuple[int, int, int] = (40, 40, 48),
        asset_dir: str | Path = "assets",
        resizable: bool = True,
    ):
        if fixed_timestep is not None and fixed_timestep <= 0:
            raise ValueError(f"fixed_timestep must be positive or None, got {fixed_timestep}")
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")

        self.title = title
        self.width = width
        self.height = height
        self.target_fps = target_fps
        self.fixed_timestep = fixed_timestep
        self.max_frame_skip = max_frame_skip
        self.scale = scale
        self.background = background
        self.asset_dir = Path(asset_dir)
        self.resizable = resizable


class Game:
    """
    Main loop.

    Each frame: drain pygame events, run zero or more ticks (each
    one refreshes input edges, then updates the scene), render once.

    Usage:
        game = Game(GameConfig(title="Puri"))
        game.set_scene(PlatformerScene(game))
        game.run()
    """

    # Longest frame time fed to the accumulator
    MAX_FRAME_TIME = 0.25

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._running = False
        self._paused = False

        pygame.init()

        flags = pygame.RESIZABLE if self.config.resizable else 0
        self.screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags,
        )
        pygame.display.set_caption(self.config.title)

        self.event_bus = EventBus()
        self.input = InputHandler(self.event_bus)
        self.scene: Scene | None = None

        self._clock = pygame.time.Clock()
        self._accumulator = 0.0
        self._current_time = time.perf_counter()
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = self._current_time

        self.debug_mode = False

    @property
    def width(self) -> int:
        return self.screen.get_width()

    @property
    def height(self) -> int:
        return self.screen.get_height()

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def paused(self) -> bool:
        return self._paused

    def set_scene(self, scene: Scene) -> None:
        """Make a scene the active one."""
        if self.scene is not None:
            self.scene.on_exit()
        self.scene = scene
        scene.on_enter()

    def run(self) -> None:
        """Run until quit() is called or the window closes."""
        if self.scene is None:
            raise RuntimeError("Game.run() called without a scene; call set_scene() first")

        self._running = True
        self._current_time = time.perf_counter()
        self.event_bus.publish(EngineEvent.GAME_START)
        logger.info(
            "Game loop started (%s timestep)",
            f"fixed {self.config.fixed_timestep:.4f}s" if self.config.fixed_timestep else "variable",
        )

        try:
            while self._running:
                new_time = time.perf_counter()
                frame_time = min(new_time - self._current_time, self.MAX_FRAME_TIME)
                self._current_time = new_time

                self._process_events()
                alpha = self.advance(frame_time)
                self._render(alpha)
                self._update_fps()

                self._clock.tick(self.config.target_fps)
        finally:
            self._shutdown()

    def advance(self, frame_time: float) -> float:
        """
        Run the ticks owed for one frame.

        Returns:
            Interpolation alpha for rendering
        """
        step = self.config.fixed_timestep

        if step is None:
            self._tick(max(frame_time, 0.0))
            return 1.0

        self._accumulator += frame_time
        ticks = 0
        while self._accumulator >= step:
            self._tick(step)
            self._accumulator -= step
            ticks += 1

            if ticks >= self.config.max_frame_skip:
                self._accumulator = 0.0
                break

        return self._accumulator / step

    def quit(self) -> None:
        self._running = False

    def pause(self) -> None:
        self._paused = True
        self.event_bus.publish(EngineEvent.GAME_PAUSE)

    def resume(self) -> None:
        self._paused = False
        self.event_bus.publish(EngineEvent.GAME_RESUME)

    def toggle_pause(self) -> None:
        if self._paused:
            self.resume()
        else:
            self.pause()

    def _tick(self, dt: float) -> None:
        # Gameplay edges wait out a pause instead of being spent on it
        self.input.update(SHELL_ACTIONS if self._paused else None)

        if self.input.is_action_just_pressed(Action.QUIT):
            self.quit()
            return
        if self.input.is_action_just_pressed(Action.PAUSE):
            self.toggle_pause()
        if self.input.is_action_just_pressed(Action.DEBUG_TOGGLE):
            self.debug_mode = not self.debug_mode

        if not self._paused and self.scene is not None:
            self.scene.update(dt)

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif self.scene is not None and self.scene.handle_event(event):
                continue
            else:
                self.input.process_event(event)

    def _render(self, alpha: float) -> None:
        self.screen.fill(self.config.background)
        if self.scene is not None:
            self.scene.render(alpha)
        pygame.display.flip()

    def _update_fps(self) -> None:
        self._frame_count += 1
        current = time.perf_counter()

        if current - self._fps_update_time >= 1.0:
            self._fps = self._frame_count / (current - self._fps_update_time)
            self._frame_count = 0
            self._fps_update_time = current

    def _shutdown(self) -> None:
        self.event_bus.publish(EngineEvent.GAME_QUIT)
        if self.scene is not None:
            self.scene.on_exit()
        pygame.quit()
        logger.info("Game shut down")
