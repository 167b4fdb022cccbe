"""
Scene base class.

A scene owns a World and decides what one tick and one rendered
frame mean for it. The Game drives exactly one active scene.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from puri_engine.core.game import Game
    from puri_engine.core.world import World


class Scene(ABC):
    """
    Abstract base class for game scenes.

    Lifecycle:
        1. __init__: build the world
        2. on_enter: the Game made this scene active
        3. update/render: every tick / every frame
        4. on_exit: the Game is shutting down or switching scene
    """

    def __init__(self, game: Game):
        self.game = game
        self.world: World | None = None
        self._is_active = False

    @property
    def is_active(self) -> bool:
        return self._is_active

    def on_enter(self) -> None:
        self._is_active = True

    def on_exit(self) -> None:
        self._is_active = False
        if self.world:
            self.world.clear()

    @abstractmethod
    def update(self, dt: float) -> None:
        """
        Advance the scene by one tick.

        Args:
            dt: Delta time in seconds
        """

    @abstractmethod
    def render(self, alpha: float) -> None:
        """
        Draw the scene.

        Args:
            alpha: Interpolation factor (0-1) between the last two ticks
        """

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a raw pygame event.

        Returns:
            True if the event was consumed
        """
        return False
