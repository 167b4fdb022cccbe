import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure engine modules can be imported
sys.path.append(os.getcwd())

from puri_engine.core.actions import Action


@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.quit'), \
         patch('pygame.display'), \
         patch('pygame.event'), \
         patch('pygame.time'), \
         patch('pygame.image'), \
         patch('pygame.joystick'), \
         patch('pygame.font'):

        import pygame
        pygame.joystick.get_count = MagicMock(return_value=0)

        yield


class ScriptedInput:
    """
    ActionInput driven by tests.

    hold()/release() change the held set; tick() derives the edges
    the same way InputHandler.update() does.
    """

    def __init__(self):
        self.held: set[Action] = set()
        self.just_pressed: set[Action] = set()
        self._prev: set[Action] = set()

    def hold(self, *actions: Action) -> "ScriptedInput":
        self.held.update(actions)
        return self

    def release(self, *actions: Action) -> "ScriptedInput":
        self.held.difference_update(actions)
        return self

    def tick(self) -> None:
        self.just_pressed = self.held - self._prev
        self._prev = set(self.held)

    def is_action_pressed(self, action: Action) -> bool:
        return action in self.held

    def is_action_just_pressed(self, action: Action) -> bool:
        return action in self.just_pressed


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from puri_engine.core.events import EventBus
    return EventBus()


@pytest.fixture
def world():
    """Fresh plain World for each test."""
    from puri_engine.core.world import World
    return World()


@pytest.fixture
def registry():
    from puri_engine.graphics.animation import build_default_registry
    return build_default_registry()


@pytest.fixture
def scripted_input():
    return ScriptedInput()


@pytest.fixture
def level(registry, scripted_input):
    """
    The default level with the full simulation installed.

    Returns (world, player, input).
    """
    from puri_platformer.systems import install_simulation
    from puri_platformer.world import PlatformerWorld, build_level

    platformer_world = PlatformerWorld()
    install_simulation(platformer_world, scripted_input)
    player = build_level(platformer_world, registry)
    return platformer_world, player, scripted_input


@pytest.fixture
def make_world(registry):
    """
    Factory for a PlatformerWorld with a player at (x, y), the given
    platforms (default floor when None) and only the given systems.

    Returns (world, player).
    """
    from puri_platformer.world import PlatformerWorld, Player, spawn_map

    def _make(*systems, x=0.0, y=0.0, platforms=None):
        platformer_world = PlatformerWorld()
        spawn_map(platformer_world, platforms)
        player = platformer_world.add_entity(Player.spawn(registry, x=x, y=y))
        for system in systems:
            platformer_world.add_system(system)
        return platformer_world, player

    return _make


@pytest.fixture
def step(level):
    """Advance the level one tick: refresh input edges, then update."""
    platformer_world, _, scripted_input = level

    def _step(dt: float) -> None:
        scripted_input.tick()
        platformer_world.update(dt)

    return _step
