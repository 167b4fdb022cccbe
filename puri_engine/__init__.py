"""
Puri Engine

A small ECS and pygame shell for 2D platformers.

Quick Start:
    from puri_engine import Game, GameConfig, Scene

    class MyScene(Scene):
        def update(self, dt: float) -> None:
            pass

        def render(self, alpha: float) -> None:
            pass

    game = Game(GameConfig(title="My Game"))
    game.set_scene(MyScene(game))
    game.run()
"""

__version__ = "0.1.0"

from puri_engine.core import (
    Game,
    GameConfig,
    Scene,
    Entity,
    Component,
    System,
    RenderSystem,
    World,
    EventBus,
    Event,
    EngineEvent,
    Action,
)

from puri_engine.input import InputHandler

__all__ = [
    "Game",
    "GameConfig",
    "Scene",
    "Entity",
    "Component",
    "System",
    "RenderSystem",
    "World",
    "EventBus",
    "Event",
    "EngineEvent",
    "InputHandler",
    "Action",
]
