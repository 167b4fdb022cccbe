"""
Core engine module.

Exports:
- Game, GameConfig: Main loop and configuration
- Scene: Scene base class
- Entity, Component: ECS data
- System, RenderSystem: ECS logic
- World: Entity/system container
- EventBus, Event, EngineEvent: Event system
- Action: Input actions
"""

from puri_engine.core.game import Game, GameConfig
from puri_engine.core.scene import Scene
from puri_engine.core.entity import Entity
from puri_engine.core.component import Component
from puri_engine.core.system import System, RenderSystem
from puri_engine.core.world import World
from puri_engine.core.events import EventBus, Event, EngineEvent
from puri_engine.core.actions import Action

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
    "Action",
]
