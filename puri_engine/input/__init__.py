"""Input handling module."""

from puri_engine.input.handler import ActionInput, InputHandler, InputState, InputEvent

__all__ = [
    "ActionInput",
    "InputHandler",
    "InputState",
    "InputEvent",
]
