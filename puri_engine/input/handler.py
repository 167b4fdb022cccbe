"""
Input handler with action-based abstraction.

Translates pygame keyboard and gamepad events into Actions and
derives per-tick edges (just pressed / just released).

Usage:
    for event in pygame.event.get():
        handler.process_event(event)
    handler.update()  # once per tick, before the world update

    if handler.is_action_just_pressed(Action.JUMP):
        ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

import pygame

from puri_engine.core.actions import (
    Action,
    DEFAULT_KEY_BINDINGS,
    DEFAULT_GAMEPAD_BINDINGS,
    DEFAULT_GAMEPAD_AXIS_BINDINGS,
    DEFAULT_GAMEPAD_HAT_BINDINGS,
)
from puri_engine.core.events import EventBus


class ActionInput(Protocol):
    """What the simulation needs from an input source."""

    def is_action_pressed(self, action: Action) -> bool:
        """True while the action is held."""
        ...

    def is_action_just_pressed(self, action: Action) -> bool:
        """True only on the tick the action went down."""
        ...


class InputEvent(Enum):
    """Input-specific events."""
    ACTION_PRESSED = "input.action_pressed"
    ACTION_RELEASED = "input.action_released"
    GAMEPAD_CONNECTED = "input.gamepad_connected"
    GAMEPAD_DISCONNECTED = "input.gamepad_disconnected"


@dataclass
class InputState:
    """Input state for the current tick."""
    actions_pressed: set[Action] = field(default_factory=set)
    actions_just_pressed: set[Action] = field(default_factory=set)
    actions_just_released: set[Action] = field(default_factory=set)

    keys_pressed: set[int] = field(default_factory=set)

    # Gamepad analog values
    axis_values: dict[int, float] = field(default_factory=dict)


class InputHandler:
    """
    Pygame implementation of ActionInput.

    Raw events update the held set as they arrive; update() turns
    the difference with the previous tick into edges. Edges are
    therefore per tick, not per rendered frame.
    """

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus

        self._state = InputState()
        self._prev_actions: set[Action] = set()

        # action -> keys, and key -> actions
        self._key_bindings = {a: list(keys) for a, keys in DEFAULT_KEY_BINDINGS.items()}
        self._reverse_key_bindings: dict[int, list[Action]] = {}
        self._rebuild_reverse_bindings()

        self._gamepads: dict[int, pygame.joystick.JoystickType] = {}
        self._gamepad_bindings = {a: list(b) for a, b in DEFAULT_GAMEPAD_BINDINGS.items()}
        self._gamepad_axis_bindings = list(DEFAULT_GAMEPAD_AXIS_BINDINGS)
        self._gamepad_hat_bindings = DEFAULT_GAMEPAD_HAT_BINDINGS.copy()

        pygame.joystick.init()
        self._refresh_gamepads()

    def _rebuild_reverse_bindings(self) -> None:
        self._reverse_key_bindings.clear()
        for action, keys in self._key_bindings.items():
            for key in keys:
                self._reverse_key_bindings.setdefault(key, []).append(action)

    def _refresh_gamepads(self) -> None:
        self._gamepads.clear()
        for i in range(pygame.joystick.get_count()):
            joy = pygame.joystick.Joystick(i)
            joy.init()
            self._gamepads[joy.get_instance_id()] = joy

    # Queries

    def is_action_pressed(self, action: Action) -> bool:
        """Check if an action is currently held down."""
        return action in self._state.actions_pressed

    def is_action_just_pressed(self, action: Action) -> bool:
        """Check if an action went down this tick."""
        return action in self._state.actions_just_pressed

    def is_action_just_released(self, action: Action) -> bool:
        """Check if an action went up this tick."""
        return action in self._state.actions_just_released

    def get_axis(self, axis: int) -> float:
        """Get gamepad axis value (-1 to 1)."""
        return self._state.axis_values.get(axis, 0.0)

    # Bindings

    def bind_key(self, action: Action, key: int) -> None:
        keys = self._key_bindings.setdefault(action, [])
        if key not in keys:
            keys.append(key)
        self._rebuild_reverse_bindings()

    def unbind_key(self, action: Action, key: int) -> None:
        if key in self._key_bindings.get(action, []):
            self._key_bindings[action].remove(key)
        self._rebuild_reverse_bindings()

    def get_bindings(self, action: Action) -> list[int]:
        return self._key_bindings.get(action, []).copy()

    # Event intake

    def process_event(self, event: pygame.event.Event) -> None:
        """Feed one pygame event."""
        if event.type == pygame.KEYDOWN:
            self._on_key_down(event.key)

        elif event.type == pygame.KEYUP:
            self._on_key_up(event.key)

        elif event.type in (pygame.JOYDEVICEADDED, pygame.JOYDEVICEREMOVED):
            self._refresh_gamepads()
            if self.event_bus:
                connected = event.type == pygame.JOYDEVICEADDED
                self.event_bus.publish(
                    InputEvent.GAMEPAD_CONNECTED if connected else InputEvent.GAMEPAD_DISCONNECTED
                )

        elif event.type == pygame.JOYBUTTONDOWN:
            for action, buttons in self._gamepad_bindings.items():
                if event.button in buttons:
                    self._state.actions_pressed.add(action)

        elif event.type == pygame.JOYBUTTONUP:
            for action, buttons in self._gamepad_bindings.items():
                if event.button in buttons:
                    self._state.actions_pressed.discard(action)

        elif event.type == pygame.JOYAXISMOTION:
            self._state.axis_values[event.axis] = event.value
            self._process_axis_actions(event.axis, event.value)

        elif event.type == pygame.JOYHATMOTION:
            self._on_hat_motion(tuple(event.value))

    def update(self, only: Iterable[Action] | None = None) -> None:
        """
        Advance to a new tick.

        Call once per tick, after feeding events and before the world update.

        Args:
            only: Refresh edges for these actions alone. The others report
                no edge this tick and keep their previous state, so a
                change made meanwhile shows up on the next full update.
        """
        scope = set(Action) if only is None else set(only)
        pressed = self._state.actions_pressed & scope
        prev = self._prev_actions & scope

        self._state.actions_just_pressed = pressed - prev
        self._state.actions_just_released = prev - pressed

        if self.event_bus:
            for action in self._state.actions_just_pressed:
                self.event_bus.publish(InputEvent.ACTION_PRESSED, action=action)
            for action in self._state.actions_just_released:
                self.event_bus.publish(InputEvent.ACTION_RELEASED, action=action)

        self._prev_actions = (self._prev_actions - scope) | pressed

    def _on_key_down(self, key: int) -> None:
        self._state.keys_pressed.add(key)
        for action in self._reverse_key_bindings.get(key, []):
            self._state.actions_pressed.add(action)

    def _on_key_up(self, key: int) -> None:
        self._state.keys_pressed.discard(key)

        # Release only when no other key for that action is down
        for action in self._reverse_key_bindings.get(key, []):
            still_pressed = any(
                k in self._state.keys_pressed for k in self._key_bindings.get(action, [])
            )
            if not still_pressed:
                self._state.actions_pressed.discard(action)

    def _process_axis_actions(self, axis: int, value: float) -> None:
        for ax, threshold, pos_action, neg_action in self._gamepad_axis_bindings:
            if ax != axis:
                continue
            if value > threshold:
                self._state.actions_pressed.add(pos_action)
                self._state.actions_pressed.discard(neg_action)
            elif value < -threshold:
                self._state.actions_pressed.add(neg_action)
                self._state.actions_pressed.discard(pos_action)
            else:
                self._state.actions_pressed.discard(pos_action)
                self._state.actions_pressed.discard(neg_action)

    def _on_hat_motion(self, value: tuple[int, int]) -> None:
        for action in self._gamepad_hat_bindings.values():
            self._state.actions_pressed.discard(action)

        if value in self._gamepad_hat_bindings:
            self._state.actions_pressed.add(self._gamepad_hat_bindings[value])
