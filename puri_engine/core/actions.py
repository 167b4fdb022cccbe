"""
Input action definitions.

Game logic asks about Actions, never raw keys, so bindings can
change without touching the systems.

Usage:
    if input.is_action_just_pressed(Action.JUMP):
        ...
    if input.is_action_pressed(Action.MOVE_LEFT):
        ...
"""

from enum import Enum, auto

import pygame


class Action(Enum):
    """Logical input actions."""

    # Movement
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    JUMP = auto()

    # Application shell
    PAUSE = auto()
    DEBUG_TOGGLE = auto()
    QUIT = auto()


# Actions the game shell reacts to even while the simulation is paused
SHELL_ACTIONS: frozenset[Action] = frozenset({Action.PAUSE, Action.DEBUG_TOGGLE, Action.QUIT})

DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    Action.MOVE_LEFT: [pygame.K_a, pygame.K_LEFT],
    Action.MOVE_RIGHT: [pygame.K_d, pygame.K_RIGHT],
    Action.JUMP: [pygame.K_w, pygame.K_UP, pygame.K_SPACE],

    Action.PAUSE: [pygame.K_p],
    Action.DEBUG_TOGGLE: [pygame.K_F3],
    Action.QUIT: [pygame.K_ESCAPE],
}

# Gamepad button bindings (SDL controller layout)
DEFAULT_GAMEPAD_BINDINGS: dict[Action, list[int]] = {
    Action.JUMP: [0],   # A button
    Action.PAUSE: [7],  # Start
}

# (axis_index, threshold, action_positive, action_negative)
DEFAULT_GAMEPAD_AXIS_BINDINGS: list[tuple[int, float, Action, Action]] = [
    (0, 0.5, Action.MOVE_RIGHT, Action.MOVE_LEFT),  # Left stick X
]

# D-pad (hat) bindings
DEFAULT_GAMEPAD_HAT_BINDINGS: dict[tuple[int, int], Action] = {
    (-1, 0): Action.MOVE_LEFT,
    (1, 0): Action.MOVE_RIGHT,
    (0, 1): Action.JUMP,
}
