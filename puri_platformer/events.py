"""
Gameplay events published by the platformer systems.
"""

from enum import Enum, auto


class PlatformerEvent(Enum):
    """Player state transitions."""
    JUMP_STARTED = auto()      # entity, energy
    JUMP_ENDED = auto()        # entity, y
    GROUNDED_CHANGED = auto()  # entity, grounded
