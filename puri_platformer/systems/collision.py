"""
Axis-aligned hitbox overlap tests.

Boxes are centered on a position. Two boxes overlap only if their
open intervals overlap on both axes: touching edges do not count,
and there is no tolerance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from puri_platformer.components import Hitbox

if TYPE_CHECKING:
    from puri_platformer.world.obstacle import StaticObstacle


def check_hit(
    hitbox: Hitbox,
    position: tuple[float, float],
    other_hitbox: Hitbox,
    other_position: tuple[float, float],
) -> bool:
    """
    Check whether two centered boxes overlap.

    Args:
        hitbox: First box
        position: Center of the first box
        other_hitbox: Second box
        other_position: Center of the second box

    Returns:
        True if the interiors intersect
    """
    left, bottom, right, top = hitbox.get_bounds(*position)
    o_left, o_bottom, o_right, o_top = other_hitbox.get_bounds(*other_position)

    return (
        right > o_left
        and left < o_right
        and top > o_bottom
        and bottom < o_top
    )


def first_hit(
    hitbox: Hitbox,
    position: tuple[float, float],
    obstacles: Iterable[StaticObstacle],
) -> StaticObstacle | None:
    """Return the first obstacle the box would overlap at position, if any."""
    for obstacle in obstacles:
        if check_hit(hitbox, position, obstacle.hitbox, obstacle.transform.position):
            return obstacle
    return None
