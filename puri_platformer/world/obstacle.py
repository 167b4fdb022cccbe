"""
Static level geometry.
"""

from __future__ import annotations

from puri_engine.core import Entity
from puri_platformer.components import Transform, Hitbox, Sprite, SpriteLayer


class StaticObstacle(Entity):
    """
    A solid rectangle that never moves.

    The hitbox and the drawn rectangle share the same size.
    """

    TAG = "obstacle"

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: tuple[int, int, int] = (255, 255, 255),
        name: str = "",
    ):
        super().__init__(name)
        self._transform = self.add(Transform(x=x, y=y))
        self._hitbox = self.add(Hitbox(width=width, height=height))
        self.add(Sprite(width=width, height=height, color=color, layer=SpriteLayer.BACKGROUND))
        self.add_tag(self.TAG)

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def hitbox(self) -> Hitbox:
        return self._hitbox
