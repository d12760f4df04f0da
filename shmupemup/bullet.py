"""A single projectile fired by the player."""

from __future__ import annotations

from shmupemup.shape import YELLOW, Rect, Shape

BULLET_SPEED = 50.0
BULLET_SIZE = 32.0


class Bullet:
    """A bullet centred on its position that flies up the screen."""

    def __init__(self, x: float, y: float) -> None:
        self.shape = Shape(
            size=BULLET_SIZE,
            speed=BULLET_SPEED,
            x=x,
            y=y,
            color=YELLOW,
        )

    def __repr__(self) -> str:
        return f"Bullet(x={self.shape.x!r}, y={self.shape.y!r})"

    def as_rect(self) -> Rect:
        """The bullet's bounding square."""
        return self.shape.as_rect()