"""A falling square enemy."""

from __future__ import annotations

import random

from shmupemup.bullet import Bullet
from shmupemup.player_ship import PlayerShip
from shmupemup.shape import Color, Rect, Shape

ENEMY_MIN_SPEED = 50.0
ENEMY_MAX_SPEED = 150.0


class EnemySquare:
    """A square that appears above the screen at a random column and falls."""

    def __init__(
        self,
        size: float,
        color: Color,
        screen_width: float,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.shape = Shape(
            size=size,
            speed=rng.uniform(ENEMY_MIN_SPEED, ENEMY_MAX_SPEED),
            x=rng.uniform(size / 2.0, screen_width - size / 2.0),
            y=-size,
            color=color,
        )

    def as_rect(self) -> Rect:
        """The enemy's bounding square."""
        return self.shape.as_rect()

    def collides_with(self, entity: PlayerShip | Bullet) -> bool:
        """Whether the player's ship or a bullet touches this enemy."""
        if isinstance(entity, PlayerShip):
            return entity.as_circle().overlaps_rect(self.as_rect())
        if isinstance(entity, Bullet):
            return entity.as_rect().overlaps(self.as_rect())
        raise TypeError(f"cannot collide with {type(entity).__name__}")