"""All enemies on screen and the explosions they leave behind."""

from __future__ import annotations

import math
import random
from dataclasses import replace

import pygame

from shmupemup.bullet_vector import BulletVector
from shmupemup.enemy_square import EnemySquare
from shmupemup.particles import Emitter, explosion_config
from shmupemup.player_ship import PlayerShip
from shmupemup.shape import BEIGE, GRAY, PINK, RED

ENEMY_COLORS = (GRAY, BEIGE, PINK, RED)
ENEMY_MIN_SIZE = 16.0
ENEMY_MAX_SIZE = 64.0


class EnemyVector:
    """The falling enemies and the explosions of those that were shot."""

    def __init__(
        self,
        explosion_texture: pygame.Surface | None,
        rng: random.Random | None = None,
    ) -> None:
        self.enemies: list[EnemySquare] = []
        self.explosions: list[tuple[Emitter, tuple[float, float]]] = []
        self.explosion_texture = explosion_texture
        self.rng = rng if rng is not None else random.Random()

    def spawn(self, screen_width: float) -> None:
        """Add an enemy of random size and colour above the screen."""
        size = self.rng.uniform(ENEMY_MIN_SIZE, ENEMY_MAX_SIZE)
        color = ENEMY_COLORS[self.rng.randrange(len(ENEMY_COLORS))]
        self.enemies.append(EnemySquare(size, color, screen_width, self.rng))

    def hide(self, screen_height: float) -> None:
        """Drop enemies below the screen or shot, and finished explosions."""
        self.enemies = [
            enemy
            for enemy in self.enemies
            if enemy.shape.y < screen_height + enemy.shape.size and not enemy.shape.collided
        ]
        self.explosions = [
            (emitter, position) for emitter, position in self.explosions if emitter.emitting
        ]

    def move(self, delta_time: float) -> None:
        """Let every enemy fall and every explosion play on."""
        for enemy in self.enemies:
            enemy.shape.y += enemy.shape.speed * delta_time
        for emitter, _ in self.explosions:
            emitter.update(delta_time)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the enemies as filled squares, then the explosions."""
        for enemy in self.enemies:
            shape = enemy.shape
            rect = pygame.Rect(
                int(shape.x - shape.size / 2.0),
                int(shape.y - shape.size / 2.0),
                int(shape.size),
                int(shape.size),
            )
            pygame.draw.rect(surface, shape.color, rect)
        for emitter, position in self.explosions:
            emitter.draw(surface, position)

    def collides_with(self, player: PlayerShip) -> bool:
        """Whether any enemy touches the player's ship."""
        return any(enemy.collides_with(player) for enemy in self.enemies)

    def collides_with_bullets(self, bullets: BulletVector) -> bool:
        """Resolve the first bullet hitting an enemy; True if one did."""
        for bullet in bullets.bullets:
            for enemy in self.enemies:
                if enemy.collides_with(bullet):
                    bullet.shape.collided = True
                    enemy.shape.collided = True
                    config = replace(
                        explosion_config(),
                        amount=math.floor(enemy.shape.size + 0.5) * 4,
                        texture=self.explosion_texture,
                    )
                    self.explosions.append(
                        (Emitter(config, self.rng), (enemy.shape.x, enemy.shape.y))
                    )
                    return True
        return False

    def clear(self) -> None:
        """Remove all enemies and explosions."""
        self.enemies.clear()
        self.explosions.clear()