"""The player's bullets in flight and how they move and are drawn."""

from __future__ import annotations

import pygame

from shmupemup.animation import AnimatedSprite, Animation
from shmupemup.bullet import Bullet
from shmupemup.shape import Rect

BULLET_ANIMATIONS = (
    Animation(name="bullet", row=0, frames=2, fps=12),
    Animation(name="bolt", row=1, frames=2, fps=12),
)
BULLET_TILE = 16


def _subtexture(texture: pygame.Surface, rect: Rect) -> pygame.Surface | None:
    area = pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))
    area = area.clip(texture.get_rect())
    if area.w == 0 or area.h == 0:
        return None
    return texture.subsurface(area)


class BulletVector:
    """All bullets currently on screen, sharing one animated texture."""

    def __init__(self, texture: pygame.Surface) -> None:
        self.bullets: list[Bullet] = []
        self.last_time_fired = 0.0
        self.texture = texture
        self.sprite = AnimatedSprite(BULLET_TILE, BULLET_TILE, BULLET_ANIMATIONS, True)

    def __len__(self) -> int:
        return len(self.bullets)

    def __iter__(self):
        return iter(self.bullets)

    def move(self, delta_time: float) -> None:
        """Fly every bullet up the screen and advance the animation."""
        for bullet in self.bullets:
            bullet.shape.y -= bullet.shape.speed * delta_time
        self.sprite.update(delta_time)

    def fire(self, x: float, y: float) -> None:
        """Launch a new bullet from (x, y)."""
        self.bullets.append(Bullet(x, y))

    def hide(self) -> None:
        """Drop bullets that left the top of the screen or hit something."""
        self.bullets = [
            bullet
            for bullet in self.bullets
            if bullet.shape.y > -bullet.shape.size / 2.0 and not bullet.shape.collided
        ]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every bullet with the current animation frame."""
        image = _subtexture(self.texture, self.sprite.frame().source_rect)
        if image is None:
            return
        for bullet in self.bullets:
            size = max(1, int(bullet.shape.size))
            scaled = pygame.transform.scale(image, (size, size))
            left = int(bullet.shape.x - bullet.shape.size / 2.0)
            top = int(bullet.shape.y - bullet.shape.size / 2.0)
            surface.blit(scaled, (left, top))

    def clear(self) -> None:
        """Remove all bullets."""
        self.bullets.clear()