"""The player's ship: movement within the screen and its sprite."""

from __future__ import annotations

import pygame

from shmupemup.animation import AnimatedSprite, Animation
from shmupemup.shape import YELLOW, Circle, Rect, Shape

SHIP_SIZE = 32.0
SHIP_TILE_WIDTH = 16
SHIP_TILE_HEIGHT = 24
IDLE, LEFT, RIGHT = 0, 1, 2
SHIP_ANIMATIONS = (
    Animation(name="idle", row=0, frames=2, fps=12),
    Animation(name="left", row=2, frames=2, fps=12),
    Animation(name="right", row=4, frames=2, fps=12),
)


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def _subtexture(texture: pygame.Surface, rect: Rect) -> pygame.Surface | None:
    area = pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))
    area = area.clip(texture.get_rect())
    if area.w == 0 or area.h == 0:
        return None
    return texture.subsurface(area)


class PlayerShip:
    """The ship the player steers; it stays inside the screen bounds."""

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        texture: pygame.Surface,
        bounds: tuple[float, float],
    ) -> None:
        self.shape = Shape(size=SHIP_SIZE, speed=speed, x=x, y=y, color=YELLOW)
        self.sprite = AnimatedSprite(SHIP_TILE_WIDTH, SHIP_TILE_HEIGHT, SHIP_ANIMATIONS, True)
        self.texture = texture
        self.bounds = bounds

    def as_circle(self) -> Circle:
        """The ship's collision circle."""
        return Circle(self.shape.x, self.shape.y, self.shape.size)

    def set_idle(self) -> None:
        self.sprite.set_animation(IDLE)

    def update_sprite(self, delta_time: float) -> None:
        self.sprite.update(delta_time)

    def move_up(self) -> None:
        self.shape.y -= self.shape.speed
        self._clamp_y()

    def move_down(self) -> None:
        self.shape.y += self.shape.speed
        self._clamp_y()

    def move_left(self) -> None:
        self.shape.x -= self.shape.speed
        self._clamp_x()
        self.sprite.set_animation(LEFT)

    def move_right(self) -> None:
        self.shape.x += self.shape.speed
        self._clamp_x()
        self.sprite.set_animation(RIGHT)

    def _clamp_x(self) -> None:
        width = self.bounds[0]
        self.shape.x = _clamp(self.shape.x, self.shape.size, width - self.shape.size)

    def _clamp_y(self) -> None:
        height = self.bounds[1]
        self.shape.y = _clamp(self.shape.y, self.shape.size, height - self.shape.size)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current frame at twice its size, centred on the ship."""
        frame = self.sprite.frame()
        image = _subtexture(self.texture, frame.source_rect)
        if image is None:
            return
        dest_w, dest_h = frame.dest_size
        scaled = pygame.transform.scale(image, (int(dest_w * 2), int(dest_h * 2)))
        surface.blit(scaled, (int(self.shape.x - dest_w), int(self.shape.y - dest_h)))