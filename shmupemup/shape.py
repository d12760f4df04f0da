"""Geometry primitives and the shared shape record used by game entities."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
YELLOW: Color = (253, 249, 0, 255)
RED: Color = (230, 41, 55, 255)
GRAY: Color = (130, 130, 130, 255)
BEIGE: Color = (211, 176, 131, 255)
PINK: Color = (255, 109, 194, 255)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and its size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.w / 2.0, self.y + self.h / 2.0)

    def overlaps(self, other: Rect) -> bool:
        """Whether the two rectangles intersect; touching edges count."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )


@dataclass(frozen=True)
class Circle:
    """Circle given by its centre and radius."""

    x: float
    y: float
    r: float

    def overlaps_rect(self, rect: Rect) -> bool:
        """Whether the circle and the rectangle intersect."""
        cx, cy = rect.center
        half_w = rect.w / 2.0
        half_h = rect.h / 2.0
        dist_x = abs(self.x - cx)
        dist_y = abs(self.y - cy)

        if dist_x > half_w + self.r or dist_y > half_h + self.r:
            return False
        if dist_x <= half_w or dist_y <= half_h:
            return True

        dx = dist_x - half_w
        dy = dist_y - half_h
        return dx * dx + dy * dy <= self.r * self.r


@dataclass
class Shape:
    """Position, size, speed and state of a square entity centred on (x, y)."""

    size: float
    speed: float
    x: float
    y: float
    color: Color
    collided: bool = False

    def as_rect(self) -> Rect:
        """The bounding square of the shape."""
        half = self.size / 2.0
        return Rect(self.x - half, self.y - half, self.size, self.size)