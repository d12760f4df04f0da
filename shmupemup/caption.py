"""Text captions with a colour and a font size."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import pygame

from shmupemup.shape import WHITE, Color

FONT_SIZE = 50.0
FONT_SCALE = 1.0
FONT_COLOR = WHITE


@lru_cache(maxsize=None)
def _cached_font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return _cached_font(size)


@dataclass
class Caption:
    """A line of text to draw on screen."""

    text: str
    color: Color = FONT_COLOR
    font_size: float = FONT_SIZE
    font_scale: float = FONT_SCALE

    @classmethod
    def default(cls, text: str) -> Caption:
        """A caption in the default colour, size and scale."""
        return cls(text)

    @property
    def _pixel_size(self) -> int:
        return max(1, int(int(self.font_size) * self.font_scale))

    def dimensions(self) -> tuple[int, int]:
        """Width and height of the rendered text in pixels."""
        return _font(self._pixel_size).size(self.text)

    def render(self) -> pygame.Surface:
        """The text drawn onto a new transparent surface."""
        return _font(self._pixel_size).render(self.text, True, self.color)