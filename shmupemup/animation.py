"""Sprite-sheet animation: rows of equally sized frames played at a fixed rate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from shmupemup.shape import Rect


@dataclass(frozen=True)
class Animation:
    """One named animation: a row of the sheet with a number of frames."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass(frozen=True)
class AnimationFrame:
    """Where to cut the current frame from the sheet and its natural size."""

    source_rect: Rect
    dest_size: tuple[float, float]


class AnimatedSprite:
    """Tracks the current animation and frame of a sprite sheet."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Sequence[Animation],
        playing: bool,
    ) -> None:
        if not animations:
            raise ValueError("an animated sprite needs at least one animation")
        self.tile_width = float(tile_width)
        self.tile_height = float(tile_height)
        self.animations = list(animations)
        self.playing = playing
        self.current_animation = 0
        self.current_frame = 0
        self._time = 0.0

    @property
    def animation(self) -> Animation:
        return self.animations[self.current_animation]

    def set_animation(self, index: int) -> None:
        """Switch to another animation, keeping the frame within its range."""
        if not 0 <= index < len(self.animations):
            raise IndexError(f"no animation at index {index}")
        self.current_animation = index
        self.current_frame %= self.animation.frames

    def update(self, delta_time: float) -> None:
        """Advance the clock by delta_time seconds and step the frame if due."""
        animation = self.animation
        if self.playing:
            self._time += delta_time
            if self._time > 1.0 / animation.fps:
                self.current_frame += 1
                self._time = 0.0
        self.current_frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The source rectangle and size of the frame to draw now."""
        animation = self.animation
        return AnimationFrame(
            source_rect=Rect(
                self.tile_width * self.current_frame,
                self.tile_height * animation.row,
                self.tile_width,
                self.tile_height,
            ),
            dest_size=(self.tile_width, self.tile_height),
        )