"""A small particle emitter used for explosions."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace

import pygame

from shmupemup.shape import WHITE, Color


@dataclass
class EmitterConfig:
    """How an emitter spawns, moves and draws its particles."""

    local_coords: bool = False
    one_shot: bool = False
    emitting: bool = True
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    initial_direction: tuple[float, float] = (0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    color: Color = WHITE
    texture: pygame.Surface | None = None
    atlas: tuple[int, int] | None = None
    atlas_start: int = 0
    atlas_end: int | None = None


def explosion_config() -> EmitterConfig:
    """The settings of an enemy explosion."""
    return EmitterConfig(
        local_coords=False,
        one_shot=True,
        emitting=True,
        lifetime=0.6,
        lifetime_randomness=0.3,
        explosiveness=0.65,
        initial_direction_spread=2.0 * math.pi,
        initial_velocity=400.0,
        initial_velocity_randomness=0.8,
        size=16.0,
        size_randomness=0.3,
        atlas=(5, 1),
        atlas_start=0,
    )


@dataclass
class _Particle:
    offset: list[float]
    velocity: tuple[float, float]
    lifetime: float
    size: float
    age: float = 0.0

    @property
    def progress(self) -> float:
        return self.age / self.lifetime if self.lifetime > 0 else 1.0


@dataclass
class Emitter:
    """Spawns particles according to its config and ages them over time."""

    config: EmitterConfig
    rng: random.Random | None = None
    particles: list[_Particle] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.config = replace(self.config)
        if self.rng is None:
            self.rng = random.Random()
        self._time = 0.0
        self._last_emit = 0.0

    @property
    def emitting(self) -> bool:
        return self.config.emitting

    def _randomised(self, value: float, randomness: float) -> float:
        return value - value * self.rng.uniform(0.0, randomness)

    def _emit(self) -> None:
        cfg = self.config
        spread = cfg.initial_direction_spread
        angle = self.rng.uniform(-spread / 2.0, spread / 2.0)
        dx, dy = cfg.initial_direction
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        speed = self._randomised(cfg.initial_velocity, cfg.initial_velocity_randomness)
        velocity = ((dx * cos_a - dy * sin_a) * speed, (dx * sin_a + dy * cos_a) * speed)
        self.particles.append(
            _Particle(
                offset=[0.0, 0.0],
                velocity=velocity,
                lifetime=self._randomised(cfg.lifetime, cfg.lifetime_randomness),
                size=self._randomised(cfg.size, cfg.size_randomness),
            )
        )

    def update(self, delta_time: float) -> None:
        """Spawn due particles, move the living ones and drop the dead."""
        cfg = self.config
        if cfg.emitting:
            self._time += delta_time
            if cfg.amount > 0:
                gap = cfg.lifetime / cfg.amount * (1.0 - cfg.explosiveness)
                if gap < 0.001:
                    spawn = cfg.amount
                else:
                    spawn = int((self._time - self._last_emit) / gap)
                for _ in range(spawn):
                    self._last_emit = self._time
                    if len(self.particles) < cfg.amount:
                        self._emit()
            if cfg.one_shot and self._time > cfg.lifetime:
                self._time = 0.0
                self._last_emit = 0.0
                cfg.emitting = False

        for particle in self.particles:
            particle.age += delta_time
            particle.offset[0] += particle.velocity[0] * delta_time
            particle.offset[1] += particle.velocity[1] * delta_time
        self.particles = [p for p in self.particles if p.age < p.lifetime]

    def _atlas_cell(self, particle: _Particle) -> pygame.Surface | None:
        cfg = self.config
        texture = cfg.texture
        if texture is None:
            return None
        if cfg.atlas is None:
            return texture
        columns, rows = cfg.atlas
        cell_w = texture.get_width() // columns
        cell_h = texture.get_height() // rows
        end = cfg.atlas_end if cfg.atlas_end is not None else columns * rows
        count = max(1, end - cfg.atlas_start)
        index = cfg.atlas_start + min(count - 1, int(particle.progress * count))
        area = pygame.Rect((index % columns) * cell_w, (index // columns) * cell_h, cell_w, cell_h)
        area = area.clip(texture.get_rect())
        if area.w == 0 or area.h == 0:
            return None
        return texture.subsurface(area)

    def draw(self, surface: pygame.Surface, position: tuple[float, float]) -> None:
        """Draw every living particle around position."""
        px, py = position
        for particle in self.particles:
            cx = px + particle.offset[0]
            cy = py + particle.offset[1]
            size = max(1, int(particle.size))
            image = self._atlas_cell(particle)
            if image is None:
                pygame.draw.circle(surface, self.config.color, (int(cx), int(cy)), max(1, size // 2))
            else:
                scaled = pygame.transform.scale(image, (size, size))
                surface.blit(scaled, (int(cx - size / 2.0), int(cy - size / 2.0)))