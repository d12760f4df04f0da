import math
import random
from dataclasses import replace

import pygame
import pytest

from shmupemup.particles import Emitter, EmitterConfig, explosion_config


def test_explosion_config_values():
    cfg = explosion_config()
    assert cfg.one_shot is True
    assert cfg.emitting is True
    assert cfg.local_coords is False
    assert cfg.lifetime == pytest.approx(0.6)
    assert cfg.explosiveness == pytest.approx(0.65)
    assert cfg.initial_velocity == pytest.approx(400.0)
    assert cfg.initial_direction_spread == pytest.approx(2.0 * math.pi)
    assert cfg.atlas == (5, 1)


def test_emitter_copies_config():
    cfg = explosion_config()
    emitter = Emitter(cfg, random.Random(1))
    for _ in range(10):
        emitter.update(0.1)
    assert cfg.emitting is True
    assert emitter.emitting is False


def test_first_update_emits_within_amount():
    emitter = Emitter(replace(explosion_config(), amount=40), random.Random(3))
    emitter.update(0.1)
    assert 0 < len(emitter.particles) <= 40


def test_never_exceeds_amount():
    emitter = Emitter(replace(explosion_config(), amount=12), random.Random(5))
    for _ in range(30):
        emitter.update(0.02)
        assert len(emitter.particles) <= 12


def test_one_shot_stops_after_lifetime():
    emitter = Emitter(explosion_config(), random.Random(2))
    for _ in range(5):
        emitter.update(0.1)
    assert emitter.emitting is True
    emitter.update(0.1)
    emitter.update(0.1)
    assert emitter.emitting is False


def test_particles_die_out():
    emitter = Emitter(explosion_config(), random.Random(4))
    for _ in range(30):
        emitter.update(0.1)
    assert emitter.particles == []


def test_explosive_emits_all_at_once():
    cfg = EmitterConfig(amount=10, explosiveness=1.0)
    emitter = Emitter(cfg, random.Random(0))
    emitter.update(0.0)
    assert len(emitter.particles) == 10


def test_draw_with_texture_paints_at_position():
    texture = pygame.Surface((80, 16))
    texture.fill((0, 255, 0))
    cfg = replace(explosion_config(), amount=5, explosiveness=1.0, texture=texture)
    emitter = Emitter(cfg, random.Random(0))
    emitter.update(0.0)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    emitter.draw(surface, (50, 50))
    assert surface.get_at((50, 50)) == (0, 255, 0, 255)
    assert surface.get_at((0, 0)) == (0, 0, 0, 255)


def test_draw_without_texture_uses_color():
    cfg = EmitterConfig(amount=3, explosiveness=1.0, color=(10, 20, 30, 255))
    emitter = Emitter(cfg, random.Random(0))
    emitter.update(0.0)
    surface = pygame.Surface((60, 60))
    surface.fill((0, 0, 0))
    emitter.draw(surface, (30, 30))
    assert surface.get_at((30, 30)) == (10, 20, 30, 255)