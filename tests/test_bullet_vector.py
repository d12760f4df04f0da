import pygame
import pytest

from shmupemup.bullet import BULLET_SIZE, BULLET_SPEED
from shmupemup.bullet_vector import BulletVector


@pytest.fixture
def texture():
    surface = pygame.Surface((32, 32))
    surface.fill((0, 200, 0))
    return surface


def test_starts_empty(texture):
    bullets = BulletVector(texture)
    assert bullets.bullets == []
    assert bullets.last_time_fired == 0.0


def test_fire_adds_bullet_at_position(texture):
    bullets = BulletVector(texture)
    bullets.fire(40.0, 70.0)
    assert len(bullets) == 1
    assert bullets.bullets[0].shape.x == 40.0
    assert bullets.bullets[0].shape.y == 70.0


def test_move_flies_up(texture):
    bullets = BulletVector(texture)
    bullets.fire(10.0, 100.0)
    bullets.move(0.5)
    assert bullets.bullets[0].shape.y == pytest.approx(100.0 - BULLET_SPEED * 0.5)
    assert bullets.bullets[0].shape.x == 10.0


def test_move_advances_animation(texture):
    bullets = BulletVector(texture)
    before = bullets.sprite.current_frame
    bullets.move(1.0)
    assert bullets.sprite.current_frame == (before + 1) % 2


def test_hide_drops_offscreen_bullets(texture):
    bullets = BulletVector(texture)
    bullets.fire(10.0, 100.0)
    bullets.fire(10.0, -BULLET_SIZE)
    bullets.fire(10.0, -BULLET_SIZE / 2.0)
    bullets.hide()
    assert [b.shape.y for b in bullets] == [100.0]


def test_hide_drops_collided_bullets(texture):
    bullets = BulletVector(texture)
    bullets.fire(10.0, 100.0)
    bullets.fire(20.0, 100.0)
    bullets.bullets[0].shape.collided = True
    bullets.hide()
    assert [b.shape.x for b in bullets] == [20.0]


def test_clear_removes_all(texture):
    bullets = BulletVector(texture)
    bullets.fire(1.0, 2.0)
    bullets.fire(3.0, 4.0)
    bullets.clear()
    assert len(bullets) == 0


def test_draw_paints_texture_at_bullet(texture):
    bullets = BulletVector(texture)
    bullets.fire(50.0, 50.0)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    bullets.draw(surface)
    assert surface.get_at((50, 50)) == (0, 200, 0, 255)
    assert surface.get_at((0, 0)) == (0, 0, 0, 255)