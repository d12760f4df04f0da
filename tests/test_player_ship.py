import pygame
import pytest

from shmupemup.player_ship import IDLE, LEFT, RIGHT, SHIP_SIZE, PlayerShip
from shmupemup.shape import Circle

BOUNDS = (400.0, 300.0)


@pytest.fixture
def texture():
    surface = pygame.Surface((32, 144))
    surface.fill((255, 0, 0))
    return surface


def make_ship(texture, x=200.0, y=150.0, speed=5.0):
    return PlayerShip(x, y, speed, texture, BOUNDS)


def test_initial_shape(texture):
    ship = make_ship(texture)
    assert ship.shape.size == SHIP_SIZE
    assert ship.shape.speed == 5.0
    assert (ship.shape.x, ship.shape.y) == (200.0, 150.0)
    assert ship.shape.collided is False


def test_as_circle(texture):
    ship = make_ship(texture)
    assert ship.as_circle() == Circle(200.0, 150.0, SHIP_SIZE)


def test_move_left_and_animation(texture):
    ship = make_ship(texture)
    ship.move_left()
    assert ship.shape.x == 200.0 - 5.0
    assert ship.sprite.current_animation == LEFT


def test_move_right_and_animation(texture):
    ship = make_ship(texture)
    ship.move_right()
    assert ship.shape.x == 200.0 + 5.0
    assert ship.sprite.current_animation == RIGHT


def test_set_idle(texture):
    ship = make_ship(texture)
    ship.move_right()
    ship.set_idle()
    assert ship.sprite.current_animation == IDLE


def test_move_up_and_down(texture):
    ship = make_ship(texture)
    ship.move_up()
    assert ship.shape.y == 150.0 - 5.0
    ship.move_down()
    ship.move_down()
    assert ship.shape.y == 150.0 + 5.0


def test_clamped_to_left_and_top(texture):
    ship = make_ship(texture, x=SHIP_SIZE + 1.0, y=SHIP_SIZE + 1.0, speed=50.0)
    ship.move_left()
    ship.move_up()
    assert ship.shape.x == SHIP_SIZE
    assert ship.shape.y == SHIP_SIZE


def test_clamped_to_right_and_bottom(texture):
    ship = make_ship(texture, speed=1000.0)
    ship.move_right()
    ship.move_down()
    assert ship.shape.x == BOUNDS[0] - SHIP_SIZE
    assert ship.shape.y == BOUNDS[1] - SHIP_SIZE


def test_update_sprite_advances_frame(texture):
    ship = make_ship(texture)
    before = ship.sprite.current_frame
    ship.update_sprite(1.0)
    assert ship.sprite.current_frame == (before + 1) % 2


def test_draw_centres_sprite_on_ship(texture):
    ship = make_ship(texture, x=100.0, y=100.0)
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    ship.draw(surface)
    assert surface.get_at((100, 100)) == (255, 0, 0, 255)
    assert surface.get_at((0, 0)) == (0, 0, 0, 255)