"""The game loop: menu, play, pause and game-over screens."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Collection, Mapping
from enum import Enum, auto

import pygame

from shmupemup.bullet_vector import BulletVector
from shmupemup.caption import Caption
from shmupemup.enemy_vector import EnemyVector
from shmupemup.game_resources import AssetKey, load_textures, texture_for
from shmupemup.high_score import HighScore
from shmupemup.player_ship import PlayerShip
from shmupemup.shape import BLACK, RED

TITLE = "SHMUP'EM UP!"
MOVEMENT_SPEED = 200.0
SHOT_FREQUENCY = 0.25
SHOT_OFFSET_Y = 24.0
SPAWN_ROLL_RANGE = 99
SPAWN_THRESHOLD = 95
DIRECTION_DRIFT = 0.05
SCORE_FONT_SIZE = 25.0
SCORE_MARGIN = 10.0
HIGH_SCORE_Y = 35.0
SCORE_Y = 60.0
TITLE_FONT_SIZE = 100.0


class GameState(Enum):
    """Which screen the game is showing."""

    MAIN_MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class Key(Enum):
    """The keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    ESCAPE = auto()


_PYGAME_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class Game:
    """All state of a running game and the rules that move it on each frame."""

    def __init__(
        self,
        textures: Mapping[AssetKey, pygame.Surface],
        screen_size: tuple[float, float] = (800.0, 600.0),
        high_score: HighScore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.textures = textures
        self.screen_size = screen_size
        self.rng = rng if rng is not None else random.Random()
        self.high_score = high_score if high_score is not None else HighScore()
        self.state = GameState.MAIN_MENU
        self.running = True
        self.direction_modifier = 0.0
        self.enemies = EnemyVector(texture_for(textures, AssetKey.EXPLOSION), self.rng)
        self.bullets = BulletVector(texture_for(textures, AssetKey.LASER_BOLTS))
        self.player = self._new_player()

    @property
    def center(self) -> tuple[float, float]:
        width, height = self.screen_size
        return (width / 2.0, height / 2.0)

    def _new_player(self) -> PlayerShip:
        cx, cy = self.center
        return PlayerShip(
            cx, cy, MOVEMENT_SPEED, texture_for(self.textures, AssetKey.SHIP), self.screen_size
        )

    def start(self) -> None:
        """Begin a fresh game."""
        self.enemies.clear()
        self.bullets.clear()
        self.high_score.clear()
        self.player = self._new_player()
        self.state = GameState.PLAYING

    def update(
        self,
        delta_time: float,
        now: float,
        pressed: Collection[Key] = (),
        held: Collection[Key] = (),
    ) -> None:
        """Advance one frame: pressed keys went down this frame, held are down now."""
        if self.state is GameState.MAIN_MENU:
            if Key.ESCAPE in pressed:
                self.running = False
            if Key.SPACE in pressed:
                self.start()
        elif self.state is GameState.PLAYING:
            self._play(delta_time, now, pressed, held)
        elif self.state is GameState.PAUSED:
            if Key.SPACE in pressed:
                self.state = GameState.PLAYING
        elif self.state is GameState.GAME_OVER:
            if Key.SPACE in pressed:
                self.state = GameState.MAIN_MENU

    def _play(
        self,
        delta_time: float,
        now: float,
        pressed: Collection[Key],
        held: Collection[Key],
    ) -> None:
        width, height = self.screen_size
        player = self.player
        player.shape.speed = MOVEMENT_SPEED * delta_time

        if self.rng.randrange(SPAWN_ROLL_RANGE) >= SPAWN_THRESHOLD:
            self.enemies.spawn(width)

        player.set_idle()
        if Key.RIGHT in held:
            player.move_right()
            self.direction_modifier += DIRECTION_DRIFT * delta_time
        if Key.LEFT in held:
            player.move_left()
            self.direction_modifier -= DIRECTION_DRIFT * delta_time
        if Key.DOWN in held:
            player.move_down()
        if Key.UP in held:
            player.move_up()
        if Key.SPACE in pressed and now > self.bullets.last_time_fired + SHOT_FREQUENCY:
            self.bullets.fire(player.shape.x, player.shape.y - SHOT_OFFSET_Y)
            self.bullets.last_time_fired = now
        if Key.ESCAPE in pressed:
            self.state = GameState.PAUSED

        self.enemies.move(delta_time)
        self.enemies.hide(height)
        self.bullets.move(delta_time)
        self.bullets.hide()

        player.update_sprite(delta_time)

        if self.enemies.collides_with(player):
            self.high_score.save()
            self.state = GameState.GAME_OVER

        if self.enemies.collides_with_bullets(self.bullets):
            self.high_score.add()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current screen onto surface."""
        surface.fill(BLACK)
        cx, cy = self.center
        if self.state is GameState.MAIN_MENU:
            title = Caption(TITLE, font_size=TITLE_FONT_SIZE)
            _blit_text(surface, title, cx, cy - title.dimensions()[1])
            _blit_text(surface, Caption.default("Press space"), cx, cy)
        elif self.state is GameState.PLAYING:
            self.enemies.draw(surface)
            self.bullets.draw(surface)
            self.player.draw(surface)
            self._draw_scores(surface)
        elif self.state is GameState.PAUSED:
            _blit_text(surface, Caption.default("Paused"), cx, cy)
        elif self.state is GameState.GAME_OVER:
            self._draw_game_over(surface)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        cx, cy = self.center
        text = Caption("GAME OVER!", color=RED)
        caption_y = cy - text.dimensions()[1] / 2.0
        _blit_text(surface, text, cx, caption_y)
        if self.high_score.is_new_high:
            score_text = Caption(
                f"Your new high score is: {self.high_score.high_score}", color=RED
            )
            _blit_text(surface, score_text, cx, caption_y + text.font_size)

    def _draw_scores(self, surface: pygame.Surface) -> None:
        lines = (
            (HIGH_SCORE_Y, f"High Score: {self.high_score.high_score}"),
            (SCORE_Y, f"Score: {self.high_score.score}"),
        )
        for baseline, text in lines:
            caption = Caption(text, font_size=SCORE_FONT_SIZE)
            width, height = caption.dimensions()
            left = self.screen_size[0] - width - SCORE_MARGIN
            surface.blit(caption.render(), (int(left), int(baseline - height)))


def _blit_text(surface: pygame.Surface, caption: Caption, center_x: float, baseline: float) -> None:
    width, height = caption.dimensions()
    surface.blit(caption.render(), (int(center_x - width / 2.0), int(baseline - height)))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="shmupemup", description=TITLE)
    parser.add_argument("--assets", default="assets", help="folder holding the textures")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(TITLE)
        textures = {
            key: texture.convert_alpha() for key, texture in load_textures(args.assets).items()
        }
        game = Game(textures, (float(args.width), float(args.height)))
        clock = pygame.time.Clock()
        started = time.monotonic()
        while game.running:
            delta_time = clock.tick(60) / 1000.0
            pressed: set[Key] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key in _PYGAME_KEYS:
                    pressed.add(_PYGAME_KEYS[event.key])
            state = pygame.key.get_pressed()
            held = {key for code, key in _PYGAME_KEYS.items() if state[code]}
            game.update(delta_time, time.monotonic() - started, pressed, held)
            game.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0