# shmupemup

A small arcade shoot-'em-up built on pygame. Coloured squares fall from
the top of the screen. Fly your ship around, shoot them down with laser
bolts, and don't let one touch you.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
shmupemup
```

Options:

- `--assets FOLDER` – folder holding the textures (default `assets`). It
  must contain `ship.png`, `laser-bolts.png` and `explosion.png`; a missing
  or unreadable file stops the game with an error.
- `--width N`, `--height N` – window size in pixels (default 800 × 600).

The game runs at up to 60 frames per second.

Controls:

| Key            | Main menu   | Playing           | Paused  | Game over      |
|----------------|-------------|-------------------|---------|----------------|
| Space          | start a run | fire a bolt       | resume  | back to menu   |
| Arrow keys     |             | move (while held) |         |                |
| Escape         | quit        | pause             |         |                |

You can fire at most one bolt every quarter of a second. Each square you
hit adds one point to your score and leaves a particle explosion behind.
When a square reaches your ship the run is over. If the run ends with a
score equal to the best score, that score is written to `highscore.dat`
in the working directory and read back the next time the game starts.
The game-over screen shows your new high score when you beat the old one.

## Using the pieces

The game is built from small parts that can also be used on their own:

- `shmupemup.high_score.HighScore` keeps the current score and the best
  score, and saves the best score to a file (`highscore.dat` unless you
  pass another path).
- `shmupemup.shape.Rect` and `shmupemup.shape.Circle` do the overlap tests
  used for collisions; `shmupemup.shape.Shape` is the position, size and
  speed record shared by the entities.
- `shmupemup.animation.AnimatedSprite` steps through the frames of a
  sprite sheet.
- `shmupemup.particles.Emitter` is a small particle emitter;
  `explosion_config()` gives the settings used for explosions.
- `shmupemup.game_resources.load_textures(folder)` loads the three
  textures, keyed by `AssetKey`.
- `shmupemup.game.Game` holds the whole game state. Its
  `update(delta_time, now, pressed, held)` method takes the elapsed time,
  the current time and the sets of `Key` values pressed this frame and held
  down, so it can be driven without opening a window; `draw(surface)`
  paints the current screen onto any pygame surface.

## What it does not do

The background is plain black: there is no scrolling starfield. The
`direction_modifier` of a `Game` still drifts as the ship moves left and
right, but nothing is drawn from it. There is no sound.