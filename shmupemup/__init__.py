"""A small arcade shoot-'em-up built on pygame: game loop, entities, collisions and high score."""

__version__ = "0.1.0"