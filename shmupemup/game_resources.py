"""Textures the game needs and how they are loaded."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Mapping

import pygame


class AssetKey(Enum):
    """Names of the textures the game uses."""

    SHIP = "ship"
    LASER_BOLTS = "laser_bolts"
    EXPLOSION = "explosion"


def texture_map() -> list[tuple[AssetKey, str]]:
    """Each asset key with the file its texture is read from."""
    return [
        (AssetKey.SHIP, "ship.png"),
        (AssetKey.LASER_BOLTS, "laser-bolts.png"),
        (AssetKey.EXPLOSION, "explosion.png"),
    ]


def load_textures(folder: str | os.PathLike[str]) -> dict[AssetKey, pygame.Surface]:
    """Load every texture from folder; a missing or broken file raises."""
    base = Path(folder)
    textures: dict[AssetKey, pygame.Surface] = {}
    for key, file_name in texture_map():
        path = base / file_name
        message = f"Couldn't load texture file {file_name}"
        if not path.is_file():
            raise FileNotFoundError(message)
        try:
            textures[key] = pygame.image.load(str(path))
        except pygame.error as exc:
            raise OSError(message) from exc
    return textures


def texture_for(textures: Mapping[AssetKey, pygame.Surface], key: AssetKey) -> pygame.Surface:
    """The loaded texture for key."""
    try:
        return textures[key]
    except KeyError:
        raise KeyError(f"no texture loaded for {key.name}") from None