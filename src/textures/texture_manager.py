"""Centralized asset loading for the game.

``load_game_resources()`` loads the three sprites and the font once and
returns them as a Resources bundle. It must run after the GL window exists.
Any failure raises AssetLoadError; there is no partial startup.
"""

from __future__ import annotations

from config import FONT_SIZE
from game.state import Resources
from textures.texture_utils import load_font, load_sprite
from textures.resourcepath import (
    BACKGROUND_TEXTURE_PATH,
    PLAYER_TEXTURE_PATH,
    OBSTACLE_TEXTURE_PATH,
    FONT_PATH,
)


def load_game_resources(
    *,
    background_path: str = BACKGROUND_TEXTURE_PATH,
    player_path: str = PLAYER_TEXTURE_PATH,
    obstacle_path: str = OBSTACLE_TEXTURE_PATH,
    font_path: str | None = FONT_PATH,
    font_size: int = FONT_SIZE,
) -> Resources:
    # Font first: it needs no GL context, so a broken font fails fast
    font = load_font(font_path, font_size)
    background = load_sprite(background_path, "background")
    player = load_sprite(player_path, "player sprite")
    obstacle = load_sprite(obstacle_path, "obstacle sprite")
    return Resources(
        background=background,
        player=player,
        obstacle=obstacle,
        font=font,
    )
