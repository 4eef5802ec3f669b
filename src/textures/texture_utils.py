"""Texture and font loading utilities for OpenGL.

Textures come back together with their pixel size, so nothing has to keep
the pygame surface around. Unlike most loaders, nothing here falls back to
a placeholder: a missing or unreadable asset raises AssetLoadError.
"""

from __future__ import annotations

from typing import Tuple

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
)

from core.errors import AssetLoadError
from game.state import Sprite


def load_surface(filename: str, asset: str = "image") -> pygame.Surface:
    """Load an image file into an RGBA pygame surface.

    Raises AssetLoadError if the file is missing or can't be decoded.
    """
    try:
        surface = pygame.image.load(filename)
    except (OSError, pygame.error) as e:
        raise AssetLoadError(asset, filename, e) from e
    # convert_alpha needs a display; the engine always has one by now
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def upload_texture(surface: pygame.Surface) -> Tuple[int, Tuple[int, int]]:
    """Upload an RGBA surface as a GL texture; returns (id, (width, height))."""
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )

    # Nearest keeps the sprites crisp; clamp prevents seams on rotated quads
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    return int(texture_id), (int(width), int(height))


def load_sprite(filename: str, asset: str = "image") -> Sprite:
    """Load an image file as a texture and wrap it with its pixel size.

    Parameters
    ----------
    filename : str
        Path to the image file
    asset : str
        Human readable name used in the error message
    """
    tex_id, (width, height) = upload_texture(load_surface(filename, asset))
    print(f"[Assets] Loaded {asset}: {filename} ({width}x{height})")
    return Sprite(texture=tex_id, width=width, height=height)


def load_font(path: str | None, size: int) -> pygame.font.Font:
    """Load a font face. ``path=None`` selects pygame's embedded default font."""
    try:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as e:
        raise AssetLoadError("font", path, e) from e
