"""OpenGL canvas for 2D sprites.

Sets up a top-left-origin orthographic projection over the logical canvas
and draws each image as a textured quad whose corners go through a GeoM.
Text is forwarded to a TextRenderer sharing the same projection.
"""

from __future__ import annotations

from typing import Tuple

from OpenGL.GL import (
    glBindTexture,
    glBegin,
    glEnd,
    glOrtho,
    glLoadIdentity,
    glMatrixMode,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glBlendFunc,
    glEnable,
    glDisable,
    glViewport,
    glClear,
    glClearColor,
    GL_TEXTURE_2D,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_QUADS,
    GL_DEPTH_TEST,
    GL_COLOR_BUFFER_BIT,
)

from config import BACKGROUND_COLOR
from core.geom import GeoM
from game.state import Sprite
from ui.text_renderer import TextRenderer

# Texture coords for the quad corners, clockwise from the image's top-left.
# Rows were flipped on upload so the top of the image is v=1.
_UVS = ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))


class SpriteRenderer:  # pragma: no cover - visual
    def __init__(self, width: int, height: int, text: TextRenderer) -> None:
        self.width = width
        self.height = height
        self.text = text

    def resize(self, window_width: int, window_height: int) -> None:
        """Stretch the logical canvas over the whole window."""
        glViewport(0, 0, window_width, window_height)

    def begin(self) -> None:
        glClearColor(*BACKGROUND_COLOR)
        glClear(GL_COLOR_BUFFER_BIT)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)

    def end(self) -> None:
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)

    def draw_image(self, sprite: Sprite, geom: GeoM) -> None:
        corners = geom.quad(sprite.width, sprite.height)
        glBindTexture(GL_TEXTURE_2D, sprite.texture)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        for (u, v), (x, y) in zip(_UVS, corners):
            glTexCoord2f(u, v)
            glVertex2f(x, y)
        glEnd()

    def draw_text(
        self, text: str, x: float, y: float, color: Tuple[int, int, int, int]
    ) -> None:
        self.text.draw_text(text, x, y, color)
