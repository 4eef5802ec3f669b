"""Screen-space text for the OpenGL canvas using pygame fonts.

Labels are rasterised once per (text, color) and kept as textures; the game
only ever shows a handful of fixed strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import pygame
from OpenGL.GL import (
    glBindTexture,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    GL_TEXTURE_2D,
    GL_QUADS,
)

from textures.texture_utils import upload_texture

Color = Tuple[int, int, int, int]


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]


def text_origin(x: float, y: float, ascent: int) -> Tuple[float, float]:
    """Top-left corner of a label whose baseline starts at (x, y)."""
    return x, y - ascent


class TextRenderer:
    """Draws cached text labels; expects a 2D ortho projection to be active."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self._cache: Dict[Tuple[str, Color], _TexSlot] = {}

    def _get_slot(self, text: str, color: Color) -> _TexSlot:
        cache_key = (text, color)
        slot = self._cache.get(cache_key)
        if slot is None:
            surf = self.font.render(text, True, color)
            tex_id, size = upload_texture(surf)
            slot = _TexSlot(id=tex_id, size=size)
            self._cache[cache_key] = slot
        return slot

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255, 255),
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        slot = self._get_slot(text, color)
        w, h = slot.size
        draw_x, draw_y = text_origin(x, y, self.font.get_ascent())

        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # tostring(..., True) flips rows, so v=1 is the top of the label
        glTexCoord2f(0.0, 1.0)
        glVertex2f(draw_x, draw_y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(draw_x + w, draw_y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(draw_x + w, draw_y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(draw_x, draw_y + h)
        glEnd()
        return w, h
