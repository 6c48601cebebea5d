"""Text labels for the 2D GL view, rendered with pygame fonts.

Used for the score HUD and the game-over dialog. Each label is a pygame font
surface uploaded once into a GL texture. A label is looked up by its `key`
when one is given (the running score, the points message) and by
(text, color) otherwise, and is only re-uploaded when its text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Tuple

import pygame
from OpenGL.error import GLError
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glPushMatrix,
    glPopMatrix,
    glBegin,
    glEnd,
    glOrtho,
    glLoadIdentity,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glBlendFunc,
    glEnable,
    glDisable,
    glMatrixMode,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_QUADS,
)

from core.errors import RenderError

RGBA = Tuple[int, int, int, int]


@dataclass
class _Label:
    texture: int
    text: Optional[str] = None
    width: int = 0
    height: int = 0


class TextRenderer:
    """Screen-space text drawn between begin() and end()."""

    def __init__(self, screen_width: int, screen_height: int, font: Optional[pygame.font.Font] = None) -> None:
        self.width = screen_width
        self.height = screen_height
        self.font = font or pygame.font.Font(None, 24)
        self._labels: Dict[Hashable, _Label] = {}

    def begin(self) -> None:
        try:
            glMatrixMode(GL_PROJECTION)
            glPushMatrix()
            glLoadIdentity()
            glOrtho(0, self.width, self.height, 0, -1, 1)
            glMatrixMode(GL_MODELVIEW)
            glPushMatrix()
            glLoadIdentity()
            glEnable(GL_BLEND)
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
            glEnable(GL_TEXTURE_2D)
        except GLError as e:
            raise RenderError(f"text overlay setup failed: {e}") from e

    def end(self) -> None:
        try:
            glDisable(GL_TEXTURE_2D)
            glDisable(GL_BLEND)
            glPopMatrix()
            glMatrixMode(GL_PROJECTION)
            glPopMatrix()
            glMatrixMode(GL_MODELVIEW)
        except GLError as e:
            raise RenderError(f"text overlay teardown failed: {e}") from e

    def label(self, text: str, color: RGBA, key: Optional[str] = None) -> _Label:
        """Return the texture for `text`, uploading it if it is new or changed."""
        slot = (text, color) if key is None else key
        label = self._labels.get(slot)
        if label is None:
            label = self._labels[slot] = _Label(texture=glGenTextures(1))
        if label.text != text:
            surf = self.font.render(text, True, color)
            label.width, label.height = surf.get_size()
            glBindTexture(GL_TEXTURE_2D, label.texture)
            glTexImage2D(
                GL_TEXTURE_2D, 0, GL_RGBA, label.width, label.height, 0,
                GL_RGBA, GL_UNSIGNED_BYTE, pygame.image.tobytes(surf, "RGBA", True),
            )
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
            label.text = text
        return label

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: RGBA = (255, 255, 255, 255),
        *,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:
        """Draw one line of text with its top-left (or centre, for
        ``align="center"``) at screen coords. Returns the label size."""
        try:
            label = self.label(text, color, key)
            w, h = label.width, label.height
            if align == "center":
                x, y = x - w / 2, y - h / 2
            glBindTexture(GL_TEXTURE_2D, label.texture)
            glColor4f(1.0, 1.0, 1.0, 1.0)
            glBegin(GL_QUADS)
            # tobytes(..., True) flips rows, so v runs bottom-up
            for u, v, dx, dy in ((0, 1, 0, 0), (1, 1, w, 0), (1, 0, w, h), (0, 0, 0, h)):
                glTexCoord2f(u, v)
                glVertex2f(x + dx, y + dy)
            glEnd()
        except GLError as e:
            raise RenderError(f"draw_text {text!r} failed: {e}") from e
        return w, h


__all__ = ["TextRenderer"]
