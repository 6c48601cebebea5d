"""Renderer for the 2D play field: outlined rectangles in screen space.

Uses the fixed-function pipeline (legacy) with an orthographic projection whose
origin is the top-left corner, so world coordinates map straight to pixels.
Any GL failure during a frame is re-raised as RenderError; the session treats
that as fatal.
"""

from __future__ import annotations

import pygame
from OpenGL.error import GLError
from OpenGL.GL import (
    glViewport,
    glMatrixMode,
    glLoadIdentity,
    glOrtho,
    glDisable,
    glClearColor,
    glClear,
    glColor3ub,
    glBegin,
    glEnd,
    glVertex2f,
    glFlush,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_DEPTH_TEST,
    GL_CULL_FACE,
    GL_COLOR_BUFFER_BIT,
    GL_LINE_LOOP,
)

from core.errors import RenderError

Color = tuple[int, int, int]


class RectRenderer:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.color: Color = (255, 255, 255)

    def setup(self) -> None:
        """Configure viewport and a pixel-aligned 2D projection."""
        glViewport(0, 0, self.width, self.height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)

    # ------------------------------------------------------------------
    def clear(self, color: Color) -> None:
        r, g, b = color
        try:
            glClearColor(r / 255.0, g / 255.0, b / 255.0, 1.0)
            glClear(GL_COLOR_BUFFER_BIT)
        except GLError as e:
            raise RenderError(f"clear failed: {e}") from e

    def set_color(self, color: Color) -> None:
        self.color = color

    def draw_rect(self, rect: pygame.Rect) -> None:
        """Outline `rect` in the current color (inclusive of its edge pixels)."""
        # +0.5 puts line vertices on pixel centres
        x0 = rect.x + 0.5
        y0 = rect.y + 0.5
        x1 = rect.x + max(rect.w - 1, 0) + 0.5
        y1 = rect.y + max(rect.h - 1, 0) + 0.5
        try:
            glColor3ub(*self.color)
            glBegin(GL_LINE_LOOP)
            glVertex2f(x0, y0)
            glVertex2f(x1, y0)
            glVertex2f(x1, y1)
            glVertex2f(x0, y1)
            glEnd()
        except GLError as e:
            raise RenderError(f"draw_rect {tuple(rect)} failed: {e}") from e

    def flush(self) -> None:
        try:
            glFlush()
        except GLError as e:
            raise RenderError(f"flush failed: {e}") from e

    def present(self) -> None:
        try:
            pygame.display.flip()
        except pygame.error as e:
            raise RenderError(f"present failed: {e}") from e


__all__ = ["RectRenderer", "Color"]
