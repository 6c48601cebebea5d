"""Tests for RectRenderer: outline geometry and GL/pygame failures as RenderError."""

from unittest.mock import DEFAULT, patch

import pygame
import pytest

pytest.importorskip("OpenGL.GL")

from OpenGL.GL import GL_DEPTH_TEST  # noqa: E402
from OpenGL.error import GLError  # noqa: E402

from core.errors import RenderError  # noqa: E402
from core.renderer import RectRenderer  # noqa: E402


class _GLFailure(GLError):
    def __str__(self):
        return "invalid operation"


def _make_renderer() -> RectRenderer:
    return RectRenderer(480, 480)


def _vertices(rect, color=(255, 0, 0)):
    renderer = _make_renderer()
    renderer.set_color(color)
    with patch("core.renderer.glColor3ub") as color_call, patch("core.renderer.glBegin"), patch(
        "core.renderer.glEnd"
    ), patch("core.renderer.glVertex2f") as vertex:
        renderer.draw_rect(rect)
    color_call.assert_called_once_with(*color)
    return [c.args for c in vertex.call_args_list]


class TestDrawRect:
    def test_outline_on_pixel_centres(self):
        assert _vertices(pygame.Rect(10, 20, 5, 5)) == [
            (10.5, 20.5),
            (14.5, 20.5),
            (14.5, 24.5),
            (10.5, 24.5),
        ]

    def test_empty_rect_does_not_invert(self):
        assert _vertices(pygame.Rect(3, 4, 0, 0)) == [(3.5, 4.5)] * 4

    def test_uses_current_color(self):
        _vertices(pygame.Rect(0, 0, 5, 5), color=(0, 255, 255))

    @pytest.mark.parametrize("failing", ["glBegin", "glVertex2f", "glEnd"])
    def test_gl_failure_becomes_render_error(self, failing):
        renderer = _make_renderer()
        with patch("core.renderer.glColor3ub"), patch("core.renderer.glBegin"), patch(
            "core.renderer.glEnd"
        ), patch("core.renderer.glVertex2f"), patch(
            f"core.renderer.{failing}", side_effect=_GLFailure()
        ):
            with pytest.raises(RenderError) as excinfo:
                renderer.draw_rect(pygame.Rect(1, 2, 5, 5))
        assert isinstance(excinfo.value.__cause__, GLError)
        assert "invalid operation" in str(excinfo.value)


class TestFrameCalls:
    def test_clear_scales_color(self):
        with patch("core.renderer.glClearColor") as clear_color, patch("core.renderer.glClear") as clear:
            _make_renderer().clear((255, 0, 0))
        clear_color.assert_called_once_with(1.0, 0.0, 0.0, 1.0)
        clear.assert_called_once()

    def test_clear_failure(self):
        with patch("core.renderer.glClearColor"), patch("core.renderer.glClear", side_effect=_GLFailure()):
            with pytest.raises(RenderError):
                _make_renderer().clear((0, 0, 0))

    def test_flush_failure(self):
        with patch("core.renderer.glFlush", side_effect=_GLFailure()):
            with pytest.raises(RenderError):
                _make_renderer().flush()

    def test_present_flips(self):
        with patch("core.renderer.pygame.display.flip") as flip:
            _make_renderer().present()
        flip.assert_called_once_with()

    def test_present_failure(self):
        with patch("core.renderer.pygame.display.flip", side_effect=pygame.error("video system not initialized")):
            with pytest.raises(RenderError) as excinfo:
                _make_renderer().present()
        assert isinstance(excinfo.value.__cause__, pygame.error)


class TestSetup:
    def test_top_left_origin_projection(self):
        with patch.multiple(
            "core.renderer",
            glViewport=DEFAULT,
            glMatrixMode=DEFAULT,
            glLoadIdentity=DEFAULT,
            glOrtho=DEFAULT,
            glDisable=DEFAULT,
        ) as gl:
            RectRenderer(320, 240).setup()
        gl["glViewport"].assert_called_once_with(0, 0, 320, 240)
        gl["glOrtho"].assert_called_once_with(0, 320, 240, 0, -1, 1)
        gl["glDisable"].assert_any_call(GL_DEPTH_TEST)
