"""Game-over dialog drawn inside the game window.

Shows the final score with two buttons, "Restart" (chosen by Return) and
"Exit" (chosen by Escape), and blocks until one is picked. Closing the window
counts as Exit. The clicked button id is mapped to a Finished outcome; an id
the dialog does not know maps to Finished.ERROR.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from config import (
    WIDTH,
    HEIGHT,
    TICK_DELAY_MS,
    BACKGROUND_COLOR,
    HUD_COLOR,
    DIALOG_BORDER_COLOR,
    DIALOG_DEFAULT_BUTTON_COLOR,
    DIALOG_SIZE,
    DIALOG_BUTTON_SIZE,
)
from core.errors import DialogError, RenderError
from core.scene import Finished

RESTART_ID = 1
EXIT_ID = 2
# Returned when the window is closed instead of a button being picked
CLOSE_BUTTON = 0


@dataclass
class DialogButton:
    button_id: int
    text: str
    rect: pygame.Rect
    hotkey: Optional[int] = None


def points_message(points: float) -> str:
    return f"Your points: {points}"


class GameOverDialog:
    title = "Game over!"

    def __init__(self, renderer, text, *, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.renderer = renderer
        self.text = text
        self.panel = pygame.Rect((0, 0), DIALOG_SIZE)
        self.panel.center = (width // 2, height // 2)
        self.buttons = self._layout_buttons()

    def _layout_buttons(self) -> list[DialogButton]:
        bw, bh = DIALOG_BUTTON_SIZE
        gap = 20
        y = self.panel.bottom - bh - 16
        left = self.panel.centerx - gap // 2 - bw
        right = self.panel.centerx + gap // 2
        return [
            DialogButton(RESTART_ID, "Restart", pygame.Rect(left, y, bw, bh), pygame.K_RETURN),
            DialogButton(EXIT_ID, "Exit", pygame.Rect(right, y, bw, bh), pygame.K_ESCAPE),
        ]

    # ------------------------------------------------------------------
    @staticmethod
    def resolve(clicked: int) -> Finished:
        if clicked == CLOSE_BUTTON or clicked == EXIT_ID:
            return Finished.EXIT
        if clicked == RESTART_ID:
            return Finished.RESTART
        return Finished.ERROR

    def button_for_event(self, event) -> Optional[int]:
        """Return the button id an event selects, or None to keep waiting."""
        if event.type == pygame.QUIT:
            return CLOSE_BUTTON
        if event.type == pygame.KEYDOWN:
            for button in self.buttons:
                if button.hotkey == event.key:
                    return button.button_id
            if event.key == pygame.K_KP_ENTER:
                return RESTART_ID
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for button in self.buttons:
                if button.rect.collidepoint(event.pos):
                    return button.button_id
        return None

    # ------------------------------------------------------------------
    def draw(self, message: str) -> None:  # pragma: no cover - visual
        r = self.renderer
        r.clear(BACKGROUND_COLOR)
        r.set_color(DIALOG_BORDER_COLOR)
        r.draw_rect(self.panel)
        for button in self.buttons:
            is_default = button.hotkey == pygame.K_RETURN
            r.set_color(DIALOG_DEFAULT_BUTTON_COLOR if is_default else DIALOG_BORDER_COLOR)
            r.draw_rect(button.rect)

        t = self.text
        t.begin()
        t.draw_text(self.title, self.panel.centerx, self.panel.top + 28, HUD_COLOR, align="center")
        t.draw_text(message, self.panel.centerx, self.panel.top + 64, HUD_COLOR, key="message", align="center")
        for button in self.buttons:
            t.draw_text(button.text, *button.rect.center, HUD_COLOR, align="center")
        t.end()
        r.present()

    def wait_for_choice(self, message: str) -> int:
        try:
            pygame.event.clear()
            self.draw(message)
            while True:
                for event in pygame.event.get():
                    clicked = self.button_for_event(event)
                    if clicked is not None:
                        return clicked
                    # back buffer may be stale after the window was covered
                    if event.type == pygame.WINDOWEXPOSED:
                        self.draw(message)
                pygame.time.wait(TICK_DELAY_MS)
        except (pygame.error, RenderError) as e:
            raise DialogError(f"game over dialog failed: {e}") from e

    def show(self, points: float) -> Finished:
        """Block until the player picks Restart or Exit."""
        message = points_message(points)
        print(f"[GameOver] {message}")
        return self.resolve(self.wait_for_choice(message))


__all__ = [
    "GameOverDialog",
    "DialogButton",
    "points_message",
    "RESTART_ID",
    "EXIT_ID",
    "CLOSE_BUTTON",
]
