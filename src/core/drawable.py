from typing import Protocol

import pygame


class RectDrawer(Protocol):
    def __call__(self, rect: pygame.Rect) -> None: ...  # noqa: D401
