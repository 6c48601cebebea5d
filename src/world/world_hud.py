"""World HUD: running score label in the top-left corner."""

from __future__ import annotations

from config import HUD_COLOR


class WorldHUD:
    def __init__(self, text, *, margin: int = 6) -> None:
        self.text = text
        self.margin = margin

    @staticmethod
    def label(points: float) -> str:
        return f"points: {points:.2f}"

    def draw(self, points: float) -> None:
        self.text.begin()
        self.text.draw_text(self.label(points), self.margin, self.margin, HUD_COLOR, key="points")
        self.text.end()
