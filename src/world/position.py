"""Integer positions and bounding-box sizes on the bounded play field.

The play field spans ``[0, WIDTH] x [0, HEIGHT]`` with the origin in the
top-left corner. Player-controlled movement is clamped to that range; the
unclamped ``unsafe_left`` is what obstacles use so they can drift past the
left edge before being cleaned up.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import WIDTH, HEIGHT


@dataclass
class Position:
    x: int
    y: int

    def unsafe_left(self) -> None:
        """Move one unit left with no lower bound (x may go negative)."""
        self.x -= 1

    def left(self) -> None:
        if self.x > 0:
            self.x -= 1

    def right(self, max_x: int = WIDTH) -> None:
        if self.x < max_x:
            self.x += 1

    def up(self) -> None:
        if self.y > 0:
            self.y -= 1

    def down(self, max_y: int = HEIGHT) -> None:
        if self.y < max_y:
            self.y += 1

    def copy(self) -> "Position":
        return Position(self.x, self.y)


@dataclass(frozen=True)
class Coverage:
    """Width/height of an axis-aligned box anchored at a Position."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"coverage must be non-negative, got {self.width}x{self.height}")


__all__ = ["Position", "Coverage"]
