from __future__ import annotations

import enum
from dataclasses import dataclass

import pygame

from world.position import Position, Coverage


class EntityKind(enum.Enum):
    PLAYER = "player"
    OBSTACLE = "obstacle"


class Intent(enum.Enum):
    """Directional request applied to the player on the next tick."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class Entity:
    kind: EntityKind
    position: Position
    coverage: Coverage

    @property
    def right_edge(self) -> int:
        return self.position.x + self.coverage.width

    def to_rect(self) -> pygame.Rect:
        """Drawable rectangle; negative coordinates are clamped to 0."""
        return pygame.Rect(
            max(self.position.x, 0),
            max(self.position.y, 0),
            self.coverage.width,
            self.coverage.height,
        )


def make_player(x: int, y: int, size: tuple[int, int]) -> Entity:
    return Entity(EntityKind.PLAYER, Position(x, y), Coverage(*size))


def make_obstacle(x: int, y: int, width: int, height: int) -> Entity:
    return Entity(EntityKind.OBSTACLE, Position(x, y), Coverage(width, height))


__all__ = ["EntityKind", "Intent", "Entity", "make_player", "make_obstacle"]
