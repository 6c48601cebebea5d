"""Small helper to spawn obstacle batches along the right edge of the field.

Draw order from the generator is fixed (count first, then y/width/height per
obstacle) so a seeded generator reproduces the same batch.
"""

from __future__ import annotations

import numpy as np

from world.entity import Entity, make_obstacle
from config import SPAWN_COUNT_RANGE, OBSTACLE_SIZE_RANGE


def spawn_obstacles(
    rng: np.random.Generator,
    *,
    count: int,
    x: int,
    max_y: int,
    size_range: tuple[int, int] = OBSTACLE_SIZE_RANGE,
) -> list[Entity]:
    """Create `count` obstacles anchored at column `x`.

    Parameters
    ----------
    rng: np.random.Generator
        Source for the y coordinate and box size of each obstacle.
    count: int
        Number of obstacles to generate.
    x: int
        Spawn column (the right edge of the field).
    max_y: int
        Exclusive upper bound for the y coordinate.
    size_range: tuple[int, int]
        Half-open range each side of the box is drawn from.
    """
    lo, hi = size_range
    obstacles: list[Entity] = []
    for _ in range(count):
        y = int(rng.integers(0, max_y))
        width = int(rng.integers(lo, hi))
        height = int(rng.integers(lo, hi))
        obstacles.append(make_obstacle(x, y, width, height))
    return obstacles


def spawn_batch(
    rng: np.random.Generator,
    *,
    width: int,
    height: int,
    count_range: tuple[int, int] = SPAWN_COUNT_RANGE,
    size_range: tuple[int, int] = OBSTACLE_SIZE_RANGE,
) -> list[Entity]:
    """Spawn a random-sized batch at the right edge of a `width` x `height` field."""
    count = int(rng.integers(*count_range))
    return spawn_obstacles(rng, count=count, x=width, max_y=height, size_range=size_range)


__all__ = ["spawn_obstacles", "spawn_batch"]
