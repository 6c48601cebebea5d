"""Collision tests between the player and obstacles.

Expose `is_collided(first, second)` and `collides_with_any(target, others)`.

The overlap test is deliberately asymmetric: it checks whether the anchor
(top-left corner) of `second` lies inside the closed rectangle of `first`.
It is not a full rectangle-rectangle intersection, so argument order matters.
"""

from __future__ import annotations

from typing import Iterable

from world.entity import Entity


def _in_range(start: int, extent: int, value: int) -> bool:
    return start <= value <= start + extent


def is_collided(first: Entity, second: Entity) -> bool:
    """Return True if `second`'s anchor lies within `first`'s closed box."""
    f_pos, f_cov = first.position, first.coverage
    s_pos = second.position
    return _in_range(f_pos.x, f_cov.width, s_pos.x) and _in_range(
        f_pos.y, f_cov.height, s_pos.y
    )


def collides_with_any(target: Entity, others: Iterable[Entity]) -> bool:
    """Return True if `target`'s anchor lies inside any box in `others`.

    Each obstacle is the box being tested against, the target supplies the
    anchor point.
    """
    return any(is_collided(other, target) for other in others)


__all__ = ["is_collided", "collides_with_any"]
