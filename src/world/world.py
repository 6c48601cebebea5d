"""Simulation state for one dodging session.

A World owns the player, the obstacle queue, the pending intent and its own
random generator. It is advanced only through `tick()` and exposes read-only
rectangle views for drawing. It performs no I/O; once `tick()` has returned
False the world is finished and callers build a new one instead of reusing it.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Optional

import numpy as np
import pygame

from config import (
    WIDTH,
    HEIGHT,
    SPAWN_DELAY,
    SPAWN_COUNT_RANGE,
    OBSTACLE_SIZE_RANGE,
    PLAYER_SIZE,
)
from core.drawable import RectDrawer
from world.entity import Entity, Intent, make_player
from world.world_collision import collides_with_any
from world.world_spawner import spawn_batch


class World:
    def __init__(
        self,
        *,
        width: int = WIDTH,
        height: int = HEIGHT,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        spawn_delay: int = SPAWN_DELAY,
        spawn_count_range: tuple[int, int] = SPAWN_COUNT_RANGE,
        obstacle_size_range: tuple[int, int] = OBSTACLE_SIZE_RANGE,
        player_size: tuple[int, int] = PLAYER_SIZE,
    ) -> None:
        self.width = width
        self.height = height
        self.spawn_delay = spawn_delay
        self.spawn_count_range = spawn_count_range
        self.obstacle_size_range = obstacle_size_range

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.ticks = 0
        self.intent: Optional[Intent] = None
        # Size of the batch spawned by the most recent tick (0 if none)
        self.last_spawned = 0

        # Player starts somewhere in the upper-left quadrant
        x = int(self.rng.integers(0, max(1, width // 2)))
        y = int(self.rng.integers(0, max(1, height // 2)))
        self.player: Entity = make_player(x, y, player_size)

        # Oldest obstacle first; the front is always the closest to expiring
        self.obstacles: Deque[Entity] = deque()

    # ------------------------------------------------------------------
    @property
    def points(self) -> float:
        return self.ticks / self.spawn_delay

    def set_intent(self, intent: Optional[Intent]) -> None:
        """Record the latest directional request, replacing any unconsumed one."""
        self.intent = intent

    # ------------------------------------------------------------------
    def apply_intent(self) -> None:
        intent, self.intent = self.intent, None
        pos = self.player.position
        if intent is Intent.LEFT:
            pos.left()
        elif intent is Intent.RIGHT:
            pos.right(self.width)
        elif intent is Intent.UP:
            pos.up()
        elif intent is Intent.DOWN:
            pos.down(self.height)

    def check_collisions(self) -> bool:
        return collides_with_any(self.player, self.obstacles)

    def move_obstacles(self) -> None:
        for obstacle in self.obstacles:
            obstacle.position.unsafe_left()

    def cleanup(self) -> int:
        """Drop obstacles that have fully left the field from the front of the queue.

        Stops at the first obstacle whose right edge is still positive.
        Returns the number removed.
        """
        removed = 0
        while self.obstacles and self.obstacles[0].right_edge <= 0:
            self.obstacles.popleft()
            removed += 1
        return removed

    def spawn_due(self) -> bool:
        return self.ticks % self.spawn_delay == 0

    def spawn(self) -> int:
        batch = spawn_batch(
            self.rng,
            width=self.width,
            height=self.height,
            count_range=self.spawn_count_range,
            size_range=self.obstacle_size_range,
        )
        self.obstacles.extend(batch)
        return len(batch)

    def tick(self) -> bool:
        """Advance the world by one step. Returns True while the player is alive.

        Order is significant: the intent is applied before the first collision
        check, and a collision there ends the tick before obstacles move or
        spawn.
        """
        self.ticks += 1
        self.last_spawned = 0
        self.apply_intent()

        if self.check_collisions():
            return False

        self.move_obstacles()
        self.cleanup()

        if self.spawn_due():
            self.last_spawned = self.spawn()

        return not self.check_collisions()

    # ------------------------------------------------------------------
    # Read-only views for rendering
    def player_rect(self) -> pygame.Rect:
        return self.player.to_rect()

    def obstacle_rects(self) -> Iterator[pygame.Rect]:
        return (obstacle.to_rect() for obstacle in self.obstacles)

    def draw_obstacles(self, drawer: RectDrawer) -> int:
        """Feed every obstacle rectangle to `drawer`, oldest first.

        An exception raised by `drawer` stops the pass and propagates.
        Returns the number of rectangles drawn.
        """
        count = 0
        for rect in self.obstacle_rects():
            drawer(rect)
            count += 1
        return count

    def draw_player(self, drawer: RectDrawer) -> None:
        drawer(self.player_rect())


__all__ = ["World"]
