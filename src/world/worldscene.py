"""World scene that owns the simulation, key handling and the frame render.

The engine hosts one WorldScene per session: events are forwarded to
handle_event(), update() advances the World by exactly one tick, render()
draws the current state. A scene is thrown away when its session ends; a
restart builds a new scene (and with it a new World).
"""

from __future__ import annotations

from typing import Optional

import pygame

from config import (
    BACKGROUND_COLOR,
    OBSTACLE_COLOR,
    PLAYER_COLOR,
)
from core.scene import Scene
from world.entity import Intent
from world.world import World
from world.world_hud import WorldHUD

KEY_INTENTS = {
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_UP: Intent.UP,
    pygame.K_DOWN: Intent.DOWN,
}


class WorldScene(Scene):
    def __init__(
        self,
        world: Optional[World] = None,
        *,
        seed: Optional[int] = None,
        hud: Optional[WorldHUD] = None,
        verbose: bool = False,
    ) -> None:
        super().__init__()
        self.world = world or World(seed=seed)
        self.hud = hud
        self.alive = True
        if verbose:
            self.updaters.append(self._report_spawns)

    def _report_spawns(self) -> None:
        if self.world.last_spawned:
            print(
                f"[World] spawned {self.world.last_spawned} "
                f"(tick {self.world.ticks}, {len(self.world.obstacles)} on field)"
            )

    # ------------------------------------------------------------------
    def handle_event(self, event) -> bool:
        """Translate one pygame event. Returns False when the player quits.

        Only the latest arrow key before a tick counts; earlier ones are
        overwritten rather than queued.
        """
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            intent = KEY_INTENTS.get(event.key)
            if intent is not None:
                self.world.set_intent(intent)
        return True

    def update(self) -> bool:
        self.alive = self.world.tick()
        super().update()
        return self.alive

    @property
    def points(self) -> float:
        return self.world.points

    # ------------------------------------------------------------------
    def render(self, renderer) -> None:
        renderer.clear(BACKGROUND_COLOR)

        renderer.set_color(OBSTACLE_COLOR)
        self.world.draw_obstacles(renderer.draw_rect)
        renderer.flush()

        renderer.set_color(PLAYER_COLOR)
        self.world.draw_player(renderer.draw_rect)

        if self.hud is not None:
            self.hud.draw(self.points)
        renderer.present()


__all__ = ["WorldScene", "KEY_INTENTS"]
