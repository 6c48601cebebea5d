"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up window and GL state, runs the per-session loop and the
  outer restart loop.
- WorldScene: holds the simulation and its input/update/draw logic.
- GameOverDialog: the end-of-session Restart/Exit choice.

A session is one WorldScene from start to death (or quit). Restart throws the
scene away and builds a fresh one; nothing carries over between sessions.
"""

from __future__ import annotations

import time
from typing import Optional

import pygame
from OpenGL.error import GLError

from config import *
from core.errors import SetupError, RenderError, DialogError
from core.renderer import RectRenderer
from core.scene import Finished
from ui.game_over import GameOverDialog
from ui.text_renderer import TextRenderer
from world.world_hud import WorldHUD
from world.worldscene import WorldScene


def log_timing(message: str, start_time: float, end_time: float) -> None:
    print(f"[Engine] {message} took {end_time - start_time:.6f} seconds")


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        *,
        seed: Optional[int] = SEED,
        show_hud: bool = SHOW_HUD,
        verbose: bool = VERBOSE,
    ) -> None:
        self.seed = seed
        self.show_hud = show_hud
        self.verbose = verbose
        self.sessions = 0

        start_time = time.perf_counter()
        self._init_display()
        log_timing("Display setup", start_time, time.perf_counter())

    def _init_display(self) -> None:
        """Open the window and configure GL. Any failure here is fatal."""
        try:
            pygame.init()
            pygame.display.set_caption(TITLE)
            pygame.display.set_mode((WIDTH, HEIGHT), pygame.DOUBLEBUF | pygame.OPENGL)
        except pygame.error as e:
            raise SetupError(f"display setup failed: {e}") from e

        self.renderer = RectRenderer(WIDTH, HEIGHT)
        try:
            self.renderer.setup()
            self.text = TextRenderer(WIDTH, HEIGHT)
        except (GLError, pygame.error) as e:
            raise SetupError(f"GL setup failed: {e}") from e
        self.dialog = GameOverDialog(self.renderer, self.text)

    # ------------------------------------------------------------------
    def new_scene(self) -> WorldScene:
        # A fixed seed still gives each restart its own layout
        seed = None if self.seed is None else self.seed + self.sessions
        self.sessions += 1
        hud = WorldHUD(self.text) if self.show_hud else None
        return WorldScene(seed=seed, hud=hud, verbose=self.verbose)

    def handle_events(self, scene: WorldScene) -> bool:
        for event in pygame.event.get():
            if not scene.handle_event(event):
                return False
        return True

    def run_session(self, scene: WorldScene) -> Finished:
        """Drive one scene until the player quits or dies.

        At most one tick per iteration; pacing is a plain sleep, quitting is
        only noticed when events are polled at the top of the loop.
        """
        try:
            while True:
                if not self.handle_events(scene):
                    return Finished.EXIT
                if not scene.update():
                    return self.dialog.show(scene.points)
                scene.render(self.renderer)
                pygame.time.wait(TICK_DELAY_MS)
        except (RenderError, DialogError) as e:
            print(f"[Engine] {e}")
            return Finished.ERROR

    def run(self) -> Finished:
        outcome = Finished.RESTART
        while outcome is Finished.RESTART:
            outcome = self.run_session(self.new_scene())
        pygame.quit()
        return outcome
