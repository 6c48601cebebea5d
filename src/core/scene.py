import enum
from typing import List, Callable
from dataclasses import dataclass, field

UpdateFn = Callable[[], None]


class Finished(enum.Enum):
    """How a session ended; consumed by Engine.run's outer loop."""

    EXIT = "exit"
    RESTART = "restart"
    ERROR = "error"


@dataclass
class Scene:
    # Extra per-tick hooks run after the scene's own update
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self) -> bool:
        for fn in self.updaters:
            fn()
        return True

    # Optional per-event handler (scenes can override). Returns False to quit.
    def handle_event(self, event) -> bool:
        return True

    # Scenes own their full frame (clear, draw, present)
    def render(self, renderer) -> None:  # pragma: no cover - visual
        pass
