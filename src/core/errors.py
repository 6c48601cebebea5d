"""Shell-level failures. All of them end the run; none are retried."""


class GameError(Exception):
    pass


class SetupError(GameError):
    """Display, video, GL or input initialisation failed."""


class RenderError(GameError):
    """A draw call failed part-way through a frame."""


class DialogError(GameError):
    """The end-of-session dialog could not be shown or answered."""
