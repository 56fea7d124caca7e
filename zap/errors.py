class ZapError(Exception):
    """Base class for zap errors."""


class CollectionFailure(ZapError):
    """A source collector could not produce its listing."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class LaunchFailure(ZapError):
    """A detached process could not be spawned."""


class InitFailure(ZapError):
    """The terminal front-end could not start."""
