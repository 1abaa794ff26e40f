"""Error types raised by the game core."""


class ConfigurationError(ValueError):
    """Move list is unusable: even or fewer than three moves, or duplicate labels."""


class InvalidMove(ValueError):
    """A move that does not belong to the game's move set."""


class InvalidInput(ValueError):
    """Unrecognized menu input. The caller re-prompts."""


class ProtocolError(RuntimeError):
    """Commit/reveal steps taken out of order."""
