"""Exception types raised by the game engine."""


class GameError(Exception):
    """Base class for block snake errors."""


class ConstructionError(GameError, ValueError):
    """Raised when a grid, engine, or config cannot be built as requested."""


class PreconditionError(GameError, RuntimeError):
    """Raised when an operation is called in a status that does not allow it."""
