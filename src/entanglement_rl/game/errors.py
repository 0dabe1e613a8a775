from __future__ import annotations


class EntanglementError(Exception):
    """Base class for errors raised by the game engine."""


class GameOverError(EntanglementError):
    """Raised when a move is attempted after the path has been finished."""


class InvalidTileError(EntanglementError):
    """Raised when a tile is queried for a pin it has no connection for.

    Also covers tiles built without a full pairing of the 12 pins and pins
    outside the 0..11 range.
    """


class EmptyPathError(EntanglementError):
    """Raised when the last item of a path is requested before any exists."""
