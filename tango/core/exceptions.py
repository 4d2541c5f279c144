"""Custom exception hierarchy for the Tango solver."""


class TangoError(Exception):
    """Base exception for solver failures."""


class BoardShapeError(TangoError):
    """Raised when grid or constraint matrices do not match the board size."""


class BoardParseError(TangoError):
    """Raised when a serialized board holds unknown symbols or constraints."""


class ValidationError(TangoError):
    """Raised when a board breaks one of the puzzle rules."""
