"""
Errors Module - Exception types raised by the solver and its collaborators.
"""


class UnblockError(Exception):
    """Base class for all errors raised by the unblock package."""


class InvalidConfiguration(UnblockError, ValueError):
    """
    Raised when an initial block list violates the board invariants.

    Covers overlapping blocks, blocks outside the grid, blocks shorter
    than two tiles, duplicate ids and a missing or repeated prisoner.
    Always raised before any search starts.
    """


class LayoutError(UnblockError, ValueError):
    """Raised when a text layout cannot be turned into blocks."""


class DetectionError(UnblockError):
    """Raised when a screenshot or raw RGB dump cannot be read."""
