"""
Exception classes for pathkit.
"""


class PathError(Exception):
    """Base exception for all pathkit errors."""
    pass


class ResolutionError(PathError):
    """Raised when a path cannot be resolved to an absolute path."""
    pass


class StatError(PathError):
    """Raised when the size of a path cannot be queried."""
    pass


class FormatMismatchError(PathError, ValueError):
    """Raised when joining paths of different formats."""
    pass


class InvalidJoinError(PathError, ValueError):
    """Raised when the right-hand side of a join is an absolute path."""
    pass
