"""pathkit: cross-platform path parsing and search-path resolution."""

from .core import (
    Config,
    PathFormat,
    Path,
    parse,
    create_directory,
    Resolver,
    PathError,
    ResolutionError,
    StatError,
    FormatMismatchError,
    InvalidJoinError,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "PathFormat",
    "Path",
    "parse",
    "create_directory",
    "Resolver",
    "PathError",
    "ResolutionError",
    "StatError",
    "FormatMismatchError",
    "InvalidJoinError",
]
