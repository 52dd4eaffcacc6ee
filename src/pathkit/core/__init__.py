"""Core components for pathkit."""

from .models import Config, PathFormat
from .errors import (
    PathError,
    ResolutionError,
    StatError,
    FormatMismatchError,
    InvalidJoinError,
)
from .path import Path, parse, create_directory
from .resolver import Resolver

__all__ = [
    "Config",
    "PathFormat",
    "PathError",
    "ResolutionError",
    "StatError",
    "FormatMismatchError",
    "InvalidJoinError",
    "Path",
    "parse",
    "create_directory",
    "Resolver",
]
