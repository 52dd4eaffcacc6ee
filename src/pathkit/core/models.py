"""
Core data models for pathkit.

This module contains the path format enumeration and the configuration
settings shared by the resolver and the command-line tool.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class PathFormat(Enum):
    """Path conventions understood by the parser, with their separator."""
    POSIX = "/"
    WINDOWS = "\\"

    @property
    def separator(self) -> str:
        """Separator used when rendering a path."""
        return self.value

    @property
    def delimiters(self) -> str:
        """Characters accepted as separators when parsing."""
        if self is PathFormat.WINDOWS:
            return "/\\"
        return "/"

    @classmethod
    def native(cls) -> "PathFormat":
        """Format of the host operating system."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def from_name(cls, name: str) -> "PathFormat":
        """
        Map a format name to a PathFormat.

        Args:
            name: One of 'posix', 'windows' or 'native' (case-insensitive).

        Returns:
            The matching PathFormat.

        Raises:
            ValueError: If the name is unknown.
        """
        key = name.strip().lower()
        if key == "native":
            return cls.native()
        if key == "posix":
            return cls.POSIX
        if key == "windows":
            return cls.WINDOWS
        raise ValueError(f"Unknown path format: {name!r}")


def _env_search_paths() -> List[str]:
    raw = os.getenv('PATHKIT_SEARCH_PATH', '')
    return [entry for entry in raw.split(os.pathsep) if entry]


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in {'1', 'true', 'yes'}


@dataclass
class Config:
    """Configuration settings for pathkit."""

    # Extra resolver roots, appended after the working directory
    search_paths: List[str] = field(default_factory=_env_search_paths)

    path_format: str = field(default_factory=lambda: os.getenv('PATHKIT_PATH_FORMAT', 'native'))
    debug: bool = field(default_factory=lambda: _env_flag('PATHKIT_DEBUG'))

    def resolved_format(self) -> PathFormat:
        """Get the configured path format as a PathFormat."""
        return PathFormat.from_name(self.path_format)
