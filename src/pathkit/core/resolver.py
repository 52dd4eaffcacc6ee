"""
Search-path resolution.

A Resolver holds an ordered list of search roots and finds the first root
under which a relative path exists, similar to how a shell walks PATH.
"""

import logging
from typing import Iterator, List, Optional, Union

from .models import Config, PathFormat
from .path import Path, PathLike
from ..utils.host import HostFilesystem, default_host

logger = logging.getLogger(__name__)


class Resolver:
    """Ordered list of search roots. Earlier roots take priority."""

    def __init__(self, host: Optional[HostFilesystem] = None,
                 path_format: Optional[PathFormat] = None):
        """
        Initialize the resolver with the current working directory as its
        only root.

        Args:
            host: Filesystem used for the working directory and existence
                checks. Defaults to the real operating system.
            path_format: Format used to parse string arguments. Must match
                the host's native format, since the working directory root
                is always in that format. Defaults to the native format.

        Raises:
            ValueError: If path_format differs from the host's format.
            ResolutionError: If the working directory is unavailable.
        """
        self.host = host if host is not None else default_host
        native = self.host.native_format
        if path_format is not None and path_format is not native:
            raise ValueError(
                f"Cannot resolve {path_format.name.lower()} paths on a "
                f"{native.name.lower()} host"
            )
        self.path_format = native
        self._paths: List[Path] = [Path.getcwd(self.host)]

    @classmethod
    def from_config(cls, config: Config, host: Optional[HostFilesystem] = None) -> "Resolver":
        """Create a resolver and append the configured search paths."""
        resolver = cls(host, config.resolved_format())
        for entry in config.search_paths:
            resolver.append(entry)
        logger.debug(f"Resolver initialized with {len(resolver)} search roots")
        return resolver

    def _coerce(self, value: Union[PathLike, Path]) -> Path:
        return Path.parse(value, None if isinstance(value, Path) else self.path_format)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __getitem__(self, index: int) -> Path:
        return self._paths[index]

    def append(self, path: Union[PathLike, Path]) -> None:
        """Add a search root with the lowest priority."""
        self._paths.append(self._coerce(path))

    def prepend(self, path: Union[PathLike, Path]) -> None:
        """Add a search root with the highest priority."""
        self._paths.insert(0, self._coerce(path))

    def erase(self, index: int) -> None:
        """
        Remove the search root at the given position.

        Raises:
            IndexError: If there is no root at that position.
        """
        del self._paths[index]

    def resolve(self, candidate: Union[PathLike, Path]) -> Path:
        """
        Find the first search root containing the candidate.

        Args:
            candidate: Relative path to look up.

        Returns:
            The first existing root/candidate combination, or the candidate
            itself when none exists. Absolute candidates are returned as-is.
        """
        candidate = self._coerce(candidate)
        if candidate.is_absolute():
            logger.debug(f"Not searching for absolute path {candidate}")
            return candidate

        for root in self._paths:
            if root.path_format is not candidate.path_format:
                logger.warning(
                    f"Skipping search root {root}: {root.path_format.name.lower()} format "
                    f"does not match {candidate.path_format.name.lower()} path {candidate}"
                )
                continue
            combined = root / candidate
            if combined.exists(self.host):
                logger.debug(f"Resolved {candidate} to {combined}")
                return combined

        logger.debug(f"No search root contains {candidate}")
        return candidate

    def __repr__(self) -> str:
        return f"Resolver({[str(p) for p in self._paths]!r})"
