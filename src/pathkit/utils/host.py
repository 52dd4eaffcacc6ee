"""
Host filesystem access.

Every operating system call made by pathkit goes through a HostFilesystem.
Paths and resolvers accept one as an optional argument so tests can swap in
a fake host instead of touching the real working directory.
"""

import os
import logging
import stat

from ..core.errors import ResolutionError, StatError
from ..core.models import PathFormat

logger = logging.getLogger(__name__)

# Permissions for create_directory: read, write and search for the owner only
DIRECTORY_MODE = stat.S_IRUSR | stat.S_IWUSR | stat.S_IXUSR


class HostFilesystem:
    """Thin wrapper around the operating system's path calls."""

    @property
    def native_format(self) -> PathFormat:
        """Path format of the host."""
        return PathFormat.native()

    def exists(self, path: str) -> bool:
        """Check whether anything exists at the path."""
        try:
            os.stat(path)
        except (OSError, ValueError):
            return False
        return True

    def file_size(self, path: str) -> int:
        """
        Get the size of a file in bytes.

        Raises:
            StatError: If the path cannot be stat'd.
        """
        try:
            return os.stat(path).st_size
        except (OSError, ValueError) as e:
            raise StatError(f'cannot stat file "{path}"') from e

    def is_directory(self, path: str) -> bool:
        """Check whether the path is a directory."""
        try:
            return stat.S_ISDIR(os.stat(path).st_mode)
        except (OSError, ValueError):
            return False

    def is_file(self, path: str) -> bool:
        """Check whether the path is a regular file."""
        try:
            return stat.S_ISREG(os.stat(path).st_mode)
        except (OSError, ValueError):
            return False

    def remove_file(self, path: str) -> bool:
        """Delete a file. Returns False if it could not be removed."""
        try:
            os.remove(path)
        except OSError as e:
            logger.debug(f"Could not remove {path}: {e}")
            return False
        return True

    def resize_file(self, path: str, length: int) -> bool:
        """Truncate or extend a file to the given length."""
        try:
            os.truncate(path, length)
        except (OSError, ValueError) as e:
            logger.debug(f"Could not resize {path} to {length} bytes: {e}")
            return False
        return True

    def create_directory(self, path: str) -> bool:
        """Create a single directory. Returns False if it could not be created."""
        try:
            os.mkdir(path, DIRECTORY_MODE)
        except OSError as e:
            logger.debug(f"Could not create directory {path}: {e}")
            return False
        return True

    def current_working_directory(self) -> str:
        """
        Get the process working directory.

        Raises:
            ResolutionError: If the working directory is unavailable
                (for example, it was deleted).
        """
        try:
            return os.getcwd()
        except OSError as e:
            raise ResolutionError(f"Internal error in getcwd(): {e}") from e

    def absolute_path_of(self, path: str) -> str:
        """
        Resolve a path to an absolute path.

        Raises:
            ResolutionError: If the path does not exist or the OS call fails.
        """
        try:
            return os.path.realpath(path, strict=True)
        except (OSError, ValueError) as e:
            raise ResolutionError(f"Internal error in realpath(): {e}") from e


# Shared instance used when no host is passed explicitly
default_host = HostFilesystem()
