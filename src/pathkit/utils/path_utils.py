"""Low-level helpers for splitting and joining path strings."""

import re
from typing import List, Sequence


class PathUtils:
    """Utilities for tokenizing path strings on a set of separators."""

    @staticmethod
    def tokenize(path: str, delimiters: str) -> List[str]:
        """
        Split a path into its non-empty components.

        Args:
            path: Path string to split
            delimiters: Every character accepted as a separator

        Returns:
            Components in order. Runs of separators never produce empty
            components, so a string made only of separators gives [].
        """
        if not path:
            return []
        pattern = '[' + re.escape(delimiters) + ']+'
        return [part for part in re.split(pattern, path) if part]

    @staticmethod
    def join_path_components(components: Sequence[str], separator: str) -> str:
        """
        Join path components with a single separator.

        Args:
            components: Path components
            separator: Separator to place between components

        Returns:
            Joined path
        """
        return separator.join(components)

    @staticmethod
    def starts_with_separator(path: str, delimiters: str) -> bool:
        """Check whether the first character is a separator."""
        return bool(path) and path[0] in delimiters

    @staticmethod
    def ends_with_separator(path: str, delimiters: str) -> bool:
        """Check whether the last character is a separator."""
        return bool(path) and path[-1] in delimiters

    @staticmethod
    def split_drive(path: str) -> tuple:
        """
        Split a leading drive designator such as 'c:' off a path.

        Returns:
            Tuple of (drive_letter, remainder). The letter is '' when the
            path has no drive prefix.
        """
        if len(path) >= 2 and path[1] == ':' and path[0].isascii() and path[0].isalpha():
            return path[0], path[2:]
        return '', path
