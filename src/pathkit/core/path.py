"""
Path value type.

A Path is parsed once from a string and never changes afterwards. It keeps
the path as a tuple of components plus a few flags describing how the
original string started and ended, which is enough to render it back in
either POSIX or Windows form.

Two behaviours are kept on purpose even though they can surprise:

- Equality only looks at the components. '/foo' and 'foo' compare equal,
  and so do 'c:/foo' and 'foo'.
- In Windows format a leading separator without a drive letter ('\\foo')
  starts with a separator but is not absolute.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from .errors import FormatMismatchError, InvalidJoinError
from .models import PathFormat
from ..utils.encodings import decode_os_path, encode_wide
from ..utils.host import HostFilesystem, default_host
from ..utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, os.PathLike]


def _host(host: Optional[HostFilesystem]) -> HostFilesystem:
    return host if host is not None else default_host


@dataclass(frozen=True, eq=False, repr=False)
class Path:
    """A filesystem path in POSIX or Windows format."""

    components: Tuple[str, ...] = ()
    path_format: PathFormat = field(default_factory=PathFormat.native)
    absolute: bool = False
    starts_with_separator: bool = False
    ends_with_separator: bool = False
    volume: str = ''  # drive letter, Windows format only

    def __post_init__(self):
        components = tuple(self.components)
        if any(not part for part in components):
            raise ValueError(f"Path components must be non-empty: {components!r}")
        object.__setattr__(self, 'components', components)

    @classmethod
    def parse(cls, value: Union[PathLike, "Path"] = '',
              path_format: Optional[PathFormat] = None) -> "Path":
        """
        Parse a path string.

        Args:
            value: Path string, another Path, or the OS form of a path as
                bytes (UTF-16-LE for Windows format).
            path_format: Format to parse with. Defaults to the format of a
                Path argument, otherwise the host's native format.

        Returns:
            The parsed Path.
        """
        if isinstance(value, Path):
            if path_format is None or path_format is value.path_format:
                return value
            value = value.to_string(path_format)

        fmt = path_format or PathFormat.native()
        if isinstance(value, os.PathLike):
            value = os.fspath(value)
        if isinstance(value, (bytes, bytearray)):
            value = decode_os_path(bytes(value), wide=fmt is PathFormat.WINDOWS)

        delimiters = fmt.delimiters
        volume = ''
        if fmt is PathFormat.WINDOWS:
            volume, rest = PathUtils.split_drive(value)
            if volume:
                absolute = PathUtils.starts_with_separator(rest, delimiters)
                starts = absolute
            else:
                absolute = False
                starts = PathUtils.starts_with_separator(value, delimiters)
            components = PathUtils.tokenize(rest, delimiters)
        else:
            components = PathUtils.tokenize(value, delimiters)
            absolute = PathUtils.starts_with_separator(value, delimiters)
            starts = absolute

        return cls(
            components=tuple(components),
            path_format=fmt,
            absolute=absolute,
            starts_with_separator=starts,
            ends_with_separator=PathUtils.ends_with_separator(value, delimiters),
            volume=volume,
        )

    @classmethod
    def getcwd(cls, host: Optional[HostFilesystem] = None) -> "Path":
        """
        Get the current working directory.

        Raises:
            ResolutionError: If the working directory is unavailable.
        """
        host = _host(host)
        return cls.parse(host.current_working_directory(), host.native_format)

    @property
    def separator(self) -> str:
        return self.path_format.separator

    def length(self) -> int:
        """Number of components."""
        return len(self.components)

    def is_empty(self) -> bool:
        """Check if the path has no components."""
        return not self.components

    def is_absolute(self) -> bool:
        return self.absolute

    def to_string(self, path_format: Optional[PathFormat] = None) -> str:
        """
        Render the path.

        Args:
            path_format: Format to render with. Defaults to the path's own
                format. The drive letter is only rendered in Windows format.

        Returns:
            The path string.
        """
        fmt = path_format or self.path_format
        sep = fmt.separator
        parts = []
        ends_with_sep = False

        if fmt is PathFormat.WINDOWS and self.volume:
            parts.append(self.volume + ':')

        if self.absolute or self.starts_with_separator:
            parts.append(sep)
            ends_with_sep = True

        if self.components:
            parts.append(PathUtils.join_path_components(self.components, sep))
            ends_with_sep = False

        # Don't double the separator of a bare root
        if self.ends_with_separator and not ends_with_sep:
            parts.append(sep)

        return ''.join(parts)

    def wstr(self, path_format: Optional[PathFormat] = None) -> bytes:
        """Render the path in wide-character (UTF-16-LE) form."""
        return encode_wide(self.to_string(path_format))

    def filename(self) -> str:
        """
        Get the last component.

        A path ending in a separator names its own directory, so its
        filename is '.'.
        """
        if not self.components:
            name = ''
            if self.path_format is PathFormat.WINDOWS and self.volume and not self.absolute:
                name += self.volume + ':'
            if self.ends_with_separator:
                name += self.separator
            return name
        if self.ends_with_separator:
            return '.'
        return self.components[-1]

    def extension(self) -> str:
        """
        Get the file extension, including the dot.

        Dotfiles such as '.exrc' have no extension.
        """
        name = self.filename()
        if not name or name.startswith('.'):
            return ''
        pos = name.rfind('.')
        if pos == -1:
            return ''
        return name[pos:]

    def parent_path(self) -> "Path":
        """
        Get the parent directory.

        The parent of a path ending in a separator keeps every component.
        The parent of an empty or root path is the path itself without a
        trailing separator.
        """
        if self.ends_with_separator:
            components = self.components
        else:
            components = self.components[:-1]
        return replace(self, components=components, ends_with_separator=False)

    def make_absolute(self, host: Optional[HostFilesystem] = None) -> "Path":
        """
        Resolve the path with the operating system.

        Raises:
            ResolutionError: If the path does not exist or cannot be resolved.
        """
        host = _host(host)
        resolved = host.absolute_path_of(str(self))
        logger.debug(f"Resolved {self} to {resolved}")
        return Path.parse(resolved, host.native_format)

    def exists(self, host: Optional[HostFilesystem] = None) -> bool:
        return _host(host).exists(str(self))

    def is_file(self, host: Optional[HostFilesystem] = None) -> bool:
        return _host(host).is_file(str(self))

    def is_directory(self, host: Optional[HostFilesystem] = None) -> bool:
        return _host(host).is_directory(str(self))

    def file_size(self, host: Optional[HostFilesystem] = None) -> int:
        """
        Get the file size in bytes.

        Raises:
            StatError: If the file cannot be stat'd.
        """
        return _host(host).file_size(str(self))

    def remove_file(self, host: Optional[HostFilesystem] = None) -> bool:
        return _host(host).remove_file(str(self))

    def resize_file(self, length: int, host: Optional[HostFilesystem] = None) -> bool:
        return _host(host).resize_file(str(self), length)

    def _coerce(self, other) -> Optional["Path"]:
        if isinstance(other, Path):
            return other
        if isinstance(other, (str, bytes, os.PathLike)):
            return Path.parse(other, self.path_format)
        return None

    def __truediv__(self, other) -> "Path":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.path_format is not self.path_format:
            raise FormatMismatchError(
                f"Cannot join a {other.path_format.name.lower()} path "
                f"to a {self.path_format.name.lower()} path"
            )
        if other.absolute:
            raise InvalidJoinError(f"Expected a relative path, got {other}")
        return replace(
            self,
            components=self.components + other.components,
            ends_with_separator=other.ends_with_separator,
        )

    def __rtruediv__(self, other) -> "Path":
        if not isinstance(other, (str, bytes, os.PathLike)):
            return NotImplemented
        return Path.parse(other, self.path_format) / self

    def __eq__(self, other) -> bool:
        """
        Compare components only. Strings are never equal to a Path; parse
        them first so that the format is explicit.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.components == other.components

    def __hash__(self) -> int:
        return hash(self.components)

    def __str__(self) -> str:
        return self.to_string()

    def __fspath__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Path({self.to_string()!r}, {self.path_format.name.lower()})"


def parse(value: Union[PathLike, Path] = '', path_format: Optional[PathFormat] = None) -> Path:
    """Parse a path string. See Path.parse."""
    return Path.parse(value, path_format)


def create_directory(path: Union[PathLike, Path], host: Optional[HostFilesystem] = None) -> bool:
    """Create a directory readable, writable and searchable by the owner only."""
    return _host(host).create_directory(str(Path.parse(path)))
