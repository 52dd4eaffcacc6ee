"""Utility modules for pathkit."""

from .path_utils import PathUtils
from .encodings import encode_wide, decode_wide, decode_os_path
from .host import HostFilesystem, default_host

__all__ = ["PathUtils", "encode_wide", "decode_wide", "decode_os_path", "HostFilesystem", "default_host"]
