"""
Wide-character conversion utilities.

Windows APIs take UTF-16 strings. This module is the one place where path
text crosses between Python strings and that wide form, so the parser and
serializer never deal with encodings themselves.
"""

import os

# UTF-16 without BOM, matching the in-memory layout of wchar_t on Windows
WIDE_ENCODING = 'utf-16-le'


def encode_wide(text: str) -> bytes:
    """
    Encode a path string to its wide-character form.

    Args:
        text: Path string.

    Returns:
        UTF-16-LE bytes. Lone surrogates (undecodable file names) are kept
        so the conversion round-trips losslessly.
    """
    return text.encode(WIDE_ENCODING, 'surrogatepass')


def decode_wide(data: bytes) -> str:
    """
    Decode a wide-character path back to a string.

    Args:
        data: UTF-16-LE bytes.

    Returns:
        The decoded path string.

    Raises:
        UnicodeDecodeError: If the data has an odd number of bytes.
    """
    return data.decode(WIDE_ENCODING, 'surrogatepass')


def decode_os_path(data: bytes, wide: bool) -> str:
    """
    Convert the OS form of a path to a string.

    Args:
        data: Raw path as handed out by the operating system.
        wide: True for Windows wide strings, False for POSIX byte paths
            (decoded with the filesystem encoding).

    Returns:
        The path string.
    """
    if wide:
        return decode_wide(data)
    return os.fsdecode(data)
