"""Encoding and decoding utilities."""

import base64
import io
from typing import Optional, Union

from bytecodec.exceptions import InvalidInputError

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_DIGITS = "0123456789abcdef"

# Two lowercase digits for every byte value, indexed by the byte itself
_HEX_TABLE = tuple(_HEX_DIGITS[b >> 4] + _HEX_DIGITS[b & 0xF] for b in range(256))


def _as_view(data: Optional[BytesLike]) -> memoryview:
    """
    Get a flat, unsigned-byte view over data.

    Args:
        data: Bytes-like object or None

    Returns:
        memoryview: Format 'B' view (empty for None)

    Raises:
        InvalidInputError: If data does not support the buffer protocol
    """
    if data is None:
        return memoryview(b"")
    try:
        view = memoryview(data)
    except TypeError:
        raise InvalidInputError(f"Expected bytes-like object, got {type(data)}") from None
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def to_str(data: Optional[BytesLike]) -> str:
    """
    Decode bytes as UTF-8 text.

    Invalid sequences are replaced with U+FFFD rather than raising.

    Args:
        data: Bytes to decode

    Returns:
        str: Decoded text, "" for None or empty input
    """
    view = _as_view(data)
    if not view:
        return ""
    return str(view, "utf-8", "replace")


def to_hex(data: Optional[BytesLike]) -> str:
    """
    Convert bytes to a lowercase hexadecimal string.

    Args:
        data: Bytes to convert

    Returns:
        str: Two lowercase hex digits per byte, no prefix or separator
    """
    view = _as_view(data)
    if not view:
        return ""
    return "".join(map(_HEX_TABLE.__getitem__, view))


def to_base64(data: Optional[BytesLike]) -> str:
    """
    Convert bytes to a padded, standard-alphabet Base64 string (RFC 4648).

    Args:
        data: Bytes to convert

    Returns:
        str: Base64 text, "" for None or empty input
    """
    view = _as_view(data)
    if not view:
        return ""
    return base64.b64encode(view).decode("ascii")


def to_stream(data: Optional[BytesLike]) -> io.BytesIO:
    """
    Wrap a copy of bytes in a seekable in-memory stream.

    The stream is positioned at offset 0 and does not track later
    changes to a mutable source buffer.

    Args:
        data: Bytes to wrap

    Returns:
        io.BytesIO: Stream over a private copy of data
    """
    return io.BytesIO(_as_view(data).tobytes())


def is_empty(data: object) -> bool:
    """
    Return True if data is None or has zero length.

    Never raises. Buffers are measured in bytes and other sized objects
    by len(); unsized objects count as non-empty.
    """
    if data is None:
        return True
    if isinstance(data, (bytes, bytearray)):
        return len(data) == 0
    try:
        return memoryview(data).nbytes == 0
    except TypeError:
        pass
    try:
        return len(data) == 0
    except TypeError:
        return False
