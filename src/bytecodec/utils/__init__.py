"""Byte conversion utilities."""

from bytecodec.utils.encoding import (
    to_str,
    to_hex,
    to_base64,
    to_stream,
    is_empty,
)

__all__ = [
    "to_str",
    "to_hex",
    "to_base64",
    "to_stream",
    "is_empty",
]
