"""Static byte conversion helpers."""

import io
import logging
from typing import Optional

from bytecodec.models.schemas import EncodedBytes
from bytecodec.utils.encoding import (
    BytesLike,
    is_empty,
    to_base64,
    to_hex,
    to_stream,
    to_str,
)

logger = logging.getLogger(__name__)


def _size(data: Optional[BytesLike]) -> int:
    if data is None:
        return 0
    return memoryview(data).nbytes


class ByteCodec:
    """
    Stateless conversions over byte sequences.

    Every method accepts bytes, bytearray, memoryview or None and treats
    None exactly like empty input. Nothing is cached between calls.
    """

    @staticmethod
    def to_str(data: Optional[BytesLike]) -> str:
        """
        Decode bytes as UTF-8.

        Malformed sequences become U+FFFD.

        Returns:
            str: Decoded text ("" for None or empty input)
        """
        text = to_str(data)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("to_str: %d bytes -> %d chars", _size(data), len(text))
        return text

    @staticmethod
    def to_hex(data: Optional[BytesLike]) -> str:
        """
        Encode bytes as lowercase hex.

        Returns:
            str: Two hex digits per byte, e.g. b"\\x00\\xff" -> "00ff"
        """
        encoded = to_hex(data)
        logger.debug("to_hex: %d bytes", len(encoded) // 2)
        return encoded

    @staticmethod
    def to_base64(data: Optional[BytesLike]) -> str:
        """
        Encode bytes as standard padded Base64.

        Returns:
            str: Base64 text ("" for None or empty input)
        """
        encoded = to_base64(data)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("to_base64: %d bytes -> %d chars", _size(data), len(encoded))
        return encoded

    @staticmethod
    def to_stream(data: Optional[BytesLike]) -> io.BytesIO:
        """
        Wrap a copy of bytes in an in-memory stream.

        Returns:
            io.BytesIO: Readable, seekable stream at offset 0
        """
        stream = to_stream(data)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("to_stream: %d bytes", _size(data))
        return stream

    @staticmethod
    def is_empty(data: object) -> bool:
        """Check whether data is None or zero-length."""
        result = is_empty(data)
        logger.debug("is_empty: %s -> %s", type(data).__name__, result)
        return result

    @staticmethod
    def describe(data: Optional[BytesLike]) -> EncodedBytes:
        """
        Build every representation of data at once.

        Returns:
            EncodedBytes: Length, emptiness, text, hex and Base64 forms
        """
        return EncodedBytes.from_bytes(data)
