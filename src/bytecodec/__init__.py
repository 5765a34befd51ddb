"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "byte-codec Team"
__description__ = "Stateless UTF-8, hex, Base64 and stream helpers for byte sequences"

from .core.codec import ByteCodec
from .utils.encoding import to_str, to_hex, to_base64, to_stream, is_empty
from .models.schemas import EncodedBytes
from .config import CodecSettings, get_settings, reset_settings, configure_logging
from .exceptions import ByteCodecException, InvalidInputError, ConfigurationError

__all__ = [
    "ByteCodec",
    "to_str",
    "to_hex",
    "to_base64",
    "to_stream",
    "is_empty",
    "EncodedBytes",
    "CodecSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "ByteCodecException",
    "InvalidInputError",
    "ConfigurationError",
]
