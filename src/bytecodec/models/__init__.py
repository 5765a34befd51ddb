"""Data models."""

from bytecodec.models.schemas import EncodedBytes

__all__ = ["EncodedBytes"]
