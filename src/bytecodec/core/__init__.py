"""Core codec facade."""

from bytecodec.core.codec import ByteCodec

__all__ = ["ByteCodec"]
