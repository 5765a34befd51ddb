"""Custom exceptions for the byte codec."""


class ByteCodecException(Exception):
    """Base exception for all byte codec errors."""
    pass


# Input Errors
class InvalidInputError(ByteCodecException, TypeError):
    """Raised when a value is neither None nor a bytes-like object."""
    pass


# Configuration Errors
class ConfigurationError(ByteCodecException, ValueError):
    """Raised when the logging configuration cannot be applied."""
    pass
