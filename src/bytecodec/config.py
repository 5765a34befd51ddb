"""Runtime settings and logging setup for the byte codec."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from bytecodec.exceptions import ConfigurationError

LOGGER_NAME = "bytecodec"


class CodecSettings(BaseSettings):
    """
    Settings read from BYTECODEC_* environment variables or a .env file.

    None of these affect codec output; they only control diagnostics.
    """

    model_config = SettingsConfigDict(
        env_prefix="BYTECODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@lru_cache(maxsize=1)
def get_settings() -> CodecSettings:
    """Get the process-wide settings instance."""
    return CodecSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(settings: Optional[CodecSettings] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once updates the level and format of the
    existing handler instead of adding another.

    Args:
        settings: Settings to apply (defaults to get_settings())

    Returns:
        logging.Logger: The configured "bytecodec" logger

    Raises:
        ConfigurationError: If log_level is not a known level name
    """
    settings = settings or get_settings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.log_level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if h.get_name() == LOGGER_NAME),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(settings.log_format))

    return logger
