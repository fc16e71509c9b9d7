"""Configuration management."""
import logging
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prdiff.exceptions import ConfigError


class PrDiffConfig(BaseSettings):
    """Configuration for the prdiff parsers and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="PRDIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Parser settings
    warn_on_parse_error: bool = True

    # Output settings
    json_indent: int = 2
    encoding: str = "utf-8"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


@lru_cache
def _get_config_cached() -> PrDiffConfig:
    return PrDiffConfig()


def get_config(clear_cache: bool = False) -> PrDiffConfig:
    """Get configuration instance.

    Args:
        clear_cache: If True, clear the cache before returning config.

    Raises:
        ConfigError: If the environment holds invalid settings.
    """
    if clear_cache:
        _get_config_cached.cache_clear()

    try:
        return _get_config_cached()
    except ValidationError as e:
        raise ConfigError(f"Invalid prdiff settings: {e}") from e
