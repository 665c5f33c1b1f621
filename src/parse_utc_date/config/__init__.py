"""Shared configuration helpers."""

from .errors import ConfigurationError
from .runtime import (
    LOG_LEVEL_ENV,
    LOG_USER_FRIENDLY_ENV,
    TIMEZONE_ENV,
    env_bool,
    env_str,
    reset_default_values,
)

__all__ = [
    "ConfigurationError",
    "LOG_LEVEL_ENV",
    "LOG_USER_FRIENDLY_ENV",
    "TIMEZONE_ENV",
    "env_bool",
    "env_str",
    "reset_default_values",
]
