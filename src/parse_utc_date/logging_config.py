"""
Centralized logging configuration for applications using this package.

The library itself only emits records through module loggers; call
``setup_logging`` once from an application entry point to see them.
"""

import logging
import sys
import threading
from typing import Optional, Union

from parse_utc_date.config import LOG_LEVEL_ENV, LOG_USER_FRIENDLY_ENV, ConfigurationError, env_bool, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_DEFAULT_LEVEL = "INFO"
_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str, None]) -> int:
    """Turn an explicit level, or the configured one, into a logging level number."""
    if isinstance(level, int):
        return level

    name = (level or env_str(LOG_LEVEL_ENV, _DEFAULT_LEVEL) or _DEFAULT_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, name, "Expected a logging level name")
    return resolved


def _close_handlers(logger: logging.Logger) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", logger.name, e)
    logger.handlers = []


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    return console_handler


def setup_logging(level: Union[int, str, None] = None, user_friendly: Optional[bool] = None) -> logging.Logger:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Level name or number; defaults to PARSE_UTC_DATE_LOG_LEVEL, then INFO.
        user_friendly: Message-only output; defaults to PARSE_UTC_DATE_LOG_USER_FRIENDLY.

    Returns:
        The configured root logger.
    """
    with _config_lock:
        resolved_level = _resolve_level(level)
        if user_friendly is None:
            user_friendly = bool(env_bool(LOG_USER_FRIENDLY_ENV, or_value=False))

        root_logger = logging.getLogger()
        _close_handlers(root_logger)
        root_logger.addHandler(_build_console_handler(user_friendly))
        root_logger.setLevel(resolved_level)

        logging.getLogger("dateutil").setLevel(logging.WARNING)
        return root_logger


__all__ = ["setup_logging"]
