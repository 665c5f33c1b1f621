"""Constants package for shared constant values."""

from .time import (
    DEFAULT_FORMAT,
    EMPTY_VALUES,
    MILLISECOND_TIMESTAMP_THRESHOLD,
    MINUTE_IN_MILLISECONDS,
    MONTH_NAMES,
)

__all__ = [
    "DEFAULT_FORMAT",
    "EMPTY_VALUES",
    "MILLISECOND_TIMESTAMP_THRESHOLD",
    "MINUTE_IN_MILLISECONDS",
    "MONTH_NAMES",
]
