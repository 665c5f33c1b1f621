from __future__ import annotations

"""Timezone and clock helper functions."""


import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional

import pytz

from ..config import TIMEZONE_ENV, ConfigurationError, env_str
from .instant import Instant, WallClock

logger = logging.getLogger(__name__)

# Instants beyond the datetime range use the offset in force at its edges
_EARLIEST_PROBE = datetime(1, 1, 2, tzinfo=timezone.utc)
_LATEST_PROBE = datetime(9999, 12, 30, tzinfo=timezone.utc)


def get_current_utc() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def validate_timezone(tz_name: str) -> bool:
    """Return True when the timezone string is recognized by pytz."""
    try:
        pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return False
    return True


def get_local_timezone() -> Optional[tzinfo]:
    """
    Return the configured local timezone, or None to use the host's.

    Raises:
        ConfigurationError: If the configured name is not a known timezone
    """
    tz_name = env_str(TIMEZONE_ENV)
    if not tz_name:
        return None
    if not validate_timezone(tz_name):
        raise ConfigurationError.invalid_timezone(TIMEZONE_ENV, tz_name)
    return pytz.timezone(tz_name)


def to_local(dt: datetime) -> Optional[datetime]:
    """Convert an aware datetime to local wall-clock time, or None if the platform cannot."""
    local_tz = get_local_timezone()
    try:
        return dt.astimezone(local_tz) if local_tz is not None else dt.astimezone()
    except (OverflowError, OSError, ValueError) as exc:
        logger.debug("Local time unavailable for %s: %s", dt, exc)
        return None


def _offset_probe(instant: Instant) -> datetime:
    """The datetime at which the offset of ``instant`` is read, clamped to the datetime range."""
    dt = instant.to_datetime()
    if dt is not None:
        return dt
    return _LATEST_PROBE if instant.epoch_ms > 0 else _EARLIEST_PROBE


def timezone_offset_minutes(instant: Instant) -> Optional[int]:
    """
    Minutes to add to local wall-clock time to reach UTC at ``instant``.

    Positive west of Greenwich (UTC-05:00 gives 300), matching the
    ``getTimezoneOffset`` convention.
    """
    local = to_local(_offset_probe(instant))
    if local is None:
        return None
    offset = local.utcoffset()
    if offset is None:
        return 0
    return -int(offset.total_seconds() // 60)


def local_wall_clock(instant: Optional[Instant]) -> Optional[WallClock]:
    """Return the local wall-clock fields of ``instant``."""
    if instant is None:
        return None

    offset = timezone_offset_minutes(instant)
    if offset is None:
        return None

    local = instant.shifted(-offset)
    return local.wall_clock() if local is not None else None


def normalize_time(instant: Optional[Instant], has_converted: bool = False) -> Optional[Instant]:
    """
    Shift ``instant`` by the local UTC offset.

    With ``has_converted`` False the offset is added (wall-clock fields read in
    local time then match the UTC clock). With ``has_converted`` True it is
    subtracted, undoing that shift for a value already carried in local terms.
    """
    if instant is None:
        return None

    offset = timezone_offset_minutes(instant)
    if offset is None:
        return None

    direction = -1 if has_converted else 1
    return instant.shifted(offset * direction)


__all__ = [
    "get_current_utc",
    "get_local_timezone",
    "local_wall_clock",
    "normalize_time",
    "timezone_offset_minutes",
    "to_local",
    "validate_timezone",
]
