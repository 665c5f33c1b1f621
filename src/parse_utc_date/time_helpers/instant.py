from __future__ import annotations

"""Epoch-millisecond instant shared by the parser, timezone helpers and formatter."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..constants.time import (
    DAY_IN_MILLISECONDS,
    HOUR_IN_MILLISECONDS,
    MAX_EPOCH_MILLISECONDS,
    MILLISECONDS_PER_SECOND,
    MINUTE_IN_MILLISECONDS,
)

EPOCH_START = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)

# Proleptic Gregorian calendar cycle
_DAYS_PER_ERA = 146_097
_DAYS_FROM_YEAR_ZERO_MARCH_TO_EPOCH = 719_468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """
    Convert days since 1970-01-01 into a proleptic Gregorian (year, month, day).

    Works for any year, including those outside the ``datetime`` range. Years
    are counted astronomically: year 0 precedes year 1.
    """
    shifted = days + _DAYS_FROM_YEAR_ZERO_MARCH_TO_EPOCH
    era = shifted // _DAYS_PER_ERA
    day_of_era = shifted - era * _DAYS_PER_ERA
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    # Months counted from March so the leap day falls at the end of the year
    march_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * march_month + 2) // 5 + 1
    month = march_month + 3 if march_month < 10 else march_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


@dataclass(frozen=True)
class WallClock:
    """Calendar and clock fields of an instant read on some clock."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


@dataclass(frozen=True)
class Instant:
    """An absolute point in time, held as whole milliseconds since the Unix epoch."""

    epoch_ms: int

    @classmethod
    def from_epoch_ms(cls, value: int | float) -> Optional["Instant"]:
        """
        Build an instant from epoch milliseconds.

        Fractional milliseconds are truncated toward zero. Non-finite values and
        values beyond the representable range return None.
        """
        if isinstance(value, float) and not math.isfinite(value):
            return None
        epoch_ms = int(value)
        if abs(epoch_ms) > MAX_EPOCH_MILLISECONDS:
            return None
        return cls(epoch_ms)

    @classmethod
    def from_datetime(cls, value: datetime) -> Optional["Instant"]:
        """
        Build an instant from a datetime, taking naive values as UTC.

        Returns None when the datetime's UTC offset is invalid (24 hours or
        more) or the result leaves the datetime range.
        """
        try:
            if value.utcoffset() is None:
                value = value.replace(tzinfo=timezone.utc)
            elapsed = value - EPOCH_START
        except (ValueError, OverflowError):
            return None
        return cls.from_epoch_ms(elapsed // _ONE_MILLISECOND)

    def shifted(self, minutes: int) -> Optional["Instant"]:
        """Return a new instant moved by ``minutes`` whole minutes."""
        return Instant.from_epoch_ms(self.epoch_ms + minutes * MINUTE_IN_MILLISECONDS)

    def to_datetime(self) -> Optional[datetime]:
        """Return an aware UTC datetime, or None outside the datetime range."""
        try:
            return EPOCH_START + timedelta(milliseconds=self.epoch_ms)
        except OverflowError:
            return None

    def wall_clock(self) -> WallClock:
        """Fields of this instant on the UTC clock."""
        days, ms_of_day = divmod(self.epoch_ms, DAY_IN_MILLISECONDS)
        year, month, day = civil_from_days(days)
        hour, remainder = divmod(ms_of_day, HOUR_IN_MILLISECONDS)
        minute, remainder = divmod(remainder, MINUTE_IN_MILLISECONDS)
        second, millisecond = divmod(remainder, MILLISECONDS_PER_SECOND)
        return WallClock(year, month, day, hour, minute, second, millisecond)

    def to_unix_seconds(self) -> int:
        """Whole seconds since the epoch, floored."""
        return self.epoch_ms // MILLISECONDS_PER_SECOND

    def to_iso_string(self) -> str:
        """
        Render as ``YYYY-MM-DDTHH:MM:SS.sssZ``.

        Years outside 0000-9999 use the expanded ``+YYYYYY``/``-YYYYYY`` form.
        """
        clock = self.wall_clock()
        if 0 <= clock.year <= 9999:
            year = f"{clock.year:04d}"
        else:
            year = f"{'+' if clock.year > 0 else '-'}{abs(clock.year):06d}"
        return (
            f"{year}-{clock.month:02d}-{clock.day:02d}"
            f"T{clock.hour:02d}:{clock.minute:02d}:{clock.second:02d}.{clock.millisecond:03d}Z"
        )


__all__ = ["EPOCH_START", "Instant", "WallClock", "civil_from_days"]
