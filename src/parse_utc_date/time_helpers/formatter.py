from __future__ import annotations

"""Pattern-based rendering of instants as wall-clock strings."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..constants.time import DEFAULT_FORMAT, MONTH_NAMES
from .instant import Instant, WallClock
from .timezone import local_wall_clock, normalize_time

logger = logging.getLogger(__name__)

# Accepted spellings of each option key
_OPTION_KEYS = {
    "hour12": "hour12",
    "full_month": "full_month",
    "fullMonth": "full_month",
    "short_year": "short_year",
    "shortYear": "short_year",
}


@dataclass(frozen=True)
class FormatOptions:
    """Rendering switches for :func:`format_instant`."""

    hour12: bool = False
    full_month: bool = False
    short_year: bool = False

    @classmethod
    def coerce(
        cls,
        options: Union["FormatOptions", Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> "FormatOptions":
        """Build options from an instance, a mapping (snake or camel case keys) or None."""
        if isinstance(options, FormatOptions):
            values = {
                "hour12": options.hour12,
                "full_month": options.full_month,
                "short_year": options.short_year,
            }
        else:
            values = {}
            # Anything other than a mapping carries no options
            items = options.items() if isinstance(options, Mapping) else ()
            for key, value in items:
                field = _OPTION_KEYS.get(key)
                if field:
                    values[field] = bool(value)

        for key, value in overrides.items():
            field = _OPTION_KEYS.get(key)
            if field is None:
                raise TypeError(f"Unknown format option {key!r}")
            values[field] = bool(value)
        return cls(**values)


@dataclass(frozen=True)
class DateFields:
    """Rendered pieces substituted into a pattern."""

    year: str
    month: str
    day: str
    hours: str
    minutes: str
    seconds: str
    period: str

    @classmethod
    def from_wall_clock(cls, clock: WallClock, options: FormatOptions) -> "DateFields":
        year = str(clock.year)
        if options.short_year:
            year = year[-2:]

        month = MONTH_NAMES[clock.month - 1] if options.full_month else f"{clock.month:02d}"

        hours = clock.hour
        period = ""
        if options.hour12:
            period = "PM" if hours >= 12 else "AM"
            hours = hours % 12 or 12

        return cls(
            year=year,
            month=month,
            day=f"{clock.day:02d}",
            hours=f"{hours:02d}",
            minutes=f"{clock.minute:02d}",
            seconds=f"{clock.second:02d}",
            period=period,
        )

    def render(self, pattern: str) -> str:
        """Replace every token occurrence in ``pattern`` and trim the result."""
        return (
            pattern.replace("%Y", self.year)
            .replace("%m", self.month)
            .replace("%d", self.day)
            .replace("%H", self.hours)
            .replace("%M", self.minutes)
            .replace("%S", self.seconds)
            .replace("%p", self.period)
            .strip()
        )


def format_instant(
    instant: Optional[Instant],
    pattern: Any = DEFAULT_FORMAT,
    options: Union[FormatOptions, Mapping[str, Any], None] = None,
) -> Optional[str]:
    """
    Render ``instant`` with ``pattern``.

    Supported tokens: %Y (year), %m (month), %d (day), %H (hour), %M (minute),
    %S (second), %p (AM/PM, empty unless ``hour12``).

    The instant is first shifted by the local UTC offset and its fields are
    read in local time. A pattern that cannot be applied is logged and the
    default pattern is used instead.

    Returns:
        The rendered string, or None when there is no instant to render.
    """
    clock = local_wall_clock(normalize_time(instant))
    if clock is None:
        return None

    fields = DateFields.from_wall_clock(clock, FormatOptions.coerce(options))
    if pattern is None:
        pattern = DEFAULT_FORMAT

    try:
        return fields.render(pattern)
    except (AttributeError, TypeError, ValueError):
        logger.warning("Invalid format pattern: %r", pattern)
        return fields.render(DEFAULT_FORMAT)


__all__ = ["DateFields", "FormatOptions", "format_instant"]
