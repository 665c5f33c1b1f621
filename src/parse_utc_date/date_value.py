"""
Date value wrapper exposing ISO, Unix and formatted views of a raw input.

``DateValue(raw_input, options)`` returns one of two views:

- :class:`UTCDateValue` for ordinary inputs. It offers ``to_iso_string``,
  ``to_unix_seconds``, ``to_local_time`` and ``format``.
- :class:`LocalDateValue` when ``options.has_converted`` is true. The input is
  an Instant or datetime already shifted into local time; only ``format`` is offered.

Nothing is resolved or validated at construction. Every accessor re-derives
the instant from ``(raw_input, options)`` and returns None when the input is
empty, malformed or unsupported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .constants.time import DEFAULT_FORMAT
from .time_helpers.formatter import FormatOptions, format_instant
from .time_helpers.instant import Instant
from .time_helpers.timestamp_parser import resolve_instant
from .time_helpers.timezone import get_current_utc

_NOW = object()


@dataclass(frozen=True)
class DateOptions:
    """Interpretation switches for a raw input."""

    has_converted: bool = False

    @classmethod
    def coerce(cls, options: Union["DateOptions", Mapping[str, Any], None]) -> "DateOptions":
        """Build options from an instance or a mapping. Anything else means no options."""
        if isinstance(options, DateOptions):
            return options
        values = options if isinstance(options, Mapping) else {}
        has_converted = values.get("has_converted", values.get("hasConverted", False))
        return cls(has_converted=bool(has_converted))


OptionsLike = Union[DateOptions, Mapping[str, Any], None]


class DateValue:
    """Immutable wrapper around a raw date-like input."""

    __slots__ = ("_raw_input", "_options")

    def __new__(cls, raw_input: Any = _NOW, options: OptionsLike = None):
        view = cls
        if cls is DateValue:
            view = LocalDateValue if DateOptions.coerce(options).has_converted else UTCDateValue
        return object.__new__(view)

    def __init__(self, raw_input: Any = _NOW, options: OptionsLike = None) -> None:
        if raw_input is _NOW:
            raw_input = get_current_utc()
        self._raw_input = raw_input
        self._options = DateOptions.coerce(options)

    @property
    def raw_input(self) -> Any:
        return self._raw_input

    @property
    def options(self) -> DateOptions:
        return self._options

    def _instant(self) -> Optional[Instant]:
        return resolve_instant(self._raw_input, self._options.has_converted)

    def format(
        self,
        pattern: Any = DEFAULT_FORMAT,
        options: Union[FormatOptions, Mapping[str, Any], None] = None,
        **flags: Any,
    ) -> Optional[str]:
        """
        Format the date with a custom pattern.

        Args:
            pattern: Pattern using %Y, %m, %d, %H, %M, %S and %p tokens.
            options: ``FormatOptions`` or a mapping with ``hour12``,
                ``full_month`` and ``short_year`` flags.
            **flags: Individual flags overriding ``options``.

        Returns:
            The formatted string, or None for an unresolvable input.
        """
        return format_instant(self._instant(), pattern, FormatOptions.coerce(options, **flags))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._options == other._options
            and type(self._raw_input) is type(other._raw_input)
            and self._raw_input == other._raw_input
        )

    def __hash__(self) -> int:
        try:
            return hash((type(self), self._options, type(self._raw_input), self._raw_input))
        except TypeError:
            return hash((type(self), self._options, type(self._raw_input), repr(self._raw_input)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw_input!r}, {self._options!r})"


class UTCDateValue(DateValue):
    """Date value read on the UTC clock, with conversion accessors."""

    __slots__ = ()

    def __init__(self, raw_input: Any = _NOW, options: OptionsLike = None) -> None:
        super().__init__(raw_input, DateOptions(has_converted=False))

    def to_iso_string(self) -> Optional[str]:
        """ISO 8601 UTC string with millisecond precision, e.g. ``2023-03-05T00:00:00.000Z``."""
        instant = self._instant()
        return instant.to_iso_string() if instant is not None else None

    def to_unix_seconds(self) -> Optional[int]:
        """Whole seconds since the Unix epoch, floored."""
        instant = self._instant()
        return instant.to_unix_seconds() if instant is not None else None

    def to_local_time(self) -> "LocalDateValue":
        """Return a view of the same instant shifted into local wall-clock time."""
        instant = self._instant()
        return LocalDateValue(instant, DateOptions(has_converted=True))


class LocalDateValue(DateValue):
    """Date value already shifted into local time. Only formatting is available."""

    __slots__ = ()

    def __init__(self, raw_input: Any = _NOW, options: OptionsLike = None) -> None:
        super().__init__(raw_input, DateOptions(has_converted=True))


__all__ = ["DateOptions", "DateValue", "LocalDateValue", "UTCDateValue"]
