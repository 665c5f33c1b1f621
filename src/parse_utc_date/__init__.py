"""Normalize date-like inputs and render ISO, Unix and formatted views of them."""

from .date_value import DateOptions, DateValue, LocalDateValue, UTCDateValue
from .time_helpers.formatter import FormatOptions
from .time_helpers.instant import Instant

ParseUTCDate = DateValue

__all__ = [
    "DateOptions",
    "DateValue",
    "FormatOptions",
    "Instant",
    "LocalDateValue",
    "ParseUTCDate",
    "UTCDateValue",
]
