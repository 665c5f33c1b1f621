from __future__ import annotations

"""Resolve assorted date-like inputs into an Instant."""

import enum
import logging
import warnings
from datetime import datetime
from typing import Any, Optional

import orjson
from dateutil import parser as dateutil_parser

from ..constants.time import EMPTY_VALUES, MILLISECOND_TIMESTAMP_THRESHOLD, MILLISECONDS_PER_SECOND
from .instant import Instant
from .timezone import normalize_time

logger = logging.getLogger(__name__)

# Fields missing from a date string are taken from the epoch, not from today
_PARSE_DEFAULT = datetime(1970, 1, 1)


class InputKind(enum.Enum):
    """Shape of a raw input, decided once before resolution."""

    EMPTY = "empty"
    INSTANT = "instant"
    TEXT = "text"
    NUMERIC = "numeric"
    UNSUPPORTED = "unsupported"


def canonical_text(value: Any) -> Optional[str]:
    """Return the canonical JSON text of ``value``, or None if it has no JSON form."""
    try:
        return orjson.dumps(value).decode("utf-8")
    except (orjson.JSONEncodeError, ValueError, OverflowError):
        return None


def is_empty_value(value: Any) -> bool:
    """True when ``value`` serializes to one of the recognised empty markers."""
    return canonical_text(value) in EMPTY_VALUES


def classify_input(value: Any) -> InputKind:
    """Decide how ``value`` is interpreted."""
    if is_empty_value(value):
        return InputKind.EMPTY
    if isinstance(value, (Instant, datetime)):
        return InputKind.INSTANT
    if isinstance(value, (str, bytes, bytearray)):
        return InputKind.TEXT
    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return InputKind.NUMERIC
    return InputKind.UNSUPPORTED


def parse_numeric_timestamp(value: int | float) -> Optional[Instant]:
    """
    Interpret a number as epoch seconds or epoch milliseconds.

    Values below MILLISECOND_TIMESTAMP_THRESHOLD are seconds, anything at or
    above it is milliseconds. This is a magnitude heuristic, not a format
    detector: it is only unambiguous for dates between 1970-01-12 and ~33658.
    """
    if value < MILLISECOND_TIMESTAMP_THRESHOLD:
        return Instant.from_epoch_ms(value * MILLISECONDS_PER_SECOND)
    return Instant.from_epoch_ms(value)


def parse_string_timestamp(value: str | bytes | bytearray) -> Optional[Instant]:
    """
    Parse text with dateutil's general-purpose parser.

    Naive results are UTC and missing fields default to 1970-01-01. Unknown
    timezone names are ignored without warning.
    """
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="ignore")

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", dateutil_parser.UnknownTimezoneWarning)
            dt = dateutil_parser.parse(value, default=_PARSE_DEFAULT)
    except (ValueError, OverflowError) as exc:
        logger.debug("Unparseable date string %r: %s", value, exc)
        return None
    return Instant.from_datetime(dt)


def resolve_instant(value: Any, has_converted: bool = False) -> Optional[Instant]:
    """
    Resolve a raw input into an Instant.

    Args:
        value: Instant, datetime, date string, epoch seconds/milliseconds, or an empty marker.
        has_converted: True when an Instant or datetime ``value`` was already shifted into
            local wall-clock time and must be shifted back.

    Returns:
        The resolved instant, or None when the input is empty, malformed or of
        an unsupported type.
    """
    kind = classify_input(value)

    if kind is InputKind.INSTANT:
        instant = value if isinstance(value, Instant) else Instant.from_datetime(value)
        if has_converted:
            return normalize_time(instant, has_converted=True)
        return instant

    if kind is InputKind.TEXT:
        return parse_string_timestamp(value)

    if kind is InputKind.NUMERIC:
        return parse_numeric_timestamp(value)

    return None


__all__ = [
    "InputKind",
    "canonical_text",
    "classify_input",
    "is_empty_value",
    "parse_numeric_timestamp",
    "parse_string_timestamp",
    "resolve_instant",
]
