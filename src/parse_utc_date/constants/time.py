"""Time conversion constants.

These constants define the conversion policy shared by the parser, the
timezone helpers and the formatter.
"""

# Time conversion constants
SECONDS_PER_MINUTE = 60
MILLISECONDS_PER_SECOND = 1000
MINUTE_IN_MILLISECONDS = SECONDS_PER_MINUTE * MILLISECONDS_PER_SECOND
HOUR_IN_MILLISECONDS = 60 * MINUTE_IN_MILLISECONDS
DAY_IN_MILLISECONDS = 24 * HOUR_IN_MILLISECONDS

# Numeric inputs below this magnitude are epoch seconds, at or above it epoch milliseconds.
# Seconds values stay below it until the year ~33658; milliseconds values pass it after 1970-01-12.
MILLISECOND_TIMESTAMP_THRESHOLD = 1e12

# Largest representable distance from the epoch, in milliseconds (100 000 000 days)
MAX_EPOCH_MILLISECONDS = 8_640_000_000_000_000

DEFAULT_FORMAT = "%Y/%m/%d %H:%M:%S %p"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Canonical JSON text of inputs treated as "no value"
EMPTY_VALUES = frozenset(
    {
        "null",
        '""',
        "{}",
        "[]",
        "undefined",
        '"[object Object]"',
    }
)

__all__ = [
    "SECONDS_PER_MINUTE",
    "MILLISECONDS_PER_SECOND",
    "MINUTE_IN_MILLISECONDS",
    "HOUR_IN_MILLISECONDS",
    "DAY_IN_MILLISECONDS",
    "MILLISECOND_TIMESTAMP_THRESHOLD",
    "MAX_EPOCH_MILLISECONDS",
    "DEFAULT_FORMAT",
    "MONTH_NAMES",
    "EMPTY_VALUES",
]
