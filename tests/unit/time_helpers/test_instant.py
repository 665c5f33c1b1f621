"""Tests for the Instant value type."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from dateutil.tz import tzoffset

from parse_utc_date.time_helpers.instant import EPOCH_START, Instant, WallClock, civil_from_days


class TestFromEpochMs:
    """Tests for Instant.from_epoch_ms()."""

    def test_truncates_fractional_milliseconds(self) -> None:
        assert Instant.from_epoch_ms(1500.9) == Instant(1500)
        assert Instant.from_epoch_ms(-1500.9) == Instant(-1500)

    def test_rejects_non_finite(self) -> None:
        assert Instant.from_epoch_ms(float("nan")) is None
        assert Instant.from_epoch_ms(float("inf")) is None

    def test_range_limits(self) -> None:
        """Instants are limited to 8.64e15 ms either side of the epoch."""
        assert Instant.from_epoch_ms(8_640_000_000_000_000) is not None
        assert Instant.from_epoch_ms(8_640_000_000_000_001) is None
        assert Instant.from_epoch_ms(-8_640_000_000_000_001) is None


class TestFromDatetime:
    """Tests for Instant.from_datetime()."""

    def test_aware_datetime(self) -> None:
        dt = datetime(2023, 3, 5, 5, 30, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert Instant.from_datetime(dt) == Instant(1_677_974_400_000)

    def test_naive_datetime_is_utc(self) -> None:
        assert Instant.from_datetime(datetime(1970, 1, 1, 0, 0, 1)) == Instant(1000)

    def test_offset_of_a_day_or_more_is_none(self) -> None:
        """Offsets must be strictly within 24 hours; anything else has no instant."""
        assert Instant.from_datetime(datetime(2023, 3, 5, tzinfo=tzoffset(None, 25 * 3600))) is None
        assert Instant.from_datetime(datetime(2023, 3, 5, tzinfo=tzoffset(None, -99 * 3600))) is None

    def test_sub_millisecond_precision_is_floored(self) -> None:
        dt = datetime(1970, 1, 1, 0, 0, 0, 1999, tzinfo=timezone.utc)
        assert Instant.from_datetime(dt) == Instant(1)


class TestViews:
    """Tests for ISO, Unix and datetime views."""

    def test_to_iso_string_has_millisecond_precision(self) -> None:
        assert Instant(1_677_974_400_123).to_iso_string() == "2023-03-05T00:00:00.123Z"

    def test_to_iso_string_pads_small_years(self) -> None:
        dt = datetime(5, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        instant = Instant.from_datetime(dt)
        assert instant is not None
        assert instant.to_iso_string() == "0005-01-02T03:04:05.000Z"

    def test_to_unix_seconds_floors(self) -> None:
        assert Instant(1999).to_unix_seconds() == 1
        assert Instant(-1).to_unix_seconds() == -1

    def test_outside_datetime_range(self) -> None:
        """Years past 9999 have no datetime but keep their ISO and Unix forms."""
        far = Instant(999_999_999_999_000)
        assert far.to_datetime() is None
        assert far.to_iso_string() == "+033658-09-27T01:46:39.000Z"
        assert far.to_unix_seconds() == 999_999_999_999

    def test_expanded_years_at_range_limits(self) -> None:
        assert Instant(8_640_000_000_000_000).to_iso_string() == "+275760-09-13T00:00:00.000Z"
        assert Instant(-8_640_000_000_000_000).to_iso_string() == "-271821-04-20T00:00:00.000Z"

    def test_year_zero_and_before(self) -> None:
        year_zero = -62_167_219_200_000
        assert Instant(year_zero).to_iso_string() == "0000-01-01T00:00:00.000Z"
        assert Instant(year_zero - 1).to_iso_string() == "-000001-12-31T23:59:59.999Z"

    def test_to_datetime_is_aware_utc(self) -> None:
        assert Instant(0).to_datetime() == EPOCH_START
        assert Instant(0).to_datetime().tzinfo == timezone.utc

    def test_shifted(self) -> None:
        assert Instant(0).shifted(-300) == Instant(-18_000_000)
        assert Instant(0).shifted(0) == Instant(0)


class TestWallClock:
    """Tests for calendar arithmetic outside datetime."""

    @pytest.mark.parametrize(
        ("days", "expected"),
        [(0, (1970, 1, 1)), (-1, (1969, 12, 31)), (59, (1970, 3, 1)), (11_016, (2000, 2, 29)), (11_017, (2000, 3, 1))],
    )
    def test_civil_from_days(self, days: int, expected: tuple[int, int, int]) -> None:
        assert civil_from_days(days) == expected

    def test_matches_datetime_inside_its_range(self) -> None:
        instant = Instant(1_678_000_000_123)
        dt = instant.to_datetime()
        assert instant.wall_clock() == WallClock(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, 123)

    def test_before_epoch(self) -> None:
        assert Instant(-1).wall_clock() == WallClock(1969, 12, 31, 23, 59, 59, 999)
