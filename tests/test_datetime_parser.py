"""Tests for the compact date/time parsers."""

from datetime import datetime

import pytest

from sncf_departures.adapters.sncf_api.datetime_parser import (
    format_compact_datetime,
    parse_clock_time,
    parse_compact_datetime,
    start_of_day,
)
from sncf_departures.adapters.web.formatters import format_display_time


class TestParseCompactDatetime:
    """Tests for YYYYMMDDTHHMMSS parsing."""

    def test_when_valid_then_returns_local_datetime(self) -> None:
        """Given a well-formed timestamp, when parsing, then returns the naive datetime."""
        assert parse_compact_datetime("20240315T143000") == datetime(2024, 3, 15, 14, 30, 0)

    def test_when_valid_then_displays_as_hour_and_minute(self) -> None:
        """Given 20240315T143000, when formatting for display, then shows 14:30."""
        assert format_display_time(parse_compact_datetime("20240315T143000")) == "14:30"

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "2024-03-15",
            "20240315 143000",
            "20240315T1430",
            "2024031XT143000",
            "20241315T143000",
            "20240230T120000",
            "20240315T250000",
            "20240315T143000Z",
        ],
    )
    def test_when_malformed_then_returns_none(self, value: str | None) -> None:
        """Given a malformed timestamp, when parsing, then returns None without raising."""
        assert parse_compact_datetime(value) is None

    def test_when_formatting_then_uses_compact_layout(self) -> None:
        """Given a datetime, when formatting for a request, then uses the compact layout."""
        assert format_compact_datetime(datetime(2024, 3, 5, 7, 8, 9)) == "20240305T070809"


class TestParseClockTime:
    """Tests for HHMMSS placement on a calendar day."""

    base = datetime(2024, 3, 15)

    def test_when_valid_then_placed_on_base_day(self) -> None:
        """Given 091500 and a base day, when parsing, then returns that time on the base day."""
        assert parse_clock_time("091500", self.base) == datetime(2024, 3, 15, 9, 15)

    def test_when_base_has_time_then_time_is_replaced(self) -> None:
        """Given a base with a time of day, when parsing, then only the date is kept."""
        base = datetime(2024, 3, 15, 22, 41, 12, 500)
        assert parse_clock_time("070000", base) == datetime(2024, 3, 15, 7, 0)

    @pytest.mark.parametrize("value", [None, "", "0915", "09h15m", "246000", "126100"])
    def test_when_malformed_then_returns_none(self, value: str | None) -> None:
        """Given a malformed clock time, when parsing, then returns None."""
        assert parse_clock_time(value, self.base) is None

    def test_when_base_missing_then_returns_none(self) -> None:
        """Given no base date, when parsing, then returns None."""
        assert parse_clock_time("091500", None) is None

    def test_when_earlier_than_previous_then_rolls_to_next_day(self) -> None:
        """Given a time before the previous instant, when parsing, then moves it past midnight."""
        previous = datetime(2024, 3, 15, 23, 50)
        assert parse_clock_time("001000", self.base, not_before=previous) == datetime(
            2024, 3, 16, 0, 10
        )

    def test_when_not_earlier_than_previous_then_stays_on_day(self) -> None:
        """Given a time after the previous instant, when parsing, then keeps the base day."""
        previous = datetime(2024, 3, 15, 9, 0)
        assert parse_clock_time("091000", self.base, not_before=previous) == datetime(
            2024, 3, 15, 9, 10
        )


def test_start_of_day_truncates_to_midnight() -> None:
    """Given a datetime, when truncating, then returns midnight of the same day."""
    assert start_of_day(datetime(2024, 3, 15, 14, 30, 5, 7)) == datetime(2024, 3, 15)


def test_display_time_placeholder_when_absent() -> None:
    """Given no instant, when formatting for display, then shows the placeholder."""
    assert format_display_time(None) == "--:--"
