"""Tests for date parsing utilities."""

from datetime import date, timedelta

import pytest

from ledgerbook.utils.date_parser import PERIODS, get_date_range, parse_date


class TestParseDate:
    """Tests for parse_date."""

    def test_iso_date(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)

    def test_long_form_date(self):
        assert parse_date("January 15, 2024") == date(2024, 1, 15)

    def test_surrounding_whitespace(self):
        assert parse_date("  2024-02-29 ") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "text, offset",
        [("today", 0), ("Yesterday", -1), ("TOMORROW", 1)],
    )
    def test_relative_keywords(self, text, offset):
        assert parse_date(text) == date.today() + timedelta(days=offset)

    @pytest.mark.parametrize("text", ["not a date", "2023-02-29", ""])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date(text)


class TestGetDateRange:
    """Tests for get_date_range with a fixed reference day."""

    TODAY = date(2024, 3, 14)  # a Thursday

    @pytest.mark.parametrize(
        "period, expected",
        [
            ("this-month", (date(2024, 3, 1), date(2024, 3, 14))),
            ("this-year", (date(2024, 1, 1), date(2024, 3, 14))),
            ("this-week", (date(2024, 3, 11), date(2024, 3, 14))),
            ("last-month", (date(2024, 2, 1), date(2024, 2, 29))),
            ("last-year", (date(2023, 1, 1), date(2023, 12, 31))),
            ("last-week", (date(2024, 3, 4), date(2024, 3, 10))),
        ],
    )
    def test_periods(self, period, expected):
        assert get_date_range(period, today=self.TODAY) == expected

    def test_last_month_in_january(self):
        assert get_date_range("last-month", today=date(2024, 1, 10)) == (
            date(2023, 12, 1),
            date(2023, 12, 31),
        )

    def test_case_insensitive(self):
        assert get_date_range(" This-Year ", today=self.TODAY)[0] == date(2024, 1, 1)

    def test_defaults_to_today(self):
        start, end = get_date_range("this-month")
        assert end == date.today()
        assert start == date.today().replace(day=1)

    def test_every_period_is_supported(self):
        for period in PERIODS:
            start, end = get_date_range(period, today=self.TODAY)
            assert start <= end

    def test_unknown_period(self):
        with pytest.raises(ValueError, match="Unknown period"):
            get_date_range("next-decade")
