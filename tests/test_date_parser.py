"""Tests for date parsing utilities."""

import pytest
from datetime import date, timedelta

from fintrack.utils.date_parser import parse_date


class TestParseDate:
    """Tests for parse_date function."""

    def test_parse_iso_date(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)

    def test_parse_long_date(self):
        assert parse_date("January 15, 2024") == date(2024, 1, 15)

    def test_parse_relative_dates(self):
        today = date.today()
        assert parse_date("today") == today
        assert parse_date(" Yesterday ") == today - timedelta(days=1)
        assert parse_date("tomorrow") == today + timedelta(days=1)

    @pytest.mark.parametrize("raw", ["not a date", "", "2024-13-45"])
    def test_parse_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_date(raw)
