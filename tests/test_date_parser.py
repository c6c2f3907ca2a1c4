"""Tests for date parsing and QIF date normalization."""

import logging
import pytest
from datetime import date, timedelta
from ledgerbook.utils.date_parser import (
    format_month,
    get_last_month_range,
    get_month_range,
    normalize_qif_date,
    parse_date,
)

FALLBACK = date(2030, 7, 4)


class TestNormalizeQifDate:
    """Tests for QIF date normalization."""

    def test_first_part_over_twelve_is_day(self):
        assert normalize_qif_date("13/01/2024") == date(2024, 1, 13)

    def test_second_part_over_twelve_is_day(self):
        assert normalize_qif_date("01/13/2024") == date(2024, 1, 13)

    def test_ambiguous_defaults_to_day_first(self):
        assert normalize_qif_date("01/02/2024") == date(2024, 2, 1)
        assert normalize_qif_date("12/11/2024") == date(2024, 11, 12)

    def test_iso_with_short_components(self):
        assert normalize_qif_date("2024-3-5") == date(2024, 3, 5)
        assert normalize_qif_date("2024-03-05").isoformat() == "2024-03-05"

    def test_dash_separated(self):
        assert normalize_qif_date("05-03-2024") == date(2024, 3, 5)
        assert normalize_qif_date("25-12-23") == date(2023, 12, 25)

    @pytest.mark.parametrize(
        "text, expected_year",
        [("1/2/00", 2000), ("1/2/49", 2049), ("1/2/50", 1950), ("1/2/99", 1999)],
    )
    def test_two_digit_years(self, text, expected_year):
        assert normalize_qif_date(text).year == expected_year

    def test_surrounding_whitespace(self):
        assert normalize_qif_date("  13/01/2024 ") == date(2024, 1, 13)

    def test_output_is_zero_padded(self):
        assert normalize_qif_date("5/3/2024").isoformat() == "2024-03-05"

    def test_unrecognized_text_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ledgerbook"):
            assert normalize_qif_date("March 5th", today=FALLBACK) == FALLBACK
        assert "March 5th" in caplog.text

    def test_quicken_apostrophe_year_falls_back(self):
        assert normalize_qif_date("1/5'24", today=FALLBACK) == FALLBACK

    def test_impossible_day_falls_back(self):
        assert normalize_qif_date("31/02/2024", today=FALLBACK) == FALLBACK
        assert normalize_qif_date("13/14/2024", today=FALLBACK) == FALLBACK

    def test_default_fallback_is_today(self):
        assert normalize_qif_date("") == date.today()


class TestParseDate:
    """Tests for user-supplied dates."""

    def test_parse_iso_date(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)
        assert parse_date("2024-03-05") == date(2024, 3, 5)

    def test_parse_slash_date_is_day_first(self):
        assert parse_date("01/02/2024") == date(2024, 2, 1)

    def test_parse_named_month(self):
        assert parse_date("January 15, 2024") == date(2024, 1, 15)

    def test_parse_today(self):
        assert parse_date("today") == date.today()

    def test_parse_yesterday(self):
        assert parse_date("yesterday") == date.today() - timedelta(days=1)

    def test_parse_tomorrow(self):
        assert parse_date("Tomorrow") == date.today() + timedelta(days=1)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_date("xyzzy")


class TestMonthRanges:
    """Tests for month key helpers."""

    def test_format_month(self):
        assert format_month(date(2024, 3, 9)) == "2024-03"

    def test_month_range(self):
        assert get_month_range("2024-03") == (date(2024, 3, 1), date(2024, 4, 1))

    def test_month_range_december(self):
        assert get_month_range("2023-12") == (date(2023, 12, 1), date(2024, 1, 1))

    @pytest.mark.parametrize("month", ["2024-13", "2024", "March", "2024-03-01"])
    def test_month_range_invalid(self, month):
        with pytest.raises(ValueError):
            get_month_range(month)

    def test_last_month_range(self):
        assert get_last_month_range(date(2024, 3, 15)) == (date(2024, 2, 1), date(2024, 3, 1))

    def test_last_month_range_january(self):
        assert get_last_month_range(date(2024, 1, 1)) == (date(2023, 12, 1), date(2024, 1, 1))
