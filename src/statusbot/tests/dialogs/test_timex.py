"""
Tests for timex parsing, normalization and the ambiguity rule.
"""

from datetime import date

import pytest

from statusbot.dialogs.timex import (
    DATE,
    DATERANGE,
    DATETIME,
    DEFINITE,
    is_ambiguous,
    normalize_timex,
    parse_timex,
)

TODAY = date(2024, 3, 1)


class TestParseTimex:

    def test_iso_date_is_definite(self):
        timex = parse_timex("2024-03-04")
        assert timex.types == {DATE, DEFINITE}
        assert timex.to_date() == date(2024, 3, 4)

    def test_datetime_is_definite(self):
        timex = parse_timex("2024-03-04T10:30")
        assert DATETIME in timex.types
        assert DEFINITE in timex.types
        assert (timex.hour, timex.minute) == (10, 30)

    def test_day_of_week_is_not_definite(self):
        timex = parse_timex("XXXX-WXX-1")
        assert timex.day_of_week == 1
        assert DEFINITE not in timex.types

    def test_month_day_without_year_is_not_definite(self):
        timex = parse_timex("XXXX-03-04")
        assert DATE in timex.types
        assert DEFINITE not in timex.types

    def test_year_month_is_a_range(self):
        assert parse_timex("2024-03").types == {DATERANGE}

    def test_range_of_definite_dates_is_definite(self):
        timex = parse_timex("(2024-03-01,2024-03-05,P4D)")
        assert timex.types == {DATERANGE, DEFINITE}
        assert timex.days == 4

    def test_range_with_undated_end_is_not_definite(self):
        timex = parse_timex("(2024-03-01,XXXX-WXX-5,P4D)")
        assert DEFINITE not in timex.types

    @pytest.mark.parametrize("text", ["", None, "2024-02-30", "2024-13", "next week", "XXXX-WXX-9"])
    def test_invalid_strings_do_not_parse(self, text):
        assert parse_timex(text) is None


class TestNormalizeTimex:

    @pytest.mark.parametrize("text,expected", [
        ("2024-03-04", "2024-03-04"),
        ("today", "2024-03-01"),
        ("Tomorrow", "2024-03-02"),
        ("yesterday", "2024-02-29"),
        ("the day after tomorrow", "2024-03-03"),
        ("March 4, 2024", "2024-03-04"),
        ("4th of March 2024", "2024-03-04"),
        ("Mar 4 2024", "2024-03-04"),
        ("3/4/2024", "2024-03-04"),
        ("2024/03/04", "2024-03-04"),
        ("March 4", "XXXX-03-04"),
        ("next Monday", "XXXX-WXX-1"),
        ("friday", "XXXX-WXX-5"),
        ("March 2024", "2024-03"),
    ])
    def test_single_dates(self, text, expected):
        assert normalize_timex(text, TODAY) == expected

    def test_explicit_range(self):
        assert normalize_timex("from March 1, 2024 to March 5, 2024", TODAY) == \
            "(2024-03-01,2024-03-05,P4D)"

    def test_between_range(self):
        assert normalize_timex("between 3/1/2024 and 3/3/2024", TODAY) == \
            "(2024-03-01,2024-03-03,P2D)"

    def test_relative_range_resolves_against_today(self):
        assert normalize_timex("today to tomorrow", TODAY) == "(2024-03-01,2024-03-02,P1D)"

    def test_backwards_range_is_rejected(self):
        assert normalize_timex("from 3/5/2024 to 3/1/2024", TODAY) is None

    def test_range_over_weekdays_has_no_canonical_form(self):
        assert normalize_timex("between monday and friday", TODAY) is None

    @pytest.mark.parametrize("text", ["", "   ", None, "whenever", "Smarch 4"])
    def test_unparseable_text(self, text):
        assert normalize_timex(text, TODAY) is None


class TestIsAmbiguous:

    def test_definite_calendar_date(self):
        assert is_ambiguous("2024-03-04", TODAY) is False

    def test_relative_weekday(self):
        assert is_ambiguous("next Friday", TODAY) is True

    def test_empty_string(self):
        assert is_ambiguous("", TODAY) is True

    def test_unparseable_text_is_treated_as_ambiguous(self):
        assert is_ambiguous("sometime soon", TODAY) is True

    def test_definite_range(self):
        assert is_ambiguous("(2024-03-01,2024-03-05,P4D)", TODAY) is False
