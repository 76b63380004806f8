"""Tests for date strings and month-key helpers."""

from __future__ import annotations

import re
from datetime import date, datetime

import pytest

from hagu_finance.services.periods import (
    get_current_month,
    get_last_n_months,
    get_local_date_string,
    get_month_name,
    get_months_between,
    get_today_string,
    shift_month,
)

JUNE_15 = date(2024, 6, 15)


class TestLocalDateString:
    """YYYY-MM-DD rendering from local date fields."""

    def test_formats_date(self):
        assert get_local_date_string(date(2024, 1, 15)) == "2024-01-15"

    def test_pads_month_and_day(self):
        assert get_local_date_string(date(2024, 5, 5)) == "2024-05-05"

    def test_uses_local_fields_of_datetime(self):
        assert get_local_date_string(datetime(2024, 12, 31, 23, 59)) == "2024-12-31"

    def test_defaults_to_now(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", get_local_date_string())

    def test_today_string_matches_local_date(self):
        assert get_today_string() == get_local_date_string()

    def test_today_string_accepts_pinned_day(self):
        assert get_today_string(today=JUNE_15) == "2024-06-15"


class TestCurrentMonth:
    def test_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}", get_current_month())

    def test_matches_clock(self):
        now = date.today()
        assert get_current_month() == f"{now.year}-{now.month:02d}"

    def test_pinned_day(self):
        assert get_current_month(today=JUNE_15) == "2024-06"


class TestMonthsBetween:
    """Inclusive month enumeration."""

    def test_simple_range(self):
        assert get_months_between("2024-01", "2024-03") == ["2024-01", "2024-02", "2024-03"]

    def test_same_month(self):
        assert get_months_between("2024-01", "2024-01") == ["2024-01"]

    def test_year_boundary(self):
        assert get_months_between("2023-11", "2024-02") == [
            "2023-11",
            "2023-12",
            "2024-01",
            "2024-02",
        ]

    def test_full_year(self):
        result = get_months_between("2024-01", "2024-12")
        assert len(result) == 12
        assert result[0] == "2024-01"
        assert result[11] == "2024-12"

    def test_is_strictly_increasing(self):
        result = get_months_between("2019-07", "2024-02")
        assert result == sorted(result)
        assert len(set(result)) == len(result)

    def test_reversed_range_is_empty(self):
        assert get_months_between("2024-03", "2024-01") == []


class TestLastNMonths:
    """Trailing month windows ending at the current month."""

    def test_last_three(self):
        assert get_last_n_months(3, today=JUNE_15) == ["2024-04", "2024-05", "2024-06"]

    def test_single_month(self):
        assert get_last_n_months(1, today=JUNE_15) == ["2024-06"]

    def test_year_boundary(self):
        result = get_last_n_months(8, today=JUNE_15)
        assert result[0] == "2023-11"
        assert result[-1] == "2024-06"
        assert len(result) == 8

    def test_ends_at_current_month(self):
        result = get_last_n_months(5)
        assert len(result) == 5
        assert result[-1] == get_current_month()
        assert result == sorted(result)


class TestMonthName:
    """Localized month labels."""

    def test_portuguese_by_default(self):
        assert get_month_name("2024-01") == "janeiro de 2024"

    def test_english(self):
        assert get_month_name("2024-01", "en-US") == "January 2024"

    def test_december_portuguese(self):
        assert "dezembro" in get_month_name("2024-12", "pt-BR")

    def test_german(self):
        assert get_month_name("2024-03", "de-DE") == "März 2024"

    def test_unknown_language_falls_back_to_english(self):
        assert get_month_name("2024-07", "ja-JP") == "July 2024"


@pytest.mark.parametrize(
    ("start", "offset", "expected"),
    [
        ((2024, 1), -1, (2023, 12)),
        ((2024, 12), 1, (2025, 1)),
        ((2024, 6), -18, (2022, 12)),
        ((2024, 6), 0, (2024, 6)),
    ],
)
def test_shift_month(start, offset, expected):
    assert shift_month(*start, offset) == expected
