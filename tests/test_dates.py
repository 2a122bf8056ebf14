"""Tests for calendar and rounding helpers."""

from datetime import date

import pytest

from core.dates import format_month_year, infer_season, months_between, subtract_months
from core.numeric import clamp, format_usd, round_half_up, round_to_int, unique


@pytest.mark.parametrize("start, target, months", [
    (date(2026, 10, 19), date(2027, 7, 10), 8),
    (date(2026, 10, 19), date(2027, 10, 19), 12),
    (date(2026, 10, 19), date(2027, 10, 18), 11),
    (date(2026, 10, 19), date(2026, 10, 30), 0),
    (date(2026, 10, 19), date(2026, 8, 1), -3),
])
def test_months_between(start, target, months):
    assert months_between(start, target) == months


@pytest.mark.parametrize("month, season", [
    (1, "winter"), (2, "winter"), (3, "spring"), (5, "spring"), (6, "summer"),
    (8, "summer"), (9, "fall"), (11, "fall"), (12, "winter"),
])
def test_infer_season(month, season):
    assert infer_season(date(2027, month, 15)) == season


def test_subtract_months_crosses_year():
    assert subtract_months(date(2027, 1, 15), 3) == date(2026, 10, 1)
    assert subtract_months(date(2027, 7, 10), 0) == date(2027, 7, 1)
    assert subtract_months(date(2027, 7, 10), 12) == date(2026, 7, 1)


def test_format_month_year():
    assert format_month_year(date(2026, 7, 1)) == "Jul 2026"
    assert format_month_year(date(2027, 12, 31)) == "Dec 2027"


def test_rounding_is_half_up():
    assert round_half_up(2.5) == 3.0
    assert round_half_up(22.25, 1) == 22.3
    assert round_to_int(40.5) == 41
    assert round_to_int(0.49) == 0


def test_helpers():
    assert clamp(120, 55, 98) == 98
    assert clamp(10, 55, 98) == 55
    assert format_usd(35000) == "$35,000"
    assert format_usd(1250.5) == "$1,251"
    assert unique(["ivory", "sage", "ivory"]) == ["ivory", "sage"]
