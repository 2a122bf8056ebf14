# =============================================================================
# core/dates.py  —  Calendar helpers
# =============================================================================
#
# Month arithmetic, season inference and the one place the engine reads the
# system clock (resolve_today).  Everything else receives "today" as an
# explicit argument, so tests can pin it.
# =============================================================================

from datetime import date
from typing import Optional

# Fixed English abbreviations; strftime("%b") follows the process locale.
_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def resolve_today(today: Optional[date] = None) -> date:
    """Return `today` if given, otherwise the current local date."""
    return today if today is not None else date.today()


def months_between(start: date, target: date) -> int:
    """Whole calendar months from `start` until `target`.

    Counts month boundaries, then drops one when target's day-of-month has
    not yet been reached.  Negative when target is in the past.

    >>> months_between(date(2026, 10, 19), date(2027, 7, 10))
    8
    """
    months = (target.year - start.year) * 12 + (target.month - start.month)
    if target.day < start.day:
        months -= 1
    return months


def infer_season(value: date) -> str:
    """Northern-hemisphere meteorological season for a date."""
    if 3 <= value.month <= 5:
        return "spring"
    if 6 <= value.month <= 8:
        return "summer"
    if 9 <= value.month <= 11:
        return "fall"
    return "winter"


def subtract_months(value: date, months: int) -> date:
    """First day of the month `months` before `value`'s month."""
    index = value.year * 12 + (value.month - 1) - months
    return date(index // 12, index % 12 + 1, 1)


def format_month_year(value: date) -> str:
    return f"{_MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"
