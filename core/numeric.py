# =============================================================================
# core/numeric.py  —  Rounding, clamping and currency formatting
# =============================================================================
#
# Rounding is half-up (2.5 -> 3, 22.25 -> 22.3), not Python's round-half-even.
# Budget percents, dollar amounts and the "$40k" label all go through
# round_half_up so the same input always lands on the same figures.
# =============================================================================

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


def round_half_up(value: float, places: int = 0) -> float:
    """Round to `places` decimals, ties away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_int(value: float) -> int:
    return int(round_half_up(value))


def clamp(value, lower, upper):
    return min(upper, max(lower, value))


def format_usd(amount: float) -> str:
    """Whole dollars with thousands separators, e.g. '$35,000'."""
    return f"${round_to_int(amount):,}"


def unique(values: Iterable[str]) -> list[str]:
    """Drop repeats, keep first-seen order."""
    return list(dict.fromkeys(values))
