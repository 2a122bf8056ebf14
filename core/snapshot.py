# =============================================================================
# core/snapshot.py  —  Snapshot Builder
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the normalized couple context and produces the Snapshot:
#     - a budget tier label from per-guest spend
#     - a 0–100 complexity score and its low/medium/high level
#     - the couple's priorities as strategic labels
#     - whether planning should start from the venue or the theme
#     - a one-sentence planner insight
#
# COMPLEXITY SCORE:
#   Five additive pressures, clamped to 0–100:
#
#     guest load            10 / 22 / 32 / 42   (≤50, ≤100, ≤150, more)
#     timeline pressure     12 if ≤10 months out, else 7 (7 with no date)
#     season pressure       10 summer/fall, 6 otherwise
#     priority pressure      8 if ≥2 of food/party/photos, else 4
#     non-negotiable        10 if it names a high-friction ask, else 5
# =============================================================================

import re
from datetime import date
from typing import Any, Mapping, Optional, Union

from core.context import normalize_context
from core.dates import months_between
from core.models import CoupleContext, Snapshot
from core.numeric import clamp, format_usd, round_to_int
from core.reference_data import HIGH_FRICTION_PATTERNS, STRATEGIC_PRIORITY_LABELS

_FOCUS_PRIORITIES = frozenset({"food", "party", "photos"})
_THEME_FIRST_PRIORITIES = frozenset({"elegance", "intimacy"})
_HIGH_FRICTION = tuple(re.compile(pattern) for pattern in HIGH_FRICTION_PATTERNS)

BUDGET_TIER_LABEL = "{tier} ${thousands}k - {guest_count} guests"
PLANNER_INSIGHT = (
    "Given your guest count ({guest_count}) and budget range {budget_min}-{budget_max}, "
    "venue selection will likely drive about {influence_pct}% of total spend "
    "and heavily shape theme decisions."
)


def budget_tier(per_guest_midpoint: float) -> str:
    if per_guest_midpoint < 250:
        return "Essential"
    if per_guest_midpoint < 600:
        return "Smart Luxury"
    if per_guest_midpoint < 1000:
        return "Elevated"
    return "Prestige"


def guest_load_score(guest_count: int) -> int:
    if guest_count <= 50:
        return 10
    if guest_count <= 100:
        return 22
    if guest_count <= 150:
        return 32
    return 42


def timeline_pressure(wedding_date: Optional[date], as_of: date) -> int:
    if wedding_date is None:
        return 7
    return 12 if months_between(as_of, wedding_date) <= 10 else 7


def season_pressure(season: str) -> int:
    return 10 if season in ("summer", "fall") else 6


def priority_pressure(priorities) -> int:
    overlap = sum(1 for priority in priorities if priority in _FOCUS_PRIORITIES)
    return 8 if overlap >= 2 else 4


def non_negotiable_pressure(non_negotiable: str) -> int:
    text = non_negotiable.lower()
    return 10 if any(pattern.search(text) for pattern in _HIGH_FRICTION) else 5


def complexity_level(score: int) -> str:
    if score <= 34:
        return "low"
    if score <= 64:
        return "medium"
    return "high"


def venue_spend_influence_pct(guest_count: int) -> int:
    """Share of total spend the venue decision is expected to steer."""
    if guest_count <= 60:
        return 40
    if guest_count <= 120:
        return 45
    if guest_count <= 180:
        return 52
    return 60


def complexity_score(context: CoupleContext) -> int:
    total = (
        guest_load_score(context.guest_count)
        + timeline_pressure(context.wedding_date, context.as_of)
        + season_pressure(context.wedding_season)
        + priority_pressure(context.priorities)
        + non_negotiable_pressure(context.non_negotiable)
    )
    return clamp(total, 0, 100)


def starting_pillar(context: CoupleContext) -> str:
    """theme-first only for small, high-spend, elegance/intimacy-led weddings."""
    per_guest = context.midpoint_budget / context.guest_count
    if (
        context.guest_count <= 60
        and per_guest >= 700
        and _THEME_FIRST_PRIORITIES.intersection(context.priorities)
    ):
        return "theme-first"
    return "venue-first"


def build_wedding_snapshot(
    raw: Union[Mapping[str, Any], CoupleContext],
    today: Optional[date] = None,
) -> Snapshot:
    """Build the planning snapshot for a couple context.

    Args:
        raw: A raw context record or an already-normalized CoupleContext.
        today: Reference date, used only when `raw` still needs normalizing.

    Returns:
        A frozen Snapshot embedding the normalized context.
    """
    context = normalize_context(raw, today=today)
    midpoint = context.midpoint_budget
    per_guest = midpoint / context.guest_count

    score = complexity_score(context)
    label = BUDGET_TIER_LABEL.format(
        tier=budget_tier(per_guest),
        thousands=round_to_int(midpoint / 1000),
        guest_count=context.guest_count,
    )
    insight = PLANNER_INSIGHT.format(
        guest_count=context.guest_count,
        budget_min=format_usd(context.budget_min),
        budget_max=format_usd(context.budget_max),
        influence_pct=venue_spend_influence_pct(context.guest_count),
    )

    return Snapshot(
        budget_tier_label=label,
        complexity_score=score,
        complexity_level=complexity_level(score),
        strategic_priorities=tuple(
            STRATEGIC_PRIORITY_LABELS[priority] for priority in context.priorities[:3]
        ),
        recommended_starting_pillar=starting_pillar(context),
        planner_insight=insight,
        normalized_context=context,
    )
