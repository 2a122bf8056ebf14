# =============================================================================
# core/venues.py  —  Venue Strategist
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Scores every venue archetype in the catalog against the couple context,
#   keeps the top three, and attaches booking guidance.
#
# FIT SCORE (clamped to 55–98):
#
#     52
#   +  9 × vibe hits       catalog vibe tag ⊂ vibe word, or vibe word ⊂ tag
#   + 10 × priority hits   catalog priority tag among the couple's three
#   + capacity             +8 inside the range, −4 below it, −6 above it
#
# RANKING:
#   sorted() is stable, so archetypes with equal fit keep catalog order.
# =============================================================================

from datetime import date
from typing import Any, Mapping, Optional, Union

from core.context import normalize_vibes
from core.dates import months_between
from core.models import (
    CoupleContext,
    Snapshot,
    VenueRecommendation,
    VenueStrategyBrief,
    VenueTimeline,
)
from core.numeric import clamp, unique
from core.reference_data import (
    DECISION_CHECKLIST,
    DEPOSIT_EXPECTATION_PCT,
    NEGOTIATION_TIPS,
    VENUE_PROFILES,
    VenueProfile,
)
from core.snapshot import build_wedding_snapshot, venue_spend_influence_pct

TOP_VENUES = 3

VIBE_MATCH_REASON = "Matches your vibe direction: {vibes}."
VIBE_FALLBACK_REASON = "Provides a flexible canvas for your selected aesthetic direction."
GUEST_FLOW_REASON = (
    "Supports your {guest_count}-guest layout with practical flow for ceremony "
    "and reception transitions."
)
KEY_INSIGHT = (
    "Venue selection locks in date, vibe, layout, and lighting, and will likely control "
    "about {range_min}-{range_max}% of your total budget. It is the structural backbone "
    "of this plan."
)

_BOOKING_WINDOWS = {
    "high": (12, 14),
    "medium": (10, 12),
    "low": (8, 10),
}


def matched_vibes(profile: VenueProfile, vibes: list[str]) -> list[str]:
    """Catalog vibe tags that overlap any of the couple's vibe words."""
    return [
        tag for tag in profile.vibes
        if any(word in tag or tag in word for word in vibes)
    ]


def capacity_adjustment(profile: VenueProfile, guest_count: int) -> int:
    minimum, maximum = profile.capacity_range
    if guest_count < minimum:
        return -4
    if guest_count > maximum:
        return -6
    return 8


def score_venue_fit(profile: VenueProfile, context: CoupleContext, vibes: list[str]) -> int:
    vibe_hits = len(matched_vibes(profile, vibes))
    priority_hits = sum(1 for tag in profile.priorities if tag in context.priorities)
    raw = (
        52
        + 9 * vibe_hits
        + 10 * priority_hits
        + capacity_adjustment(profile, context.guest_count)
    )
    return clamp(raw, 55, 98)


def _why_it_matches(profile: VenueProfile, context: CoupleContext, vibes: list[str]) -> list[str]:
    hits = matched_vibes(profile, vibes)
    if hits:
        vibe_reason = VIBE_MATCH_REASON.format(vibes=" and ".join(hits[:2]))
    else:
        vibe_reason = VIBE_FALLBACK_REASON
    reasons = [
        *profile.reasons,
        vibe_reason,
        GUEST_FLOW_REASON.format(guest_count=context.guest_count),
    ]
    return unique(reasons)[:3]


def rank_venues(context: CoupleContext) -> list[VenueRecommendation]:
    """Score the whole catalog and return the top three, best first."""
    vibes = normalize_vibes(context.vibe_words)
    scored = [
        VenueRecommendation(
            venue_type=profile.venue_type,
            fit_score=score_venue_fit(profile, context, vibes),
            budget_impact_tier=profile.budget_impact_tier,
            budget_share_range_pct=profile.budget_share_range_pct,
            why_it_matches=_why_it_matches(profile, context, vibes),
        )
        for profile in VENUE_PROFILES
    ]
    return sorted(scored, key=lambda rec: rec.fit_score, reverse=True)[:TOP_VENUES]


def booking_window(level: str) -> tuple[int, int]:
    return _BOOKING_WINDOWS[level]


def booking_urgency(context: CoupleContext, window: tuple[int, int]) -> str:
    """accelerated when a fixed date falls inside the usual booking lead time."""
    if context.wedding_date is None:
        return "normal"
    if months_between(context.as_of, context.wedding_date) < window[0]:
        return "accelerated"
    return "normal"


def build_venue_strategy_brief(
    raw: Union[Mapping[str, Any], CoupleContext],
    snapshot: Optional[Snapshot] = None,
    today: Optional[date] = None,
) -> VenueStrategyBrief:
    """Rank venue archetypes and derive the booking timeline.

    Args:
        raw: A raw context record or normalized CoupleContext.  Ignored when
            `snapshot` is supplied.
        snapshot: A pre-computed Snapshot to reuse.
        today: Reference date for normalizing `raw`.
    """
    snapshot = snapshot or build_wedding_snapshot(raw, today=today)
    context = snapshot.normalized_context

    window = booking_window(snapshot.complexity_level)
    influence = venue_spend_influence_pct(context.guest_count)

    return VenueStrategyBrief(
        recommendations=rank_venues(context),
        decision_checklist=list(DECISION_CHECKLIST),
        venue_timeline=VenueTimeline(
            booking_window_months_before=window,
            deposit_expectation_pct=DEPOSIT_EXPECTATION_PCT,
            urgency=booking_urgency(context, window),
            negotiation_tips=list(NEGOTIATION_TIPS),
        ),
        key_insight=KEY_INSIGHT.format(
            range_min=clamp(influence - 5, 40, 55),
            range_max=clamp(influence + 5, 45, 60),
        ),
    )
