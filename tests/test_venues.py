"""Tests for the venue strategist."""

from itertools import permutations

import pytest

from core.context import normalize_vibes
from core.reference_data import PRIORITIES, VENUE_PROFILES
from core.snapshot import build_wedding_snapshot
from core.venues import (
    build_venue_strategy_brief,
    capacity_adjustment,
    matched_vibes,
    score_venue_fit,
)


def _profile(venue_type):
    return next(profile for profile in VENUE_PROFILES if profile.venue_type == venue_type)


def test_lisbon_top_three_keep_catalog_order_on_ties(base_context):
    brief = build_venue_strategy_brief(base_context)

    ranked = [(rec.venue_type, rec.fit_score) for rec in brief.recommendations]
    # Historic villa also scores 98 but sits later in the catalog.
    assert ranked == [
        ("Boutique hotel", 98),
        ("Industrial loft", 98),
        ("Garden venue", 98),
    ]


@pytest.mark.parametrize("priorities", list(permutations(PRIORITIES, 3)))
@pytest.mark.parametrize("guest_count, vibe_words", [
    (30, ["rustic", "romantic"]),
    (120, ["modern", "romantic", "minimalist"]),
    (200, ["dramatic", "classic"]),
    (400, ["neon"]),
])
def test_recommendations_are_three_best_first(make_context, priorities, guest_count, vibe_words):
    context = make_context(
        priorities=list(priorities), guest_count=guest_count, vibe_words=vibe_words
    )
    scores = [rec.fit_score for rec in build_venue_strategy_brief(context).recommendations]

    assert len(scores) == 3
    assert scores == sorted(scores, reverse=True)


def test_fit_score_components(base_context):
    vibes = normalize_vibes(base_context.vibe_words)
    # 52 + 9 (romantic) + 20 (elegance, photos) + 8 (capacity)
    assert score_venue_fit(_profile("Estate"), base_context, vibes) == 89
    # 52 + 9 (modern) + 10 (food) + 8
    assert score_venue_fit(_profile("Private club"), base_context, vibes) == 79


def test_fit_score_is_clamped(base_context):
    vibes = normalize_vibes(base_context.vibe_words)
    for profile in VENUE_PROFILES:
        assert 55 <= score_venue_fit(profile, base_context, vibes) <= 98


def test_vibe_matching_is_substring_both_ways():
    estate = _profile("Estate")
    assert matched_vibes(estate, ["romantically"]) == ["romantic"]
    assert matched_vibes(estate, ["class"]) == ["classic"]
    assert matched_vibes(estate, ["neon"]) == []


def test_capacity_adjustment():
    garden = _profile("Garden venue")  # 40-160
    assert capacity_adjustment(garden, 39) == -4
    assert capacity_adjustment(garden, 40) == 8
    assert capacity_adjustment(garden, 160) == 8
    assert capacity_adjustment(garden, 161) == -6


def test_why_it_matches(base_context):
    top = build_venue_strategy_brief(base_context).recommendations[0]
    assert top.why_it_matches == [
        "Integrated catering and logistics simplify coordination.",
        "Consistent service operations help preserve guest experience quality.",
        "Matches your vibe direction: modern and romantic.",
    ]
    assert top.budget_impact_tier == "$$$"
    assert top.budget_share_range_pct == (42, 55)


def test_unmatched_vibes_use_fallback_reason(make_context):
    brief = build_venue_strategy_brief(make_context(vibe_words=["neon"]))
    for rec in brief.recommendations:
        assert len(rec.why_it_matches) <= 3
        assert "Provides a flexible canvas for your selected aesthetic direction." in rec.why_it_matches


def test_checklist_and_deposit(base_context):
    brief = build_venue_strategy_brief(base_context)
    assert brief.decision_checklist == [
        "Capacity vs comfort",
        "Catering restrictions",
        "Weather contingency",
        "Vendor flexibility",
        "Hidden costs",
    ]
    assert brief.venue_timeline.deposit_expectation_pct == (20, 40)
    assert len(brief.venue_timeline.negotiation_tips) == 3


def test_high_complexity_timeline_is_accelerated(base_context):
    timeline = build_venue_strategy_brief(base_context).venue_timeline
    assert timeline.booking_window_months_before == (12, 14)
    # 8 months out, inside the 12-month lead time
    assert timeline.urgency == "accelerated"


def test_low_complexity_without_date_is_normal(make_context):
    context = make_context(
        wedding_date=None, wedding_season="winter", guest_count=40,
        budget_min=20000, budget_max=30000,
        priorities=["elegance", "intimacy", "food"],
        non_negotiable="Live string quartet",
    )
    timeline = build_venue_strategy_brief(context).venue_timeline
    assert timeline.booking_window_months_before == (8, 10)
    assert timeline.urgency == "normal"


def test_medium_complexity_far_date_is_normal(make_context):
    # 32 + 7 + 10 + 8 + 5 = 62
    context = make_context(wedding_date="2027-09-19")
    timeline = build_venue_strategy_brief(context).venue_timeline
    assert timeline.booking_window_months_before == (10, 12)
    assert timeline.urgency == "normal"


def test_key_insight_range(base_context):
    brief = build_venue_strategy_brief(base_context)
    assert "about 40-50% of your total budget" in brief.key_insight


def test_key_insight_range_is_clamped_for_large_weddings(make_context):
    brief = build_venue_strategy_brief(make_context(guest_count=300, budget_min=90000, budget_max=110000))
    assert "about 55-60% of your total budget" in brief.key_insight


def test_reuses_supplied_snapshot(base_context):
    snapshot = build_wedding_snapshot(base_context)
    assert build_venue_strategy_brief(None, snapshot=snapshot) == build_venue_strategy_brief(base_context)
