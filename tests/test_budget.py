"""Tests for the budget architect: allocations, timeline and risk radar."""

from itertools import permutations

import pytest

from core.budget import (
    adjusted_weights,
    build_budget_architecture,
    build_budget_planning_bundle,
    build_risk_radar,
    build_task_timeline,
    normalize_percents,
)
from core.reference_data import PRIORITIES, RISK_BUDGET_CREEP, RISK_GUEST_LOGISTICS, RISK_PEAK_SEASON


def _tenths(allocations):
    return sum(round(item.percent * 10) for item in allocations)


def test_lisbon_weights_after_priorities():
    assert adjusted_weights(("food", "elegance", "photos")) == {
        "Venue": 19,
        "Catering": 29,
        "Photography": 15,
        "Attire": 6,
        "Decor": 14,
        "Entertainment": 4,
        "Planner": 4,
    }


def test_lisbon_allocations(base_context):
    architecture = build_budget_architecture(base_context)

    assert [(a.category, a.percent, a.amount_usd) for a in architecture.allocations] == [
        ("Venue", 18.8, 7520),
        ("Catering", 28.7, 11480),
        ("Photography", 14.8, 5920),
        ("Attire", 5.9, 2360),
        ("Decor", 13.8, 5520),
        ("Entertainment", 4.0, 1600),
        ("Planner", 4.0, 1600),
        ("Buffer", 10, 4000),
    ]
    assert architecture.buffer_percent == 10


@pytest.mark.parametrize("priorities", list(permutations(PRIORITIES, 3)))
def test_every_priority_mix_sums_to_exactly_100(make_context, priorities):
    architecture = build_budget_architecture(make_context(priorities=list(priorities)))

    assert len(architecture.allocations) == 8
    assert architecture.allocations[-1].category == "Buffer"
    assert architecture.allocations[-1].percent == 10
    assert _tenths(architecture.allocations) == 1000
    assert all(item.percent >= 0 for item in architecture.allocations)


def test_residual_goes_to_first_largest_share():
    # 1000/3 rounds to 333 each; the spare tenth lands on the first
    assert normalize_percents({"a": 1, "b": 1, "c": 1}, 100) == {"a": 33.4, "b": 33.3, "c": 33.3}


def test_negative_residual_comes_off_the_largest_share():
    weights = {name: 1 for name in "abcdefg"}
    # 900/7 rounds up to 129 each, 3 tenths over
    percents = normalize_percents(weights)
    assert percents["a"] == 12.6
    assert all(percents[name] == 12.9 for name in "bcdefg")


def test_weights_never_drop_below_floor():
    weights = adjusted_weights(("party", "elegance", "photos"))
    assert min(weights.values()) >= 4


def test_trade_off_insights_follow_lead_priority(make_context):
    architecture = build_budget_architecture(make_context(priorities=["photos", "food", "party"]))
    assert architecture.trade_off_insights[0].startswith("If you increase decor by $3k")
    assert architecture.trade_off_insights[1].startswith("Moving photography from mid-tier")


def test_dated_timeline_windows(base_context):
    phases = build_task_timeline(base_context).phases

    assert [(p.phase, p.window) for p in phases] == [
        ("12-9 months", "Jul 2026 - Oct 2026"),
        ("9-6 months", "Oct 2026 - Jan 2027"),
        ("6-3 months", "Jan 2027 - Apr 2027"),
        ("3 months to wedding", "Apr 2027 - Jul 2027"),
    ]
    assert phases[0].tasks == ["Venue booking", "Planner selection", "Photographer booking"]


def test_seasonal_timeline_windows(make_context):
    phases = build_task_timeline(make_context(wedding_date=None, wedding_season="spring")).phases

    assert [p.window for p in phases] == [
        "12-9 months out (spring)",
        "9-6 months out (spring)",
        "6-3 months out (spring)",
        "3 months out to wedding (spring)",
    ]


def test_lisbon_risk_radar(base_context):
    bundle = build_budget_planning_bundle(base_context)
    risks = bundle.risk_radar.top_risks

    assert [(r.risk, r.severity) for r in risks] == [
        (RISK_PEAK_SEASON, "high"),
        (RISK_BUDGET_CREEP, "high"),
        (RISK_GUEST_LOGISTICS, "medium"),
    ]
    assert risks[0].reason == "High-demand months compress venue and vendor options early."
    assert all(r.mitigation for r in risks)


def test_equal_severities_keep_catalog_order(make_context):
    context = make_context(
        wedding_date=None, wedding_season="winter", guest_count=40,
        budget_min=20000, budget_max=30000,
        priorities=["elegance", "intimacy", "food"],
        non_negotiable="Live string quartet",
    )
    risks = build_risk_radar(context, "low").top_risks
    assert [(r.risk, r.severity) for r in risks] == [
        (RISK_PEAK_SEASON, "low"),
        (RISK_BUDGET_CREEP, "low"),
        (RISK_GUEST_LOGISTICS, "low"),
    ]


def test_medium_creep_outranks_low_risks(make_context):
    context = make_context(wedding_date=None, wedding_season="spring", guest_count=80)
    risks = build_risk_radar(context, "medium").top_risks
    assert [r.risk for r in risks] == [RISK_BUDGET_CREEP, RISK_PEAK_SEASON, RISK_GUEST_LOGISTICS]


def test_narrow_budget_band_is_high_creep_risk(make_context):
    context = make_context(budget_min=40000, budget_max=45000)
    creep = next(r for r in build_risk_radar(context, "low").top_risks if r.risk == RISK_BUDGET_CREEP)
    assert creep.severity == "high"
    assert creep.reason == "A narrow budget band leaves less room for late-stage upgrades."


def test_large_guest_list_logistics(make_context):
    context = make_context(guest_count=160, budget_min=60000, budget_max=80000)
    logistics = next(
        r for r in build_risk_radar(context, "high").top_risks if r.risk == RISK_GUEST_LOGISTICS
    )
    assert logistics.severity == "high"
    assert logistics.reason.startswith("Larger guest movement")
