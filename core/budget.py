# =============================================================================
# core/budget.py  —  Budget Architect
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Produces three records from one snapshot:
#     1. BudgetArchitecture: eight allocations (seven spend categories plus
#        a fixed 10% Buffer) with dollar amounts and trade-off notes
#     2. DynamicTaskTimeline: four planning phases, furthest-out first
#     3. RiskRadar: three named risks ranked by severity
#
# ALLOCATION, STEP BY STEP:
#   a) Start from the base weights (Venue 23, Catering 25, ...).
#   b) For each chosen priority, add its modifiers, flooring every category
#      at 4 after each priority.
#   c) Scale the seven weights to 90 and round each to one decimal (half-up).
#   d) Add the rounding residual (90 − Σ rounded) to the category holding
#      the largest rounded share; first in catalog order on ties.
#   e) Append Buffer at exactly 10.
#
#   Steps (c) and (d) run in integer tenths of a percent, so the seven
#   shares always land on exactly 900 tenths and the eight on 1000.
# =============================================================================

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Union

from core.dates import format_month_year, months_between, subtract_months
from core.models import (
    BudgetAllocation,
    BudgetArchitecture,
    BudgetPlanningBundle,
    CoupleContext,
    DynamicTaskTimeline,
    Risk,
    RiskRadar,
    Snapshot,
    TimelinePhase,
)
from core.numeric import round_to_int
from core.reference_data import (
    BASE_CATEGORY_WEIGHTS,
    BUFFER_CATEGORY,
    BUFFER_PERCENT,
    MIN_CATEGORY_WEIGHT,
    PRIORITY_MODIFIERS,
    RISK_BUDGET_CREEP,
    RISK_GUEST_LOGISTICS,
    RISK_MITIGATIONS,
    RISK_PEAK_SEASON,
    SEVERITY_WEIGHTS,
    SPEND_CATEGORIES,
    TIMELINE_PHASES,
)
from core.snapshot import build_wedding_snapshot

SPEND_TARGET_PERCENT = 100 - BUFFER_PERCENT
NARROW_BUDGET_SPREAD = 0.18

DECOR_PHOTOGRAPHY_TRADE_OFF = (
    "If you increase decor by $3k, photography quality tier is likely to shift from "
    "premium to mid-tier unless overall budget expands."
)
PRIORITY_TRADE_OFFS = {
    "food": (
        "Elevating catering by 5% usually requires pulling from entertainment pacing "
        "or reducing premium bar duration."
    ),
    "party": (
        "Adding premium entertainment and production often reduces flexibility in "
        "decor scale unless total budget increases."
    ),
    "elegance": (
        "A high-design decor concept typically compresses funds available for live "
        "entertainment upgrades."
    ),
    "intimacy": (
        "Investing in guest comfort upgrades can reduce headroom for large-format "
        "production elements."
    ),
    "photos": (
        "Moving photography from mid-tier to premium often requires trimming venue "
        "embellishments and custom signage."
    ),
}
GENERIC_TRADE_OFF = (
    "When one pillar scales up, protect the 10% buffer first to avoid downstream "
    "decision stress."
)

DATED_WINDOW = "{start} - {end}"
SEASONAL_WINDOW = "{start}-{end} months out ({season})"
FINAL_SEASONAL_WINDOW = "{start} months out to wedding ({season})"


# -----------------------------------------------------------------------------
# Allocation
# -----------------------------------------------------------------------------
def adjusted_weights(priorities) -> dict[str, int]:
    """Base category weights nudged by each priority, floored at 4."""
    weights = dict(BASE_CATEGORY_WEIGHTS)
    for priority in priorities:
        modifiers = PRIORITY_MODIFIERS[priority]
        for category in SPEND_CATEGORIES:
            weights[category] = max(
                MIN_CATEGORY_WEIGHT, weights[category] + modifiers.get(category, 0)
            )
    return weights


def normalize_percents(weights: Mapping[str, int], target: int = SPEND_TARGET_PERCENT) -> dict[str, float]:
    """Scale weights to `target` percent at one-decimal precision.

    The rounding residual goes entirely to the largest rounded share, so the
    result always sums to exactly `target`.

    >>> sum(normalize_percents({"a": 1, "b": 1, "c": 1}, 90).values())
    90.0
    """
    total = sum(weights[category] for category in weights)
    target_tenths = target * 10
    tenths = {
        category: int(
            (Decimal(weight) * target_tenths / Decimal(total)).quantize(
                Decimal(1), rounding=ROUND_HALF_UP
            )
        )
        for category, weight in weights.items()
    }

    residual = target_tenths - sum(tenths.values())
    if residual:
        largest = max(tenths, key=tenths.get)
        tenths[largest] += residual

    return {category: value / 10 for category, value in tenths.items()}


def trade_off_insights(priorities) -> list[str]:
    lead = priorities[0] if priorities else None
    return [
        DECOR_PHOTOGRAPHY_TRADE_OFF,
        PRIORITY_TRADE_OFFS.get(lead, GENERIC_TRADE_OFF),
    ]


def build_budget_architecture(context: CoupleContext) -> BudgetArchitecture:
    midpoint = context.midpoint_budget
    percents = normalize_percents(adjusted_weights(context.priorities))

    allocations = [
        BudgetAllocation(
            category=category,
            percent=percents[category],
            amount_usd=round_to_int(midpoint * percents[category] / 100),
        )
        for category in SPEND_CATEGORIES
    ]
    allocations.append(BudgetAllocation(
        category=BUFFER_CATEGORY,
        percent=BUFFER_PERCENT,
        amount_usd=round_to_int(midpoint * BUFFER_PERCENT / 100),
    ))

    return BudgetArchitecture(
        allocations=allocations,
        trade_off_insights=trade_off_insights(context.priorities),
        buffer_percent=BUFFER_PERCENT,
    )


# -----------------------------------------------------------------------------
# Timeline
# -----------------------------------------------------------------------------
def phase_window(context: CoupleContext, start_months_out: int, end_months_out: int) -> str:
    if context.wedding_date is not None:
        return DATED_WINDOW.format(
            start=format_month_year(subtract_months(context.wedding_date, start_months_out)),
            end=format_month_year(subtract_months(context.wedding_date, end_months_out)),
        )
    if end_months_out == 0:
        return FINAL_SEASONAL_WINDOW.format(
            start=start_months_out, season=context.wedding_season
        )
    return SEASONAL_WINDOW.format(
        start=start_months_out, end=end_months_out, season=context.wedding_season
    )


def build_task_timeline(context: CoupleContext) -> DynamicTaskTimeline:
    return DynamicTaskTimeline(phases=[
        TimelinePhase(
            phase=label,
            window=phase_window(context, start, end),
            tasks=list(tasks),
        )
        for label, start, end, tasks in TIMELINE_PHASES
    ])


# -----------------------------------------------------------------------------
# Risk radar
# -----------------------------------------------------------------------------
def _months_to_event(context: CoupleContext) -> int:
    # Without a fixed date, assume a full year of runway.
    if context.wedding_date is None:
        return 12
    return months_between(context.as_of, context.wedding_date)


def budget_spread(context: CoupleContext) -> float:
    return (context.budget_max - context.budget_min) / max(context.budget_max, 1)


def peak_season_risk(context: CoupleContext) -> Risk:
    months = _months_to_event(context)
    in_season = context.wedding_season in ("summer", "fall")
    if in_season:
        severity = "high" if months < 10 else "medium"
        reason = "High-demand months compress venue and vendor options early."
    else:
        severity = "medium" if months < 8 else "low"
        reason = "Vendor calendars still tighten quickly when date options are narrow."
    return Risk(RISK_PEAK_SEASON, severity, reason, RISK_MITIGATIONS[RISK_PEAK_SEASON])


def budget_creep_risk(context: CoupleContext, level: str) -> Risk:
    narrow = budget_spread(context) < NARROW_BUDGET_SPREAD
    if level == "high" or narrow:
        severity = "high"
    elif level == "medium":
        severity = "medium"
    else:
        severity = "low"
    if narrow:
        reason = "A narrow budget band leaves less room for late-stage upgrades."
    else:
        reason = "Priority-driven upgrades can compound if contingency is not protected."
    return Risk(RISK_BUDGET_CREEP, severity, reason, RISK_MITIGATIONS[RISK_BUDGET_CREEP])


def guest_logistics_risk(context: CoupleContext) -> Risk:
    guests = context.guest_count
    if guests > 150:
        severity = "high"
    elif guests > 90:
        severity = "medium"
    else:
        severity = "low"
    if guests > 120:
        reason = (
            "Larger guest movement and accommodation coordination adds execution complexity."
        )
    else:
        reason = (
            "Travel, timing, and communication details can still create friction for key guests."
        )
    return Risk(RISK_GUEST_LOGISTICS, severity, reason, RISK_MITIGATIONS[RISK_GUEST_LOGISTICS])


def build_risk_radar(context: CoupleContext, level: str) -> RiskRadar:
    risks = [
        peak_season_risk(context),
        budget_creep_risk(context, level),
        guest_logistics_risk(context),
    ]
    ranked = sorted(risks, key=lambda risk: SEVERITY_WEIGHTS[risk.severity], reverse=True)
    return RiskRadar(top_risks=ranked[:3])


def build_budget_planning_bundle(
    raw: Union[Mapping[str, Any], CoupleContext],
    snapshot: Optional[Snapshot] = None,
    today: Optional[date] = None,
) -> BudgetPlanningBundle:
    """Budget allocation, phased timeline and risk radar for one context.

    Args:
        raw: A raw context record or normalized CoupleContext.  Ignored when
            `snapshot` is supplied.
        snapshot: A pre-computed Snapshot to reuse.
        today: Reference date for normalizing `raw`.
    """
    snapshot = snapshot or build_wedding_snapshot(raw, today=today)
    context = snapshot.normalized_context
    return BudgetPlanningBundle(
        budget_architecture=build_budget_architecture(context),
        dynamic_task_timeline=build_task_timeline(context),
        risk_radar=build_risk_radar(context, snapshot.complexity_level),
    )
