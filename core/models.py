# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the planning engine)
# =============================================================================
#
# These dataclasses define the *shape* of every record that flows through
# the engine.  They carry no behavior beyond one derived property; the
# derivation logic lives in the sibling modules.
#
# RECORD FLOW:
#   CoupleContext ──▶ Snapshot ──▶ VenueStrategyBrief
#                             ├──▶ BudgetPlanningBundle
#                             └──▶ PlannerPitch
#   CoupleContext ──▶ DesignDirection
#
# IMMUTABILITY:
#   CoupleContext and Snapshot are frozen and hold tuples.  Every downstream
#   component re-derives from them; none of them is ever edited in place.
#   The result records are built fresh per call and handed to the caller.
# =============================================================================

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional

Season = Literal["spring", "summer", "fall", "winter"]
Priority = Literal["food", "party", "elegance", "intimacy", "photos"]
ComplexityLevel = Literal["low", "medium", "high"]
Severity = Literal["low", "medium", "high"]
StartingPillar = Literal["venue-first", "theme-first"]
BudgetImpactTier = Literal["$", "$$", "$$$"]
Urgency = Literal["normal", "accelerated"]


# -----------------------------------------------------------------------------
# CoupleContext — the normalized planning inputs
# -----------------------------------------------------------------------------
# Only core/context.py constructs this.  Every other module trusts it.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CoupleContext:
    """A couple's validated planning inputs.

    wedding_season is always resolved: either the season the couple gave,
    or the season inferred from wedding_date.  as_of is the "today" that
    every months-to-event calculation is measured from.
    """

    location: str
    wedding_date: Optional[date]
    wedding_season: Season
    guest_count: int
    budget_min: float
    budget_max: float
    priorities: tuple[Priority, ...]
    vibe_words: tuple[str, ...]
    non_negotiable: str
    as_of: date

    @property
    def midpoint_budget(self) -> float:
        """(budget_min + budget_max) / 2, the one budget figure used downstream."""
        return (self.budget_min + self.budget_max) / 2


# -----------------------------------------------------------------------------
# Snapshot — complexity and budget summary (Snapshot Builder output)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Snapshot:
    """Budget tier, complexity and recommended starting pillar."""

    budget_tier_label: str             # "Smart Luxury $40k - 120 guests"
    complexity_score: int              # 0–100
    complexity_level: ComplexityLevel  # step function of complexity_score
    strategic_priorities: tuple[str, ...]
    recommended_starting_pillar: StartingPillar
    planner_insight: str
    normalized_context: CoupleContext


# -----------------------------------------------------------------------------
# Venue strategy (Venue Strategist output)
# -----------------------------------------------------------------------------
@dataclass
class VenueRecommendation:
    """One ranked venue archetype."""

    venue_type: str                    # "Boutique hotel"
    fit_score: int                     # 55–98
    budget_impact_tier: BudgetImpactTier
    budget_share_range_pct: tuple[int, int]
    why_it_matches: list[str] = field(default_factory=list)  # ≤3 reasons


@dataclass
class VenueTimeline:
    booking_window_months_before: tuple[int, int]
    deposit_expectation_pct: tuple[int, int]
    urgency: Urgency
    negotiation_tips: list[str] = field(default_factory=list)


@dataclass
class VenueStrategyBrief:
    """Top three venue archetypes plus booking guidance."""

    recommendations: list[VenueRecommendation]
    decision_checklist: list[str]
    venue_timeline: VenueTimeline
    key_insight: str


# -----------------------------------------------------------------------------
# Budget planning (Budget Architect output)
# -----------------------------------------------------------------------------
@dataclass
class BudgetAllocation:
    category: str                      # "Catering", ..., "Buffer"
    percent: float                     # one decimal place
    amount_usd: int


@dataclass
class BudgetArchitecture:
    """Eight allocations whose percents always total exactly 100."""

    allocations: list[BudgetAllocation]
    trade_off_insights: list[str] = field(default_factory=list)
    buffer_percent: int = 10


@dataclass
class TimelinePhase:
    phase: str                         # "12-9 months"
    window: str                        # "Jul 2026 - Oct 2026"
    tasks: list[str] = field(default_factory=list)


@dataclass
class DynamicTaskTimeline:
    phases: list[TimelinePhase] = field(default_factory=list)


@dataclass
class Risk:
    risk: str
    severity: Severity
    reason: str
    mitigation: str


@dataclass
class RiskRadar:
    top_risks: list[Risk] = field(default_factory=list)


@dataclass
class BudgetPlanningBundle:
    budget_architecture: BudgetArchitecture
    dynamic_task_timeline: DynamicTaskTimeline
    risk_radar: RiskRadar


# -----------------------------------------------------------------------------
# DesignDirection — the aesthetic bundle (Design Synthesizer output)
# -----------------------------------------------------------------------------
@dataclass
class DesignDirection:
    """Palette, textures and styling phrases derived from vibe words."""

    color_palette: list[str]           # ≤4, deduplicated
    textures: list[str]                # ≤4, deduplicated
    lighting_style: str
    floral_direction: str
    dress_code_suggestion: str
    narrative_line: str


# -----------------------------------------------------------------------------
# PlannerPitch — the final narrative (Pitch Composer output)
# -----------------------------------------------------------------------------
@dataclass
class PlannerPitch:
    """Six narrative sections plus their markdown rendering."""

    opening_vision: str
    why_venue_first: str
    budget_architecture_summary: str
    design_direction_summary: str
    planning_roadmap: list[str]        # exactly 3 steps
    confidence_close: str
    markdown: str


@dataclass
class PlanningBundle:
    """Every record the engine produces for one couple context."""

    snapshot: Snapshot
    venue_strategy_brief: VenueStrategyBrief
    budget_planning: BudgetPlanningBundle
    design_direction: DesignDirection
    planner_pitch: PlannerPitch
