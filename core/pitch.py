# =============================================================================
# core/pitch.py  —  Pitch Composer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Runs the four derivation steps against one normalized context and
#   stitches their outputs into the planner pitch: six narrative sections
#   plus a markdown rendering with fixed headers.
#
#   Every sentence is a template filled from computed facts (the top-ranked
#   venue, the largest budget categories, the design narrative), so the prose
#   cannot drift from the structured records it summarizes.
#
# MARKDOWN LAYOUT (fixed order):
#   ## Opening Vision
#   ## Why We Start with the Venue
#   ## Your Budget Architecture
#   ## Design Direction
#   ## Planning Roadmap          (numbered list, exactly 3 items)
#   ## Close with Confidence
# =============================================================================

from datetime import date
from typing import Any, Mapping, Optional, Union

from core.budget import build_budget_planning_bundle
from core.design import build_design_direction
from core.models import (
    BudgetArchitecture,
    CoupleContext,
    PlannerPitch,
    PlanningBundle,
    Snapshot,
)
from core.reference_data import BUFFER_CATEGORY
from core.snapshot import build_wedding_snapshot, venue_spend_influence_pct
from core.venues import build_venue_strategy_brief

SECTION_HEADERS = (
    "## Opening Vision",
    "## Why We Start with the Venue",
    "## Your Budget Architecture",
    "## Design Direction",
    "## Planning Roadmap",
    "## Close with Confidence",
)

OPENING_VISION = (
    "Based on your plan for {location}, with {guest_count} guests and a {vibes} direction, "
    "I recommend anchoring decisions around a venue that naturally supports your guest "
    "experience and design goals."
)
WHY_VENUE_FIRST = (
    "Starting with the venue sets scale, confirms the date, and frames layout and lighting "
    "constraints. For your profile, this decision is expected to influence {influence_pct}% "
    "of total spend and determines how flexible downstream design choices remain."
)
BUDGET_SUMMARY = (
    "Your budget architecture prioritizes {top_allocations}, while preserving a protected "
    "10% buffer to control risk and avoid late-stage churn."
)
DESIGN_SUMMARY = (
    "{narrative} Floral direction: {floral}. Dress code recommendation: {dress_code}."
)
ROADMAP = (
    "Shortlist and tour 5 {venue_type} options within 3 weeks.",
    "Lock photographer within 4 weeks of venue booking.",
    "Finalize aesthetic moodboard before catering tastings.",
)
CONFIDENCE_CLOSE = (
    "The key to reducing stress is sequencing decisions correctly. We anchor the structure "
    "first (venue), align budget second, and let design flourish within that framework."
)


def top_allocations(architecture: BudgetArchitecture, count: int = 3) -> str:
    """Largest spend categories first, e.g. 'Catering (28.7%), Venue (18.8%)'."""
    spend = [item for item in architecture.allocations if item.category != BUFFER_CATEGORY]
    ranked = sorted(spend, key=lambda item: item.percent, reverse=True)[:count]
    return ", ".join(f"{item.category} ({item.percent:g}%)" for item in ranked)


def render_markdown(opening, why_venue, budget, design, roadmap, close) -> str:
    lines = [
        SECTION_HEADERS[0], opening, "",
        SECTION_HEADERS[1], why_venue, "",
        SECTION_HEADERS[2], budget, "",
        SECTION_HEADERS[3], design, "",
        SECTION_HEADERS[4],
        *(f"{number}. {step}" for number, step in enumerate(roadmap, start=1)),
        "",
        SECTION_HEADERS[5], close,
    ]
    return "\n".join(lines)


def _compose(snapshot: Snapshot, venue_brief, budget_planning, design) -> PlannerPitch:
    context = snapshot.normalized_context
    top_venue = venue_brief.recommendations[0].venue_type if venue_brief.recommendations else "venue"

    opening_vision = OPENING_VISION.format(
        location=context.location,
        guest_count=context.guest_count,
        vibes=", ".join(context.vibe_words[:3]),
    )
    why_venue_first = WHY_VENUE_FIRST.format(
        influence_pct=venue_spend_influence_pct(context.guest_count),
    )
    budget_summary = BUDGET_SUMMARY.format(
        top_allocations=top_allocations(budget_planning.budget_architecture),
    )
    design_summary = DESIGN_SUMMARY.format(
        narrative=design.narrative_line,
        floral=design.floral_direction,
        dress_code=design.dress_code_suggestion,
    )
    roadmap = [
        ROADMAP[0].format(venue_type=top_venue.lower()),
        ROADMAP[1],
        ROADMAP[2],
    ]

    return PlannerPitch(
        opening_vision=opening_vision,
        why_venue_first=why_venue_first,
        budget_architecture_summary=budget_summary,
        design_direction_summary=design_summary,
        planning_roadmap=roadmap,
        confidence_close=CONFIDENCE_CLOSE,
        markdown=render_markdown(
            opening_vision, why_venue_first, budget_summary, design_summary,
            roadmap, CONFIDENCE_CLOSE,
        ),
    )


def build_planning_bundle(
    raw: Union[Mapping[str, Any], CoupleContext],
    snapshot: Optional[Snapshot] = None,
    today: Optional[date] = None,
) -> PlanningBundle:
    """Run every derivation step once and return all of the records.

    The snapshot is computed a single time and shared by the venue, budget
    and pitch steps.
    """
    snapshot = snapshot or build_wedding_snapshot(raw, today=today)
    context = snapshot.normalized_context

    venue_brief = build_venue_strategy_brief(context, snapshot=snapshot)
    budget_planning = build_budget_planning_bundle(context, snapshot=snapshot)
    design = build_design_direction(context)

    return PlanningBundle(
        snapshot=snapshot,
        venue_strategy_brief=venue_brief,
        budget_planning=budget_planning,
        design_direction=design,
        planner_pitch=_compose(snapshot, venue_brief, budget_planning, design),
    )


def build_planner_pitch(
    raw: Union[Mapping[str, Any], CoupleContext],
    snapshot: Optional[Snapshot] = None,
    today: Optional[date] = None,
) -> PlannerPitch:
    """Compose the planner pitch for a couple context."""
    return build_planning_bundle(raw, snapshot=snapshot, today=today).planner_pitch
