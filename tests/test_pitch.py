"""Tests for the pitch composer and the full planning bundle."""

from core.pitch import SECTION_HEADERS, build_planner_pitch, build_planning_bundle
from tests.conftest import AS_OF, lisbon_fields


def test_lisbon_pitch_sections(base_context):
    pitch = build_planner_pitch(base_context)

    assert pitch.opening_vision.startswith(
        "Based on your plan for Lisbon, with 120 guests and a modern, romantic, minimalist direction"
    )
    assert "influence 45% of total spend" in pitch.why_venue_first
    assert pitch.budget_architecture_summary.startswith(
        "Your budget architecture prioritizes Catering (28.7%), Venue (18.8%), Photography (14.8%)"
    )
    assert "Dress code recommendation: Modern cocktail attire." in pitch.design_direction_summary
    assert pitch.planning_roadmap == [
        "Shortlist and tour 5 boutique hotel options within 3 weeks.",
        "Lock photographer within 4 weeks of venue booking.",
        "Finalize aesthetic moodboard before catering tastings.",
    ]
    assert pitch.confidence_close.startswith("The key to reducing stress")


def test_markdown_headers_in_fixed_order(base_context):
    markdown = build_planner_pitch(base_context).markdown

    positions = [markdown.index(header) for header in SECTION_HEADERS]
    assert positions == sorted(positions)
    assert markdown.startswith("## Opening Vision\n")


def test_markdown_roadmap_is_numbered(base_context):
    pitch = build_planner_pitch(base_context)
    roadmap = pitch.markdown.split("## Planning Roadmap\n", 1)[1].split("\n\n", 1)[0]

    assert roadmap.splitlines() == [
        f"{number}. {step}" for number, step in enumerate(pitch.planning_roadmap, start=1)
    ]


def test_bundle_shares_one_snapshot(base_context):
    bundle = build_planning_bundle(base_context)

    assert bundle.snapshot.normalized_context is base_context
    assert bundle.venue_strategy_brief.recommendations[0].venue_type == "Boutique hotel"
    assert bundle.budget_planning.budget_architecture.allocations[-1].category == "Buffer"
    assert bundle.design_direction.color_palette[0] == "warm white"


def test_same_inputs_give_identical_output():
    first = build_planning_bundle(lisbon_fields(), today=AS_OF)
    second = build_planning_bundle(lisbon_fields(), today=AS_OF)

    assert first == second
    assert first.planner_pitch.markdown == second.planner_pitch.markdown
