"""Tests for the MCP tool handlers, called directly through `.fn`."""

import json

import pytest

from tools.mcp_server import (
    build_budget_architecture_tool,
    build_wedding_snapshot_tool,
    create_planner_pitch_tool,
    generate_design_direction_tool,
    generate_venue_strategy_tool,
)

ARGS = {
    "location": "Lisbon",
    "wedding_date": "2030-07-10",
    "guest_count": 120,
    "budget_min": 35000,
    "budget_max": 45000,
    "priorities": ["food", "elegance", "photos"],
    "vibe_words": ["modern", "romantic", "minimalist"],
    "non_negotiable": "Excellent food experience",
}

ALL_TOOLS = [
    build_wedding_snapshot_tool,
    generate_venue_strategy_tool,
    build_budget_architecture_tool,
    generate_design_direction_tool,
    create_planner_pitch_tool,
]


def test_snapshot_tool_response():
    result = build_wedding_snapshot_tool.fn(**ARGS)

    assert result["narration"].startswith("Wedding Snapshot created")
    assert result["next_step"].startswith("Proceed to venue strategy")
    snapshot = result["snapshot"]
    assert snapshot["budget_tier_label"] == "Smart Luxury $40k - 120 guests"
    assert snapshot["normalized_context"]["wedding_date"] == "2030-07-10"
    assert snapshot["normalized_context"]["wedding_season"] == "summer"
    assert snapshot["normalized_context"]["priorities"] == ["food", "elegance", "photos"]


def test_venue_tool_response():
    result = generate_venue_strategy_tool.fn(**ARGS)
    brief = result["venue_strategy_brief"]

    assert len(brief["recommendations"]) == 3
    assert brief["recommendations"][0]["budget_share_range_pct"] == [42, 55]
    assert len(brief["decision_checklist"]) == 5
    assert result["next_step"].startswith("Proceed to budget architecture")


def test_budget_tool_response():
    result = build_budget_architecture_tool.fn(**ARGS)

    assert set(result) >= {"budget_architecture", "dynamic_task_timeline", "risk_radar", "snapshot"}
    allocations = result["budget_architecture"]["allocations"]
    assert len(allocations) == 8
    assert sum(round(item["percent"] * 10) for item in allocations) == 1000
    assert len(result["dynamic_task_timeline"]["phases"]) == 4
    assert len(result["risk_radar"]["top_risks"]) == 3


def test_design_tool_response():
    result = generate_design_direction_tool.fn(**ARGS)
    assert result["design_direction"]["dress_code_suggestion"] == "Modern cocktail attire"
    assert result["next_step"].startswith("Proceed to the planner pitch")


def test_pitch_tool_narrates_markdown():
    result = create_planner_pitch_tool.fn(**ARGS)

    assert "next_step" not in result
    assert result["narration"] == result["planner_pitch"]["markdown"]
    assert result["narration"].startswith("## Opening Vision")
    assert set(result) >= {
        "snapshot", "venue_strategy_brief", "budget_planning", "design_direction", "planner_pitch",
    }


@pytest.mark.parametrize("tool", ALL_TOOLS)
def test_responses_are_json_serializable(tool):
    json.dumps(tool.fn(**ARGS))


@pytest.mark.parametrize("tool", ALL_TOOLS)
def test_invalid_budget_returns_error_dict(tool):
    result = tool.fn(**{**ARGS, "budget_min": 50000, "budget_max": 40000})
    assert result == {
        "error": "budget_max must be greater than or equal to budget_min.",
        "field": "budget_max",
    }


def test_infinite_budget_returns_error_dict():
    result = build_wedding_snapshot_tool.fn(**{**ARGS, "budget_max": float("inf")})
    assert result["field"] == "budget_max"


def test_missing_date_and_season_returns_error_dict():
    args = {**ARGS, "wedding_date": None}
    assert build_wedding_snapshot_tool.fn(**args)["field"] == "wedding_date"


def test_season_only_request():
    args = {**ARGS, "wedding_date": None, "wedding_season": "fall"}
    result = build_budget_architecture_tool.fn(**args)
    windows = [phase["window"] for phase in result["dynamic_task_timeline"]["phases"]]
    assert windows[-1] == "3 months out to wedding (fall)"


def test_tools_are_registered_read_only():
    assert [tool.name for tool in ALL_TOOLS] == [
        "build_wedding_snapshot",
        "generate_venue_strategy",
        "build_budget_architecture",
        "generate_design_direction",
        "create_planner_pitch",
    ]
    for tool in ALL_TOOLS:
        assert tool.annotations.readOnlyHint is True
        assert tool.annotations.idempotentHint is True
