# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools the planner agent can call.  Each tool is a thin
#   wrapper around core/: it normalizes the couple context, runs one
#   derivation step, and returns a JSON-ready dict.
#
# HOW IT WORKS (the flow):
#   1. The agent has gathered the couple's inputs in conversation
#   2. It calls a tool by name via MCP (e.g., "generate_venue_strategy")
#   3. FastMCP routes the call to the matching function below
#   4. The function validates the inputs, calls core/, and serializes
#   5. The agent receives the records plus a narration and a next step
#
# TOOLS (one per derivation step, all read-only and idempotent):
#   build_wedding_snapshot      → snapshot
#   generate_venue_strategy     → snapshot + venue_strategy_brief
#   build_budget_architecture   → snapshot + budget, timeline, risk radar
#   generate_design_direction   → snapshot + design_direction
#   create_planner_pitch        → everything + planner_pitch
#
# RESPONSE SHAPE:
#   {"narration": str, "next_step": str (not on the pitch), <records>}
#   A rejected context returns {"error": message, "field": path} instead.
#
# @mcp.tool() wraps each handler in a FastMCP tool object; the undecorated
# function stays reachable as `.fn` for direct calls.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the ADK agent over stdio (agent/wedding_agent.py)
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from typing import Any, Callable, Optional

from fastmcp import FastMCP
from mcp.types import ToolAnnotations

from config import DEFAULT_SETTINGS
from core.budget import build_budget_planning_bundle
from core.context import ValidationError, normalize_context
from core.design import build_design_direction
from core.models import CoupleContext
from core.pitch import build_planning_bundle
from core.snapshot import build_wedding_snapshot
from core.venues import build_venue_strategy_brief

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: stdout carries the MCP JSON stream.
#
# ANSI colours:
#   CYAN    incoming tool calls with parameters
#   YELLOW  intermediate status
#   GREEN   response JSON
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=getattr(logging, DEFAULT_SETTINGS.log_level, logging.INFO),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("wedding.mcp")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Serialization helpers
# =============================================================================
def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, date):
        return value.isoformat()
    return value


def _payload(record) -> dict:
    """Dataclass → plain dict with ISO dates and lists in place of tuples."""
    return _jsonable(asdict(record))


def _context_fields(
    location: str,
    wedding_date: Optional[str],
    wedding_season: Optional[str],
    guest_count: int,
    budget_min: float,
    budget_max: float,
    priorities: list[str],
    vibe_words: list[str],
    non_negotiable: str,
) -> dict:
    return {
        "location": location,
        "wedding_date": wedding_date,
        "wedding_season": wedding_season,
        "guest_count": guest_count,
        "budget_min": budget_min,
        "budget_max": budget_max,
        "priorities": priorities,
        "vibe_words": vibe_words,
        "non_negotiable": non_negotiable,
    }


def _run_tool(tool_name: str, fields: dict, respond: Callable[[CoupleContext], dict]) -> dict:
    """Validate the context, then hand it to `respond`.

    A ValidationError becomes the {"error", "field"} dict; nothing else is
    caught.
    """
    _log_request(tool_name, **fields)
    try:
        context = normalize_context(fields)
    except ValidationError as exc:
        _log_status(f"Rejected context: {exc}")
        return _log_response(tool_name, {"error": exc.message, "field": exc.field})
    return _log_response(tool_name, respond(context))


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# Every tool is read-only and idempotent: the same couple context always
# yields the same records.
mcp = FastMCP(DEFAULT_SETTINGS.server_name)


def _annotations(title: str) -> ToolAnnotations:
    return ToolAnnotations(
        title=title,
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )


# =============================================================================
# TOOL 1: build_wedding_snapshot
# =============================================================================
@mcp.tool(name="build_wedding_snapshot", annotations=_annotations("Build Wedding Snapshot"))
def build_wedding_snapshot_tool(
    location: str,
    guest_count: int,
    budget_min: float,
    budget_max: float,
    priorities: list[str],
    vibe_words: list[str],
    non_negotiable: str,
    wedding_date: Optional[str] = None,
    wedding_season: Optional[str] = None,
) -> dict:
    """Create the wedding snapshot: budget tier, complexity, priorities, starting pillar.

    WHEN TO CALL THIS: FIRST, as soon as you know the couple's location,
    date or season, guest count, budget range, top three priorities, vibe
    words and one non-negotiable.

    Args:
        location: Primary wedding location (e.g., "Lisbon").
        guest_count: Estimated guests, 10–400.
        budget_min: Lower bound of the budget in USD (1000 to 1,000,000,000).
        budget_max: Upper bound of the budget in USD (≥ budget_min).
        priorities: Exactly three distinct values from
            food, party, elegance, intimacy, photos.
        vibe_words: 1–5 descriptive words (e.g., ["modern", "romantic"]).
        non_negotiable: One must-have requirement.
        wedding_date: Wedding date as YYYY-MM-DD, if known.
        wedding_season: spring, summer, fall or winter, if no date yet.

    Returns:
        A dict with:
          - narration: One-line summary to relay to the couple
          - snapshot: budget_tier_label, complexity_score, complexity_level,
            strategic_priorities, recommended_starting_pillar,
            planner_insight, normalized_context
          - next_step: What to call next
        Or {"error", "field"} when the inputs are invalid.
    """
    fields = _context_fields(location, wedding_date, wedding_season, guest_count,
                             budget_min, budget_max, priorities, vibe_words, non_negotiable)

    def respond(context: CoupleContext) -> dict:
        snapshot = build_wedding_snapshot(context)
        _log_status(f"Complexity {snapshot.complexity_score} ({snapshot.complexity_level}), "
                    f"{snapshot.recommended_starting_pillar}")
        return {
            "narration": (
                "Wedding Snapshot created with budget tier, complexity score, "
                "strategic priorities, and a recommended starting pillar."
            ),
            "snapshot": _payload(snapshot),
            "next_step": (
                "Proceed to venue strategy to choose venue types and booking timeline "
                "based on this snapshot."
            ),
        }

    return _run_tool("build_wedding_snapshot", fields, respond)


# =============================================================================
# TOOL 2: generate_venue_strategy
# =============================================================================
@mcp.tool(name="generate_venue_strategy", annotations=_annotations("Generate Venue Strategy"))
def generate_venue_strategy_tool(
    location: str,
    guest_count: int,
    budget_min: float,
    budget_max: float,
    priorities: list[str],
    vibe_words: list[str],
    non_negotiable: str,
    wedding_date: Optional[str] = None,
    wedding_season: Optional[str] = None,
) -> dict:
    """Rank the three best venue types and give booking/deposit guidance.

    WHEN TO CALL THIS: After the snapshot.  Takes the same couple-context
    arguments as build_wedding_snapshot.

    Returns:
        A dict with narration, snapshot, next_step and venue_strategy_brief:
          - recommendations: 3 venue types, best fit first, each with
            fit_score (55–98), why_it_matches, budget_impact_tier,
            budget_share_range_pct
          - decision_checklist: 5 items to check on every tour
          - venue_timeline: booking window, deposit range, tips, urgency
          - key_insight: How much of the budget the venue will steer
    """
    fields = _context_fields(location, wedding_date, wedding_season, guest_count,
                             budget_min, budget_max, priorities, vibe_words, non_negotiable)

    def respond(context: CoupleContext) -> dict:
        snapshot = build_wedding_snapshot(context)
        brief = build_venue_strategy_brief(context, snapshot=snapshot)
        _log_status("Top venues: " + ", ".join(
            f"{rec.venue_type} ({rec.fit_score})" for rec in brief.recommendations))
        return {
            "narration": (
                "Venue Strategy Brief generated with matched venue types, critical "
                "checklist, and booking/deposit guidance."
            ),
            "snapshot": _payload(snapshot),
            "venue_strategy_brief": _payload(brief),
            "next_step": (
                "Proceed to budget architecture to map spending allocations, timeline "
                "phases, and risk controls."
            ),
        }

    return _run_tool("generate_venue_strategy", fields, respond)


# =============================================================================
# TOOL 3: build_budget_architecture
# =============================================================================
@mcp.tool(name="build_budget_architecture", annotations=_annotations("Build Budget & Timeline"))
def build_budget_architecture_tool(
    location: str,
    guest_count: int,
    budget_min: float,
    budget_max: float,
    priorities: list[str],
    vibe_words: list[str],
    non_negotiable: str,
    wedding_date: Optional[str] = None,
    wedding_season: Optional[str] = None,
) -> dict:
    """Allocate the budget, lay out the planning phases, and rank the top risks.

    WHEN TO CALL THIS: After the venue strategy.  Takes the same
    couple-context arguments as build_wedding_snapshot.

    Returns:
        A dict with narration, snapshot, next_step and:
          - budget_architecture: 8 allocations (7 categories + a 10% Buffer)
            with percent and amount_usd, plus trade_off_insights
          - dynamic_task_timeline: 4 phases with date windows and tasks
          - risk_radar: 3 risks, most severe first
    """
    fields = _context_fields(location, wedding_date, wedding_season, guest_count,
                             budget_min, budget_max, priorities, vibe_words, non_negotiable)

    def respond(context: CoupleContext) -> dict:
        snapshot = build_wedding_snapshot(context)
        bundle = build_budget_planning_bundle(context, snapshot=snapshot)
        _log_status("Risks: " + ", ".join(
            f"{risk.risk}={risk.severity}" for risk in bundle.risk_radar.top_risks))
        return {
            "narration": (
                "Budget Architecture generated with category allocations, dynamic "
                "timeline phases, and a 3-point risk radar."
            ),
            "snapshot": _payload(snapshot),
            **_payload(bundle),
            "next_step": (
                "Proceed to design direction to translate your vibe words into palette, "
                "textures, and styling guidance."
            ),
        }

    return _run_tool("build_budget_architecture", fields, respond)


# =============================================================================
# TOOL 4: generate_design_direction
# =============================================================================
@mcp.tool(name="generate_design_direction", annotations=_annotations("Generate Design Direction"))
def generate_design_direction_tool(
    location: str,
    guest_count: int,
    budget_min: float,
    budget_max: float,
    priorities: list[str],
    vibe_words: list[str],
    non_negotiable: str,
    wedding_date: Optional[str] = None,
    wedding_season: Optional[str] = None,
) -> dict:
    """Translate vibe words into palette, textures, lighting, florals and dress code.

    WHEN TO CALL THIS: After the budget architecture.  Takes the same
    couple-context arguments as build_wedding_snapshot.

    Returns:
        A dict with narration, snapshot, next_step and design_direction
        (color_palette, textures, lighting_style, floral_direction,
        dress_code_suggestion, narrative_line).
    """
    fields = _context_fields(location, wedding_date, wedding_season, guest_count,
                             budget_min, budget_max, priorities, vibe_words, non_negotiable)

    def respond(context: CoupleContext) -> dict:
        snapshot = build_wedding_snapshot(context)
        design = build_design_direction(context)
        _log_status(f"Palette: {design.color_palette}")
        return {
            "narration": (
                "Design direction generated with a tangible aesthetic concept tied to "
                "your priorities and vibe words."
            ),
            "snapshot": _payload(snapshot),
            "design_direction": _payload(design),
            "next_step": (
                "Proceed to the planner pitch to synthesize strategy, budget architecture, "
                "and design into one proposal."
            ),
        }

    return _run_tool("generate_design_direction", fields, respond)


# =============================================================================
# TOOL 5: create_planner_pitch
# =============================================================================
@mcp.tool(name="create_planner_pitch", annotations=_annotations("Create Planner Pitch"))
def create_planner_pitch_tool(
    location: str,
    guest_count: int,
    budget_min: float,
    budget_max: float,
    priorities: list[str],
    vibe_words: list[str],
    non_negotiable: str,
    wedding_date: Optional[str] = None,
    wedding_season: Optional[str] = None,
) -> dict:
    """Write the complete planner proposal tying venue, budget and design together.

    WHEN TO CALL THIS: LAST.  It runs every step internally, so you only
    pass the same couple-context arguments as build_wedding_snapshot.

    Returns:
        A dict with:
          - narration: The pitch as markdown (present this to the couple)
          - snapshot, venue_strategy_brief, budget_planning,
            design_direction: Every supporting record
          - planner_pitch: The six sections plus markdown
    """
    fields = _context_fields(location, wedding_date, wedding_season, guest_count,
                             budget_min, budget_max, priorities, vibe_words, non_negotiable)

    def respond(context: CoupleContext) -> dict:
        bundle = build_planning_bundle(context)
        _log_status(f"Pitch ready; lead venue: "
                    f"{bundle.venue_strategy_brief.recommendations[0].venue_type}")
        return {
            "narration": bundle.planner_pitch.markdown,
            **_payload(bundle),
        }

    return _run_tool("create_planner_pitch", fields, respond)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
