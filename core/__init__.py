# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the wedding planning engine.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  Every module here is a pure function over static tables plus
#   one pydantic model for input bounds; it runs in a bare REPL with no
#   network access.
#
# MODULES, LEAVES FIRST:
#   reference_data  static tables (venues, vibes, weights, risks)
#   dates, numeric  calendar math, half-up rounding, currency formatting
#   models          the dataclass records
#   context         Input Normalizer (the only validation gate)
#   snapshot        Snapshot Builder
#   venues          Venue Strategist
#   budget          Budget Architect (allocation, timeline, risk radar)
#   design          Design Synthesizer
#   pitch           Pitch Composer
# =============================================================================
