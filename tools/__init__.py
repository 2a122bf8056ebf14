# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers for the planning engine.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the agent host and core/.
#   Each tool here:
#     1. Collects the couple-context arguments
#     2. Normalizes them through core.context (the single validation gate)
#     3. Calls one core/ derivation step
#     4. Serializes dataclasses to plain dicts and adds narration/next-step
#        hints for the host to display
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain planning logic (that's in core/)
#   - They do NOT know about Google ADK (they're framework-agnostic)
#
# TOOL CONTRACT QUALITY:
#   Each tool has a descriptive name, a docstring the LLM reads to decide
#   WHEN to call it, typed parameters, and a documented return shape.
# =============================================================================
