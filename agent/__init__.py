# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration: the
# conversational host that gathers a couple's inputs and calls the planning
# engine's MCP tools.
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the planning logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#
# WHAT THE AGENT IS:
#   - A coordinator that decides WHICH tool to call next
#   - A communicator that presents the engine's records to the couple
# =============================================================================
