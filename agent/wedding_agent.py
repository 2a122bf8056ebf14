# =============================================================================
# agent/wedding_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the conversational host: a Google ADK agent that talks to the
#   couple, and reaches the planning engine only through the MCP tools in
#   tools/mcp_server.py.
#
#   ┌──────────────────────────────┐      stdio       ┌────────────────────┐
#   │  Google ADK Agent            │ ───────────────▶ │  FastMCP server    │
#   │  prompt  +  LiteLlm model    │ ◀─────────────── │  (tools/)          │
#   └──────────────────────────────┘   tool results   └─────────┬──────────┘
#                                                               │
#                                                               ▼
#                                                     ┌────────────────────┐
#                                                     │  core/ (pure)      │
#                                                     └────────────────────┘
#
# MODEL:
#   LiteLlm routes the model string from config (WEDDING_AGENT_MODEL,
#   default "openrouter/openai/gpt-4o").  LiteLlm reads the provider key
#   (e.g. OPENROUTER_API_KEY) from the environment.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess with `uv run python -m
#   tools.mcp_server` from the project root, so the subprocess shares the
#   project's virtual environment.
# =============================================================================

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_planner_prompt
from config import DEFAULT_SETTINGS, PROJECT_ROOT, Settings


def create_agent(settings: Settings = DEFAULT_SETTINGS) -> Agent:
    """Create the wedding planner agent wired to the engine's MCP tools.

    Args:
        settings: Model and server settings; defaults to the environment.

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=str(PROJECT_ROOT),
        ),
    )

    return Agent(
        name="wedding_planner",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_planner_prompt(),
        tools=[mcp_tools],
    )
