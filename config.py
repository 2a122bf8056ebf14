# =============================================================================
# config.py  —  Runtime settings for the tool server and the agent host
# =============================================================================
#
# Values come from the environment, after .env at the project root is
# loaded.  The core/ package never reads configuration.
#
#   WEDDING_MCP_SERVER_NAME   MCP server identity  (wedding-planning-engine)
#   WEDDING_AGENT_MODEL       LiteLlm model string (openrouter/openai/gpt-4o)
#   WEDDING_LOG_LEVEL         tool-server log level (INFO)
# =============================================================================

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent

load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    server_name: str = os.getenv("WEDDING_MCP_SERVER_NAME", "wedding-planning-engine")
    agent_model: str = os.getenv("WEDDING_AGENT_MODEL", "openrouter/openai/gpt-4o")
    log_level: str = os.getenv("WEDDING_LOG_LEVEL", "INFO").upper()


DEFAULT_SETTINGS = Settings()
