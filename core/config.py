# =============================================================================
# core/config.py  —  Process configuration
# =============================================================================
#
# Two settings, both read from the environment:
#   API_BASE         Backend origin for every outbound POST.
#                    Default: http://localhost:8080
#   KYC_AGENT_MODEL  LiteLlm model string used by the analyst agent.
#                    Default: openrouter/openai/gpt-4o
#
# Entry points call load_dotenv() before reading these, so a .env file in
# the working directory works too.  The gateway reads API_BASE exactly once,
# when the server is built; nothing here is re-read per call.
# =============================================================================

import os

DEFAULT_API_BASE = "http://localhost:8080"
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


def get_api_base() -> str:
    """Return the backend origin.  An unset or empty API_BASE gives the default."""
    return os.environ.get("API_BASE") or DEFAULT_API_BASE


def get_agent_model() -> str:
    return os.environ.get("KYC_AGENT_MODEL") or DEFAULT_AGENT_MODEL
