# =============================================================================
# agent/kyc_agent.py  —  Google ADK Agent Configuration (with LiteLlm)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures the KYC analyst agent: a Google ADK agent whose only
#   capabilities are the gateway's MCP tools.
#
#   ┌──────────────────────────────┐
#   │  Google ADK Agent            │
#   │  prompt + LiteLlm model      │
#   └──────────────┬───────────────┘
#                  │ MCP over stdio
#                  ▼
#   ┌──────────────────────────────┐
#   │  tools/mcp_server.py         │      HTTP POST
#   │  (Tool Gateway subprocess)   │ ───────────────▶  KYC backend
#   └──────────────────────────────┘                   (API_BASE)
#
# MCP CONNECTION:
#   ADK starts the gateway as a subprocess and talks to it over stdin/stdout.
#   The MCP stdio client only passes a small default environment to the
#   child, so API_BASE is forwarded explicitly.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import KYC_ANALYST_PROMPT
from core.config import get_agent_model, get_api_base

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def gateway_server_parameters() -> StdioServerParameters:
    """Describe how to launch the Tool Gateway as a stdio subprocess.

    The gateway runs as `python -m tools.mcp_server` from the project root,
    under the same interpreter as this process so it shares the virtualenv.
    """
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env={"API_BASE": get_api_base()},
    )


def create_agent() -> Agent:
    """Create the KYC analyst agent.

    Returns:
        A configured Google ADK Agent with the gateway's tools attached.
    """
    mcp_tools = MCPToolset(connection_params=gateway_server_parameters())

    agent = Agent(
        name="kyc_analyst",
        model=LiteLlm(model=get_agent_model()),
        instruction=KYC_ANALYST_PROMPT,
        tools=[mcp_tools],
    )

    return agent
