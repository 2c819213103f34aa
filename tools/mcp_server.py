# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Gateway (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the KYC backend's HTTP endpoints as MCP tools.  Each tool is a
#   thin wrapper: it POSTs its argument object, unchanged, as JSON to one
#   fixed backend path and returns the response body as a single text
#   content item.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (e.g. the analyst agent in agent/) calls a tool by name
#   2. FastMCP routes the call to the BackendTool registered under that name
#   3. BackendTool checks the required arguments and posts via core/backend.py
#   4. The raw response text goes back to the client, whatever the HTTP status
#
# ONE TOOL PER ROUTE:
#   Every tool is built from its ToolRoute in core/routes.py.  The route
#   supplies the name, the description, the published input schema
#   (including the url-or-path rule on `ingest`) and the backend path.
#
# ERRORS:
#   Missing required arguments raise ToolError before any HTTP call.
#   Backend connection errors are not caught here: FastMCP reports them as an
#   error result for that one call and keeps serving.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server   (or the kyc-tool-bridge script)
#   b) Spawned by the analyst agent over stdio (agent/kyc_agent.py)
# =============================================================================

import logging
import sys
from typing import Any

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from core.backend import BackendClient
from core.config import get_api_base
from core.models import ToolRoute
from core.routes import ROUTES

SERVER_NAME = "kyc-multiagent"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP stream, so every log line goes to STDERR.
#   - CYAN for incoming requests (tool name + arguments)
#   - YELLOW for the outbound POST
#   - GREEN for the response summary
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def _log_request(tool_name: str, arguments: dict) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the size of the response in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{_RESET}")
    return text


# =============================================================================
# BackendTool — one MCP tool forwarding to one backend path
# =============================================================================
# `run` receives the client's argument object as-is, so keys the client sent
# with a null value reach the backend, and keys it left out do not.
# =============================================================================
class BackendTool(Tool):
    """An MCP tool whose whole behavior is a POST to its route's path."""

    _route: ToolRoute = PrivateAttr()
    _backend: BackendClient = PrivateAttr()

    @classmethod
    def from_route(cls, route: ToolRoute, backend: BackendClient) -> "BackendTool":
        tool = cls(
            name=route.name,
            description=route.description,
            parameters=route.input_schema,
        )
        tool._route = route
        tool._backend = backend
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        route = self._route
        _log_request(route.name, arguments)

        missing = route.missing_arguments(arguments)
        if missing:
            raise ToolError(f"{route.name} is missing required arguments: {', '.join(missing)}")

        _log_status(f"POST {self._backend.url_for(route.path)}")
        text = await self._backend.post(route.path, arguments)
        return ToolResult(content=[TextContent(type="text", text=_log_response(route.name, text))])


# =============================================================================
# Server factory
# =============================================================================
# The backend client is injected so tests can hand in one with a mock
# transport.  The module-level `mcp` below is the production instance.
# =============================================================================
def build_server(backend: BackendClient) -> FastMCP:
    """Create the gateway and register one tool per route."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for route in ROUTES.values():
        mcp.add_tool(BackendTool.from_route(route, backend))
    return mcp


# =============================================================================
# Production instance
# =============================================================================
# API_BASE is read here, once, when the module is imported.
# =============================================================================
load_dotenv()

backend = BackendClient(get_api_base())
mcp = build_server(backend)


def main() -> None:
    """Serve the gateway over stdio until stdin closes."""
    logger.info(f"{SERVER_NAME} {SERVER_VERSION} forwarding to {backend.base_url}")
    mcp.run()


if __name__ == "__main__":
    main()
