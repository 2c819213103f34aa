# =============================================================================
# tools/__init__.py
# =============================================================================
# The FastMCP Tool Gateway.  mcp_server.py registers one tool per entry in
# core/routes.py; each tool forwards its arguments to the backend and returns
# the response text unchanged.
# =============================================================================
