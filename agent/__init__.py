# =============================================================================
# agent/__init__.py
# =============================================================================
# The KYC analyst agent (Google ADK).  It reaches the backend only through
# the gateway's MCP tools, which it launches as a stdio subprocess.
# =============================================================================
