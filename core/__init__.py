# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-free pieces of the KYC tool bridge:
#   models.py   ToolRoute dataclass
#   routes.py   the fixed tool -> backend path table
#   config.py   API_BASE and agent model settings
#   backend.py  the HTTP client that POSTs to the backend
#
# Nothing in this package imports FastMCP or Google ADK.
# =============================================================================
