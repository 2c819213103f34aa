# =============================================================================
# core/routes.py  —  Static tool -> backend path table
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares the six tools the bridge exposes and the backend endpoint each
#   one forwards to.  The table is fixed for the life of the process.
#
#   ┌──────────────────┬──────────────────────┐
#   │ tool             │ backend path         │
#   ├──────────────────┼──────────────────────┤
#   │ ingest           │ /api/ingest          │
#   │ agent_extract    │ /api/agents/extract  │
#   │ agent_screen     │ /api/agents/screen   │
#   │ agent_fraud      │ /api/agents/fraud    │
#   │ agent_risk       │ /api/agents/risk     │
#   │ kyc_orchestrate  │ /api/kyc/start       │
#   └──────────────────┴──────────────────────┘
# =============================================================================

from core.models import ToolRoute


INGEST = ToolRoute(
    name="ingest",
    description="Ingest PDF into vector store",
    path="/api/ingest",
    one_of=("url", "path"),
    optional=("collection",),
)

AGENT_EXTRACT = ToolRoute(
    name="agent_extract",
    description="Extractor agent",
    path="/api/agents/extract",
    required=("documentText",),
)

AGENT_SCREEN = ToolRoute(
    name="agent_screen",
    description="Screening agent",
    path="/api/agents/screen",
    required=("name",),
    optional=("birthDate",),
)

AGENT_FRAUD = ToolRoute(
    name="agent_fraud",
    description="Fraud triage agent",
    path="/api/agents/fraud",
    required=("query",),
)

AGENT_RISK = ToolRoute(
    name="agent_risk",
    description="Risk scoring agent",
    path="/api/agents/risk",
    optional=("sanctionsContext", "docSignals", "fraudSignals"),
    untyped=("sanctionsContext", "docSignals", "fraudSignals"),
)

KYC_ORCHESTRATE = ToolRoute(
    name="kyc_orchestrate",
    description="Fan-out/fan-in orchestration",
    path="/api/kyc/start",
    required=("name", "documentText"),
    optional=("birthDate", "question"),
)

ROUTES: dict[str, ToolRoute] = {
    route.name: route
    for route in (
        INGEST,
        AGENT_EXTRACT,
        AGENT_SCREEN,
        AGENT_FRAUD,
        AGENT_RISK,
        KYC_ORCHESTRATE,
    )
}


def get_route(tool_name: str) -> ToolRoute:
    """Look up the route for a tool.  Raises KeyError for unknown names."""
    return ROUTES[tool_name]


def list_tool_names() -> list[str]:
    """Return all tool names in registration order."""
    return list(ROUTES.keys())
