# =============================================================================
# core/models.py  —  Data Models for the KYC tool bridge
# =============================================================================
#
# These dataclasses describe the tools the bridge exposes and the fixed
# backend endpoint each one forwards to.  A ToolRoute is also the single
# source of the input schema the gateway publishes for its tool.
#
# The route table itself lives in core/routes.py.
# =============================================================================

from dataclasses import dataclass
from typing import Any


# -----------------------------------------------------------------------------
# ToolRoute — one MCP tool and the backend path it posts to
# -----------------------------------------------------------------------------
# Routes are created once at import time and never change afterwards.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolRoute:
    """A tool name bound to exactly one backend path.

    `required` and `optional` list the argument names as they appear on the
    wire (camelCase, matching the backend's JSON keys).  `one_of` names a
    group where at least one member must be supplied.  Arguments are strings
    unless listed in `untyped`, which accept any JSON value (null included).
    """

    name: str                          # MCP tool name, e.g. "agent_screen"
    description: str                   # Shown to the client in tools/list
    path: str                          # Backend path, e.g. "/api/agents/screen"
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    one_of: tuple[str, ...] = ()
    untyped: tuple[str, ...] = ()

    @property
    def arguments(self) -> tuple[str, ...]:
        """Every argument name the tool declares, in declaration order."""
        return self.required + self.one_of + self.optional

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema for the tool's argument object."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                arg: {} if arg in self.untyped else {"type": "string"}
                for arg in self.arguments
            },
        }
        if self.required:
            schema["required"] = list(self.required)
        if self.one_of:
            schema["anyOf"] = [{"required": [arg]} for arg in self.one_of]
        return schema

    def missing_arguments(self, arguments: dict[str, Any]) -> list[str]:
        """Names of required arguments absent from `arguments`.

        A one-of group that is entirely absent is reported as "a|b".
        """
        missing = [arg for arg in self.required if arg not in arguments]
        if self.one_of and not any(arg in arguments for arg in self.one_of):
            missing.append("|".join(self.one_of))
        return missing
