# =============================================================================
# core/backend.py  —  HTTP client for the KYC backend
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends one JSON POST to the backend and hands back the response body as
#   text.  That is the whole job:
#     - no status-code inspection (a 500 body is returned like a 200 body)
#     - no retries
#     - no client-side timeout
#     - connection errors are raised to the caller unchanged
#
#   The URL is `base_url + path`, concatenated as-is.
# =============================================================================

import json
import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class BackendClient:
    """Posts tool arguments to the backend.

    Args:
        base_url: Backend origin, e.g. "http://localhost:8080".  Fixed for
            the lifetime of the client.
        transport: Optional httpx transport.  Tests pass an
            `httpx.MockTransport`; in production it is left as None.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._base_url = base_url
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def post(self, path: str, body: dict[str, Any]) -> str:
        """POST `body` as JSON to `path` and return the response text."""
        url = self.url_for(path)
        logger.debug("POST %s", url)
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            response = await client.post(url, content=json.dumps(body), headers=JSON_HEADERS)
        logger.debug("POST %s -> %s (%d bytes)", url, response.status_code, len(response.content))
        return response.text
