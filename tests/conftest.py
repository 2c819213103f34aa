"""Shared fixtures for the KYC tool bridge tests."""

import httpx
import pytest

from core.backend import BackendClient

TEST_API_BASE = "https://example.test"


class RecordingBackend:
    """Mock backend that records every request it receives.

    Replies with `reply:<path>` unless a handler is installed for the path.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handlers = {}

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.handlers.get(request.url.path)
        if handler is not None:
            return await handler(request)
        return httpx.Response(200, text=f"reply:{request.url.path}")

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def recorder() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def backend(recorder) -> BackendClient:
    """BackendClient pointed at TEST_API_BASE with a recording mock transport."""
    return BackendClient(TEST_API_BASE, transport=httpx.MockTransport(recorder))
