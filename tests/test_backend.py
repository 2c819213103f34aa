"""Tests for BackendClient."""

import json

import httpx
import pytest

from core.backend import BackendClient
from core.config import get_api_base


class TestBackendClient:
    """Test suite for BackendClient."""

    def test_url_is_base_plus_path(self):
        client = BackendClient("https://example.test")
        assert client.url_for("/api/agents/fraud") == "https://example.test/api/agents/fraud"

    def test_default_base_url(self, monkeypatch):
        monkeypatch.delenv("API_BASE", raising=False)
        client = BackendClient(get_api_base())
        assert client.url_for("/api/ingest") == "http://localhost:8080/api/ingest"

    @pytest.mark.asyncio
    async def test_post_sends_json(self, backend, recorder):
        text = await backend.post("/api/agents/screen", {"name": "Jane Doe", "birthDate": "1985-04-12"})

        assert text == "reply:/api/agents/screen"
        assert len(recorder.requests) == 1
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://example.test/api/agents/screen"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"name": "Jane Doe", "birthDate": "1985-04-12"}

    @pytest.mark.asyncio
    async def test_default_base_reaches_localhost(self, monkeypatch, recorder):
        monkeypatch.delenv("API_BASE", raising=False)
        client = BackendClient(get_api_base(), transport=httpx.MockTransport(recorder))

        await client.post("/api/agents/fraud", {"query": "recent transfers"})

        url = recorder.requests[0].url
        assert (url.scheme, url.host, url.port) == ("http", "localhost", 8080)

    @pytest.mark.asyncio
    async def test_error_status_is_returned_as_text(self, backend, recorder):
        async def server_error(request):
            return httpx.Response(500, text='{"error":"extract-failed"}')

        recorder.handlers["/api/agents/extract"] = server_error

        text = await backend.post("/api/agents/extract", {"documentText": "id.pdf"})

        assert text == '{"error":"extract-failed"}'

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self, backend, recorder):
        async def refused(request):
            raise httpx.ConnectError("Connection refused", request=request)

        recorder.handlers["/api/agents/fraud"] = refused

        with pytest.raises(httpx.ConnectError):
            await backend.post("/api/agents/fraud", {"query": "x"})
