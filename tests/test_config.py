"""Tests for environment configuration."""

from core.config import (
    DEFAULT_AGENT_MODEL,
    DEFAULT_API_BASE,
    get_agent_model,
    get_api_base,
)


def test_api_base_defaults_to_localhost(monkeypatch):
    monkeypatch.delenv("API_BASE", raising=False)
    assert get_api_base() == "http://localhost:8080"
    assert DEFAULT_API_BASE == "http://localhost:8080"


def test_api_base_from_environment(monkeypatch):
    monkeypatch.setenv("API_BASE", "https://example.test")
    assert get_api_base() == "https://example.test"


def test_empty_api_base_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("API_BASE", "")
    assert get_api_base() == DEFAULT_API_BASE


def test_agent_model(monkeypatch):
    monkeypatch.delenv("KYC_AGENT_MODEL", raising=False)
    assert get_agent_model() == DEFAULT_AGENT_MODEL
    monkeypatch.setenv("KYC_AGENT_MODEL", "openrouter/openai/gpt-4o-mini")
    assert get_agent_model() == "openrouter/openai/gpt-4o-mini"
