"""Tests for the KYC analyst agent configuration."""

import sys

from agent.kyc_agent import PROJECT_ROOT, create_agent, gateway_server_parameters
from agent.prompt import get_kyc_analyst_prompt
from core.routes import list_tool_names


def test_prompt_names_every_tool():
    prompt = get_kyc_analyst_prompt()
    for name in list_tool_names():
        assert name in prompt


def test_gateway_launched_as_module(monkeypatch):
    monkeypatch.setenv("API_BASE", "https://example.test")

    params = gateway_server_parameters()

    assert params.command == sys.executable
    assert params.args == ["-m", "tools.mcp_server"]
    assert str(params.cwd) == PROJECT_ROOT
    assert params.env == {"API_BASE": "https://example.test"}


def test_create_agent(monkeypatch):
    monkeypatch.setenv("KYC_AGENT_MODEL", "openrouter/openai/gpt-4o-mini")

    agent = create_agent()

    assert agent.name == "kyc_analyst"
    assert agent.model.model == "openrouter/openai/gpt-4o-mini"
    assert len(agent.tools) == 1
