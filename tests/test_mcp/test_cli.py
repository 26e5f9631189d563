"""Tests for CLI entry point."""

import json

import pytest
from click.testing import CliRunner

from cliagent import resolver
from cliagent_mcp import cli
from cliagent_mcp.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def installed(monkeypatch):
    async def found(executable):
        return True

    monkeypatch.setattr(resolver, "is_installed", found)


@pytest.fixture
def not_installed(monkeypatch):
    async def missing(executable):
        return False

    monkeypatch.setattr(resolver, "is_installed", missing)


class FakeServer:
    def __init__(self, adapter):
        self.adapter = adapter
        self.ran = False

    def run(self):
        self.ran = True


@pytest.fixture
def servers(monkeypatch):
    created = []

    def fake_create_server(adapter):
        server = FakeServer(adapter)
        created.append(server)
        return server

    monkeypatch.setattr(cli, "create_server", fake_create_server)
    return created


class TestServeCommand:
    def test_missing_agent_exits(self, runner, not_installed, servers):
        result = runner.invoke(main, ["serve", "--agent", "gemini"])
        assert result.exit_code == 1
        assert "Error: gemini not found globally and --allow-npx option not specified." in result.output
        assert "Please install gemini-cli globally or use --allow-npx option." in result.output
        assert servers == []

    def test_missing_agent_with_npx(self, runner, not_installed, servers):
        result = runner.invoke(main, ["serve", "--agent", "qwen", "--allow-npx"])
        assert result.exit_code == 0
        assert servers[0].ran
        assert servers[0].adapter.allow_fallback
        assert servers[0].adapter.profile.id == "qwen"

    def test_installed_agent(self, runner, installed, servers):
        result = runner.invoke(main, ["serve"])
        assert result.exit_code == 0
        assert servers[0].adapter.profile.id == "gemini"
        assert not servers[0].adapter.allow_fallback

    def test_credentials_from_environment(self, runner, installed, servers, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-cli")
        monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
        monkeypatch.delenv("OPENAI_LOGGING", raising=False)
        result = runner.invoke(main, ["serve", "--agent", "qwen"])
        assert result.exit_code == 0
        assert servers[0].adapter.profile.extra_args() == ["--openai-api-key", "sk-cli"]

    def test_unknown_agent(self, runner, servers):
        result = runner.invoke(main, ["serve", "--agent", "claude"])
        assert result.exit_code != 0
        assert servers == []


class TestCheckCommand:
    def test_installed(self, runner, installed):
        result = runner.invoke(main, ["check", "--agent", "qwen"])
        assert result.exit_code == 0
        assert result.output.strip() == "qwen"

    def test_fallback(self, runner, not_installed):
        result = runner.invoke(main, ["check", "--agent", "gemini", "--allow-npx"])
        assert result.exit_code == 0
        assert result.output.strip() == f"{resolver.package_runner()} https://github.com/google-gemini/gemini-cli"

    def test_not_found(self, runner, not_installed):
        result = runner.invoke(main, ["check", "--agent", "qwen"])
        assert result.exit_code == 1
        assert "--allow-npx" in result.output


class TestToolsCommand:
    def test_qwen(self, runner):
        result = runner.invoke(main, ["tools", "--agent", "qwen"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert [t["name"] for t in payload] == ["qwenSearch", "qwenChat", "analyzeFile"]
        assert payload[2]["inputSchema"]["required"] == ["filePath"]

    def test_gemini(self, runner):
        result = runner.invoke(main, ["tools"])
        payload = json.loads(result.output)
        assert [t["name"] for t in payload] == ["googleSearch", "geminiChat"]
