"""Tests for the tool registry."""

from cliagent.adapter import CLIAgentAdapter
from cliagent.errors import ProcessExecutionError
from cliagent.profiles.gemini import create_gemini_profile
from cliagent.profiles.qwen import create_qwen_profile
from cliagent.tools import ToolDefinition, ToolRegistry, build_registry
from cliagent.types import AgentCommand


def make_adapter(profile, output="ok", error=None):
    async def resolver(profile, allow_fallback):
        return AgentCommand(executable=profile.executable)

    async def runner(cmd, args, *, name=None):
        if error:
            raise error
        return output

    return CLIAgentAdapter(profile, resolver=resolver, runner=runner)


class TestToolRegistry:
    def test_register_and_get(self):
        reg = ToolRegistry()
        reg.register(ToolDefinition(name="t", description="d"))
        assert reg.get("t").description == "d"
        assert "t" in reg
        assert len(reg) == 1

    def test_name_collision_latest_wins(self):
        reg = ToolRegistry()
        reg.register(ToolDefinition(name="x", description="first"))
        reg.register(ToolDefinition(name="x", description="second"))
        assert reg.get("x").description == "second"
        assert reg.names() == ["x"]

    async def test_unknown_tool(self):
        result = await ToolRegistry().execute("nope", {})
        assert result.is_error
        assert result.content == "Unknown tool: nope"


class TestBuildRegistry:
    def test_gemini_tools(self):
        reg = build_registry(make_adapter(create_gemini_profile()))
        assert reg.names() == ["googleSearch", "geminiChat"]
        chat = reg.get("geminiChat")
        assert chat.parameters["required"] == ["prompt"]
        assert chat.description == "Engages in a chat conversation with gemini-cli."
        assert "gemini-2.5-flash" in chat.parameters["properties"]["model"]["description"]

    def test_qwen_tools(self):
        reg = build_registry(make_adapter(create_qwen_profile()))
        assert reg.names() == ["qwenSearch", "qwenChat", "analyzeFile"]
        analyze = reg.get("analyzeFile")
        assert set(analyze.parameters["properties"]) == {"filePath", "prompt", "sandbox", "yolo", "model"}
        assert analyze.parameters["required"] == ["filePath"]

    async def test_execute_success(self):
        reg = build_registry(make_adapter(create_gemini_profile(), output="Hello!\n"))
        result = await reg.execute("geminiChat", {"prompt": "Say hello"})
        assert not result.is_error
        assert result.content == "Hello!\n"

    async def test_execute_failure_is_verbatim(self):
        error = ProcessExecutionError("qwen", exit_code=1, stderr="Error: invalid API key\n")
        reg = build_registry(make_adapter(create_qwen_profile(), error=error))
        result = await reg.execute("qwenChat", {"prompt": "hi"})
        assert result.is_error
        assert result.content == "qwen exited with code 1: Error: invalid API key\n"

    async def test_execute_validation_failure(self):
        reg = build_registry(make_adapter(create_qwen_profile()))
        result = await reg.execute("analyzeFile", {"filePath": "/tmp/video.mov"})
        assert result.is_error
        assert "Unsupported file type '.mov'" in result.content
