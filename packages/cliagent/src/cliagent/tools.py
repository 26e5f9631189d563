"""Named, schema-described tools bound to an adapter."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from cliagent.adapter import CLIAgentAdapter
from cliagent.errors import CLIAgentError
from cliagent.requests import (
    AgentOptions,
    AnalyzeFileRequest,
    ChatRequest,
    SearchRequest,
    request_schema,
)

logger = logging.getLogger(__name__)


@dataclass
class ToolDefinition:
    name: str = ""
    description: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)
    execute: Callable[[dict[str, Any]], Awaitable[str]] | None = None


@dataclass
class ToolResult:
    content: str = ""
    is_error: bool = False


class ToolRegistry:
    """Registry for tool definitions."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(self, definition: ToolDefinition) -> None:
        """Register a tool. Latest registration wins on name collision."""
        self._tools[definition.name] = definition

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools.keys())

    async def execute(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Execute a tool by name.

        Library errors become error results carrying the message verbatim,
        captured stderr included. Nothing is retried.
        """
        tool = self._tools.get(name)
        if tool is None or tool.execute is None:
            return ToolResult(content=f"Unknown tool: {name}", is_error=True)
        try:
            output = await tool.execute(arguments)
        except CLIAgentError as e:
            logger.info("Tool %s failed: %s", name, e)
            return ToolResult(content=str(e), is_error=True)
        return ToolResult(content=output)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


def _schema(model: type[AgentOptions], model_description: str) -> dict[str, Any]:
    schema = request_schema(model)
    if model_description:
        schema["properties"]["model"]["description"] = model_description
    return schema


def make_search_tool(adapter: CLIAgentAdapter) -> ToolDefinition:
    profile = adapter.profile
    return ToolDefinition(
        name=profile.search_tool,
        description=profile.search_description,
        parameters=_schema(SearchRequest, profile.model_description),
        execute=adapter.search,
    )


def make_chat_tool(adapter: CLIAgentAdapter) -> ToolDefinition:
    profile = adapter.profile
    return ToolDefinition(
        name=profile.chat_tool,
        description=profile.chat_description,
        parameters=_schema(ChatRequest, profile.model_description),
        execute=adapter.chat,
    )


def make_analyze_file_tool(adapter: CLIAgentAdapter) -> ToolDefinition:
    profile = adapter.profile
    return ToolDefinition(
        name=profile.analyze_file_tool,
        description=profile.analyze_file_description,
        parameters=_schema(AnalyzeFileRequest, profile.model_description),
        execute=adapter.analyze_file,
    )


def build_registry(adapter: CLIAgentAdapter) -> ToolRegistry:
    """Register every tool the adapter's profile offers."""
    registry = ToolRegistry()
    registry.register(make_search_tool(adapter))
    registry.register(make_chat_tool(adapter))
    if adapter.profile.supports_file_analysis:
        registry.register(make_analyze_file_tool(adapter))
    return registry
