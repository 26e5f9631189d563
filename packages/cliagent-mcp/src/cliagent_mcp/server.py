"""MCP server exposing an agent's tools over stdio."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import Field

from cliagent.adapter import CLIAgentAdapter
from cliagent.tools import ToolDefinition, ToolRegistry, build_registry

logger = logging.getLogger(__name__)

SERVER_VERSION = "0.2.0"


class RegistryTool(Tool):
    """An MCP tool served straight from a registry definition.

    The advertised input schema is the definition's own; arguments are
    validated once, by the adapter behind the registry.
    """

    handler: Callable[[str, dict[str, Any]], Awaitable[str]] = Field(exclude=True)

    @classmethod
    def from_definition(
        cls,
        definition: ToolDefinition,
        handler: Callable[[str, dict[str, Any]], Awaitable[str]],
    ) -> RegistryTool:
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.parameters,
            handler=handler,
        )

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        text = await self.handler(self.name, arguments or {})
        return MCPToolResult(content=[TextContent(type="text", text=text)])


def create_server(adapter: CLIAgentAdapter, registry: ToolRegistry | None = None) -> FastMCP:
    """Create a FastMCP server with one tool per registry entry."""
    if registry is None:
        registry = build_registry(adapter)
    mcp = FastMCP(f"mcp-{adapter.profile.id}-cli", version=SERVER_VERSION)

    async def call(name: str, arguments: dict[str, Any]) -> str:
        logger.info("%s called with: %s", name, ", ".join(f"{k}={v!r}" for k, v in arguments.items()))
        result = await registry.execute(name, arguments)
        if result.is_error:
            raise ToolError(result.content)
        logger.info("%s returned %d characters", name, len(result.content))
        return result.content

    for definition in registry.definitions():
        mcp.add_tool(RegistryTool.from_definition(definition, call))
    return mcp
