"""MCP server hosting the CLI agent tools."""

from cliagent_mcp.server import create_server
