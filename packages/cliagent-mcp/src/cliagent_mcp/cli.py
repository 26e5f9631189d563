"""CLI entry point for the CLI-agent MCP server."""

from __future__ import annotations

import asyncio
import json
import logging
import shlex
import sys

import click

from cliagent.adapter import CLIAgentAdapter
from cliagent.config import OpenAICredentials
from cliagent.errors import AgentNotFoundError
from cliagent.profiles.catalog import AGENT_IDS, create_profile
from cliagent.tools import build_registry
from cliagent_mcp.server import create_server

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

agent_option = click.option(
    "--agent",
    type=click.Choice(AGENT_IDS),
    default="gemini",
    show_default=True,
    help="CLI agent to delegate to",
)
allow_npx_option = click.option(
    "--allow-npx",
    is_flag=True,
    help="Run the agent through npx when it is not installed",
)


def _configure_logging(level: str) -> None:
    # stdout carries the MCP protocol
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _build_adapter(agent: str, allow_npx: bool) -> CLIAgentAdapter:
    profile = create_profile(agent, OpenAICredentials.from_env())
    return CLIAgentAdapter(profile, allow_fallback=allow_npx)


@click.group()
def main():
    """Expose a command-line AI agent as MCP tools."""
    pass


@main.command()
@agent_option
@allow_npx_option
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Logging level (logs go to stderr)",
)
def serve(agent: str, allow_npx: bool, log_level: str):
    """Run the MCP server on stdio."""
    _configure_logging(log_level.upper())
    adapter = _build_adapter(agent, allow_npx)

    try:
        cmd = asyncio.run(adapter.resolve())
    except AgentNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(
            f"Please install {adapter.profile.display_name} globally or use --allow-npx option.",
            err=True,
        )
        sys.exit(1)
    logger.info("Using %s", shlex.join(cmd.argv()))

    create_server(adapter).run()


@main.command()
@agent_option
@allow_npx_option
def check(agent: str, allow_npx: bool):
    """Show how the agent would be invoked."""
    adapter = _build_adapter(agent, allow_npx)
    try:
        cmd = asyncio.run(adapter.resolve())
    except AgentNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(shlex.join(cmd.argv()))


@main.command()
@agent_option
def tools(agent: str):
    """Print the tool definitions as JSON."""
    registry = build_registry(_build_adapter(agent, allow_npx=False))
    payload = [
        {"name": d.name, "description": d.description, "inputSchema": d.parameters}
        for d in registry.definitions()
    ]
    click.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
