"""Decide how to invoke a CLI agent: installed binary or package-runner fallback."""

from __future__ import annotations

import asyncio
import logging
import sys

from cliagent.errors import AgentNotFoundError
from cliagent.profiles.base import AgentProfile
from cliagent.types import AgentCommand

logger = logging.getLogger(__name__)

FALLBACK_FLAG = "--allow-npx"


def lookup_command() -> str:
    return "where" if sys.platform == "win32" else "which"


def package_runner() -> str:
    return "npx.cmd" if sys.platform == "win32" else "npx"


async def is_installed(executable: str) -> bool:
    """Probe the OS for ``executable`` with a single lookup subprocess."""
    try:
        proc = await asyncio.create_subprocess_exec(
            lookup_command(),
            executable,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError as e:
        logger.debug("Could not run %s to locate %s: %s", lookup_command(), executable, e)
        return False
    return await proc.wait() == 0


async def resolve_command(profile: AgentProfile, allow_fallback: bool = False) -> AgentCommand:
    """Resolve the command for ``profile``.

    Not cached: every call probes again, so installing or removing the
    agent between calls takes effect immediately.
    """
    if await is_installed(profile.executable):
        logger.debug("Found %s on PATH", profile.executable)
        return AgentCommand(executable=profile.executable)
    if allow_fallback:
        logger.debug("%s not on PATH, falling back to %s %s", profile.executable, package_runner(), profile.package_ref)
        return AgentCommand(executable=package_runner(), base_args=(profile.package_ref,))
    raise AgentNotFoundError(profile.executable, flag=FALLBACK_FLAG)
