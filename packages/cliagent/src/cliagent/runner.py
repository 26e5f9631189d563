"""Non-interactive execution of a resolved agent command."""

from __future__ import annotations

import asyncio
import codecs
import logging
import os
import signal
import sys
import time

from cliagent.errors import ProcessExecutionError, ProcessSpawnError
from cliagent.types import AgentCommand, ProcessOutcome

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
TERMINATE_GRACE_SECONDS = 2.0

_POSIX = sys.platform != "win32"


async def execute(cmd: AgentCommand, args: list[str] | tuple[str, ...] = ()) -> ProcessOutcome:
    """Run ``cmd`` with ``args`` to completion and return the raw outcome.

    Standard input is closed so the agent can never block waiting for it.
    If the awaiting task is cancelled the child (and its process group on
    POSIX) is terminated before the cancellation propagates.
    """
    argv = cmd.argv(args)
    start = time.monotonic()
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=_POSIX,
        )
    except OSError as e:
        raise ProcessSpawnError(cmd.executable, cause=e) from e

    logger.debug("Started %s (pid %s) with %d argument(s)", cmd.executable, proc.pid, len(argv) - 1)
    try:
        stdout, stderr = await asyncio.gather(
            _read_stream(proc.stdout), _read_stream(proc.stderr)
        )
        exit_code = await proc.wait()
    except BaseException as e:
        # The child never outlives its caller, cancellation included
        logger.warning("Terminating %s (pid %s) after %s", cmd.executable, proc.pid, type(e).__name__)
        await _terminate(proc)
        raise

    duration_ms = int((time.monotonic() - start) * 1000)
    logger.debug("%s exited with code %s after %d ms", cmd.executable, exit_code, duration_ms)
    return ProcessOutcome(
        stdout=stdout,
        stderr=stderr,
        exit_code=exit_code,
        duration_ms=duration_ms,
    )


async def run(
    cmd: AgentCommand,
    args: list[str] | tuple[str, ...] = (),
    *,
    name: str | None = None,
) -> str:
    """Run ``cmd`` and return its stdout, raising on a non-zero exit."""
    outcome = await execute(cmd, args)
    if outcome.exit_code != 0:
        raise ProcessExecutionError(
            name or os.path.basename(cmd.executable),
            exit_code=outcome.exit_code,
            stderr=outcome.stderr,
        )
    return outcome.stdout


async def _read_stream(stream: asyncio.StreamReader | None) -> str:
    """Accumulate a pipe as text, chunk by chunk, until EOF."""
    if stream is None:
        return ""
    # Multi-byte sequences may straddle chunk boundaries.
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    parts: list[str] = []
    while True:
        chunk = await stream.read(CHUNK_SIZE)
        if not chunk:
            break
        parts.append(decoder.decode(chunk))
    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)


async def _terminate(proc: asyncio.subprocess.Process) -> None:
    if proc.returncode is not None:
        return
    _send_signal(proc, signal.SIGTERM)
    try:
        await asyncio.wait_for(proc.wait(), timeout=TERMINATE_GRACE_SECONDS)
    except asyncio.TimeoutError:
        _send_signal(proc, getattr(signal, "SIGKILL", signal.SIGTERM))
        await proc.wait()


def _send_signal(proc: asyncio.subprocess.Process, sig: int) -> None:
    try:
        if _POSIX:
            os.killpg(os.getpgid(proc.pid), sig)
        elif sig == signal.SIGTERM:
            proc.terminate()
        else:
            proc.kill()
    except (ProcessLookupError, OSError):
        pass
