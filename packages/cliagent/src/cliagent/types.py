"""Core types for the CLI agent adapter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AgentCommand:
    """How to invoke an agent: an executable plus a fixed argument prefix."""

    executable: str
    base_args: tuple[str, ...] = ()

    def argv(self, args: list[str] | tuple[str, ...] = ()) -> list[str]:
        return [self.executable, *self.base_args, *args]


@dataclass
class ProcessOutcome:
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0
    duration_ms: int = 0
