"""Error hierarchy for the CLI agent adapter."""

from __future__ import annotations

from typing import Any


class CLIAgentError(Exception):
    """Base error for all library errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


# Resolution

class AgentNotFoundError(CLIAgentError):
    def __init__(self, agent: str, *, flag: str = "--allow-npx"):
        super().__init__(f"{agent} not found globally and {flag} option not specified.")
        self.agent = agent
        self.flag = flag


# Process errors

class ProcessSpawnError(CLIAgentError):
    """The OS could not start the child process."""

    def __init__(self, executable: str, *, cause: OSError):
        if isinstance(cause, FileNotFoundError):
            message = f"Executable not found: {executable}"
        else:
            message = f"Failed to start {executable}: {cause}"
        super().__init__(message, cause=cause)
        self.executable = executable


class ProcessExecutionError(CLIAgentError):
    """The child started but exited with a non-zero status."""

    def __init__(self, name: str, *, exit_code: int, stderr: str):
        super().__init__(f"{name} exited with code {exit_code}: {stderr}")
        self.name = name
        self.exit_code = exit_code
        self.stderr = stderr


# Local request errors, raised before anything is spawned

class SchemaValidationError(CLIAgentError):
    def __init__(self, tool: str, errors: list[dict[str, Any]], *, cause: Exception | None = None):
        details = "; ".join(_format_error(e) for e in errors)
        super().__init__(f"Invalid arguments for {tool}: {details}", cause=cause)
        self.tool = tool
        self.errors = errors


class UnsupportedFileTypeError(CLIAgentError):
    def __init__(self, path: str, extension: str, supported: dict[str, tuple[str, ...]]):
        groups = ", ".join(
            f"{category}: {' '.join(exts)}" for category, exts in supported.items()
        )
        shown = extension or "(none)"
        super().__init__(
            f"Unsupported file type '{shown}' for {path}. Supported extensions are {groups}"
        )
        self.path = path
        self.extension = extension
        self.supported = supported


class UnsupportedOperationError(CLIAgentError):
    pass


def _format_error(error: dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ())) or "(root)"
    return f"{loc}: {error.get('msg', 'invalid value')}"
