"""Generic request adapter: tool request -> agent argv -> agent output."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from cliagent.errors import UnsupportedFileTypeError, UnsupportedOperationError
from cliagent.profiles.base import AgentProfile
from cliagent.prompt import (
    SUPPORTED_FILE_TYPES,
    build_analyze_file_prompt,
    file_category,
    file_extension,
)
from cliagent.requests import (
    AgentOptions,
    AnalyzeFileRequest,
    ChatRequest,
    SearchRequest,
    parse_request,
)
from cliagent.resolver import resolve_command
from cliagent.runner import run as run_command
from cliagent.types import AgentCommand

logger = logging.getLogger(__name__)

Resolver = Callable[[AgentProfile, bool], Awaitable[AgentCommand]]
Runner = Callable[..., Awaitable[str]]


class CLIAgentAdapter:
    """Maps tool requests onto one CLI agent described by ``profile``.

    Each call validates its arguments, resolves the agent command afresh
    and runs the agent once. The agent's stdout is returned untouched.
    """

    def __init__(
        self,
        profile: AgentProfile,
        allow_fallback: bool = False,
        resolver: Resolver = resolve_command,
        runner: Runner = run_command,
    ) -> None:
        self.profile = profile
        self.allow_fallback = allow_fallback
        self._resolve = resolver
        self._run = runner

    # Argument construction

    def build_search_args(self, request: SearchRequest) -> list[str]:
        prompt = self.profile.search_prompt(request.query, request.limit, bool(request.raw))
        return self._build_args(prompt, request)

    def build_chat_args(self, request: ChatRequest) -> list[str]:
        return self._build_args(request.prompt, request)

    def build_analyze_file_args(self, request: AnalyzeFileRequest) -> list[str]:
        check_file_type(request.file_path)
        prompt = build_analyze_file_prompt(request.file_path, request.prompt)
        return self._build_args(prompt, request)

    def _build_args(self, prompt: str, options: AgentOptions) -> list[str]:
        return [
            *self.profile.extra_args(),
            self.profile.prompt_flag,
            prompt,
            *self.profile.flag_args(options),
        ]

    # Tool operations

    async def search(self, arguments: Any) -> str:
        request = parse_request(SearchRequest, self.profile.search_tool, arguments)
        return await self._invoke(self.build_search_args(request))

    async def chat(self, arguments: Any) -> str:
        request = parse_request(ChatRequest, self.profile.chat_tool, arguments)
        return await self._invoke(self.build_chat_args(request))

    async def analyze_file(self, arguments: Any) -> str:
        if not self.profile.supports_file_analysis:
            raise UnsupportedOperationError(
                f"{self.profile.display_name or self.profile.id} does not support file analysis"
            )
        request = parse_request(AnalyzeFileRequest, self.profile.analyze_file_tool, arguments)
        # File type is checked before anything is resolved or spawned
        args = self.build_analyze_file_args(request)
        return await self._invoke(args)

    async def resolve(self) -> AgentCommand:
        return await self._resolve(self.profile, self.allow_fallback)

    async def _invoke(self, args: list[str]) -> str:
        cmd = await self.resolve()
        logger.debug("Invoking %s %s with %d argument(s)", cmd.executable, " ".join(cmd.base_args), len(args))
        return await self._run(cmd, args, name=self.profile.executable)


def check_file_type(path: str) -> str:
    """Return the file's category or raise UnsupportedFileTypeError."""
    category = file_category(path)
    if category is None:
        raise UnsupportedFileTypeError(path, file_extension(path), SUPPORTED_FILE_TYPES)
    return category
