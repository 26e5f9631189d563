"""Agent profile: everything that differs between CLI agent backends."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from cliagent.prompt import build_search_prompt
from cliagent.requests import AgentOptions

DEFAULT_BOOL_FLAGS: dict[str, str] = {"sandbox": "-s", "yolo": "-y"}
DEFAULT_VALUE_FLAGS: dict[str, str] = {"model": "-m"}


def _no_extra_args() -> list[str]:
    return []


@dataclass(frozen=True)
class AgentProfile:
    """Configuration record describing one CLI agent backend.

    ``extra_args`` returns arguments placed ahead of the prompt on every
    invocation. Callers of the tools never see them.
    """

    id: str = ""
    display_name: str = ""
    executable: str = ""
    package_ref: str = ""
    prompt_flag: str = "-p"
    bool_flags: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_BOOL_FLAGS))
    value_flags: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_VALUE_FLAGS))
    defaults: dict[str, str] = field(default_factory=dict)
    search_prompt: Callable[[str, int | float | None, bool], str] = build_search_prompt
    extra_args: Callable[[], list[str]] = _no_extra_args
    supports_file_analysis: bool = False
    search_tool: str = "search"
    search_description: str = ""
    chat_tool: str = "chat"
    chat_description: str = ""
    analyze_file_tool: str = "analyzeFile"
    analyze_file_description: str = ""
    model_description: str = ""

    def flag_args(self, options: AgentOptions) -> list[str]:
        """Translate request options through the flag tables, in table order."""
        args: list[str] = []
        for option, flag in self.bool_flags.items():
            if getattr(options, option, None):
                args.append(flag)
        for option, flag in self.value_flags.items():
            value = getattr(options, option, None) or self.defaults.get(option)
            if value:
                args.extend([flag, str(value)])
        return args
