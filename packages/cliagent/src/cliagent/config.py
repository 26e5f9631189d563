"""Explicit configuration read from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class OpenAICredentials:
    """OpenAI-compatible endpoint settings forwarded to agents that accept them."""

    api_key: str | None = None
    base_url: str | None = None
    logging: bool = False
    model: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OpenAICredentials:
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("OPENAI_API_KEY") or None,
            base_url=env.get("OPENAI_BASE_URL") or None,
            logging=env.get("OPENAI_LOGGING", "").strip().lower() in _TRUTHY,
            model=env.get("OPENAI_MODEL") or None,
        )

    def cli_args(self) -> list[str]:
        args: list[str] = []
        if self.api_key:
            args.extend(["--openai-api-key", self.api_key])
        if self.base_url:
            args.extend(["--openai-base-url", self.base_url])
        if self.logging:
            args.append("--openai-logging")
        return args
