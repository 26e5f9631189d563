"""Lookup of the built-in agent profiles by id."""

from __future__ import annotations

from cliagent.config import OpenAICredentials
from cliagent.profiles.base import AgentProfile
from cliagent.profiles.gemini import create_gemini_profile
from cliagent.profiles.qwen import create_qwen_profile

AGENT_IDS = ("gemini", "qwen")


def create_profile(agent: str, credentials: OpenAICredentials | None = None) -> AgentProfile:
    if agent == "gemini":
        return create_gemini_profile()
    if agent == "qwen":
        return create_qwen_profile(credentials)
    raise ValueError(f"Unknown agent '{agent}'. Expected one of: {', '.join(AGENT_IDS)}")
