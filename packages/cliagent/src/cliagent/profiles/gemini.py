"""Gemini profile (gemini-cli)."""

from __future__ import annotations

from cliagent.profiles.base import AgentProfile

GEMINI_PACKAGE = "https://github.com/google-gemini/gemini-cli"

_MODEL_DESCRIPTION = (
    'The Gemini model to use. Recommended: "gemini-2.5-pro" (default) or '
    '"gemini-2.5-flash". Both models are confirmed to work with Google login.'
)


def create_gemini_profile() -> AgentProfile:
    return AgentProfile(
        id="gemini",
        display_name="gemini-cli",
        executable="gemini",
        package_ref=GEMINI_PACKAGE,
        search_tool="googleSearch",
        search_description="Performs a Google search using gemini-cli and returns structured results.",
        chat_tool="geminiChat",
        chat_description="Engages in a chat conversation with gemini-cli.",
        model_description=_MODEL_DESCRIPTION,
    )
