"""Qwen profile (qwen-code)."""

from __future__ import annotations

from cliagent.config import OpenAICredentials
from cliagent.profiles.base import AgentProfile

QWEN_PACKAGE = "@qwen-code/qwen-code"

_MODEL_DESCRIPTION = (
    'The Qwen model to use, e.g. "qwen3-coder-plus". Defaults to OPENAI_MODEL '
    "when set, otherwise to the agent's own default."
)


def create_qwen_profile(credentials: OpenAICredentials | None = None) -> AgentProfile:
    """Create the qwen-code profile.

    When ``credentials`` carry an API key, base URL or logging toggle, they
    are prepended to every invocation as ``--openai-*`` arguments, and
    ``credentials.model`` becomes the default ``-m`` value. None of this is
    visible in the tool schemas.
    """
    creds = credentials or OpenAICredentials()
    defaults = {"model": creds.model} if creds.model else {}
    return AgentProfile(
        id="qwen",
        display_name="qwen-code",
        executable="qwen",
        package_ref=QWEN_PACKAGE,
        defaults=defaults,
        extra_args=creds.cli_args,
        supports_file_analysis=True,
        search_tool="qwenSearch",
        search_description="Performs a web search using qwen-code and returns the results.",
        chat_tool="qwenChat",
        chat_description="Engages in a chat conversation with qwen-code.",
        analyze_file_tool="analyzeFile",
        analyze_file_description=(
            "Analyzes an image, text or PDF file using qwen-code. "
            "The file path must be absolute."
        ),
        model_description=_MODEL_DESCRIPTION,
    )
