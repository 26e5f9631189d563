"""Adapter layer over command-line AI agents."""

from cliagent.types import AgentCommand, ProcessOutcome
from cliagent.errors import (
    CLIAgentError,
    AgentNotFoundError,
    ProcessSpawnError,
    ProcessExecutionError,
    SchemaValidationError,
    UnsupportedFileTypeError,
    UnsupportedOperationError,
)
from cliagent.config import OpenAICredentials
from cliagent.requests import AgentOptions, SearchRequest, ChatRequest, AnalyzeFileRequest, parse_request
from cliagent.prompt import SUPPORTED_FILE_TYPES, build_search_prompt, build_analyze_file_prompt
from cliagent.profiles.base import AgentProfile
from cliagent.profiles.gemini import create_gemini_profile
from cliagent.profiles.qwen import create_qwen_profile
from cliagent.profiles.catalog import AGENT_IDS, create_profile
from cliagent.resolver import resolve_command
from cliagent.runner import execute, run
from cliagent.adapter import CLIAgentAdapter, check_file_type
from cliagent.tools import ToolDefinition, ToolRegistry, ToolResult, build_registry
