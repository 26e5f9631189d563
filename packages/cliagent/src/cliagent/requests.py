"""Validated request records for each tool."""

from __future__ import annotations

import os
from typing import Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    ValidationError,
    field_validator,
)

from cliagent.errors import SchemaValidationError


class AgentOptions(BaseModel):
    """Flags shared by every tool; translated through the profile's flag table."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    # Flags are strict: "yes" or 1 is a type error, not True
    sandbox: StrictBool | None = Field(default=None, description="Run the agent in sandbox mode.")
    yolo: StrictBool | None = Field(
        default=None,
        description="Automatically accept all actions (aka YOLO mode).",
    )
    model: str | None = Field(default=None, description="The model to use.")


class SearchRequest(AgentOptions):
    query: str = Field(description="The search query.")
    limit: StrictInt | StrictFloat | None = Field(
        default=None,
        description="Maximum number of results to return (optional).",
    )
    raw: StrictBool | None = Field(
        default=None,
        description="Return raw search results with URLs and snippets (optional).",
    )


class ChatRequest(AgentOptions):
    prompt: str = Field(description="The prompt for the chat conversation.")


class AnalyzeFileRequest(AgentOptions):
    file_path: str = Field(
        alias="filePath",
        description="The absolute path to the image, text or PDF file to analyze.",
    )
    prompt: str | None = Field(
        default=None,
        description="Additional instructions for analyzing the file (optional).",
    )

    @field_validator("file_path")
    @classmethod
    def _require_absolute(cls, value: str) -> str:
        if not os.path.isabs(value):
            raise ValueError(f"must be an absolute path, got '{value}'")
        return value


RequestT = TypeVar("RequestT", bound=AgentOptions)


def parse_request(model: type[RequestT], tool: str, arguments: Any) -> RequestT:
    """Validate raw tool arguments, raising SchemaValidationError on failure."""
    if isinstance(arguments, model):
        return arguments
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise SchemaValidationError(tool, e.errors(include_url=False), cause=e) from e


def request_schema(model: type[AgentOptions]) -> dict[str, Any]:
    """JSON schema of a request model using its wire (alias) field names."""
    return model.model_json_schema(by_alias=True)
