"""Prompt construction for agent requests."""

from __future__ import annotations

import os

# Extensions the agents can read, grouped by category
SUPPORTED_FILE_TYPES: dict[str, tuple[str, ...]] = {
    "images": (".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg", ".bmp"),
    "text": (".txt", ".md", ".text"),
    "documents": (".pdf",),
}

DEFAULT_ANALYZE_PROMPT = "Please analyze this file and describe its contents."

_GROUNDING_TEMPLATE = """\
Search for: "{query}" and return the results in the following JSON format:
{{
  "{query}": {{
    "summary": "Brief summary of findings",
    "groundingMetadata": {{
      "searchQueries": ["list of search queries used"],
      "sources": [
        {{
          "url": "source URL",
          "title": "source domain/title",
          "relevantExcerpts": ["key excerpts from this source"]
        }}
      ]
    }}
  }}
}}"""


def build_search_prompt(query: str, limit: int | float | None = None, raw: bool = False) -> str:
    """Build the search instruction.

    Raw mode asks for a JSON answer keyed by the query with grounding
    metadata (queries used, sources, excerpts). The limit is advisory text
    only; the agent is trusted to honour it.
    """
    if raw:
        prompt = _GROUNDING_TEMPLATE.format(query=query)
        if limit:
            prompt += f"\nLimit to {limit} sources."
        return prompt

    prompt = f"Search for: {query}"
    if limit:
        prompt += f" (return up to {limit} results)"
    return prompt


def file_extension(path: str) -> str:
    return os.path.splitext(path)[1].lower()


def file_category(path: str) -> str | None:
    """Return the category of a supported file, or None."""
    ext = file_extension(path)
    for category, extensions in SUPPORTED_FILE_TYPES.items():
        if ext in extensions:
            return category
    return None


def build_analyze_file_prompt(file_path: str, prompt: str | None = None) -> str:
    # @<path> makes the agent read the file into its context
    return f"@{file_path} {prompt or DEFAULT_ANALYZE_PROMPT}"
