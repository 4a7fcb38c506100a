"""Pydantic input models for search, journal and graph operations."""

from __future__ import annotations

from pydantic import Field, field_validator

from logseq_graph.constants import MAX_QUERY_LENGTH
from .base import StrictInput, require_text


class SearchInput(StrictInput):
    """Input model for logseq_search tool.

    Examples:
        >>> SearchInput(query="quarterly review")
    """

    query: str = Field(
        min_length=1,
        max_length=MAX_QUERY_LENGTH,
        description=f"Search query string (1-{MAX_QUERY_LENGTH} characters)"
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate search query is not empty."""
        return require_text(v, "Search query")

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"query": "quarterly review"},
                {"query": "TODO"}
            ]
        }


class CreateJournalInput(StrictInput):
    """Input model for logseq_create_journal tool."""

    date: str = Field(
        min_length=1,
        description=(
            "Date for the journal page. "
            "Accepts 'YYYY-MM-DD' or a natural date string."
        ),
        examples=["2025-10-27", "Oct 27th, 2025"]
    )

    @field_validator('date')
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Reject blank dates."""
        return require_text(v, "Journal date")


class GetGraphInfoInput(StrictInput):
    """Input model for logseq_get_graph_info tool.

    Takes no parameters, but using a model maintains API consistency.
    """


class GetAllTagsInput(StrictInput):
    """Input model for logseq_get_all_tags tool. Takes no parameters."""
