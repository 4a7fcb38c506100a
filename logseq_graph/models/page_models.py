"""Pydantic input models for page operations.

This module defines input models for page management tools:
- List pages with pagination and filters
- Retrieve page metadata and block content
- Create, delete and rename pages
- Retrieve linked references (backlinks)
"""

from __future__ import annotations

from typing import Any, Literal, Optional
from pydantic import Field, field_validator, model_validator

from logseq_graph.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from .base import BasePageInput, StrictInput, require_text


class ListPagesInput(StrictInput):
    """Input model for logseq_list_pages tool.

    Examples:
        >>> ListPagesInput()
        >>> ListPagesInput(limit=100, offset=100, journal_only=True)
    """

    limit: int = Field(
        DEFAULT_PAGE_LIMIT,
        ge=1,
        le=MAX_PAGE_LIMIT,
        description=f"Maximum number of pages to return (1-{MAX_PAGE_LIMIT}, default: {DEFAULT_PAGE_LIMIT})"
    )

    offset: int = Field(
        0,
        ge=0,
        description="Number of pages to skip for pagination (default: 0)"
    )

    journal_only: bool = Field(
        False,
        description="If True, only return journal pages"
    )

    namespace: Optional[str] = Field(
        None,
        description=(
            "Filter pages by namespace prefix. "
            "'projects' matches 'projects/alpha' but not 'projects' itself."
        )
    )

    @field_validator('namespace')
    @classmethod
    def validate_namespace(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the namespace prefix, treating blank as no filter."""
        if v is None:
            return None
        cleaned = v.strip().strip("/")
        return cleaned or None

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"limit": 50, "offset": 0},
                {"limit": 20, "journal_only": True},
                {"namespace": "projects"}
            ]
        }


class GetPageInput(BasePageInput):
    """Input model for logseq_get_page tool.

    ``name`` may also be a page UUID.
    """

    include_children: bool = Field(
        False,
        description="Include child blocks in the response"
    )


class GetPageContentInput(BasePageInput):
    """Input model for logseq_get_page_content tool."""


class CreatePageInput(BasePageInput):
    """Input model for logseq_create_page tool.

    Examples:
        >>> CreatePageInput(name="Reading List")
        >>> CreatePageInput(name="projects/alpha", content="Kickoff notes", properties={"status": "active"})
    """

    content: Optional[str] = Field(
        None,
        description="Initial content to append as the first block"
    )

    properties: Optional[dict[str, Any]] = Field(
        None,
        description="Page-level properties as key-value pairs"
    )

    format: Literal["markdown", "org"] = Field(
        "markdown",
        description="Page format (default: markdown)"
    )

    journal: bool = Field(
        False,
        description="Whether this is a journal page"
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"name": "Reading List"},
                {
                    "name": "projects/alpha",
                    "content": "Kickoff notes",
                    "properties": {"status": "active"},
                    "format": "markdown"
                }
            ]
        }


class DeletePageInput(BasePageInput):
    """Input model for logseq_delete_page tool. Deletion is irreversible."""


class RenamePageInput(StrictInput):
    """Input model for logseq_rename_page tool.

    Examples:
        >>> RenamePageInput(old_name="Draft", new_name="Final")
    """

    old_name: str = Field(
        min_length=1,
        description="Current page name"
    )

    new_name: str = Field(
        min_length=1,
        description="New page name"
    )

    @field_validator('old_name', 'new_name')
    @classmethod
    def validate_names(cls, v: str) -> str:
        """Reject blank page names."""
        return require_text(v, "Page name")

    @model_validator(mode='after')
    def validate_names_differ(self) -> RenamePageInput:
        """Ensure the rename actually changes something."""
        if self.old_name == self.new_name:
            raise ValueError(
                "old_name and new_name must be different. "
                f"Both are '{self.old_name}'."
            )
        return self


class GetPageLinkedReferencesInput(BasePageInput):
    """Input model for logseq_get_page_linked_references tool."""
