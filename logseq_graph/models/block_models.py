"""Pydantic input models for block operations.

This module defines input models for block manipulation tools:
- Retrieve a block (optionally with children)
- Insert, append, prepend and batch-insert blocks
- Update, remove and move blocks
- Read, write and remove block properties
"""

from __future__ import annotations

from typing import Any, Optional
from pydantic import Field, field_validator

from .base import BaseBlockInput, StrictInput, require_text


class GetBlockInput(BaseBlockInput):
    """Input model for logseq_get_block tool."""

    include_children: bool = Field(
        False,
        description="Include child blocks in the response"
    )


class InsertBlockInput(StrictInput):
    """Input model for logseq_insert_block tool.

    Inserts a block relative to a page or another block. By default the new
    block becomes a child of the target; ``sibling=True`` places it next to it.

    Examples:
        >>> InsertBlockInput(page_or_block="Meeting Notes", content="Action items")
        >>> InsertBlockInput(page_or_block="6571b7f2-...", content="Follow-up", sibling=True)
    """

    page_or_block: str = Field(
        min_length=1,
        description="Target page name or block UUID to insert after/under"
    )

    content: str = Field(
        description="Markdown content for the new block (may be empty)"
    )

    sibling: bool = Field(
        False,
        description="Insert as a sibling (True) or child (False, default)"
    )

    before: bool = Field(
        False,
        description="Insert before the target block instead of after"
    )

    properties: Optional[dict[str, Any]] = Field(
        None,
        description="Block properties as key-value pairs"
    )

    @field_validator('page_or_block')
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Reject blank targets."""
        return require_text(v, "Target page or block")


class AppendBlockInput(StrictInput):
    """Input model for logseq_append_block and logseq_prepend_block tools."""

    page: str = Field(
        min_length=1,
        description="Page name to add the block to"
    )

    content: str = Field(
        description="Markdown content for the new block"
    )

    properties: Optional[dict[str, Any]] = Field(
        None,
        description="Block properties as key-value pairs"
    )

    @field_validator('page')
    @classmethod
    def validate_page(cls, v: str) -> str:
        """Reject blank page names."""
        return require_text(v, "Page name")

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"page": "Meeting Notes", "content": "TODO send summary"},
                {"page": "Reading List", "content": "Dune", "properties": {"author": "Frank Herbert"}}
            ]
        }


class PrependBlockInput(AppendBlockInput):
    """Input model for logseq_prepend_block tool."""


class UpdateBlockInput(BaseBlockInput):
    """Input model for logseq_update_block tool."""

    content: str = Field(
        description="New markdown content for the block"
    )

    properties: Optional[dict[str, Any]] = Field(
        None,
        description="Updated block properties"
    )


class RemoveBlockInput(BaseBlockInput):
    """Input model for logseq_remove_block tool. Removal is irreversible."""


class MoveBlockInput(StrictInput):
    """Input model for logseq_move_block tool."""

    src_id: str = Field(
        min_length=1,
        description="UUID of the block to move"
    )

    target_id: str = Field(
        min_length=1,
        description="UUID of the destination block"
    )

    before: bool = Field(
        False,
        description="Place before target instead of after"
    )

    children: bool = Field(
        False,
        description="Move as a child of target"
    )

    @field_validator('src_id', 'target_id')
    @classmethod
    def validate_ids(cls, v: str) -> str:
        """Reject blank block identifiers."""
        return require_text(v, "Block UUID")


class BatchBlock(StrictInput):
    """One block of a batch insert, optionally with nested children."""

    content: str = Field(description="Block content")

    properties: Optional[dict[str, Any]] = Field(
        None,
        description="Block properties as key-value pairs"
    )

    children: Optional[list[BatchBlock]] = Field(
        None,
        description="Nested children blocks"
    )


class InsertBatchBlockInput(StrictInput):
    """Input model for logseq_insert_batch_blocks tool.

    Examples:
        >>> InsertBatchBlockInput(
        ...     page_or_block="Meeting Notes",
        ...     blocks=[{"content": "Agenda", "children": [{"content": "Budget"}]}],
        ... )
    """

    page_or_block: str = Field(
        min_length=1,
        description="Target page name or block UUID"
    )

    blocks: list[BatchBlock] = Field(
        min_length=1,
        description="Array of blocks to insert"
    )

    sibling: bool = Field(
        False,
        description="Insert as siblings of the target instead of children"
    )

    @field_validator('page_or_block')
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Reject blank targets."""
        return require_text(v, "Target page or block")

    def blocks_payload(self) -> list[dict[str, Any]]:
        """Return the blocks as plain dicts, dropping unset optional fields."""
        return [block.model_dump(exclude_none=True) for block in self.blocks]


class BlockPropertyInput(BaseBlockInput):
    """Input model for logseq_block_property tool.

    When ``value`` is supplied (``null`` included) the property is upserted;
    when it is omitted the block's current properties are read.
    """

    key: str = Field(
        min_length=1,
        description="Property key"
    )

    value: Any = Field(
        None,
        description="Property value (omit to read)"
    )

    @field_validator('key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Reject blank property keys."""
        return require_text(v, "Property key")

    @property
    def is_write(self) -> bool:
        return "value" in self.model_fields_set


class RemoveBlockPropertyInput(BaseBlockInput):
    """Input model for logseq_remove_block_property tool."""

    key: str = Field(
        min_length=1,
        description="Property key to remove"
    )

    @field_validator('key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Reject blank property keys."""
        return require_text(v, "Property key")
