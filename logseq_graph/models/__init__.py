"""Pydantic input models for MCP tool validation.

This package defines Pydantic models that provide automatic input validation
for all MCP tools. Each model represents the input schema for one or more tools,
with field-level validation, type checking, and descriptive error messages.
Every model rejects fields it does not declare.

Architecture:
- base: Base models (StrictInput, BasePageInput, BaseBlockInput)
- page_models: Input models for page operations
- block_models: Input models for block operations
- search_models: Input models for search, journal and graph operations

Usage:
    from logseq_graph.models import ListPagesInput, GetBlockInput
"""

from .base import StrictInput, BasePageInput, BaseBlockInput
from .page_models import (
    ListPagesInput,
    GetPageInput,
    GetPageContentInput,
    CreatePageInput,
    DeletePageInput,
    RenamePageInput,
    GetPageLinkedReferencesInput,
)
from .block_models import (
    GetBlockInput,
    InsertBlockInput,
    AppendBlockInput,
    PrependBlockInput,
    UpdateBlockInput,
    RemoveBlockInput,
    MoveBlockInput,
    BatchBlock,
    InsertBatchBlockInput,
    BlockPropertyInput,
    RemoveBlockPropertyInput,
)
from .search_models import (
    SearchInput,
    CreateJournalInput,
    GetGraphInfoInput,
    GetAllTagsInput,
)

__all__ = [
    # Base models
    "StrictInput",
    "BasePageInput",
    "BaseBlockInput",
    # Page models
    "ListPagesInput",
    "GetPageInput",
    "GetPageContentInput",
    "CreatePageInput",
    "DeletePageInput",
    "RenamePageInput",
    "GetPageLinkedReferencesInput",
    # Block models
    "GetBlockInput",
    "InsertBlockInput",
    "AppendBlockInput",
    "PrependBlockInput",
    "UpdateBlockInput",
    "RemoveBlockInput",
    "MoveBlockInput",
    "BatchBlock",
    "InsertBatchBlockInput",
    "BlockPropertyInput",
    "RemoveBlockPropertyInput",
    # Search, journal and graph models
    "SearchInput",
    "CreateJournalInput",
    "GetGraphInfoInput",
    "GetAllTagsInput",
]
