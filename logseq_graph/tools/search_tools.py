"""Search, journal and graph tools for Logseq.

This module contains MCP tool wrappers for discovery operations:
- logseq_search: Full-text search across the graph
- logseq_create_journal: Create a journal page for a date
- logseq_get_graph_info: Describe the currently open graph
- logseq_get_all_tags: List tags used across the graph
"""
from __future__ import annotations

from logseq_graph.server import mcp
from logseq_graph.session import get_client
from logseq_graph.exceptions import LogseqError, to_tool_error
from logseq_graph.core.formatting import truncate_response
from logseq_graph.models import (
    SearchInput,
    CreateJournalInput,
    GetGraphInfoInput,
    GetAllTagsInput,
)
from logseq_graph.core.search_operations import (
    search,
    create_journal,
    get_graph_info,
    get_all_tags,
)


# ==============================================================================
# SEARCH
# ==============================================================================


@mcp.tool(
    annotations={
        "title": "Search Logseq",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_search(input: SearchInput) -> str:
    """Full-text search across the entire Logseq graph.

    The input is validated automatically by Pydantic, ensuring the query is
    not empty and at most 500 characters before Logseq is contacted.

    Args:
        input (SearchInput): Validated input containing:
            - query (str): Search query (1-500 chars)

    Returns:
        Markdown with a "Pages" section listing matching page names and a
        "Blocks" section with one JSON line per matching block, or a hint to
        broaden the query when nothing matched.

    Examples:
        - Use when: Looking for a concept without knowing which page holds it
        - Workflow: logseq_search() → logseq_get_page_content()
        - Don't use: Browsing page names → Use logseq_list_pages()
    """
    try:
        text = await search(get_client(), input.query)
    except LogseqError as exc:
        raise to_tool_error("search", exc) from exc
    return truncate_response(text)


# ==============================================================================
# JOURNAL
# ==============================================================================


@mcp.tool(
    annotations={
        "title": "Create Journal Page",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_create_journal(input: CreateJournalInput) -> str:
    """Create a journal page for a specific date.

    Args:
        input (CreateJournalInput): Validated input containing:
            - date (str): Date in 'YYYY-MM-DD' format or natural date string

    Returns:
        Confirmation followed by the journal page entity as JSON.
    """
    try:
        text = await create_journal(get_client(), input.date)
    except LogseqError as exc:
        raise to_tool_error("create journal page", exc) from exc
    return truncate_response(text)


# ==============================================================================
# GRAPH
# ==============================================================================


@mcp.tool(
    annotations={
        "title": "Get Graph Info",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_get_graph_info(input: GetGraphInfoInput) -> str:
    """Get the name, path and URL of the graph currently open in Logseq."""
    try:
        text = await get_graph_info(get_client())
    except LogseqError as exc:
        raise to_tool_error("get graph info", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Get All Tags",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_get_all_tags(input: GetAllTagsInput) -> str:
    """List all tags used across the Logseq graph.

    Returns:
        "**Tags** (n)" followed by one "- name (uuid: ...)" line per tag.
    """
    try:
        text = await get_all_tags(get_client())
    except LogseqError as exc:
        raise to_tool_error("get tags", exc) from exc
    return truncate_response(text)
