"""Page management MCP tools.

This module provides MCP tool wrappers for page operations:
- List pages with pagination and filters
- Retrieve page metadata and block content
- Create, delete and rename pages
- Retrieve linked references (backlinks)

All tools delegate to core operations in logseq_graph.core.page_operations.
"""
from __future__ import annotations

from logseq_graph.server import mcp
from logseq_graph.session import get_client
from logseq_graph.exceptions import LogseqError, to_tool_error
from logseq_graph.core.formatting import truncate_response
from logseq_graph.models import (
    ListPagesInput,
    GetPageInput,
    GetPageContentInput,
    CreatePageInput,
    DeletePageInput,
    RenamePageInput,
    GetPageLinkedReferencesInput,
)
from logseq_graph.core.page_operations import (
    list_pages,
    get_page,
    get_page_content,
    create_page,
    delete_page,
    rename_page,
    get_page_linked_references,
)


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

@mcp.tool(
    annotations={
        "title": "List Logseq Pages",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_list_pages(input: ListPagesInput) -> str:
    """List pages in the current Logseq graph with optional filtering.

    The input is validated automatically by Pydantic, providing detailed
    error messages for invalid inputs before any request reaches Logseq.

    Args:
        input (ListPagesInput): Validated input containing:
            - limit (int): Maximum pages to return, 1-500 (default: 50)
            - offset (int): Skip N pages for pagination (default: 0)
            - journal_only (bool): Only return journal pages (default: False)
            - namespace (str, optional): Filter by namespace prefix

    Returns:
        Markdown list of pages with uuid, journal flag and namespace info,
        headed by "(shown of total)" and followed by the next offset when more
        pages remain.

    Examples:
        - Use when: Browsing the graph or looking up exact page names
        - Use journal_only=True: To find recent daily notes
        - Don't use: Searching by content → Use logseq_search()

    Error Handling:
        - ValidationError: limit outside 1-500, negative offset, unknown field
        - Logseq unreachable → Error asking to enable the HTTP APIs server
    """
    try:
        text = await list_pages(
            get_client(),
            limit=input.limit,
            offset=input.offset,
            journal_only=input.journal_only,
            namespace=input.namespace,
        )
    except LogseqError as exc:
        raise to_tool_error(
            "list pages", exc, hint="Ensure Logseq is running with HTTP APIs enabled."
        ) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Get Logseq Page",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_get_page(input: GetPageInput) -> str:
    """Retrieve metadata for a specific page by name or UUID.

    Args:
        input (GetPageInput): Validated input containing:
            - name (str): Page name or UUID
            - include_children (bool): Include child blocks (default: False)

    Returns:
        Page entity as JSON (uuid, name, journal flag, properties, timestamps).

    Error Handling:
        - Page not found → Error suggesting logseq_list_pages()
    """
    try:
        text = await get_page(get_client(), input.name, include_children=input.include_children)
    except LogseqError as exc:
        raise to_tool_error("get page", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Get Logseq Page Content",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_get_page_content(input: GetPageContentInput) -> str:
    """Get the full block tree of a page rendered as indented Markdown.

    Each block becomes one "- content" line, indented two spaces per level.

    Args:
        input (GetPageContentInput): Validated input containing:
            - name (str): Page name

    Returns:
        "# <name>" followed by the outline, or a note that the page is empty.

    Examples:
        - Use when: Reading what a page says
        - Workflow: logseq_search() → logseq_get_page_content()
        - Don't use: Need block UUIDs → Use logseq_get_page(include_children=True)
    """
    try:
        text = await get_page_content(get_client(), input.name)
    except LogseqError as exc:
        raise to_tool_error("get page content", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Get Page Linked References",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_get_page_linked_references(input: GetPageLinkedReferencesInput) -> str:
    """Get all pages and blocks that link to a specific page (backlinks).

    Args:
        input (GetPageLinkedReferencesInput): Validated input containing:
            - name (str): Page name to find backlinks for

    Returns:
        List of referencing pages with the blocks that contain the link.
    """
    try:
        text = await get_page_linked_references(get_client(), input.name)
    except LogseqError as exc:
        raise to_tool_error("get linked references", exc) from exc
    return truncate_response(text)


# ==============================================================================
# WRITE OPERATIONS
# ==============================================================================

@mcp.tool(
    annotations={
        "title": "Create Logseq Page",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def logseq_create_page(input: CreatePageInput) -> str:
    """Create a new page in the Logseq graph.

    When content is given it is appended as the page's first block with a
    second request.

    Args:
        input (CreatePageInput): Validated input containing:
            - name (str): Page name
            - content (str, optional): Initial block content
            - properties (dict, optional): Page-level properties
            - format ("markdown" | "org"): Page format (default: markdown)
            - journal (bool): Create as journal page (default: False)

    Returns:
        Confirmation followed by the created page entity as JSON.

    Examples:
        - Use when: User asks to "create", "make" or "start" a page
        - Use logseq_create_journal(): For a dated journal page
    """
    try:
        text = await create_page(
            get_client(),
            input.name,
            content=input.content,
            properties=input.properties,
            format=input.format,
            journal=input.journal,
        )
    except LogseqError as exc:
        raise to_tool_error("create page", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Delete Logseq Page",
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def logseq_delete_page(input: DeletePageInput) -> str:
    """Permanently delete a page from the Logseq graph. This is irreversible.

    Always confirm with the user before calling.

    Args:
        input (DeletePageInput): Validated input containing:
            - name (str): Name of the page to delete
    """
    try:
        text = await delete_page(get_client(), input.name)
    except LogseqError as exc:
        raise to_tool_error("delete page", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Rename Logseq Page",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_rename_page(input: RenamePageInput) -> str:
    """Rename an existing page. Logseq updates all references in the graph.

    Args:
        input (RenamePageInput): Validated input containing:
            - old_name (str): Current page name
            - new_name (str): New page name (must differ from old_name)
    """
    try:
        text = await rename_page(get_client(), input.old_name, input.new_name)
    except LogseqError as exc:
        raise to_tool_error("rename page", exc) from exc
    return truncate_response(text)
