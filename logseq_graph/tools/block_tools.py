"""Block manipulation MCP tools.

This module provides MCP tool wrappers for block operations:
- Retrieve a block (optionally with children)
- Insert, append, prepend and batch-insert blocks
- Update, move and remove blocks
- Read, write and remove block properties

All tools delegate to core operations in logseq_graph.core.block_operations.
"""
from __future__ import annotations

from logseq_graph.server import mcp
from logseq_graph.session import get_client
from logseq_graph.exceptions import LogseqError, to_tool_error
from logseq_graph.core.formatting import truncate_response
from logseq_graph.models import (
    GetBlockInput,
    InsertBlockInput,
    AppendBlockInput,
    PrependBlockInput,
    UpdateBlockInput,
    RemoveBlockInput,
    MoveBlockInput,
    InsertBatchBlockInput,
    BlockPropertyInput,
    RemoveBlockPropertyInput,
)
from logseq_graph.core.block_operations import (
    get_block,
    get_block_properties,
    insert_block,
    append_block,
    prepend_block,
    insert_batch_blocks,
    update_block,
    move_block,
    set_block_property,
    remove_block_property,
    remove_block,
)


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

@mcp.tool(
    annotations={
        "title": "Get Logseq Block",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_get_block(input: GetBlockInput) -> str:
    """Retrieve a specific block by UUID, optionally including its children.

    Args:
        input (GetBlockInput): Validated input containing:
            - id (str): Block UUID
            - include_children (bool): Include child blocks (default: False)

    Returns:
        Block entity as JSON. With children, an indented outline of the
        subtree precedes the raw JSON.

    Error Handling:
        - Block not found → Error asking to verify the UUID
    """
    try:
        text = await get_block(get_client(), input.id, include_children=input.include_children)
    except LogseqError as exc:
        raise to_tool_error("get block", exc) from exc
    return truncate_response(text)


# ==============================================================================
# INSERT OPERATIONS
# ==============================================================================

@mcp.tool(
    annotations={
        "title": "Insert Logseq Block",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def logseq_insert_block(input: InsertBlockInput) -> str:
    """Insert a new block relative to an existing page or block.

    Args:
        input (InsertBlockInput): Validated input containing:
            - page_or_block (str): Target page name or block UUID
            - content (str): Markdown content for the new block
            - sibling (bool): Insert as sibling (default: False, inserts as child)
            - before (bool): Insert before target (default: False)
            - properties (dict, optional): Block properties

    Returns:
        Confirmation followed by the created block entity as JSON.

    Examples:
        - Use when: Adding a child bullet under a specific block
        - Don't use: Adding to the end of a page → Use logseq_append_block()
        - Don't use: Several blocks at once → Use logseq_insert_batch_blocks()
    """
    try:
        text = await insert_block(
            get_client(),
            input.page_or_block,
            input.content,
            sibling=input.sibling,
            before=input.before,
            properties=input.properties,
        )
    except LogseqError as exc:
        raise to_tool_error("insert block", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Append Block to Page",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def logseq_append_block(input: AppendBlockInput) -> str:
    """Append a new block at the end of a page.

    Args:
        input (AppendBlockInput): Validated input containing:
            - page (str): Page name
            - content (str): Markdown content
            - properties (dict, optional): Block properties

    Returns:
        Confirmation followed by the created block entity as JSON.
    """
    try:
        text = await append_block(get_client(), input.page, input.content, input.properties)
    except LogseqError as exc:
        raise to_tool_error("append block", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Prepend Block to Page",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def logseq_prepend_block(input: PrependBlockInput) -> str:
    """Insert a new block at the top of a page.

    Args:
        input (PrependBlockInput): Same fields as logseq_append_block().

    Returns:
        Confirmation followed by the created block entity as JSON.
    """
    try:
        text = await prepend_block(get_client(), input.page, input.content, input.properties)
    except LogseqError as exc:
        raise to_tool_error("prepend block", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Insert Batch Blocks",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def logseq_insert_batch_blocks(input: InsertBatchBlockInput) -> str:
    """Insert multiple blocks at once under a page or block. Supports nested children.

    Args:
        input (InsertBatchBlockInput): Validated input containing:
            - page_or_block (str): Target page name or block UUID
            - blocks (list): At least one {content, properties?, children?}
            - sibling (bool): Insert as siblings (default: False)

    Returns:
        Count of created blocks followed by the block entities as JSON.

    Examples:
        - Use when: Writing an outline in one request
        - blocks=[{"content": "Agenda", "children": [{"content": "Budget"}]}]
    """
    try:
        text = await insert_batch_blocks(
            get_client(),
            input.page_or_block,
            input.blocks_payload(),
            sibling=input.sibling,
        )
    except LogseqError as exc:
        raise to_tool_error("insert batch blocks", exc) from exc
    return truncate_response(text)


# ==============================================================================
# UPDATE OPERATIONS
# ==============================================================================

@mcp.tool(
    annotations={
        "title": "Update Logseq Block",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_update_block(input: UpdateBlockInput) -> str:
    """Replace the content of an existing block.

    Args:
        input (UpdateBlockInput): Validated input containing:
            - id (str): Block UUID to update
            - content (str): New markdown content
            - properties (dict, optional): Updated properties
    """
    try:
        text = await update_block(get_client(), input.id, input.content, input.properties)
    except LogseqError as exc:
        raise to_tool_error("update block", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Move Logseq Block",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_move_block(input: MoveBlockInput) -> str:
    """Move a block to a new position relative to another block.

    Args:
        input (MoveBlockInput): Validated input containing:
            - src_id (str): UUID of the block to move
            - target_id (str): UUID of the destination block
            - before (bool): Place before target (default: False)
            - children (bool): Move as child of target (default: False)
    """
    try:
        text = await move_block(
            get_client(),
            input.src_id,
            input.target_id,
            before=input.before,
            children=input.children,
        )
    except LogseqError as exc:
        raise to_tool_error("move block", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Get/Set Block Property",
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_block_property(input: BlockPropertyInput) -> str:
    """Read or write a single property on a block.

    When 'value' is provided, the property is set (upsert).
    When 'value' is omitted, the block's current properties are returned.

    Args:
        input (BlockPropertyInput): Validated input containing:
            - id (str): Block UUID
            - key (str): Property key
            - value (any, optional): Property value to set

    Returns:
        The block's properties as JSON, or a confirmation of the update.
    """
    try:
        client = get_client()
        if input.is_write:
            text = await set_block_property(client, input.id, input.key, input.value)
        else:
            text = await get_block_properties(client, input.id)
    except LogseqError as exc:
        raise to_tool_error("access block property", exc) from exc
    return truncate_response(text)


@mcp.tool(
    annotations={
        "title": "Remove Block Property",
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def logseq_remove_block_property(input: RemoveBlockPropertyInput) -> str:
    """Remove a single property from a block."""
    try:
        text = await remove_block_property(get_client(), input.id, input.key)
    except LogseqError as exc:
        raise to_tool_error("remove block property", exc) from exc
    return truncate_response(text)


# ==============================================================================
# DELETE OPERATIONS
# ==============================================================================

@mcp.tool(
    annotations={
        "title": "Remove Logseq Block",
        "readOnlyHint": False,
        "destructiveHint": True,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def logseq_remove_block(input: RemoveBlockInput) -> str:
    """Permanently remove a block. This is irreversible.

    Args:
        input (RemoveBlockInput): Validated input containing:
            - id (str): Block UUID to remove
    """
    try:
        text = await remove_block(get_client(), input.id)
    except LogseqError as exc:
        raise to_tool_error("remove block", exc) from exc
    return truncate_response(text)
