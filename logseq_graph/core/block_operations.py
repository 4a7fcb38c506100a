"""Core logic for block operations."""

from __future__ import annotations

import logging
from typing import Any, Optional

from logseq_graph.client import LogseqClient
from logseq_graph.core.formatting import dump_json, render_block_tree
from logseq_graph.exceptions import LogseqNotFoundError

logger = logging.getLogger(__name__)


# ==============================================================================
# READ OPERATIONS
# ==============================================================================


async def get_block(client: LogseqClient, block_id: str, include_children: bool = False) -> str:
    """Return a block as JSON, prefixed with an outline when children were requested.

    Raises:
        LogseqNotFoundError: If no block has the given UUID.
    """
    block = await client.get_block(block_id, include_children=include_children)
    if not block:
        raise LogseqNotFoundError(f"Block '{block_id}' not found. Verify the UUID is correct.")

    if include_children and block.get("children"):
        tree = render_block_tree([block])
        return f"**Block {block.get('uuid', block_id)}**\n\n{tree}\n\n---\nRaw:\n{dump_json(block)}"

    return dump_json(block)


async def get_block_properties(client: LogseqClient, block_id: str) -> str:
    properties = await client.get_block_properties(block_id)
    return dump_json(properties or {})


# ==============================================================================
# INSERT OPERATIONS
# ==============================================================================


async def insert_block(
    client: LogseqClient,
    target: str,
    content: str,
    sibling: bool = False,
    before: bool = False,
    properties: Optional[dict[str, Any]] = None,
) -> str:
    """Insert a block next to or under ``target`` (page name or block UUID)."""
    block = await client.insert_block(
        target,
        content,
        sibling=sibling,
        before=before,
        properties=properties,
    )
    logger.info("Inserted block relative to '%s'", target)
    return f"Block inserted successfully.\n\n{dump_json(block)}"


async def append_block(
    client: LogseqClient,
    page: str,
    content: str,
    properties: Optional[dict[str, Any]] = None,
) -> str:
    block = await client.append_block_in_page(page, content, properties)
    logger.info("Appended block to page '%s'", page)
    return f"Block appended to '{page}'.\n\n{dump_json(block)}"


async def prepend_block(
    client: LogseqClient,
    page: str,
    content: str,
    properties: Optional[dict[str, Any]] = None,
) -> str:
    block = await client.prepend_block_in_page(page, content, properties)
    logger.info("Prepended block to page '%s'", page)
    return f"Block prepended to '{page}'.\n\n{dump_json(block)}"


async def insert_batch_blocks(
    client: LogseqClient,
    target: str,
    blocks: list[dict[str, Any]],
    sibling: bool = False,
) -> str:
    """Insert several (possibly nested) blocks in one call."""
    created = await client.insert_batch_block(target, blocks, sibling=sibling)
    logger.info("Inserted %d blocks relative to '%s'", len(created), target)
    return f"{len(created)} blocks inserted successfully.\n\n{dump_json(created)}"


# ==============================================================================
# UPDATE OPERATIONS
# ==============================================================================


async def update_block(
    client: LogseqClient,
    block_id: str,
    content: str,
    properties: Optional[dict[str, Any]] = None,
) -> str:
    await client.update_block(block_id, content, properties)
    logger.info("Updated block '%s'", block_id)
    return f"Block '{block_id}' updated successfully."


async def move_block(
    client: LogseqClient,
    src_id: str,
    target_id: str,
    before: bool = False,
    children: bool = False,
) -> str:
    await client.move_block(src_id, target_id, before=before, children=children)
    logger.info("Moved block '%s' to '%s'", src_id, target_id)
    return f"Block '{src_id}' moved to '{target_id}'."


async def set_block_property(client: LogseqClient, block_id: str, key: str, value: Any) -> str:
    await client.upsert_block_property(block_id, key, value)
    logger.info("Set property '%s' on block '%s'", key, block_id)
    return f"Property '{key}' set on block '{block_id}'."


async def remove_block_property(client: LogseqClient, block_id: str, key: str) -> str:
    await client.remove_block_property(block_id, key)
    logger.info("Removed property '%s' from block '%s'", key, block_id)
    return f"Property '{key}' removed from block '{block_id}'."


# ==============================================================================
# DELETE OPERATIONS
# ==============================================================================


async def remove_block(client: LogseqClient, block_id: str) -> str:
    await client.remove_block(block_id)
    logger.info("Removed block '%s'", block_id)
    return f"Block '{block_id}' removed successfully."
