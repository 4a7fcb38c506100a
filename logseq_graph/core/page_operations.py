"""Core logic for page operations."""

from __future__ import annotations

import logging
from typing import Any, Optional

from logseq_graph.client import LogseqClient
from logseq_graph.core.formatting import (
    dump_json,
    format_page_summary,
    page_display_name,
    render_block_tree,
)
from logseq_graph.exceptions import LogseqNotFoundError

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def filter_pages(
    pages: list[dict[str, Any]],
    journal_only: bool = False,
    namespace: Optional[str] = None,
) -> list[dict[str, Any]]:
    """Apply the journal and namespace filters of ``logseq_list_pages``.

    Args:
        pages: Page entities as returned by ``getAllPages``.
        journal_only: Keep only pages flagged ``journal?``.
        namespace: Keep only pages whose lower-cased name starts with
            ``"<namespace>/"``.

    Returns:
        The filtered pages in their original order.
    """
    if journal_only:
        pages = [page for page in pages if page.get("journal?")]

    if namespace:
        prefix = f"{namespace.lower()}/"
        pages = [page for page in pages if (page.get("name") or "").lower().startswith(prefix)]

    return pages


# ==============================================================================
# READ OPERATIONS
# ==============================================================================


async def list_pages(
    client: LogseqClient,
    limit: int,
    offset: int,
    journal_only: bool = False,
    namespace: Optional[str] = None,
) -> str:
    """List one window of pages as a Markdown list with pagination hints."""
    pages = filter_pages(await client.get_all_pages(), journal_only, namespace)

    total = len(pages)
    window = pages[offset:offset + limit]
    next_offset = offset + limit

    lines = [f"**Pages** ({len(window)} of {total})", ""]
    lines.extend(format_page_summary(page) for page in window)

    if next_offset < total:
        lines.extend([
            "",
            f"_More pages available. Use offset={next_offset} to see next batch._",
        ])

    return "\n".join(lines)


async def get_page(client: LogseqClient, name: str, include_children: bool = False) -> str:
    """Return page metadata as JSON.

    Raises:
        LogseqNotFoundError: If Logseq has no page called ``name``.
    """
    page = await client.get_page(name, include_children=include_children)
    if not page:
        raise LogseqNotFoundError(
            f"Page '{name}' not found. Use logseq_list_pages to see available pages."
        )
    return dump_json(page)


async def get_page_content(client: LogseqClient, name: str) -> str:
    """Return a page's block tree rendered as an indented outline."""
    blocks = await client.get_page_blocks_tree(name)
    if not blocks:
        return f"Page '{name}' is empty or has no blocks."

    return f"# {name}\n\n{render_block_tree(blocks)}"


async def get_page_linked_references(client: LogseqClient, name: str) -> str:
    """Return the pages and blocks that link to ``name``."""
    refs = await client.get_page_linked_references(name)
    if not refs:
        return f"No linked references found for page '{name}'."

    lines = [f"**Linked references for '{name}'** ({len(refs)} pages)", ""]
    for page, blocks in refs:
        lines.append(f"### {page_display_name(page or {})}")
        for block in blocks or []:
            lines.append(f"  - {(block.get('content') or '').strip()}")
        lines.append("")

    return "\n".join(lines).rstrip("\n")


# ==============================================================================
# WRITE OPERATIONS
# ==============================================================================


async def create_page(
    client: LogseqClient,
    name: str,
    content: Optional[str] = None,
    properties: Optional[dict[str, Any]] = None,
    format: str = "markdown",
    journal: bool = False,
) -> str:
    """Create a page and, when ``content`` is given, append it as the first block."""
    page = await client.create_page(name, properties, format=format, journal=journal)

    if content:
        await client.append_block_in_page(name, content)

    logger.info("Created page '%s'", name)
    return f"Page '{name}' created successfully.\n\n{dump_json(page)}"


async def delete_page(client: LogseqClient, name: str) -> str:
    await client.delete_page(name)
    logger.info("Deleted page '%s'", name)
    return f"Page '{name}' deleted successfully."


async def rename_page(client: LogseqClient, old_name: str, new_name: str) -> str:
    await client.rename_page(old_name, new_name)
    logger.info("Renamed page '%s' to '%s'", old_name, new_name)
    return f"Page renamed from '{old_name}' to '{new_name}'."
