"""Search, journal, tag and graph operations."""

from __future__ import annotations

import json
import logging
from typing import Any

from logseq_graph.client import LogseqClient
from logseq_graph.core.formatting import dump_json, page_display_name
from logseq_graph.exceptions import LogseqNotFoundError

logger = logging.getLogger(__name__)


def _search_hit(hit: Any) -> str:
    """Render one block hit from ``logseq.App.search`` on a single line."""
    if isinstance(hit, (dict, list)):
        return json.dumps(hit, ensure_ascii=False)
    return str(hit)


async def search(client: LogseqClient, query: str) -> str:
    """Run a full-text search and list matching pages and blocks."""
    result = await client.search(query)
    pages = result.get("pages") or []
    blocks = result.get("blocks") or []

    logger.info(
        "Search for '%s' matched %d pages and %d blocks",
        query,
        len(pages),
        len(blocks),
    )

    lines = [f"**Search results for '{query}'**", ""]

    if pages:
        lines.append(f"### Pages ({len(pages)})")
        lines.extend(f"- {page}" for page in pages)
        lines.append("")

    if blocks:
        lines.append(f"### Blocks ({len(blocks)})")
        lines.extend(f"- {_search_hit(block)}" for block in blocks)
        lines.append("")

    if not pages and not blocks:
        lines.append(f"No results found for '{query}'. Try broader search terms.")

    return "\n".join(lines).rstrip("\n")


async def create_journal(client: LogseqClient, date: str) -> str:
    page = await client.create_journal_page(date)
    logger.info("Created journal page for '%s'", date)
    return f"Journal page created for '{date}'.\n\n{dump_json(page)}"


async def get_graph_info(client: LogseqClient) -> str:
    """Describe the graph currently open in Logseq.

    Raises:
        LogseqNotFoundError: If Logseq has no graph open.
    """
    graph = await client.get_current_graph()
    if not graph:
        raise LogseqNotFoundError("No graph is currently open in Logseq.")
    return dump_json(graph)


async def get_all_tags(client: LogseqClient) -> str:
    tags = await client.get_all_tags()
    if not tags:
        return "No tags found in the current graph."

    lines = [f"**Tags** ({len(tags)})", ""]
    lines.extend(f"- {page_display_name(tag)} (uuid: {tag.get('uuid')})" for tag in tags)
    return "\n".join(lines)
