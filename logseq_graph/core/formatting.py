"""Text rendering helpers shared by the core operations."""

from __future__ import annotations

import json
from typing import Any, Iterable

from logseq_graph.constants import CHARACTER_LIMIT


def truncate_response(text: str, limit: int = CHARACTER_LIMIT) -> str:
    """Cap a tool response at ``limit`` characters.

    Args:
        text: Fully rendered response text.
        limit: Maximum number of characters to keep.

    Returns:
        ``text`` unchanged when it fits, otherwise its first ``limit`` characters
        followed by a note stating how many characters were dropped.
    """
    if len(text) <= limit:
        return text
    omitted = len(text) - limit
    return f"{text[:limit]}\n\n[Response truncated: {omitted} characters omitted]"


def dump_json(value: Any) -> str:
    """Serialize a Logseq entity for display."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def _block_lines(blocks: Iterable[dict[str, Any]], depth: int) -> list[str]:
    lines: list[str] = []
    indent = "  " * depth
    for block in blocks:
        content = (block.get("content") or "").strip()
        if content:
            lines.append(f"{indent}- {content}")
        children = block.get("children") or []
        # Children of an empty block keep their own depth.
        lines.extend(_block_lines(children, depth + 1))
    return lines


def render_block_tree(blocks: Iterable[dict[str, Any]], depth: int = 0) -> str:
    """Render a block tree as an indented Markdown outline.

    One ``- content`` line is emitted per block, indented two spaces per level.
    Blocks whose content is empty are skipped but their children are still
    rendered one level below where the block would have been.

    Examples:
        >>> render_block_tree([{"content": "A", "children": [{"content": "B"}]}])
        '- A\\n  - B'
    """
    return "\n".join(_block_lines(blocks, depth))


def page_display_name(page: dict[str, Any]) -> str:
    return page.get("originalName") or page.get("name") or ""


def format_page_summary(page: dict[str, Any]) -> str:
    """Format a page entity as a single Markdown list item."""
    journal = " [journal]" if page.get("journal?") else ""
    namespace = page.get("namespace")
    ns = f" (ns: {namespace.get('id')})" if isinstance(namespace, dict) else ""
    return f"- **{page_display_name(page)}** (uuid: {page.get('uuid')}){journal}{ns}"
