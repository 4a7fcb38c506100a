"""Tests for response rendering helpers."""

from logseq_graph.constants import CHARACTER_LIMIT
from logseq_graph.core.formatting import (
    dump_json,
    format_page_summary,
    render_block_tree,
    truncate_response,
)


class TestRenderBlockTree:
    """Outline rendering of block trees."""

    def test_nested_blocks_indent_two_spaces_per_level(self):
        """A parent with one child renders as a two-line outline."""
        blocks = [{"content": "A", "children": [{"content": "B"}]}]
        assert render_block_tree(blocks) == "- A\n  - B"

    def test_siblings_and_deep_nesting(self):
        """Siblings share a depth and grandchildren indent further."""
        blocks = [
            {"content": "A", "children": [{"content": "B", "children": [{"content": "C"}]}]},
            {"content": "D"},
        ]
        assert render_block_tree(blocks) == "- A\n  - B\n    - C\n- D"

    def test_empty_block_is_skipped_but_children_render(self):
        """An empty block's own line is omitted; its children keep their depth."""
        blocks = [{"content": "", "children": [{"content": "B"}]}]
        assert render_block_tree(blocks) == "  - B"

    def test_whitespace_content_counts_as_empty(self):
        """Whitespace-only content is treated as empty and content is stripped."""
        blocks = [
            {"content": "   ", "children": [{"content": " B "}]},
            {"content": "C"},
        ]
        assert render_block_tree(blocks) == "  - B\n- C"

    def test_missing_content_and_children_keys(self):
        """Blocks without content or children keys are tolerated."""
        assert render_block_tree([{"uuid": "x"}, {"content": "A", "children": None}]) == "- A"

    def test_no_blank_lines_for_empty_subtrees(self):
        """Empty leaves do not leave blank lines behind."""
        blocks = [{"content": "A", "children": [{"content": ""}]}, {"content": "B"}]
        assert render_block_tree(blocks) == "- A\n- B"

    def test_start_depth(self):
        """A non-zero starting depth indents every line."""
        assert render_block_tree([{"content": "A"}], depth=2) == "    - A"

    def test_empty_list(self):
        """No blocks render as an empty string."""
        assert render_block_tree([]) == ""


class TestTruncateResponse:
    """Character budget enforcement."""

    def test_text_within_limit_is_unchanged(self):
        """Text at exactly the limit is returned as-is."""
        text = "x" * CHARACTER_LIMIT
        assert truncate_response(text) == text

    def test_long_text_is_cut_with_omitted_count(self):
        """Text over the limit keeps the first 100,000 characters plus a note."""
        length = CHARACTER_LIMIT + 1234
        text = "a" * CHARACTER_LIMIT + "b" * 1234
        result = truncate_response(text)

        assert result.startswith("a" * CHARACTER_LIMIT + "\n\n")
        assert "b" not in result[:CHARACTER_LIMIT]
        assert result.endswith(f"[Response truncated: {length - CHARACTER_LIMIT} characters omitted]")

    def test_custom_limit(self):
        """A custom limit is honoured."""
        assert truncate_response("abcdef", limit=3) == "abc\n\n[Response truncated: 3 characters omitted]"


class TestPageSummary:
    """Single-line page summaries."""

    def test_prefers_original_name(self):
        """The original (display) name wins over the lower-cased name."""
        page = {"name": "meeting notes", "originalName": "Meeting Notes", "uuid": "u1"}
        assert format_page_summary(page) == "- **Meeting Notes** (uuid: u1)"

    def test_journal_and_namespace_markers(self):
        """Journal pages and namespaced pages are marked."""
        page = {"name": "oct 27th, 2025", "uuid": "u2", "journal?": True, "namespace": {"id": 42}}
        assert format_page_summary(page) == "- **oct 27th, 2025** (uuid: u2) [journal] (ns: 42)"


def test_dump_json_keeps_unicode():
    """JSON dumps are indented and keep non-ASCII text readable."""
    assert dump_json({"name": "日記"}) == '{\n  "name": "日記"\n}'
