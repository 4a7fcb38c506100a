"""Tests for the MCP tool layer: registration, validation and error reporting."""

import httpx
import pytest
from mcp.server.fastmcp.exceptions import ToolError

from logseq_graph import mcp
from logseq_graph.constants import CHARACTER_LIMIT
from logseq_graph.exceptions import ConfigurationError
from logseq_graph.models import (
    BlockPropertyInput,
    GetPageContentInput,
    GetPageInput,
    InsertBatchBlockInput,
    ListPagesInput,
    SearchInput,
)
from logseq_graph.tools.block_tools import logseq_block_property, logseq_insert_batch_blocks
from logseq_graph.tools.page_tools import (
    logseq_get_page,
    logseq_get_page_content,
    logseq_list_pages,
)
from logseq_graph.tools import search_tools
from logseq_graph.tools.search_tools import logseq_search

EXPECTED_TOOLS = {
    "logseq_list_pages",
    "logseq_get_page",
    "logseq_get_page_content",
    "logseq_create_page",
    "logseq_delete_page",
    "logseq_rename_page",
    "logseq_get_page_linked_references",
    "logseq_get_block",
    "logseq_insert_block",
    "logseq_append_block",
    "logseq_prepend_block",
    "logseq_update_block",
    "logseq_remove_block",
    "logseq_move_block",
    "logseq_insert_batch_blocks",
    "logseq_block_property",
    "logseq_remove_block_property",
    "logseq_search",
    "logseq_create_journal",
    "logseq_get_graph_info",
    "logseq_get_all_tags",
}


class TestRegistration:
    """The tool catalogue exposed to MCP clients."""

    @pytest.mark.asyncio
    async def test_all_tools_registered(self):
        tools = await mcp.list_tools()
        assert {tool.name for tool in tools} == EXPECTED_TOOLS

    @pytest.mark.asyncio
    async def test_annotations(self):
        """Read-only and destructive hints match what each tool does."""
        tools = {tool.name: tool for tool in await mcp.list_tools()}

        assert tools["logseq_list_pages"].annotations.readOnlyHint is True
        assert tools["logseq_search"].annotations.readOnlyHint is True
        assert tools["logseq_delete_page"].annotations.destructiveHint is True
        assert tools["logseq_remove_block"].annotations.destructiveHint is True
        assert tools["logseq_create_page"].annotations.readOnlyHint is False
        assert tools["logseq_get_page"].annotations.title == "Get Logseq Page"


class TestValidation:
    """Invalid arguments are rejected before Logseq is contacted."""

    @pytest.mark.asyncio
    async def test_limit_out_of_range(self, tool_client, logseq):
        with pytest.raises(ToolError):
            await mcp.call_tool("logseq_list_pages", {"input": {"limit": 501}})
        assert logseq.calls == []

    @pytest.mark.asyncio
    async def test_blank_page_name(self, tool_client, logseq):
        with pytest.raises(ToolError):
            await mcp.call_tool("logseq_get_page", {"input": {"name": "   "}})
        assert logseq.calls == []

    @pytest.mark.asyncio
    async def test_query_too_long(self, tool_client, logseq):
        with pytest.raises(ToolError):
            await mcp.call_tool("logseq_search", {"input": {"query": "x" * 501}})
        assert logseq.calls == []

    @pytest.mark.asyncio
    async def test_unknown_field(self, tool_client, logseq):
        with pytest.raises(ToolError):
            await mcp.call_tool("logseq_get_block", {"input": {"id": "b1", "depth": 3}})
        assert logseq.calls == []


class TestErrorReporting:
    """Logseq failures become ToolErrors with readable messages."""

    @pytest.mark.asyncio
    async def test_not_found_message_passes_through(self, tool_client, logseq):
        with pytest.raises(ToolError) as exc_info:
            await logseq_get_page(GetPageInput(name="Nowhere"))

        assert str(exc_info.value) == "Page 'Nowhere' not found. Use logseq_list_pages to see available pages."

    @pytest.mark.asyncio
    async def test_api_error_names_the_action(self, tool_client, logseq):
        logseq.reply_raw("logseq.App.search", b"internal", status_code=500)

        with pytest.raises(ToolError) as exc_info:
            await logseq_search(SearchInput(query="review"))

        assert str(exc_info.value) == "Failed to search: Logseq API error 500: internal"

    @pytest.mark.asyncio
    async def test_timeout_message(self, tool_client, logseq):
        logseq.fail("logseq.Editor.getPageBlocksTree", httpx.ConnectTimeout)

        with pytest.raises(ToolError, match="timed out"):
            await logseq_get_page_content(GetPageContentInput(name="Home"))

    @pytest.mark.asyncio
    async def test_list_pages_hint(self, tool_client, logseq):
        """Listing failures suggest enabling the HTTP APIs server."""
        logseq.reply_raw("logseq.Editor.getAllPages", b"", status_code=401)

        with pytest.raises(ToolError) as exc_info:
            await logseq_list_pages(ListPagesInput())

        assert str(exc_info.value) == (
            "Failed to list pages: Logseq API error 401: Unauthorized. "
            "Ensure Logseq is running with HTTP APIs enabled."
        )

    @pytest.mark.asyncio
    async def test_missing_token_is_reported(self, monkeypatch, logseq):
        """Configuration problems surface as tool errors instead of crashing."""

        def broken_client():
            raise ConfigurationError("LOGSEQ_API_TOKEN environment variable is required.")

        monkeypatch.setattr(search_tools, "get_client", broken_client)

        with pytest.raises(ToolError, match="LOGSEQ_API_TOKEN"):
            await logseq_search(SearchInput(query="review"))


class TestToolResults:
    """Successful tool calls."""

    @pytest.mark.asyncio
    async def test_large_page_is_truncated(self, tool_client, logseq):
        """Responses over the character budget are cut with an omission note."""
        logseq.reply("logseq.Editor.getPageBlocksTree", [{"content": "x" * (CHARACTER_LIMIT + 50)}])

        text = await logseq_get_page_content(GetPageContentInput(name="Big"))

        assert text.endswith("characters omitted]")
        assert len(text) < CHARACTER_LIMIT + 100

    @pytest.mark.asyncio
    async def test_block_property_read_and_write(self, tool_client, logseq):
        """Omitting value reads properties; providing one upserts it."""
        logseq.reply("logseq.Editor.getBlockProperties", {"status": "todo"})

        read = await logseq_block_property(BlockPropertyInput(id="b1", key="status"))
        write = await logseq_block_property(BlockPropertyInput(id="b1", key="status", value="done"))

        assert '"status": "todo"' in read
        assert write == "Property 'status' set on block 'b1'."
        assert logseq.methods == ["logseq.Editor.getBlockProperties", "logseq.Editor.upsertBlockProperty"]
        assert logseq.calls[1]["args"] == ["b1", "status", "done"]

    @pytest.mark.asyncio
    async def test_batch_sends_nested_payload(self, tool_client, logseq):
        logseq.reply("logseq.Editor.insertBatchBlock", [{"uuid": "a"}, {"uuid": "b"}])

        text = await logseq_insert_batch_blocks(
            InsertBatchBlockInput(
                page_or_block="Home",
                blocks=[{"content": "A", "children": [{"content": "B"}]}],
            )
        )

        assert text.startswith("2 blocks inserted successfully.")
        assert logseq.calls[0]["args"][1] == [{"content": "A", "children": [{"content": "B"}]}]
