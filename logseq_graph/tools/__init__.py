"""MCP tool definitions for Logseq graph operations.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from logseq_graph.tools import page_tools
from logseq_graph.tools import block_tools
from logseq_graph.tools import search_tools

__all__ = [
    "page_tools",
    "block_tools",
    "search_tools",
]
