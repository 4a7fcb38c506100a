"""Logseq Graph MCP Server

Logseq page, block, journal and search operations via Model Context Protocol,
backed by Logseq's local HTTP API.
"""

from logseq_graph.client import LogseqClient
from logseq_graph.config import get_settings, load_settings
from logseq_graph.data_models import LogseqSettings
from logseq_graph.session import get_client
from logseq_graph.server import mcp, run_server

# Import tools to register them with the MCP server
from logseq_graph import tools  # noqa: F401

__version__ = "1.0.0"
__all__ = [
    "LogseqClient",
    "LogseqSettings",
    "get_settings",
    "load_settings",
    "get_client",
    "mcp",
    "run_server",
]
