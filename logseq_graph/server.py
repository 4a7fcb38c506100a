"""FastMCP server initialization and transport selection."""

import logging
import sys

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from logseq_graph.config import get_settings
from logseq_graph.constants import LOG_LEVEL
from logseq_graph.exceptions import ConfigurationError

SERVER_NAME = "logseq-graph-mcp"

# Initialize logger (stderr keeps the stdio transport clean)
logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP(SERVER_NAME, stateless_http=True, json_response=True)

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


@mcp.custom_route("/health", methods=["GET"])
async def health(request: Request) -> JSONResponse:
    """Liveness check for the HTTP transport."""
    return JSONResponse({"status": "ok", "server": SERVER_NAME})


def run_server():
    """Start the MCP server on the configured transport."""
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)

    if settings.transport == "http":
        mcp.settings.port = settings.port
        logger.info("Starting Logseq MCP Server on http://localhost:%s/mcp", settings.port)
        mcp.run(transport="streamable-http")
    else:
        logger.info("Starting Logseq MCP Server on stdio (Logseq API: %s)", settings.api_url)
        mcp.run(transport="stdio")

