"""Module-level constants for the Logseq MCP server."""

from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "logseq.yaml"
DEFAULT_API_URL = "http://127.0.0.1:12315"
DEFAULT_TRANSPORT = "stdio"
DEFAULT_PORT = 3000
TRANSPORTS = ("stdio", "http")

# HTTP API
API_PATH = "/api"
REQUEST_TIMEOUT_S = 30.0

# Limits
CHARACTER_LIMIT = 100_000
DEFAULT_PAGE_LIMIT = 50
MAX_PAGE_LIMIT = 500
MAX_QUERY_LENGTH = 500

# Logging
LOG_LEVEL = "INFO"
