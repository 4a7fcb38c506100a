"""Client resolution for tool invocations."""

from __future__ import annotations

from logseq_graph.client import LogseqClient
from logseq_graph.config import get_settings


def get_client() -> LogseqClient:
    """Build the Logseq client used by a tool invocation.

    The client holds no connection state, so every invocation gets its own
    instance built from the process-wide settings.

    Returns:
        A :class:`LogseqClient` pointed at the configured API URL.

    Raises:
        ConfigurationError: If settings cannot be loaded (e.g. no token).
    """
    settings = get_settings()
    return LogseqClient(settings.api_token, settings.api_url)
