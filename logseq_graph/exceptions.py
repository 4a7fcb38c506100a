"""Exception types raised by the Logseq client and core operations."""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp.exceptions import ToolError


class LogseqError(Exception):
    """Base class for every failure surfaced by this package."""


class ConfigurationError(LogseqError, ValueError):
    """Raised when settings are missing or malformed."""


class LogseqAPIError(LogseqError):
    """Raised when Logseq answers with an error status or an unreadable reply.

    Attributes:
        status_code: HTTP status returned by Logseq, or ``None`` when the
            failure happened before a status was available.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LogseqTimeoutError(LogseqAPIError):
    """Raised when Logseq does not reply within the request timeout."""


class LogseqConnectionError(LogseqError):
    """Raised when the Logseq HTTP API server cannot be reached."""


class LogseqNotFoundError(LogseqError):
    """Raised when a page, block or graph lookup comes back empty."""


def to_tool_error(action: str, exc: LogseqError, hint: str = "") -> ToolError:
    """Wrap a Logseq failure in the error type FastMCP reports to clients.

    Args:
        action: Short verb phrase describing what failed, e.g. ``"get page"``.
        exc: The underlying failure.
        hint: Optional sentence appended to the message.

    Returns:
        A :class:`ToolError` carrying a human-readable message. Not-found
        messages are passed through unchanged since they already say what to do.
    """
    if isinstance(exc, LogseqNotFoundError):
        return ToolError(str(exc))

    message = f"Failed to {action}: {exc}"
    if hint:
        message = f"{message.rstrip('.')}. {hint}"
    return ToolError(message)
