"""Data models for server settings."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LogseqSettings:
    """Normalized settings describing how to reach Logseq and serve MCP."""

    api_url: str
    api_token: str
    transport: str
    port: int
    log_level: str

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload with the token redacted."""
        return {
            "api_url": self.api_url,
            "api_token": "***" if self.api_token else "",
            "transport": self.transport,
            "port": self.port,
            "log_level": self.log_level,
        }
