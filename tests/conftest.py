"""Shared fixtures: a fake Logseq HTTP API behind httpx.MockTransport."""

import json
from typing import Any

import httpx
import pytest

from logseq_graph.client import LogseqClient
from logseq_graph.tools import block_tools, page_tools, search_tools

TEST_TOKEN = "test-token"
TEST_URL = "http://logseq.test:12315"


class FakeLogseq:
    """Records every API call and answers with canned replies per method."""

    def __init__(self) -> None:
        self.replies: dict[str, httpx.Response] = {}
        self.failures: dict[str, type[httpx.HTTPError]] = {}
        self.calls: list[dict[str, Any]] = []
        self.headers: list[httpx.Headers] = []

    def reply(self, method: str, result: Any = None, status_code: int = 200) -> None:
        self.replies[method] = httpx.Response(status_code, content=json.dumps(result).encode())

    def reply_raw(self, method: str, body: bytes, status_code: int = 200) -> None:
        self.replies[method] = httpx.Response(status_code, content=body)

    def fail(self, method: str, error: type[httpx.HTTPError]) -> None:
        self.failures[method] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.calls.append(payload)
        self.headers.append(request.headers)

        method = payload["method"]
        if method in self.failures:
            raise self.failures[method]("simulated failure", request=request)
        return self.replies.get(method, httpx.Response(200, content=b"null"))

    @property
    def methods(self) -> list[str]:
        return [call["method"] for call in self.calls]


@pytest.fixture
def logseq() -> FakeLogseq:
    return FakeLogseq()


@pytest.fixture
def client(logseq: FakeLogseq) -> LogseqClient:
    return LogseqClient(TEST_TOKEN, TEST_URL, transport=httpx.MockTransport(logseq.handler))


@pytest.fixture
def tool_client(monkeypatch: pytest.MonkeyPatch, client: LogseqClient) -> LogseqClient:
    """Point every tool module at the fake Logseq."""
    for module in (page_tools, block_tools, search_tools):
        monkeypatch.setattr(module, "get_client", lambda: client)
    return client
