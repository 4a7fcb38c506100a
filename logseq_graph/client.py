"""Async client for the Logseq local HTTP API.

Logseq exposes a single ``POST /api`` endpoint. Every plugin SDK method
(``logseq.Editor.*``, ``logseq.App.*``, ...) is invoked by naming the method and
passing its positional arguments:

    {"method": "logseq.Editor.getPage", "args": ["My Page", {}]}

Each call opens its own ``httpx.AsyncClient``, sends exactly one request and is
never retried.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from logseq_graph.constants import API_PATH, DEFAULT_API_URL, REQUEST_TIMEOUT_S
from logseq_graph.exceptions import (
    LogseqAPIError,
    LogseqConnectionError,
    LogseqTimeoutError,
)

logger = logging.getLogger(__name__)


class LogseqClient:
    """Thin wrapper around the Logseq HTTP API.

    Args:
        token: Bearer token generated in Logseq's API panel.
        base_url: Base URL of the Logseq HTTP API server. Trailing slashes are
            ignored. Defaults to :data:`DEFAULT_API_URL`.
        timeout: Seconds to wait for a reply before giving up.
        transport: Optional httpx transport, used by tests to stand in for Logseq.
    """

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{API_PATH}"

    # ==========================================================================
    # LOW-LEVEL REQUEST
    # ==========================================================================

    async def call(self, method: str, args: Optional[list[Any]] = None) -> Any:
        """Invoke a Logseq plugin SDK method.

        Args:
            method: Fully-qualified method name, e.g. ``"logseq.Editor.getPage"``.
            args: Positional arguments for the method.

        Returns:
            The decoded JSON reply, or ``None`` when Logseq sends an empty body.

        Raises:
            LogseqTimeoutError: If no reply arrives within ``timeout`` seconds.
            LogseqAPIError: If Logseq answers with a non-2xx status or a body
                that is not valid JSON.
            LogseqConnectionError: If the server cannot be reached at all.
        """
        body = {"method": method, "args": list(args or [])}
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token}",
        }

        logger.debug("Calling %s with %d argument(s)", method, len(body["args"]))

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                # One deadline covers connect, upload and the full body read.
                response = await asyncio.wait_for(
                    client.post(self.endpoint, json=body, headers=headers),
                    timeout=self.timeout,
                )
            except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
                logger.warning("Request for %s timed out after %ss", method, self.timeout)
                raise LogseqTimeoutError(
                    f"Logseq API request timed out after {self.timeout:g}s. "
                    "Ensure Logseq is running and the HTTP API server is started."
                ) from exc
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                logger.warning("Request for %s failed: %s", method, exc)
                raise LogseqConnectionError(
                    f"Could not reach Logseq at {self.endpoint}: {exc}. "
                    "Ensure Logseq is running and the HTTP API server is started."
                ) from exc

        if not response.is_success:
            detail = response.text.strip() or response.reason_phrase
            logger.warning("Logseq returned %s for %s", response.status_code, method)
            raise LogseqAPIError(
                f"Logseq API error {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        if not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise LogseqAPIError(
                f"Logseq API returned a malformed reply for {method}: {response.text[:200]!r}",
                status_code=response.status_code,
            ) from exc

    # ==========================================================================
    # PAGE OPERATIONS
    # ==========================================================================

    async def get_all_pages(self) -> list[dict[str, Any]]:
        return await self.call("logseq.Editor.getAllPages") or []

    async def get_page(
        self,
        name_or_id: str | int,
        include_children: bool = False,
    ) -> Optional[dict[str, Any]]:
        return await self.call(
            "logseq.Editor.getPage",
            [name_or_id, {"includeChildren": include_children}],
        )

    async def get_page_blocks_tree(self, page_name: str) -> list[dict[str, Any]]:
        return await self.call("logseq.Editor.getPageBlocksTree", [page_name]) or []

    async def get_page_linked_references(self, page_name: str) -> list[list[Any]]:
        return await self.call("logseq.Editor.getPageLinkedReferences", [page_name]) or []

    async def create_page(
        self,
        name: str,
        properties: Optional[dict[str, Any]] = None,
        *,
        format: str = "markdown",
        journal: bool = False,
    ) -> Optional[dict[str, Any]]:
        opts: dict[str, Any] = {"redirect": False, "format": format, "journal": journal}
        return await self.call("logseq.Editor.createPage", [name, properties or {}, opts])

    async def delete_page(self, name: str) -> None:
        await self.call("logseq.Editor.deletePage", [name])

    async def rename_page(self, old_name: str, new_name: str) -> None:
        await self.call("logseq.Editor.renamePage", [old_name, new_name])

    # ==========================================================================
    # BLOCK OPERATIONS
    # ==========================================================================

    async def get_block(
        self,
        id_or_uuid: str | int,
        include_children: bool = False,
    ) -> Optional[dict[str, Any]]:
        return await self.call(
            "logseq.Editor.getBlock",
            [id_or_uuid, {"includeChildren": include_children}],
        )

    async def insert_block(
        self,
        target: str,
        content: str,
        *,
        sibling: bool = False,
        before: bool = False,
        properties: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        opts: dict[str, Any] = {"sibling": sibling, "before": before}
        if properties is not None:
            opts["properties"] = properties
        return await self.call("logseq.Editor.insertBlock", [target, content, opts])

    async def insert_batch_block(
        self,
        target: str,
        blocks: list[dict[str, Any]],
        *,
        sibling: bool = False,
    ) -> list[dict[str, Any]]:
        return await self.call(
            "logseq.Editor.insertBatchBlock",
            [target, blocks, {"sibling": sibling}],
        ) or []

    async def update_block(
        self,
        id_or_uuid: str,
        content: str,
        properties: Optional[dict[str, Any]] = None,
    ) -> None:
        opts = {"properties": properties} if properties is not None else {}
        await self.call("logseq.Editor.updateBlock", [id_or_uuid, content, opts])

    async def remove_block(self, id_or_uuid: str) -> None:
        await self.call("logseq.Editor.removeBlock", [id_or_uuid])

    async def move_block(
        self,
        src_id: str,
        target_id: str,
        *,
        before: bool = False,
        children: bool = False,
    ) -> None:
        await self.call(
            "logseq.Editor.moveBlock",
            [src_id, target_id, {"before": before, "children": children}],
        )

    async def append_block_in_page(
        self,
        page: str,
        content: str,
        properties: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        opts = {"properties": properties} if properties is not None else {}
        return await self.call("logseq.Editor.appendBlockInPage", [page, content, opts])

    async def prepend_block_in_page(
        self,
        page: str,
        content: str,
        properties: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        opts = {"properties": properties} if properties is not None else {}
        return await self.call("logseq.Editor.prependBlockInPage", [page, content, opts])

    async def get_block_properties(self, id_or_uuid: str) -> Optional[dict[str, Any]]:
        return await self.call("logseq.Editor.getBlockProperties", [id_or_uuid])

    async def upsert_block_property(self, id_or_uuid: str, key: str, value: Any) -> None:
        await self.call("logseq.Editor.upsertBlockProperty", [id_or_uuid, key, value])

    async def remove_block_property(self, id_or_uuid: str, key: str) -> None:
        await self.call("logseq.Editor.removeBlockProperty", [id_or_uuid, key])

    # ==========================================================================
    # JOURNAL, TAG, SEARCH AND GRAPH OPERATIONS
    # ==========================================================================

    async def create_journal_page(self, date: str) -> Optional[dict[str, Any]]:
        return await self.call("logseq.Editor.createJournalPage", [date])

    async def get_all_tags(self) -> list[dict[str, Any]]:
        return await self.call("logseq.Editor.getAllTags") or []

    async def search(self, query: str) -> dict[str, Any]:
        return await self.call("logseq.App.search", [query]) or {}

    async def get_current_graph(self) -> Optional[dict[str, Any]]:
        return await self.call("logseq.App.getCurrentGraph")
