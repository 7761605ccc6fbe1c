from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from reviewledger.core.config import ClientConfig


class ReviewApiClient:
    """
    HTTP client for the review/account endpoints (used by the submission flow).

    Non-2xx responses raise ``httpx.HTTPStatusError``.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ClientConfig.from_env()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.config.base_url, transport=self._transport)

    async def add_review(self, account: str, review: Mapping[str, Any]) -> dict[str, Any]:
        async with self._client() as client:
            resp = await client.post(f"/reviews/{quote(account)}", json=dict(review))
            resp.raise_for_status()
            return resp.json()

    async def get_review(self, address: str, index: int) -> dict[str, Any]:
        async with self._client() as client:
            resp = await client.get(f"/reviews/{quote(address)}/{int(index)}")
            resp.raise_for_status()
            return resp.json()

    async def get_account(self, address: str) -> dict[str, Any]:
        async with self._client() as client:
            resp = await client.get(f"/accounts/{quote(address)}")
            resp.raise_for_status()
            return resp.json()
