"""
Connection to the review contract.

The contract is reached through a JSON-RPC 2.0 gateway that owns the keys and
submits transactions. Only two contract methods are used here:

- ``getReview(address, index)`` returns the positional review tuple
  ``[journalId, manuscriptId, manuscriptHash, timestamp, recommendation,
  verified, vouchers]``.
- ``addReview(address, review)`` returns a transaction result with at least a
  ``tx`` field.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

import httpx

from reviewledger.core.config import LedgerConfig


class LedgerError(Exception):
    """
    A contract call failed.

    ``payload`` keeps whatever the gateway (or transport) reported so that the
    write path can hand it back to the caller unchanged.
    """

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload if payload is not None else {"message": message}


class LedgerConnection(Protocol):
    async def get_review(self, address: str, index: int) -> Sequence[Any]: ...

    async def add_review(self, address: str, review: Mapping[str, Any]) -> Mapping[str, Any]: ...


class HttpLedgerConnection:
    def __init__(
        self,
        config: LedgerConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._ids = itertools.count(1)

    def _params(self, *args: Any) -> list[Any]:
        if self.config.contract_address:
            return [self.config.contract_address, *args]
        return list(args)

    async def _call(self, method: str, params: list[Any]) -> Any:
        request_id = next(self._ids)
        body = {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params}

        async with httpx.AsyncClient(transport=self._transport, timeout=self.config.timeout) as client:
            try:
                resp = await client.post(self.config.rpc_url, json=body)
            except httpx.HTTPError as e:
                raise LedgerError(f"{method} transport failure: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if resp.status_code >= 400:
            payload = (data or {}).get("error") if isinstance(data, dict) else None
            raise LedgerError(
                f"{method} failed with HTTP {resp.status_code}",
                payload or {"status": resp.status_code, "message": resp.text},
            )
        if not isinstance(data, dict):
            raise LedgerError(f"{method} returned a non JSON-RPC body")

        error = data.get("error")
        if error is not None:
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise LedgerError(f"{method} reverted: {message}", error)
        if "result" not in data:
            raise LedgerError(f"{method} returned no result")
        return data["result"]

    async def get_review(self, address: str, index: int) -> Sequence[Any]:
        result = await self._call("getReview", self._params(address, index))
        if not isinstance(result, (list, tuple)):
            raise LedgerError("getReview returned a non-tuple result", {"result": result})
        return result

    async def add_review(self, address: str, review: Mapping[str, Any]) -> Mapping[str, Any]:
        result = await self._call("addReview", self._params(address, dict(review)))
        if not isinstance(result, dict):
            raise LedgerError("addReview returned a non-object result", {"result": result})
        return result


class _LazyLedgerConnection:
    """
    延迟初始化账本连接，避免 import 时因缺少 LEDGER_RPC_URL 导致模块导入失败。
    """

    def __init__(self, factory: Callable[[], LedgerConnection]):
        self._factory = factory
        self._conn: Optional[LedgerConnection] = None

    def _get(self) -> LedgerConnection:
        if self._conn is None:
            self._conn = self._factory()
        return self._conn

    def __getattr__(self, item: str) -> Any:
        return getattr(self._get(), item)


def _create_ledger() -> LedgerConnection:
    config = LedgerConfig.from_env()
    if not config.rpc_url:
        raise RuntimeError("LEDGER_RPC_URL is required")
    return HttpLedgerConnection(config)


ledger: LedgerConnection = _LazyLedgerConnection(_create_ledger)  # type: ignore[assignment]
