from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional

from reviewledger.core.bignum import LedgerValueError, to_safe_int
from reviewledger.lib.ledger_client import LedgerConnection, LedgerError
from reviewledger.schemas.review import ReviewInput, ReviewRecord

logger = logging.getLogger("reviewledger.reviews")

REVIEW_TUPLE_SIZE = 7

LookupKind = Literal["ok", "not_found", "internal"]


@dataclass(frozen=True)
class ReviewLookup:
    """
    读路径的结果：ok / not_found / internal。

    中文注释:
    - 内部保留错误类别，便于日志与排查；对外（HTTP）统一折叠为 404。
    """

    kind: LookupKind
    record: Optional[ReviewRecord] = None
    cause: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.kind == "ok"


def parse_review_index(raw: Any) -> Optional[int]:
    """Path parameter -> non-negative int, or None when it is not one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    text = str(raw or "").strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def record_from_tuple(raw: Any) -> ReviewRecord:
    if not isinstance(raw, (list, tuple)) or len(raw) < REVIEW_TUPLE_SIZE:
        raise LedgerValueError(f"expected a {REVIEW_TUPLE_SIZE}-tuple review, got {raw!r}")

    vouchers = raw[6]
    if vouchers is not None and not isinstance(vouchers, (list, tuple)):
        raise LedgerValueError(f"vouchers must be a list, got {vouchers!r}")
    return ReviewRecord(
        journalId=raw[0],
        manuscriptId=raw[1],
        manuscripthash=raw[2],
        timestamp=to_safe_int(raw[3]),
        recommendation=to_safe_int(raw[4]),
        verified=bool(raw[5]),
        vouchers=list(vouchers) if vouchers is not None else [],
    )


class ReviewService:
    def __init__(self, connection: LedgerConnection):
        self.connection = connection

    async def get_review(self, address: str, raw_index: Any) -> ReviewLookup:
        address = (address or "").strip()
        index = parse_review_index(raw_index)
        if not address or index is None:
            return ReviewLookup(kind="not_found")

        try:
            raw = await self.connection.get_review(address, index)
        except LedgerError as e:
            logger.info("getReview %s/%s failed: %s", address, index, e)
            return ReviewLookup(kind="not_found", cause=e)
        except Exception as e:
            logger.warning("getReview %s/%s connection error: %s", address, index, e, exc_info=True)
            return ReviewLookup(kind="internal", cause=e)

        if raw is None:
            return ReviewLookup(kind="not_found")

        try:
            record = record_from_tuple(raw)
        except Exception as e:
            logger.warning("getReview %s/%s returned an unusable tuple: %s", address, index, e)
            return ReviewLookup(kind="internal", cause=e)

        return ReviewLookup(kind="ok", record=record)

    async def add_review(self, address: str, review: ReviewInput) -> Mapping[str, Any]:
        """
        Forward a review to the contract; errors propagate to the caller.
        """
        logger.info("addReview for %s manuscript=%s", address, review.manuscript_id)
        result = await self.connection.add_review(address, review.to_ledger())
        logger.info("addReview tx hash is %s", result.get("tx"))
        return result
