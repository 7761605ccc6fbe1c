from __future__ import annotations

from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from reviewledger.core.bignum import MAX_SAFE_INTEGER


class Recommendation(IntEnum):
    accept = 0
    minor_revision = 1
    major_revision = 2
    reject = 3


class ReviewInput(BaseModel):
    """
    评审提交载荷（前端使用 camelCase 字段名）。

    中文注释:
    - 未声明的字段不丢弃，原样转发给合约（extra="allow"）。
    - timestamp 统一为 epoch 秒（int），与读路径返回的格式一致。
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    journal_id: str = Field(alias="journalId")
    manuscript_id: str = Field(alias="manuscriptId")
    manuscript_hash: str = Field(alias="manuscriptHash")
    timestamp: Union[int, datetime]
    recommendation: Optional[Recommendation] = None

    @field_validator("timestamp", mode="after")
    @classmethod
    def normalize_timestamp(cls, v):
        if isinstance(v, datetime):
            if v.tzinfo is None:
                v = v.replace(tzinfo=timezone.utc)
            v = int(v.timestamp())
        # 与读路径 to_safe_int 的范围保持一致，避免写入后无法读取
        if v < 0 or v > MAX_SAFE_INTEGER:
            raise ValueError("timestamp must be between 0 and 2**53 - 1 epoch seconds")
        return v

    @field_validator("recommendation", mode="before")
    @classmethod
    def parse_recommendation_name(cls, v):
        if isinstance(v, str):
            name = v.strip().lower()
            if not name:
                return None
            if name in Recommendation.__members__:
                return Recommendation[name]
        return v

    def to_ledger(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True, mode="json")
        if self.recommendation is not None:
            data["recommendation"] = int(self.recommendation)
        return data


class ReviewRecord(BaseModel):
    """Named read-path shape of the positional review tuple."""

    journalId: str
    manuscriptId: str
    manuscripthash: str
    timestamp: int
    recommendation: int
    verified: bool
    vouchers: list[Any] = Field(default_factory=list)
