from __future__ import annotations

import logging
from typing import Any, Optional

from reviewledger.schemas.account import ScholarAccount

logger = logging.getLogger("reviewledger.accounts")


class ScholarStore:
    """
    学者账户文档存储（Supabase 表 `scholars`，主键为链上地址）。
    """

    table = "scholars"

    def __init__(self, client: Any):
        self.client = client

    def find_by_id(self, address: str) -> Optional[ScholarAccount]:
        resp = (
            self.client.table(self.table)
            .select("*")
            .eq("address", address)
            .limit(1)
            .execute()
        )
        rows = getattr(resp, "data", None) or []
        if not rows:
            return None
        return ScholarAccount.model_validate(rows[0])
