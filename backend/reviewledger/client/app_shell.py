from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger("reviewledger.client")

ReviewsFetcher = Callable[[], Awaitable[Optional[list[Any]]]]


async def placeholder_fetch_reviews() -> Optional[list[Any]]:
    # TODO: switch to a real listing call once the contract exposes review enumeration per account
    return None


@dataclass(frozen=True)
class AppShellState:
    user_name: str = "Max Planck"
    is_loading: bool = True
    reviews: Optional[list[Any]] = None


class AppShell:
    """
    顶层外壳状态：初始为 loading，拉取初始评审列表后结束 loading。
    """

    def __init__(self, fetch_reviews: Optional[ReviewsFetcher] = None, state: Optional[AppShellState] = None):
        self.fetch_reviews = fetch_reviews or placeholder_fetch_reviews
        self.state = state or AppShellState()

    async def load(self) -> AppShellState:
        try:
            reviews = await self.fetch_reviews()
        except Exception as e:
            # 中文注释: 失败只记录日志，界面保持 loading
            logger.warning(f"initial review fetch failed: {e}")
            return self.state
        self.state = replace(self.state, is_loading=False, reviews=reviews)
        return self.state
