import os
import sys
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Import app from the correct location
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from reviewledger.main import app

# === 全局测试配置 ===
# 中文注释:
# 1. 显式使用 pytest_asyncio.fixture，保证 STRICT 模式下 client 可被正确 await。
# 2. 账本连接与文档存储一律在测试里 patch，不访问真实网关/数据库。


@pytest_asyncio.fixture
async def client() -> AsyncGenerator:
    """
    提供一个模拟的异步测试客户端
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver"
    ) as ac:
        yield ac


class FakeBigNumber:
    """Mimics the BigNumber objects the contract library hands back."""

    def __init__(self, value: int):
        self._value = value

    def toNumber(self) -> int:
        return self._value


@pytest.fixture
def review_tuple():
    return ["J1", "M1", "0xHASH", FakeBigNumber(1700000000), FakeBigNumber(1), True, []]


@pytest.fixture
def review_payload():
    return {
        "journalId": "J1",
        "manuscriptId": "M1",
        "manuscriptHash": "0xHASH",
        "timestamp": 1700000000,
        "recommendation": 1,
    }
