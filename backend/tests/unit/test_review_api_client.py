import json

import httpx
import pytest

from reviewledger.client.api import ReviewApiClient
from reviewledger.core.config import ClientConfig


def _client(handler):
    config = ClientConfig(base_url="http://api.test", account="0xACCOUNT")
    return ReviewApiClient(config, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_add_review_posts_to_account_path():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"tx": "0x1"})

    result = await _client(handler).add_review("0xACCOUNT", {"journalId": "J"})

    assert result == {"tx": "0x1"}
    assert seen == {"path": "/reviews/0xACCOUNT", "body": {"journalId": "J"}}


@pytest.mark.asyncio
async def test_get_review_raises_on_404():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/reviews/0xABC/4"
        return httpx.Response(404, json={"message": "Review not found"})

    with pytest.raises(httpx.HTTPStatusError):
        await _client(handler).get_review("0xABC", 4)


@pytest.mark.asyncio
async def test_get_account_returns_json():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/accounts/0xABC"
        return httpx.Response(200, json={"address": "0xABC"})

    assert await _client(handler).get_account("0xABC") == {"address": "0xABC"}
