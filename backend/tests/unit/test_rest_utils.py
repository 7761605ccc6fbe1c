import httpx
import pytest

from reviewledger.lib.rest_utils import get_xml


@pytest.mark.asyncio
async def test_get_xml_returns_text_with_xml_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["content_type"] = request.headers.get("content-type")
        return httpx.Response(200, text="<doi_batch><head/></doi_batch>")

    text = await get_xml("http://example.test/feed.xml", transport=httpx.MockTransport(handler))

    assert text == "<doi_batch><head/></doi_batch>"
    assert seen == {"method": "GET", "content_type": "application/xml"}
