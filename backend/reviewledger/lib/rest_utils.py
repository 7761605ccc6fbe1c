from typing import Optional

import httpx


async def get_xml(url: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """
    GET 一个 XML 资源并返回原始文本（不做解析）。
    """
    async with httpx.AsyncClient(transport=transport) as client:
        resp = await client.get(url, headers={"Content-Type": "application/xml"})
        return resp.text
