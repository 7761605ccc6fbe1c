from typing import Any


def error_payload(err: BaseException) -> Any:
    """
    原始错误对象 -> 可 JSON 序列化的结构（会原样返回给调用方）。

    中文注释:
    - 账本/网关错误自带 payload（JSON-RPC error 对象），直接透传。
    - 其它异常只保留 name/message 以及常见的 code/details 字段。
    """
    payload = getattr(err, "payload", None)
    if payload is not None:
        return payload

    out: dict[str, Any] = {"name": type(err).__name__, "message": str(err)}
    for attr in ("code", "details"):
        value = getattr(err, attr, None)
        if value is not None:
            out[attr] = value
    return out
