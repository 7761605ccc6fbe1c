"""
Conversion of ledger big-integer values into plain ints.

The ledger gateway may hand back uint256 values in several shapes (plain int,
decimal/hex string, BigNumber JSON, or an object with ``to_number()``). They
are converted only when they fit the JSON safe-integer range; anything larger
is rejected rather than rounded.
"""

from __future__ import annotations

from typing import Any, Mapping

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


class LedgerValueError(ValueError):
    """A ledger numeric value could not be converted into a safe int."""


def _parse_text(text: str) -> int:
    raw = text.strip()
    if not raw:
        raise LedgerValueError("empty numeric value")
    try:
        if raw.lower().startswith(("0x", "-0x")):
            return int(raw, 16)
        return int(raw, 10)
    except ValueError as e:
        raise LedgerValueError(f"not an integer: {text!r}") from e


def _parse_mapping(value: Mapping[str, Any]) -> int:
    # ethers BigNumber JSON: {"type": "BigNumber", "hex": "0x.."} / 旧版 {"_hex": "0x.."}
    for key in ("hex", "_hex"):
        hex_value = value.get(key)
        if isinstance(hex_value, str):
            return _parse_text(hex_value)
    raise LedgerValueError(f"unrecognized big number object: {dict(value)!r}")


def to_big_int(value: Any) -> int:
    """Parse a ledger numeric value into an arbitrary-precision int."""
    if isinstance(value, bool):
        raise LedgerValueError("boolean is not a numeric ledger value")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return _parse_text(value)
    if isinstance(value, Mapping):
        return _parse_mapping(value)

    for attr in ("to_number", "toNumber"):
        method = getattr(value, attr, None)
        if callable(method):
            try:
                result = method()
            except Exception as e:
                raise LedgerValueError(f"{attr}() failed on {value!r}: {e}") from e
            # 只展开一层，避免 to_number 返回自身时无限递归
            if isinstance(result, bool) or not isinstance(result, (int, float, str, Mapping)):
                raise LedgerValueError(f"{attr}() returned {result!r}")
            return to_big_int(result)

    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise LedgerValueError(f"unsupported numeric value: {value!r}")


def to_safe_int(value: Any) -> int:
    """
    Convert a ledger value to int, rejecting values beyond ±(2**53 - 1).
    """
    number = to_big_int(value)
    if number > MAX_SAFE_INTEGER or number < MIN_SAFE_INTEGER:
        raise LedgerValueError(f"value {number} exceeds the safe integer range")
    return number
