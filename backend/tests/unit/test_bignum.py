import pytest

from reviewledger.core.bignum import (
    MAX_SAFE_INTEGER,
    LedgerValueError,
    to_big_int,
    to_safe_int,
)


class _SnakeBigNumber:
    def __init__(self, value):
        self.value = value

    def to_number(self):
        return self.value


@pytest.mark.parametrize(
    "raw, expected",
    [
        (1700000000, 1700000000),
        ("42", 42),
        ("0x2a", 42),
        ({"type": "BigNumber", "hex": "0x2a"}, 42),
        ({"_hex": "0x2A"}, 42),
        (_SnakeBigNumber(7), 7),
        (_SnakeBigNumber(7.0), 7),
    ],
)
def test_to_safe_int_accepts_ledger_shapes(raw, expected):
    assert to_safe_int(raw) == expected


def test_to_safe_int_boundaries():
    assert to_safe_int(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER
    assert to_safe_int(-MAX_SAFE_INTEGER) == -MAX_SAFE_INTEGER
    with pytest.raises(LedgerValueError, match="safe integer range"):
        to_safe_int(MAX_SAFE_INTEGER + 1)
    with pytest.raises(LedgerValueError):
        to_safe_int(hex(2**64))


def test_to_big_int_keeps_full_precision():
    assert to_big_int(hex(2**200)) == 2**200


@pytest.mark.parametrize("raw", [None, True, "", "twelve", 1.5, {"value": 1}, [1]])
def test_to_big_int_rejects_garbage(raw):
    with pytest.raises(LedgerValueError):
        to_big_int(raw)


class _RaisingBigNumber:
    def toNumber(self):
        raise OverflowError("overflow")


class _LoopingBigNumber:
    def to_number(self):
        return self


@pytest.mark.parametrize("raw", [_RaisingBigNumber(), _LoopingBigNumber(), _SnakeBigNumber(None)])
def test_to_big_int_wraps_broken_number_objects(raw):
    with pytest.raises(LedgerValueError):
        to_big_int(raw)
