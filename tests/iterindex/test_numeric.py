import pytest

from iterindex.numeric import (
    FixedWidthInt,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    USize,
)


@pytest.mark.parametrize(
    ("kind", "low", "high"),
    [
        (UInt8, 0, 255),
        (UInt16, 0, 65_535),
        (UInt32, 0, 2**32 - 1),
        (UInt64, 0, 2**64 - 1),
        (USize, 0, 2**64 - 1),
        (Int8, -128, 127),
        (Int16, -32_768, 32_767),
        (Int32, -(2**31), 2**31 - 1),
        (Int64, -(2**63), 2**63 - 1),
    ],
)
def test_bounds(kind: type[FixedWidthInt], low: int, high: int):
    assert (kind.MIN, kind.MAX) == (low, high)
    assert kind(low) == low
    assert kind(high) == high

    with pytest.raises(OverflowError, match=f"out of range for {kind.__name__}"):
        _ = kind(low - 1)
    with pytest.raises(OverflowError, match=f"out of range for {kind.__name__}"):
        _ = kind(high + 1)


def test_construction():
    assert UInt8() == 0
    assert UInt8(True) == 1
    assert Int16(UInt8(200)) == 200
    with pytest.raises(TypeError):
        _ = UInt8(1.5)  # pyright: ignore[reportArgumentType]
    with pytest.raises(TypeError, match="directly"):
        _ = FixedWidthInt(1)


def test_arithmetic_keeps_type():
    assert type(UInt8(1) + 1) is UInt8
    assert type(1 + UInt8(1)) is UInt8
    assert type(UInt8(3) * UInt8(4)) is UInt8
    assert type(2 * Int16(3)) is Int16
    assert type(Int16(3) - 5) is Int16
    assert type(-Int8(5)) is Int8

    counter = UInt8(10)
    counter += UInt8(2)
    assert type(counter) is UInt8
    assert counter == 12


def test_arithmetic_wraps():
    assert UInt8(255) + 1 == 0
    assert UInt8(0) - 1 == 255
    assert 1 - UInt8(2) == 255
    assert UInt8(16) * 16 == 0
    assert Int8(127) + 1 == -128
    assert -Int8(-128) == -128
    assert Int16(300) * 300 == (90_000 + 2**15) % 2**16 - 2**15


def test_wrapping():
    assert UInt8.wrapping(1010) == 1010 & 255
    assert UInt8.wrapping(-1) == 255
    assert Int8.wrapping(255) == -1
    assert Int8.wrapping(-129) == 127


def test_mixed_with_float():
    assert UInt8(1) + 0.5 == 1.5
    assert type(UInt8(1) + 0.5) is float


def test_int_behaviour():
    assert UInt8(97) == 97
    assert hash(UInt8(97)) == hash(97)
    assert {UInt8(1): "x"}[1] == "x"
    assert UInt8(3) < Int16(4)
    assert list(range(UInt8(3))) == [0, 1, 2]


def test_repr_and_str():
    assert repr(UInt8(97)) == "UInt8(97)"
    assert repr(Int64(-1)) == "Int64(-1)"
    assert str(UInt8(97)) == "97"
    assert f"{UInt16(7):03d}" == "007"


def test_custom_width():
    class UInt4(FixedWidthInt, bits=4, signed=False): ...

    assert (UInt4.MIN, UInt4.MAX) == (0, 15)
    assert UInt4(15) + 1 == 0

    with pytest.raises(ValueError, match="positive"):

        class Broken(FixedWidthInt, bits=0, signed=False): ...  # pyright: ignore[reportUnusedClass]
