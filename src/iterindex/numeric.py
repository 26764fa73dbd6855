"""
Fixed-width integer types usable as index types.

Construction is range checked, arithmetic wraps around like a machine word.

Example:
    >>> UInt8(250) + 10
    UInt8(4)
    >>> Int8(-128) - 1
    Int8(127)
    >>> UInt8(256)
    Traceback (most recent call last):
        ...
    OverflowError: 256 is out of range for UInt8 [0, 255]
"""

from __future__ import annotations

import operator
import typing as tp


class FixedWidthInt(int):
    """An int restricted to the range of a `bits` wide machine integer.

    Subclasses declare their width with class keywords:

        >>> class UInt4(FixedWidthInt, bits=4, signed=False): ...
        >>> UInt4.MIN, UInt4.MAX
        (0, 15)
        >>> UInt4(15) * 2
        UInt4(14)
    """

    bits: tp.ClassVar[int]
    signed: tp.ClassVar[bool]
    MIN: tp.ClassVar[int]
    MAX: tp.ClassVar[int]

    def __init_subclass__(cls, *, bits: int, signed: bool, **kwargs: tp.Any) -> None:  # pyright: ignore[reportAny]
        super().__init_subclass__(**kwargs)
        if bits <= 0:
            raise ValueError(f"bits must be positive, got {bits}")
        cls.bits = bits
        cls.signed = signed
        cls.MIN = -(1 << (bits - 1)) if signed else 0
        cls.MAX = (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1

    def __new__(cls, value: tp.SupportsIndex = 0, /) -> tp.Self:
        if cls is FixedWidthInt:
            raise TypeError("FixedWidthInt cannot be instantiated directly")
        value = operator.index(value)
        if not cls.MIN <= value <= cls.MAX:
            raise OverflowError(
                f"{value} is out of range for {cls.__name__} [{cls.MIN}, {cls.MAX}]"
            )
        return super().__new__(cls, value)

    @classmethod
    def wrapping(cls, value: int) -> tp.Self:
        """Build an instance from `value` reduced modulo 2**bits.

        Example:
            >>> UInt8.wrapping(1010)
            UInt8(242)
            >>> Int8.wrapping(200)
            Int8(-56)
        """
        value &= (1 << cls.bits) - 1
        if cls.signed and value > cls.MAX:
            value -= 1 << cls.bits
        return cls(value)

    @tp.override
    def __add__(self, other: int, /) -> tp.Self:
        if not isinstance(other, int):
            return NotImplemented
        return self.wrapping(int.__add__(self, other))

    @tp.override
    def __radd__(self, other: int, /) -> tp.Self:
        if not isinstance(other, int):
            return NotImplemented
        return self.wrapping(int.__add__(other, self))

    @tp.override
    def __sub__(self, other: int, /) -> tp.Self:
        if not isinstance(other, int):
            return NotImplemented
        return self.wrapping(int.__sub__(self, other))

    @tp.override
    def __rsub__(self, other: int, /) -> tp.Self:
        if not isinstance(other, int):
            return NotImplemented
        return self.wrapping(int.__sub__(other, self))

    @tp.override
    def __mul__(self, other: int, /) -> tp.Self:
        if not isinstance(other, int):
            return NotImplemented
        return self.wrapping(int.__mul__(self, other))

    @tp.override
    def __rmul__(self, other: int, /) -> tp.Self:
        if not isinstance(other, int):
            return NotImplemented
        return self.wrapping(int.__mul__(other, self))

    @tp.override
    def __neg__(self) -> tp.Self:
        return self.wrapping(-int(self))

    @tp.override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({int.__repr__(self)})"

    @tp.override
    def __str__(self) -> str:
        return int.__repr__(self)


class UInt8(FixedWidthInt, bits=8, signed=False): ...


class UInt16(FixedWidthInt, bits=16, signed=False): ...


class UInt32(FixedWidthInt, bits=32, signed=False): ...


class UInt64(FixedWidthInt, bits=64, signed=False): ...


class Int8(FixedWidthInt, bits=8, signed=True): ...


class Int16(FixedWidthInt, bits=16, signed=True): ...


class Int32(FixedWidthInt, bits=32, signed=True): ...


class Int64(FixedWidthInt, bits=64, signed=True): ...


class USize(FixedWidthInt, bits=64, signed=False):
    """Unsigned integer as wide as the count of elements in a sequence."""
