import typing as tp
from collections.abc import Iterator, Sized


class SupportsIndexArithmetic(tp.Protocol):
    def __add__(self, other: tp.Self, /) -> tp.Self: ...
    def __mul__(self, other: tp.Self, /) -> tp.Self: ...


@tp.runtime_checkable
class SupportsNth[T](Iterator[T], tp.Protocol):
    def nth(self, n: int, /, default: tp.Any = ...) -> tp.Any: ...  # pyright: ignore[reportAny]  # noqa: ANN401


@tp.runtime_checkable
class DoubleEnded[T](Sized, Iterator[T], tp.Protocol):
    def next_back(self, default: tp.Any = ...) -> tp.Any: ...  # pyright: ignore[reportAny]  # noqa: ANN401
    def nth_back(self, n: int, /, default: tp.Any = ...) -> tp.Any: ...  # pyright: ignore[reportAny]  # noqa: ANN401
