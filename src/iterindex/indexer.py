"""
Enumerate with a custom index type, start and step.

`index`, `index_start` and `index_step` accept any iterable and return an
`Indexer`, an iterator of `Indexed(index, value)` pairs. The index starts at
`start` and advances by `step` for every element consumed.

Example:
    >>> from iterindex.numeric import Int16, UInt8
    >>> items = ["a", "b", "c"]
    >>> list(index(items))
    [Indexed(index=0, value='a'), Indexed(index=1, value='b'), Indexed(index=2, value='c')]
    >>> [i for i, _ in index_start(items, UInt8(97))]
    [UInt8(97), UInt8(98), UInt8(99)]
    >>> [i for i, _ in index_step(items, Int16(100), Int16(10))]
    [Int16(100), Int16(110), Int16(120)]

The iterator returned depends on what the wrapped iterable can do:

- `Indexer` for plain iterators: forward traversal and `nth`.
- `SizedIndexer` when the iterator knows its exact length: adds `len()`.
- `DoubleEndedIndexer` for immutable sequences (tuple, str, range, ...) and
  double-ended iterators such as `Cursor`: adds
  `next_back`, `nth_back` and `reversed()`.

Index overflow is not detected; the arithmetic is whatever the index type does.
"""

from __future__ import annotations

import logging
import operator
import typing as tp
from collections.abc import Iterable, Iterator, MutableSequence, Sequence, Sized

from iterindex._helpers import consume, exhausted, nth_or_exhausted
from iterindex.cursor import Cursor
from iterindex.defaults import Default, Exhausted
from iterindex.errors import IndexConversionError
from iterindex.index import Indexed
from iterindex.wtyping import DoubleEnded, SupportsIndexArithmetic, SupportsNth

logger = logging.getLogger(__name__)


def count_to_index[T](index_type: type[T], n: int) -> T:
    """Convert a count of elements into a value of the index type.

    Raises:
        IndexConversionError: if the index type cannot represent n exactly.

    Example:
        >>> from iterindex.numeric import UInt8
        >>> count_to_index(UInt8, 200)
        UInt8(200)
        >>> count_to_index(UInt8, 500)
        Traceback (most recent call last):
            ...
        iterindex.errors.IndexConversionError: Cannot convert n into UInt8
    """
    try:
        converted = index_type(n)  # pyright: ignore[reportCallIssue]
    except (OverflowError, ValueError, TypeError) as exc:
        logger.debug("Cannot represent %d as %s: %s", n, index_type.__qualname__, exc)
        raise IndexConversionError(index_type, n) from exc
    if converted != n:
        logger.debug("%d converted to %r as %s", n, converted, index_type.__qualname__)
        raise IndexConversionError(index_type, n)
    return converted


class Indexer[T: SupportsIndexArithmetic, V](Iterator[Indexed[T, V]]):
    """
    Iterator yielding `Indexed(index, value)` for every value of an iterator.

    Use `index`, `index_start` or `index_step` rather than building one directly.

    Args:
        iterator: the iterator whose values are indexed.
        start: index of the first value.
        step: amount added to the index for every value consumed.
        index_type: type that skip distances are converted to,
            defaults to the type of start.
    """

    def __init__(
        self,
        iterator: Iterator[V],
        start: T,
        step: T,
        *,
        index_type: type[T] | None = None,
    ) -> None:
        self._iter = iterator
        self._counter = start
        self._step = step
        self.index_type: type[T] = type(start) if index_type is None else index_type
        self._nth = iterator.nth if isinstance(iterator, SupportsNth) else None

    @property
    def counter(self) -> T:
        """Index that the next value from the front will get."""
        return self._counter

    @property
    def step(self) -> T:
        """Amount the index advances by for every value consumed."""
        return self._step

    @tp.override
    def __iter__(self) -> Iterator[Indexed[T, V]]:
        return self

    @tp.override
    def __next__(self) -> Indexed[T, V]:
        value = next(self._iter)
        current = self._counter
        # rebinding keeps the emitted index apart from the counter
        self._counter = current + self._step
        return Indexed(current, value)

    def __length_hint__(self) -> int:
        hint = operator.length_hint(self._iter, -1)
        return NotImplemented if hint < 0 else hint

    @tp.overload
    def nth(self, n: int, /, default: tp.Literal[Default.NoDefault]) -> Indexed[T, V]: ...
    @tp.overload
    def nth[TDefault](
        self, n: int, /, default: TDefault = Exhausted
    ) -> Indexed[T, V] | TDefault: ...
    def nth[TDefault](
        self, n: int, /, default: TDefault = Exhausted
    ) -> Indexed[T, V] | TDefault:
        """Skip n values and return the next one with its index.

        The skipping is left to the wrapped iterator (its own `nth` if it
        has one, otherwise `itertools.islice`), and the index is computed
        directly as `counter + n * step`.

        Args:
            n: number of values to skip, must be non-negative.
            default (optional): returned if the iterator runs out.
                If default is Default.NoDefault, StopIteration is raised instead.
                default: Default.Exhausted

        Returns:
            Indexed | TDefault: the (n + 1)-th remaining value, or default.

        Raises:
            IndexConversionError: if n cannot be represented in the index type.

        Example:
            >>> from iterindex.cursor import char_range
            >>> letters = index_step(char_range("a", "z"), 100, 10)
            >>> next(letters)
            Indexed(index=100, value='a')
            >>> letters.nth(5)
            Indexed(index=160, value='g')
            >>> next(letters)
            Indexed(index=170, value='h')
            >>> letters.nth(100)
            <Default.Exhausted: 1>
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        value = (
            self._nth(n, Exhausted)
            if self._nth is not None
            else nth_or_exhausted(self._iter, n)
        )
        if value is Exhausted:
            return exhausted(default)
        current = self._counter + count_to_index(self.index_type, n) * self._step
        self._counter = current + self._step
        return Indexed(current, value)

    def count(self) -> int:
        """Consume the remaining values and return how many there were.

        The counter is not advanced.

        Example:
            >>> indexed = index(iter("abcde"))
            >>> _ = next(indexed)
            >>> indexed.count()
            4
        """
        if isinstance(self._iter, Sized):
            remaining = len(self._iter)
            consume(self._iter)
            return remaining
        return sum(1 for _ in self._iter)

    @tp.override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(iterator={self._iter!r}, "
            f"counter={self._counter!r}, step={self._step!r})"
        )


class SizedIndexer[T: SupportsIndexArithmetic, V](Indexer[T, V]):
    """Indexer over an iterator that knows how many values it has left."""

    def __len__(self) -> int:
        return len(tp.cast(Sized, self._iter))


class DoubleEndedIndexer[T: SupportsIndexArithmetic, V](SizedIndexer[T, V]):
    """
    Indexer over a sized iterator that can also produce values from the back.

    A value taken from the back gets the index it would have had if it was
    reached from the front; taking from the back leaves `counter` alone.

    Example:
        >>> letters = index_step(("a", "b", "c", "d"), 100, 10)
        >>> letters.nth_back(2)
        Indexed(index=110, value='b')
        >>> next(letters)
        Indexed(index=100, value='a')
        >>> letters.next_back()
        <Default.Exhausted: 1>
    """

    _iter: DoubleEnded[V]

    def __reversed__(self) -> Iterator[Indexed[T, V]]:
        return iter(self.next_back, Exhausted)

    @tp.overload
    def next_back(self, default: tp.Literal[Default.NoDefault]) -> Indexed[T, V]: ...
    @tp.overload
    def next_back[TDefault](
        self, default: TDefault = Exhausted
    ) -> Indexed[T, V] | TDefault: ...
    def next_back[TDefault](
        self, default: TDefault = Exhausted
    ) -> Indexed[T, V] | TDefault:
        return self.nth_back(0, default)

    @tp.overload
    def nth_back(
        self, n: int, /, default: tp.Literal[Default.NoDefault]
    ) -> Indexed[T, V]: ...
    @tp.overload
    def nth_back[TDefault](
        self, n: int, /, default: TDefault = Exhausted
    ) -> Indexed[T, V] | TDefault: ...
    def nth_back[TDefault](
        self, n: int, /, default: TDefault = Exhausted
    ) -> Indexed[T, V] | TDefault:
        """Skip n values from the back and return the next one from the back.

        The index is `counter + (remaining - 1 - n) * step`, where remaining
        is the length before the call.

        Raises:
            IndexConversionError: if the offset cannot be represented in the index type.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        remaining = len(self._iter)
        value = self._iter.nth_back(n, Exhausted)  # pyright: ignore[reportAny]
        if value is Exhausted:
            return exhausted(default)
        offset = count_to_index(self.index_type, remaining - 1 - n)
        return Indexed(self._counter + offset * self._step, value)  # pyright: ignore[reportAny]


def _into_iter[V](iterable: Iterable[V]) -> Iterator[V]:
    if isinstance(iterable, Iterator):
        return iterable
    # a mutable sequence can resize while iterated, only its own iterator follows that
    if isinstance(iterable, Sequence) and not isinstance(iterable, MutableSequence):
        return Cursor(iterable)
    return iter(iterable)


def _build[T: SupportsIndexArithmetic, V](
    iterable: Iterable[V], start: T, step: T, index_type: type[T]
) -> Indexer[T, V]:
    iterator = _into_iter(iterable)
    kind: type[Indexer[T, V]]
    if isinstance(iterator, DoubleEnded):
        kind = DoubleEndedIndexer
    elif isinstance(iterator, Sized):
        kind = SizedIndexer
    else:
        kind = Indexer
    indexer = kind(iterator, start, step, index_type=index_type)
    logger.debug(
        "Built %s over %s (start=%r, step=%r)",
        type(indexer).__name__,
        type(iterator).__name__,
        start,
        step,
    )
    return indexer


@tp.overload
def index[V](
    iterable: Sequence[V] | DoubleEnded[V],
) -> DoubleEndedIndexer[int, V]: ...
@tp.overload
def index[T: SupportsIndexArithmetic, V](
    iterable: Sequence[V] | DoubleEnded[V], *, type: type[T]
) -> DoubleEndedIndexer[T, V]: ...
@tp.overload
def index[V](iterable: Iterable[V]) -> Indexer[int, V]: ...
@tp.overload
def index[T: SupportsIndexArithmetic, V](
    iterable: Iterable[V], *, type: type[T]
) -> Indexer[T, V]: ...
def index[T: SupportsIndexArithmetic, V](
    iterable: Iterable[V], *, type: type[T] = int
) -> Indexer[T, V]:
    """
    Index the values of iterable starting at 0, in steps of 1.

    Args:
        iterable: values to index.
        type (optional): the index type, built from the literals 0 and 1.
            default: int

    Returns:
        Indexer: iterator of Indexed(index, value)

    Example:
        >>> from iterindex.numeric import UInt8
        >>> indexed = index(("a", "b", "c"), type=UInt8)
        >>> next(indexed), len(indexed)
        (Indexed(index=UInt8(0), value='a'), 2)
    """
    return _build(iterable, type(0), type(1), type)


@tp.overload
def index_start[T: SupportsIndexArithmetic, V](
    iterable: Sequence[V] | DoubleEnded[V], start: T
) -> DoubleEndedIndexer[T, V]: ...
@tp.overload
def index_start[T: SupportsIndexArithmetic, V](
    iterable: Iterable[V], start: T
) -> Indexer[T, V]: ...
def index_start[T: SupportsIndexArithmetic, V](
    iterable: Iterable[V], start: T
) -> Indexer[T, V]:
    """
    Index the values of iterable starting at start, in steps of 1.

    The index type is the type of start; its step of 1 is built from the literal 1.

    Example:
        >>> list(index_start("ab", 97))
        [Indexed(index=97, value='a'), Indexed(index=98, value='b')]
    """
    index_type = type(start)
    return _build(iterable, start, index_type(1), index_type)  # pyright: ignore[reportCallIssue]


@tp.overload
def index_step[T: SupportsIndexArithmetic, V](
    iterable: Sequence[V] | DoubleEnded[V], start: T, step: T
) -> DoubleEndedIndexer[T, V]: ...
@tp.overload
def index_step[T: SupportsIndexArithmetic, V](
    iterable: Iterable[V], start: T, step: T
) -> Indexer[T, V]: ...
def index_step[T: SupportsIndexArithmetic, V](
    iterable: Iterable[V], start: T, step: T
) -> Indexer[T, V]:
    """
    Index the values of iterable starting at start, in steps of step.

    Neither start nor step is converted, so any type supporting
    `+` and `*` works, even one that cannot be built from 0 or 1.

    Example:
        >>> from decimal import Decimal
        >>> list(index_step(iter("ab"), Decimal("0.5"), Decimal("0.25")))
        [Indexed(index=Decimal('0.5'), value='a'), Indexed(index=Decimal('0.75'), value='b')]
    """
    return _build(iterable, start, step, type(start))
