from __future__ import annotations

import typing as tp
from collections.abc import Iterator, Sequence

from iterindex._helpers import exhausted
from iterindex.defaults import Exhausted


@tp.final
class CharRange(Sequence[str]):
    """
    Inclusive range of characters, computed on access.

    Example:
        >>> letters = CharRange("a", "e")
        >>> len(letters), letters[2], letters[-1]
        (5, 'c', 'e')
        >>> letters[1:4]
        'bcd'
    """

    def __init__(self, first: str, last: str) -> None:
        self.first = first
        self.last = last
        self._codes = range(ord(first), ord(last) + 1)

    @tp.overload
    def __getitem__(self, index: int) -> str: ...
    @tp.overload
    def __getitem__(self, index: slice) -> str: ...
    @tp.override
    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return "".join(map(chr, self._codes[index]))
        return chr(self._codes[index])

    @tp.override
    def __len__(self) -> int:
        return len(self._codes)

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.first!r}, {self.last!r})"


class Cursor[T](Iterator[T]):
    """
    Sized, double-ended iterator over a random-access sequence.

    Elements are read from the sequence only when they are produced.
    The front and the back meet in the middle; once they do, the cursor
    is exhausted from both ends.

    Args:
        sequence: any Sequence, e.g. tuple, str or range. Its size must not
            change while the cursor is in use.

    Example:
        >>> cur = Cursor(range(10))
        >>> next(cur), cur.next_back(), len(cur)
        (0, 9, 8)
        >>> cur.nth(2), cur.nth_back(2)
        (3, 6)
        >>> list(cur)
        [4, 5]
        >>> cur.next_back()
        <Default.Exhausted: 1>
    """

    def __init__(self, sequence: Sequence[T]) -> None:
        self.sequence = sequence
        self._front = 0
        self._back = _length(sequence)

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return self

    @tp.override
    def __next__(self) -> T:
        if self._front >= self._back:
            raise StopIteration
        item = self.sequence[self._front]
        self._front += 1
        return item

    def __len__(self) -> int:
        return self._back - self._front

    def __reversed__(self) -> Iterator[T]:
        return iter(self.next_back, Exhausted)

    def nth[TDefault](self, n: int, /, default: TDefault = Exhausted) -> T | TDefault:
        """Skip n elements from the front and return the next one.

        If fewer than n + 1 elements remain, all of them are consumed and
        default is returned (or StopIteration raised for NoDefault).
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if n >= self._back - self._front:
            self._front = self._back
            return exhausted(default)
        self._front += n
        return next(self)

    def next_back[TDefault](self, default: TDefault = Exhausted) -> T | TDefault:
        return self.nth_back(0, default)

    def nth_back[TDefault](
        self, n: int, /, default: TDefault = Exhausted
    ) -> T | TDefault:
        """Skip n elements from the back and return the next one from the back."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if n >= self._back - self._front:
            self._back = self._front
            return exhausted(default)
        self._back -= n + 1
        return self.sequence[self._back]

    @tp.override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(sequence={self.sequence!r}, "
            f"front={self._front}, back={self._back})"
        )


def _length(sequence: Sequence[object]) -> int:
    if isinstance(sequence, range):
        # len() of a range is capped at sys.maxsize
        return max(0, -((sequence.start - sequence.stop) // sequence.step))
    return len(sequence)


def char_range(first: str, last: str) -> Cursor[str]:
    """
    Lazy inclusive range of characters from first to last.

    Example:
        >>> letters = char_range("a", "z")
        >>> next(letters), letters.next_back(), len(letters)
        ('a', 'z', 24)
    """
    return Cursor(CharRange(first, last))
