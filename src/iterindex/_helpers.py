from collections import deque
from collections.abc import Iterator
from itertools import islice

from iterindex.defaults import Default, Exhausted

consume = deque[object](maxlen=0).extend


def exhausted[TDefault](default: TDefault) -> TDefault:
    if default is Default.NoDefault:
        raise StopIteration
    return default


def nth_or_exhausted[T](iterator: Iterator[T], n: int) -> T | Default:
    # islice stops after pulling the (n + 1)-th item, the rest is left untouched
    return next(islice(iterator, n, n + 1), Exhausted)
