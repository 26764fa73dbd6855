from __future__ import annotations

import typing as tp


class Indexed[T, V](tp.NamedTuple):
    """A value paired with the index it was produced at.

    Unpacks and compares like the plain tuple ``(index, value)``.

    Example:
        >>> pair = Indexed(97, "a")
        >>> pair.index, pair.value
        (97, 'a')
        >>> pair == (97, "a")
        True
    """

    index: T
    value: V
