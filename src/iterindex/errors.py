"""
Exceptions raised by iterindex
"""


class IndexConversionError(OverflowError):
    """A skip distance could not be represented in the index type.

    Raised when the index type chosen for an `Indexer` is too narrow for the
    number of elements being skipped. This is a mismatch between the index
    type and the length of the sequence, so it is not meant to be recovered
    from.

    Example:
        >>> str(IndexConversionError(int, -1))
        'Cannot convert n into int'
    """

    def __init__(self, target: type, value: int) -> None:
        self.target = target
        self.value = value
        super().__init__(f"Cannot convert n into {target.__qualname__}")
