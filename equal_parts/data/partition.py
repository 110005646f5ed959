import operator
from collections.abc import Iterator, Sequence


class InvalidPartitionCount(ValueError):
    """Raised when a collection is split into fewer than one part."""

    def __init__(self, num_parts: int):
        self.num_parts = num_parts
        super().__init__(
            f"Invalid number of parts {num_parts}, "
            f"number of parts must be greater than 0"
        )


class Part(Sequence):
    """
    Read-only view of the contiguous range [start, stop) of a source sequence.
    Elements are read from the source on demand, nothing is copied.
    Use materialize() to get the source's native slice of the same range.

    Example:
        >>> data = [1, 2, 3, 4, 5]
        >>> part = Part(data, 1, 3)
        >>> list(part)
        [2, 3]
        >>> part == [2, 3]
        True
    """

    __slots__ = ("source", "start", "stop")

    def __init__(self, source, start: int, stop: int):
        self.source = source
        self.start = start
        self.stop = stop

    def __len__(self):
        return self.stop - self.start

    def __getitem__(self, index):
        """
        Integer indexes read one element from the source. A slice with step 1
        returns another Part over the same source, any other step returns a
        list copy of the selected elements.
        """
        if isinstance(index, slice):
            positions = range(self.start, self.stop)[index]
            if positions.step == 1:
                # Empty slices such as part[2:1] come back with stop < start.
                stop = max(positions.start, positions.stop)
                return Part(self.source, positions.start, stop)
            return [self.source[i] for i in positions]
        index = operator.index(index)
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("Part index out of range")
        return self.source[self.start + index]

    def __iter__(self):
        for i in range(self.start, self.stop):
            yield self.source[i]

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self):
        return f"Part({list(self)!r})"

    def materialize(self):
        """Return source[start:stop], the source type's own slice."""
        return self.source[self.start : self.stop]


def part_bounds(length: int, num_parts: int, index: int) -> tuple[int, int]:
    """Closed-form [start, end) of part `index` when splitting `length` elements."""
    small, big = divmod(length, num_parts)
    if index < big:
        start = index * (small + 1)
        return start, start + small + 1
    start = big * (small + 1) + (index - big) * small
    return start, start + small


class PartsIterator(Iterator):
    """
    Lazily yields num_parts contiguous parts of source. The first
    len(source) % num_parts parts are one element longer than the rest.
    Once all parts have been yielded the iterator stays exhausted.
    """

    def __init__(self, source, num_parts: int):
        num_parts = operator.index(num_parts)
        if num_parts < 1:
            raise InvalidPartitionCount(num_parts)
        self.source = source
        self.length = len(source)
        self.num_parts = num_parts
        self.small, self.big = divmod(self.length, num_parts)
        self._index = 0
        self._offset = 0

    def __next__(self) -> Part:
        if self._index >= self.num_parts:
            raise StopIteration
        size = self.small + 1 if self._index < self.big else self.small
        part = Part(self.source, self._offset, self._offset + size)
        self._index += 1
        self._offset += size
        return part

    def __length_hint__(self):
        return self.num_parts - self._index

    @property
    def exhausted(self) -> bool:
        """True once all num_parts parts have been yielded."""
        return self._index >= self.num_parts


def split_into(collection, num_parts: int) -> PartsIterator:
    """
    Split collection into num_parts contiguous near-equal parts.

    Example:
        >>> [list(p) for p in split_into(list(range(1, 11)), 4)]
        [[1, 2, 3], [4, 5, 6], [7, 8], [9, 10]]
        >>> [list(p) for p in split_into([1, 2, 3], 5)]
        [[1], [2], [3], [], []]
    """
    return PartsIterator(collection, num_parts)


def into_equal_parts(collection, num_parts: int) -> Iterator[list]:
    """Like split_into, but every part is an independent list copy."""
    parts = PartsIterator(collection, num_parts)
    return (list(part) for part in parts)
