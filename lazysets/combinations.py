"""
# Lazy k-combinations of an iterable.

Like `itertools.combinations` but the source is read lazily and cached, so the
enumeration can be restarted at a different size via `.reset()` without
re-reading the source. Combinations are produced in lexicographic order of
their source positions.
"""

import copy
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .checked import (
    MAX_COUNT,
    CountOverflowError,
    check_max_count,
    checked_add,
    checked_binomial,
)
from .lazy_buffer import LazyBuffer
from .metrics import COUNTERS
from .size_hint import SizeHint

counter = COUNTERS[__name__]

T = TypeVar("T")


def remaining_combinations(
    n: int, first: bool, indices: list[int], max_count: int = MAX_COUNT
) -> int | None:
    """
    Counts k-combinations of an `n`-set that follow the index vector `indices`,
    or all of them if `first`. Returns None on overflow.
    """
    k = len(indices)
    if n < k:
        return 0
    if first:
        return checked_binomial(n, k, max_count)
    # Each position i can still advance past its current index.
    total = 0
    for i, index in enumerate(indices):
        term = checked_binomial(n - 1 - index, k - i, max_count)
        if term is None:
            return None
        result = checked_add(total, term, max_count)
        if result is None:
            return None
        total = result
    return total


class Combinations(Generic[T]):
    """Iterator over k-combinations of a lazily buffered source."""

    def __init__(self, pool: LazyBuffer[T], k: int) -> None:
        if k < 0:
            raise ValueError(f"k must be nonnegative, got {k}")
        self._pool = pool
        self._indices: list[int] = list(range(k))
        self._first = True
        self._spent = False
        pool.prefill(k)

    @property
    def k(self) -> int:
        """Size of the combinations currently produced."""
        return len(self._indices)

    @property
    def n(self) -> int:
        """Number of source elements read so far."""
        return len(self._pool)

    @property
    def src(self) -> LazyBuffer[T]:
        return self._pool

    def reset(self, k: int) -> None:
        """Restarts at the first combination of size `k`, keeping the cache."""
        if k < 0:
            raise ValueError(f"k must be nonnegative, got {k}")
        counter["combinations.reset"] += 1
        self._first = True
        self._indices[:] = range(k)
        self._pool.prefill(k)

    def __iter__(self) -> Iterator[list[T]]:
        return self

    def __next__(self) -> list[T]:
        indices = self._indices
        pool = self._pool
        if self._spent:
            raise StopIteration
        if self._first:
            if self.k > self.n:
                raise StopIteration
            self._first = False
        elif not indices:
            raise StopIteration
        else:
            i = len(indices) - 1
            # Read one more element once the last index hits the end.
            if indices[i] == len(pool) - 1:
                pool.get_next()
            while indices[i] == i + len(pool) - len(indices):
                if i == 0:
                    raise StopIteration
                i -= 1
            indices[i] += 1
            for j in range(i + 1, len(indices)):
                indices[j] = indices[j - 1] + 1
        counter["combinations.next"] += 1
        return [pool[i] for i in indices]

    def size_hint(self) -> SizeHint:
        """Bounds on the number of remaining combinations of the current size."""
        if self._spent:
            return 0, 0
        max_count = self._pool.max_count
        lower, upper = self._pool.size_hint()
        new_lower = remaining_combinations(lower, self._first, self._indices, max_count)
        if new_lower is None:
            new_lower = max_count
        new_upper = None
        if upper is not None:
            new_upper = remaining_combinations(
                upper, self._first, self._indices, max_count
            )
        return new_lower, new_upper

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def n_and_count(self) -> tuple[int, int]:
        """
        Consumes the rest of the source, returning the exact number of source
        elements and the exact number of remaining combinations.
        """
        n = self._pool.count()
        self._spent = True
        result = remaining_combinations(
            n, self._first, self._indices, self._pool.max_count
        )
        if result is None:
            raise CountOverflowError(
                f"Too many {self.k}-combinations of {n} elements to count"
            )
        return n, result

    def count(self) -> int:
        """Consumes the iterator, returning the number of remaining items."""
        return self.n_and_count()[1]

    def __copy__(self) -> "Combinations[T]":
        result: Combinations[T] = Combinations.__new__(Combinations)
        result._pool = copy.copy(self._pool)
        result._indices = list(self._indices)
        result._first = self._first
        result._spent = self._spent
        return result

    def __repr__(self) -> str:
        return (
            f"Combinations(indices={self._indices!r}, pool={self._pool!r}, "
            f"first={self._first}, spent={self._spent})"
        )


def combinations(
    iterable: Iterable[T], k: int, *, max_count: int = MAX_COUNT
) -> Combinations[T]:
    """Lazily iterates over all `k`-combinations of `iterable`."""
    pool = LazyBuffer(iterable, max_count=check_max_count(max_count))
    return Combinations(pool, k)
