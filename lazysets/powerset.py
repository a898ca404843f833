"""
# Lazy powersets.

A `Powerset` yields every subset of its source, smallest first: the empty
subset, then each singleton, then each pair, and so on up to the full set.
Subsets of equal size appear in lexicographic order of source positions.
"""

import copy
import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .checked import MAX_COUNT, CountOverflowError, remaining_for
from .combinations import Combinations, combinations
from .metrics import COUNTERS
from .size_hint import SizeHint

logger = logging.getLogger(__name__)
counter = COUNTERS[__name__]

T = TypeVar("T")


class Powerset(Generic[T]):
    """
    Iterator over all subsets of the elements of an iterable.

    Each subset is a new list of the source's elements in source order. The
    source is read lazily and each element is read only once. For an infinite
    source this never terminates: all finite subsets of the elements seen so
    far are yielded before the subset size grows.

    Once exhausted, a `Powerset` stays exhausted.
    """

    def __init__(self, iterable: Iterable[T], *, max_count: int = MAX_COUNT) -> None:
        self._combs: Combinations[T] = combinations(iterable, 0, max_count=max_count)
        self._done = False

    @property
    def k(self) -> int:
        """Size of the subsets currently produced."""
        return self._combs.k

    @property
    def n(self) -> int:
        """Number of source elements read so far."""
        return self._combs.n

    @property
    def max_count(self) -> int:
        return self._combs.src.max_count

    def __iter__(self) -> Iterator[list[T]]:
        return self

    def __next__(self) -> list[T]:
        if self._done:
            raise StopIteration
        combs = self._combs
        try:
            return next(combs)
        except StopIteration:
            pass
        # Size 0 never reads the source, so n is unknown until we try size 1.
        if combs.k < combs.n or combs.k == 0:
            combs.reset(combs.k + 1)
            counter["powerset.grow"] += 1
            logger.debug(f"Growing powerset to size {combs.k}")
            try:
                return next(combs)
            except StopIteration:
                pass
        logger.debug(f"Powerset of {combs.n} elements is exhausted")
        self._done = True
        raise StopIteration

    def size_hint(self) -> SizeHint:
        """Bounds on the number of remaining subsets."""
        if self._done:
            return 0, 0
        k = self._combs.k
        max_count = self.max_count
        # Bounds on the total number of source elements.
        n_lower, n_upper = self._combs.src.size_hint()
        # Bounds on the remaining subsets of the current size.
        lower, upper = self._combs.size_hint()
        new_lower = remaining_for(lower, n_lower, k, max_count)
        if new_lower is None:
            new_lower = max_count
        new_upper = None
        if upper is not None and n_upper is not None:
            new_upper = remaining_for(upper, n_upper, k, max_count)
        return new_lower, new_upper

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def count(self) -> int:
        """
        Consumes the source, returning the exact number of remaining subsets.

        :raises CountOverflowError: if the count exceeds `max_count`.
        """
        if self._done:
            return 0
        self._done = True
        k = self._combs.k
        n, count = self._combs.n_and_count()
        result = remaining_for(count, n, k, self.max_count)
        if result is None:
            raise CountOverflowError(f"Too many subsets of {n} elements to count")
        return result

    def __copy__(self) -> "Powerset[T]":
        result: Powerset[T] = Powerset.__new__(Powerset)
        result._combs = copy.copy(self._combs)
        result._done = self._done
        return result

    def __repr__(self) -> str:
        return f"Powerset(combs={self._combs!r})"


def powerset(iterable: Iterable[T], *, max_count: int = MAX_COUNT) -> Powerset[T]:
    """Lazily iterates over all subsets of `iterable`, smallest first."""
    return Powerset(iterable, max_count=max_count)
