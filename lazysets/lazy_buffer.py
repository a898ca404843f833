"""
# A caching wrapper around an iterator.

Elements are pulled from the source on demand and cached, so that consumers
may revisit earlier elements by position without re-reading the source.
"""

import itertools
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .checked import MAX_COUNT
from .metrics import COUNTERS
from .size_hint import SizeHint, add_scalar, size_hint

counter = COUNTERS[__name__]

T = TypeVar("T")


class LazyBuffer(Generic[T]):
    """
    Lazily caches the elements of an iterable.

    The source is fused: once it raises `StopIteration` it is never polled
    again. Bounds on the total number of elements come from the iterable's
    own hint, taken once for containers and live for iterators.
    """

    def __init__(self, iterable: Iterable[T], *, max_count: int = MAX_COUNT) -> None:
        self.max_count = max_count
        self._it: Iterator[T] = iter(iterable)
        # Containers report a total; iterators report what remains.
        self._total_hint: SizeHint | None = None
        if self._it is not iterable:
            self._total_hint = size_hint(iterable)
        self._buffer: list[T] = []
        self._skipped = 0
        self._done = False

    def __len__(self) -> int:
        """Number of elements cached so far."""
        return len(self._buffer)

    def __getitem__(self, index: int) -> T:
        return self._buffer[index]

    @property
    def done(self) -> bool:
        """Whether the source has been exhausted."""
        return self._done

    def get_next(self) -> bool:
        """Pulls one more element into the buffer, returning success."""
        if self._done:
            return False
        try:
            x = next(self._it)
        except StopIteration:
            self._done = True
            return False
        counter["lazy_buffer.pull"] += 1
        self._buffer.append(x)
        return True

    def prefill(self, length: int) -> None:
        """Pulls elements until `length` are cached or the source is exhausted."""
        while len(self._buffer) < length and self.get_next():
            pass

    def size_hint(self) -> SizeHint:
        """Bounds on the total number of elements, cached or not."""
        n = len(self._buffer) + self._skipped
        if self._done:
            return n, n
        if self._total_hint is None:
            return add_scalar(size_hint(self._it), n, self.max_count)
        lower, upper = self._total_hint
        lower = max(lower, n)
        if upper is not None:
            upper = max(upper, n)
        return lower, upper

    def count(self) -> int:
        """
        Consumes the rest of the source without caching it, returning the total
        number of elements.
        """
        if not self._done:
            for _ in self._it:
                self._skipped += 1
            self._done = True
        return len(self._buffer) + self._skipped

    def __copy__(self) -> "LazyBuffer[T]":
        result: LazyBuffer[T] = LazyBuffer.__new__(LazyBuffer)
        result.max_count = self.max_count
        result._buffer = list(self._buffer)
        result._skipped = self._skipped
        result._done = self._done
        if self._done:
            result._it = iter(())
            result._total_hint = self._total_hint
        else:
            # A tee has no hint of its own, so freeze the current one.
            self._total_hint = result._total_hint = self.size_hint()
            self._it, result._it = itertools.tee(self._it)
        return result

    def __repr__(self) -> str:
        return f"LazyBuffer(buffer={self._buffer!r}, done={self._done})"
