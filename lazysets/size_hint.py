"""
# Bounds on the length of iterables.

A size hint is a pair `(lower, upper)` where `upper is None` means unknown or
unbounded. Unlike `operator.length_hint()`, which is only an estimate, both
bounds here are promises.
"""

from collections.abc import Sized
from typing import TypeAlias

from .checked import MAX_COUNT, checked_add

SizeHint: TypeAlias = tuple[int, int | None]

UNKNOWN: SizeHint = (0, None)


def size_hint(obj: object) -> SizeHint:
    """
    Returns bounds on the number of items `iter(obj)` will produce.

    Objects may provide their own `size_hint()` method; sized collections are
    exact; anything else is unknown.
    """
    method = getattr(obj, "size_hint", None)
    if callable(method):
        lower, upper = method()
        return lower, upper
    if isinstance(obj, Sized):
        try:
            n = len(obj)
        except OverflowError:
            # Too long for len(), e.g. range(2**70).
            return UNKNOWN
        return n, n
    return UNKNOWN


def add_scalar(hint: SizeHint, x: int, max_count: int = MAX_COUNT) -> SizeHint:
    """Adds `x` to both bounds, saturating the lower and checking the upper."""
    lower, upper = hint
    new_lower = checked_add(lower, x, max_count)
    if new_lower is None:
        new_lower = max_count
    if upper is not None:
        upper = checked_add(upper, x, max_count)
    return new_lower, upper
