"""
# Checked arithmetic for counting combinations.

Counts are bounded by a representable maximum, by default `sys.maxsize`, the
largest value `len()` and `__length_hint__()` may return. Functions here return
`None` rather than an out-of-range value.
"""

import sys
from functools import lru_cache

MAX_COUNT = sys.maxsize
BINOMIAL_CACHE_SIZE = 4096


class CountOverflowError(OverflowError):
    """An exact count does not fit under the representable maximum."""


def checked_add(lhs: int, rhs: int, max_count: int = MAX_COUNT) -> int | None:
    result = lhs + rhs
    if result > max_count:
        return None
    return result


@lru_cache(maxsize=BINOMIAL_CACHE_SIZE)
def checked_binomial(n: int, k: int, max_count: int = MAX_COUNT) -> int | None:
    """
    Computes the binomial coefficient `C(n, k)`, or None if it exceeds
    `max_count`. By convention `C(n, k) == 0` for `k > n`.
    """
    assert n >= 0 and k >= 0
    if k > n:
        return 0
    k = min(k, n - k)
    # Partial products C(n - k + i, i) increase with i, so we can stop early.
    c = 1
    for i in range(1, k + 1):
        c = c * (n - k + i) // i
        if c > max_count:
            return None
    return c if c <= max_count else None


def remaining_for(
    init_count: int, n: int, k: int, max_count: int = MAX_COUNT
) -> int | None:
    """
    Computes `init_count + sum(C(n, i) for i in range(k + 1, n + 1))`, i.e.
    `init_count` plus the number of subsets of an `n`-set of size greater than
    `k`. Returns None if any term or partial sum exceeds `max_count`.
    """
    if init_count > max_count:
        return None
    total = init_count
    for i in range(k + 1, n + 1):
        term = checked_binomial(n, i, max_count)
        if term is None:
            return None
        result = checked_add(total, term, max_count)
        if result is None:
            return None
        total = result
    return total


def check_max_count(max_count: int) -> int:
    if max_count < 0:
        raise ValueError(f"max_count must be nonnegative, got {max_count}")
    return max_count
