"""
# Event counters, grouped by module.

Each module keeps its own counter via `counter = COUNTERS[__name__]`.
"""

import logging
from collections import Counter, defaultdict

logger = logging.getLogger(__name__)

COUNTERS: defaultdict[str, Counter[str]] = defaultdict(Counter)


def log_counters(level: int = logging.INFO) -> None:
    """Log all nonempty counters, one module per message."""
    for name, counter in sorted(COUNTERS.items()):
        if not counter:
            continue
        lines = "".join(f"\n  {k}: {v}" for k, v in sorted(counter.items()))
        logger.log(level, f"{name}:{lines}")
