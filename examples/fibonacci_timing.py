# /// script
# requires-python = ">=3.10"
# dependencies = ["memokit"]
# ///
"""Time Fibonacci with and without memoization for n = 5, 10, ..., 95."""

import logging

from memokit import fib, memo_fib, memoize, timed

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger(__name__)

# Naive recursion is exponential: fib(40) already takes seconds
NAIVE_LIMIT = 30


@memoize(key="identity")
def cached_fib(n):
    if n <= 2:
        return 1
    return cached_fib(n - 1) + cached_fib(n - 2)


if __name__ == "__main__":
    variants = [
        ("fib", timed(fib, label="fib"), NAIVE_LIMIT),
        ("memoize(fib)", timed(cached_fib, label="memoized fib"), None),
        ("memo_fib", timed(memo_fib, label="memo_fib"), None),
    ]
    for title, fn, limit in variants:
        log.info("\n%s:", title)
        for n in range(5, 100, 5):
            if limit is not None and n > limit:
                log.info("  skipping n > %d (exponential time)", limit)
                break
            fn(n)

    log.info("\nmemoize(fib) cache info: %s", cached_fib.cache_info())
