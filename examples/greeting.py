# /// script
# requires-python = ">=3.10"
# dependencies = ["memokit"]
# ///
"""Memoize a greeting — the repeated name is served from cache."""

import logging

from memokit import memoize

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger(__name__)


def say_hello(name):
    log.info("  [miss] building greeting for %s", name)
    return f"hello there {name}"


say_hello_memo = memoize(say_hello)


if __name__ == "__main__":
    for name in ["Alice", "Bob", "Carol", "Dean", "Alice", "Elise"]:
        log.info(say_hello_memo(name))

    # Alice was computed once: 5 misses, 1 hit
    log.info("Cache info: %s", say_hello_memo.cache_info())
