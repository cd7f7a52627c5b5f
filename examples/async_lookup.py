# /// script
# requires-python = ">=3.10"
# dependencies = ["memokit"]
# ///
"""Async memoization — memokit auto-detects coroutine functions."""

import asyncio
import logging

from memokit import memoize

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger(__name__)


@memoize
async def fetch_user(user_id):
    """Simulate an async API call."""
    log.info("  [miss] fetching user %s", user_id)
    await asyncio.sleep(0.1)  # simulate network latency
    return {"id": user_id, "name": f"User {user_id}"}


async def main():
    user = await fetch_user(42)
    log.info("Got: %s", user)

    # Same key, no network round-trip
    user = await fetch_user(42)
    log.info("Got: %s (cached)", user)

    # "42" stringifies like 42, so it is a hit too
    user = await fetch_user("42")
    log.info("Got: %s (cached, string key)", user)

    log.info("\nCache info: %s", fetch_user.cache_info())


if __name__ == "__main__":
    asyncio.run(main())
