from memokit._decorator import AsyncMemoizedFunction, MemoizedFunction, memoize
from memokit._fibonacci import fib, memo_fib
from memokit._info import CacheInfo
from memokit._keys import KeyScheme
from memokit._timing import timed

__all__ = [
    "AsyncMemoizedFunction",
    "CacheInfo",
    "fib",
    "KeyScheme",
    "memo_fib",
    "memoize",
    "MemoizedFunction",
    "timed",
]
