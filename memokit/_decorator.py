import inspect
import logging
import threading

from memokit._info import CacheInfo
from memokit._keys import resolve_key

log = logging.getLogger(__name__)

_MISSING = object()


def _copy_metadata(wrapper, fn):
    wrapper.__wrapped__ = fn
    wrapper.__name__ = getattr(fn, "__name__", repr(fn))
    wrapper.__qualname__ = getattr(fn, "__qualname__", wrapper.__name__)
    wrapper.__module__ = getattr(fn, "__module__", None)
    wrapper.__doc__ = getattr(fn, "__doc__", None)


class MemoizedFunction:
    """Single-argument function whose results are cached per key.

    The cache is a plain dict owned by this instance. It is never evicted
    and grows by one entry for every distinct key seen. Reads and writes
    both go through the same key function, and the lock only covers the
    dict access: ``fn`` itself runs unlocked, so two threads missing on
    the same key at once may both compute it.
    """

    def __init__(self, fn, key_fn, miss_on_falsy=False):
        self._fn = fn
        self._key_fn = key_fn
        self._miss_on_falsy = miss_on_falsy
        self._cache = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        _copy_metadata(self, fn)

    def __call__(self, arg):
        key = self.make_key(arg)
        cached = self.get(key)
        if cached is not _MISSING:
            return cached
        result = self._fn(arg)
        self.set(key, result)
        return result

    def make_key(self, arg):
        return self._key_fn(arg)

    def get(self, key):
        """Return the value stored under *key*, or ``_MISSING`` on a miss.

        Counts the lookup as a hit or a miss.
        """
        with self._lock:
            value = self._cache.get(key, _MISSING)
            if value is not _MISSING and (not self._miss_on_falsy or value):
                self._hits += 1
                hit = True
            else:
                self._misses += 1
                value = _MISSING
                hit = False
        log.debug("%s: %s for key %r", self.__qualname__, "hit" if hit else "miss", key)
        return value

    def set(self, key, value):
        with self._lock:
            self._cache[key] = value

    def cache_info(self):
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._cache))

    def cache_clear(self):
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def __repr__(self):
        return f"<MemoizedFunction {self.__qualname__}>"


class AsyncMemoizedFunction:
    """Async wrapper around a MemoizedFunction.

    Uses the inner get/set methods for cache lookup/store so that the
    coroutine function is only awaited on cache miss.
    """

    def __init__(self, fn, inner):
        self._fn = fn
        self._inner = inner
        _copy_metadata(self, fn)

    async def __call__(self, arg):
        key = self._inner.make_key(arg)
        cached = self._inner.get(key)
        if cached is not _MISSING:
            return cached
        result = await self._fn(arg)
        self._inner.set(key, result)
        return result

    def cache_info(self):
        return self._inner.cache_info()

    def cache_clear(self):
        return self._inner.cache_clear()

    def __repr__(self):
        return f"<AsyncMemoizedFunction {self.__qualname__}>"


def memoize(func=None, *, key="str", miss_on_falsy: bool = False):
    """Memoizing decorator for single-argument functions.

    Works bare (``@memoize`` or ``memoize(fn)``) and with options
    (``@memoize(key="repr")``). Supports both sync and async functions;
    the async detection happens once at decoration time.

    Args:
        func: The function to wrap. Omit it to get a decorator back.
        key: How an argument becomes a cache key. A KeyScheme, its int
             value, its lowercase name ("str", "repr", "identity"), or a
             callable taking the argument. Defaults to the string form,
             so ``5`` and ``"5"`` share an entry.
        miss_on_falsy: Treat falsy cached values (``0``, ``""``, ``None``,
             ...) as misses and recompute them.
    """
    key_fn = resolve_key(key)

    def decorator(fn):
        if not callable(fn):
            raise TypeError(f"memoize expects a callable, got {type(fn).__name__}")
        inner = MemoizedFunction(fn, key_fn, miss_on_falsy=miss_on_falsy)

        if inspect.iscoroutinefunction(fn):
            return AsyncMemoizedFunction(fn, inner)

        return inner

    if func is not None:
        return decorator(func)
    return decorator
