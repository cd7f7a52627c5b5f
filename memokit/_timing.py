import logging
import time

log = logging.getLogger("memokit")


def timed(fn, *, label=None, logger=None):
    """Wrap a single-argument function and log how long each call takes.

    Every successful call logs ``"<label>(<arg>) = time elapsed: <ms>ms"``
    at INFO and records the measurement on ``wrapper.last_elapsed_ms``.
    """
    name = label or getattr(fn, "__name__", repr(fn))
    out = logger or log

    def wrapper(arg):
        t0 = time.perf_counter()
        result = fn(arg)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        wrapper.last_elapsed_ms = elapsed_ms
        out.info("%s(%s) = time elapsed: %.3fms", name, arg, elapsed_ms)
        return result

    wrapper.last_elapsed_ms = None
    wrapper.__wrapped__ = fn
    wrapper.__name__ = f"timed_{name}"
    return wrapper
