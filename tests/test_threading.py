import threading
from concurrent.futures import ThreadPoolExecutor

from memokit import memoize


def test_concurrent_access():
    """Multiple threads hitting the same memoized function concurrently."""
    call_count = 0
    lock = threading.Lock()

    @memoize(key="identity")
    def slow_square(x):
        nonlocal call_count
        with lock:
            call_count += 1
        return x * x

    def worker(i):
        # Each thread calls with the same args to exercise cache hits
        for _ in range(50):
            assert slow_square(3) == 9
            assert slow_square(i) == i * i

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(worker, i) for i in range(8)]
        for f in futures:
            f.result()

    info = slow_square.cache_info()
    assert info.hits > 0
    assert info.hits + info.misses == 8 * 50 * 2
    # keys 0..7 (3 shared with i == 3)
    assert info.current_size == 8
    # call_count should be much less than 8 * 50 * 2 = 800
    assert call_count < 800


def test_concurrent_cache_clear():
    """cache_clear during concurrent access doesn't crash or corrupt values."""

    @memoize
    def fn(x):
        return x

    stop = threading.Event()
    errors = []

    def reader():
        while not stop.is_set():
            if fn(1) != 1 or fn(2) != 2:
                errors.append("bad value")

    def clearer():
        for _ in range(50):
            fn.cache_clear()

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads.append(threading.Thread(target=clearer))
    for t in threads:
        t.start()

    threads[-1].join(timeout=5)
    stop.set()
    for t in threads:
        t.join(timeout=5)

    assert errors == []
    assert fn.cache_info().current_size <= 2
