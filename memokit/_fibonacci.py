def fib(n):
    """Naive recursive Fibonacci, exponential in *n*. ``fib(1) == fib(2) == 1``."""
    if n <= 2:
        return 1
    return fib(n - 1) + fib(n - 2)


def memo_fib(n, previous_results=None):
    """Fibonacci with the cache passed explicitly down the recursion.

    After ``memo_fib(n, cache)`` the mapping holds one entry per value in
    ``1..n``, so each term is added exactly once.
    """
    if previous_results is None:
        previous_results = {}
    if n in previous_results:
        return previous_results[n]

    if n <= 2:
        result = 1
    else:
        result = memo_fib(n - 1, previous_results) + memo_fib(n - 2, previous_results)

    previous_results[n] = result
    return result
