from typing import NamedTuple


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    current_size: int
