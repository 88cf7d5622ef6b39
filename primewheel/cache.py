"""
Bounded factorization cache.

An explicitly owned, explicitly sized memo in front of the factorization
engine. There is no module-level cache: callers create one and decide its
lifetime and capacity.

Eviction is a whole-cache flush: when the number of keys has reached
capacity, everything is dropped before the new entry goes in.

Concurrency: insert and flush-and-insert run under one lock. Lookups of
resident entries read the dict without locking. Values are immutable tuples
stored by a single dict assignment, so a reader sees an entry either fully
present or absent. Two threads missing on the same key may both
compute it; both results are identical.
"""

import threading
from typing import Dict, List, Tuple

from .factorization import factorize
from .widths import DEFAULT_WIDTH, WidthLike, width_for

DEFAULT_CACHE_CAPACITY = 10_000


class FactorCache:
    """
    Memoizes factorize(n) per distinct n, up to `capacity` entries.

    `misses` and `flushes` are exact; `hits` is counted without the lock and
    may undercount under concurrent reads.

    >>> cache = FactorCache(capacity=2)
    >>> cache.get_or_compute(12)
    [2, 2, 3]
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY,
                 width: WidthLike = DEFAULT_WIDTH):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self.width = width_for(width)
        self._entries: Dict[int, Tuple[int, ...]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        self.flushes = 0

    def get_or_compute(self, n: int) -> List[int]:
        """
        Return the prime factors of n, computing and storing them on a miss.

        Same contract as factorize: InvalidNumber for n < 1, [] for 1.
        Each call returns a fresh list; cached entries are never mutated.
        """
        n = self.width.coerce(n)
        cached = self._entries.get(n)
        if cached is not None:
            self.hits += 1
            return list(cached)

        factors = tuple(factorize(n, self.width))

        with self._lock:
            self.misses += 1
            if n not in self._entries:
                if len(self._entries) >= self.capacity:
                    self._entries.clear()
                    self.flushes += 1
                self._entries[n] = factors
        return list(factors)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, n) -> bool:
        return n in self._entries

    def __repr__(self) -> str:
        return (f"FactorCache(capacity={self.capacity}, size={len(self)}, "
                f"hits={self.hits}, misses={self.misses}, flushes={self.flushes})")
