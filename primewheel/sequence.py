"""
Lazy prime sequence.

Produces the primes of [start, through] one at a time, so a caller that
only needs the first few primes of a huge interval does not pay for the
whole enumeration. No span ceiling applies: the caller decides when to stop.
"""

import operator
from typing import Iterator

from .primality import is_prime
from .ranges import validate_range
from .wheel import small_primes_in, wheel_candidates
from .widths import DEFAULT_WIDTH, WidthLike, width_for


class PrimeSequence:
    """
    Single-pass iterator over the primes in [start, through].

    Once exhausted it stays exhausted; build a new instance to iterate again.

    >>> list(PrimeSequence(10, 30))
    [11, 13, 17, 19, 23, 29]
    """

    def __init__(self, start: int, through: int, width: WidthLike = DEFAULT_WIDTH):
        self.width = width_for(width)
        self.start = operator.index(start)
        self.through = operator.index(through)
        validate_range(self.start, self.through, self.width)
        self._candidates = self._walk()
        self._exhausted = self.start > self.through

    def _walk(self) -> Iterator[int]:
        yield from small_primes_in(self.start, self.through)
        yield from wheel_candidates(self.start, self.through, self.width.max)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> 'PrimeSequence':
        return self

    def __next__(self) -> int:
        if self._exhausted:
            raise StopIteration
        for candidate in self._candidates:
            if is_prime(candidate, self.width):
                return candidate
        self._exhausted = True
        raise StopIteration

    def __repr__(self) -> str:
        return f"PrimeSequence({self.start}, {self.through}, width={self.width.name!r})"
