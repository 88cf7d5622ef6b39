"""
Factorization engine.

Responsibility: decompose an integer into its ascending multiset of prime
factors. This file does not call the primality oracle; it performs its own
trial division and must agree with it at every boundary.

Contract for undefined inputs: n < 1 raises InvalidNumber, n == 1 returns []
(1 has no prime factors but is a valid input).
"""

from typing import List

from numba import njit

from .errors import InvalidNumber
from .widths import DEFAULT_WIDTH, WidthLike, width_for


@njit
def _wheel_factor(n: int, max_divisor: int):
    """
    Factor an odd n > 1: phase 2 (threes) and phase 3 (6k±1 divisors).

    Whatever remains after the loop is prime and is appended last.
    """
    factors = []
    while n % 3 == 0:
        factors.append(3)
        n //= 3

    d = 5
    while d <= max_divisor and d <= n // d:
        while n % d == 0:
            factors.append(d)
            n //= d
        e = d + 2
        while n % e == 0:
            factors.append(e)
            n //= e
        d += 6

    if n > 1:
        factors.append(n)
    return factors


def _factorize(n: int, max_divisor: int) -> List[int]:
    """Factor an already validated n >= 1."""
    if n == 1:
        return []

    # Phase 1: all factors of 2 at once from the trailing zero count
    twos = (n & -n).bit_length() - 1
    factors = [2] * twos
    n >>= twos

    if n > 1:
        factors.extend(int(p) for p in _wheel_factor(n, max_divisor))
    return factors


def factorize(n: int, width: WidthLike = DEFAULT_WIDTH) -> List[int]:
    """
    Return the prime factors of n in ascending order, with multiplicity.

    Parameters
    ----------
    n : int
        Integer to factor.
    width : str or np.dtype
        Integer width n is interpreted in (default int64).

    Returns
    -------
    list of int
        e.g. 12 -> [2, 2, 3]. The product equals n and every element is
        prime. Empty for n == 1.

    Raises
    ------
    InvalidNumber
        If n < 1.
    IntegerOverflow
        If n does not fit the width.
    """
    w = width_for(width)
    n = w.coerce(n)
    if n < 1:
        raise InvalidNumber(n)
    return _factorize(n, w.max_divisor)


def smallest_prime_factor(n: int, width: WidthLike = DEFAULT_WIDTH) -> int:
    """Smallest prime dividing n. Raises InvalidNumber for n <= 1."""
    factors = factorize(n, width)
    if not factors:
        raise InvalidNumber(n)
    return factors[0]


def largest_prime_factor(n: int, width: WidthLike = DEFAULT_WIDTH) -> int:
    """Largest prime dividing n. Raises InvalidNumber for n <= 1."""
    factors = factorize(n, width)
    if not factors:
        raise InvalidNumber(n)
    return factors[-1]


def all_factors(n: int, width: WidthLike = DEFAULT_WIDTH) -> List[int]:
    """
    Return every positive divisor of n in ascending order.

    Built from the prime factorization, so it costs one factorize call
    rather than a scan up to sqrt(n).

    Parameters
    ----------
    n : int
        Integer >= 1.

    Returns
    -------
    list of int
        e.g. 66 -> [1, 2, 3, 6, 11, 22, 33, 66]. [1] for n == 1.
    """
    divisors = [1]
    prev = 0
    run_start = 0
    for p in factorize(n, width):
        # Repeated prime: only extend the divisors added by the last power
        if p != prev:
            run_start = 0
            prev = p
        new = [d * p for d in divisors[run_start:]]
        run_start = len(divisors)
        divisors.extend(new)
    return sorted(divisors)
