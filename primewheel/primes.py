"""
Sieve of Eratosthenes.

Responsibility: dense prime tables for small limits. Used as the
independent reference the trial-division oracle is checked against, and
for callers who want every prime up to N at once.
"""

import numpy as np

from .errors import RangeError
from .ranges import DEFAULT_MAX_SPAN


def prime_flags_upto(N: int, max_limit: int = DEFAULT_MAX_SPAN) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).
    max_limit : int
        Largest N accepted; the table holds N + 1 entries in memory.

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (length 0 for N < 0).

    Raises
    ------
    RangeError
        If N exceeds max_limit.
    """
    if N > max_limit:
        raise RangeError(0, N, f"sieve limit exceeds ceiling {max_limit}")
    if N < 0:
        return np.zeros(0, dtype=bool)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(N**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int, max_limit: int = DEFAULT_MAX_SPAN) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes (int64). Empty for N < 2.
    """
    flags = prime_flags_upto(N, max_limit)
    return np.nonzero(flags)[0].astype(np.int64)
