"""
Bounded range enumerator.

Responsibility: every prime in a closed interval [start, through], ascending.

The span (through - start) drives the iteration count regardless of how
large the endpoints are, so it is capped by `max_span` and checked before
any work is done.
"""

import operator

import numpy as np

from .errors import RangeError
from .primality import is_prime
from .wheel import small_primes_in, wheel_candidates
from .widths import DEFAULT_WIDTH, IntegerWidth, WidthLike, width_for

DEFAULT_MAX_SPAN = 1_000_000


def validate_range(start: int, through: int, w: IntegerWidth) -> None:
    """
    Reject intervals that can't be enumerated.

    Raises RangeError if start < 1 or if either bound lies outside the
    width. An inverted interval (start > through) is not an error here;
    callers treat it as empty.
    """
    if start < 1:
        raise RangeError(start, through, "start must be >= 1")
    if start > w.max or through > w.max:
        raise RangeError(start, through, f"bounds exceed {w.name} maximum {w.max}")


def primes_in_range(start: int, through: int, max_span: int = DEFAULT_MAX_SPAN,
                    width: WidthLike = DEFAULT_WIDTH) -> np.ndarray:
    """
    Return all primes p with start <= p <= through.

    Parameters
    ----------
    start : int
        Lower bound (inclusive), >= 1.
    through : int
        Upper bound (inclusive).
    max_span : int
        Largest allowed through - start.
    width : str or np.dtype
        Integer width of the bounds and of the result array.

    Returns
    -------
    np.ndarray
        Ascending primes with the width's dtype. Empty if start > through.

    Raises
    ------
    RangeError
        If start < 1, a bound exceeds the width, or the span exceeds max_span.
    """
    w = width_for(width)
    start = operator.index(start)
    through = operator.index(through)
    validate_range(start, through, w)
    if start > through:
        return w.empty()
    if through - start > max_span:
        raise RangeError(start, through, f"span {through - start} exceeds ceiling {max_span}")

    primes = list(small_primes_in(start, through))
    primes.extend(c for c in wheel_candidates(start, through, w.max) if is_prime(c, w))
    return np.array(primes, dtype=w.dtype)
