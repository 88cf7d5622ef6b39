"""
Primality oracle.

Responsibility: decide whether a single integer is prime. No factorization,
no caching; a cache in front of it is the caller's choice.

Deterministic trial division over the 6k±1 wheel. Bounds use division
(d <= n // d) rather than squaring, and the width's max_divisor caps the
final iterations, so nothing overflows for n at the top of the width.
"""

from numba import njit

from .widths import DEFAULT_WIDTH, WidthLike, width_for


@njit
def _wheel_is_prime(n: int, max_divisor: int) -> bool:
    """Trial divide n (coprime to 6, n > 3) by d, d+2 for d = 5, 11, 17, ..."""
    d = 5
    while d <= max_divisor and d <= n // d:
        if n % d == 0 or n % (d + 2) == 0:
            return False
        d += 6
    return True


def is_prime(n: int, width: WidthLike = DEFAULT_WIDTH) -> bool:
    """
    Return True iff n is prime.

    Parameters
    ----------
    n : int
        Integer to test. Any value representable in `width`.
    width : str or np.dtype
        Integer width n is interpreted in (default int64).

    Returns
    -------
    bool
        False for n <= 1, True for 2 and 3.

    Raises
    ------
    IntegerOverflow
        If n does not fit the width.
    """
    w = width_for(width)
    n = w.coerce(n)
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    return bool(_wheel_is_prime(n, w.max_divisor))
