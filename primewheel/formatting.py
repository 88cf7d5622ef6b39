"""
Display helpers for factor lists. No arithmetic beyond counting.
"""

from collections import Counter
from typing import Sequence


def simple_array_description(factors: Sequence[int]) -> str:
    """[2, 2, 3] -> '[2, 2, 3]'"""
    return "[" + ", ".join(str(int(f)) for f in factors) + "]"


def factorization_string(factors: Sequence[int]) -> str:
    """
    Exponent form of a factor list.

    [2, 2, 3, 3, 3, 5] -> '2^2 × 3^3 × 5'. The empty factorization (of 1)
    is written '1'.
    """
    if len(factors) == 0:
        return "1"
    counts = Counter(int(f) for f in factors)
    return " × ".join(
        str(p) if k == 1 else f"{p}^{k}"
        for p, k in sorted(counts.items())
    )
