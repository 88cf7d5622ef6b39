"""
The 6k±1 wheel.

Every prime > 3 is ≡ 1 or 5 (mod 6), i.e. a member of a pair
(6k-1, 6k+1). The wheel cursor always sits on the 6k-1 member and advances
by 6:

    cursor = 5, 11, 17, 23, ...   pair = (cursor, cursor + 2)

Overflow: near the top of a width both `cursor + 2` and `cursor + 6` can
exceed the maximum. The stepping helpers compare against `max_value - 2`
and `max_value - 6` before adding, never after.
"""

from typing import Iterator

WHEEL_STEP = 6
WHEEL_START = 5


def first_cursor(start: int) -> int:
    """
    First wheel cursor whose pair reaches `start`.

    The smallest c ≡ 5 (mod 6) with c >= 5 and c + 2 >= start. Members of
    the first pair that fall below `start` are filtered by the caller.

    Examples: start=1..7 → 5, start=8..13 → 11, start=14 → 17.
    """
    c = max(WHEEL_START, start - 2)
    return c + (WHEEL_START - c) % WHEEL_STEP


def small_primes_in(start: int, through: int) -> Iterator[int]:
    """The primes 2 and 3, which the wheel skips, when inside [start, through]."""
    for p in (2, 3):
        if start <= p <= through:
            yield p


def wheel_candidates(start: int, through: int, max_value: int) -> Iterator[int]:
    """
    Yield every wheel number in [start, through] in ascending order.

    Parameters
    ----------
    start, through : int
        Closed interval, already validated (1 <= start, through <= max_value).
    max_value : int
        Width maximum; stepping never computes a value above it.
    """
    cursor = first_cursor(start)
    while cursor <= through:
        if cursor >= start:
            yield cursor
        if cursor > max_value - 2:
            return
        partner = cursor + 2
        if partner > through:
            return
        if partner >= start:
            yield partner
        if cursor > max_value - WHEEL_STEP:
            return
        cursor += WHEEL_STEP
