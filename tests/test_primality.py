"""
Tests for the primality oracle.

The oracle is checked against a hand-written table for small n and against
the independent Sieve of Eratosthenes for everything up to 10^4.
"""

import numpy as np
import pytest

from primewheel.errors import IntegerOverflow, RangeError
from primewheel.primality import is_prime
from primewheel.primes import prime_flags_upto, primes_upto


# Every prime <= 200
PRIMES_TO_200 = {
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149,
    151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199,
}

INT64_MAX = 2**63 - 1


class TestReferenceTable:
    """is_prime against the precomputed table for 1..200."""

    def test_matches_table(self):
        for n in range(1, 201):
            expected = n in PRIMES_TO_200
            assert is_prime(n) == expected, f"is_prime({n}) should be {expected}"

    def test_table_endpoints(self):
        assert is_prime(1) is False
        assert is_prime(2) is True
        assert is_prime(3) is True
        assert is_prime(4) is False
        assert is_prime(199) is True
        assert is_prime(200) is False


class TestBoundaryCases:

    @pytest.mark.parametrize("n", [0, -1, -2, -3, -7, -(2**63)])
    def test_non_positive_is_not_prime(self, n):
        assert is_prime(n) is False

    @pytest.mark.parametrize("n", [25, 35, 49, 121, 169, 289, 5 * 7 * 11])
    def test_wheel_composites(self, n):
        """Composites coprime to 6 are only caught by the wheel loop."""
        assert not is_prime(n), f"{n} is composite"

    @pytest.mark.parametrize("p", [5, 7, 11, 13, 7919, 104729, 2**31 - 1])
    def test_known_primes(self, p):
        assert is_prime(p)

    def test_square_of_prime_just_past_bound(self):
        """p*p must be found when d == p exactly hits the d <= n // d bound."""
        for p in [5, 7, 11, 13, 46337]:
            assert not is_prime(p * p), f"{p}^2 should be composite"

    def test_int64_max_is_composite(self):
        """2^63 - 1 = 7^2 * 73 * 127 * 337 * 92737 * 649657."""
        assert is_prime(INT64_MAX) is False

    def test_near_int64_max_does_not_overflow(self):
        """Composites at the top of int64 (factors 2, 5, 2, 3)."""
        for n in [INT64_MAX - 1, INT64_MAX - 2, INT64_MAX - 3, INT64_MAX - 4]:
            assert is_prime(n) is False, f"{n} is composite"

    def test_accepts_numpy_integers(self):
        assert is_prime(np.int64(97))
        assert not is_prime(np.int32(91))


class TestWidths:

    def test_value_outside_width_rejected(self):
        with pytest.raises(IntegerOverflow):
            is_prime(2**63)
        with pytest.raises(IntegerOverflow):
            is_prime(128, width='int8')

    def test_int8_maximum(self):
        assert is_prime(127, width='int8')

    def test_int32_maximum(self):
        assert is_prime(2**31 - 1, width=np.int32)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            is_prime(7.0)


class TestSieveAgreement:

    def test_agrees_with_sieve_to_10000(self):
        N = 10_000
        flags = prime_flags_upto(N)
        for n in range(N + 1):
            assert is_prime(n) == bool(flags[n]), f"oracle and sieve disagree at {n}"

    def test_idempotent(self):
        for n in [1, 2, 91, 97, INT64_MAX]:
            assert is_prime(n) == is_prime(n)


class TestSieve:

    def test_primes_upto_small(self):
        assert primes_upto(30).tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    @pytest.mark.parametrize("N", [-1, 0, 1])
    def test_primes_upto_empty(self, N):
        assert len(primes_upto(N)) == 0

    def test_prime_count_to_million(self):
        assert len(primes_upto(1_000_000)) == 78498

    def test_limit_enforced(self):
        with pytest.raises(RangeError):
            primes_upto(1_000_001)
