"""
Tests for the sieve and the prime cache helpers.
"""

import numpy as np
import pytest

from factorial_engine.primes import prime_flags_upto, primes_upto, covers, extend_primes


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


def is_prime_trial(n: int) -> bool:
    """Primality by trial division, independent of the sieve."""
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


class TestPrimeFlags:
    """Test the boolean marker array from prime_flags_upto."""

    def test_flags_match_known_primes(self):
        """Known primes are flagged, known composites and 0, 1 are not."""
        flags = prime_flags_upto(50)

        for p in SMALL_PRIMES:
            assert flags[p], f"{p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not flags[n], f"{n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    def test_length(self):
        """Array has N+1 entries, one per index 0..N."""
        assert len(prime_flags_upto(10)) == 11

    @pytest.mark.parametrize("N", [0, 1])
    def test_below_two_has_no_primes(self, N):
        """N = 0 or 1 gives an all-False array of length N+1."""
        flags = prime_flags_upto(N)
        assert len(flags) == N + 1
        assert not flags.any()

    def test_negative_is_empty(self):
        """Negative N gives an empty array."""
        assert len(prime_flags_upto(-5)) == 0

    def test_matches_trial_division(self):
        """Sieve agrees with trial division up to 1000."""
        N = 1000
        flags = prime_flags_upto(N)
        expected = np.array([is_prime_trial(n) for n in range(N + 1)])
        assert np.array_equal(flags, expected)


class TestPrimesUpto:
    """Test the ascending prime list from primes_upto."""

    def test_primes_upto_50(self):
        """Primes <= 50 are exactly the known small primes."""
        assert primes_upto(50).tolist() == SMALL_PRIMES

    @pytest.mark.parametrize("N", [-1, 0, 1])
    def test_empty_below_two(self, N):
        """No primes below 2."""
        assert len(primes_upto(N)) == 0

    @pytest.mark.parametrize("N, count", [(2, 1), (10, 4), (100, 25), (1000, 168), (10**5, 9592)])
    def test_prime_counts(self, N, count):
        """Counts match pi(N)."""
        assert len(primes_upto(N)) == count

    def test_inclusive_upper_bound(self):
        """N itself is included when prime."""
        assert primes_upto(97)[-1] == 97
        assert primes_upto(96)[-1] == 89

    def test_strictly_increasing_int64(self):
        """Output is int64 and strictly increasing."""
        primes = primes_upto(500)
        assert primes.dtype == np.int64
        assert np.all(np.diff(primes) > 0)

    def test_empty_is_int64(self):
        """Empty output keeps the int64 dtype."""
        assert primes_upto(1).dtype == np.int64


class TestCacheExtension:
    """Test covers/extend_primes on (primes, sieve_limit) caches."""

    def test_covers_uses_sieve_limit(self):
        """Coverage is decided by the sieved bound, not the largest prime."""
        assert covers(100, 97)
        assert covers(100, 98)
        assert covers(100, 100)
        assert not covers(100, 101)
        assert not covers(None, 2)

    def test_reuses_covering_cache(self):
        """A covering cache is returned as the same object."""
        primes = primes_upto(100)
        extended, limit = extend_primes(primes, 100, 50)
        assert extended is primes
        assert limit == 100

    def test_composite_limit_is_covered_after_extension(self):
        """Sieving to a composite limit leaves a cache that covers it."""
        primes, limit = extend_primes(np.zeros(0, dtype=np.int64), None, 50)
        assert primes[-1] == 47
        again, _ = extend_primes(primes, limit, 50)
        assert again is primes

    def test_extends_small_cache(self):
        """A cache below the limit is re-sieved up to the limit."""
        primes = primes_upto(10)
        extended, limit = extend_primes(primes, 10, 30)
        assert extended.tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        assert limit == 30

    def test_does_not_mutate_input(self):
        """Extension leaves the input array unchanged."""
        primes = primes_upto(10)
        before = primes.copy()
        extend_primes(primes, 10, 1000)
        assert np.array_equal(primes, before)

    def test_extends_empty_cache(self):
        """A never-sieved cache is sieved from scratch."""
        extended, limit = extend_primes(np.zeros(0, dtype=np.int64), None, 20)
        assert extended.tolist() == [2, 3, 5, 7, 11, 13, 17, 19]
        assert limit == 20


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
