"""
Prime factorization of n! without computing n!.

Responsibility: orchestration. Owns the prime cache, asks primes.py to
extend it and legendre.py for each exponent.
"""

import numpy as np
from typing import Dict, Optional

from .legendre import DEFAULT_WIDTH, check_fits, legendre_exponent, max_unsigned
from .primes import extend_primes, primes_upto


class FactorialEngine:
    """
    Computes {prime: exponent} for n!, reusing a cache of primes.

    The cache only grows through factorize(): a call with n no larger than
    the largest value sieved so far never re-sieves. Not thread-safe.

    Parameters
    ----------
    sieve_up_to : int, optional
        Pre-sieve primes up to this limit. None defers sieving to the
        first factorize() call.
    width : int or None
        Unsigned bit width bounding the power term in Legendre's formula.
        None removes the bound.
    """

    def __init__(self, sieve_up_to: Optional[int] = None,
                 width: Optional[int] = DEFAULT_WIDTH):
        if width is not None:
            max_unsigned(width)  # validate
        self.width = width
        self.primes_cache = np.zeros(0, dtype=np.int64)
        self.sieve_limit = None
        self.sieve_count = 0
        if sieve_up_to is not None:
            self.sieve_primes(sieve_up_to)

    @property
    def largest_prime(self) -> Optional[int]:
        if len(self.primes_cache) == 0:
            return None
        return int(self.primes_cache[-1])

    def sieve_primes(self, limit: int) -> None:
        """Replace the cache with every prime <= limit."""
        self.primes_cache = primes_upto(limit)
        self.sieve_limit = limit
        self.sieve_count += 1

    def calculate_exponent(self, n: int, p: int) -> int:
        """Exponent of p in n! under this engine's width."""
        return legendre_exponent(n, p, self.width)

    def factorize(self, n: int) -> Dict[int, int]:
        """
        Return the prime factorization of n! as {prime: exponent}.

        Parameters
        ----------
        n : int
            Factorial argument.

        Returns
        -------
        dict
            Primes p <= n mapped to their nonzero exponent in n!.
            Empty for n < 2.

        Raises
        ------
        OverflowError
            If n does not fit in the engine's width. Raised before any
            sieving, so the cache is left untouched.
        """
        if n < 2:
            return {}
        check_fits(n, self.width)

        primes, limit = extend_primes(self.primes_cache, self.sieve_limit, n)
        if primes is not self.primes_cache:
            self.primes_cache = primes
            self.sieve_limit = limit
            self.sieve_count += 1

        stop = np.searchsorted(self.primes_cache, n, side='right')
        factors = {}
        for p in self.primes_cache[:stop]:
            p = int(p)
            e = self.calculate_exponent(n, p)
            if e > 0:
                factors[p] = e
        return factors

    get_factorial_factorization = factorize
