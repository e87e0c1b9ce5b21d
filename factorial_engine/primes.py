"""
Prime generation and the prime cache.

Responsibility: prime generation only. No exponents, no factorials.

A cache is the pair (primes, sieve_limit): every prime <= sieve_limit,
ascending. sieve_limit is None before anything has been sieved.
"""

import numpy as np
from math import isqrt
from typing import Optional, Tuple


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Mark which of 0..N are prime, Eratosthenes style.

    Parameters
    ----------
    N : int
        Largest index to mark.

    Returns
    -------
    np.ndarray
        bool array indexed by integer, flags[i] set for prime i. N = 0 or 1
        gives an all-False array of that length plus one; negative N gives
        an empty array.
    """
    if N < 0:
        return np.zeros(0, dtype=bool)

    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Sieve the primes in [2, N].

    Returns an ascending int64 array (not the platform intp that
    np.nonzero hands back), so caches compare equal across platforms.
    No primes exist below 2, so N < 2 yields an empty int64 array.
    """
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0].astype(np.int64)


def covers(sieve_limit: Optional[int], n: int) -> bool:
    """True iff a cache sieved up to `sieve_limit` holds every prime <= n."""
    return sieve_limit is not None and sieve_limit >= n


def extend_primes(primes: np.ndarray, sieve_limit: Optional[int],
                  limit: int) -> Tuple[np.ndarray, Optional[int]]:
    """
    Return a cache that holds every prime <= `limit`.

    The input array is never modified. If the cache already covers `limit`
    the same (primes, sieve_limit) pair comes back, so callers can detect
    reuse with `is`. Otherwise the primes are sieved from scratch up to
    `limit`.

    Parameters
    ----------
    primes : np.ndarray
        Current cache, ascending primes, possibly empty.
    sieve_limit : int or None
        Bound `primes` was sieved to, None if never sieved.
    limit : int
        Value the cache must reach.

    Returns
    -------
    tuple
        (primes, sieve_limit) of the covering cache.
    """
    if covers(sieve_limit, limit):
        return primes, sieve_limit
    return primes_upto(limit), limit
