"""
Summaries of a factorial factorization.

Responsibility: read-only quantities derived from a {prime: exponent}
mapping. This file must not know about the prime cache or sieving.
"""

from typing import Dict

from .primes import primes_upto


def omega(factors: Dict[int, int]) -> int:
    """Count distinct prime factors (little omega)."""
    return len(factors)


def Omega(factors: Dict[int, int]) -> int:
    """
    Count prime factors with multiplicity (big Omega).

    Parameters
    ----------
    factors : dict
        Mapping prime -> exponent.

    Returns
    -------
    int
        Sum of exponents.
    """
    return sum(factors.values())


def multiply_out(factors: Dict[int, int]) -> int:
    """Return prod(p ** e). Arbitrary precision; 1 for an empty mapping."""
    product = 1
    for p, e in factors.items():
        product *= p ** e
    return product


def trailing_zeros(factors: Dict[int, int], base: int = 10) -> int:
    """
    Number of trailing zeros of the factored number written in `base`.

    For base = prod(q_i ** a_i) this is min_i floor(e(q_i) / a_i), where
    e(q) is the exponent of q in `factors` (0 if absent).

    Parameters
    ----------
    factors : dict
        Mapping prime -> exponent.
    base : int
        Radix >= 2.

    Returns
    -------
    int
        Count of trailing zero digits.
    """
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")

    zeros = None
    remaining = base
    for q in primes_upto(base):
        q = int(q)
        a = 0
        while remaining % q == 0:
            remaining //= q
            a += 1
        if a:
            count = factors.get(q, 0) // a
            zeros = count if zeros is None else min(zeros, count)
        if remaining == 1:
            break
    return zeros


def format_factorization(factors: Dict[int, int]) -> str:
    """Render as '2^3 * 3 * 5', ascending primes. '1' when empty."""
    if not factors:
        return "1"
    terms = []
    for p in sorted(factors):
        e = factors[p]
        terms.append(f"{p}" if e == 1 else f"{p}^{e}")
    return " * ".join(terms)
