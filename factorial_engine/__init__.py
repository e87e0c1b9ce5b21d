"""Prime factorization of n! via Legendre's formula."""

from .engine import FactorialEngine
from .legendre import legendre_exponent
from .primes import primes_upto

__all__ = ["FactorialEngine", "legendre_exponent", "primes_upto"]
