"""
Exponent of a prime in n! via Legendre's formula.

    v_p(n!) = sum_{k >= 1} floor(n / p^k)

The running power p^k is bounded by an explicit unsigned integer width.
Before each multiplication we check whether power * p would exceed
2^width - 1 and stop if so. For any n <= 2^width - 1 this drops nothing:
power * p > 2^width - 1 >= n, so every remaining term is zero.
"""

from typing import Optional

DEFAULT_WIDTH = 64


def max_unsigned(width: int) -> int:
    """Largest value representable in an unsigned integer of `width` bits."""
    if not isinstance(width, int) or isinstance(width, bool) or width < 1:
        raise ValueError(f"width must be a positive integer, got {width!r}")
    return (1 << width) - 1


def check_fits(n: int, width: Optional[int]) -> None:
    """Raise OverflowError if n does not fit in `width` bits (None: no bound)."""
    if width is not None and n > max_unsigned(width):
        raise OverflowError(f"n={n} does not fit in {width} bits")


def legendre_exponent(n: int, p: int, width: Optional[int] = DEFAULT_WIDTH) -> int:
    """
    Return the multiplicity of prime p in n!.

    Parameters
    ----------
    n : int
        Factorial argument.
    p : int
        A prime, not validated. Must be >= 2: p = 1 never terminates
        (the power stays at 1) and p <= 0 divides by zero or loops.
    width : int or None
        Bit width bounding the power term. None means no bound.

    Returns
    -------
    int
        Exponent >= 0.

    Raises
    ------
    OverflowError
        If n does not fit in `width` bits.
    """
    check_fits(n, width)
    max_value = None if width is None else max_unsigned(width)

    exponent = 0
    power = p
    while power <= n:
        exponent += n // power
        if max_value is not None and p > max_value // power:
            # next term is n // (power * p) == 0
            assert power * p > n
            break
        power *= p
    return exponent


def digit_sum(n: int, base: int) -> int:
    """Sum of the digits of n written in `base`."""
    total = 0
    while n > 0:
        n, r = divmod(n, base)
        total += r
    return total


def legendre_exponent_digits(n: int, p: int) -> int:
    """
    Closed form of Legendre's formula: (n - s_p(n)) / (p - 1).

    s_p(n) is the base-p digit sum of n. Independent of legendre_exponent,
    used to cross-check it.
    """
    if n < 1:
        return 0
    return (n - digit_sum(n, p)) // (p - 1)
