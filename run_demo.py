#!/usr/bin/env python3
"""
Demonstration: prime factorization of n! without computing n!.

Usage:
    python run_demo.py
    python run_demo.py --config config/custom.yaml
    python run_demo.py --n 1000 --sieve-up-to 0
"""

import argparse
import sys
import time
from pathlib import Path

import yaml

from factorial_engine.engine import FactorialEngine
from factorial_engine.factorization import (
    Omega,
    format_factorization,
    omega,
    trailing_zeros,
)

DEFAULTS = {'n': 50, 'sieve_up_to': 100, 'width': 64}
DEFAULT_CONFIG = Path(__file__).parent / 'config' / 'default.yaml'


def load_config(path) -> dict:
    """Read a YAML config and fill in missing keys from DEFAULTS."""
    config = dict(DEFAULTS)
    with open(path) as f:
        loaded = yaml.safe_load(f) or {}
    config.update(loaded)
    return config


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Factorize n! with Legendre\'s formula')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG),
                        help='Path to config file')
    parser.add_argument('--n', type=int, default=None,
                        help='Factorial argument (overrides config)')
    parser.add_argument('--sieve-up-to', type=int, default=None,
                        help='Pre-sieve limit, 0 to skip (overrides config)')
    parser.add_argument('--width', type=int, default=None,
                        help='Bit width of the power term (overrides config)')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.n is not None:
        config['n'] = args.n
    if args.sieve_up_to is not None:
        config['sieve_up_to'] = args.sieve_up_to or None
    if args.width is not None:
        config['width'] = args.width

    n = config['n']

    print("=" * 60)
    print("Factorial Engine")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  n = {n:,}")
    print(f"  sieve_up_to = {config['sieve_up_to']}")
    print(f"  width = {config['width']}")
    print()

    try:
        print("Initializing FactorialEngine...", end=" ", flush=True)
        t0 = time.time()
        engine = FactorialEngine(config['sieve_up_to'], width=config['width'])
        print(f"{time.time() - t0:.4f}s ({len(engine.primes_cache)} primes cached)")

        print(f"Calculating prime factorization of {n}!...", end=" ", flush=True)
        t0 = time.time()
        factors = engine.factorize(n)
        print(f"{time.time() - t0:.4f}s")
    except (OverflowError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print()
    print("-" * 60)
    print(f"Result for {n}!")
    print("-" * 60)
    print(factors)
    print(f"\n  {n}! = {format_factorization(factors)}")
    print(f"  distinct primes: {omega(factors)}")
    print(f"  prime factors with multiplicity: {Omega(factors)}")
    if factors:
        print(f"  trailing zeros (base 10): {trailing_zeros(factors)}")

    # 50/2 + 50/4 + 50/8 + 50/16 + 50/32 = 25 + 12 + 6 + 3 + 1 = 47
    print(f"\nExponent of 2 is: {factors.get(2, 0)}")
    if n == 50:
        assert factors[2] == 47

    return 0


if __name__ == '__main__':
    sys.exit(main())
