#!/usr/bin/env python3
"""
Demonstration script.

Factorizes a batch of numbers concurrently, enumerates primes in a range,
and factorizes the largest value of the configured integer width.

Usage:
    python run_demo.py
    python run_demo.py --config config/custom.yaml
    python run_demo.py --numbers 101 1001 1234 --range 1 100
    python run_demo.py --range 1000000000000 9000000000000 --first 10
"""

import argparse
import sys
import time
from itertools import islice

from primewheel.batch import factorize_all
from primewheel.cache import FactorCache
from primewheel.config import load_settings
from primewheel.errors import PrimeWheelError
from primewheel.formatting import factorization_string, simple_array_description
from primewheel.ranges import primes_in_range
from primewheel.sequence import PrimeSequence
from primewheel.widths import width_for


def main():
    parser = argparse.ArgumentParser(description='Prime factorization demo')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (default: config/default.yaml)')
    parser.add_argument('--numbers', type=int, nargs='+',
                        default=[101, 1001, 1234, 2234, 3234],
                        help='Numbers to factorize concurrently')
    parser.add_argument('--range', type=int, nargs=2, default=[1, 100],
                        metavar=('FROM', 'THROUGH'),
                        help='Closed interval to enumerate primes in')
    parser.add_argument('--first', type=int, default=None,
                        help='Only print the first K primes of the range (lazy)')
    args = parser.parse_args()

    settings = load_settings(args.config)
    width = width_for(settings.width)

    print("=" * 60)
    print("Prime Factorization Demo")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  width = {width.name} (max {width.max:,})")
    print(f"  max_span = {settings.max_span:,}")
    print(f"  cache_capacity = {settings.cache_capacity:,}")
    print(f"  num_workers = {settings.num_workers or 'auto'}")
    print()

    try:
        # 1. Concurrent factorization
        print("-" * 60)
        print("1. Concurrent factorization")
        print("-" * 60)
        start = time.time()
        results = factorize_all(args.numbers, num_workers=settings.num_workers,
                                width=width, verbose=True)
        for n, factors in sorted(results.items()):
            print(f"  {n} = {simple_array_description(factors)} = {factorization_string(factors)}")
        print(f"   Completed in {time.time() - start:.3f}s")
        print()

        # 2. Range enumeration
        lo, hi = args.range
        print("-" * 60)
        print(f"2. Primes in [{lo:,}, {hi:,}]")
        print("-" * 60)
        start = time.time()
        if args.first is not None:
            primes = list(islice(PrimeSequence(lo, hi, width=width), args.first))
            print(f"  First {len(primes)}: {primes}")
        else:
            primes = primes_in_range(lo, hi, max_span=settings.max_span, width=width)
            print(f"  {len(primes)} primes: {primes.tolist()}")
        print(f"   Completed in {time.time() - start:.3f}s")
        print()

        # 3. Width maximum, twice through the cache
        print("-" * 60)
        print(f"3. Factorizing {width.name} maximum")
        print("-" * 60)
        cache = FactorCache(capacity=settings.cache_capacity, width=width)
        for _ in range(2):
            start = time.time()
            factors = cache.get_or_compute(width.max)
            print(f"  {width.max} = {factorization_string(factors)}"
                  f"  ({time.time() - start:.3f}s)")
        print(f"  {cache!r}")
    except PrimeWheelError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)


if __name__ == '__main__':
    main()
