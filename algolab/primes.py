"""Prime listing over an interval split between worker threads."""

from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple


def is_prime(x: int) -> bool:
    """Return whether ``x`` is prime, by odd trial division."""
    if x < 2:
        return False
    if x < 4:
        return True
    if x % 2 == 0:
        return False
    i = 3
    while True:
        if x % i == 0:
            return False
        if i * i >= x:
            return True
        i += 2


def list_primes(start: int, end: int) -> List[int]:
    """Return the primes in the inclusive interval [start, end]."""
    return [x for x in range(start, end + 1) if is_prime(x)]


def split_ranges(n: int, num_threads: int) -> List[Tuple[int, int]]:
    """Split [0, n] into ``num_threads`` consecutive inclusive ranges."""
    ranges = []
    start = 0
    for i in range(1, num_threads + 1):
        end = i * n // num_threads
        ranges.append((start, end))
        start = end + 1
    return ranges


def parallel_primes(n: int, num_threads: int) -> List[int]:
    """List the primes up to ``n`` using ``num_threads`` worker threads."""
    ranges = split_ranges(n, num_threads)
    if not ranges:
        return []
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        chunks = pool.map(lambda r: list_primes(*r), ranges)
        return [p for chunk in chunks for p in chunk]


def main(argv: Optional[List[str]] = None) -> int:
    """Compute the primes up to a limit with a given number of threads."""
    parser = argparse.ArgumentParser(description="List primes in parallel.")
    parser.add_argument("n", type=int, help="upper limit for the interval")
    parser.add_argument("num_threads", type=int, help="number of threads")
    args = parser.parse_args(argv)
    parallel_primes(args.n, args.num_threads)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())