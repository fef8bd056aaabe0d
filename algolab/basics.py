"""Small numeric and string exercises."""

from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Optional, Sequence


def celsius_to_fahrenheit(ctemp: float) -> float:
    """Convert a temperature from Celsius to Fahrenheit."""
    return ctemp * 9.0 / 5.0 + 32.0


def fibonacci(n: int) -> List[int]:
    """Return the first ``n`` Fibonacci numbers, starting at 0."""
    if n <= 0:
        return []
    result = [0]
    if n == 1:
        return result
    result.append(1)
    a, b = 0, 1
    for _ in range(2, n):
        a, b = b, a + b
        result.append(b)
    return result


def print_fibonacci(n: int) -> None:
    """Print the first ``n`` Fibonacci numbers, one per line."""
    for value in fibonacci(n):
        print(value)


def highest(values: Iterable[int]) -> Optional[int]:
    """Return the largest value, or None when there are none."""
    return max(values, default=None)


def is_prime_bruteforce(n: int) -> bool:
    """Primality by trial division."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, n - 1))


def is_prime_fermat(
    n: int, iterations: int, rng: Optional[random.Random] = None
) -> bool:
    """Probabilistic primality by Fermat's little theorem.

    Raises ValueError when ``n`` is 3 and a witness must be drawn, since no
    base lies in the range [2, n - 2].
    """
    if n <= 1:
        return False
    if n == 2:
        return True
    rng = rng or random.Random()
    for _ in range(iterations):
        if n - 2 < 2:
            raise ValueError(f"no Fermat witness range for n={n}")
        a = rng.randint(2, n - 2)
        if pow(a, n - 1, n) != 1:
            return False
    return True


def is_palindrome(s: str) -> bool:
    """Return whether ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def primefy(values: Sequence[int]) -> List[int]:
    """Keep only the prime values, preserving order."""
    return [v for v in values if is_prime_bruteforce(v)]


def main(argv: Optional[List[str]] = None) -> int:
    """Print whether a word is a palindrome."""
    parser = argparse.ArgumentParser(description="Palindrome check.")
    parser.add_argument("word", nargs="?", default="nataq")
    args = parser.parse_args(argv)
    print(str(is_palindrome(args.word)).lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())