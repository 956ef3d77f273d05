"""Fibonacci numbers."""

from __future__ import annotations

import argparse
from typing import Sequence


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(n) == 1 for n <= 2."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    previous, current = 1, 1
    for _ in range(max(n - 2, 0)):
        previous, current = current, previous + current
    return current


def main(argv: Sequence[str] | None = None) -> int:
    """Print the n-th Fibonacci number, the twentieth by default."""
    parser = argparse.ArgumentParser(description="Print a Fibonacci number.")
    parser.add_argument("n", nargs="?", type=int, default=20)
    args = parser.parse_args(argv)
    try:
        value = fib(args.n)
    except ValueError as error:
        parser.error(str(error))
    print(f"fib(n) = {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())