"""Two factorial strategies on unsigned 64-bit integers: plain recursion and memoisation."""

from __future__ import annotations

import sys
import time

UINT64_MOD = 1 << 64
LIMIT = 41


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


class RecursiveFactorial:
    """Computes n! by recursion, wrapping around at 64 bits."""

    def factorial(self, n: int) -> int:
        _check(n)
        if n > 0:
            return (n * self.factorial(n - 1)) % UINT64_MOD
        return 1


class MemoFactorial:
    """Computes n! for n below 41, remembering results, wrapping around at 64 bits."""

    def __init__(self) -> None:
        self._facts: list[int] = [0] * LIMIT

    def factorial(self, n: int) -> int:
        _check(n)
        if n >= LIMIT:
            raise ValueError(f"n must be below {LIMIT}")
        if self._facts[n]:
            return self._facts[n]
        if n > 0:
            self._facts[n] = (n * self.factorial(n - 1)) % UINT64_MOD
            return self._facts[n]
        return 1


def _print_factorial(calculator: RecursiveFactorial | MemoFactorial, value: int) -> None:
    start = time.perf_counter()
    print(f"value {calculator.factorial(value)}")
    elapsed = time.perf_counter() - start
    print(f"{type(calculator).__name__} took {elapsed * 1e6:.3f}µs\n")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        value = int(args[0]) if args else 30
        _print_factorial(MemoFactorial(), value)
        _print_factorial(RecursiveFactorial(), value)
    except ValueError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())