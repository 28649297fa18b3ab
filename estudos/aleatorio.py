"""Print a random integer in a half-open range given on the command line."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

DEFAULT_MAX = 32767


def parse_bounds(args: Sequence[str]) -> tuple[int, int]:
    """Turn zero, one (max) or two (min, max) arguments into ``(low, high)``."""
    if len(args) == 0:
        return 0, DEFAULT_MAX
    if len(args) == 1:
        return 0, int(args[0])
    if len(args) == 2:
        return int(args[0]), int(args[1])
    raise ValueError("expected at most two arguments: [min] max")


def random_between(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer with ``low <= n < high``."""
    if high <= low:
        raise ValueError(f"invalid range: {low} .. {high}")
    source = rng if rng is not None else random.Random()
    return low + source.randrange(high - low)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        low, high = parse_bounds(args)
        print(random_between(low, high))
    except ValueError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())