"""Generation of distinct random integers from a closed range."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

DEFAULT_LOW = 1
DEFAULT_HIGH = 100_000_000
DEFAULT_OUTPUT = "Input-2(100).txt"


def distinct_values(
    count: int, low: int, high: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``count`` distinct integers drawn uniformly from ``[low, high]``."""
    size = high - low + 1
    if count < 0:
        raise ValueError("count must not be negative")
    if count > max(size, 0):
        raise ValueError(f"cannot draw {count} distinct values from a range of {max(size, 0)}")
    generator = rng if rng is not None else random.Random()
    return generator.sample(range(low, high + 1), count)


def main(argv: Sequence[str] | None = None) -> int:
    """Write distinct random integers, one per line, to an output file."""
    parser = argparse.ArgumentParser(description="Write distinct random integers to a file.")
    parser.add_argument("count", type=int, nargs="?", help="how many values (read from stdin if omitted)")
    parser.add_argument("--low", type=int, default=DEFAULT_LOW)
    parser.add_argument("--high", type=int, default=DEFAULT_HIGH)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        count = int(sys.stdin.read().split()[0])

    try:
        values = distinct_values(count, args.low, args.high)
    except ValueError as exc:
        parser.error(str(exc))

    with open(args.output, "w", encoding="utf-8") as handle:
        handle.writelines(f"{value}\n" for value in values)
    return 0


if __name__ == "__main__":
    sys.exit(main())