"""Sum of a random array, sequentially and across worker processes."""

from __future__ import annotations

import os
import sys
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, Sequence

from parbench.partition import Timer, parse_size, random_array, split

DEFAULT_SIZE = 100000


def sequential_sum(values: Iterable[float]) -> float:
    """Add the values from left to right."""
    return sum(values, 0.0)


def parallel_sum(values: Sequence[float], workers: int) -> float:
    """Sum each of ``workers`` chunks in its own process, then combine."""
    chunks = split(values, workers)
    with ProcessPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(sequential_sum, chunks), 0.0)


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) or "array_sum"
    try:
        n = parse_size(args, DEFAULT_SIZE, prog)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    values = random_array(n)

    with Timer() as seq:
        sequential_sum(values)
    print(f"Sequential time: {seq.elapsed:.10f} seconds")

    with Timer() as par:
        parallel_sum(values, os.cpu_count() or 1)
    print(f"Parallel time:   {par.elapsed:.10f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())