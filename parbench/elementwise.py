"""Element-wise sum, difference, product and quotient of two arrays."""

from __future__ import annotations

import os
import sys
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, Sequence

from parbench.partition import Timer, parse_size, random_array, split

DEFAULT_SIZE = 10000000


@dataclass
class ArrayResults:
    """The four element-wise results of two equally long arrays."""

    sum: list[float] = field(default_factory=list)
    diff: list[float] = field(default_factory=list)
    prod: list[float] = field(default_factory=list)
    quot: list[float] = field(default_factory=list)

    @classmethod
    def concat(cls, parts: Iterable["ArrayResults"]) -> "ArrayResults":
        """Join partial results end to end, in order."""
        parts = list(parts)
        return cls(
            sum=list(chain.from_iterable(p.sum for p in parts)),
            diff=list(chain.from_iterable(p.diff for p in parts)),
            prod=list(chain.from_iterable(p.prod for p in parts)),
            quot=list(chain.from_iterable(p.quot for p in parts)),
        )


def array_operations(a: Sequence[float], b: Sequence[float]) -> ArrayResults:
    """Compute the four operations; a zero divisor gives a quotient of 0.0."""
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    results = ArrayResults()
    for x, y in zip(a, b):
        results.sum.append(x + y)
        results.diff.append(x - y)
        results.prod.append(x * y)
        results.quot.append(x / y if y != 0.0 else 0.0)
    return results


def parallel_array_operations(
    a: Sequence[float], b: Sequence[float], workers: int
) -> ArrayResults:
    """Run ``array_operations`` on ``workers`` chunks in separate processes."""
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    a_chunks = split(a, workers)
    b_chunks = split(b, workers)
    with ProcessPoolExecutor(max_workers=workers) as pool:
        return ArrayResults.concat(pool.map(array_operations, a_chunks, b_chunks))


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) or "elementwise"
    try:
        n = parse_size(args, DEFAULT_SIZE, prog)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    a = random_array(n, 100.0, 1.0)
    b = random_array(n, 100.0, 1.0)

    with Timer() as seq:
        array_operations(a, b)
    with Timer() as par:
        parallel_array_operations(a, b, os.cpu_count() or 1)

    print(f"Sequential time: {seq.elapsed:.5f} seconds")
    print(f"Parallel time: {par.elapsed:.5f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())