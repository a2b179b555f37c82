"""Bubble sort, sequentially and as sorted runs merged after parallel sorting."""

from __future__ import annotations

import heapq
import os
import sys
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, Sequence

from parbench.partition import Timer, parse_size, random_array, split

DEFAULT_SIZE = 100000


def bubble_sort(values: Iterable[float]) -> list[float]:
    """Return a sorted copy, stopping early once a pass makes no swap."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def merge_runs(runs: Iterable[Iterable[float]]) -> list[float]:
    """Merge sorted runs into one sorted list; ties come from the earlier run."""
    return list(heapq.merge(*runs))


def parallel_sort(values: Sequence[float], workers: int) -> list[float]:
    """Bubble-sort ``workers`` chunks in separate processes and merge them."""
    chunks = split(values, workers)
    with ProcessPoolExecutor(max_workers=workers) as pool:
        runs = list(pool.map(bubble_sort, chunks))
    return merge_runs(runs)


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) or "bubble"
    try:
        n = parse_size(args, DEFAULT_SIZE, prog)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    values = random_array(n)

    with Timer() as seq:
        bubble_sort(values)
    print(f"Sequential time: {seq.elapsed:.10f} seconds")

    with Timer() as par:
        parallel_sort(values, os.cpu_count() or 1)
    print(f"Parallel time:   {par.elapsed:.10f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())