"""Element-wise operations on a fixed 320 x 320 matrix, with a printed report."""

from __future__ import annotations

import os
import sys
from itertools import islice
from typing import Iterable, Sequence

from parbench.elementwise import ArrayResults, array_operations, parallel_array_operations
from parbench.partition import Timer, random_array

ROWS = 320
COLS = 320
TOTAL_ELEMENTS = ROWS * COLS

_LABELS = ("Addition", "Subtraction", "Multiplication", "Division")


def format_head(values: Iterable[float], name: str, count: int = 10) -> str:
    """Render the first ``count`` values under a heading line."""
    head = "".join(f"{v:.2f} " for v in islice(values, count))
    return f"{name} (first {count} elements):\n{head}\n"


def _heads(results: ArrayResults, suffix: str = "") -> list[str]:
    columns = (results.sum, results.diff, results.prod, results.quot)
    return [format_head(col, label + suffix) for label, col in zip(_LABELS, columns)]


def run(a: Sequence[float], b: Sequence[float], workers: int) -> str:
    """Compute sequentially and in parallel, returning the report text."""
    with Timer() as seq:
        sequential = array_operations(a, b)
    lines = [f"Sequential execution time: {seq.elapsed:.6f} seconds\n"]
    lines += _heads(sequential)

    with Timer() as par:
        parallel = parallel_array_operations(a, b, workers)
    lines.append(
        f"\nParallel execution time ({workers} processes): {par.elapsed:.6f} seconds\n"
    )
    lines += _heads(parallel, " (parallel)")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the fixed-size benchmark; it takes no options."""
    a = random_array(TOTAL_ELEMENTS, 100.0, 1.0)
    b = random_array(TOTAL_ELEMENTS, 100.0, 1.0)
    print(run(a, b, os.cpu_count() or 1), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())