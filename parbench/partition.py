"""Work partitioning, random data and timing helpers shared by the benchmarks."""

from __future__ import annotations

import getopt
import random
import re
import time
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Partition:
    """A contiguous block of ``count`` items beginning at ``start``."""

    start: int
    count: int

    @property
    def stop(self) -> int:
        return self.start + self.count


def partition(n: int, parts: int) -> list[Partition]:
    """Split ``n`` items into ``parts`` contiguous blocks, larger blocks first."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    if n < 0:
        raise ValueError("n must not be negative")
    base, rem = divmod(n, parts)
    blocks = []
    offset = 0
    for rank in range(parts):
        count = base + (1 if rank < rem else 0)
        blocks.append(Partition(offset, count))
        offset += count
    return blocks


def block_range(n: int, parts: int, rank: int) -> range:
    """Return the index range that worker ``rank`` of ``parts`` owns."""
    if n < 0:
        raise ValueError("n must not be negative")
    if not 0 <= rank < parts:
        raise ValueError(f"rank {rank} is outside 0..{parts - 1}")
    base, rem = divmod(n, parts)
    start = rank * base + min(rank, rem)
    return range(start, start + base + (1 if rank < rem else 0))


def split(values: Sequence[T], parts: int) -> list[list[T]]:
    """Cut ``values`` into ``parts`` contiguous chunks as ``partition`` lays them out."""
    return [list(values[block.start:block.stop]) for block in partition(len(values), parts)]


def random_array(n: int, scale: float = 1.0, offset: float = 0.0) -> list[float]:
    """Return ``n`` uniform random floats in ``[offset, offset + scale]``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [random.random() * scale + offset for _ in range(n)]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_size(argv: Sequence[str], default: int, prog: str) -> int:
    """Read the array size from a ``-n SIZE`` option.

    Raises ValueError with a usage or error message on bad input.
    """
    usage = f"Usage: {prog} [-n array_size]"
    try:
        opts, _ = getopt.getopt(list(argv), "n:")
    except getopt.GetoptError as exc:
        raise ValueError(usage) from exc
    size = default
    for _, value in opts:
        size = _atoi(value)
        if size <= 0:
            raise ValueError("Error: N must be a positive integer.")
    return size


class Timer:
    """Context manager measuring wall-clock time in seconds."""

    def __init__(self) -> None:
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.elapsed = time.perf_counter() - self.start