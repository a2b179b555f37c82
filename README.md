# parbench

Small command-line benchmarks that time a sequential computation against the
same work split across worker processes. Each benchmark fills arrays with
random numbers, runs the sequential version, then cuts the data into
contiguous blocks (the first `n % workers` blocks get one extra element), runs
the blocks in a process pool with one worker per CPU (`os.cpu_count()`) and
gathers the results.

## Installation

```
pip install .
```

## Commands

| Command | What it times |
| --- | --- |
| `parbench-sum [-n SIZE]` | Summing an array of values in `[0, 1]` (default size 100000) |
| `parbench-sort [-n SIZE]` | Bubble sort of the whole array versus per-block bubble sort followed by a k-way merge (default size 100000) |
| `parbench-elementwise [-n SIZE]` | Element-wise sum, difference, product and quotient of two arrays in `[1, 101]` (default size 10000000) |
| `parbench-matrix` | The same four operations on a fixed 320×320 matrix (102400 elements), printing the first ten values of each result; it takes no options |

`SIZE` must be a positive integer; otherwise the command prints an error (or a
usage line for an unknown option) to standard error and exits with status 1.

Example:

```
$ parbench-sum -n 1000000
Sequential time: 0.0312345678 seconds
Parallel time:   0.0456789012 seconds
```

Bubble sort is quadratic, so keep `-n` modest for `parbench-sort`.

## Library use

The building blocks can be imported directly:

```python
from parbench.partition import partition, block_range, split, random_array, Timer
from parbench.array_sum import sequential_sum, parallel_sum
from parbench.bubble import bubble_sort, merge_runs, parallel_sort
from parbench.elementwise import ArrayResults, array_operations, parallel_array_operations
from parbench.matrix_ops import format_head, run

[(p.start, p.count) for p in partition(10, 3)]  # [(0, 4), (4, 3), (7, 3)]
block_range(10, 3, 1)                           # range(4, 7)
split([1, 2, 3, 4, 5], 2)                       # [[1, 2, 3], [4, 5]]
bubble_sort([3.0, 1.0, 2.0])                    # [1.0, 2.0, 3.0]
merge_runs([[1.0, 4.0], [2.0, 3.0]])            # [1.0, 2.0, 3.0, 4.0]

with Timer() as t:
    parallel_sum([0.5] * 1000, 4)
print(t.elapsed)
```

`array_operations(a, b)` returns an `ArrayResults` with `sum`, `diff`, `prod`
and `quot` lists; a quotient whose divisor is zero is reported as `0.0`, and
arrays of different lengths raise `ValueError`. `run(a, b, workers)` returns
the report text that `parbench-matrix` prints.

## Limits

The parallel versions use local worker processes on one machine only; work is
not distributed across several hosts.

## Running the tests

```
pip install .[test]
pytest
```