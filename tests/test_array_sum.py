import math
import re

import pytest

from parbench.array_sum import main, parallel_sum, sequential_sum
from parbench.partition import random_array


def test_sequential_sum_exact():
    assert sequential_sum([0.5, 0.25]) == 0.75


def test_sequential_sum_empty():
    assert sequential_sum([]) == 0.0


@pytest.mark.parametrize("workers", [1, 2, 3])
def test_parallel_matches_sequential(workers):
    values = random_array(1000)
    assert math.isclose(parallel_sum(values, workers), sequential_sum(values), rel_tol=1e-12)


def test_parallel_more_workers_than_values():
    values = [1.0, 2.0]
    assert parallel_sum(values, 4) == sequential_sum(values)


def test_parallel_rejects_zero_workers():
    with pytest.raises(ValueError):
        parallel_sum([1.0], 0)


def test_main_prints_timings(capsys):
    assert main(["-n", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert re.fullmatch(r"Sequential time: \d+\.\d{10} seconds", lines[0])
    assert re.fullmatch(r"Parallel time:   \d+\.\d{10} seconds", lines[1])


def test_main_rejects_bad_size(capsys):
    assert main(["-n", "0"]) == 1
    assert "N must be a positive integer." in capsys.readouterr().err