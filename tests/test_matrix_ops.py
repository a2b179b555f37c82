import re

import pytest

from parbench.matrix_ops import format_head, main, run
from parbench.partition import random_array


def test_format_head_example():
    assert format_head([1.0, 2.5], "Addition", 2) == "Addition (first 2 elements):\n1.00 2.50 \n"


def test_format_head_takes_only_count_values():
    text = format_head([float(x) for x in range(12)], "Division")
    heading, values, trailing = text.split("\n")
    assert heading == "Division (first 10 elements):"
    assert len(values.split()) == 10
    assert trailing == ""


def test_run_report_sections_agree():
    a = random_array(30, 100.0, 1.0)
    b = random_array(30, 100.0, 1.0)
    report = run(a, b, 3)
    lines = report.splitlines()
    assert re.fullmatch(r"Sequential execution time: \d+\.\d{6} seconds", lines[0])
    assert lines[9] == ""
    assert re.fullmatch(r"Parallel execution time \(3 processes\): \d+\.\d{6} seconds", lines[10])
    for label_index in range(4):
        seq_heading = lines[1 + 2 * label_index]
        par_heading = lines[11 + 2 * label_index]
        assert par_heading == seq_heading.replace(" (first", " (parallel) (first")
        assert lines[2 + 2 * label_index] == lines[12 + 2 * label_index]


def test_run_headings_in_order():
    report = run([2.0] * 12, [1.0] * 12, 2)
    headings = [line.split(" (first")[0] for line in report.splitlines() if "(first" in line]
    assert headings == [
        "Addition",
        "Subtraction",
        "Multiplication",
        "Division",
        "Addition (parallel)",
        "Subtraction (parallel)",
        "Multiplication (parallel)",
        "Division (parallel)",
    ]


def test_run_rejects_mismatched_arrays():
    with pytest.raises(ValueError):
        run([1.0, 2.0], [1.0], 2)


def test_main_prints_report(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Sequential execution time: ")
    assert "Division (parallel) (first 10 elements):" in out