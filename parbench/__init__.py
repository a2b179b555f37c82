"""Sequential versus process-parallel timing benchmarks for simple array workloads."""

__version__ = "0.1.0"
__all__ = ["partition", "array_sum", "bubble", "elementwise", "matrix_ops"]