"""
Single-shot machine benchmark: CPU recursion, memory allocation and filesystem IO.
"""

from .core.benchmark_core import CpuResult, IoResult, MemoryResult, SuiteResult
from .core.errors import BenchmarkError, BenchmarkIOError, CleanupWarning, OutOfMemoryError
from .engines import cpu_benchmark, io_benchmark, memory_benchmark

__version__ = "0.1.0"

__all__ = [
    'CpuResult', 'IoResult', 'MemoryResult', 'SuiteResult',
    'BenchmarkError', 'BenchmarkIOError', 'CleanupWarning', 'OutOfMemoryError',
    'cpu_benchmark', 'io_benchmark', 'memory_benchmark',
]
