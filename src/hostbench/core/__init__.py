"""
Core benchmarking functionality and base classes.
"""

from .benchmark_core import (
    BaseBenchmark, BenchmarkTimer, CpuResult, IoResult, MemoryResult,
    ResourceMonitor, SuiteResult, now,
)
from .errors import BenchmarkError, BenchmarkIOError, CleanupWarning, OutOfMemoryError

__all__ = [
    'BaseBenchmark', 'BenchmarkTimer', 'CpuResult', 'IoResult', 'MemoryResult',
    'ResourceMonitor', 'SuiteResult', 'now',
    'BenchmarkError', 'BenchmarkIOError', 'CleanupWarning', 'OutOfMemoryError',
]
