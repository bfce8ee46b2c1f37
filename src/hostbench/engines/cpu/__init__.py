"""
CPU benchmark engine.
"""

from .benchmark_cpu import CpuBenchmark, cpu_benchmark, fibonacci

__all__ = ['CpuBenchmark', 'cpu_benchmark', 'fibonacci']
