"""
Benchmark engines: CPU, memory and filesystem IO.
"""

from .cpu.benchmark_cpu import CpuBenchmark, cpu_benchmark
from .memory.benchmark_memory import MemoryBenchmark, memory_benchmark
from .fileio.benchmark_fileio import IoBenchmark, io_benchmark

__all__ = [
    'CpuBenchmark', 'MemoryBenchmark', 'IoBenchmark',
    'cpu_benchmark', 'memory_benchmark', 'io_benchmark',
]
