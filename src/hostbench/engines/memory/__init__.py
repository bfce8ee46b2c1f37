"""
Memory benchmark engine.
"""

from .benchmark_memory import MemoryBenchmark, build_digest_table, memory_benchmark

__all__ = ['MemoryBenchmark', 'build_digest_table', 'memory_benchmark']
