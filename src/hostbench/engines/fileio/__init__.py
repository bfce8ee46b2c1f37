"""
Filesystem IO benchmark engine.
"""

from .benchmark_fileio import IoBenchmark, build_payload, io_benchmark

__all__ = ['IoBenchmark', 'build_payload', 'io_benchmark']
