"""
CPU benchmarking engine.

Times a naive doubly-recursive Fibonacci evaluation. The recursion is left
unmemoised on purpose: the call tree is the workload.
"""

import logging
from typing import Optional

from hostbench.core.benchmark_core import BaseBenchmark, CpuResult, ProgressCallback

logger = logging.getLogger(__name__)

DEFAULT_FIBONACCI_N = 30


def fibonacci(n: int) -> int:
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


class CpuBenchmark(BaseBenchmark):
    name = "cpu"

    def __init__(self, n: int = DEFAULT_FIBONACCI_N,
                 on_progress: Optional[ProgressCallback] = None):
        super().__init__(on_progress)
        if n < 0:
            raise ValueError(f"Fibonacci input must be non-negative, got {n}")
        self.n = n

    def run(self) -> CpuResult:
        logger.info(f"Starting CPU benchmark: fibonacci({self.n})")
        self.progress("Starting CPU Benchmark...")

        self.timer.start()
        result = fibonacci(self.n)
        duration_ms = self.timer.stop() * 1000

        self.progress("CPU Benchmark Completed.")
        logger.info(f"CPU benchmark finished: fibonacci({self.n}) = {result} in {duration_ms:.2f} ms")

        return CpuResult(result=result, time_ms=duration_ms)


def cpu_benchmark(n: int = DEFAULT_FIBONACCI_N,
                  on_progress: Optional[ProgressCallback] = None) -> CpuResult:
    return CpuBenchmark(n, on_progress=on_progress).run()
