"""
Memory benchmarking engine.

Builds a large list of fixed-size digest strings, sorts it, and reports the
peak Python allocator usage reached while doing so.
"""

import gc
import hashlib
import logging
from typing import Callable, List, Optional

from hostbench.core.benchmark_core import (
    BYTES_PER_MB, BaseBenchmark, MemoryResult, ProgressCallback,
)
from hostbench.core.errors import OutOfMemoryError

logger = logging.getLogger(__name__)

DEFAULT_ITEM_COUNT = 100000
DEFAULT_PROGRESS_INTERVAL = 20000


def build_digest_table(count: int = DEFAULT_ITEM_COUNT,
                       checkpoint: int = DEFAULT_PROGRESS_INTERVAL,
                       on_checkpoint: Optional[Callable[[int], None]] = None) -> List[str]:
    """Return ``count`` md5 hex digests of ``str(i)``, sorted lexicographically.

    ``on_checkpoint`` receives the number of items appended so far every
    ``checkpoint`` appends.
    """
    table = []
    for i in range(count):
        table.append(hashlib.md5(str(i).encode()).hexdigest())
        if on_checkpoint is not None and (i + 1) % checkpoint == 0:
            on_checkpoint(i + 1)

    table.sort()
    return table


class MemoryBenchmark(BaseBenchmark):
    name = "memory"

    def __init__(self, item_count: int = DEFAULT_ITEM_COUNT,
                 progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
                 on_progress: Optional[ProgressCallback] = None):
        super().__init__(on_progress)
        self.item_count = item_count
        self.progress_interval = progress_interval

    def _report_checkpoint(self, appended: int):
        self.progress(f"  - Appended {appended} of {self.item_count} items")

    def run(self) -> MemoryResult:
        logger.info(f"Starting memory benchmark: {self.item_count} digests")
        self.progress("Starting Memory Benchmark...")

        # Collect first so earlier garbage does not count against the baseline
        gc.collect()

        on_checkpoint = self._report_checkpoint if self.on_progress is not None else None
        with self.monitor.track_allocations() as usage:
            self.timer.start()
            try:
                table = build_digest_table(self.item_count, self.progress_interval, on_checkpoint)
            except MemoryError as e:
                self.timer.stop()
                logger.error(f"Memory benchmark ran out of memory after {self.timer.end_time - self.timer.start_time:.2f} s")
                raise OutOfMemoryError(f"could not allocate {self.item_count} digests") from e
            duration_ms = self.timer.stop() * 1000

        memory_used_mb = (usage['peak'] - usage['baseline']) / BYTES_PER_MB
        logger.debug(f"Digest table holds {len(table)} entries")
        del table

        self.progress("Memory Benchmark Completed.")
        logger.info(f"Memory benchmark finished: {memory_used_mb:.2f} MB peak growth in {duration_ms:.2f} ms")

        return MemoryResult(memory_used_mb=memory_used_mb, time_ms=duration_ms)


def memory_benchmark(on_progress: Optional[ProgressCallback] = None) -> MemoryResult:
    return MemoryBenchmark(on_progress=on_progress).run()
