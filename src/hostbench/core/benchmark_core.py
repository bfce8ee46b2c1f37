import os
import time
import logging
import tracemalloc
import psutil
from typing import Callable, Dict, Optional
from dataclasses import dataclass
from contextlib import contextmanager

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]

BYTES_PER_MB = 1024 * 1024


def now() -> float:
    return time.perf_counter()


@dataclass
class CpuResult:
    result: int
    time_ms: float


@dataclass
class MemoryResult:
    memory_used_mb: float
    time_ms: float


@dataclass
class IoResult:
    bytes_written: int
    write_time_ms: float
    read_time_ms: float


@dataclass
class SuiteResult:
    cpu: CpuResult
    memory: MemoryResult
    io: IoResult


class BenchmarkTimer:
    def __init__(self):
        self.start_time = None
        self.end_time = None
        self.paused_at = None
        self.paused_total = 0.0

    def start(self):
        self.start_time = now()
        self.end_time = None
        self.paused_at = None
        self.paused_total = 0.0

    def pause(self):
        if self.paused_at is None:
            self.paused_at = now()

    def resume(self):
        if self.paused_at is not None:
            self.paused_total += now() - self.paused_at
            self.paused_at = None

    def stop(self) -> float:
        self.resume()
        self.end_time = now()
        return max(0.0, self.end_time - self.start_time - self.paused_total)


class ResourceMonitor:
    def __init__(self):
        self.process = psutil.Process(os.getpid())

    @contextmanager
    def track_allocations(self):
        """Track Python allocator usage for the duration of the block.

        Yields a dict whose ``baseline`` is the traced size on entry and whose
        ``peak`` is filled in on exit. The peak is reset on entry, so every
        block is measured independently of earlier ones in the same process.
        """
        started = not tracemalloc.is_tracing()
        if started:
            tracemalloc.start()
        tracemalloc.reset_peak()
        usage = {'baseline': tracemalloc.get_traced_memory()[0], 'peak': 0}
        try:
            yield usage
        finally:
            usage['peak'] = tracemalloc.get_traced_memory()[1]
            if started:
                tracemalloc.stop()

    def get_limit(self, name: str) -> Optional[int]:
        """Soft resource limit such as ``RLIMIT_AS``; None when unlimited, -1 when unknown."""
        limit = getattr(psutil, name, None)
        if limit is None or not hasattr(self.process, 'rlimit'):
            return -1
        soft, _hard = self.process.rlimit(limit)
        if soft == psutil.RLIM_INFINITY:
            return None
        return soft


class BaseBenchmark:
    name = "base"

    def __init__(self, on_progress: Optional[ProgressCallback] = None):
        self.on_progress = on_progress
        self.timer = BenchmarkTimer()
        self.monitor = ResourceMonitor()
        self.phase_timer = BenchmarkTimer()
        self.phase_durations: Dict[str, float] = {}

    def progress(self, message: str):
        """Send a progress line to the callback, keeping it out of running timers."""
        if self.on_progress is None:
            return
        self.timer.pause()
        self.phase_timer.pause()
        try:
            self.on_progress(message)
        finally:
            self.phase_timer.resume()
            self.timer.resume()

    @contextmanager
    def measure_phase(self, phase_name: str):
        self.phase_timer.start()
        try:
            yield
        finally:
            duration = self.phase_timer.stop()
            self.phase_durations[phase_name] = duration * 1000
            logger.debug(f"{self.name} phase '{phase_name}' took {duration * 1000:.2f} ms")

    def run(self):
        raise NotImplementedError
