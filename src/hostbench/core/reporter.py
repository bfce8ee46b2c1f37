"""
Suite orchestration and plain-text reporting.

The reporter runs the CPU, memory and IO benchmarks in that order and renders
their results. Whether the text ends up on a terminal or in an HTTP response is
decided by the caller through ``OutputTarget``.
"""

import enum
import logging
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from hostbench.core.benchmark_core import ProgressCallback, SuiteResult
from hostbench.engines.cpu.benchmark_cpu import DEFAULT_FIBONACCI_N, CpuBenchmark
from hostbench.engines.fileio.benchmark_fileio import DEFAULT_FILENAME, IoBenchmark
from hostbench.engines.memory.benchmark_memory import MemoryBenchmark
from hostbench.utils.utils import format_environment, get_environment_info

logger = logging.getLogger(__name__)

TITLE = "Python Benchmark Results"


class OutputTarget(enum.Enum):
    CLI = "cli"
    WEB = "web"


def _num(value: float) -> str:
    return f"{value:,.2f}"


def _flush(stream: TextIO):
    try:
        stream.flush()
    except (OSError, ValueError) as e:
        logger.debug(f"Ignoring flush failure: {e}")


class Reporter:
    def __init__(self,
                 target: OutputTarget = OutputTarget.CLI,
                 progress: bool = False,
                 show_env: Optional[bool] = None,
                 io_filename: Union[str, Path] = DEFAULT_FILENAME,
                 environment: Optional[Callable[[], dict]] = None):
        self.target = target
        self.progress = progress
        self.show_env = target is OutputTarget.WEB if show_env is None else show_env
        self.io_filename = io_filename
        self.environment = environment or get_environment_info

    def run_suite(self, on_progress: Optional[ProgressCallback] = None) -> SuiteResult:
        cpu = CpuBenchmark(DEFAULT_FIBONACCI_N, on_progress=on_progress).run()
        memory = MemoryBenchmark(on_progress=on_progress).run()
        io = IoBenchmark(self.io_filename, on_progress=on_progress).run()
        return SuiteResult(cpu=cpu, memory=memory, io=io)

    def render_title(self) -> str:
        return f"{TITLE}\n{'=' * len(TITLE)}\n\n"

    def render_environment(self) -> str:
        return format_environment(self.environment())

    def render_summary(self, suite: SuiteResult) -> str:
        cpu, memory, io = suite.cpu, suite.memory, suite.io
        return (
            "Summary\n"
            "=======\n"
            "CPU Benchmark:\n"
            f"  - Fibonacci({DEFAULT_FIBONACCI_N}) = {cpu.result}\n"
            f"  - Duration: {_num(cpu.time_ms)} ms\n"
            "\n"
            "Memory Benchmark:\n"
            f"  - Peak Memory Used: {_num(memory.memory_used_mb)} MB\n"
            f"  - Duration: {_num(memory.time_ms)} ms\n"
            "\n"
            "IO Benchmark:\n"
            f"  - Bytes Written: {io.bytes_written} bytes\n"
            f"  - Write Duration: {_num(io.write_time_ms)} ms\n"
            f"  - Read Duration: {_num(io.read_time_ms)} ms\n"
        )

    def write_report(self, stream: TextIO) -> SuiteResult:
        """Write the full report to ``stream``.

        Benchmark errors propagate before the summary is written, so a failed
        run never ends in a partial summary block.
        """
        def emit(text: str):
            stream.write(text)
            _flush(stream)

        emit(self.render_title())
        if self.show_env:
            emit(self.render_environment())

        on_progress = (lambda message: emit(message + "\n")) if self.progress else None
        logger.info(f"Running benchmark suite for {self.target.value} output")
        suite = self.run_suite(on_progress)

        if self.progress:
            emit("\n")
        emit(self.render_summary(suite))
        return suite
