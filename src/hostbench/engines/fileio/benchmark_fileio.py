"""
Filesystem IO benchmarking engine.

Writes a fixed text payload to a temporary file, reads it back and removes it.
Each phase is timed on its own; progress markers fall outside those windows.
"""

import logging
import warnings
from pathlib import Path
from typing import Optional, Union

from hostbench.core.benchmark_core import BaseBenchmark, IoResult, ProgressCallback
from hostbench.core.errors import BenchmarkIOError, CleanupWarning

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "benchmark_test_file.tmp"
PAYLOAD_LINE = "The quick brown fox jumps over the lazy dog.\n"
PAYLOAD_REPEAT = 10000


def build_payload(line: str = PAYLOAD_LINE, repeat: int = PAYLOAD_REPEAT) -> bytes:
    return (line * repeat).encode('utf-8')


class IoBenchmark(BaseBenchmark):
    name = "io"

    def __init__(self, filename: Union[str, Path] = DEFAULT_FILENAME,
                 verify: bool = False,
                 on_progress: Optional[ProgressCallback] = None):
        super().__init__(on_progress)
        self.path = Path(filename)
        self.verify = verify
        self.payload = build_payload()

    def _write(self) -> int:
        self.progress("Writing...")
        try:
            with self.measure_phase('write'):
                with open(self.path, 'wb') as f:
                    bytes_written = f.write(self.payload)
        except OSError as e:
            raise BenchmarkIOError(f"could not write {self.path}: {e}", phase="io write") from e
        self.progress("Written.")
        return bytes_written

    def _read(self) -> bytes:
        self.progress("Reading...")
        try:
            with self.measure_phase('read'):
                with open(self.path, 'rb') as f:
                    data = f.read()
        except OSError as e:
            raise BenchmarkIOError(f"could not read {self.path}: {e}", phase="io read") from e
        self.progress("Read.")
        return data

    def _delete(self):
        self.progress("Deleting...")
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove benchmark file {self.path}: {e}")
            warnings.warn(f"could not remove {self.path}: {e}", CleanupWarning, stacklevel=3)
            return
        self.progress("Deleted.")

    def run(self) -> IoResult:
        logger.info(f"Starting IO benchmark: {len(self.payload)} bytes to {self.path}")

        try:
            bytes_written = self._write()
            data = self._read()
            if self.verify and data != self.payload:
                raise BenchmarkIOError(
                    f"read back {len(data)} bytes that differ from the {len(self.payload)} written",
                    phase="io verify",
                )
        finally:
            self._delete()

        result = IoResult(
            bytes_written=bytes_written,
            write_time_ms=self.phase_durations['write'],
            read_time_ms=self.phase_durations['read'],
        )
        logger.info(f"IO benchmark finished: {result.bytes_written} bytes, "
                    f"write {result.write_time_ms:.2f} ms, read {result.read_time_ms:.2f} ms")
        return result


def io_benchmark(filename: Union[str, Path] = DEFAULT_FILENAME,
                 on_progress: Optional[ProgressCallback] = None) -> IoResult:
    return IoBenchmark(filename, on_progress=on_progress).run()
