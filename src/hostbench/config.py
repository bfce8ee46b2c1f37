import os
from dataclasses import dataclass

from hostbench.engines.fileio.benchmark_fileio import DEFAULT_FILENAME


@dataclass
class BenchmarkConfig:
    """Presentation and serving settings. Workload sizes are fixed and not configurable."""
    progress: bool = False
    show_env: bool = False
    io_filename: str = DEFAULT_FILENAME
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        return cls(
            host=os.environ.get('HOSTBENCH_HOST', cls.host),
            port=int(os.environ.get('HOSTBENCH_PORT', cls.port)),
            log_level=os.environ.get('HOSTBENCH_LOG_LEVEL', cls.log_level).upper(),
        )
