import argparse
import logging
import sys
from typing import List, Optional

from hostbench.config import BenchmarkConfig
from hostbench.core.errors import BenchmarkError
from hostbench.core.reporter import OutputTarget, Reporter

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str):
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format=LOG_FORMAT, stream=sys.stderr)


def build_parser(defaults: BenchmarkConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Single-shot CPU, memory and filesystem benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run once and print the summary
  hostbench

  # Show progress lines and the environment header
  hostbench --progress --show-env

  # Serve the report as plain text over HTTP
  hostbench --serve --port 8000
        """
    )

    parser.add_argument('--progress', action='store_true',
                        help='Print progress lines while benchmarks run')
    parser.add_argument('--show-env', action='store_true',
                        help='Print the environment header before running')
    parser.add_argument('--io-file', type=str, default=defaults.io_filename,
                        help=f'Temporary file used by the IO benchmark (default: {defaults.io_filename})')
    parser.add_argument('--serve', action='store_true',
                        help='Serve the report over HTTP instead of running once')
    parser.add_argument('--host', type=str, default=defaults.host,
                        help=f'Host to bind with --serve (default: {defaults.host})')
    parser.add_argument('--port', type=int, default=defaults.port,
                        help=f'Port to bind with --serve (default: {defaults.port})')
    parser.add_argument('--log-level', type=str.upper, default=defaults.log_level,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help=f'Diagnostics level on stderr (default: {defaults.log_level})')
    return parser


def serve(config: BenchmarkConfig):
    from hostbench.web import create_app

    app = create_app({
        'BENCHMARK_PROGRESS': config.progress,
        'BENCHMARK_IO_FILENAME': config.io_filename,
    })
    logger.info(f"Serving benchmark report on http://{config.host}:{config.port}/")
    app.run(host=config.host, port=config.port)


def main(argv: Optional[List[str]] = None) -> int:
    defaults = BenchmarkConfig.from_env()
    args = build_parser(defaults).parse_args(argv)

    config = BenchmarkConfig(
        progress=args.progress,
        show_env=args.show_env,
        io_filename=args.io_file,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    if args.serve:
        serve(config)
        return 0

    reporter = Reporter(
        target=OutputTarget.CLI,
        progress=config.progress,
        show_env=config.show_env,
        io_filename=config.io_filename,
    )

    try:
        reporter.write_report(sys.stdout)
    except BenchmarkError as e:
        print(f"Benchmark failed during {e.phase}: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
