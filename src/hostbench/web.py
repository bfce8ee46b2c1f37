"""Flask front end that serves the benchmark report as plain text."""
import io
import threading

from flask import Flask, Response, current_app, jsonify

from hostbench.config import BenchmarkConfig
from hostbench.core.errors import BenchmarkError
from hostbench.core.reporter import OutputTarget, Reporter

PLAIN_TEXT = 'text/plain; charset=utf-8'

# One suite at a time per process; runs share the IO file and the allocator
_suite_lock = threading.Lock()


def create_app(config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    defaults = BenchmarkConfig.from_env()
    app.config.from_mapping(
        BENCHMARK_PROGRESS=defaults.progress,
        BENCHMARK_IO_FILENAME=defaults.io_filename,
    )

    if config:
        app.config.update(config)

    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'ok',
            'service': 'hostbench'
        })

    @app.route('/', methods=['GET'])
    def report():
        """Run the suite once and return the report body."""
        reporter = Reporter(
            target=OutputTarget.WEB,
            progress=current_app.config['BENCHMARK_PROGRESS'],
            io_filename=current_app.config['BENCHMARK_IO_FILENAME'],
        )
        body = io.StringIO()
        try:
            with _suite_lock:
                reporter.write_report(body)
        except BenchmarkError as e:
            current_app.logger.error(f"Benchmark failed during {e.phase}: {e.message}")
            body.write(f"Benchmark failed during {e.phase}: {e.message}\n")
            return Response(body.getvalue(), status=500, content_type=PLAIN_TEXT)

        return Response(body.getvalue(), status=200, content_type=PLAIN_TEXT)

    app.logger.info("Flask application initialization complete")
    return app
