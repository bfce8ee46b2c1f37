import re
from unittest.mock import MagicMock

from hostbench import cli, web

DURATION = re.compile(r"Duration: ([\d,]+\.\d{2}) ms")


def test_main_success_prints_summary(capsys, isolated_cwd):
    exit_code = cli.main([])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "Summary" in out
    assert "Fibonacci(30) = 832040" in out
    assert "Bytes Written: 450000 bytes" in out
    durations = [float(d.replace(",", "")) for d in DURATION.findall(out)]
    assert len(durations) == 4
    assert all(d >= 0 for d in durations)
    assert list(isolated_cwd.iterdir()) == []


def test_main_unwritable_io_file_fails(capsys, tmp_path):
    exit_code = cli.main(["--io-file", str(tmp_path / "missing" / "bench.tmp")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Summary" not in captured.out
    assert "IO Benchmark:" not in captured.out
    assert captured.err.count("Benchmark failed during io write") == 1


def test_main_progress_and_environment(capsys, tmp_path):
    exit_code = cli.main(["--progress", "--show-env", "--io-file", str(tmp_path / "b.tmp")])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "Operating System:" in out
    assert "Starting CPU Benchmark..." in out
    assert "  - Appended 20000 of 100000 items" in out


def test_main_serve_runs_flask_app(monkeypatch):
    app = MagicMock()
    factory = MagicMock(return_value=app)
    monkeypatch.setattr(web, "create_app", factory)

    exit_code = cli.main(["--serve", "--host", "0.0.0.0", "--port", "9100", "--progress"])

    assert exit_code == 0
    factory.assert_called_once()
    assert factory.call_args[0][0]['BENCHMARK_PROGRESS'] is True
    app.run.assert_called_once_with(host="0.0.0.0", port=9100)


def test_log_level_is_case_insensitive():
    parser = cli.build_parser(cli.BenchmarkConfig())
    args = parser.parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"
