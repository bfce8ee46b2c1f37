import pytest

from hostbench.core.benchmark_core import CpuResult, IoResult, MemoryResult, SuiteResult
from hostbench.web import create_app


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from its own directory so the default IO file never collides."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def app(tmp_path):
    app = create_app({'TESTING': True, 'BENCHMARK_IO_FILENAME': str(tmp_path / "web_bench.tmp")})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fixed_environment():
    return lambda: {
        'date': '2024-01-02 03:04:05',
        'python_version': '3.12.1',
        'cpu_time_limit': None,
        'memory_limit': 512 * 1024 * 1024,
        'os_name': 'Linux',
        'os_release': '6.1.0',
    }


@pytest.fixture
def sample_suite():
    return SuiteResult(
        cpu=CpuResult(result=832040, time_ms=1234.567),
        memory=MemoryResult(memory_used_mb=8.0, time_ms=45.678),
        io=IoResult(bytes_written=450000, write_time_ms=0.5, read_time_ms=0.251),
    )
