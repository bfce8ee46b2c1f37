import pytest

from hostbench.engines.cpu.benchmark_cpu import CpuBenchmark, cpu_benchmark, fibonacci


def iterative_fibonacci(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


@pytest.mark.parametrize("n", range(0, 21))
def test_fibonacci_matches_iterative_reference(n):
    assert fibonacci(n) == iterative_fibonacci(n)


def test_fibonacci_boundaries():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_cpu_benchmark_default_input():
    result = cpu_benchmark()
    assert result.result == 832040
    assert result.time_ms >= 0


@pytest.mark.parametrize("n", [0, 1])
def test_cpu_benchmark_trivial_inputs(n):
    result = cpu_benchmark(n)
    assert result.result == n
    assert result.time_ms >= 0


def test_cpu_benchmark_rejects_negative_input():
    with pytest.raises(ValueError):
        CpuBenchmark(-1)


def test_cpu_benchmark_emits_progress_markers():
    messages = []
    result = CpuBenchmark(15, on_progress=messages.append).run()
    assert result.result == 610
    assert messages == ["Starting CPU Benchmark...", "CPU Benchmark Completed."]
