import platform
import sys
from datetime import datetime
from typing import Any, Dict, Optional

from hostbench.core.benchmark_core import ResourceMonitor


def _format_limit(value: Optional[int]) -> str:
    if value is None:
        return "unlimited"
    if value < 0:
        return "unknown"
    return str(value)


def format_bytes_limit(value: Optional[int]) -> str:
    if value is None or value < 0:
        return _format_limit(value)
    for suffix, size in (('G', 1024**3), ('M', 1024**2), ('K', 1024)):
        if value >= size and value % size == 0:
            return f"{value // size}{suffix}"
    return str(value)


def get_environment_info(monitor: Optional[ResourceMonitor] = None) -> Dict[str, Any]:
    monitor = monitor or ResourceMonitor()
    return {
        'date': datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
        'python_version': sys.version.split()[0],
        'cpu_time_limit': monitor.get_limit('RLIMIT_CPU'),
        'memory_limit': monitor.get_limit('RLIMIT_AS'),
        'os_name': platform.system(),
        'os_release': platform.release(),
    }


def format_environment(info: Dict[str, Any]) -> str:
    cpu_limit = info['cpu_time_limit']
    if cpu_limit is None or cpu_limit < 0:
        time_limit = _format_limit(cpu_limit)
    else:
        time_limit = f"{cpu_limit} seconds"

    lines = [
        f"Date: {info['date']}",
        f"Python Version: {info['python_version']}",
        f"Execution Time Limit: {time_limit}",
        f"Memory Limit: {format_bytes_limit(info['memory_limit'])}",
        f"Operating System: {info['os_name']} {info['os_release']}",
    ]
    return "\n".join(lines) + "\n\n"
