"""
Utility functions for benchmarking.
"""

from .utils import format_environment, get_environment_info

__all__ = ['format_environment', 'get_environment_info']
