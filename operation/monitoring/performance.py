"""
Performance monitoring utilities.
"""

import time
import functools
from typing import Callable
from contextlib import contextmanager

from operation.monitoring.metrics import get_metrics_registry


def track_performance(func: Callable) -> Callable:
    """
    Decorator to track function execution time under
    the timer named '<module>.<function>'.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        timer = get_metrics_registry().timer(f"{func.__module__}.{func.__name__}")
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            timer.record(time.perf_counter() - start)

    return wrapper


@contextmanager
def performance_timer(name: str):
    """
    Context manager for manual performance timing.

    Usage:
        with performance_timer("render_profile"):
            # do something
    """
    timer = get_metrics_registry().timer(name)
    start = time.perf_counter()
    try:
        yield
    finally:
        timer.record(time.perf_counter() - start)
