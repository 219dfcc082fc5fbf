"""
Metrics collection for quiz usage and scoring performance.

The registry is process-wide. Streamlit serves each browser session on its own
thread, so every metric guards its value with a lock.
"""

import time
import functools
from typing import Dict, Any, Callable
import threading


class Counter:
    """Counter metric that can only increase"""

    def __init__(self, name: str):
        self.name = name
        self._value = 0
        self._lock = threading.Lock()

    def inc(self, value: float = 1.0):
        """Increment counter"""
        with self._lock:
            self._value += value

    def get(self) -> float:
        """Get current value"""
        return self._value

    def reset(self):
        """Reset counter to zero"""
        with self._lock:
            self._value = 0


class Histogram:
    """Histogram metric for tracking value distributions"""

    def __init__(self, name: str, max_values: int = 1000):
        self.name = name
        self._values: list[float] = []
        self._max_values = max_values
        self._lock = threading.Lock()

    def observe(self, value: float):
        """Record a value"""
        with self._lock:
            self._values.append(value)
            if len(self._values) > self._max_values:
                self._values = self._values[-self._max_values:]

    def get_stats(self) -> Dict[str, float]:
        """Get statistics (min, max, mean, count)"""
        with self._lock:
            if not self._values:
                return {"count": 0, "min": 0, "max": 0, "mean": 0}
            values = self._values.copy()

        return {
            "count": len(values),
            "min": min(values),
            "max": max(values),
            "mean": sum(values) / len(values),
        }

    def reset(self):
        """Reset histogram"""
        with self._lock:
            self._values.clear()


class Timer:
    """Timer metric for measuring execution time"""

    def __init__(self, name: str):
        self.name = name
        self._histogram = Histogram(f"{name}_duration")
        self._counter = Counter(f"{name}_count")

    def time(self, func: Callable) -> Callable:
        """Decorator to time a function"""
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                self.record(time.perf_counter() - start)
        return wrapper

    def record(self, duration: float):
        """Record a duration manually"""
        self._histogram.observe(duration)
        self._counter.inc()

    def get_stats(self) -> Dict[str, Any]:
        """Get timer statistics"""
        return {
            **self._histogram.get_stats(),
            "count": self._counter.get(),
        }

    def reset(self):
        self._histogram.reset()
        self._counter.reset()


class MetricsRegistry:
    """Central registry for all metrics"""

    def __init__(self):
        self._counters: Dict[str, Counter] = {}
        self._timers: Dict[str, Timer] = {}
        self._lock = threading.Lock()

    def counter(self, name: str) -> Counter:
        """Get or create a counter"""
        with self._lock:
            if name not in self._counters:
                self._counters[name] = Counter(name)
            return self._counters[name]

    def timer(self, name: str) -> Timer:
        """Get or create a timer"""
        with self._lock:
            if name not in self._timers:
                self._timers[name] = Timer(name)
            return self._timers[name]

    def get_all_metrics(self) -> Dict[str, Any]:
        """Get all metrics as a dictionary"""
        metrics = {}

        for name, counter in self._counters.items():
            metrics[f"counter_{name}"] = counter.get()

        for name, timer in self._timers.items():
            metrics[f"timer_{name}"] = timer.get_stats()

        return metrics

    def reset_all(self):
        """Reset all metrics"""
        with self._lock:
            for counter in self._counters.values():
                counter.reset()
            for timer in self._timers.values():
                timer.reset()


# Global metrics registry
_metrics_registry = MetricsRegistry()


def get_metrics_registry() -> MetricsRegistry:
    """Get the global metrics registry"""
    return _metrics_registry
