# monitoring package
from .metrics import get_metrics_registry
from .performance import track_performance, performance_timer

__all__ = [
    'get_metrics_registry',
    'track_performance',
    'performance_timer',
]
