from . import names
from .base import LoggingMetricsHook, MetricsHook, NoOpMetricsHook, timed

__all__ = [
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
    "timed",
]
