"""
Metrics recording.
"""

from .metrics import MetricsRecorder, InMemoryMetrics, NullMetrics

__all__ = ['MetricsRecorder', 'InMemoryMetrics', 'NullMetrics']
