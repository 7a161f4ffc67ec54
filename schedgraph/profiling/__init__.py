"""Instrumentation for SchedGraph algorithms.

- ``Metrics``: protocol every algorithm writes counters and timings into.
- ``MetricsRecorder``: in-memory implementation with a text summary.
- ``NullMetrics``: no-op implementation used when no sink is supplied.
"""

from .metrics import (
    Metrics as Metrics,
)
from .metrics import (
    MetricsRecorder as MetricsRecorder,
)
from .metrics import (
    NullMetrics as NullMetrics,
)
from .metrics import (
    format_ms as format_ms,
)

__all__ = [
    "Metrics",
    "MetricsRecorder",
    "NullMetrics",
    "format_ms",
]
