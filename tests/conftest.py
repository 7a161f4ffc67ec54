"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from schedgraph.profiling.metrics import MetricsRecorder


@pytest.fixture
def metrics() -> MetricsRecorder:
    """Fresh in-memory instrumentation sink."""
    return MetricsRecorder()
