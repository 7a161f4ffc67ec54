"""Instrumentation sink for graph algorithms.

Algorithms receive a ``Metrics`` object and report named counters and named
interval timings into it. They never read values back to make decisions, so
``NullMetrics`` can replace ``MetricsRecorder`` anywhere.

Timings are stored in nanoseconds. Counter and timer names are free-form
strings; unknown names read back as zero.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict, Generator, Protocol, runtime_checkable

from schedgraph.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Metrics(Protocol):
    """Counters and interval timers written by algorithms."""

    def increment_counter(self, name: str, amount: int = 1) -> None: ...

    def get_counter(self, name: str) -> int: ...

    def start_timing(self, name: str) -> None: ...

    def stop_timing(self, name: str) -> None: ...

    def get_time(self, name: str) -> int: ...

    def reset(self) -> None: ...

    def summary(self) -> str: ...


class MetricsRecorder:
    """Dict-backed ``Metrics`` implementation.

    Not thread-safe; one recorder is meant to be written by a single thread.
    """

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._timings: Dict[str, int] = {}
        self._start_times: Dict[str, int] = {}

    def increment_counter(self, name: str, amount: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + int(amount)

    def get_counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    def start_timing(self, name: str) -> None:
        self._start_times[name] = time.perf_counter_ns()

    def stop_timing(self, name: str) -> None:
        """Record the elapsed time since ``start_timing(name)``.

        A stop without a matching start is ignored. Stopping the same timer
        again after a new start overwrites the stored duration.
        """
        start = self._start_times.pop(name, None)
        if start is None:
            logger.debug(f"stop_timing('{name}') without a matching start; ignored")
            return
        self._timings[name] = time.perf_counter_ns() - start

    def get_time(self, name: str) -> int:
        return self._timings.get(name, 0)

    def get_time_ms(self, name: str) -> float:
        """Recorded duration of ``name`` in milliseconds."""
        return self.get_time(name) / 1_000_000.0

    @contextmanager
    def timed(self, name: str) -> Generator[None, None, None]:
        """Context manager that wraps ``start_timing``/``stop_timing``."""
        self.start_timing(name)
        try:
            yield
        finally:
            self.stop_timing(name)

    def counters(self) -> Dict[str, int]:
        """Snapshot of all counters."""
        return dict(self._counters)

    def timings(self) -> Dict[str, int]:
        """Snapshot of all completed timings in nanoseconds."""
        return dict(self._timings)

    def reset(self) -> None:
        self._counters.clear()
        self._timings.clear()
        self._start_times.clear()

    def summary(self) -> str:
        lines = ["=== Metrics Summary ==="]
        if self._counters:
            lines.append("Counters:")
            for name, value in self._counters.items():
                lines.append(f"  {name}: {value}")
        if self._timings:
            lines.append("Timings:")
            for name, nanos in self._timings.items():
                lines.append(f"  {name}: {nanos / 1_000_000.0:.3f} ms ({nanos} ns)")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return (
            f"MetricsRecorder(counters={len(self._counters)}, "
            f"timings={len(self._timings)})"
        )


class NullMetrics:
    """``Metrics`` implementation that discards everything."""

    def increment_counter(self, name: str, amount: int = 1) -> None:
        return None

    def get_counter(self, name: str) -> int:
        return 0

    def start_timing(self, name: str) -> None:
        return None

    def stop_timing(self, name: str) -> None:
        return None

    def get_time(self, name: str) -> int:
        return 0

    def reset(self) -> None:
        return None

    def summary(self) -> str:
        return "=== Metrics Summary ===\n"


def format_ms(nanos: int) -> str:
    """Render a nanosecond duration as milliseconds with three decimals."""
    return f"{nanos / 1_000_000.0:.3f} ms"
