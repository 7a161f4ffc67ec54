"""Base type aliases and enums for scheduling graph algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Numeric weight of an edge (task duration, cost, latency).
Cost = Union[int, float]

#: Dense zero-based vertex index.
VertexId = int

#: Predecessor sentinel for the source vertex and unreached vertices.
NO_PREDECESSOR = -1


class PathMode(IntEnum):
    """Optimization direction for DAG path relaxation."""

    #: Shortest paths; unreached vertices stay at +inf.
    MINIMIZE = 1
    #: Longest (critical) paths; unreached vertices stay at -inf.
    MAXIMIZE = 2

    @property
    def unreached(self) -> float:
        """Distance sentinel for vertices not reached from the source."""
        return float("inf") if self is PathMode.MINIMIZE else float("-inf")

    def improves(self, candidate: float, current: float) -> bool:
        """Return True if ``candidate`` strictly beats ``current`` in this mode."""
        if self is PathMode.MINIMIZE:
            return candidate < current
        return candidate > current

    @classmethod
    def from_string(cls, value: str) -> "PathMode":
        """Parse a mode name.

        Accepts enum names (case-insensitive) and the aliases ``shortest``
        and ``longest``.

        Raises:
            ValueError: If the string doesn't match any mode.
        """
        aliases = {"SHORTEST": cls.MINIMIZE, "LONGEST": cls.MAXIMIZE}
        key = value.strip().upper()
        if key in aliases:
            return aliases[key]
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join([e.name for e in cls] + sorted(aliases))
            raise ValueError(
                f"Invalid path mode '{value}'. Valid values are: {valid}"
            ) from None
