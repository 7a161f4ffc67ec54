"""Shared type aliases and enums."""

from schedgraph.types.base import NO_PREDECESSOR, Cost, PathMode, VertexId

__all__ = ["Cost", "NO_PREDECESSOR", "PathMode", "VertexId"]
