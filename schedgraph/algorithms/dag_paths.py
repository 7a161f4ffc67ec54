"""Single-source shortest and longest paths on a DAG.

The engine topologically sorts the graph on every call (Kahn), then relaxes
outgoing edges of each vertex in that order. With ``PathMode.MINIMIZE`` an
edge improves a target when ``dist[u] + w < dist[v]``; with
``PathMode.MAXIMIZE`` when ``dist[u] + w > dist[v]``. Comparisons are strict,
so the first improving edge in topological-then-adjacency order wins ties.
Vertices still at the unreached sentinel are never relaxed through.

Runs in O(V + E) per source. ``find_critical_path`` repeats the longest-path
pass from every vertex, O(V * (V + E)) in total, and is meant for small
graphs.
"""

from __future__ import annotations

import math
from typing import List, Optional

from schedgraph.algorithms.errors import NotADAGError
from schedgraph.algorithms.topo import KahnTopologicalSort
from schedgraph.algorithms.types import PathResult
from schedgraph.config import ANALYSIS_CONFIG
from schedgraph.graph.digraph import Graph, as_vertex_index, require_directed
from schedgraph.logging import get_logger
from schedgraph.profiling.metrics import Metrics, NullMetrics, format_ms
from schedgraph.types.base import NO_PREDECESSOR, PathMode, VertexId

logger = get_logger(__name__)

_TIMERS = {
    PathMode.MINIMIZE: "dag_shortest_paths",
    PathMode.MAXIMIZE: "dag_longest_paths",
}


class DAGPathEngine:
    """Shortest/longest path tables over a directed acyclic graph."""

    def __init__(self, graph: Graph, metrics: Optional[Metrics] = None) -> None:
        """Bind the engine to ``graph``.

        Raises:
            ValueError: If ``graph`` is undirected.
        """
        require_directed(graph, "DAG path algorithm")
        self.graph = graph
        self.metrics: Metrics = metrics if metrics is not None else NullMetrics()

    def paths(self, source: VertexId, mode: PathMode) -> PathResult:
        """Compute distances and predecessors from ``source``.

        Args:
            source: Source vertex index.
            mode: ``PathMode.MINIMIZE`` for shortest paths,
                ``PathMode.MAXIMIZE`` for longest paths.

        Returns:
            PathResult for ``source`` in ``mode``.

        Raises:
            ValueError: If ``source`` is not an integer or is out of range.
            NotADAGError: If the graph contains a cycle.
        """
        mode = PathMode(mode)
        n = self.graph.num_vertices
        try:
            source = as_vertex_index(source)
        except ValueError:
            raise ValueError(f"Invalid source vertex: {source!r}") from None
        if source < 0 or source >= n:
            raise ValueError(f"Invalid source vertex: {source}")

        m = self.metrics
        timer = _TIMERS[mode]
        m.start_timing(timer)
        try:
            order = KahnTopologicalSort().topological_sort(self.graph, m)
            if order is None:
                raise NotADAGError()

            dist: List[float] = [mode.unreached] * n
            pred: List[int] = [NO_PREDECESSOR] * n
            dist[source] = 0.0

            for u in order:
                du = dist[u]
                if math.isinf(du):
                    continue
                m.increment_counter("vertex_relaxations")
                for edge in self.graph.edges_of(u):
                    candidate = du + edge.weight
                    m.increment_counter("edge_relaxations")
                    if mode.improves(candidate, dist[edge.dst]):
                        dist[edge.dst] = candidate
                        pred[edge.dst] = u
                        m.increment_counter("distance_updates")
        finally:
            m.stop_timing(timer)

        return PathResult(dist, pred, source, mode)

    def shortest_paths(self, source: VertexId) -> PathResult:
        return self.paths(source, PathMode.MINIMIZE)

    def longest_paths(self, source: VertexId) -> PathResult:
        return self.paths(source, PathMode.MAXIMIZE)

    def find_critical_path(self) -> Optional[PathResult]:
        """Longest-path result of the source with the longest critical path.

        Every vertex is tried as a source; on equal lengths the lower source
        index is kept. Returns None for a graph without vertices.

        Raises:
            NotADAGError: If the graph contains a cycle.
        """
        n = self.graph.num_vertices
        if ANALYSIS_CONFIG.exceeds_critical_path_limit(n):
            logger.warning(
                f"All-sources critical path on {n} vertices runs {n} full "
                f"relaxations; expect quadratic running time"
            )

        self.metrics.start_timing("dag_critical_path")
        try:
            best: Optional[PathResult] = None
            best_length = float("-inf")
            for source in range(n):
                result = self.longest_paths(source)
                length = result.critical_path_length()
                if length > best_length:
                    best_length = length
                    best = result
        finally:
            self.metrics.stop_timing("dag_critical_path")

        if best is not None:
            logger.debug(
                f"Critical path from source {best.source}: "
                f"{best.critical_path()} (length {best_length})"
            )
        return best

    def metrics_summary(self) -> str:
        m = self.metrics
        lines = [
            "=== DAG Path Metrics ===",
            f"Vertex relaxations: {m.get_counter('vertex_relaxations')}",
            f"Edge relaxations: {m.get_counter('edge_relaxations')}",
            f"Distance updates: {m.get_counter('distance_updates')}",
        ]
        for label, timer in (
            ("Shortest paths time", "dag_shortest_paths"),
            ("Longest paths time", "dag_longest_paths"),
            ("Critical path time", "dag_critical_path"),
        ):
            if m.get_time(timer) > 0:
                lines.append(f"{label}: {format_ms(m.get_time(timer))}")
        return "\n".join(lines) + "\n"


def dag_shortest_paths(
    graph: Graph, source: VertexId, metrics: Optional[Metrics] = None
) -> PathResult:
    return DAGPathEngine(graph, metrics).shortest_paths(source)


def dag_longest_paths(
    graph: Graph, source: VertexId, metrics: Optional[Metrics] = None
) -> PathResult:
    return DAGPathEngine(graph, metrics).longest_paths(source)


def critical_path(graph: Graph, metrics: Optional[Metrics] = None) -> Optional[PathResult]:
    """All-sources critical path of ``graph``; see ``DAGPathEngine.find_critical_path``."""
    return DAGPathEngine(graph, metrics).find_critical_path()
