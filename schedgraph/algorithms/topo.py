"""Topological ordering of directed graphs.

``TopologicalSorter`` is the contract: totally order an acyclic graph, or
return ``None`` when the graph has a cycle. Partial orders are never
returned.

``KahnTopologicalSort`` is the canonical strategy used throughout the
package:

  1.  Compute the in-degree of every vertex (parallel edges count).
  2.  Seed a FIFO queue with in-degree-0 vertices in ascending index order.
  3.  Pop a vertex, append it, decrement each successor's in-degree and
      enqueue successors that reach zero.
  4.  Fewer emitted vertices than the graph holds means a cycle.

``DFSTopologicalSort`` produces a reverse DFS post-order instead. It is
iterative and reports a cycle on the first back edge.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Protocol, runtime_checkable

from schedgraph.graph.digraph import Graph, require_directed
from schedgraph.logging import get_logger
from schedgraph.profiling.metrics import Metrics, NullMetrics, format_ms
from schedgraph.types.base import VertexId

logger = get_logger(__name__)


@runtime_checkable
class TopologicalSorter(Protocol):
    """Strategy that linearizes an acyclic directed graph."""

    def topological_sort(
        self, graph: Graph, metrics: Optional[Metrics] = None
    ) -> Optional[List[VertexId]]:
        """Return every vertex in a valid topological order, or None on a cycle."""
        ...

    def is_dag(self, graph: Graph) -> bool:
        """Return True if ``graph`` has no directed cycle."""
        ...


class KahnTopologicalSort:
    """In-degree and queue based topological sort."""

    def topological_sort(
        self, graph: Graph, metrics: Optional[Metrics] = None
    ) -> Optional[List[VertexId]]:
        """Linearize ``graph`` with Kahn's algorithm.

        Args:
            graph: Directed graph expected to be acyclic.
            metrics: Optional instrumentation sink.

        Returns:
            All vertices in topological order, or None if the graph contains
            a cycle (the ``cycle_detected`` counter is incremented).

        Raises:
            ValueError: If ``graph`` is undirected.
        """
        require_directed(graph, "Topological sort")
        m: Metrics = metrics if metrics is not None else NullMetrics()
        m.start_timing("kahn_topological_sort")

        n = graph.num_vertices
        in_degree = self._in_degrees(graph, m)

        queue: Deque[VertexId] = deque()
        for vertex in range(n):
            if in_degree[vertex] == 0:
                queue.append(vertex)
                m.increment_counter("queue_pushes")

        order: List[VertexId] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            m.increment_counter("queue_pops")
            m.increment_counter("vertices_processed")

            for edge in graph.edges_of(u):
                v = edge.dst
                in_degree[v] -= 1
                m.increment_counter("edge_removals")
                if in_degree[v] == 0:
                    queue.append(v)
                    m.increment_counter("queue_pushes")

        m.stop_timing("kahn_topological_sort")

        if len(order) != n:
            m.increment_counter("cycle_detected")
            logger.debug(
                f"Kahn sort: cycle detected, {n - len(order)} of {n} vertices "
                f"never reached in-degree 0"
            )
            return None
        return order

    def is_dag(self, graph: Graph) -> bool:
        return self.topological_sort(graph, NullMetrics()) is not None

    @staticmethod
    def _in_degrees(graph: Graph, metrics: Metrics) -> List[int]:
        in_degree = [0] * graph.num_vertices
        for edge in graph.edges():
            in_degree[edge.dst] += 1
            metrics.increment_counter("indegree_calculations")
        return in_degree

    @staticmethod
    def metrics_summary(metrics: Metrics) -> str:
        """Render the counters written by a Kahn sort into ``metrics``."""
        cycle = "YES" if metrics.get_counter("cycle_detected") > 0 else "NO"
        lines = [
            "=== Kahn's Topological Sort Metrics ===",
            f"In-degree calculations: {metrics.get_counter('indegree_calculations')}",
            f"Queue pushes: {metrics.get_counter('queue_pushes')}",
            f"Queue pops: {metrics.get_counter('queue_pops')}",
            f"Edge removals: {metrics.get_counter('edge_removals')}",
            f"Vertices processed: {metrics.get_counter('vertices_processed')}",
            f"Cycle detected: {cycle}",
            f"Total time: {format_ms(metrics.get_time('kahn_topological_sort'))}",
        ]
        return "\n".join(lines) + "\n"


_WHITE, _GRAY, _BLACK = 0, 1, 2


class DFSTopologicalSort:
    """Reverse post-order topological sort with three-color cycle detection."""

    def topological_sort(
        self, graph: Graph, metrics: Optional[Metrics] = None
    ) -> Optional[List[VertexId]]:
        require_directed(graph, "Topological sort")
        m: Metrics = metrics if metrics is not None else NullMetrics()
        m.start_timing("dfs_topological_sort")

        n = graph.num_vertices
        color = [_WHITE] * n
        postorder: List[VertexId] = []

        for root in range(n):
            if color[root] != _WHITE:
                continue
            color[root] = _GRAY
            work = [(root, iter(graph.edges_of(root)))]
            while work:
                vertex, edges = work[-1]
                edge = next(edges, None)
                if edge is None:
                    work.pop()
                    color[vertex] = _BLACK
                    postorder.append(vertex)
                    m.increment_counter("vertices_processed")
                    continue
                m.increment_counter("edge_traversals")
                if color[edge.dst] == _GRAY:
                    m.stop_timing("dfs_topological_sort")
                    m.increment_counter("cycle_detected")
                    logger.debug(
                        f"DFS sort: back edge {edge.src} -> {edge.dst} closes a cycle"
                    )
                    return None
                if color[edge.dst] == _WHITE:
                    color[edge.dst] = _GRAY
                    work.append((edge.dst, iter(graph.edges_of(edge.dst))))

        m.stop_timing("dfs_topological_sort")
        postorder.reverse()
        return postorder

    def is_dag(self, graph: Graph) -> bool:
        return self.topological_sort(graph, NullMetrics()) is not None


def topological_sort(
    graph: Graph, metrics: Optional[Metrics] = None
) -> Optional[List[VertexId]]:
    """Kahn topological order of ``graph``, or None if it has a cycle."""
    return KahnTopologicalSort().topological_sort(graph, metrics)


def is_dag(graph: Graph) -> bool:
    return KahnTopologicalSort().is_dag(graph)
