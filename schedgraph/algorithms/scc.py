"""Strongly connected components via Tarjan's low-link algorithm.

One depth-first pass assigns each vertex a discovery index and a low-link
value, the smallest discovery index reachable through tree edges and back
edges without leaving the current DFS stack. A vertex whose low-link equals
its own index roots a component: everything above it on the vertex stack is
popped off as one SCC.

The traversal is iterative. Each entry on the work-stack is a ``_Frame``
holding a vertex and a cursor into its adjacency list, so deep graphs do not
hit Python's recursion limit. Low-link propagation to the parent happens when
a frame is popped, which is where the recursive form would return.

Components complete in reverse topological order of the condensation.
Numbering them in reverse completion order therefore makes every
cross-component edge go from a lower id to a higher id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from schedgraph.algorithms.types import SCCResult
from schedgraph.graph.digraph import Graph, require_directed
from schedgraph.logging import get_logger
from schedgraph.profiling.metrics import Metrics, NullMetrics, format_ms
from schedgraph.types.base import VertexId

logger = get_logger(__name__)

_UNVISITED = -1


@dataclass(slots=True)
class _Frame:
    """DFS work-stack entry: a vertex and the next adjacency index to scan."""

    vertex: VertexId
    cursor: int = 0


class TarjanSCC:
    """Tarjan SCC detector for a directed graph.

    Example:
        >>> g = Graph.from_edges(3, [(0, 1, 1.0), (1, 0, 1.0), (1, 2, 1.0)])
        >>> TarjanSCC(g).find_scc().num_components
        2
    """

    def __init__(self, graph: Graph, metrics: Optional[Metrics] = None) -> None:
        """Bind the detector to ``graph``.

        Raises:
            ValueError: If ``graph`` is undirected.
        """
        require_directed(graph, "SCC algorithm")
        self.graph = graph
        self.metrics: Metrics = metrics if metrics is not None else NullMetrics()

    def find_scc(self) -> SCCResult:
        """Partition the graph's vertices into strongly connected components."""
        metrics = self.metrics
        metrics.start_timing("tarjan_scc_total")

        n = self.graph.num_vertices
        adjacency = [self.graph.edges_of(v) for v in range(n)]
        index = [_UNVISITED] * n
        low = [0] * n
        on_stack = [False] * n
        stack: List[VertexId] = []
        completed: List[List[VertexId]] = []
        next_index = 0

        for root in range(n):
            if index[root] != _UNVISITED:
                continue
            metrics.increment_counter("dfs_starts")

            index[root] = low[root] = next_index
            next_index += 1
            stack.append(root)
            on_stack[root] = True
            metrics.increment_counter("dfs_visits")
            work = [_Frame(root)]

            while work:
                frame = work[-1]
                v = frame.vertex
                edges = adjacency[v]

                if frame.cursor < len(edges):
                    w = edges[frame.cursor].dst
                    frame.cursor += 1
                    metrics.increment_counter("edge_traversals")

                    if index[w] == _UNVISITED:
                        # Tree edge: descend
                        index[w] = low[w] = next_index
                        next_index += 1
                        stack.append(w)
                        on_stack[w] = True
                        metrics.increment_counter("dfs_visits")
                        work.append(_Frame(w))
                    elif on_stack[w]:
                        low[v] = min(low[v], index[w])
                        metrics.increment_counter("back_edges")
                    continue

                # All edges of v scanned
                work.pop()
                if low[v] == index[v]:
                    component: List[VertexId] = []
                    while True:
                        u = stack.pop()
                        on_stack[u] = False
                        component.append(u)
                        metrics.increment_counter("scc_pops")
                        if u == v:
                            break
                    completed.append(component)
                    metrics.increment_counter("scc_found")
                if work:
                    parent = work[-1].vertex
                    low[parent] = min(low[parent], low[v])

        result = self._number_components(completed, n)
        metrics.stop_timing("tarjan_scc_total")
        logger.debug(
            f"Tarjan SCC: {n} vertices, {self.graph.edge_count} edges -> "
            f"{result.num_components} components"
        )
        return result

    @staticmethod
    def _number_components(completed: List[List[VertexId]], n: int) -> SCCResult:
        """Assign ids in reverse completion order and index components by id."""
        k = len(completed)
        component_id = [_UNVISITED] * n
        ordered: List[List[VertexId]] = [[] for _ in range(k)]
        for position, members in enumerate(completed):
            cid = k - 1 - position
            ordered[cid] = members
            for vertex in members:
                component_id[vertex] = cid
        return SCCResult(ordered, component_id)

    def metrics_summary(self) -> str:
        """Render the counters written by the last ``find_scc`` call."""
        m = self.metrics
        lines = [
            "=== Tarjan SCC Metrics ===",
            f"DFS starts: {m.get_counter('dfs_starts')}",
            f"DFS visits: {m.get_counter('dfs_visits')}",
            f"Edge traversals: {m.get_counter('edge_traversals')}",
            f"Back edges: {m.get_counter('back_edges')}",
            f"SCCs found: {m.get_counter('scc_found')}",
            f"Total time: {format_ms(m.get_time('tarjan_scc_total'))}",
        ]
        return "\n".join(lines) + "\n"


def strongly_connected_components(
    graph: Graph, metrics: Optional[Metrics] = None
) -> SCCResult:
    """Convenience wrapper around ``TarjanSCC(graph, metrics).find_scc()``."""
    return TarjanSCC(graph, metrics).find_scc()
