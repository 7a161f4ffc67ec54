"""Condensation of a directed graph by its strongly connected components.

Each SCC becomes one vertex of a new directed graph. An edge ``A -> B`` is
added for the first original edge found between a vertex of ``A`` and a
vertex of ``B`` (``A != B``); that edge's weight is kept and every later
parallel edge between the same ordered pair is dropped. Scan order is vertex
index, then adjacency order.

Dropping rather than aggregating parallel edges means the condensation does
not carry the minimum (or maximum) inter-component weight in general.
"""

from __future__ import annotations

from typing import List, Set, Tuple

from schedgraph.algorithms.types import CondensationStats, SCCResult
from schedgraph.config import ANALYSIS_CONFIG
from schedgraph.graph.digraph import Graph
from schedgraph.logging import get_logger

logger = get_logger(__name__)


class SCCCondensation:
    """Builds the component DAG for ``graph`` given its ``SCCResult``."""

    def __init__(self, graph: Graph, scc_result: SCCResult) -> None:
        """Pair a graph with its SCC partition.

        Raises:
            ValueError: If the partition does not cover the graph's vertices.
        """
        if scc_result.num_vertices != graph.num_vertices:
            raise ValueError(
                f"SCC result covers {scc_result.num_vertices} vertices, "
                f"graph has {graph.num_vertices}"
            )
        self.graph = graph
        self.scc_result = scc_result

    def build_condensation_dag(self) -> Graph:
        """Return a fresh directed graph over component ids."""
        scc = self.scc_result
        dag = Graph(scc.num_components, directed=True)
        seen: Set[Tuple[int, int]] = set()

        for u in self.graph.vertices():
            comp_u = scc.component_id(u)
            for edge in self.graph.edges_of(u):
                comp_v = scc.component_id(edge.dst)
                if comp_u == comp_v:
                    continue
                pair = (comp_u, comp_v)
                if pair in seen:
                    continue
                seen.add(pair)
                dag.add_edge(comp_u, comp_v, edge.weight)

        logger.debug(
            f"Condensation: {self.graph.num_vertices} vertices -> "
            f"{dag.num_vertices} components, {dag.edge_count} edges"
        )
        return dag

    def vertex_to_component_mapping(self) -> List[int]:
        """Component id of every original vertex, indexed by vertex."""
        return self.scc_result.vertex_to_component()

    def stats(self) -> CondensationStats:
        dag = self.build_condensation_dag()
        n = self.graph.num_vertices
        ratio = 100.0 * dag.num_vertices / n if n else 100.0
        return CondensationStats(
            original_vertices=n,
            original_edges=self.graph.edge_count,
            components=dag.num_vertices,
            condensed_edges=dag.edge_count,
            compression_ratio=ratio,
            component_sizes=tuple(len(c) for c in self.scc_result.components),
        )

    def condensation_stats_text(self) -> str:
        s = self.stats()
        fmt = ANALYSIS_CONFIG.format_distance
        lines = [
            "=== Condensation Statistics ===",
            f"Original graph: {s.original_vertices} vertices, {s.original_edges} edges",
            f"Condensed DAG: {s.components} components, {s.condensed_edges} edges",
            f"Compression ratio: {fmt(s.compression_ratio)}%",
            "",
            "Component sizes:",
        ]
        for cid, size in enumerate(s.component_sizes):
            lines.append(f"  Component {cid}: {size} vertices")
        return "\n".join(lines) + "\n"


def condense(graph: Graph, scc_result: SCCResult) -> Graph:
    """Convenience wrapper around ``SCCCondensation.build_condensation_dag``."""
    return SCCCondensation(graph, scc_result).build_condensation_dag()
