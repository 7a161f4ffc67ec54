"""SCC detection, condensation and topological ordering in one pass.

Runs ``TarjanSCC`` on the original graph, condenses the components into a DAG
and sorts that DAG. The vertex-level order emits the members of each
component contiguously, components in topological order, members in their
``SCCResult`` listing order.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from schedgraph.algorithms.condensation import SCCCondensation
from schedgraph.algorithms.errors import CondensationInvariantError
from schedgraph.algorithms.scc import TarjanSCC
from schedgraph.algorithms.topo import KahnTopologicalSort, TopologicalSorter
from schedgraph.algorithms.types import SCCResult
from schedgraph.graph.digraph import Graph, require_directed
from schedgraph.logging import get_logger
from schedgraph.profiling.metrics import Metrics, NullMetrics, format_ms
from schedgraph.types.base import VertexId

logger = get_logger(__name__)


class SCCTopologicalOrder:
    """Component-level and vertex-level ordering of an arbitrary digraph.

    Attributes:
        graph: The original directed graph.
        metrics: Instrumentation sink shared by all three stages.
        sorter: Topological sort strategy applied to the condensation.
    """

    def __init__(
        self,
        graph: Graph,
        metrics: Optional[Metrics] = None,
        sorter: Optional[TopologicalSorter] = None,
    ) -> None:
        require_directed(graph, "SCC topological order")
        self.graph = graph
        self.metrics: Metrics = metrics if metrics is not None else NullMetrics()
        self.sorter: TopologicalSorter = (
            sorter if sorter is not None else KahnTopologicalSort()
        )
        self._scc_result: Optional[SCCResult] = None
        self._condensation_dag: Optional[Graph] = None
        self._component_order: Optional[List[int]] = None
        self._vertex_order: Optional[List[VertexId]] = None

    def compute_order(self) -> List[VertexId]:
        """Run all stages and return the vertex-level order.

        Raises:
            CondensationInvariantError: If the condensation has no topological
                order, which means the condensation step is broken.
        """
        self.metrics.start_timing("scc_topo_total")
        try:
            scc_result = TarjanSCC(self.graph, self.metrics).find_scc()
            dag = SCCCondensation(self.graph, scc_result).build_condensation_dag()
            component_order = self.sorter.topological_sort(dag, self.metrics)
            if component_order is None:
                raise CondensationInvariantError(
                    scc_result.num_components, "topological sort found a cycle"
                )
        finally:
            self.metrics.stop_timing("scc_topo_total")

        vertex_order: List[VertexId] = []
        for component_id in component_order:
            vertex_order.extend(scc_result.component(component_id))

        self._scc_result = scc_result
        self._condensation_dag = dag
        self._component_order = component_order
        self._vertex_order = vertex_order
        logger.debug(
            f"SCC order: {self.graph.num_vertices} vertices in "
            f"{scc_result.num_components} components"
        )
        return list(vertex_order)

    @property
    def computed(self) -> bool:
        return self._vertex_order is not None

    @property
    def scc_result(self) -> Optional[SCCResult]:
        return self._scc_result

    @property
    def condensation_dag(self) -> Optional[Graph]:
        return self._condensation_dag

    @property
    def component_order(self) -> Optional[List[int]]:
        return list(self._component_order) if self._component_order is not None else None

    @property
    def vertex_order(self) -> Optional[List[VertexId]]:
        return list(self._vertex_order) if self._vertex_order is not None else None

    def to_dict(self) -> Dict[str, object]:
        if not self.computed:
            raise RuntimeError("Call compute_order() before to_dict()")
        assert self._scc_result is not None
        return {
            "components": [list(c) for c in self._scc_result.components],
            "component_order": self.component_order,
            "vertex_order": self.vertex_order,
        }

    def summary(self) -> str:
        if (
            self._scc_result is None
            or self._condensation_dag is None
            or self._component_order is None
        ):
            return "Computation not performed yet. Call compute_order() first."
        lines = [
            "=== SCC + Topological Order Summary ===",
            f"Original graph: {self.graph.num_vertices} vertices, "
            f"{self.graph.edge_count} edges",
            f"SCCs found: {self._scc_result.num_components}",
            f"Condensation DAG: {self._condensation_dag.num_vertices} vertices, "
            f"{self._condensation_dag.edge_count} edges",
            f"Component topological order: {self._component_order}",
            f"Original vertex order: {self._vertex_order}",
            f"Total computation time: {format_ms(self.metrics.get_time('scc_topo_total'))}",
        ]
        return "\n".join(lines) + "\n"
