"""Scheduling graph algorithms: SCCs, condensation, ordering, DAG paths."""

from schedgraph.algorithms.condensation import SCCCondensation, condense
from schedgraph.algorithms.dag_paths import (
    DAGPathEngine,
    critical_path,
    dag_longest_paths,
    dag_shortest_paths,
)
from schedgraph.algorithms.errors import CondensationInvariantError, NotADAGError
from schedgraph.algorithms.scc import TarjanSCC, strongly_connected_components
from schedgraph.algorithms.scc_order import SCCTopologicalOrder
from schedgraph.algorithms.topo import (
    DFSTopologicalSort,
    KahnTopologicalSort,
    TopologicalSorter,
    is_dag,
    topological_sort,
)
from schedgraph.algorithms.types import CondensationStats, PathResult, SCCResult

__all__ = [
    "CondensationInvariantError",
    "CondensationStats",
    "DAGPathEngine",
    "DFSTopologicalSort",
    "KahnTopologicalSort",
    "NotADAGError",
    "PathResult",
    "SCCCondensation",
    "SCCResult",
    "SCCTopologicalOrder",
    "TarjanSCC",
    "TopologicalSorter",
    "condense",
    "critical_path",
    "dag_longest_paths",
    "dag_shortest_paths",
    "is_dag",
    "strongly_connected_components",
    "topological_sort",
]
