"""SchedGraph: dependency-graph analysis for task scheduling.

SchedGraph detects cyclic dependency clusters (strongly connected
components), condenses them into a DAG, linearizes tasks into an execution
order, and computes shortest and longest (critical) cumulative-duration
paths.

Primary API:
    Graph - dense-index weighted directed graph
    TarjanSCC, SCCCondensation - cycle clusters and their condensation
    KahnTopologicalSort, SCCTopologicalOrder - execution order
    DAGPathEngine, PathResult - shortest/longest/critical paths
    MetricsRecorder, NullMetrics - instrumentation sinks

Example:
    from schedgraph import DAGPathEngine, Graph

    g = Graph(4)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 2, 3)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 4)

    result = DAGPathEngine(g).longest_paths(0)
    result.critical_path()         # [0, 1, 3]
    result.critical_path_length()  # 7.0
"""

from __future__ import annotations

from schedgraph import logging
from schedgraph._version import __version__
from schedgraph.algorithms import (
    CondensationInvariantError,
    CondensationStats,
    DAGPathEngine,
    DFSTopologicalSort,
    KahnTopologicalSort,
    NotADAGError,
    PathResult,
    SCCCondensation,
    SCCResult,
    SCCTopologicalOrder,
    TarjanSCC,
    TopologicalSorter,
)
from schedgraph.config import ANALYSIS_CONFIG, AnalysisConfig
from schedgraph.graph.digraph import Edge, Graph
from schedgraph.graph.io import GraphRecord, load_graph, load_graph_file, load_graph_record
from schedgraph.lib.nx import NodeMap, from_networkx, to_networkx
from schedgraph.profiling.metrics import Metrics, MetricsRecorder, NullMetrics
from schedgraph.types.base import NO_PREDECESSOR, PathMode

__all__ = [
    # Version
    "__version__",
    # Graph model
    "Edge",
    "Graph",
    "GraphRecord",
    "load_graph",
    "load_graph_file",
    "load_graph_record",
    # Algorithms
    "TarjanSCC",
    "SCCResult",
    "SCCCondensation",
    "CondensationStats",
    "TopologicalSorter",
    "KahnTopologicalSort",
    "DFSTopologicalSort",
    "SCCTopologicalOrder",
    "DAGPathEngine",
    "PathResult",
    "PathMode",
    "NO_PREDECESSOR",
    # Errors
    "NotADAGError",
    "CondensationInvariantError",
    # Instrumentation
    "Metrics",
    "MetricsRecorder",
    "NullMetrics",
    # Configuration
    "AnalysisConfig",
    "ANALYSIS_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
