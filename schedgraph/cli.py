"""Command-line interface for SchedGraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema
import yaml

from schedgraph.algorithms.condensation import SCCCondensation
from schedgraph.algorithms.dag_paths import DAGPathEngine
from schedgraph.algorithms.scc import TarjanSCC
from schedgraph.algorithms.scc_order import SCCTopologicalOrder
from schedgraph.algorithms.topo import KahnTopologicalSort
from schedgraph.graph.digraph import Graph
from schedgraph.graph.io import GraphRecord, load_graph_file
from schedgraph.logging import get_logger, level_from_flags, set_global_log_level
from schedgraph.profiling.metrics import MetricsRecorder
from schedgraph.types.base import PathMode, VertexId

logger = get_logger(__name__)


def _load(path: Path) -> Tuple[GraphRecord, Graph]:
    logger.info(f"Loading graph from: {path}")
    record = load_graph_file(path)
    graph = record.to_graph()
    logger.debug(f"Loaded {record}")
    return record, graph


def _to_dag(graph: Graph, metrics: MetricsRecorder) -> Tuple[Graph, Optional[List[int]]]:
    """Return ``graph`` itself if acyclic, else its condensation and vertex mapping."""
    if KahnTopologicalSort().is_dag(graph):
        return graph, None
    scc = TarjanSCC(graph, metrics).find_scc()
    logger.info(
        f"Graph has cycles; analysing condensation of {scc.num_components} components"
    )
    condensation = SCCCondensation(graph, scc)
    return condensation.build_condensation_dag(), condensation.vertex_to_component_mapping()


def _emit(payload: Dict[str, Any], text: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, indent=2))
    else:
        print(text, end="" if text.endswith("\n") else "\n")


def _inspect(path: Path, show_metrics: bool) -> None:
    record, graph = _load(path)
    metrics = MetricsRecorder()
    scc = TarjanSCC(graph, metrics).find_scc()
    condensation = SCCCondensation(graph, scc)

    print(str(record))
    print(str(graph), end="")
    print(str(scc), end="")
    print(condensation.condensation_stats_text(), end="")
    cyclic = scc.nontrivial_components()
    if cyclic:
        print(f"Cyclic clusters: {[list(scc.component(c)) for c in cyclic]}")
    else:
        print("Graph is acyclic")
    if show_metrics:
        print(metrics.summary(), end="")


def _order(path: Path, as_json: bool, show_metrics: bool) -> None:
    _, graph = _load(path)
    metrics = MetricsRecorder()
    pipeline = SCCTopologicalOrder(graph, metrics)
    pipeline.compute_order()
    _emit(pipeline.to_dict(), pipeline.summary(), as_json)
    if show_metrics and not as_json:
        print(metrics.summary(), end="")


def _paths(
    path: Path,
    source: Optional[VertexId],
    mode: PathMode,
    as_json: bool,
    show_metrics: bool,
) -> None:
    record, graph = _load(path)
    if source is None:
        source = record.source
    if source is None:
        raise ValueError("No source vertex: pass --source or set 'source' in the record")
    if not graph.has_vertex(source):
        raise ValueError(f"Invalid source vertex: {source}")

    metrics = MetricsRecorder()
    dag, mapping = _to_dag(graph, metrics)
    dag_source = mapping[source] if mapping is not None else source
    result = DAGPathEngine(dag, metrics).paths(dag_source, mode)

    payload = result.to_dict()
    payload["condensed"] = mapping is not None
    text = str(result)
    if mapping is not None:
        text = f"(vertices are SCC components; source {source} -> component {dag_source})\n{text}"
    _emit(payload, text, as_json)
    if show_metrics and not as_json:
        print(metrics.summary(), end="")


def _critical(path: Path, as_json: bool, show_metrics: bool) -> None:
    _, graph = _load(path)
    metrics = MetricsRecorder()
    dag, mapping = _to_dag(graph, metrics)
    engine = DAGPathEngine(dag, metrics)
    result = engine.find_critical_path()

    if result is None:
        _emit({"critical_path": None, "critical_path_length": 0.0}, "Graph is empty", as_json)
        return
    payload: Dict[str, Any] = {
        "source": result.source,
        "critical_path": result.critical_path(),
        "critical_path_length": result.critical_path_length(),
        "condensed": mapping is not None,
    }
    text = (
        f"Critical path: {payload['critical_path']} "
        f"(length: {payload['critical_path_length']:.2f})\n"
    )
    if mapping is not None:
        members = [
            [v for v, cid in enumerate(mapping) if cid == component]
            for component in payload["critical_path"]
        ]
        payload["critical_path_members"] = members
        text = (
            "(vertices are SCC components)\n"
            f"{text}"
            f"Component members: {members}\n"
        )
    _emit(payload, text, as_json)
    if show_metrics and not as_json:
        print(engine.metrics_summary(), end="")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``schedgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="schedgraph",
        description="Analyze task dependency graphs: cycles, ordering, critical paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,order,paths,critical}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show graph structure, SCCs and condensation statistics"
    )
    order_parser = subparsers.add_parser(
        "order", help="SCC-aware topological order of components and vertices"
    )
    paths_parser = subparsers.add_parser(
        "paths", help="Shortest or longest paths from a source vertex"
    )
    critical_parser = subparsers.add_parser(
        "critical", help="Critical (longest) path over all sources"
    )

    for p in (inspect_parser, order_parser, paths_parser, critical_parser):
        p.add_argument("graph", type=Path, help="Path to graph record (JSON or YAML)")
        p.add_argument(
            "--metrics",
            action="store_true",
            help="Print instrumentation counters and timings",
        )
    for p in (order_parser, paths_parser, critical_parser):
        p.add_argument("--json", action="store_true", help="Print JSON instead of text")

    paths_parser.add_argument(
        "--source",
        "-s",
        type=int,
        default=None,
        help="Source vertex (default: the record's 'source')",
    )
    paths_parser.add_argument(
        "--mode",
        "-m",
        default="shortest",
        choices=["shortest", "longest"],
        help="Path mode (default: shortest)",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_from_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        if args.command == "inspect":
            _inspect(args.graph, args.metrics)
        elif args.command == "order":
            _order(args.graph, args.json, args.metrics)
        elif args.command == "paths":
            _paths(
                args.graph,
                args.source,
                PathMode.from_string(args.mode),
                args.json,
                args.metrics,
            )
        elif args.command == "critical":
            _critical(args.graph, args.json, args.metrics)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {args.graph}")
        print(f"ERROR: Graph file not found: {args.graph}")
        sys.exit(1)
    except (ValueError, jsonschema.ValidationError, yaml.YAMLError) as e:
        logger.error(f"Failed to analyze graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to analyze graph: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
