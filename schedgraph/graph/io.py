"""Graph records: loading, validation and conversion to ``Graph``.

A record is a mapping with the keys below; JSON and YAML are both accepted
because ``yaml.safe_load`` parses JSON documents as well::

    {
      "directed": true,          # optional, default true
      "n": 4,                    # vertex count
      "edges": [{"u": 0, "v": 1, "w": 5.0}, ...],   # "w" optional
      "source": 0,               # optional source vertex for path analysis
      "weight_model": "edge"     # optional, informational
    }

Records are validated against the packaged JSON schema
``schedgraph/schemas/graph.json``. Edge endpoints outside ``[0, n)`` are
rejected by ``Graph.add_edge`` when the record is converted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from schedgraph.config import ANALYSIS_CONFIG
from schedgraph.graph.digraph import Graph
from schedgraph.logging import get_logger
from schedgraph.types.base import VertexId

logger = get_logger(__name__)


@dataclass(frozen=True)
class EdgeRecord:
    """One ``{"u", "v", "w"}`` entry of a graph record."""

    u: int
    v: int
    w: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {"u": self.u, "v": self.v, "w": self.w}


@dataclass
class GraphRecord:
    """External description of a task graph.

    Attributes:
        num_vertices: Vertex count ("n").
        edges: Edge records in file order.
        directed: Directed flag; algorithms require True.
        source: Optional source vertex for path analysis.
        weight_model: Free-form tag describing what weights mean.
    """

    num_vertices: int
    edges: List[EdgeRecord] = field(default_factory=list)
    directed: bool = True
    source: Optional[VertexId] = None
    weight_model: str = "edge"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GraphRecord:
        """Validate ``data`` against the graph schema and build a record.

        Raises:
            jsonschema.ValidationError: If ``data`` does not match the schema.
            ValueError: If ``source`` is outside ``[0, n)``.
        """
        jsonschema.validate(data, _load_schema())

        n = int(data["n"])
        default_w = ANALYSIS_CONFIG.default_weight
        edges = [
            EdgeRecord(int(e["u"]), int(e["v"]), float(e.get("w", default_w)))
            for e in data.get("edges") or []
        ]
        source = data.get("source")
        if source is not None and not 0 <= source < n:
            raise ValueError(f"Source vertex {source} is out of range [0, {n})")

        return cls(
            num_vertices=n,
            edges=edges,
            directed=bool(data.get("directed", True)),
            source=source,
            weight_model=str(data.get("weight_model", "edge")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directed": self.directed,
            "n": self.num_vertices,
            "edges": [e.to_dict() for e in self.edges],
            "source": self.source,
            "weight_model": self.weight_model,
        }

    def to_graph(self) -> Graph:
        """Build a ``Graph``; fails on the first out-of-range endpoint.

        Raises:
            ValueError: If an edge endpoint is outside ``[0, n)``.
        """
        graph = Graph(self.num_vertices, directed=self.directed)
        for position, edge in enumerate(self.edges):
            try:
                graph.add_edge(edge.u, edge.v, edge.w)
            except ValueError as exc:
                raise ValueError(f"Invalid edge #{position} ({edge.u} -> {edge.v}): {exc}") from exc
        return graph

    def __str__(self) -> str:
        return (
            f"GraphRecord(vertices={self.num_vertices}, edges={len(self.edges)}, "
            f"directed={self.directed}, source={self.source}, "
            f"weight_model={self.weight_model})"
        )


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("schedgraph.schemas")
        .joinpath("graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_graph_record(text: str) -> GraphRecord:
    """Parse and validate a JSON or YAML graph record.

    Raises:
        yaml.YAMLError: If ``text`` is not parseable.
        ValueError: If the document is not a mapping or has a bad source.
        jsonschema.ValidationError: If the mapping does not match the schema.
    """
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("The provided graph record must map to a dictionary at top-level.")
    # Early shape check gives a clearer message than the schema error
    if "edges" in data and data["edges"] is not None and not isinstance(data["edges"], list):
        raise ValueError("'edges' must be a list")
    return GraphRecord.from_dict(data)


def load_graph_file(path: Union[str, Path]) -> GraphRecord:
    """Read a graph record from ``path`` (JSON or YAML)."""
    path = Path(path)
    logger.debug(f"Loading graph record from {path}")
    return load_graph_record(path.read_text(encoding="utf-8"))


def load_graph(path: Union[str, Path]) -> Graph:
    """Read a graph record from ``path`` and convert it to a ``Graph``."""
    return load_graph_file(path).to_graph()


def save_graph_record(record: GraphRecord, path: Union[str, Path]) -> None:
    """Write ``record`` to ``path`` as pretty-printed JSON."""
    Path(path).write_text(json.dumps(record.to_dict(), indent=2) + "\n", encoding="utf-8")


def graph_to_record(graph: Graph, source: Optional[VertexId] = None) -> GraphRecord:
    """Describe ``graph`` as a record.

    Undirected graphs store each edge twice; only the first stored copy of
    each mirrored pair is emitted so that ``to_graph()`` reproduces the graph.
    """
    edges: List[EdgeRecord] = []
    if graph.directed:
        edges = [EdgeRecord(e.src, e.dst, e.weight) for e in graph.edges()]
    else:
        pending: Dict[tuple, int] = {}
        for e in graph.edges():
            mirror = (e.dst, e.src, e.weight)
            if pending.get(mirror, 0) > 0:
                pending[mirror] -= 1
                continue
            key = (e.src, e.dst, e.weight)
            pending[key] = pending.get(key, 0) + 1
            edges.append(EdgeRecord(e.src, e.dst, e.weight))
    return GraphRecord(
        num_vertices=graph.num_vertices,
        edges=edges,
        directed=graph.directed,
        source=source,
    )
