"""Result containers for SCC detection, condensation and DAG paths.

All containers are immutable after construction. ``PathResult`` holds numpy
arrays internally and hands out copies only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from schedgraph.config import ANALYSIS_CONFIG
from schedgraph.types.base import NO_PREDECESSOR, PathMode, VertexId


class SCCResult:
    """Partition of a graph's vertices into strongly connected components.

    Component ids follow a topological order of the condensation: for every
    original edge ``u -> v`` with ``u`` and ``v`` in different components,
    ``component_id(u) < component_id(v)``.

    Attributes:
        components: Members of each component, indexed by component id. The
            order of members within a component is the order in which they
            left the DFS stack.
    """

    __slots__ = ("_components", "_component_id")

    def __init__(
        self,
        components: Sequence[Sequence[VertexId]],
        component_id: Sequence[int],
    ) -> None:
        self._components: Tuple[Tuple[VertexId, ...], ...] = tuple(
            tuple(int(v) for v in comp) for comp in components
        )
        self._component_id: Tuple[int, ...] = tuple(int(c) for c in component_id)

    @property
    def components(self) -> Tuple[Tuple[VertexId, ...], ...]:
        return self._components

    @property
    def num_components(self) -> int:
        return len(self._components)

    @property
    def num_vertices(self) -> int:
        return len(self._component_id)

    def component_id(self, vertex: VertexId) -> int:
        """Component id of ``vertex``.

        Raises:
            ValueError: If ``vertex`` is out of range.
        """
        if vertex < 0 or vertex >= len(self._component_id):
            raise ValueError(
                f"Vertex {vertex} is out of range [0, {len(self._component_id)})"
            )
        return self._component_id[vertex]

    def component(self, component_id: int) -> Tuple[VertexId, ...]:
        """Members of component ``component_id``."""
        self._validate_component(component_id)
        return self._components[component_id]

    def component_size(self, component_id: int) -> int:
        self._validate_component(component_id)
        return len(self._components[component_id])

    def in_same_component(self, u: VertexId, v: VertexId) -> bool:
        return self.component_id(u) == self.component_id(v)

    def vertex_to_component(self) -> List[int]:
        """Component id of every vertex, indexed by vertex."""
        return list(self._component_id)

    def nontrivial_components(self) -> List[int]:
        """Ids of components with more than one vertex (the cyclic clusters)."""
        return [cid for cid, comp in enumerate(self._components) if len(comp) > 1]

    def _validate_component(self, component_id: int) -> None:
        if component_id < 0 or component_id >= len(self._components):
            raise ValueError(f"Invalid component ID: {component_id}")

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self):
        return iter(self._components)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SCCResult):
            return NotImplemented
        return (
            self._components == other._components
            and self._component_id == other._component_id
        )

    def __hash__(self) -> int:
        return hash((self._components, self._component_id))

    def __repr__(self) -> str:
        return (
            f"SCCResult(components={self.num_components}, "
            f"vertices={self.num_vertices})"
        )

    def __str__(self) -> str:
        lines = [f"SCC Result: {self.num_components} components"]
        for cid, comp in enumerate(self._components):
            lines.append(f"Component {cid} (size {len(comp)}): {list(comp)}")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class CondensationStats:
    """Summary of an SCC condensation.

    Attributes:
        original_vertices: Vertex count of the original graph.
        original_edges: Edge count of the original graph.
        components: Vertex count of the condensation (number of SCCs).
        condensed_edges: Edge count of the condensation.
        compression_ratio: ``components / original_vertices`` as a percentage;
            100.0 for an empty graph.
        component_sizes: Size of each component, indexed by component id.
    """

    original_vertices: int
    original_edges: int
    components: int
    condensed_edges: int
    compression_ratio: float
    component_sizes: Tuple[int, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "original_vertices": self.original_vertices,
            "original_edges": self.original_edges,
            "components": self.components,
            "condensed_edges": self.condensed_edges,
            "compression_ratio": self.compression_ratio,
            "component_sizes": list(self.component_sizes),
        }


class PathResult:
    """Distances and predecessor links from one source in a DAG.

    ``distances[source] == 0``. Unreached vertices hold ``+inf`` (shortest
    mode) or ``-inf`` (longest mode) and ``NO_PREDECESSOR``. For every other
    reached vertex ``v``, ``predecessors[v]`` is the vertex whose edge set
    ``distances[v]``.

    Arrays are copied on construction and on every accessor that returns
    them.
    """

    __slots__ = ("_distances", "_predecessors", "_source", "_mode")

    def __init__(
        self,
        distances: Iterable[float],
        predecessors: Iterable[int],
        source: VertexId,
        mode: PathMode,
    ) -> None:
        dist = np.array(list(distances), dtype=np.float64)
        pred = np.array(list(predecessors), dtype=np.int64)
        if dist.shape != pred.shape:
            raise ValueError(
                f"distances and predecessors differ in length: "
                f"{dist.shape[0]} != {pred.shape[0]}"
            )
        if source < 0 or source >= dist.shape[0]:
            raise ValueError(f"Invalid source vertex: {source}")
        dist.setflags(write=False)
        pred.setflags(write=False)
        self._distances = dist
        self._predecessors = pred
        self._source = int(source)
        self._mode = PathMode(mode)

    #
    # Scalar accessors
    #
    @property
    def source(self) -> VertexId:
        return self._source

    @property
    def mode(self) -> PathMode:
        return self._mode

    @property
    def is_longest_path(self) -> bool:
        return self._mode is PathMode.MAXIMIZE

    @property
    def num_vertices(self) -> int:
        return int(self._distances.shape[0])

    def distance(self, vertex: VertexId) -> float:
        """Distance from the source to ``vertex`` (an infinity if unreached)."""
        self._validate_vertex(vertex)
        return float(self._distances[vertex])

    def predecessor(self, vertex: VertexId) -> int:
        """Predecessor of ``vertex`` on its best path, or ``NO_PREDECESSOR``."""
        self._validate_vertex(vertex)
        return int(self._predecessors[vertex])

    def is_reachable(self, vertex: VertexId) -> bool:
        self._validate_vertex(vertex)
        return bool(np.isfinite(self._distances[vertex]))

    #
    # Array accessors (copies)
    #
    def distances(self) -> np.ndarray:
        """Copy of the distance array."""
        return self._distances.copy()

    def predecessors(self) -> np.ndarray:
        """Copy of the predecessor array."""
        return self._predecessors.copy()

    def reachable_vertices(self) -> List[VertexId]:
        return [int(v) for v in np.flatnonzero(np.isfinite(self._distances))]

    #
    # Path reconstruction
    #
    def path(self, target: VertexId) -> Optional[List[VertexId]]:
        """Vertices from the source to ``target``, or None if unreachable."""
        if not self.is_reachable(target):
            return None
        path: List[VertexId] = []
        current = int(target)
        while current != NO_PREDECESSOR:
            path.append(current)
            current = int(self._predecessors[current])
        path.reverse()
        return path

    def critical_path_target(self) -> Optional[VertexId]:
        """Vertex with the largest finite distance (first one on ties).

        Raises:
            ValueError: If this is a shortest-path result.
        """
        if not self.is_longest_path:
            raise ValueError("Critical path only available for longest path results")
        target: Optional[VertexId] = None
        best = float("-inf")
        for vertex in range(self.num_vertices):
            value = float(self._distances[vertex])
            if np.isfinite(value) and value > best:
                best = value
                target = vertex
        return target

    def critical_path(self) -> Optional[List[VertexId]]:
        target = self.critical_path_target()
        return self.path(target) if target is not None else None

    def critical_path_length(self) -> float:
        target = self.critical_path_target()
        return float(self._distances[target]) if target is not None else 0.0

    def to_dict(self) -> Dict[str, object]:
        """JSON-friendly view; unreached distances become None."""
        vertices = []
        for vertex in range(self.num_vertices):
            reachable = self.is_reachable(vertex)
            vertices.append(
                {
                    "vertex": vertex,
                    "distance": self.distance(vertex) if reachable else None,
                    "path": self.path(vertex),
                }
            )
        data: Dict[str, object] = {
            "source": self._source,
            "mode": self._mode.name.lower(),
            "vertices": vertices,
        }
        if self.is_longest_path:
            data["critical_path"] = self.critical_path()
            data["critical_path_length"] = self.critical_path_length()
        return data

    def _validate_vertex(self, vertex: VertexId) -> None:
        if vertex < 0 or vertex >= self._distances.shape[0]:
            raise ValueError(
                f"Vertex {vertex} is out of range [0, {self._distances.shape[0]})"
            )

    def __repr__(self) -> str:
        return (
            f"PathResult(source={self._source}, mode={self._mode.name}, "
            f"vertices={self.num_vertices})"
        )

    def __str__(self) -> str:
        fmt = ANALYSIS_CONFIG.format_distance
        kind = "Longest" if self.is_longest_path else "Shortest"
        lines = [f"=== {kind} Path Result (source: {self._source}) ==="]
        for vertex in range(self.num_vertices):
            if self.is_reachable(vertex):
                lines.append(
                    f"Vertex {vertex}: distance = {fmt(self.distance(vertex))}, "
                    f"path = {self.path(vertex)}"
                )
            else:
                lines.append(f"Vertex {vertex}: unreachable")
        if self.is_longest_path:
            critical = self.critical_path()
            if critical is not None:
                lines.append(
                    f"Critical path: {critical} "
                    f"(length: {fmt(self.critical_path_length())})"
                )
        return "\n".join(lines) + "\n"
