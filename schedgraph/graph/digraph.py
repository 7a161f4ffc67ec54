"""Dense-index weighted graph backed by adjacency lists.

Vertices are the integers ``0 .. num_vertices - 1``. Each vertex owns an
ordered list of outgoing ``Edge`` records; insertion order is preserved and
drives tie-breaking in every downstream algorithm. Parallel edges are allowed.

An undirected mode mirrors every edge, but the scheduling algorithms in
``schedgraph.algorithms`` accept directed graphs only.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from schedgraph.types.base import Cost, VertexId

#: ``(src, dst, weight)`` triple used for bulk construction.
EdgeTriple = Tuple[VertexId, VertexId, Cost]


@dataclass(frozen=True, slots=True)
class Edge:
    """A weighted directed edge.

    Attributes:
        src: Source vertex index.
        dst: Target vertex index.
        weight: Edge weight (duration/cost); defaults to 1.0.
    """

    src: VertexId
    dst: VertexId
    weight: float = 1.0

    def __str__(self) -> str:
        return f"({self.src} -> {self.dst}, w={self.weight:.2f})"


class Graph:
    """Weighted graph over dense integer vertices.

    Attributes:
        num_vertices: Number of vertices; fixed at construction.
        directed: When False, ``add_edge`` also stores the mirrored edge.
    """

    __slots__ = ("_num_vertices", "_directed", "_adj")

    def __init__(self, num_vertices: int, directed: bool = True) -> None:
        """Create a graph with ``num_vertices`` isolated vertices.

        Raises:
            ValueError: If ``num_vertices`` is negative or not an integer.
        """
        count = _as_int(num_vertices, "Number of vertices")
        if count < 0:
            raise ValueError(
                f"Number of vertices must be non-negative, got {num_vertices}"
            )
        self._num_vertices = count
        self._directed = bool(directed)
        self._adj: List[List[Edge]] = [[] for _ in range(self._num_vertices)]

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Sequence[EdgeTriple],
        directed: bool = True,
    ) -> Graph:
        """Build a graph from ``(src, dst, weight)`` triples in order."""
        graph = cls(num_vertices, directed=directed)
        for src, dst, weight in edges:
            graph.add_edge(src, dst, weight)
        return graph

    #
    # Mutation
    #
    def add_edge(self, src: VertexId, dst: VertexId, weight: Cost = 1.0) -> None:
        """Append an edge ``src -> dst`` to ``src``'s adjacency list.

        In undirected mode the edge ``dst -> src`` is appended as well.

        Raises:
            ValueError: If either endpoint is outside ``[0, num_vertices)``.
        """
        src = self._validate_vertex(src)
        dst = self._validate_vertex(dst)
        w = float(weight)
        self._adj[src].append(Edge(src, dst, w))
        if not self._directed:
            self._adj[dst].append(Edge(dst, src, w))

    #
    # Queries
    #
    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_count(self) -> int:
        """Number of edges; stored edges are halved for undirected graphs."""
        count = sum(len(edges) for edges in self._adj)
        return count if self._directed else count // 2

    def edges_of(self, vertex: VertexId) -> Tuple[Edge, ...]:
        """Outgoing edges of ``vertex`` in insertion order.

        Raises:
            ValueError: If ``vertex`` is out of range.
        """
        return tuple(self._adj[self._validate_vertex(vertex)])

    def successors(self, vertex: VertexId) -> List[VertexId]:
        """Targets of ``vertex``'s outgoing edges, duplicates included."""
        return [edge.dst for edge in self.edges_of(vertex)]

    def out_degree(self, vertex: VertexId) -> int:
        return len(self._adj[self._validate_vertex(vertex)])

    def in_degrees(self) -> List[int]:
        """In-degree of every vertex, counting parallel edges."""
        in_deg = [0] * self._num_vertices
        for edges in self._adj:
            for edge in edges:
                in_deg[edge.dst] += 1
        return in_deg

    def vertices(self) -> range:
        return range(self._num_vertices)

    def edges(self) -> Iterator[Edge]:
        """Iterate all stored edges by source vertex, then insertion order."""
        for edges in self._adj:
            yield from edges

    def has_vertex(self, vertex: VertexId) -> bool:
        return 0 <= vertex < self._num_vertices

    def _validate_vertex(self, vertex: VertexId) -> int:
        index = as_vertex_index(vertex)
        if index < 0 or index >= self._num_vertices:
            raise ValueError(
                f"Vertex {index} is out of range [0, {self._num_vertices})"
            )
        return index

    #
    # Dunder
    #
    def __len__(self) -> int:
        return self._num_vertices

    def __contains__(self, vertex: object) -> bool:
        try:
            return self.has_vertex(as_vertex_index(vertex))
        except ValueError:
            return False

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"Graph(vertices={self._num_vertices}, edges={self.edge_count}, {kind})"
        )

    def __str__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        lines = [
            f"Graph: {self._num_vertices} vertices, {self.edge_count} edges, {kind}"
        ]
        for vertex, edges in enumerate(self._adj):
            rendered = ", ".join(str(edge) for edge in edges)
            lines.append(f"Vertex {vertex}: [{rendered}]")
        return "\n".join(lines) + "\n"


def require_directed(graph: Graph, what: str) -> None:
    """Raise ``ValueError`` unless ``graph`` is directed.

    Args:
        graph: Graph passed to a directed-only algorithm.
        what: Human-readable algorithm name for the error message.
    """
    if not graph.directed:
        raise ValueError(f"{what} requires a directed graph")


def as_vertex_index(value: object) -> int:
    """Return ``value`` as a plain ``int`` vertex index.

    Any integer type is accepted, numpy integers included; ``bool`` is not.

    Raises:
        ValueError: If ``value`` is not an integer.
    """
    return _as_int(value, "Vertex index")


def _as_int(value: object, what: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"{what} must be an integer, got {value!r}") from None
