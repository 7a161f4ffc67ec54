"""NetworkX graph conversion utilities.

Converts between NetworkX graphs (arbitrary hashable node names) and the
dense-index ``Graph`` used by the scheduling algorithms.

Example:
    >>> import networkx as nx
    >>> from schedgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("design", "build", weight=5.0)
    >>> G.add_edge("build", "ship", weight=2.0)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["build"]
    0
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Sequence, Tuple, Union

from schedgraph.graph.digraph import Graph
from schedgraph.types.base import VertexId

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, vertices: Optional[Sequence[VertexId]]) -> Optional[List[Hashable]]:
        """Translate a vertex sequence (e.g. a path) to node names."""
        if vertices is None:
            return None
        return [self.to_name[v] for v in vertices]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a ``Graph``.

    Directed NetworkX graphs become directed graphs; ``Graph``/``MultiGraph``
    become undirected ones (which the scheduling algorithms reject). Nodes
    are indexed in ``str`` sort order so conversion is deterministic, and
    edges are added in NetworkX iteration order.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        ``(graph, node_map)``.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)
    graph = Graph(len(node_names), directed=G.is_directed())

    for u, v, data in G.edges(data=True):
        graph.add_edge(
            node_map.to_index[u],
            node_map.to_index[v],
            float(data.get(weight_attr, default_weight)),
        )
    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> "nx.MultiDiGraph":
    """Convert a directed ``Graph`` back to a NetworkX MultiDiGraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap restoring original names; vertices are
            labeled by index otherwise.
        weight_attr: Edge attribute name for weights.

    Raises:
        ValueError: If ``graph`` is undirected.
    """
    import networkx as nx

    if not graph.directed:
        raise ValueError("to_networkx supports directed graphs only")

    def name(vertex: VertexId) -> Hashable:
        if node_map is None:
            return vertex
        return node_map.to_name.get(vertex, vertex)

    G = nx.MultiDiGraph()
    G.add_nodes_from(name(v) for v in graph.vertices())
    for edge in graph.edges():
        G.add_edge(name(edge.src), name(edge.dst), **{weight_attr: edge.weight})
    return G
