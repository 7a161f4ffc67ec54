"""Graph primitives and helpers.

This package provides the dense-index weighted ``Graph`` and the ``io``
module that loads graph records from JSON/YAML.
"""

from schedgraph.graph.digraph import Edge, Graph, as_vertex_index, require_directed

__all__ = ["Edge", "Graph", "as_vertex_index", "require_directed"]
