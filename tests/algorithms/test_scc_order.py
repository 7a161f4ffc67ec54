import pytest

from schedgraph.algorithms.errors import CondensationInvariantError
from schedgraph.algorithms.scc_order import SCCTopologicalOrder
from schedgraph.algorithms.topo import DFSTopologicalSort
from schedgraph.graph.digraph import Graph


class _BrokenSorter:
    def topological_sort(self, graph, metrics=None):
        return None

    def is_dag(self, graph):
        return False


def _assert_respects_cross_edges(graph, pipeline, order):
    scc = pipeline.scc_result
    position = {v: i for i, v in enumerate(order)}
    for edge in graph.edges():
        if not scc.in_same_component(edge.src, edge.dst):
            assert position[edge.src] < position[edge.dst]


class TestSCCTopologicalOrder:
    def test_workflow(self, workflow8, metrics):
        pipeline = SCCTopologicalOrder(workflow8, metrics)
        order = pipeline.compute_order()

        assert order == [5, 2, 1, 0, 3, 4, 6, 7]
        assert pipeline.component_order == [0, 1, 2, 3, 4, 5]
        assert pipeline.scc_result.num_components == 6
        assert pipeline.condensation_dag.num_vertices == 6
        assert pipeline.condensation_dag.edge_count == 5
        _assert_respects_cross_edges(workflow8, pipeline, order)

    def test_two_clusters(self, two_cluster_chain):
        pipeline = SCCTopologicalOrder(two_cluster_chain)
        assert pipeline.compute_order() == [2, 1, 0, 4, 3, 5, 6]
        assert pipeline.component_order == [0, 1, 2, 3]

    def test_members_are_contiguous(self, mixed_cycle):
        pipeline = SCCTopologicalOrder(mixed_cycle)
        order = pipeline.compute_order()
        assert order == [0, 2, 1, 3, 4]
        _assert_respects_cross_edges(mixed_cycle, pipeline, order)

    def test_pure_dag(self, pure_dag6):
        pipeline = SCCTopologicalOrder(pure_dag6)
        order = pipeline.compute_order()
        assert sorted(order) == list(range(6))
        _assert_respects_cross_edges(pure_dag6, pipeline, order)

    def test_single_cycle(self, triangle_cycle):
        pipeline = SCCTopologicalOrder(triangle_cycle)
        assert sorted(pipeline.compute_order()) == [0, 1, 2]
        assert pipeline.component_order == [0]

    def test_empty_graph(self):
        pipeline = SCCTopologicalOrder(Graph(0))
        assert pipeline.compute_order() == []
        assert pipeline.computed

    def test_alternate_sorter(self, workflow8):
        pipeline = SCCTopologicalOrder(workflow8, sorter=DFSTopologicalSort())
        order = pipeline.compute_order()
        assert sorted(order) == list(range(8))
        _assert_respects_cross_edges(workflow8, pipeline, order)

    def test_broken_sorter_raises(self, workflow8, metrics):
        pipeline = SCCTopologicalOrder(workflow8, metrics, sorter=_BrokenSorter())
        with pytest.raises(CondensationInvariantError, match="6 component"):
            pipeline.compute_order()
        assert not pipeline.computed
        assert "scc_topo_total" in metrics.timings()

    def test_returned_order_is_a_copy(self, workflow8):
        pipeline = SCCTopologicalOrder(workflow8)
        order = pipeline.compute_order()
        order.clear()
        pipeline.vertex_order.clear()
        assert pipeline.vertex_order == [5, 2, 1, 0, 3, 4, 6, 7]

    def test_rejects_undirected_graph(self):
        with pytest.raises(ValueError, match="requires a directed graph"):
            SCCTopologicalOrder(Graph(3, directed=False))


class TestSCCTopologicalOrderReporting:
    def test_properties_before_compute(self, workflow8):
        pipeline = SCCTopologicalOrder(workflow8)
        assert not pipeline.computed
        assert pipeline.scc_result is None
        assert pipeline.condensation_dag is None
        assert pipeline.component_order is None
        assert pipeline.vertex_order is None
        assert pipeline.summary() == (
            "Computation not performed yet. Call compute_order() first."
        )
        with pytest.raises(RuntimeError):
            pipeline.to_dict()

    def test_summary(self, two_cluster_chain):
        pipeline = SCCTopologicalOrder(two_cluster_chain)
        pipeline.compute_order()
        text = pipeline.summary()
        assert text.startswith("=== SCC + Topological Order Summary ===")
        assert "Original graph: 7 vertices, 8 edges" in text
        assert "SCCs found: 4" in text
        assert "Condensation DAG: 4 vertices, 3 edges" in text
        assert "Component topological order: [0, 1, 2, 3]" in text
        assert "Original vertex order: [2, 1, 0, 4, 3, 5, 6]" in text

    def test_to_dict(self, two_cluster_chain):
        pipeline = SCCTopologicalOrder(two_cluster_chain)
        pipeline.compute_order()
        assert pipeline.to_dict() == {
            "components": [[2, 1, 0], [4, 3], [5], [6]],
            "component_order": [0, 1, 2, 3],
            "vertex_order": [2, 1, 0, 4, 3, 5, 6],
        }
