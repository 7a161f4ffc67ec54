"""Sample graphs shared by the algorithm tests.

Edge labels in the diagrams are weights. Edges are added in the order
listed, which matters for tie-breaking.
"""

import pytest

from schedgraph.graph.digraph import Graph


@pytest.fixture
def diamond():
    #        [5]      [2]
    #   ┌────────►1────────┐
    #   │                  ▼
    #   0                  3
    #   │                  ▲
    #   └────────►2────────┘
    #        [3]      [4]
    g = Graph(4)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 2, 3)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 4)
    return g


@pytest.fixture
def disconnected():
    #      [3]          [2]
    #   0──────►1    2──────►3
    g = Graph(4)
    g.add_edge(0, 1, 3)
    g.add_edge(2, 3, 2)
    return g


@pytest.fixture
def triangle_cycle():
    #   0──►1──►2
    #   ▲       │
    #   └───────┘
    g = Graph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 0, 1)
    return g


@pytest.fixture
def pure_dag6():
    #        [5]       [6]       [2]
    #   0────────►1────────►4────────►5
    #   │         │[2]                ▲
    #   │[3]      ▼         [1]       │
    #   └───►2───►3───────────────────┘
    #          [4]
    g = Graph(6)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 2, 3)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 4)
    g.add_edge(1, 4, 6)
    g.add_edge(3, 5, 1)
    g.add_edge(4, 5, 2)
    return g


@pytest.fixture
def scc6():
    # {0,1,2} is a cycle; 3 -> 4 -> 5 is a chain.
    g = Graph(6)
    g.add_edge(0, 1, 2)
    g.add_edge(1, 2, 3)
    g.add_edge(2, 0, 1)
    g.add_edge(3, 4, 4)
    g.add_edge(4, 5, 2)
    return g


@pytest.fixture
def two_cluster_chain():
    # SCC {0,1,2} -> SCC {3,4} -> 5 -> 6
    g = Graph(7)
    g.add_edge(0, 1, 2)
    g.add_edge(1, 2, 3)
    g.add_edge(2, 0, 1)
    g.add_edge(3, 4, 2)
    g.add_edge(4, 3, 1)
    g.add_edge(2, 3, 4)
    g.add_edge(4, 5, 3)
    g.add_edge(5, 6, 2)
    return g


@pytest.fixture
def mixed_cycle():
    #   0 ──(10)──► 1 ──(15)──► 2
    #               ▲           │
    #               └────(5)────┘
    #   1 ──(20)──► 3 ──(25)──► 4
    #   0 ─────────(50)───────► 4
    g = Graph(5)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 2, 15)
    g.add_edge(2, 1, 5)
    g.add_edge(1, 3, 20)
    g.add_edge(3, 4, 25)
    g.add_edge(0, 4, 50)
    return g


@pytest.fixture
def workflow8():
    # Cluster {0,1,2}; chain 3 -> 4; 5 -> 6 -> 7 with shortcut 5 -> 7;
    # cross links 1 -> 3 and 4 -> 6.
    g = Graph(8)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 2, 15)
    g.add_edge(2, 0, 20)
    g.add_edge(3, 4, 25)
    g.add_edge(5, 6, 30)
    g.add_edge(6, 7, 35)
    g.add_edge(5, 7, 40)
    g.add_edge(1, 3, 12)
    g.add_edge(4, 6, 18)
    return g
