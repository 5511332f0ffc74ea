"""Tests that SimpleGraph satisfies the capability protocols."""

import pytest

from matrixgraph import (
    EdgeId,
    GraphEdgeAddable,
    GraphEdgeEndpoints,
    GraphEdgeFrom,
    GraphEdgeIndexable,
    GraphEdgeMutIndexable,
    GraphEdgeRemovable,
    GraphEdgesFrom,
    GraphEdgeTo,
    GraphNodeAddable,
    GraphNodeIndexable,
    GraphNodeMutIndexable,
    GraphNodeRemovable,
    NodeId,
    SimpleGraph,
)

ALL_PROTOCOLS = [
    GraphNodeAddable,
    GraphEdgeAddable,
    GraphNodeRemovable,
    GraphEdgeRemovable,
    GraphNodeIndexable,
    GraphNodeMutIndexable,
    GraphEdgeIndexable,
    GraphEdgeMutIndexable,
    GraphEdgeTo,
    GraphEdgeFrom,
    GraphEdgeEndpoints,
    GraphEdgesFrom,
]


@pytest.mark.parametrize("protocol", ALL_PROTOCOLS, ids=lambda p: p.__name__)
def test_simple_graph_implements(protocol: type) -> None:
    assert isinstance(SimpleGraph(), protocol)


def test_plain_object_does_not_implement() -> None:
    assert not isinstance(object(), GraphEdgesFrom)


def _out_degree(graph: GraphEdgesFrom[NodeId, EdgeId], node: NodeId) -> int:
    return len(graph.edges_from(node))


def _targets(graph: GraphEdgeEndpoints[NodeId, EdgeId], edges: list[EdgeId]) -> list[NodeId]:
    return [graph.edge_to(e) for e in edges]


def test_generic_helpers_accept_simple_graph() -> None:
    graph: SimpleGraph[str, int] = SimpleGraph()
    a = graph.add_node("a")
    b = graph.add_node("b")
    c = graph.add_node("c")
    graph.add_edge(a, b, 1)
    graph.add_edge(a, c, 2)

    assert _out_degree(graph, a) == 2
    assert _targets(graph, graph.edges_from(a)) == [b, c]
