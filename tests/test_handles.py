"""Tests for node and edge handles."""

import dataclasses

import pytest

from matrixgraph import EdgeId, NodeId, SimpleGraph


class TestHandles:
    def test_handles_are_hashable(self) -> None:
        graph: SimpleGraph[str, int] = SimpleGraph()
        a = graph.add_node("a")
        b = graph.add_node("b")
        e = graph.add_edge(a, b, 1)

        assert {a: "a", b: "b"}[a] == "a"
        assert e in {graph.add_edge(a, b, 2)}

    def test_handles_are_frozen(self) -> None:
        node = NodeId(0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            node._index = 1  # type: ignore[misc]  # noqa: SLF001

    def test_node_and_edge_handles_never_equal(self) -> None:
        assert NodeId(0) != EdgeId(0, 0)

    def test_repr(self) -> None:
        assert repr(NodeId(2)) == "NodeId(2)"
        assert repr(EdgeId(0, 2)) == "EdgeId(0, 2)"

    def test_projections_round_trip(self) -> None:
        graph: SimpleGraph[str, int] = SimpleGraph()
        a = graph.add_node("a")
        b = graph.add_node("b")
        e = graph.add_edge(b, a, 1)

        assert graph.edge_from(e) == b
        assert graph.edge_to(e) == a
