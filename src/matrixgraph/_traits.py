"""Capability protocols for graph containers.

Each protocol describes one small capability (adding nodes, indexing edges,
listing outgoing edges, ...) so algorithms can ask for exactly what they use.
They are generic over the payload types and over the handle types ``NodeT``
and ``EdgeT`` chosen by the container.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class GraphNodeAddable[N, NodeT](Protocol):
    def add_node(self, data: N) -> NodeT: ...


@runtime_checkable
class GraphEdgeAddable[E, NodeT, EdgeT](Protocol):
    def add_edge(self, a: NodeT, b: NodeT, data: E) -> EdgeT: ...


@runtime_checkable
class GraphNodeRemovable[N, NodeT](Protocol):
    def remove_node(self, node: NodeT) -> N: ...


@runtime_checkable
class GraphEdgeRemovable[E, EdgeT](Protocol):
    def remove_edge(self, edge: EdgeT) -> E: ...


@runtime_checkable
class GraphNodeIndexable[N, NodeT](Protocol):
    def node(self, node: NodeT) -> N: ...


@runtime_checkable
class GraphNodeMutIndexable[N, NodeT](Protocol):
    """Mutable node access.

    ``node_mut`` hands back the stored object for in-place mutation;
    ``set_node`` replaces it, which is the only option for immutable payloads.
    """

    def node_mut(self, node: NodeT) -> N: ...

    def set_node(self, node: NodeT, data: N) -> None: ...


@runtime_checkable
class GraphEdgeIndexable[E, EdgeT](Protocol):
    def edge(self, edge: EdgeT) -> E: ...


@runtime_checkable
class GraphEdgeMutIndexable[E, EdgeT](Protocol):
    """Mutable edge access, see ``GraphNodeMutIndexable``."""

    def edge_mut(self, edge: EdgeT) -> E: ...

    def set_edge(self, edge: EdgeT, data: E) -> None: ...


@runtime_checkable
class GraphEdgeTo[NodeT, EdgeT](Protocol):
    def edge_to(self, edge: EdgeT) -> NodeT: ...


@runtime_checkable
class GraphEdgeFrom[NodeT, EdgeT](Protocol):
    def edge_from(self, edge: EdgeT) -> NodeT: ...


@runtime_checkable
class GraphEdgeEndpoints[NodeT, EdgeT](GraphEdgeTo[NodeT, EdgeT], GraphEdgeFrom[NodeT, EdgeT], Protocol):
    """Both endpoint projections of an edge."""


@runtime_checkable
class GraphEdgesFrom[NodeT, EdgeT](Protocol):
    def edges_from(self, node: NodeT) -> list[EdgeT]:
        """Return the outgoing edges of ``node`` in a stable order."""
        ...
