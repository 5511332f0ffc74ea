"""Directed graph stored as a sparse adjacency matrix."""

import copy
import logging
from enum import Enum
from typing import Final, Self

from .._config import GraphConfig
from .._errors import ContractViolationError, ViolationKind
from .._handles import EdgeId, NodeId

logger = logging.getLogger(__name__)


class _Empty(Enum):
    """Marker for a vacant slot, so that ``None`` stays a valid payload."""

    EMPTY = "empty"


_EMPTY: Final = _Empty.EMPTY


class SimpleGraph[N, E]:
    """A simple directed graph.

    - Nodes live in a list of slots indexed by ``NodeId``.
    - Edges live in a list of rows, row ``a`` holding the slot for ``a -> b``
      at position ``b``. Rows and columns are created lazily by ``add_edge``.
    - Removal leaves an empty slot behind; indices are never reused and the
      storage never shrinks, so outstanding handles stay valid.

    Invalid handle use raises ``ContractViolationError``. The ``get_*`` and
    ``has_*`` methods are the non-raising variants.
    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        self._config = config if config is not None else GraphConfig()
        self._nodes: list[N | _Empty] = []
        self._edges: list[list[E | _Empty]] = []

    @property
    def config(self) -> GraphConfig:
        return self._config

    # Slot lookups

    def _node_index(self, node: NodeId) -> int:
        index = node._index  # noqa: SLF001
        if not 0 <= index < len(self._nodes) or self._nodes[index] is _EMPTY:
            raise ContractViolationError(ViolationKind.EMPTY_NODE, repr(node))
        return index

    def _edge_cell(self, edge: EdgeId) -> tuple[int, int]:
        a, b = edge._source, edge._destination  # noqa: SLF001
        if not (0 <= a < len(self._edges) and 0 <= b < len(self._edges[a])) or self._edges[a][b] is _EMPTY:
            raise ContractViolationError(ViolationKind.EMPTY_EDGE, repr(edge))
        return a, b

    def _has_incident_edges(self, index: int) -> bool:
        if index < len(self._edges) and any(slot is not _EMPTY for slot in self._edges[index]):
            return True
        return any(index < len(row) and row[index] is not _EMPTY for row in self._edges)

    # Adding

    def add_node(self, data: N) -> NodeId:
        """Add a node and return its handle.

        Identical data added twice returns two different handles.
        """
        self._nodes.append(data)
        node = NodeId(len(self._nodes) - 1)
        logger.debug(f"Added node {node}")
        return node

    def add_edge(self, a: NodeId, b: NodeId, data: E) -> EdgeId:
        """Add an edge from ``a`` to ``b``.

        Data added between the same ordered pair overwrites the previous data,
        and the returned handle equals the one returned the first time.

        Endpoints are trusted unless ``GraphConfig.check_endpoints`` is set.

        Raises:
            ContractViolationError: If either endpoint has a negative index,
                or endpoint checking is on and either endpoint is not a node
                in the graph.

        """
        for endpoint in (a, b):
            if endpoint._index < 0 or (self._config.check_endpoints and not self.has_node(endpoint)):  # noqa: SLF001
                raise ContractViolationError(ViolationKind.MISSING_ENDPOINT, repr(endpoint))

        src, dst = a._index, b._index  # noqa: SLF001

        # Make sure that the rows are large enough to contain both node indices
        max_index = max(src, dst)
        if len(self._edges) <= max_index:
            logger.debug(f"Growing edge matrix to {max_index + 1} rows")
            self._edges.extend([] for _ in range(max_index + 1 - len(self._edges)))
        row = self._edges[src]
        if len(row) <= dst:
            row.extend([_EMPTY] * (dst + 1 - len(row)))

        row[dst] = data
        edge = EdgeId(src, dst)
        logger.debug(f"Added edge {edge}")
        return edge

    # Removing

    def remove_node(self, node: NodeId) -> N:
        """Remove a node and return its data.

        Raises:
            ContractViolationError: If the node is not in the graph, or if any
                edge still leads into or out of it.

        """
        index = self._node_index(node)
        if self._has_incident_edges(index):
            raise ContractViolationError(ViolationKind.DANGLING_EDGES, repr(node))

        data = self._nodes[index]
        self._nodes[index] = _EMPTY
        logger.debug(f"Removed node {node}")
        return data  # type: ignore[return-value]

    def remove_edge(self, edge: EdgeId) -> E:
        """Remove an edge and return its data.

        Raises:
            ContractViolationError: If the edge is not in the graph.

        """
        a, b = self._edge_cell(edge)
        data = self._edges[a][b]
        self._edges[a][b] = _EMPTY
        logger.debug(f"Removed edge {edge}")
        return data  # type: ignore[return-value]

    # Indexing

    def node(self, node: NodeId) -> N:
        """Get the data associated with a node.

        Raises:
            ContractViolationError: If the node is not in the graph.

        """
        return self._nodes[self._node_index(node)]  # type: ignore[return-value]

    def node_mut(self, node: NodeId) -> N:
        """Get the stored node object for in-place mutation."""
        return self.node(node)

    def set_node(self, node: NodeId, data: N) -> None:
        """Replace the data of an existing node.

        Raises:
            ContractViolationError: If the node is not in the graph.

        """
        self._nodes[self._node_index(node)] = data

    def edge(self, edge: EdgeId) -> E:
        """Get the data associated with an edge.

        Raises:
            ContractViolationError: If the edge is not in the graph.

        """
        a, b = self._edge_cell(edge)
        return self._edges[a][b]  # type: ignore[return-value]

    def edge_mut(self, edge: EdgeId) -> E:
        """Get the stored edge object for in-place mutation."""
        return self.edge(edge)

    def set_edge(self, edge: EdgeId, data: E) -> None:
        """Replace the data of an existing edge.

        Raises:
            ContractViolationError: If the edge is not in the graph.

        """
        a, b = self._edge_cell(edge)
        self._edges[a][b] = data

    def get_node[D](self, node: NodeId, default: D | None = None) -> N | D | None:
        """Get the data of a node, or ``default`` if it is not in the graph.

        Pass a sentinel as ``default`` to tell a missing node apart from one
        whose data is None.
        """
        if not self.has_node(node):
            return default
        return self.node(node)

    def get_edge[D](self, edge: EdgeId, default: D | None = None) -> E | D | None:
        """Get the data of an edge, or ``default`` if it is not in the graph."""
        if not self.has_edge(edge):
            return default
        return self.edge(edge)

    def has_node(self, node: NodeId) -> bool:
        """Check if a node is in the graph (its slot exists and is occupied)."""
        index = node._index  # noqa: SLF001
        return 0 <= index < len(self._nodes) and self._nodes[index] is not _EMPTY

    def has_edge(self, edge: EdgeId) -> bool:
        """Check if an edge is in the graph."""
        a, b = edge._source, edge._destination  # noqa: SLF001
        return 0 <= a < len(self._edges) and 0 <= b < len(self._edges[a]) and self._edges[a][b] is not _EMPTY

    # Endpoints

    def edge_to(self, edge: EdgeId) -> NodeId:
        """Find the destination of an edge."""
        return NodeId(edge._destination)  # noqa: SLF001

    def edge_from(self, edge: EdgeId) -> NodeId:
        """Find the source of an edge."""
        return NodeId(edge._source)  # noqa: SLF001

    def edges_from(self, node: NodeId) -> list[EdgeId]:
        """Find all edges leaving a node, ordered by destination.

        A node that never had an outgoing edge yields an empty list.

        Raises:
            ContractViolationError: If the node is not in the graph, unless
                ``GraphConfig.lenient_edges_from`` is set.

        """
        if self._config.lenient_edges_from and not self.has_node(node):
            return []
        index = self._node_index(node)

        if index >= len(self._edges):
            return []
        return [EdgeId(index, dst) for dst, slot in enumerate(self._edges[index]) if slot is not _EMPTY]

    # Copying

    def copy(self) -> Self:
        """Return an independent clone, node and edge data included."""
        return copy.deepcopy(self)

    def __copy__(self) -> Self:
        # Fresh slot lists, shared payloads
        clone = type(self)(self._config)
        clone._nodes = list(self._nodes)
        clone._edges = [list(row) for row in self._edges]
        return clone

    def __repr__(self) -> str:
        node_count = sum(slot is not _EMPTY for slot in self._nodes)
        edge_count = sum(slot is not _EMPTY for row in self._edges for slot in row)
        return f"{type(self).__name__}(nodes={node_count}, edges={edge_count}, node_slots={len(self._nodes)})"
