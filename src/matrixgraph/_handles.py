"""Opaque node and edge handles."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NodeId:
    """Opaque handle to a node slot.

    Only ``SimpleGraph.add_node`` should create these. Handles compare by
    position, so two nodes with equal data still get different handles.
    """

    _index: int

    def __repr__(self) -> str:
        return f"NodeId({self._index})"


@dataclass(frozen=True, slots=True)
class EdgeId:
    """Opaque handle to the edge slot between a source and a destination node."""

    _source: int
    _destination: int

    def __repr__(self) -> str:
        return f"EdgeId({self._source}, {self._destination})"
