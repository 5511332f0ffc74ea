"""Contract violations raised on invalid handle use."""

from enum import StrEnum


class ViolationKind(StrEnum):
    """Which precondition of a graph operation was broken."""

    EMPTY_NODE = "empty_node"
    EMPTY_EDGE = "empty_edge"
    DANGLING_EDGES = "dangling_edges"
    MISSING_ENDPOINT = "missing_endpoint"

    @property
    def description(self) -> str:
        """Human-readable statement of the broken precondition."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ViolationKind, str] = {
    ViolationKind.EMPTY_NODE: "Node slot is empty or out of range",
    ViolationKind.EMPTY_EDGE: "Edge slot is empty or out of range",
    ViolationKind.DANGLING_EDGES: "Node still has incoming or outgoing edges",
    ViolationKind.MISSING_ENDPOINT: "Edge endpoint does not refer to a node in the graph",
}


class ContractViolationError(Exception):
    """A graph operation was called with a handle that breaks its preconditions.

    This is a programming error on the caller's side (a handle used after
    removal, a handle from another graph, or a node removed before its edges).
    The graph is left unchanged when it is raised.

    Attributes:
        kind: The violated precondition.

    """

    def __init__(self, kind: ViolationKind, detail: str) -> None:
        self.kind = kind
        super().__init__(f"{kind.description}: {detail}")
