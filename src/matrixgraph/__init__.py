"""Minimal directed graph container backed by a sparse adjacency matrix."""

__all__ = [
    "ConfigError",
    "ContractViolationError",
    "EdgeId",
    "GraphConfig",
    "GraphEdgeAddable",
    "GraphEdgeEndpoints",
    "GraphEdgeFrom",
    "GraphEdgeIndexable",
    "GraphEdgeMutIndexable",
    "GraphEdgeRemovable",
    "GraphEdgeTo",
    "GraphEdgesFrom",
    "GraphNodeAddable",
    "GraphNodeIndexable",
    "GraphNodeMutIndexable",
    "GraphNodeRemovable",
    "NodeId",
    "SimpleGraph",
    "ViolationKind",
    "get_config",
    "load_config",
]

from ._config import ConfigError, GraphConfig, get_config, load_config
from ._errors import ContractViolationError, ViolationKind
from ._graph import SimpleGraph
from ._handles import EdgeId, NodeId
from ._traits import (
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
)
