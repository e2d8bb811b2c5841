"""
wgraph.graph
============

Bounded-capacity weighted directed graph.

Public API:

- WeightedGraph           : the graph container (adjacency matrix, labels, marks).
- WeightedGraphInterface  : Protocol listing the operations traversal code relies on.
- VertexMarks             : visited flags per vertex position.
- NULL_EDGE, NOT_FOUND    : results of weight_is() without an edge and index_is() for an absent vertex.
- GraphError and subclasses: raised when the graph is misused.
"""

from __future__ import annotations

from .core import NOT_FOUND, NULL_EDGE, WeightedGraph
from .errors import (
    CapacityExceededError,
    DuplicateVertexError,
    GraphError,
    NullVertexError,
    VertexNotFoundError,
)
from .interface import WeightedGraphInterface
from .marks import VertexMarks

__all__ = [
    "WeightedGraph",
    "WeightedGraphInterface",
    "VertexMarks",
    "NULL_EDGE",
    "NOT_FOUND",
    "GraphError",
    "CapacityExceededError",
    "DuplicateVertexError",
    "NullVertexError",
    "VertexNotFoundError",
]
