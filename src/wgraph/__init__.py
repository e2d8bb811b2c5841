try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .graph import (
    NOT_FOUND,
    NULL_EDGE,
    CapacityExceededError,
    DuplicateVertexError,
    GraphError,
    NullVertexError,
    VertexNotFoundError,
    WeightedGraph,
    WeightedGraphInterface,
)

__all__ = [
    "__version__",
    "WeightedGraph",
    "WeightedGraphInterface",
    "NULL_EDGE",
    "NOT_FOUND",
    "GraphError",
    "CapacityExceededError",
    "DuplicateVertexError",
    "NullVertexError",
    "VertexNotFoundError",
]
