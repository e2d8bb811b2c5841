"""Exceptions raised by the weighted graph container."""

from __future__ import annotations


class GraphError(Exception):
    """Base exception for misuse of a graph container."""
    pass


class CapacityExceededError(GraphError):
    """A vertex was added to a graph that is already full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Graph is full (capacity={capacity})")
        self.capacity = capacity


class DuplicateVertexError(GraphError, ValueError):
    """A vertex equal to an existing one was added."""

    def __init__(self, vertex: object) -> None:
        super().__init__(f"Vertex {vertex!r} is already in the graph")
        self.vertex = vertex


class VertexNotFoundError(GraphError, LookupError):
    """An operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex: object) -> None:
        super().__init__(f"Vertex {vertex!r} is not in the graph")
        self.vertex = vertex


class NullVertexError(GraphError, ValueError):
    """``None`` was passed where a vertex label is required."""

    def __init__(self) -> None:
        super().__init__("Vertex must not be None")


__all__ = [
    "GraphError",
    "CapacityExceededError",
    "DuplicateVertexError",
    "VertexNotFoundError",
    "NullVertexError",
]
