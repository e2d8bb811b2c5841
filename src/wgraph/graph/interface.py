"""Contract that traversal and search algorithms rely on."""

from __future__ import annotations

from typing import Deque, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class WeightedGraphInterface(Protocol[T]):
    """Protocol for directed graphs with integer edge weights and visit marks."""

    def is_empty(self) -> bool:
        """Return whether the graph has no vertices."""

    def is_full(self) -> bool:
        """Return whether no more vertices can be added."""

    def add_vertex(self, vertex: T) -> None:
        """Add ``vertex`` to the graph."""

    def has_vertex(self, vertex: T) -> bool:
        """Return whether ``vertex`` is in the graph."""

    def index_is(self, vertex: T) -> int:
        """Return the position of ``vertex``, or -1 if it is absent."""

    def add_edge(self, from_vertex: T, to_vertex: T, weight: int) -> None:
        """Add an edge of ``weight`` from ``from_vertex`` to ``to_vertex``."""

    def remove_edge(self, vertex1: T, vertex2: T) -> bool:
        """Remove the edge ``vertex1 -> vertex2``; return whether it existed."""

    def weight_is(self, from_vertex: T, to_vertex: T) -> Optional[int]:
        """Return the edge weight, or None if there is no edge."""

    def edge_exists(self, vertex1: T, vertex2: T) -> bool:
        """Return whether the edge ``vertex1 -> vertex2`` exists."""

    def get_to_vertices(self, vertex: T) -> Deque[T]:
        """Return a queue of the vertices ``vertex`` is adjacent to."""

    def clear_marks(self) -> None:
        """Unmark all vertices."""

    def mark_vertex(self, vertex: T) -> None:
        """Mark ``vertex`` as visited."""

    def is_marked(self, vertex: T) -> bool:
        """Return whether ``vertex`` is marked."""

    def get_unmarked(self) -> Optional[T]:
        """Return an unmarked vertex, or None if all are marked."""
