from __future__ import annotations

import logging
from collections import deque
from typing import (
    Any,
    Deque,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

import numpy as np
import graphblas as gb
from graphblas import Matrix, Vector

from ..config import get_settings
from .errors import (
    CapacityExceededError,
    DuplicateVertexError,
    NullVertexError,
    VertexNotFoundError,
)
from .marks import VertexMarks

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Weight reported for a vertex pair without an edge. Edges are stored as
# matrix entries, so a weight of 0 is an ordinary edge.
NULL_EDGE = None

# Position reported by index_is() for a label that is not in the graph.
NOT_FOUND = -1

# Edge weights are stored as INT64.
MIN_WEIGHT = int(np.iinfo(np.int64).min)
MAX_WEIGHT = int(np.iinfo(np.int64).max)


class WeightedGraph(Generic[T]):
    """
    Directed graph with integer edge weights and a fixed vertex capacity.

    Structure:
      - Vertices are labels of any type, distinct under ``==``. Each gets a
        position 0..capacity-1 in insertion order; positions never change.
      - Weights: GraphBLAS Matrix[INT64] of shape (capacity, capacity).
            entry (i, j) present = edge from position i to position j
            entry (i, j) absent  = no edge
      - Marks: VertexMarks (Vector[BOOL] of size capacity) used by external
        traversal algorithms to flag visited vertices.

    Except for add_vertex, has_vertex and index_is, every operation taking a
    vertex raises VertexNotFoundError when the vertex is not in the graph
    and NullVertexError when it is None.
    """

    __slots__ = (
        "_capacity",
        "_vertices",     # list[T], position -> label
        "_index",        # dict[T, int] for hashable labels
        "_unhashable",   # list[int], positions of labels that cannot be hashed
        "_weights",      # Matrix[INT64]
        "_marks",        # VertexMarks
        "_log_mutations",
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(self, capacity: Optional[int] = None) -> None:
        settings = get_settings().graph
        if capacity is None:
            capacity = settings.default_capacity

        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise TypeError(f"capacity must be an integer, got {type(capacity).__name__}")
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")

        self._capacity = int(capacity)
        self._vertices: List[T] = []
        self._index: Dict[Any, int] = {}
        self._unhashable: List[int] = []
        self._weights: Matrix = Matrix(gb.dtypes.INT64, nrows=self._capacity, ncols=self._capacity)
        self._marks = VertexMarks(self._capacity)
        self._log_mutations = settings.log_mutations

        logger.debug("WeightedGraph created with capacity=%d", self._capacity)

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[T],
        edges: Iterable[Tuple[T, T, int]],
        *,
        capacity: Optional[int] = None,
    ) -> WeightedGraph[T]:
        """
        Build a graph from vertex labels and (from_vertex, to_vertex, weight) triples.

        Vertices are added in iteration order. When capacity is omitted it
        is the configured default, raised to the number of vertices if needed.
        """
        labels = list(vertices)
        if capacity is None:
            capacity = max(get_settings().graph.default_capacity, len(labels))

        graph: WeightedGraph[T] = cls(capacity)
        for label in labels:
            graph.add_vertex(label)
        for from_vertex, to_vertex, weight in edges:
            graph.add_edge(from_vertex, to_vertex, weight)
        return graph

    # ------------------------------------------------------------------ #
    # Capacity
    # ------------------------------------------------------------------ #
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return int(self._weights.nvals)

    @property
    def vertices(self) -> List[T]:
        """Live vertex labels in position order (a copy)."""
        return list(self._vertices)

    def is_empty(self) -> bool:
        return not self._vertices

    def is_full(self) -> bool:
        return len(self._vertices) == self._capacity

    # ------------------------------------------------------------------ #
    # Vertices
    # ------------------------------------------------------------------ #
    def add_vertex(self, vertex: T) -> None:
        """
        Append vertex at the next free position.

        Raises NullVertexError for None, CapacityExceededError when the
        graph is full and DuplicateVertexError when an equal vertex exists.
        """
        if vertex is None:
            logger.debug("add_vertex rejected: vertex is None")
            raise NullVertexError()
        if self.is_full():
            logger.debug("add_vertex(%r) rejected: capacity %d reached", vertex, self._capacity)
            raise CapacityExceededError(self._capacity)
        if self._lookup(vertex) is not None:
            logger.debug("add_vertex(%r) rejected: duplicate", vertex)
            raise DuplicateVertexError(vertex)

        position = len(self._vertices)
        try:
            self._index[vertex] = position
        except TypeError:
            self._unhashable.append(position)
        self._vertices.append(vertex)
        # Row and column `position` were never written and marks only hold
        # live positions, so the new vertex starts with no edges and unmarked.

        if self._log_mutations:
            logger.debug("Added vertex %r at position %d", vertex, position)

    def has_vertex(self, vertex: T) -> bool:
        if vertex is None:
            return False
        return self._lookup(vertex) is not None

    def index_is(self, vertex: T) -> int:
        """Return the position of vertex, or NOT_FOUND (-1) if it is absent."""
        if vertex is None:
            return NOT_FOUND
        position = self._lookup(vertex)
        return NOT_FOUND if position is None else position

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def add_edge(self, from_vertex: T, to_vertex: T, weight: int) -> None:
        """Set the weight of the edge from_vertex -> to_vertex, replacing any existing one."""
        if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
            raise TypeError(f"weight must be an integer, got {type(weight).__name__}")
        if not (MIN_WEIGHT <= weight <= MAX_WEIGHT):
            raise ValueError(f"weight {weight} out of INT64 range [{MIN_WEIGHT}, {MAX_WEIGHT}]")
        row = self._position_of(from_vertex)
        col = self._position_of(to_vertex)

        self._weights[row, col] = int(weight)

        if self._log_mutations:
            logger.debug("Set edge %r -> %r weight=%d", from_vertex, to_vertex, weight)

    def remove_edge(self, vertex1: T, vertex2: T) -> bool:
        """
        Remove the edge vertex1 -> vertex2.

        Returns True if the edge existed, False if there was nothing to remove.
        """
        row = self._position_of(vertex1)
        col = self._position_of(vertex2)

        existed = self._weights.get(row, col) is not None
        if existed:
            del self._weights[row, col]
            if self._log_mutations:
                logger.debug("Removed edge %r -> %r", vertex1, vertex2)
        return existed

    def weight_is(self, from_vertex: T, to_vertex: T) -> Optional[int]:
        """Return the weight of from_vertex -> to_vertex, or NULL_EDGE (None) without an edge."""
        row = self._position_of(from_vertex)
        col = self._position_of(to_vertex)

        weight = self._weights.get(row, col)
        return NULL_EDGE if weight is None else int(weight)

    def edge_exists(self, vertex1: T, vertex2: T) -> bool:
        row = self._position_of(vertex1)
        col = self._position_of(vertex2)
        return self._weights.get(row, col) is not None

    def get_to_vertices(self, vertex: T) -> Deque[T]:
        """
        Return a queue of the vertices that vertex has an edge to.

        Vertices appear in position (insertion) order. The queue is a
        snapshot; later changes to the graph do not affect it.
        """
        row = self._position_of(vertex)
        indices, _ = self._weights[row, :].new().to_coo()
        return deque(self._vertices[int(i)] for i in indices)

    def get_from_vertices(self, vertex: T) -> Deque[T]:
        """Return a queue of the vertices with an edge to vertex, in position order."""
        col = self._position_of(vertex)
        indices, _ = self._weights[:, col].new().to_coo()
        return deque(self._vertices[int(i)] for i in indices)

    def edges(self) -> Iterator[Tuple[T, T, int]]:
        """Yield (from_vertex, to_vertex, weight) for every edge, row by row."""
        rows, cols, values = self._weights.to_coo()
        order = np.lexsort((cols, rows))
        snapshot = [
            (self._vertices[int(rows[k])], self._vertices[int(cols[k])], int(values[k]))
            for k in order
        ]
        return iter(snapshot)

    def get_matrix(self) -> Matrix:
        """Return a copy of the weight matrix restricted to live vertices."""
        n = len(self._vertices)
        return self._weights[:n, :n].new()

    def get_out_edges(self, vertex: T) -> Vector:
        """
        Return outgoing edges of vertex as a Vector over live positions:

        - indices: target positions
        - values: edge weights
        """
        row = self._position_of(vertex)
        n = len(self._vertices)
        return self._weights[row, :n].new()

    def get_in_edges(self, vertex: T) -> Vector:
        """
        Return incoming edges of vertex as a Vector over live positions:

        - indices: source positions
        - values: edge weights
        """
        col = self._position_of(vertex)
        n = len(self._vertices)
        return self._weights[:n, col].new()

    # ------------------------------------------------------------------ #
    # Marks
    # ------------------------------------------------------------------ #
    def clear_marks(self) -> None:
        self._marks.clear()

    def mark_vertex(self, vertex: T) -> None:
        self._marks.mark(self._position_of(vertex))

    def is_marked(self, vertex: T) -> bool:
        return self._marks.is_marked(self._position_of(vertex))

    def get_unmarked(self) -> Optional[T]:
        """Return the first unmarked vertex in position order, or None if there is none."""
        position = self._marks.first_unmarked(len(self._vertices))
        if position is None:
            return None
        return self._vertices[position]

    # ------------------------------------------------------------------ #
    # Lookup helpers
    # ------------------------------------------------------------------ #
    def _lookup(self, vertex: Any) -> Optional[int]:
        try:
            position = self._index.get(vertex)
        except TypeError:
            # Unhashable labels may still equal any stored label.
            candidates: Iterable[int] = range(len(self._vertices))
        else:
            if position is not None:
                return position
            candidates = self._unhashable

        for candidate in candidates:
            if self._vertices[candidate] == vertex:
                return candidate
        return None

    def _position_of(self, vertex: Any) -> int:
        if vertex is None:
            logger.debug("Vertex argument is None")
            raise NullVertexError()
        position = self._lookup(vertex)
        if position is None:
            logger.debug("Vertex %r not found", vertex)
            raise VertexNotFoundError(vertex)
        return position

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(capacity={self._capacity}, "
            f"num_vertices={len(self._vertices)}, "
            f"num_edges={self.num_edges})"
        )
