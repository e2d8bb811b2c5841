from __future__ import annotations

from typing import Optional

import graphblas as gb
from graphblas import Vector


class VertexMarks:
    """
    Visited flags for the vertex positions of a graph.

    Backed by a GraphBLAS Vector[BOOL] of size ``capacity``: a stored True
    entry means the position is marked, an absent entry means unmarked.
    """

    __slots__ = ("_vector", "capacity")

    def __init__(self, capacity: int, *, vector: Optional[Vector] = None) -> None:
        self.capacity = int(capacity)
        if vector is None:
            self._vector = Vector(gb.dtypes.BOOL, size=self.capacity)
            return

        if vector.dtype is not gb.dtypes.BOOL:
            raise TypeError(f"Mark vector must have BOOL dtype, got {vector.dtype!r}")
        if vector.size != self.capacity:
            raise ValueError(
                f"Mark vector size ({vector.size}) must match capacity ({self.capacity})"
            )
        self._vector = vector.dup()

    @property
    def vector(self) -> Vector:
        """Return a copy of the underlying GraphBLAS vector."""
        return self._vector.dup()

    @property
    def num_marked(self) -> int:
        return int(self._vector.nvals)

    def clear(self) -> None:
        """Unmark every position, including unused slots."""
        self._vector.clear()

    def mark(self, position: int) -> None:
        self._check(position)
        self._vector[position] = True

    def is_marked(self, position: int) -> bool:
        self._check(position)
        return bool(self._vector.get(position, False))

    def first_unmarked(self, count: int) -> Optional[int]:
        """
        Return the lowest position in ``[0, count)`` that is not marked,
        or None if all of them are.
        """
        indices, _ = self._vector.to_coo()
        marked = set(int(i) for i in indices)
        for position in range(count):
            if position not in marked:
                return position
        return None

    def _check(self, position: int) -> None:
        if not (0 <= position < self.capacity):
            raise IndexError(f"position {position} out of range [0, {self.capacity})")

    def __repr__(self) -> str:
        return f"VertexMarks(capacity={self.capacity}, marked={self.num_marked})"
