"""Faces of a cell."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from .edge import Edge


class Face:
    """A face of a cell, bounded by a set of directed edges.

    A new face has no adjacent edges, takes a fresh ID from its cell and is
    added to the cell.
    """

    def __init__(self, cell: Any) -> None:
        self.data: Any = None
        self._cell = cell
        self._id: int = cell.make_face_id()
        self._edge: Edge | None = None
        cell.add_face(self)

    def __repr__(self) -> str:
        return f"Face(id={self._id})"

    def kill(self) -> None:
        """Remove this face from its cell."""
        self._cell.remove_face(self)

    @property
    def cell(self) -> Any:
        """The cell this face belongs to."""
        return self._cell

    @property
    def id(self) -> int:
        """The positive ID number of this face."""
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"face ID must be positive, got {value}")
        self._id = value

    @property
    def edge(self) -> Edge | None:
        """An arbitrary adjacent edge; None if the face is degenerate."""
        return self._edge

    def add_edge(self, edge: Edge) -> None:
        """Record an edge that has this face on its left."""
        self._edge = edge

    def remove_edge(self, edge: Edge) -> None:
        """Forget an adjacent edge, falling back on another in its orbit."""
        following = edge.onext()
        self._edge = following if following is not edge else None

    def edges(self) -> Iterator[Edge]:
        """Yield the bounding edges of this face in counterclockwise order."""
        start = self._edge
        if start is None:
            return
        edge = start
        while True:
            following = edge.lnext()
            yield edge
            if following is start:
                return
            edge = following