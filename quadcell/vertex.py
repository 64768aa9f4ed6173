"""Vertices of a cell and three-dimensional positions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, NamedTuple

if TYPE_CHECKING:
    from .edge import Edge


class Vec3(NamedTuple):
    """A point or vector in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Vertex:
    """A vertex of a cell, with an outgoing set of directed edges.

    A new vertex sits at the origin, takes a fresh ID from its cell and is
    added to the cell.
    """

    def __init__(self, cell: Any) -> None:
        self.pos: Vec3 = Vec3()
        self.data: Any = None
        self._cell = cell
        self._id: int = cell.make_vertex_id()
        self._edge: Edge | None = None
        cell.add_vertex(self)

    def __repr__(self) -> str:
        return f"Vertex(id={self._id}, pos={tuple(self.pos)})"

    def kill(self) -> None:
        """Remove this vertex from its cell."""
        self._cell.remove_vertex(self)

    @property
    def cell(self) -> Any:
        """The cell this vertex belongs to."""
        return self._cell

    @property
    def id(self) -> int:
        """The positive ID number of this vertex."""
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"vertex ID must be positive, got {value}")
        self._id = value

    @property
    def edge(self) -> Edge | None:
        """An arbitrary outgoing edge; None if the vertex is isolated."""
        return self._edge

    def add_edge(self, edge: Edge) -> None:
        """Record an outgoing edge of this vertex."""
        self._edge = edge

    def remove_edge(self, edge: Edge) -> None:
        """Forget an outgoing edge, falling back on another in its orbit."""
        following = edge.onext()
        self._edge = following if following is not edge else None

    def edges(self) -> Iterator[Edge]:
        """Yield the outgoing edges of this vertex in counterclockwise order."""
        start = self._edge
        if start is None:
            return
        edge = start
        while True:
            following = edge.onext()
            yield edge
            if following is start:
                return
            edge = following