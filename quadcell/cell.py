"""Cells: enclosed volumes bounded by vertices and faces."""

from __future__ import annotations

from typing import Iterator

from .edge import Edge
from .face import Face
from .vertex import Vertex


class Cell:
    """An enclosed volume, bounded by a set of vertices and faces.

    Vertex and face IDs handed out by the cell form increasing sequences of
    positive integers starting at 1.
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._faces: list[Face] = []
        self._vertex_id = 1
        self._face_id = 1

    def __repr__(self) -> str:
        return (
            f"Cell(vertices={len(self._vertices)}, faces={len(self._faces)})"
        )

    @classmethod
    def make(cls) -> Cell:
        """Return a degenerate cell: one looping edge, one vertex, two faces."""
        cell = cls()
        vertex = Vertex(cell)
        left = Face(cell)
        right = Face(cell)
        edge = Edge.make().inv_rot()
        edge.org = vertex
        edge.dest = vertex
        edge.left = left
        edge.right = right
        return cell

    def kill(self) -> None:
        """Remove every vertex and face still owned by this cell."""
        for vertex in reversed(self._vertices[:]):
            vertex.kill()
        for face in reversed(self._faces[:]):
            face.kill()

    # -- vertices ---------------------------------------------------------

    def count_vertices(self) -> int:
        """Return the number of vertices in this cell."""
        return len(self._vertices)

    def add_vertex(self, vertex: Vertex) -> None:
        """Add a vertex that is not yet in this cell."""
        self._vertices.append(vertex)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove a vertex, moving the last vertex into its place."""
        _remove_swapping(self._vertices, vertex, "vertex")

    def make_vertex_id(self) -> int:
        """Return a new, positive vertex ID."""
        vertex_id = self._vertex_id
        self._vertex_id += 1
        return vertex_id

    def vertices(self) -> Iterator[Vertex]:
        """Iterate the vertices; the current one may be removed meanwhile."""
        return _reverse_walk(self._vertices)

    # -- faces ------------------------------------------------------------

    def count_faces(self) -> int:
        """Return the number of faces in this cell."""
        return len(self._faces)

    def add_face(self, face: Face) -> None:
        """Add a face that is not yet in this cell."""
        self._faces.append(face)

    def remove_face(self, face: Face) -> None:
        """Remove a face, moving the last face into its place."""
        _remove_swapping(self._faces, face, "face")

    def make_face_id(self) -> int:
        """Return a new, positive face ID."""
        face_id = self._face_id
        self._face_id += 1
        return face_id

    def faces(self) -> Iterator[Face]:
        """Iterate the faces; the current one may be removed meanwhile."""
        return _reverse_walk(self._faces)


def _remove_swapping(items: list, item: object, kind: str) -> None:
    for position in range(len(items) - 1, -1, -1):
        if items[position] is item:
            last = items.pop()
            if position < len(items):
                items[position] = last
            return
    raise ValueError(f"{kind} {item!r} is not in the cell")


def _reverse_walk(items: list) -> Iterator:
    count = len(items)

    def walk() -> Iterator:
        remaining = count
        while remaining > 0:
            remaining -= 1
            yield items[remaining]

    return walk()