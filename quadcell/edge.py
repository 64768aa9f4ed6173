"""Directed edges of the quad-edge data structure."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from .face import Face
    from .vertex import Vertex


class Edge:
    """A directed edge from one vertex to another, adjacent to two faces.

    Every edge belongs to a group of four: the edge itself, its two duals
    and its symmetric.  Primal edges carry an origin vertex, dual edges carry
    the face they point into.  Create edges with :meth:`make`.
    """

    _next_id: ClassVar[int] = 4

    __slots__ = ("_quad", "_index", "_next", "_id", "_vertex", "_face", "data")

    def __init__(self, quad: list[Edge], index: int, edge_id: int) -> None:
        self._quad = quad
        self._index = index
        self._next: Edge = self
        self._id = edge_id
        self._vertex: Vertex | None = None
        self._face: Face | None = None
        self.data: Any = None

    def __repr__(self) -> str:
        return f"Edge(id={self._id})"

    # -- construction and destruction -------------------------------------

    @classmethod
    def make(cls) -> Edge:
        """Return a new, unconnected edge."""
        base = Edge._next_id
        Edge._next_id = base + 4
        quad: list[Edge] = []
        for index in range(4):
            quad.append(cls(quad, index, base + index))
        for edge, target in zip(quad, (0, 3, 2, 1)):
            edge._next = quad[target]
        return quad[0]

    def kill(self) -> None:
        """Detach this edge from everything it is connected to."""
        Edge.splice(self, self.oprev())
        sym = self.sym()
        Edge.splice(sym, sym.oprev())

    @staticmethod
    def splice(a: Edge, b: Edge) -> None:
        """Join or separate the origin rings and left-face rings of two edges.

        Distinct rings are combined into one; a single ring is broken in two.
        """
        alpha = a.onext().rot()
        beta = b.onext().rot()

        t1 = b.onext()
        t2 = a.onext()
        t3 = beta.onext()
        t4 = alpha.onext()

        a._next = t1
        b._next = t2
        alpha._next = t3
        beta._next = t4

    # -- identity ---------------------------------------------------------

    @property
    def id(self) -> int:
        """The positive ID number of this edge."""
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"edge ID must be positive, got {value}")
        self._id = value

    # -- endpoints and faces ----------------------------------------------

    @property
    def org(self) -> Vertex | None:
        """The origin vertex of this edge; None if unknown."""
        return self._vertex

    @org.setter
    def org(self, vertex: Vertex | None) -> None:
        self._vertex = vertex
        if vertex is not None:
            vertex.add_edge(self)

    @property
    def dest(self) -> Vertex | None:
        """The destination vertex of this edge; None if unknown."""
        return self.sym()._vertex

    @dest.setter
    def dest(self, vertex: Vertex | None) -> None:
        sym = self.sym()
        sym._vertex = vertex
        if vertex is not None:
            vertex.add_edge(sym)

    @property
    def left(self) -> Face | None:
        """The face to the left of this edge; None if unknown."""
        return self.rot()._face

    @left.setter
    def left(self, face: Face | None) -> None:
        self.rot()._face = face
        if face is not None:
            face.add_edge(self)

    @property
    def right(self) -> Face | None:
        """The face to the right of this edge; None if unknown."""
        return self.inv_rot()._face

    @right.setter
    def right(self, face: Face | None) -> None:
        self.inv_rot()._face = face
        if face is not None:
            face.add_edge(self.sym())

    # -- navigation -------------------------------------------------------

    def rot(self) -> Edge:
        """The dual of this edge, directed from its right to its left."""
        return self._quad[(self._index + 1) % 4]

    def inv_rot(self) -> Edge:
        """The dual of this edge, directed from its left to its right."""
        return self._quad[(self._index + 3) % 4]

    def sym(self) -> Edge:
        """The edge from the destination to the origin of this edge."""
        return self._quad[(self._index + 2) % 4]

    def onext(self) -> Edge:
        """The next counterclockwise edge around the origin."""
        return self._next

    def oprev(self) -> Edge:
        """The next clockwise edge around the origin."""
        return self.rot().onext().rot()

    def dnext(self) -> Edge:
        """The next counterclockwise edge into the destination."""
        return self.sym().onext().sym()

    def dprev(self) -> Edge:
        """The next clockwise edge into the destination."""
        return self.inv_rot().onext().inv_rot()

    def lnext(self) -> Edge:
        """The counterclockwise edge following this one around the left face."""
        return self.inv_rot().onext().rot()

    def lprev(self) -> Edge:
        """The counterclockwise edge preceding this one around the left face."""
        return self.onext().sym()

    def rnext(self) -> Edge:
        """The edge following this one around the right face."""
        return self.rot().onext().inv_rot()

    def rprev(self) -> Edge:
        """The edge preceding this one around the right face."""
        return self.sym().onext()