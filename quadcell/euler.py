"""Euler operators that edit a cell while keeping its topology consistent."""

from __future__ import annotations

from typing import Optional

from .cell import Cell
from .edge import Edge
from .face import Face
from .vertex import Vertex


class TopologyError(ValueError):
    """Raised when an Euler operator is given elements that are not adjacent."""


def _get_orbit_org(edge: Edge, org: Vertex) -> Optional[Edge]:
    """Return the edge leaving ``org`` in the face orbit of ``edge``, if any."""
    scan = edge
    while True:
        if scan.org is org:
            return scan
        scan = scan.lnext()
        if scan is edge:
            return None


def _set_orbit_org(edge: Edge, org: Vertex) -> None:
    """Make ``org`` the origin of every edge in the vertex orbit of ``edge``."""
    scan = edge
    while True:
        scan.org = org
        scan = scan.onext()
        if scan is edge:
            return


def _get_orbit_left(edge: Edge, left: Face) -> Optional[Edge]:
    """Return the edge with ``left`` on its left in the vertex orbit of ``edge``."""
    scan = edge
    while True:
        if scan.left is left:
            return scan
        scan = scan.onext()
        if scan is edge:
            return None


def _set_orbit_left(edge: Edge, left: Face) -> None:
    """Make ``left`` the left face of every edge in the face orbit of ``edge``."""
    scan = edge
    while True:
        scan.left = left
        scan = scan.lnext()
        if scan is edge:
            return


def make_vertex_edge(cell: Cell, vertex: Vertex, left: Face, right: Face) -> Edge:
    """Split ``vertex`` between ``left`` and ``right`` and return the new edge.

    A new vertex, at the position of ``vertex``, becomes the destination of
    the new edge, which has ``left`` on its left and ``right`` on its right.
    """
    edge = vertex.edge
    if edge is None:
        raise TopologyError(f"vertex {vertex.id} has no edges")

    edge1 = _get_orbit_left(edge, right)
    edge2 = _get_orbit_left(edge, left)

    if edge1 is None:
        raise TopologyError(
            f"unable to locate right face {right.id} on vertex {vertex.id}"
        )
    if edge2 is None:
        raise TopologyError(
            f"unable to locate left face {left.id} on vertex {vertex.id}"
        )

    vertex_new = Vertex(cell)
    vertex_new.pos = vertex.pos

    # a clockwise loop, first attached inside the left face, then split
    edge_new = Edge.make().rot()
    Edge.splice(edge2, edge_new)
    Edge.splice(edge1, edge_new.sym())

    edge_new.org = edge1.org
    edge_new.left = edge2.left
    edge_new.right = edge1.left

    _set_orbit_org(edge_new.sym(), vertex_new)
    return edge_new


def kill_vertex_edge(cell: Cell, edge: Edge) -> None:
    """Delete ``edge`` from ``cell`` together with its destination vertex."""
    edge1 = edge.oprev()
    edge2 = edge.lnext()

    # the destination vertex is isolated
    if edge2 is edge.sym():
        edge2 = edge1

    Edge.splice(edge1, edge.sym())
    Edge.splice(edge2, edge)

    _set_orbit_org(edge2, edge1.org)

    edge1.org.add_edge(edge1)
    edge1.left.add_edge(edge1)
    edge2.left.add_edge(edge2)

    dest = edge.dest
    if dest.cell is not cell:
        raise TopologyError(f"vertex {dest.id} does not belong to this cell")
    dest.kill()
    edge.kill()


def make_face_edge(cell: Cell, face: Face, org: Vertex, dest: Vertex) -> Edge:
    """Split ``face`` between ``org`` and ``dest`` and return the new edge.

    A new face is introduced to the right of the new edge.
    """
    edge = face.edge
    if edge is None:
        raise TopologyError(f"face {face.id} has no edges")

    edge1 = _get_orbit_org(edge, org)
    edge2 = _get_orbit_org(edge, dest)

    if edge1 is None:
        raise TopologyError(
            f"unable to locate origin vertex {org.id} on face {face.id}"
        )
    if edge2 is None:
        raise TopologyError(
            f"unable to locate destination vertex {dest.id} on face {face.id}"
        )

    face_new = Face(cell)

    edge_new = Edge.make()
    Edge.splice(edge2, edge_new.sym())
    Edge.splice(edge1, edge_new)

    edge_new.org = edge1.org
    edge_new.dest = edge2.org
    edge_new.left = edge2.left

    _set_orbit_left(edge_new.sym(), face_new)
    return edge_new


def kill_face_edge(cell: Cell, edge: Edge) -> None:
    """Delete ``edge`` from ``cell`` together with its right face."""
    edge1 = edge.oprev()
    edge2 = edge.lnext()

    # the right face lies inside a loop
    if edge1 is edge.sym():
        edge1 = edge2

    Edge.splice(edge2, edge.sym())
    Edge.splice(edge1, edge)

    _set_orbit_left(edge1, edge2.left)

    edge1.org.add_edge(edge1)
    edge2.org.add_edge(edge2)
    edge2.left.add_edge(edge2)

    right = edge.right
    if right.cell is not cell:
        raise TopologyError(f"face {right.id} does not belong to this cell")
    right.kill()
    edge.kill()


def make_tetrahedron() -> Cell:
    """Return a cell with the topology of a tetrahedron, all vertices at the origin."""
    cell = Cell.make()
    vertex1 = next(cell.vertices())

    edge1 = vertex1.edge
    left = edge1.left
    right = edge1.right

    vertex2 = make_vertex_edge(cell, vertex1, left, right).dest
    vertex3 = make_vertex_edge(cell, vertex2, left, right).dest
    vertex4 = make_vertex_edge(cell, vertex3, left, right).dest

    make_face_edge(cell, left, vertex2, vertex4)
    make_face_edge(cell, right, vertex1, vertex3)
    return cell