"""Reading and writing cells in a subset of the Wavefront OBJ format.

Only three kinds of line are understood::

    # comment
    v <X> <Y> <Z>
    f <V1> <V2> ... <VN>

The polyhedron described must be closed and connected.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .cell import Cell
from .euler import make_face_edge, make_vertex_edge
from .face import Face
from .vertex import Vec3, Vertex


class ObjFormatError(ValueError):
    """Raised when OBJ input cannot be turned into a closed cell."""


@dataclass(eq=False)
class _Sector:
    """Two consecutive neighbours of a vertex, counterclockwise, and their face."""

    p: _Tvert
    f: _Tface
    q: _Tvert


@dataclass(eq=False)
class _Tface:
    """A face as read from the input, with its vertices in ccw order."""

    no: int
    vlist: list[_Tvert] = field(default_factory=list)
    face: Optional[Face] = None


@dataclass(eq=False)
class _Tvert:
    """A vertex as read from the input.

    ``arclist`` holds disjoint runs of sectors around the vertex; once the
    vertex is fully surrounded it is a single run and ``done`` is set.
    """

    no: int
    p: Vec3
    arclist: list[list[_Sector]] = field(default_factory=list)
    done: bool = False
    vertex: Optional[Vertex] = None
    instantiated: bool = False


# -- gathering topology ---------------------------------------------------


def _merge_arc(v: _Tvert, p: _Tvert, q: _Tvert, f: _Tface) -> None:
    """Merge the sector (p, q) on face ``f`` into the arcs around ``v``."""
    sector = _Sector(p, f, q)
    bef: Optional[list[_Sector]] = None
    aft: Optional[list[_Sector]] = None
    for arc in v.arclist:
        if arc[-1].q is p:
            bef = arc
        if arc[0].p is q:
            aft = arc

    if bef is not None:
        bef.append(sector)
        if aft is not None:
            if bef is aft:
                # joining the ends would close the cycle: the vertex is done
                v.done = True
                return
            position = next(i for i, arc in enumerate(v.arclist) if arc is aft)
            del v.arclist[position]
            bef.extend(aft)
    elif aft is not None:
        aft.insert(0, sector)
    else:
        v.arclist.append([sector])


def _add_arcs(f: _Tface) -> None:
    """Record the sectors of face ``f`` at each of its vertices."""
    vlist = f.vlist
    count = len(vlist)
    for index, v in enumerate(vlist):
        _merge_arc(v, vlist[(index + 1) % count], vlist[index - 1], f)


def _check_closed(verts: list[_Tvert]) -> None:
    if not verts:
        raise ObjFormatError("OBJ input contains no vertices")
    for v in verts:
        if v.done and len(v.arclist) == 1:
            continue
        if not v.arclist:
            raise ObjFormatError(f"unused vertex {v.no}")
        if not v.done:
            raise ObjFormatError(f"vertex {v.no} is not surrounded by polygons")
        raise ObjFormatError(f"repeated face: f{v.arclist[1][0].f.no}")


# -- queries on the cell under construction -------------------------------


def _is_connected(vertex1: Vertex, vertex2: Vertex, left: Face) -> bool:
    return any(e.dest is vertex2 and e.left is left for e in vertex1.edges())


def _right_face(vertex: Vertex, left: Face) -> Optional[Face]:
    for edge in vertex.edges():
        if edge.left is left:
            return edge.right
    return None


def _has_vertex(face: Face, vertex: Vertex) -> bool:
    return any(edge.org is vertex for edge in face.edges())


def _has_vertices(face: Face, vlist: list[_Tvert]) -> bool:
    return all(v.vertex is None or _has_vertex(face, v.vertex) for v in vlist)


def _get_face(cell: Cell, f: _Tface) -> Optional[Face]:
    """Return an unused face holding every identified vertex of ``f``."""
    candidates = [face for face in cell.faces() if face.data is None]
    index = 0
    while index < len(candidates):
        if _has_vertices(candidates[index], f.vlist):
            index += 1
        else:
            last = candidates.pop()
            if index < len(candidates):
                candidates[index] = last
    return candidates[0] if candidates else None


# -- instantiation --------------------------------------------------------


def _make_face(cell: Cell, f: _Tface) -> None:
    """Instantiate ``f`` in ``cell``, identifying all of its vertices."""
    face = _get_face(cell, f)
    if face is None:
        raise ObjFormatError(f"unable to place face {f.no} in the cell")

    vlist = f.vlist
    count = len(vlist)

    # connect each identified vertex to the next identified one
    for index, tv in enumerate(vlist):
        vertex1 = tv.vertex
        if vertex1 is None:
            continue
        following = index
        while True:
            following = (following + 1) % count
            vertex2 = vlist[following].vertex
            if vertex2 is not None:
                break
        if not _is_connected(vertex1, vertex2, face):
            make_face_edge(cell, face, vertex1, vertex2)

    # split new vertices off for every unidentified one, going around
    start = next(i for i, tv in enumerate(vlist) if tv.vertex is not None)
    vertex = vlist[start].vertex
    index = start
    while True:
        index = (index + 1) % count
        if index == start:
            break
        v = vlist[index]
        if v.vertex is None:
            right = _right_face(vertex, face)
            if right is None:
                raise ObjFormatError(
                    f"unable to find the face beside face {f.no} at vertex {vertex.id}"
                )
            v.vertex = make_vertex_edge(cell, vertex, face, right).dest
            v.vertex.pos = v.p
            v.vertex.id = v.no
        vertex = v.vertex

    f.face = face
    face.id = f.no
    face.data = f


def _make_vertex(cell: Cell, v: _Tvert) -> None:
    """Instantiate every face around the identified Tvert ``v``."""
    arc = v.arclist[0]
    start = next((i for i, s in enumerate(arc) if s.p.vertex is not None), None)
    if start is None:
        raise ObjFormatError(f"vertex {v.no} has no identified neighbour")
    index = start
    while True:
        f = arc[index].f
        if f.face is None:
            _make_face(cell, f)
        index = (index + 1) % len(arc)
        if index == start:
            break
    v.instantiated = True


def _build(verts: list[_Tvert]) -> Cell:
    _check_closed(verts)

    cell = Cell.make()
    first = verts[0]
    first.vertex = next(cell.vertices())
    first.vertex.pos = first.p
    first.vertex.id = first.no
    _make_face(cell, first.arclist[0][0].f)

    while True:
        progressed = False
        for v in verts:
            if v.vertex is not None and not v.instantiated:
                _make_vertex(cell, v)
                progressed = True
        if all(v.instantiated for v in verts):
            break
        if not progressed:
            raise ObjFormatError("the polyhedron is not connected")

    for face in cell.faces():
        face.data = None
    return cell


# -- public interface -----------------------------------------------------


def parse_cell(lines: Union[str, Iterable[str]]) -> Cell:
    """Build a cell from the lines of an OBJ description."""
    if isinstance(lines, str):
        lines = lines.splitlines()

    verts: list[_Tvert] = []
    face_count = 0

    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        command, arguments = tokens[0], tokens[1:]
        if command == "#":
            continue
        if command == "v":
            if len(arguments) != 3:
                raise ObjFormatError(f"vertex needs three coordinates: {line.strip()!r}")
            try:
                x, y, z = (float(token) for token in arguments)
            except ValueError as exc:
                raise ObjFormatError(f"bad vertex coordinate: {line.strip()!r}") from exc
            verts.append(_Tvert(no=len(verts) + 1, p=Vec3(x, y, z)))
        elif command == "f":
            face_count += 1
            f = _Tface(no=face_count)
            if not arguments:
                raise ObjFormatError(f"face {face_count} has no vertices")
            for token in arguments:
                try:
                    number = int(token)
                except ValueError as exc:
                    raise ObjFormatError(f"bad vertex index {token!r}") from exc
                if not 1 <= number <= len(verts):
                    raise ObjFormatError(f"face {face_count} uses unknown vertex {number}")
                f.vlist.append(verts[number - 1])
            _add_arcs(f)
        else:
            raise ObjFormatError(f"can't parse this OBJ file, hit token ({command})")

    return _build(verts)


def read_cell(path: Union[str, os.PathLike]) -> Cell:
    """Read a cell from the OBJ file at ``path``."""
    with open(path, encoding="utf-8") as stream:
        return parse_cell(stream)


def _renumber(cell: Cell) -> None:
    for number, vertex in enumerate(cell.vertices(), start=1):
        vertex.id = number


def format_cell(cell: Cell) -> str:
    """Return the OBJ text for ``cell``, renumbering its vertices from 1."""
    _renumber(cell)
    out = [f"# {cell.count_vertices()} vertices"]
    for vertex in cell.vertices():
        x, y, z = vertex.pos
        out.append(f"v {x:g} {y:g} {z:g}")
    out.append(f"# {cell.count_faces()} faces")
    for face in cell.faces():
        out.append("f" + "".join(f" {edge.org.id}" for edge in face.edges()))
    return "\n".join(out) + "\n"


def write_cell(cell: Cell, path: Union[str, os.PathLike]) -> None:
    """Write ``cell`` to the OBJ file at ``path``."""
    text = format_cell(cell)
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(text)


def clone_cell(cell: Cell) -> Cell:
    """Return a new cell with the same topology and positions as ``cell``.

    The vertices of ``cell`` are renumbered from 1 as a side effect.
    """
    _renumber(cell)
    verts = [
        _Tvert(no=number, p=vertex.pos)
        for number, vertex in enumerate(cell.vertices(), start=1)
    ]
    for number, face in enumerate(cell.faces(), start=1):
        f = _Tface(no=number)
        f.vlist = [verts[edge.org.id - 1] for edge in face.edges()]
        _add_arcs(f)
    return _build(verts)