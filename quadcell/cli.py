"""Command line entry point: print the topology of a cell."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .cell import Cell
from .euler import make_tetrahedron
from .obj import ObjFormatError, read_cell, write_cell

_USAGE = "usage: {prog} [<infile>.obj [<outfile>.obj]]"


def describe_cell(cell: Cell) -> str:
    """Return a listing of each face's vertices and each vertex's faces.

    Each face line names the destination vertex of every edge around the
    face; each vertex line names the left face of every outgoing edge.
    """
    lines = []
    for face in cell.faces():
        ids = "".join(f"{edge.dest.id} " for edge in face.edges())
        lines.append(f"face {face.id}: {ids}")
    for vertex in cell.vertices():
        ids = "".join(f"{edge.left.id} " for edge in vertex.edges())
        lines.append(f"vertex {vertex.id}: {ids}")
    return "".join(line + "\n" for line in lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Describe a tetrahedron, or a cell read from an OBJ file.

    With one argument the cell is read from that file; with a second it is
    also written back out in OBJ form.  Returns the process exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) > 2:
        print(_USAGE.format(prog="quadcell"))
        return 1

    if not args:
        cell = make_tetrahedron()
        sys.stdout.write(describe_cell(cell))
        cell.kill()
        return 0

    try:
        cell = read_cell(args[0])
    except OSError as exc:
        print(f"quadcell: can't read {args[0]}: {exc}", file=sys.stderr)
        return 1
    except ObjFormatError as exc:
        print(f"quadcell: error in OBJ file {args[0]}: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(describe_cell(cell))

    if len(args) > 1:
        try:
            write_cell(cell, args[1])
        except OSError as exc:
            print(f"quadcell: can't write {args[1]}: {exc}", file=sys.stderr)
            cell.kill()
            return 1

    cell.kill()
    return 0


if __name__ == "__main__":
    sys.exit(main())