# quadcell

A polyhedral cell library built on the quad-edge data structure. A cell is
an enclosed volume bounded by vertices, faces and directed edges. Its
topology is changed through Euler operators, which keep it consistent.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building cells

```python
from quadcell.euler import make_tetrahedron

cell = make_tetrahedron()
print(cell.count_vertices(), cell.count_faces())   # 4 4

for face in cell.faces():
    print(face.id, [edge.org.id for edge in face.edges()])
```

`Cell.make()` (in `quadcell.cell`) returns the smallest consistent cell. It
has one vertex, one looping edge and two faces. The operators in
`quadcell.euler` change a cell:

- `make_vertex_edge(cell, vertex, left, right)` splits `vertex` between the
  faces `left` and `right`. It returns the new edge. The edge's destination
  is a new vertex at the same position as `vertex`.
- `kill_vertex_edge(cell, edge)` deletes `edge` and its destination vertex.
- `make_face_edge(cell, face, org, dest)` splits `face` between two vertices
  on its boundary. It returns the new edge, which has a new face on its
  right.
- `kill_face_edge(cell, edge)` deletes `edge` and its right face.
- `make_tetrahedron()` returns a cell with the topology of a tetrahedron.
  All of its vertices are at the origin.

An operator raises `TopologyError`, a subclass of `ValueError`, in these
cases:

- it is given a vertex or face that has no edges;
- the faces are not around the vertex;
- the vertices are not on the face.

### Elements

- `Vertex` (in `quadcell.vertex`) has these members:
  - `pos`, a `Vec3` named tuple `(x, y, z)`;
  - `id`, which must be positive;
  - `cell`, `edge` and `data`, a free slot for your own use;
  - `edges()`, which yields the outgoing edges counterclockwise.
- `Face` (in `quadcell.face`) has these members:
  - `id`, `cell`, `edge` and `data`;
  - `edges()`, which yields the bounding edges counterclockwise.
- `Edge` (in `quadcell.edge`) has these members:
  - the properties `org`, `dest`, `left`, `right`, `id` and `data`;
  - the navigation methods `rot`, `inv_rot`, `sym`, `onext`, `oprev`,
    `dnext`, `dprev`, `lnext`, `lprev`, `rnext` and `rprev`;
  - the low-level operations `Edge.make()` and `Edge.splice(a, b)`.
- `Cell` has these members:
  - `vertices()` and `faces()`, which iterate in reverse order of
    insertion. The current element may be removed while you iterate.
  - `count_vertices()` and `count_faces()`;
  - `kill()`, which removes every vertex and face from the cell.

## Wavefront OBJ files

`quadcell.obj` reads and writes a subset of the OBJ format:

```
# comment
v <X> <Y> <Z>
f <V1> <V2> ... <VN>
```

```python
from quadcell.obj import parse_cell, read_cell, write_cell, format_cell, clone_cell

cell = read_cell("cube.obj")
write_cell(cell, "copy.obj")
text = format_cell(cell)
twin = clone_cell(cell)
same = parse_cell(text)
```

- `parse_cell` accepts a string or any iterable of lines.
- `format_cell`, `write_cell` and `clone_cell` renumber the vertices of the
  cell they are given, starting from 1.
- Coordinates are written in `%g` form.

`ObjFormatError`, a subclass of `ValueError`, is raised for input that
cannot be read. That includes:

- an unknown token;
- a bad coordinate or vertex index;
- an index with no matching vertex;
- an unused vertex;
- a vertex not surrounded by faces;
- a repeated face;
- a polyhedron that is not connected.

### What is not supported

Only `v`, `f` and `#` lines are understood. Normals, texture coordinates,
groups, materials and `v/vt/vn` style face indices are rejected with
`ObjFormatError`. So are negative (relative) indices. Open surfaces cannot
be read; every model must be a single closed polyhedron.

## Command line

```
quadcell                       # print the faces and vertices of a tetrahedron
quadcell model.obj             # read a model and print its topology
quadcell model.obj out.obj     # read it, print it, and write it back out
```

For each face the command prints the destination vertex IDs of the face's
edges. For each vertex it prints the left face IDs of the vertex's outgoing
edges. The same listing is available from `quadcell.cli.describe_cell(cell)`.

The command exits with status 1 in these cases:

- more than two arguments are given;
- a file cannot be read or written;
- the OBJ input is invalid.