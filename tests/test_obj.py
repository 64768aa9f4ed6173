import pytest

from quadcell.cell import Cell
from quadcell.euler import make_tetrahedron
from quadcell.obj import (
    ObjFormatError,
    clone_cell,
    format_cell,
    parse_cell,
    read_cell,
    write_cell,
)

TETRA_POINTS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]
TETRA_FACES = [[1, 3, 2], [1, 2, 4], [1, 4, 3], [2, 3, 4]]

CUBE_POINTS = [
    (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0),
]
CUBE_FACES = [
    [1, 4, 3, 2], [5, 6, 7, 8], [1, 2, 6, 5],
    [3, 4, 8, 7], [1, 5, 8, 4], [2, 3, 7, 6],
]


def _obj_text(points, faces):
    lines = [f"v {x} {y} {z}" for x, y, z in points]
    lines += ["f " + " ".join(str(n) for n in face) for face in faces]
    return "\n".join(lines) + "\n"


def _normalize(cycle):
    cycle = list(cycle)
    k = cycle.index(min(cycle))
    return tuple(cycle[k:] + cycle[:k])


def _face_cycles_by_id(cell):
    return {
        face.id: _normalize([edge.org.id for edge in face.edges()])
        for face in cell.faces()
    }


def _position_cycles(cell):
    return sorted(
        _normalize([tuple(edge.org.pos) for edge in face.edges()])
        for face in cell.faces()
    )


def _edge_count(cell):
    return sum(len(list(face.edges())) for face in cell.faces()) // 2


@pytest.mark.parametrize(
    "points, faces", [(TETRA_POINTS, TETRA_FACES), (CUBE_POINTS, CUBE_FACES)]
)
def test_parse_preserves_faces_and_ids(points, faces):
    cell = parse_cell(_obj_text(points, faces))
    assert cell.count_vertices() == len(points)
    assert cell.count_faces() == len(faces)
    expected = {number: _normalize(face) for number, face in enumerate(faces, 1)}
    assert _face_cycles_by_id(cell) == expected


@pytest.mark.parametrize(
    "points, faces", [(TETRA_POINTS, TETRA_FACES), (CUBE_POINTS, CUBE_FACES)]
)
def test_parse_positions_and_euler_characteristic(points, faces):
    cell = parse_cell(_obj_text(points, faces))
    positions = {vertex.id: tuple(vertex.pos) for vertex in cell.vertices()}
    assert positions == {n: p for n, p in enumerate(points, 1)}
    v, e, f = cell.count_vertices(), _edge_count(cell), cell.count_faces()
    assert v - e + f == 2


def test_parse_edges_have_face_on_left_and_data_cleared():
    cell = parse_cell(_obj_text(CUBE_POINTS, CUBE_FACES))
    for face in cell.faces():
        assert all(edge.left is face for edge in face.edges())
        assert face.data is None


def test_parse_accepts_comments_and_blank_lines():
    text = "# header\n\n" + _obj_text(TETRA_POINTS, TETRA_FACES) + "# end\n"
    cell = parse_cell(text.splitlines())
    assert (cell.count_vertices(), cell.count_faces()) == (4, 4)


def test_parse_rejects_unknown_token():
    with pytest.raises(ObjFormatError, match=r"hit token \(vt\)"):
        parse_cell("vt 0 0\n")


def test_parse_rejects_empty_input():
    with pytest.raises(ObjFormatError):
        parse_cell("")


def test_parse_rejects_open_surface():
    text = _obj_text(TETRA_POINTS[:3], [[1, 2, 3]])
    with pytest.raises(ObjFormatError, match="not surrounded by polygons"):
        parse_cell(text)


def test_parse_rejects_unused_vertex():
    text = _obj_text(TETRA_POINTS + [(5.0, 5.0, 5.0)], TETRA_FACES)
    with pytest.raises(ObjFormatError, match="unused vertex 5"):
        parse_cell(text)


def test_parse_rejects_unknown_vertex_index():
    text = _obj_text(TETRA_POINTS, [[1, 2, 9]])
    with pytest.raises(ObjFormatError):
        parse_cell(text)


def test_parse_rejects_disconnected_polyhedron():
    points = TETRA_POINTS + [(x + 5.0, y, z) for x, y, z in TETRA_POINTS]
    faces = TETRA_FACES + [[n + 4 for n in face] for face in TETRA_FACES]
    with pytest.raises(ObjFormatError):
        parse_cell(_obj_text(points, faces))


def test_format_degenerate_cell():
    assert format_cell(Cell.make()) == "# 1 vertices\nv 0 0 0\n# 2 faces\nf 1\nf 1\n"


def test_format_tetrahedron_header_and_vertices():
    lines = format_cell(make_tetrahedron()).splitlines()
    assert lines[0] == "# 4 vertices"
    assert lines[1:5] == ["v 0 0 0"] * 4
    assert lines[5] == "# 4 faces"
    assert all(len(line.split()) == 4 for line in lines[6:])


def test_format_writes_coordinates_compactly():
    points = [(0.5, -2.0, 3.0)] + TETRA_POINTS[1:]
    text = format_cell(parse_cell(_obj_text(points, TETRA_FACES)))
    assert "v 0.5 -2 3" in text.splitlines()


def test_format_then_parse_round_trip():
    cell = parse_cell(_obj_text(CUBE_POINTS, CUBE_FACES))
    again = parse_cell(format_cell(cell))
    assert again.count_vertices() == cell.count_vertices()
    assert again.count_faces() == cell.count_faces()
    assert _position_cycles(again) == _position_cycles(cell)


def test_write_and_read_file(tmp_path):
    cell = parse_cell(_obj_text(TETRA_POINTS, TETRA_FACES))
    path = tmp_path / "tetra.obj"
    write_cell(cell, path)
    assert path.read_text(encoding="utf-8") == format_cell(cell)
    loaded = read_cell(path)
    assert _position_cycles(loaded) == _position_cycles(cell)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_cell(tmp_path / "missing.obj")


def test_clone_cube_matches_original():
    cell = parse_cell(_obj_text(CUBE_POINTS, CUBE_FACES))
    copy = clone_cell(cell)
    assert copy is not cell
    assert copy.count_vertices() == cell.count_vertices()
    assert copy.count_faces() == cell.count_faces()
    assert _position_cycles(copy) == _position_cycles(cell)
    original_vertices = set(cell.vertices())
    assert original_vertices.isdisjoint(set(copy.vertices()))


def test_clone_renumbers_source_vertices():
    cell = make_tetrahedron()
    clone_cell(cell)
    assert sorted(vertex.id for vertex in cell.vertices()) == [1, 2, 3, 4]


def test_clone_tetrahedron_topology():
    copy = clone_cell(make_tetrahedron())
    assert (copy.count_vertices(), copy.count_faces()) == (4, 4)
    assert all(len(list(face.edges())) == 3 for face in copy.faces())
    assert copy.count_vertices() - _edge_count(copy) + copy.count_faces() == 2