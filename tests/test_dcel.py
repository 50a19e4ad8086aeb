import pytest

from cslabs.dcel import DCEL, Face, HalfEdge, Vertex, build_polygon
from cslabs.point import Point

HEXAGON = [(1, 4), (1, 8), (4, 10), (7, 8), (7, 4), (4, 2)]


@pytest.fixture
def hexagon():
    return build_polygon(HEXAGON)


def _check_consistent(dcel):
    for edge in dcel.edges:
        assert edge.twin.twin is edge
        assert edge.twin.origin is edge.destination()
        assert edge.next.face is edge.face
    for face in dcel.faces:
        edge = face.edge
        assert edge.face is face


def test_build_polygon_points(hexagon):
    assert [v.point for v in hexagon.vertices] == [Point(x, y) for x, y in HEXAGON]
    assert len(hexagon.edges) == 2 * len(HEXAGON)
    _check_consistent(hexagon)


def test_build_polygon_too_few_points():
    with pytest.raises(ValueError):
        build_polygon([(0, 0), (1, 1)])


def test_boundary_vertices_inner(hexagon):
    inner = hexagon.faces[0]
    assert hexagon.boundary_vertices(inner) == hexagon.vertices


def test_boundary_vertices_outer_runs_backwards(hexagon):
    outer = hexagon.faces[1]
    boundary = hexagon.boundary_vertices(outer)
    assert sorted(map(id, boundary)) == sorted(map(id, hexagon.vertices))
    assert boundary[0] is hexagon.vertices[1]
    assert boundary[1] is hexagon.vertices[0]
    assert boundary[2] is hexagon.vertices[-1]


def test_adjacent_faces(hexagon):
    inner, outer = hexagon.faces
    assert hexagon.adjacent_faces(inner) == [outer]
    assert hexagon.adjacent_faces(outer) == [inner]


def test_find_faces(hexagon):
    inner, outer = hexagon.faces
    faces = hexagon.find_faces(hexagon.vertices[0])
    assert faces == [inner, outer]


def test_is_connected(hexagon):
    v = hexagon.vertices
    assert hexagon.is_connected(v[0], v[1])
    assert hexagon.is_connected(v[1], v[0])
    assert hexagon.is_connected(v[0], v[5])
    assert not hexagon.is_connected(v[0], v[2])


def test_destination_and_next_leaving(hexagon):
    v = hexagon.vertices
    first = v[0].leaving
    assert first.destination() is v[1]
    second = v[0].next_leaving(first)
    assert second.origin is v[0]
    assert second.destination() is v[5]
    assert v[0].next_leaving(second) is first


def test_find_incident_edge(hexagon):
    inner, outer = hexagon.faces
    v = hexagon.vertices[2]
    edge = hexagon.find_incident_edge(v, inner)
    assert edge.origin is v and edge.face is inner
    other = hexagon.find_incident_edge(v, outer)
    assert other.origin is v and other.face is outer
    assert hexagon.find_incident_edge(v, Face()) is None


def test_create_vertex_isolated():
    dcel = DCEL()
    v = dcel.create_vertex(4, 6)
    assert dcel.vertices == [v]
    assert v.point == Point(4, 6)
    assert v.leaving is None
    assert dcel.find_faces(v) == []


def test_create_edge_splits_face(hexagon):
    v = hexagon.vertices
    edge = hexagon.create_edge(v[0], v[3])
    assert isinstance(edge, HalfEdge)
    assert edge.origin is v[0] and edge.destination() is v[3]
    assert hexagon.is_connected(v[0], v[3])
    assert len(hexagon.faces) == 3
    assert len(hexagon.edges) == 14
    _check_consistent(hexagon)

    old_face = edge.twin.face
    new_face = edge.face
    assert new_face is hexagon.faces[-1]
    new_boundary = hexagon.boundary_vertices(new_face)
    old_boundary = hexagon.boundary_vertices(old_face)
    assert len(new_boundary) + len(old_boundary) == len(v) + 2
    assert {id(x) for x in new_boundary + old_boundary} == {id(x) for x in v}
    assert new_face in hexagon.adjacent_faces(old_face)


def test_create_edge_euler(hexagon):
    v = hexagon.vertices
    hexagon.create_edge(v[1], v[4])
    count_v = len(hexagon.vertices)
    count_e = len(hexagon.edges) // 2
    count_f = len(hexagon.faces)
    assert count_v - count_e + count_f == 2


def test_create_edge_already_connected(hexagon):
    v = hexagon.vertices
    with pytest.raises(ValueError):
        hexagon.create_edge(v[0], v[1])


def test_create_edge_no_shared_face(hexagon):
    lone = hexagon.create_vertex(20, 20)
    with pytest.raises(ValueError):
        hexagon.create_edge(hexagon.vertices[0], lone)


def test_create_edge_same_vertex(hexagon):
    v = hexagon.vertices[0]
    with pytest.raises(ValueError):
        hexagon.create_edge(v, v)


def test_insert_vertex(hexagon):
    v = hexagon.vertices
    middle = hexagon.insert_vertex(v[0], v[3], Point(4, 6))
    assert middle.point == Point(4, 6)
    assert hexagon.vertices[-1] is middle
    assert len(hexagon.vertices) == 7
    assert len(hexagon.edges) == 16
    assert len(hexagon.faces) == 3
    assert hexagon.is_connected(middle, v[0])
    assert hexagon.is_connected(middle, v[3])
    assert not hexagon.is_connected(v[0], v[3])
    _check_consistent(hexagon)

    around = hexagon.find_faces(middle)
    assert len(around) == 2
    for face in around:
        assert middle in hexagon.boundary_vertices(face)
    count_e = len(hexagon.edges) // 2
    assert len(hexagon.vertices) - count_e + len(hexagon.faces) == 2


def test_insert_vertex_no_shared_face(hexagon):
    lone = hexagon.create_vertex(20, 20)
    with pytest.raises(ValueError):
        hexagon.insert_vertex(lone, hexagon.vertices[0], Point(10, 10))


def test_vertex_identity_not_value():
    a = Vertex(Point(1, 1))
    b = Vertex(Point(1, 1))
    assert a != b
    assert a == a