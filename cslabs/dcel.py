"""A doubly connected edge list for planar subdivisions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from cslabs.point import Point


@dataclass(eq=False)
class Vertex:
    """A vertex holding its location and one half-edge leaving it."""

    point: Point
    leaving: HalfEdge | None = field(default=None, repr=False)

    def next_leaving(self, first: HalfEdge) -> HalfEdge:
        """Return the half-edge leaving this vertex after ``first``."""
        return first.twin.next


@dataclass(eq=False)
class Face:
    """A face holding one half-edge of its boundary."""

    edge: HalfEdge | None = field(default=None, repr=False)


@dataclass(eq=False)
class HalfEdge:
    """A directed edge; its twin runs the other way."""

    origin: Vertex
    face: Face | None = field(default=None, repr=False)
    twin: HalfEdge | None = field(default=None, repr=False)
    next: HalfEdge | None = field(default=None, repr=False)

    def destination(self) -> Vertex:
        """Return the vertex this half-edge points to."""
        return self.next.origin


def _cycle(start: HalfEdge | None) -> Iterator[HalfEdge]:
    if start is None:
        return
    current = start
    while True:
        yield current
        current = current.next
        if current is start:
            return


def _leaving_edges(vertex: Vertex) -> Iterator[HalfEdge]:
    first = vertex.leaving
    if first is None:
        return
    current = first
    while True:
        yield current
        current = vertex.next_leaving(current)
        if current is first:
            return


@dataclass
class DCEL:
    """Vertices, faces and half-edges of a planar subdivision."""

    vertices: list[Vertex] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    edges: list[HalfEdge] = field(default_factory=list)

    def boundary_vertices(self, face: Face) -> list[Vertex]:
        """Return the vertices around ``face`` in boundary order."""
        return [edge.origin for edge in _cycle(face.edge)]

    def adjacent_faces(self, face: Face) -> list[Face]:
        """Return the distinct faces across the boundary of ``face``."""
        adjacent: list[Face] = []
        seen: set[int] = set()
        for edge in _cycle(face.edge):
            other = edge.twin.face
            if id(other) not in seen:
                seen.add(id(other))
                adjacent.append(other)
        return adjacent

    def create_vertex(self, x: float, y: float) -> Vertex:
        """Add and return an isolated vertex at ``(x, y)``."""
        vertex = Vertex(Point(x, y))
        self.vertices.append(vertex)
        return vertex

    def _split_site(self, a: Vertex, b: Vertex) -> tuple[Face, HalfEdge, HalfEdge]:
        if a is b:
            raise ValueError("cannot join a vertex to itself")
        for face in self.faces:
            from_a = from_b = None
            for edge in _cycle(face.edge):
                if edge.origin is a:
                    from_a = edge
                elif edge.origin is b:
                    from_b = edge
            if from_a is not None and from_b is not None:
                return face, from_a, from_b
        raise ValueError("vertices do not share a face")

    @staticmethod
    def _previous(edge: HalfEdge) -> HalfEdge:
        return next(e for e in _cycle(edge) if e.next is edge)

    def create_edge(self, a: Vertex, b: Vertex) -> HalfEdge:
        """Join two vertices of a common face, splitting it; return the a-to-b half."""
        if self.is_connected(a, b):
            raise ValueError("vertices are already connected")
        old_face, from_a, from_b = self._split_site(a, b)
        before_a = self._previous(from_a)
        before_b = self._previous(from_b)

        new_face = Face()
        a_to_b = HalfEdge(a, new_face)
        b_to_a = HalfEdge(b, old_face)
        a_to_b.twin, b_to_a.twin = b_to_a, a_to_b

        a_to_b.next = from_b
        before_a.next = a_to_b
        b_to_a.next = from_a
        before_b.next = b_to_a

        for edge in _cycle(a_to_b):
            edge.face = new_face
        new_face.edge = a_to_b
        old_face.edge = b_to_a
        if a.leaving is None:
            a.leaving = a_to_b
        if b.leaving is None:
            b.leaving = b_to_a

        self.edges.extend((a_to_b, b_to_a))
        self.faces.append(new_face)
        return a_to_b

    def insert_vertex(self, a: Vertex, b: Vertex, point: Point) -> Vertex:
        """Split a face shared by ``a`` and ``b`` with a path a-v-b through a new vertex v."""
        old_face, from_a, from_b = self._split_site(a, b)
        before_a = self._previous(from_a)
        before_b = self._previous(from_b)

        vertex = Vertex(point)
        new_face = Face()
        a_to_v = HalfEdge(a, old_face)
        v_to_b = HalfEdge(vertex, old_face)
        b_to_v = HalfEdge(b, new_face)
        v_to_a = HalfEdge(vertex, new_face)
        a_to_v.twin, v_to_a.twin = v_to_a, a_to_v
        v_to_b.twin, b_to_v.twin = b_to_v, v_to_b

        a_to_v.next = v_to_b
        v_to_b.next = from_b
        before_a.next = a_to_v
        b_to_v.next = v_to_a
        v_to_a.next = from_a
        before_b.next = b_to_v

        for edge in _cycle(b_to_v):
            edge.face = new_face
        old_face.edge = a_to_v
        new_face.edge = b_to_v
        vertex.leaving = v_to_b

        self.edges.extend((a_to_v, b_to_v, v_to_a, v_to_b))
        self.vertices.append(vertex)
        self.faces.append(new_face)
        return vertex

    def find_faces(self, vertex: Vertex) -> list[Face]:
        """Return the faces around ``vertex``, one per leaving half-edge."""
        return [edge.face for edge in _leaving_edges(vertex)]

    def is_connected(self, a: Vertex, b: Vertex) -> bool:
        """Return True if an edge joins ``a`` and ``b``."""
        return any(edge.destination() is b for edge in _leaving_edges(a))

    def find_incident_edge(self, vertex: Vertex, face: Face) -> HalfEdge | None:
        """Return the half-edge from ``vertex`` bounding ``face``, or None."""
        return next(
            (e for e in self.edges if e.origin is vertex and e.face is face),
            None,
        )


def build_polygon(points: Iterable[Point | tuple[float, float]]) -> DCEL:
    """Build a simple polygon: faces are [inside, outside], edges inside cycle first."""
    vertices = [Vertex(p if isinstance(p, Point) else Point(*p)) for p in points]
    if len(vertices) < 3:
        raise ValueError("a polygon needs at least three points")

    inner_face = Face()
    outer_face = Face()
    inner = [HalfEdge(v, inner_face) for v in vertices]
    count = len(vertices)
    outer = [HalfEdge(vertices[(i + 1) % count], outer_face) for i in range(count)]

    for i, (forward, backward) in enumerate(zip(inner, outer)):
        forward.twin, backward.twin = backward, forward
        forward.next = inner[(i + 1) % count]
        backward.next = outer[i - 1]
        vertices[i].leaving = forward

    inner_face.edge = inner[0]
    outer_face.edge = outer[0]
    return DCEL(
        vertices=vertices,
        faces=[inner_face, outer_face],
        edges=inner + outer,
    )