import pytest

from virtualrig.containers import Bag
from virtualrig.halfedge import EdgeVertex, PEdge, ParticleEdge, VertexParent
from virtualrig.vector3 import Vector3


class _Tri:
    pass


def _triangle(a, b, c):
    tri = _Tri()
    edges = [ParticleEdge(v, tri) for v in (a, b, c)]
    for e, nxt in zip(edges, edges[1:] + edges[:1]):
        e.set_next(nxt)
    return edges


@pytest.fixture
def verts():
    return [EdgeVertex(i, (i, i + 1, i + 2)) for i in (3, 7, 5)]


def test_vertex_accessors():
    v = EdgeVertex(4, (1, 2, 3))
    assert (v.index, v.x, v.y, v.z) == (4, 1, 2, 3)
    v.set((9, 8, 7))
    assert v.position == Vector3(9, 8, 7)


def test_pedge_equality_and_order():
    assert PEdge(1, 2) == PEdge(1, 2)
    assert PEdge(1, 5) < PEdge(2, 0)
    assert PEdge(1, 2) < PEdge(1, 3)
    assert sorted([PEdge(2, 1), PEdge(1, 9), PEdge(1, 2)]) == [
        PEdge(1, 2), PEdge(1, 9), PEdge(2, 1)
    ]


def test_endpoints(verts):
    e0, e1, e2 = _triangle(*verts)
    assert e0.endpoint(0) is verts[0]
    assert e0.endpoint(1) is verts[2]
    assert e1.endpoint(1) is verts[0]
    with pytest.raises(IndexError):
        e0.endpoint(2)


def test_extract_func(verts):
    e0, e1, _ = _triangle(*verts)
    assert ParticleEdge.extract_func(e0) == (3, 5, 0)
    assert ParticleEdge.extract_func(e1) == (7, 3, 0)


def test_extract_without_next(verts):
    edge = ParticleEdge(verts[0], _Tri())
    with pytest.raises(ValueError):
        ParticleEdge.extract_func(edge)


def test_edges_in_bag(verts):
    edges = _triangle(*verts)
    bag = Bag(ParticleEdge.extract_func)
    for e in edges:
        bag.add(e)
    assert len(bag) == 3
    assert bag.get(3, 5) is edges[0]
    assert bag.get_reorder(5, 7) is edges[2]


def test_set_next_twice(verts):
    e0, e1, _ = _triangle(*verts)
    with pytest.raises(ValueError):
        e0.set_next(e1)


def test_set_next_other_triangle(verts):
    a = ParticleEdge(verts[0], _Tri())
    b = ParticleEdge(verts[1], _Tri())
    with pytest.raises(ValueError):
        a.set_next(b)


def test_opposite_pairing(verts):
    a = ParticleEdge(verts[0], _Tri())
    b = ParticleEdge(verts[1], _Tri())
    a.set_opposite(b)
    assert a.opposite is b and b.opposite is a
    c = ParticleEdge(verts[2], _Tri())
    with pytest.raises(ValueError):
        c.set_opposite(b)
    b.clear_opposite()
    assert a.opposite is None and b.opposite is None


def test_set_opposite_none(verts):
    with pytest.raises(ValueError):
        ParticleEdge(verts[0], _Tri()).set_opposite(None)


def test_vertex_parent_key_is_sorted(verts):
    parent = VertexParent(verts[1], verts[0], verts[2])
    assert VertexParent.extract_func(parent) == (3, 7, 0)
    assert parent.vertex is verts[2]


def test_vertex_parent_requires_distinct(verts):
    with pytest.raises(ValueError):
        VertexParent(verts[0], verts[0], verts[1])
    with pytest.raises(ValueError):
        VertexParent(verts[0], None, verts[1])


def test_vertex_parent_in_bag(verts):
    bag = Bag(VertexParent.extract_func)
    parent = VertexParent(verts[0], verts[1], verts[2])
    bag.add(parent)
    assert bag.get_reorder(7, 3) is parent