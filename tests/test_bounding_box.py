import pytest

from virtualrig.bounding_box import BoundingBox
from virtualrig.vector3 import Vector3


def test_corners_are_stored():
    box = BoundingBox((0, 1, 2), (3, 4, 5))
    assert box.min == Vector3(0, 1, 2)
    assert box.max == Vector3(3, 4, 5)


def test_inverted_corners_rejected():
    with pytest.raises(ValueError):
        BoundingBox((1, 0, 0), (0, 1, 1))


def test_set_rejects_inverted_and_keeps_old():
    box = BoundingBox((0, 0, 0), (1, 1, 1))
    with pytest.raises(ValueError):
        box.set((0, 2, 0), (1, 1, 1))
    assert box.max == Vector3(1, 1, 1)


def test_center():
    box = BoundingBox((0, 0, 0), (2, 4, 6))
    assert box.center() == Vector3(1, 2, 3)


def test_center_of_point_box_is_the_point():
    box = BoundingBox((5, -3, 2), (5, -3, 2))
    assert box.center() == Vector3(5, -3, 2)


def test_max_dim():
    box = BoundingBox((0, 0, 0), (1, 5, 2))
    assert box.max_dim() == 5


def test_extend_contains_point():
    box = BoundingBox((0, 0, 0), (1, 1, 1))
    box.extend((-2, 0.5, 4))
    assert box.min == Vector3(-2, 0, 0)
    assert box.max == Vector3(1, 1, 4)


def test_extend_inside_point_changes_nothing():
    box = BoundingBox((0, 0, 0), (1, 1, 1))
    box.extend((0.5, 0.5, 0.5))
    assert (box.min, box.max) == (Vector3(0, 0, 0), Vector3(1, 1, 1))


def test_extend_box():
    box = BoundingBox((0, 0, 0), (1, 1, 1))
    box.extend_box(BoundingBox((-1, 2, 0), (0, 3, 7)))
    assert box.min == Vector3(-1, 0, 0)
    assert box.max == Vector3(1, 3, 7)


def test_extend_box_none():
    box = BoundingBox((0, 0, 0), (1, 1, 1))
    with pytest.raises(ValueError):
        box.extend_box(None)


def test_corners_are_copies():
    corner = Vector3(0, 0, 0)
    box = BoundingBox(corner, (1, 1, 1))
    corner.x = -10
    assert box.min.x == 0


def test_edges_are_axis_aligned_and_cover_corners():
    box = BoundingBox((0, 0, 0), (1, 2, 3))
    edges = box.edges()
    assert len(edges) == 12
    corners = set()
    for a, b in edges:
        differing = sum(1 for p, q in zip(a, b) if p != q)
        assert differing == 1
        corners.add(tuple(a))
        corners.add(tuple(b))
    assert len(corners) == 8
    assert {(0.0, 0.0, 0.0), (1.0, 2.0, 3.0)} <= corners