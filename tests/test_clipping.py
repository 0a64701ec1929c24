import pytest

from softraster import clipping
from softraster.color import LinearColor
from softraster.vector2 import Vector2
from softraster.vector4 import Vector4
from softraster.vertex import Vertex3D


def _v(x, y, z, w, color=LinearColor.WHITE):
    return Vertex3D(Vector4(x, y, z, w), color, Vector2.ZERO)


W0 = clipping.PerspectiveTest(clipping.test_w0, clipping.edge_w0)

INSIDE = Vector4(0.0, 0.0, 0.0, 1.0)

PLANES = [
    (clipping.test_w0, clipping.edge_w0, Vector4(0.0, 0.0, 0.0, -1.0), lambda p: p.w),
    (clipping.test_ny, clipping.edge_ny, Vector4(0.0, -3.0, 0.0, 1.0), lambda p: p.w + p.y),
    (clipping.test_py, clipping.edge_py, Vector4(0.0, 3.0, 0.0, 1.0), lambda p: p.w - p.y),
    (clipping.test_nx, clipping.edge_nx, Vector4(-3.0, 0.0, 0.0, 1.0), lambda p: p.w + p.x),
    (clipping.test_px, clipping.edge_px, Vector4(3.0, 0.0, 0.0, 1.0), lambda p: p.w - p.x),
    (clipping.test_far, clipping.edge_far, Vector4(0.0, 0.0, 3.0, 1.0), lambda p: p.w - p.z),
    (clipping.test_near, clipping.edge_near, Vector4(0.0, 0.0, -3.0, 1.0), lambda p: p.w + p.z),
]


@pytest.mark.parametrize("flag, edge, outside, plane_value", PLANES)
def test_edge_vertex_lies_on_plane(flag, edge, outside, plane_value):
    start = Vertex3D(INSIDE)
    end = Vertex3D(outside)
    assert not flag(start)
    assert flag(end)
    clipped = edge(start, end)
    assert plane_value(clipped.position) == pytest.approx(0.0, abs=1e-9)
    assert not flag(clipped)


def test_edge_interpolates_attributes():
    start = _v(0.0, 0.0, 0.0, 1.0, LinearColor.WHITE)
    end = _v(0.0, 0.0, 0.0, -1.0, LinearColor.BLACK)
    clipped = clipping.edge_w0(start, end)
    assert clipped == start * 0.5 + end * 0.5


def test_triangle_inside_is_unchanged():
    triangle = [_v(0, 0, 0, 1), _v(0.5, 0, 0, 1), _v(0, 0.5, 0, 1)]
    assert W0.clip_triangles(triangle) == triangle


def test_triangle_fully_outside_is_removed():
    triangle = [_v(0, 0, 0, -1), _v(1, 0, 0, -2), _v(0, 1, 0, -1)]
    keep = [_v(0, 0, 0, 1), _v(1, 0, 0, 1), _v(0, 1, 0, 1)]
    assert W0.clip_triangles(triangle + keep) == keep


def test_one_outside_vertex_splits_triangle():
    a, b, c = _v(0, 0, 0, 1), _v(1, 0, 0, 1), _v(0, 1, 0, -1)
    result = W0.clip_triangles([a, b, c])
    assert len(result) == 6
    assert all(v.position.w >= -1e-9 for v in result)
    first = result[:3]
    second = result[3:]
    assert first[1:] == [a, b]
    assert first[0] == clipping.edge_w0(c, a)
    assert second == [first[0], b, clipping.edge_w0(c, b)]


def test_two_outside_vertices_shrink_triangle():
    a, b, c = _v(0, 0, 0, -1), _v(1, 0, 0, 1), _v(0, 1, 0, -1)
    result = W0.clip_triangles([a, b, c])
    assert len(result) == 3
    assert result[1] == b
    assert result[2] == clipping.edge_w0(b, c)
    assert result[0] == clipping.edge_w0(b, a)
    assert all(v.position.w >= -1e-9 for v in result)


def test_split_triangles_are_appended_after_originals():
    split = [_v(0, 0, 0, 1), _v(1, 0, 0, 1), _v(0, 1, 0, -1)]
    untouched = [_v(0, 0, 0, 2), _v(1, 0, 0, 2), _v(0, 1, 0, 2)]
    result = W0.clip_triangles(split + untouched)
    assert len(result) == 9
    assert result[3:6] == untouched
    assert result[6] == result[0]


def test_incomplete_triangle_is_kept():
    triangle = [_v(0, 0, 0, 1), _v(1, 0, 0, 1), _v(0, 1, 0, 1)]
    leftover = _v(5, 5, 5, -1)
    assert W0.clip_triangles(triangle + [leftover]) == triangle + [leftover]


def test_clip_does_not_modify_input():
    vertices = [_v(0, 0, 0, 1), _v(1, 0, 0, 1), _v(0, 1, 0, -1)]
    original = list(vertices)
    W0.clip_triangles(vertices)
    assert vertices == original


def test_standard_tests_cover_seven_planes():
    tests = clipping.standard_tests()
    assert len(tests) == 7
    inside = Vertex3D(INSIDE)
    assert not any(t.clipping_test_func(inside) for t in tests)
    for _, _, outside, _ in PLANES:
        assert any(t.clipping_test_func(Vertex3D(outside)) for t in tests)


def test_standard_tests_clip_into_volume():
    triangle = [_v(0, 0, 0, 1), _v(3, 0, 0, 1), _v(0, 3, 0, 1)]
    result = triangle
    for test in clipping.standard_tests():
        result = test.clip_triangles(result)
    assert len(result) % 3 == 0
    assert result
    for vertex in result:
        p = vertex.position
        assert p.x <= p.w + 1e-9
        assert p.y <= p.w + 1e-9
        assert p.x >= -p.w - 1e-9
        assert p.y >= -p.w - 1e-9