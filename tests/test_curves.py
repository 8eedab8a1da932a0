import math

import pytest

from patiengine.curves import (
    catmull_rom_interpolation,
    catmull_rom_position,
    cross,
    dot,
    length,
    lerp,
    normalize,
    slerp,
    transform_normal,
)
from patiengine.matrix import make_affine, make_rotate_y, make_translate
from patiengine.vector import Vector2, Vector3


def assert_vector_close(actual, expected, tol=1e-9):
    assert list(actual) == pytest.approx(list(expected), abs=tol)


A = Vector3(1.0, -2.0, 3.0)
B = Vector3(-4.0, 0.5, 2.0)


def test_transform_normal_ignores_translation():
    assert transform_normal(A, make_translate(Vector3(5, 6, 7))) == A


def test_transform_normal_preserves_length_under_rotation():
    m = make_affine(Vector3(1, 1, 1), Vector3(0.3, 1.2, -0.4), Vector3(9, 9, 9))
    assert length(transform_normal(A, m)) == pytest.approx(length(A))


def test_transform_normal_matches_rotation_of_direction():
    assert_vector_close(
        transform_normal(A, make_rotate_y(math.pi)), transform_normal(-A, make_rotate_y(0.0))
        * Vector3(1, -1, 1)
    )


def test_length_of_vector2():
    assert length(Vector2(3.0, 4.0)) == pytest.approx(5.0)


def test_length_squared_equals_self_dot():
    assert length(A) ** 2 == pytest.approx(dot(A, A))


def test_normalize_gives_unit_length_in_same_direction():
    n = normalize(A)
    assert length(n) == pytest.approx(1.0)
    assert_vector_close(cross(n, A), Vector3())
    assert dot(n, A) > 0


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vector3())


def test_cross_of_axes():
    assert cross(Vector3(1, 0, 0), Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    c = cross(A, B)
    assert dot(c, A) == pytest.approx(0.0, abs=1e-9)
    assert dot(c, B) == pytest.approx(0.0, abs=1e-9)
    assert cross(B, A) == -c


def test_lerp_endpoints_for_numbers_and_vectors():
    assert lerp(2.5, 7.0, 0.0) == 2.5
    assert lerp(2.5, 7.0, 1.0) == 7.0
    assert_vector_close(lerp(A, B, 0.0), A)
    assert_vector_close(lerp(A, B, 1.0), B)


def test_slerp_endpoints():
    assert_vector_close(slerp(A, B, 0.0), A)
    assert_vector_close(slerp(A, B, 1.0), B)


def test_slerp_of_parallel_vectors_is_lerp():
    v1 = Vector3(1, 0, 0)
    v2 = Vector3(2, 0, 0)
    assert_vector_close(slerp(v1, v2, 0.5), lerp(v1, v2, 0.5))


def test_slerp_interpolates_length_and_bisects_angle():
    v1 = Vector3(2, 0, 0)
    v2 = Vector3(0, 3, 0)
    mid = slerp(v1, v2, 0.5)
    assert length(mid) == pytest.approx(lerp(length(v1), length(v2), 0.5))
    assert mid.x == pytest.approx(mid.y)
    assert mid.z == pytest.approx(0.0)


POINTS = [
    Vector3(0, 0, 0),
    Vector3(1, 2, 0),
    Vector3(3, 1, 1),
    Vector3(4, -1, 2),
    Vector3(6, 0, 0),
]


def test_catmull_rom_interpolation_passes_through_inner_points():
    p0, p1, p2, p3 = POINTS[:4]
    assert_vector_close(catmull_rom_interpolation(p0, p1, p2, p3, 0.0), p1)
    assert_vector_close(catmull_rom_interpolation(p0, p1, p2, p3, 1.0), p2)


def test_catmull_rom_position_starts_at_first_point():
    assert_vector_close(catmull_rom_position(POINTS, 0.0), POINTS[0])


def test_catmull_rom_position_hits_control_point_at_segment_boundary():
    assert_vector_close(catmull_rom_position(POINTS, 0.5), POINTS[2])


def test_catmull_rom_position_stays_on_line_for_collinear_points():
    line = [Vector3(float(i), 0, 0) for i in range(6)]
    for t in (0.05, 0.3, 0.55, 0.9):
        p = catmull_rom_position(line, t)
        assert p.y == pytest.approx(0.0)
        assert p.z == pytest.approx(0.0)
        assert 0.0 <= p.x <= 5.0


def test_catmull_rom_position_needs_four_points():
    with pytest.raises(ValueError):
        catmull_rom_position(POINTS[:3], 0.5)