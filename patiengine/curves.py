"""Vector helpers: lengths, products, interpolation and Catmull-Rom splines."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from patiengine.matrix import Matrix4x4
from patiengine.vector import Vector2, Vector3

_T = TypeVar("_T", float, Vector3)


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Apply the 3x3 part of ``m`` to a direction, ignoring translation."""
    rows = m.m
    return Vector3(
        v.x * rows[0][0] + v.y * rows[1][0] + v.z * rows[2][0],
        v.x * rows[0][1] + v.y * rows[1][1] + v.z * rows[2][1],
        v.x * rows[0][2] + v.y * rows[1][2] + v.z * rows[2][2],
    )


def length(v: Vector2 | Vector3) -> float:
    """Euclidean length of a 2D or 3D vector."""
    if isinstance(v, Vector2):
        return math.hypot(v.x, v.y)
    return math.hypot(v.x, v.y, v.z)


def normalize(v: Vector3) -> Vector3:
    """Unit vector in the direction of ``v``; a zero vector raises ZeroDivisionError."""
    return v / length(v)


def dot(v1: Vector3, v2: Vector3) -> float:
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def lerp(a: _T, b: _T, t: float) -> _T:
    """Linear interpolation between two numbers or two vectors."""
    return a + t * (b - a)


def slerp(v1: Vector3, v2: Vector3, t: float) -> Vector3:
    """Spherical interpolation of direction, linear interpolation of length."""
    n1 = normalize(v1)
    n2 = normalize(v2)
    cos_theta = max(min(dot(n1, n2), 1.0), -1.0)
    theta = math.acos(cos_theta)
    sin_theta = math.sin(theta)
    if sin_theta < 1.0e-5:
        direction = n1
    else:
        direction = (math.sin((1 - t) * theta) * n1 + math.sin(t * theta) * n2) / sin_theta
    return lerp(length(v1), length(v2), t) * direction


def catmull_rom_interpolation(
    p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3, t: float
) -> Vector3:
    """Point on the Catmull-Rom segment between ``p1`` (t=0) and ``p2`` (t=1)."""
    t2 = t * t
    t3 = t2 * t
    e3 = -p0 + 3 * p1 - 3 * p2 + p3
    e2 = 2 * p0 - 5 * p1 + 4 * p2 - p3
    e1 = -p0 + p2
    e0 = 2 * p1
    return 0.5 * (e3 * t3 + e2 * t2 + e1 * t + e0)


def catmull_rom_position(points: Sequence[Vector3], t: float) -> Vector3:
    """Point at parameter ``t`` in [0, 1] along a Catmull-Rom spline through ``points``."""
    if len(points) < 4:
        raise ValueError("at least four control points are required")
    division = len(points) - 1
    area_width = 1.0 / division
    local_t = min(max(math.fmod(t, area_width) * division, 0.0), 1.0)

    index = min(max(int(t / area_width), 0), division - 1)
    index0 = index - 1 if index > 0 else index
    index2 = index + 1
    index3 = index + 2 if index + 2 < len(points) else index2
    return catmull_rom_interpolation(
        points[index0], points[index], points[index2], points[index3], local_t
    )