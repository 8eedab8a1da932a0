"""4x4 matrices in row-vector convention and the usual transform builders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from patiengine.vector import Vector3

_SIZE = 4


def _zero_rows() -> tuple[tuple[float, ...], ...]:
    return tuple((0.0,) * _SIZE for _ in range(_SIZE))


@dataclass(frozen=True)
class Matrix4x4:
    """An immutable 4x4 matrix; ``m[row][column]``."""

    m: tuple[tuple[float, ...], ...] = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.m)
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("a Matrix4x4 needs 4 rows of 4 values")
        object.__setattr__(self, "m", rows)

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return multiply(self, other)


def _build(entries: dict[tuple[int, int], float]) -> Matrix4x4:
    return Matrix4x4(
        tuple(
            tuple(entries.get((row, column), 0.0) for column in range(_SIZE))
            for row in range(_SIZE)
        )
    )


def add(matrix1: Matrix4x4, matrix2: Matrix4x4) -> Matrix4x4:
    """Element-wise sum."""
    return Matrix4x4(
        tuple(tuple(a + b for a, b in zip(r1, r2)) for r1, r2 in zip(matrix1.m, matrix2.m))
    )


def subtract(matrix1: Matrix4x4, matrix2: Matrix4x4) -> Matrix4x4:
    """Element-wise difference."""
    return Matrix4x4(
        tuple(tuple(a - b for a, b in zip(r1, r2)) for r1, r2 in zip(matrix1.m, matrix2.m))
    )


def multiply(matrix1: Matrix4x4, matrix2: Matrix4x4) -> Matrix4x4:
    """Matrix product ``matrix1 * matrix2``."""
    columns = tuple(zip(*matrix2.m))
    return Matrix4x4(
        tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in matrix1.m
        )
    )


def _det3(rows: list[tuple[float, ...]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(m: tuple[tuple[float, ...], ...], skip_row: int, skip_column: int) -> float:
    rows = [
        tuple(value for column, value in enumerate(row) if column != skip_column)
        for index, row in enumerate(m)
        if index != skip_row
    ]
    return _det3(rows)


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Inverse by the adjugate; raises ZeroDivisionError for a singular matrix."""
    rows = m.m
    determinant = sum(
        (-1) ** column * rows[0][column] * _minor(rows, 0, column) for column in range(_SIZE)
    )
    if determinant == 0.0:
        raise ZeroDivisionError("matrix is singular")
    return Matrix4x4(
        tuple(
            tuple((-1) ** (i + j) * _minor(rows, j, i) / determinant for j in range(_SIZE))
            for i in range(_SIZE)
        )
    )


def transpose(matrix: Matrix4x4) -> Matrix4x4:
    """Swap rows and columns."""
    return Matrix4x4(tuple(zip(*matrix.m)))


def make_identity() -> Matrix4x4:
    return _build({(i, i): 1.0 for i in range(_SIZE)})


def make_rotate_x(radian: float) -> Matrix4x4:
    c, s = math.cos(radian), math.sin(radian)
    return _build({(0, 0): 1.0, (3, 3): 1.0, (1, 1): c, (1, 2): s, (2, 1): -s, (2, 2): c})


def make_rotate_y(radian: float) -> Matrix4x4:
    c, s = math.cos(radian), math.sin(radian)
    return _build({(1, 1): 1.0, (3, 3): 1.0, (0, 0): c, (0, 2): -s, (2, 0): s, (2, 2): c})


def make_rotate_z(radian: float) -> Matrix4x4:
    c, s = math.cos(radian), math.sin(radian)
    return _build({(2, 2): 1.0, (3, 3): 1.0, (0, 0): c, (0, 1): s, (1, 0): -s, (1, 1): c})


def make_affine(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate about X, Y, Z, then translate."""
    rotation = multiply(
        make_rotate_x(rotate.x), multiply(make_rotate_y(rotate.y), make_rotate_z(rotate.z))
    ).m
    factors = (scale.x, scale.y, scale.z)
    rows = [
        tuple(value * factor for value in row[:3]) + (row[3],)
        for row, factor in zip(rotation[:3], factors)
    ]
    rows.append((translate.x, translate.y, translate.z, rotation[3][3]))
    return Matrix4x4(tuple(rows))


def make_perspective_fov(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Left-handed perspective projection mapping depth to [0, 1]."""
    cot = 1.0 / math.tan(fov_y / 2.0)
    depth = far_clip - near_clip
    return _build(
        {
            (0, 0): 1.0 / aspect_ratio * cot,
            (1, 1): cot,
            (2, 2): far_clip / depth,
            (2, 3): 1.0,
            (3, 2): (-near_clip * far_clip) / depth,
        }
    )


def make_orthographic(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Orthographic projection of the given box onto clip space."""
    return _build(
        {
            (0, 0): 2.0 / (right - left),
            (1, 1): 2.0 / (top - bottom),
            (2, 2): 1.0 / (far_clip - near_clip),
            (3, 0): (left + right) / (left - right),
            (3, 1): (top + bottom) / (bottom - top),
            (3, 2): near_clip / (near_clip - far_clip),
            (3, 3): 1.0,
        }
    )


def make_viewport(
    left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
) -> Matrix4x4:
    """Map normalised device coordinates onto a screen rectangle."""
    return _build(
        {
            (0, 0): width / 2.0,
            (1, 1): -height / 2.0,
            (2, 2): max_depth - min_depth,
            (3, 0): left + width / 2.0,
            (3, 1): top + height / 2.0,
            (3, 2): min_depth,
            (3, 3): 1.0,
        }
    )


def make_translate(translate: Vector3) -> Matrix4x4:
    entries = {(i, i): 1.0 for i in range(_SIZE)}
    entries.update({(3, 0): translate.x, (3, 1): translate.y, (3, 2): translate.z})
    return _build(entries)


def make_scale(scale: Vector3) -> Matrix4x4:
    return _build({(0, 0): scale.x, (1, 1): scale.y, (2, 2): scale.z, (3, 3): 1.0})


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point (w = 1) and divide by the resulting w."""
    x, y, z, w = (
        vector.x * c0 + vector.y * c1 + vector.z * c2 + c3
        for c0, c1, c2, c3 in zip(*matrix.m)
    )
    if w == 0.0:
        raise ValueError("transformed point has w == 0")
    return Vector3(x / w, y / w, z / w)