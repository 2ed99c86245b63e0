"""Three-component vectors and 4x4 matrices in the row-vector convention.

A point is transformed as ``v @ M``, so ``A @ B`` applies ``A`` first and
then ``B``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Tuple

Row = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Matrix:
    """An immutable 4x4 matrix stored as four rows."""

    rows: Tuple[Row, ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs exactly four rows of four values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls) -> Matrix:
        return cls(tuple(
            tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)
        ))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix:
        return cls((
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (x, y, z, 1.0),
        ))

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix:
        return cls((
            (x, 0.0, 0.0, 0.0),
            (0.0, y, 0.0, 0.0),
            (0.0, 0.0, z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return cls((
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, s, 0.0),
            (0.0, -s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return cls((
            (c, 0.0, -s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return cls((
            (c, s, 0.0, 0.0),
            (-s, c, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix(tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.rows
        ))

    def transform_coord(self, vector: Vec3) -> Vec3:
        """Transform a point (w = 1) and project the result back to w = 1."""
        point = (vector.x, vector.y, vector.z, 1.0)
        x, y, z, w = (
            sum(a * b for a, b in zip(point, column)) for column in zip(*self.rows)
        )
        return Vec3(x / w, y / w, z / w)


def world_matrix(position: Vec3, rotation: Vec3, scale: Vec3) -> Matrix:
    """Build scale, then yaw-pitch-roll rotation, then translation."""
    rotate = (
        Matrix.rotation_y(rotation.y)
        @ Matrix.rotation_x(rotation.x)
        @ Matrix.rotation_z(rotation.z)
    )
    return (
        Matrix.scaling(scale.x, scale.y, scale.z)
        @ rotate
        @ Matrix.translation(position.x, position.y, position.z)
    )