"""Small vector, rectangle and 4x4 matrix types."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field


@dataclass
class Vec2:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Vec4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass
class Rect:
    width: int = 0
    height: int = 0
    left: int = 0
    top: int = 0


def _identity_rows() -> list[list[float]]:
    return [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]


_MAT4_LAYOUT = struct.Struct("=16f")


@dataclass
class Mat4:
    """Row-major 4x4 matrix of floats, starting as the identity."""

    mat: list[list[float]] = field(default_factory=_identity_rows)

    def set_identity(self) -> None:
        self.mat = _identity_rows()

    def set_scale(self, scale: Vec3) -> None:
        self.mat[0][0] = scale.x
        self.mat[1][1] = scale.y
        self.mat[2][2] = scale.z

    def set_translation(self, translation: Vec3) -> None:
        self.mat[3][0] = translation.x
        self.mat[3][1] = translation.y
        self.mat[3][2] = translation.z

    def set_rotation_x(self, x: float) -> None:
        c, s = math.cos(x), math.sin(x)
        self.mat[1][1] = c
        self.mat[1][2] = s
        self.mat[2][1] = -s
        self.mat[2][2] = c

    def set_rotation_y(self, y: float) -> None:
        c, s = math.cos(y), math.sin(y)
        self.mat[0][0] = c
        self.mat[0][2] = -s
        self.mat[2][0] = s
        self.mat[2][2] = c

    def set_rotation_z(self, z: float) -> None:
        c, s = math.cos(z), math.sin(z)
        self.mat[0][0] = c
        self.mat[0][1] = s
        self.mat[1][0] = -s
        self.mat[1][1] = c

    def set_ortho_lh(
        self, width: float, height: float, near_plane: float, far_plane: float
    ) -> None:
        depth = far_plane - near_plane
        self.mat[0][0] = 2.0 / width
        self.mat[1][1] = 2.0 / height
        self.mat[2][2] = 1.0 / depth
        self.mat[3][2] = -(near_plane / depth)

    def _product(self, other: Mat4) -> list[list[float]]:
        columns = list(zip(*other.mat))
        return [
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self.mat
        ]

    def __imul__(self, other: Mat4) -> Mat4:
        self.mat = self._product(other)
        return self

    def __mul__(self, other: Mat4) -> Mat4:
        return Mat4(self._product(other))

    def to_bytes(self) -> bytes:
        """Pack the matrix as 16 native 32-bit floats in row-major order."""
        return _MAT4_LAYOUT.pack(*(v for row in self.mat for v in row))