"""Small vector and matrix math in right-handed coordinates.

Right is +x, look is +y and up is +z.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

_EPSILON = 1e-9

Row = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vec3:
        return self.scale(s)

    __rmul__ = __mul__

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scale(self, s: float) -> Vec3:
        """Multiply every component by ``s``."""
        return Vec3(self.x * s, self.y * s, self.z * s)

    def mag(self) -> float:
        """Length of the vector; tiny vectors report zero."""
        s = self.dot(self)
        if s < _EPSILON:
            return 0.0
        return math.sqrt(s)

    def norm(self) -> Vec3:
        """Scale by the reciprocal of the squared length; tiny vectors become zero."""
        s = self.dot(self)
        if s < _EPSILON:
            return Vec3(0.0, 0.0, 0.0)
        return self.scale(1.0 / s)

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )

    def rotate(self, axis: Vec3, radians: float) -> Vec3:
        """Rotate this point about a unit ``axis`` through the origin."""
        proj = axis.scale(self.dot(axis))
        perp = self - proj
        s = perp.scale(math.cos(radians))
        t = axis.cross(perp).scale(math.sin(radians))
        return proj + (s + t)


VEC3_ZERO = Vec3(0.0, 0.0, 0.0)
VEC3_R = Vec3(1.0, 0.0, 0.0)
VEC3_L = Vec3(0.0, 1.0, 0.0)
VEC3_U = Vec3(0.0, 0.0, 1.0)
VEC3_X = Vec3(1.0, 0.0, 0.0)
VEC3_Y = Vec3(0.0, 1.0, 0.0)
VEC3_Z = Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Vec4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def scale(self, s: float) -> Vec4:
        """Multiply every component by ``s``."""
        return Vec4(self.x * s, self.y * s, self.z * s, self.w * s)


@dataclass(frozen=True)
class Mat2:
    e00: float = 0.0
    e01: float = 0.0
    e10: float = 0.0
    e11: float = 0.0

    def det(self) -> float:
        """Determinant."""
        return self.e00 * self.e11 - self.e10 * self.e01

    def inverse(self) -> Mat2:
        """Inverse matrix; a singular matrix yields the zero matrix."""
        s = self.det()
        if s == 0.0:
            return Mat2(0.0, 0.0, 0.0, 0.0)
        s = 1.0 / s
        return Mat2(s * self.e11, -s * self.e01, -s * self.e10, s * self.e00)

    def transform(self, v: Vec2) -> Vec2:
        """Multiply the column vector ``v`` by this matrix."""
        return Vec2(
            Vec2(self.e00, self.e01).dot(v),
            Vec2(self.e10, self.e11).dot(v),
        )


@dataclass(frozen=True)
class Mat4:
    """Row-major 4x4 matrix."""

    rows: Tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_flat(cls, values: Sequence[float]) -> Mat4:
        """Build a matrix from 16 values in row-major order."""
        if len(values) != 16:
            raise ValueError("a Mat4 needs exactly 16 values")
        return cls(tuple(tuple(values[i:i + 4]) for i in range(0, 16, 4)))

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.rows[row][col]

    @property
    def f16(self) -> Tuple[float, ...]:
        """All 16 elements in row-major order."""
        return tuple(v for row in self.rows for v in row)

    def multiply(self, other: Mat4) -> Mat4:
        """Matrix product ``self * other``."""
        cols = list(zip(*other.rows))
        return Mat4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in cols)
                for row in self.rows
            )
        )

    def __matmul__(self, other: Mat4) -> Mat4:
        return self.multiply(other)


def _zeros() -> List[List[float]]:
    return [[0.0] * 4 for _ in range(4)]


def _identity() -> List[List[float]]:
    m = _zeros()
    for i in range(4):
        m[i][i] = 1.0
    return m


def _freeze(m: Iterable[Iterable[float]]) -> Mat4:
    return Mat4(tuple(tuple(row) for row in m))


def _translate(m: List[List[float]], p: Vec3) -> None:
    m[0][3], m[1][3], m[2][3] = p.x, p.y, p.z
    m[3][3] = 1.0


def mat4_identity() -> Mat4:
    """The 4x4 identity matrix."""
    return _freeze(_identity())


def mat4_perspective(aspect: float, fov: float, near: float, far: float) -> Mat4:
    """Perspective projection mapping look distances near..far to depth -1..+1."""
    if far == near:
        raise ValueError("near and far distances must differ")
    z_n, z_f = -1.0, 1.0
    a = (z_f * far - z_n * near) / (far - near)
    b = z_f * far - a * far
    cotan = 1.0 / math.tan(fov * 0.5)
    m = _zeros()
    m[0][0] = cotan
    m[1][2] = aspect * cotan
    m[2][1] = a
    m[2][3] = b
    m[3][1] = 1.0
    return _freeze(m)


def mat4_ortho(w: int, h: int, near: float, far: float) -> Mat4:
    """Orthographic projection of a ``w`` by ``h`` view."""
    if far == 0.0:
        raise ValueError("far distance must not be zero")
    if w == 0 or h == 0:
        raise ValueError("view width and height must not be zero")
    m = _zeros()
    m[0][0] = 2.0 / float(w)
    m[1][2] = 2.0 / float(h)
    m[2][1] = 1.0 / far
    m[2][3] = -near / far
    m[3][3] = 1.0
    return _freeze(m)


def mat4_world(p: Vec3, r: Vec3, l: Vec3, u: Vec3) -> Mat4:
    """Object-to-world matrix with basis columns r, l, u and origin p."""
    m = _zeros()
    for col, v in enumerate((r, l, u, p)):
        m[0][col], m[1][col], m[2][col] = v.x, v.y, v.z
    m[3][3] = 1.0
    return _freeze(m)


def mat4_view(p: Vec3, r: Vec3, l: Vec3, u: Vec3) -> Mat4:
    """World-to-view matrix for an eye at p with basis r, l, u."""
    m = _zeros()
    for row, v in enumerate((r, l, u)):
        m[row] = [v.x, v.y, v.z, -p.dot(v)]
    m[3][3] = 1.0
    return _freeze(m)


def mat4_yaw(p: Vec3, angle: float) -> Mat4:
    """Rotation about the up axis followed by translation to p."""
    co, sn = math.cos(angle), math.sin(angle)
    m = _identity()
    m[0][0], m[0][1] = co, -sn
    m[1][0], m[1][1] = sn, co
    _translate(m, p)
    return _freeze(m)


def mat4_rotate_axis(p: Vec3, angle: float, axis_type: int) -> Mat4:
    """Rotation about axis ``axis_type % 3`` (x, y, z) with translation to p.

    An ``axis_type`` of exactly 1 rotates in the opposite sense.
    """
    if axis_type == 1:
        angle = -angle
    co, sn = math.cos(angle), math.sin(angle)
    m = _identity()
    _translate(m, p)
    axis = axis_type % 3
    if axis == 0:
        m[1][1], m[1][2] = co, -sn
        m[2][1], m[2][2] = sn, co
    elif axis == 1:
        m[0][0], m[0][2] = co, -sn
        m[2][0], m[2][2] = sn, co
    else:
        m[0][0], m[0][1] = co, -sn
        m[1][0], m[1][1] = sn, co
    return _freeze(m)


def mat4_scale(p: Vec3, x_scale: float, y_scale: float, z_scale: float) -> Mat4:
    """Axis-aligned scale followed by translation to p."""
    m = _identity()
    m[0][0], m[1][1], m[2][2] = x_scale, y_scale, z_scale
    _translate(m, p)
    return _freeze(m)