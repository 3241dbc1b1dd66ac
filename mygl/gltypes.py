"""Render-state enums, state records and buffer-layout helpers."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

MAX_SAMPLERS = 16
MAX_VERTEX_ATTRIBS = 16
MAX_COLOR_ATTACHMENTS = 8

GL_TEXTURE0 = 0x84C0
TEXTURE_USAGE_UNIT = GL_TEXTURE0 + 8

GL_R32F = 0x822E
GL_RG32F = 0x8230
GL_RGB32F = 0x8815
GL_RGBA32F = 0x8814

FLOAT_SIZE = 4


class CullMode(IntEnum):
    BACK = 0x0405
    FRONT = 0x0404
    FRONT_AND_BACK = 0x0408


class DepthMode(IntEnum):
    NEVER = 0x0200
    LESS = 0x0201
    EQUAL = 0x0202
    LEQUAL = 0x0203
    GREATER = 0x0204
    NOTEQUAL = 0x0205
    GEQUAL = 0x0206
    ALWAYS = 0x0207


class BlendMode(IntEnum):
    ZERO = 0
    ONE = 1
    SRC_COLOR = 0x0300
    ONE_MINUS_SRC_COLOR = 0x0301
    SRC_ALPHA = 0x0302
    ONE_MINUS_SRC_ALPHA = 0x0303
    DST_ALPHA = 0x0304
    ONE_MINUS_DST_ALPHA = 0x0305
    DST_COLOR = 0x0306
    ONE_MINUS_DST_COLOR = 0x0307


class BlendFunc(IntEnum):
    ADD = 0x8006
    MIN = 0x8007
    MAX = 0x8008
    SUB = 0x800A
    RSUB = 0x800B


class Primitive(IntEnum):
    POINTS = 0
    LINES = 1
    TRIANGLES = 4
    QUADS = 7


class VertexAttribType(IntEnum):
    CHAR = 0x1400
    UCHAR = 0x1401
    SHORT = 0x1402
    USHORT = 0x1403
    INT = 0x1404
    UINT = 0x1405
    FLOAT = 0x1406


class Components(IntEnum):
    X = 1
    XY = 2
    XYZ = 3
    XYZW = 4


class StencilAction(IntEnum):
    ZERO = 0
    KEEP = 0x1E00
    REPLACE = 0x1E01
    INCR = 0x1E02
    DECR = 0x1E03
    INVERT = 0x150A
    INCR_WRAP = 0x8507
    DECR_WRAP = 0x8508


class UniformType(IntEnum):
    INT = 0x1404
    UINT = 0x1405
    FLOAT = 0x1406
    FLOAT_VEC2 = 0x8B50
    FLOAT_VEC3 = 0x8B51
    FLOAT_VEC4 = 0x8B52
    INT_VEC2 = 0x8B53
    INT_VEC3 = 0x8B54
    INT_VEC4 = 0x8B55
    FLOAT_MAT2 = 0x8B5A
    FLOAT_MAT3 = 0x8B5B
    FLOAT_MAT4 = 0x8B5C
    UINT_VEC2 = 0x8DC6
    UINT_VEC3 = 0x8DC7
    UINT_VEC4 = 0x8DC8


def size_of_attrib(attrib_type: VertexAttribType) -> int:
    """Byte size of one component of the given vertex attribute type."""
    if attrib_type in (VertexAttribType.CHAR, VertexAttribType.UCHAR):
        return 1
    if attrib_type in (VertexAttribType.SHORT, VertexAttribType.USHORT):
        return 2
    return 4


@dataclass
class VertexAttrib:
    type: VertexAttribType = VertexAttribType.FLOAT
    components: Components = Components.X
    normalized: bool = False

    def size_in_bytes(self) -> int:
        """Bytes taken by one element of this attribute."""
        return size_of_attrib(self.type) * int(self.components)


@dataclass
class BlendOp:
    src: BlendMode = BlendMode.ONE
    dst: BlendMode = BlendMode.ZERO
    func: BlendFunc = BlendFunc.ADD


@dataclass
class Blend:
    on: bool = False
    blend_op: BlendOp = field(default_factory=BlendOp)


@dataclass
class Cull:
    on: bool = False
    front_is_ccw: bool = True
    cull_mode: CullMode = CullMode.BACK


@dataclass
class Depth:
    on: bool = False
    depth_write: bool = True
    depth_mode: DepthMode = DepthMode.LESS


@dataclass
class StencilOp:
    stencil_fail: StencilAction = StencilAction.KEEP
    stencil_pass_depth_fail: StencilAction = StencilAction.KEEP
    stencil_pass_depth_pass: StencilAction = StencilAction.KEEP


@dataclass
class StencilTest:
    mode: DepthMode = DepthMode.ALWAYS
    ref: int = 0
    mask: int = 0xFF


@dataclass
class Stencil:
    on: bool = False
    write_mask: int = 0xFF
    stencil_test: StencilTest = field(default_factory=StencilTest)
    stencil_op: StencilOp = field(default_factory=StencilOp)


@dataclass
class ColorMask:
    red: bool = True
    green: bool = True
    blue: bool = True
    alpha: bool = True


@dataclass
class ViewPort:
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def attribs_stride(attribs: Iterable[VertexAttrib]) -> int:
    """Bytes per vertex for an interleaved layout; extra attributes are ignored."""
    return sum(a.size_in_bytes() for a in itertools.islice(attribs, MAX_VERTEX_ATTRIBS))


def vbo_size(count: int, attribs: Iterable[VertexAttrib]) -> int:
    """Total bytes of a vertex buffer holding ``count`` vertices."""
    return attribs_stride(attribs) * count


_TBO_FORMATS = {
    Components.X: GL_R32F,
    Components.XY: GL_RG32F,
    Components.XYZ: GL_RGB32F,
    Components.XYZW: GL_RGBA32F,
}


def tbo_format(components: Components) -> int:
    """Sized float texture format for a texture buffer of the given width."""
    return _TBO_FORMATS.get(components, GL_R32F)


def tbo_count(size: int, components: Components) -> int:
    """Number of elements in a float texture buffer of ``size`` bytes."""
    return size // (int(components) * FLOAT_SIZE)


_VERTICES_PER_PRIMITIVE = {
    Primitive.QUADS: 4,
    Primitive.TRIANGLES: 3,
    Primitive.LINES: 2,
    Primitive.POINTS: 1,
}


def vertices_per_primitive(primitive: Primitive) -> int:
    """Number of vertices consumed by one primitive."""
    try:
        return _VERTICES_PER_PRIMITIVE[Primitive(primitive)]
    except (KeyError, ValueError):
        raise ValueError(f"unsupported primitive: {primitive!r}") from None