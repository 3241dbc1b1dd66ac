"""Table of sized texture color formats and lookup by short name."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from mygl.gltypes import GL_R32F, GL_RG32F, GL_RGB32F, GL_RGBA32F

GL_RED = 0x1903
GL_RG = 0x8227
GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_DEPTH_STENCIL = 0x84F9


@dataclass(frozen=True)
class ColorFormat:
    name: str
    sized_format: int
    base_format: int
    rgba_size: Tuple[int, int, int, int]
    depth_bits: int = 0
    stencil_bits: int = 0


def _fmt(name, sized, base, r, g, b, a, depth=0, stencil=0):
    return ColorFormat(name, sized, base, (r, g, b, a), depth, stencil)


COLOR_FORMATS: Tuple[ColorFormat, ...] = (
    _fmt("GL_R8", 0x8229, GL_RED, 8, 0, 0, 0),
    _fmt("GL_R8_SNORM", 0x8F94, GL_RED, 8, 0, 0, 0),
    _fmt("GL_R16", 0x822A, GL_RED, 16, 0, 0, 0),
    _fmt("GL_R16_SNORM", 0x8F98, GL_RED, 16, 0, 0, 0),
    _fmt("GL_RG8", 0x822B, GL_RG, 8, 8, 0, 0),
    _fmt("GL_RG8_SNORM", 0x8F95, GL_RG, 8, 8, 0, 0),
    _fmt("GL_RG16", 0x822C, GL_RG, 16, 16, 0, 0),
    _fmt("GL_RG16_SNORM", 0x8F99, GL_RG, 16, 16, 0, 0),
    _fmt("GL_R3_G3_B2", 0x2A10, GL_RGB, 3, 3, 2, 0),
    _fmt("GL_RGB4", 0x804F, GL_RGB, 4, 4, 4, 0),
    _fmt("GL_RGB5", 0x8050, GL_RGB, 5, 5, 5, 0),
    _fmt("GL_RGB8", 0x8051, GL_RGB, 8, 8, 8, 0),
    _fmt("GL_RGB8_SNORM", 0x8F96, GL_RGB, 8, 8, 8, 0),
    _fmt("GL_RGB10", 0x8052, GL_RGB, 10, 10, 10, 0),
    _fmt("GL_RGB12", 0x8053, GL_RGB, 12, 12, 12, 0),
    _fmt("GL_RGB16_SNORM", 0x8F9A, GL_RGB, 16, 16, 16, 0),
    _fmt("GL_RGBA2", 0x8055, GL_RGB, 2, 2, 2, 2),
    _fmt("GL_RGBA4", 0x8056, GL_RGB, 4, 4, 4, 4),
    _fmt("GL_RGB5_A1", 0x8057, GL_RGBA, 5, 5, 5, 1),
    _fmt("GL_RGBA8", 0x8058, GL_RGBA, 8, 8, 8, 8),
    _fmt("GL_RGBA8_SNORM", 0x8F97, GL_RGBA, 8, 8, 8, 8),
    _fmt("GL_RGB10_A2", 0x8059, GL_RGBA, 10, 10, 10, 2),
    _fmt("GL_RGB10_A2UI", 0x906F, GL_RGBA, 10, 10, 10, 2),
    _fmt("GL_RGBA12", 0x805A, GL_RGBA, 12, 12, 12, 12),
    _fmt("GL_RGBA16", 0x805B, GL_RGBA, 16, 16, 16, 16),
    _fmt("GL_SRGB8", 0x8C41, GL_RGB, 8, 8, 8, 0),
    _fmt("GL_SRGB8_ALPHA8", 0x8C43, GL_RGBA, 8, 8, 8, 8),
    _fmt("GL_R16F", 0x822D, GL_RED, 16, 0, 0, 0),
    _fmt("GL_RG16F", 0x822F, GL_RG, 16, 16, 0, 0),
    _fmt("GL_RGB16F", 0x881B, GL_RGB, 16, 16, 16, 0),
    _fmt("GL_RGBA16F", 0x881A, GL_RGBA, 16, 16, 16, 16),
    _fmt("GL_R32F", GL_R32F, GL_RED, 32, 0, 0, 0),
    _fmt("GL_RG32F", GL_RG32F, GL_RG, 32, 32, 0, 0),
    _fmt("GL_RGB32F", GL_RGB32F, GL_RGB, 32, 32, 32, 0),
    _fmt("GL_RGBA32F", GL_RGBA32F, GL_RGBA, 32, 32, 32, 32),
    _fmt("GL_R11F_G11F_B10F", 0x8C3A, GL_RGB, 11, 11, 10, 0),
    _fmt("GL_RGB9_E5", 0x8C3D, GL_RGB, 9, 9, 9, 5),
    _fmt("GL_R8I", 0x8231, GL_RED, 8, 0, 0, 0),
    _fmt("GL_R8UI", 0x8232, GL_RED, 8, 0, 0, 0),
    _fmt("GL_R16I", 0x8233, GL_RED, 16, 0, 0, 0),
    _fmt("GL_R16UI", 0x8234, GL_RED, 16, 0, 0, 0),
    _fmt("GL_R32I", 0x8235, GL_RED, 32, 0, 0, 0),
    _fmt("GL_R32UI", 0x8236, GL_RED, 32, 0, 0, 0),
    _fmt("GL_RG8I", 0x8237, GL_RG, 8, 8, 0, 0),
    _fmt("GL_RG8UI", 0x8238, GL_RG, 8, 8, 0, 0),
    _fmt("GL_RG16I", 0x8239, GL_RG, 16, 16, 0, 0),
    _fmt("GL_RG16UI", 0x823A, GL_RG, 16, 16, 0, 0),
    _fmt("GL_RG32I", 0x823B, GL_RG, 32, 32, 0, 0),
    _fmt("GL_RG32UI", 0x823C, GL_RG, 32, 32, 0, 0),
    _fmt("GL_RGB8I", 0x8D8F, GL_RGB, 8, 8, 8, 0),
    _fmt("GL_RGB8UI", 0x8D7D, GL_RGB, 8, 8, 8, 0),
    _fmt("GL_RGB16I", 0x8D89, GL_RGB, 16, 16, 16, 0),
    _fmt("GL_RGB16UI", 0x8D77, GL_RGB, 16, 16, 16, 0),
    _fmt("GL_RGB32I", 0x8D83, GL_RGB, 32, 32, 32, 0),
    _fmt("GL_RGB32UI", 0x8D71, GL_RGB, 32, 32, 32, 0),
    _fmt("GL_RGBA8I", 0x8D8E, GL_RGBA, 8, 8, 8, 8),
    _fmt("GL_RGBA8UI", 0x8D7C, GL_RGBA, 8, 8, 8, 8),
    _fmt("GL_RGBA16I", 0x8D88, GL_RGBA, 16, 16, 16, 16),
    _fmt("GL_RGBA16UI", 0x8D76, GL_RGBA, 16, 16, 16, 16),
    _fmt("GL_RGBA32I", 0x8D82, GL_RGBA, 32, 32, 32, 32),
    _fmt("GL_RGBA32UI", 0x8D70, GL_RGBA, 32, 32, 32, 32),
    _fmt("GL_DEPTH24_STENCIL8", 0x88F0, GL_DEPTH_STENCIL, 0, 0, 0, 0, 24, 8),
)

_SHORT_NAMES = (
    "r8", "r8snorm", "r16", "r16snorm", "rg8", "rg8snorm", "rg16", "rg16snorm",
    "r3g3b2", "rgb4", "rgb5", "rgb8", "rgb8snorm", "rgb10", "rgb12", "rgb16snorm",
    "rgba2", "rgba4", "rgb5a1", "rgba8", "rgba8snorm", "rgb10a2", "rgb10a2ui",
    "rgba12", "rgba16", "srgb8", "srgb8alpha8", "r16f", "rg16f", "rgb16f",
    "rgba16f", "r32f", "rg32f", "rgb32f", "rgba32f", "r11fg11fb10f", "rgb9e5",
    "r8i", "r8ui", "r16i", "r16ui", "r32i", "r32ui", "rg8i", "rg8ui", "rg16i",
    "rg16ui", "rg32i", "rg32ui", "rgb8i", "rgb8ui", "rgb16i", "rgb16ui", "rgb32i",
    "rgb32ui", "rgba8i", "rgba8ui", "rgba16i", "rgba16ui", "rgba32i", "rgba32ui",
    "depth24stencil8",
)

COLOR_FORMATS_BY_NAME: Mapping[str, ColorFormat] = MappingProxyType(
    dict(zip(_SHORT_NAMES, COLOR_FORMATS, strict=True))
)


def color_format_by_name(name: str) -> ColorFormat:
    """Look up a color format by its short name, such as ``"rgba8"``."""
    try:
        return COLOR_FORMATS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown color format: {name!r}") from None