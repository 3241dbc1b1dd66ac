import pytest

from mygl import gltypes
from mygl.colors import (
    COLOR_FORMATS,
    COLOR_FORMATS_BY_NAME,
    GL_DEPTH_STENCIL,
    GL_RGBA,
    color_format_by_name,
)


def test_rgba8_lookup():
    fmt = color_format_by_name("rgba8")
    assert fmt.name == "GL_RGBA8"
    assert fmt.base_format == GL_RGBA
    assert fmt.rgba_size == (8, 8, 8, 8)


def test_depth_stencil_lookup():
    fmt = color_format_by_name("depth24stencil8")
    assert fmt.name == "GL_DEPTH24_STENCIL8"
    assert fmt.base_format == GL_DEPTH_STENCIL
    assert (fmt.depth_bits, fmt.stencil_bits) == (24, 8)
    assert fmt.rgba_size == (0, 0, 0, 0)


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_format_by_name("GL_RGBA8")
    with pytest.raises(KeyError):
        color_format_by_name("rgba64")


def test_every_format_has_one_short_name():
    assert len(COLOR_FORMATS_BY_NAME) == len(COLOR_FORMATS)
    assert {f.name for f in COLOR_FORMATS_BY_NAME.values()} == {f.name for f in COLOR_FORMATS}


@pytest.mark.parametrize("short", sorted(COLOR_FORMATS_BY_NAME))
def test_short_name_derives_from_gl_name(short):
    fmt = color_format_by_name(short)
    assert fmt.name.removeprefix("GL_").replace("_", "").lower() == short


def test_sized_formats_are_distinct():
    sized = [color_format_by_name(short).sized_format for short in COLOR_FORMATS_BY_NAME]
    assert len(set(sized)) == len(sized)


def test_float_formats_agree_with_texture_buffer_formats():
    for components, short in (
        (gltypes.Components.X, "r32f"),
        (gltypes.Components.XY, "rg32f"),
        (gltypes.Components.XYZ, "rgb32f"),
        (gltypes.Components.XYZW, "rgba32f"),
    ):
        assert color_format_by_name(short).sized_format == gltypes.tbo_format(components)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLOR_FORMATS_BY_NAME["custom"] = COLOR_FORMATS[0]
    with pytest.raises(KeyError):
        color_format_by_name("custom")