# mygl

Building blocks for an OpenGL-style renderer, in plain Python with no
third-party dependencies: render-state types, vector and matrix math, the
table of sized texture formats, 24-bit BMP decoding, and a few text and JSON
helpers.

## Modules

- `mygl.gltypes`: `IntEnum`s holding the GL values for cull, depth, blend,
  stencil, primitive, vertex-attribute and uniform settings (`CullMode`,
  `DepthMode`, `BlendMode`, `BlendFunc`, `Primitive`, `VertexAttribType`,
  `Components`, `StencilAction`, `UniformType`); the state records `Cull`,
  `Depth`, `Blend`, `BlendOp`, `Stencil`, `StencilTest`, `StencilOp`,
  `ColorMask`, `ViewPort` and `VertexAttrib`; and layout helpers:
  - `size_of_attrib(type)`: bytes per component (1, 2 or 4),
  - `VertexAttrib.size_in_bytes()`, `attribs_stride(attribs)` and
    `vbo_size(count, attribs)` (at most 16 attributes are counted),
  - `tbo_format(components)` and `tbo_count(size, components)` for float
    texture buffers,
  - `vertices_per_primitive(primitive)`: 1, 2, 3 or 4; raises `ValueError`
    for anything else.
- `mygl.vecmath`: frozen `Vec2`, `Vec3`, `Vec4`, `Mat2` and row-major `Mat4`
  (with `multiply` and the ` @ ` operator), plus builders `mat4_identity`,
  `mat4_perspective`, `mat4_ortho`, `mat4_world`, `mat4_view`, `mat4_yaw`,
  `mat4_rotate_axis` and `mat4_scale`. Coordinates are right-handed: right is
  +x, look is +y, up is +z. Note that `Vec3.norm()` divides by the *squared*
  length, and vectors with a squared length below 1e-9 give zero from both
  `mag()` and `norm()`.
- `mygl.colors`: `ColorFormat` records for 62 sized formats, in
  `COLOR_FORMATS` and `COLOR_FORMATS_BY_NAME`; `color_format_by_name("rgba8")`
  raises `KeyError` for an unknown name.
- `mygl.image`: `Color` (with `value()` / `from_value()` for the packed RGBA
  word), `Image` with `cell(row, col, rows, cols)`, `split_atlas(image, rows,
  cols)`, `image_from_bitmap_data(raw, source)` for uncompressed 24-bit BMP
  data (raises `BitmapError` otherwise; empty input gives a 0x0 image), and
  `CharGlyph` / `AsciiCharSet` describing a printable-ASCII glyph atlas.
- `mygl.fixedstr`: `fixed_str`, `fixed_cat` and `fixed_fmt`, which keep a
  string within `size - 1` UTF-8 bytes, cut at the first NUL.
- `mygl.strutils`: `equals`, `to_unsigned` and `to_signed` (64-bit wrapping,
  `ValueError` on a non-digit), the character table `Lut`, the bounded
  `Buffer`, `Tokenizer`, `LineFeed` (reads lines from a string or a
  character callback and yields `LineInfo`) and `KVParse`, whose
  `parse_tokens(key, value)` returns `(key_matched, value_resolved, value)`.
- `mygl.chardata`: `CharStream`, which splits text into lines that keep their
  newline.
- `mygl.stateful`: `StatefulState` and `Stateful`; `apply()` calls
  `apply_cb` only when the current value differs from the last applied one.
  The last applied value is shared by every `Stateful` whose value has the
  same type, and the first `Stateful` of a type calls `force()` on creation.
- `mygl.jsondoc`: `Json`, typed getters (`get_int`, `get_float`,
  `get_string`, `get_object`, their `*_or` and `*_array` forms, ...) that
  return `None` on a missing key or a value of another type, `set`,
  `set_array`, and `serialize` producing compact text with sorted keys.
- `mygl.log`: `set_log_func(func)` installs a callback; `logout`,
  `logout2` and `logout_no_newline` send it `"[MYGL] "`-prefixed text and do
  nothing while no callback is set.

## What it does not do

The package makes no graphics calls. It does not create buffers, textures,
frame buffers or shaders, does not draw, and does not build mipmap chains;
it provides the values, layouts, images and matrices such code works with.

## Install

```
pip install .
```

## Examples

```python
from mygl.vecmath import Vec3, mat4_perspective, mat4_identity
from mygl.colors import color_format_by_name
from mygl.gltypes import Components, tbo_format

up = Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0))   # Vec3(0, 0, 1)
proj = mat4_perspective(16 / 9, 1.2, 0.1, 100.0)
same = proj @ mat4_identity()

fmt = color_format_by_name("rgba8")
print(fmt.name, fmt.rgba_size)        # GL_RGBA8 (8, 8, 8, 8)

print(hex(tbo_format(Components.XYZ)))
```

```python
from mygl.image import image_from_bitmap_data, split_atlas

with open("atlas.bmp", "rb") as fh:
    atlas = image_from_bitmap_data(fh.read(), "atlas.bmp")
cells = split_atlas(atlas, 4, 4)      # 16 images, row by row
```

```python
from mygl.jsondoc import Json

doc = Json('{"width": 640, "title": "demo"}')
print(doc.get_int("width"), doc.get_string_or("title", "untitled"))
doc.set_array("sizes", [1, 2, 3])
print(doc.serialize())
```

## Tests

```
pip install .[test]
pytest
```