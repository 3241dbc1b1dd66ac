"""RGBA images, 24-bit bitmap decoding, atlas slicing and ASCII glyph sets."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from mygl.fixedstr import STR64, fixed_str

FIRST_PRINTABLE_CHAR = " "
LAST_PRINTABLE_CHAR = "~"
NUM_PRINTABLE_CHARS = ord(LAST_PRINTABLE_CHAR) - ord(FIRST_PRINTABLE_CHAR) + 1

_FILE_HEADER = struct.Struct("<2sIHHI")
_DIB_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADERS_SIZE = _FILE_HEADER.size + _DIB_HEADER.size
_BYTES_PER_PIXEL = 3


class BitmapError(ValueError):
    """Raised when bitmap data cannot be decoded."""


class Compression(IntEnum):
    RGB = 0
    RLE8 = 1
    RLE4 = 2
    BITFIELDS = 3
    JPEG = 4
    PNG = 5


@dataclass(frozen=True)
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    def value(self) -> int:
        """The color packed as a 32-bit little-endian RGBA word."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)

    @classmethod
    def from_value(cls, value: int) -> Color:
        """Unpack a 32-bit little-endian RGBA word."""
        return cls(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF, (value >> 24) & 0xFF)


@dataclass
class Image:
    """A ``w`` by ``h`` image stored row by row."""

    w: int
    h: int
    pixels: Optional[List[Color]] = None

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0:
            raise ValueError(f"image dimensions must not be negative: {self.w}x{self.h}")
        if self.pixels is None:
            self.pixels = [Color() for _ in range(self.w * self.h)]
        elif len(self.pixels) != self.w * self.h:
            raise ValueError(
                f"expected {self.w * self.h} pixels for {self.w}x{self.h}, got {len(self.pixels)}"
            )

    def cell(self, row: int, col: int, rows: int, cols: int) -> Image:
        """Copy out cell (row, col) of this image seen as a rows x cols grid."""
        if rows <= 0 or cols <= 0:
            raise ValueError("grid must have at least one row and one column")
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(f"cell ({row}, {col}) outside a {rows}x{cols} grid")
        cw, ch = self.w // cols, self.h // rows
        x0, y0 = col * cw, row * ch
        pixels: List[Color] = []
        for y in range(y0, y0 + ch):
            start = y * self.w + x0
            pixels.extend(self.pixels[start:start + cw])
        return Image(cw, ch, pixels)


def split_atlas(image: Image, rows: int, cols: int) -> List[Image]:
    """Split an atlas into its cells, row by row, as texture-array layers."""
    return [image.cell(r, c, rows, cols) for r in range(rows) for c in range(cols)]


def image_from_bitmap_data(raw: bytes, source: str = "") -> Image:
    """Decode an uncompressed 24-bit bitmap; empty input gives an empty image."""
    data = bytes(raw)
    if not data:
        return Image(0, 0, [])
    if len(data) < _HEADERS_SIZE:
        raise BitmapError(f"'{source}' is not a valid bitmap image")

    magic, _file_size, _c0, _c1, data_offset = _FILE_HEADER.unpack_from(data, 0)
    if magic != b"BM":
        raise BitmapError(f"'{source}' is not a valid bitmap image")

    fields = _DIB_HEADER.unpack_from(data, _FILE_HEADER.size)
    width, height, bits_per_pixel, compression = fields[1], fields[2], fields[4], fields[5]
    if compression != Compression.RGB or bits_per_pixel != 24:
        raise BitmapError(f"'{source}' is not a 24 bit bitmap image")
    if width < 0 or height < 0:
        raise BitmapError(f"'{source}' has unsupported dimensions {width}x{height}")

    row_bytes = width * _BYTES_PER_PIXEL
    pitch = row_bytes + (-row_bytes % 4)
    if height and data_offset + pitch * (height - 1) + row_bytes > len(data):
        raise BitmapError(f"'{source}' pixel data is truncated")

    pixels: List[Color] = []
    for y in range(height):
        start = data_offset + y * pitch
        row = data[start:start + row_bytes]
        pixels.extend(Color(r, g, b, 255) for r, g, b in zip(row[0::3], row[1::3], row[2::3]))
    return Image(width, height, pixels)


@dataclass(frozen=True)
class CharGlyph:
    """Where a character sits inside a glyph atlas."""

    c: str
    x: int
    y: int
    w: int
    h: int


@dataclass
class AsciiCharSet:
    """A named atlas of printable ASCII glyphs."""

    name: str
    image_atlas: Image
    chars: List[CharGlyph] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = fixed_str(self.name, STR64)
        if len(self.chars) > NUM_PRINTABLE_CHARS:
            raise ValueError(
                f"a character set holds at most {NUM_PRINTABLE_CHARS} glyphs, got {len(self.chars)}"
            )

    @property
    def num_chars(self) -> int:
        return len(self.chars)