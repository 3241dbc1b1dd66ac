import struct

import pytest

from mygl.image import (
    NUM_PRINTABLE_CHARS,
    AsciiCharSet,
    BitmapError,
    CharGlyph,
    Color,
    Image,
    image_from_bitmap_data,
    split_atlas,
)


def _bmp(width, height, rows, bpp=24, compression=0, magic=b"BM"):
    """Build bitmap bytes from rows of (r, g, b) triples, padding rows to 4 bytes."""
    pixel_data = b""
    for row in rows:
        line = b"".join(bytes(p) for p in row)
        line += b"\0" * (-len(line) % 4)
        pixel_data += line
    offset = 54
    file_header = struct.pack("<2sIHHI", magic, offset + len(pixel_data), 0, 0, offset)
    dib = struct.pack("<IiiHHIIiiII", 40, width, height, 1, bpp, compression,
                      len(pixel_data), 0, 0, 0, 0)
    return file_header + dib + pixel_data


def test_color_value_packs_little_endian():
    assert Color(1, 2, 3, 4).value() == 0x04030201


def test_color_value_round_trip():
    c = Color(10, 20, 30, 40)
    assert Color.from_value(c.value()) == c


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)


def test_image_default_pixels_allocated():
    img = Image(3, 2)
    assert len(img.pixels) == 6
    assert all(p == Color() for p in img.pixels)


def test_image_pixel_count_mismatch():
    with pytest.raises(ValueError):
        Image(2, 2, [Color()])


def test_bitmap_decodes_pixels_with_padding():
    rows = [[(1, 2, 3)], [(4, 5, 6)]]
    img = image_from_bitmap_data(_bmp(1, 2, rows), "pad.bmp")
    assert (img.w, img.h) == (1, 2)
    assert img.pixels == [Color(1, 2, 3, 255), Color(4, 5, 6, 255)]


def test_bitmap_alpha_is_opaque():
    rows = [[(9, 8, 7), (6, 5, 4)]]
    img = image_from_bitmap_data(_bmp(2, 1, rows))
    assert all(p.a == 255 for p in img.pixels)
    assert [(p.r, p.g, p.b) for p in img.pixels] == [(9, 8, 7), (6, 5, 4)]


def test_bitmap_empty_data_gives_empty_image():
    img = image_from_bitmap_data(b"", "empty")
    assert (img.w, img.h, img.pixels) == (0, 0, [])


def test_bitmap_bad_magic():
    with pytest.raises(BitmapError):
        image_from_bitmap_data(_bmp(1, 1, [[(0, 0, 0)]], magic=b"XX"))


def test_bitmap_rejects_32_bit():
    with pytest.raises(BitmapError):
        image_from_bitmap_data(_bmp(1, 1, [[(0, 0, 0)]], bpp=32))


def test_bitmap_rejects_compression():
    with pytest.raises(BitmapError):
        image_from_bitmap_data(_bmp(1, 1, [[(0, 0, 0)]], compression=1))


def test_bitmap_truncated_pixels():
    data = _bmp(2, 2, [[(1, 1, 1), (2, 2, 2)], [(3, 3, 3), (4, 4, 4)]])
    with pytest.raises(BitmapError):
        image_from_bitmap_data(data[:-4])


def test_bitmap_truncated_header():
    with pytest.raises(BitmapError):
        image_from_bitmap_data(b"BM1234")


def _numbered_image(w, h):
    return Image(w, h, [Color.from_value(i) for i in range(w * h)])


def test_cell_extracts_sub_image():
    img = _numbered_image(4, 2)
    right = img.cell(0, 1, 1, 2)
    assert (right.w, right.h) == (2, 2)
    assert right.pixels == [img.pixels[2], img.pixels[3], img.pixels[6], img.pixels[7]]


def test_cell_out_of_range():
    with pytest.raises(IndexError):
        _numbered_image(4, 4).cell(2, 0, 2, 2)


def test_cell_rejects_empty_grid():
    with pytest.raises(ValueError):
        _numbered_image(4, 4).cell(0, 0, 0, 1)


def test_split_atlas_covers_every_pixel_once():
    img = _numbered_image(4, 6)
    cells = split_atlas(img, 3, 2)
    assert len(cells) == 6
    collected = sorted(p.value() for cell in cells for p in cell.pixels)
    assert collected == sorted(p.value() for p in img.pixels)


def test_split_atlas_row_major_order():
    img = _numbered_image(4, 4)
    cells = split_atlas(img, 2, 2)
    assert [c.pixels[0] for c in cells] == [img.pixels[0], img.pixels[2], img.pixels[8], img.pixels[10]]


def test_char_set_limit():
    glyphs = [CharGlyph("a", 0, 0, 1, 1)] * (NUM_PRINTABLE_CHARS + 1)
    with pytest.raises(ValueError):
        AsciiCharSet("font", Image(1, 1), glyphs)


def test_char_set_counts_glyphs():
    glyphs = [CharGlyph("a", 0, 0, 1, 1), CharGlyph("b", 1, 0, 1, 1)]
    cs = AsciiCharSet("font", Image(2, 1), glyphs)
    assert cs.num_chars == 2
    assert cs.name == "font"


def test_char_set_holds_every_printable_ascii_char():
    glyphs = [CharGlyph(chr(c), 0, 0, 1, 1) for c in range(ord(" "), ord("~") + 1)]
    cs = AsciiCharSet("full", Image(1, 1), glyphs)
    assert cs.num_chars == 95
    assert NUM_PRINTABLE_CHARS == 95