import pytest

from notehero.formats import FontFormat, ImageFormat
from notehero.geometry import Font, FontEx, Image, Rectangle


def test_single_pixel_rectangle_has_unit_size():
    rect = Rectangle(5, 5, 5, 5)
    assert rect.width == 1
    assert rect.height == 1


def test_width_and_height_include_both_edges():
    rect = Rectangle(0, 0, 95, 95)
    assert rect.width == 96
    assert rect.height == 96


def test_contains_edges_and_rejects_outside():
    rect = Rectangle(2, 3, 10, 20)
    for x, y in [(2, 3), (10, 20), (2, 20), (10, 3), (6, 10)]:
        assert rect.contains(x, y)
    for x, y in [(1, 3), (11, 20), (2, 2), (10, 21)]:
        assert not rect.contains(x, y)


def test_overlap_is_symmetric_and_matches_intersection():
    pairs = [
        (Rectangle(0, 0, 10, 10), Rectangle(5, 5, 15, 15)),
        (Rectangle(0, 0, 10, 10), Rectangle(11, 0, 20, 10)),
        (Rectangle(0, 0, 10, 10), Rectangle(10, 10, 20, 20)),
        (Rectangle(-5, -5, 5, 5), Rectangle(-1, -1, 1, 1)),
    ]
    for a, b in pairs:
        assert a.overlaps(b) == b.overlaps(a)
        assert a.overlaps(b) == (a.intersection(b) is not None)


def test_touching_edges_overlap():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(10, 10, 20, 20)
    assert a.intersection(b) == Rectangle(10, 10, 10, 10)


def test_disjoint_rectangles_have_no_intersection():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(11, 0, 20, 10)
    assert not a.overlaps(b)
    assert a.intersection(b) is None


def test_intersection_lies_in_both():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(5, -3, 15, 7)
    inter = a.intersection(b)
    assert inter == b.intersection(a)
    for x in range(inter.x_min, inter.x_max + 1):
        for y in range(inter.y_min, inter.y_max + 1):
            assert a.contains(x, y) and b.contains(x, y)


def test_intersection_with_inner_rectangle_is_inner():
    outer = Rectangle(0, 0, 50, 50)
    inner = Rectangle(10, 10, 20, 20)
    assert outer.intersection(inner) == inner
    assert outer.intersection(outer) == outer


@pytest.mark.parametrize(
    "coords",
    [(5, 0, 4, 0), (0, 5, 0, 4), (-40000, 0, 0, 0), (0, 0, 40000, 0)],
)
def test_invalid_rectangles_raise(coords):
    with pytest.raises(ValueError):
        Rectangle(*coords)


def test_image_converts_format_and_counts_colors():
    image = Image(0x01, 8, 2, [0x000000, 0xFFFFFF], b"\xff\x00")
    assert image.format is ImageFormat.UNCOMPRESSED_1BPP
    assert image.num_colors == 2
    assert image.pixels == b"\xff\x00"


def test_image_rejects_unknown_format():
    with pytest.raises(ValueError):
        Image(0x03, 1, 1)


def test_image_rejects_bad_size_and_colour():
    with pytest.raises(ValueError):
        Image(ImageFormat.UNCOMPRESSED_8BPP, 70000, 1)
    with pytest.raises(ValueError):
        Image(ImageFormat.UNCOMPRESSED_8BPP, 1, 1, [0x01000000])


def test_font_requires_96_offsets():
    font = Font(FontFormat.UNCOMPRESSED, 6, 8, 7, range(96))
    assert len(font.offsets) == 96
    assert font.format is FontFormat.UNCOMPRESSED
    with pytest.raises(ValueError):
        Font(FontFormat.UNCOMPRESSED, 6, 8, 7, range(95))


def test_font_rejects_extended_format():
    with pytest.raises(ValueError):
        Font(FontFormat.EX_UNCOMPRESSED, 6, 8, 7, range(96))


def test_font_ex_codepoint_range():
    font = FontEx(FontFormat.EX_PIXEL_RLE, 6, 8, 7, 32, 126, range(95))
    assert font.has_codepoint(32)
    assert font.has_codepoint(126)
    assert not font.has_codepoint(31)
    assert not font.has_codepoint(127)


def test_font_ex_validation():
    with pytest.raises(ValueError):
        FontEx(FontFormat.PIXEL_RLE, 6, 8, 7, 32, 33, [0, 1])
    with pytest.raises(ValueError):
        FontEx(FontFormat.EX_UNCOMPRESSED, 6, 8, 7, 40, 32, [])
    with pytest.raises(ValueError):
        FontEx(FontFormat.EX_UNCOMPRESSED, 6, 8, 7, 32, 33, [0])
    with pytest.raises(ValueError):
        FontEx(FontFormat.EX_UNCOMPRESSED, 6, 8, 300, 32, 32, [0])