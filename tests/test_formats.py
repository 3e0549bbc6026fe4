import pytest

from notehero.formats import (
    AUTO_STRING_LENGTH,
    FONT_EX_MARKER,
    FontFormat,
    ImageFormat,
    Language,
    TextMode,
)


def test_font_format_values_match_header():
    assert FontFormat(0x00) is FontFormat.UNCOMPRESSED
    assert FontFormat(0x01) is FontFormat.PIXEL_RLE
    assert FontFormat(0x80) is FontFormat.EX_UNCOMPRESSED
    assert FontFormat(0x81) is FontFormat.EX_PIXEL_RLE


@pytest.mark.parametrize(
    "fmt, extended, compressed",
    [
        (FontFormat.UNCOMPRESSED, False, False),
        (FontFormat.PIXEL_RLE, False, True),
        (FontFormat.EX_UNCOMPRESSED, True, False),
        (FontFormat.EX_PIXEL_RLE, True, True),
    ],
)
def test_font_format_flags(fmt, extended, compressed):
    assert fmt.is_extended is extended
    assert fmt.is_compressed is compressed


def test_extended_formats_carry_marker():
    for fmt in FontFormat:
        marked = FontFormat(fmt.value | FONT_EX_MARKER)
        assert marked.is_extended is True
        assert marked.is_compressed is fmt.is_compressed


def test_font_format_lookup_by_value():
    assert FontFormat(0x81) is FontFormat.EX_PIXEL_RLE
    with pytest.raises(ValueError):
        FontFormat(0x02)


@pytest.mark.parametrize(
    "fmt, bpp, compressed",
    [
        (ImageFormat.UNCOMPRESSED_1BPP, 1, False),
        (ImageFormat.UNCOMPRESSED_2BPP, 2, False),
        (ImageFormat.UNCOMPRESSED_4BPP, 4, False),
        (ImageFormat.UNCOMPRESSED_8BPP, 8, False),
        (ImageFormat.RLE4_1BPP, 1, True),
        (ImageFormat.RLE4_2BPP, 2, True),
        (ImageFormat.RLE4_4BPP, 4, True),
        (ImageFormat.RLE8_1BPP, 1, True),
        (ImageFormat.RLE8_2BPP, 2, True),
        (ImageFormat.RLE8_4BPP, 4, True),
        (ImageFormat.RLE8_8BPP, 8, True),
        (ImageFormat.RLE_BLEND_8BPP, 8, True),
    ],
)
def test_image_format_properties(fmt, bpp, compressed):
    assert fmt.bits_per_pixel == bpp
    assert fmt.is_compressed is compressed


def test_image_format_values_match_header():
    assert ImageFormat(0x41) is ImageFormat.RLE4_1BPP
    assert ImageFormat(0x88) is ImageFormat.RLE8_8BPP
    assert ImageFormat(0x28) is ImageFormat.RLE_BLEND_8BPP
    with pytest.raises(ValueError):
        ImageFormat(0x03)


@pytest.mark.parametrize("depth", [1, 2, 4, 8])
def test_uncompressed_image_value_is_its_depth(depth):
    fmt = ImageFormat(depth)
    assert fmt.is_compressed is False
    assert fmt.bits_per_pixel == depth


def test_text_mode_and_auto_length():
    assert TextMode.TRANSPARENT == 0
    assert TextMode.OPAQUE == 1
    assert AUTO_STRING_LENGTH == -1
    assert TextMode(True) is TextMode.OPAQUE


def test_language_identifiers():
    assert Language.EN_US == 0x0409
    assert Language.ZH_PRC == 0x0804
    assert Language(0x0C0A) is Language.ES_SP
    assert len({lang.value for lang in Language}) == len(Language)