"""Font, image, text-mode and language identifiers used by the display layer."""

from __future__ import annotations

from enum import IntEnum

FONT_EX_MARKER = 0x80
"""Bit set in a font format when the font uses the extended layout."""

AUTO_STRING_LENGTH = -1
"""String length meaning "draw the whole string"."""

_FONT_RLE_BIT = 0x01
_IMAGE_BPP_MASK = 0x0F
_IMAGE_COMPRESSION_MASK = 0xF0


class FontFormat(IntEnum):
    """How the glyph data of a font is stored."""

    UNCOMPRESSED = 0x00
    PIXEL_RLE = 0x01
    EX_UNCOMPRESSED = 0x00 | FONT_EX_MARKER
    EX_PIXEL_RLE = 0x01 | FONT_EX_MARKER

    @property
    def is_extended(self) -> bool:
        """True if the font uses the extended (codepoint range) layout."""
        return bool(self.value & FONT_EX_MARKER)

    @property
    def is_compressed(self) -> bool:
        """True if the glyph data is pixel run-length encoded."""
        return bool(self.value & _FONT_RLE_BIT)


class ImageFormat(IntEnum):
    """Pixel depth and compression of a bitmap image."""

    UNCOMPRESSED_1BPP = 0x01
    UNCOMPRESSED_2BPP = 0x02
    UNCOMPRESSED_4BPP = 0x04
    UNCOMPRESSED_8BPP = 0x08
    RLE4_1BPP = 0x41
    RLE4_2BPP = 0x42
    RLE4_4BPP = 0x44
    RLE8_1BPP = 0x81
    RLE8_2BPP = 0x82
    RLE8_4BPP = 0x84
    RLE8_8BPP = 0x88
    RLE_BLEND_8BPP = 0x28

    @property
    def bits_per_pixel(self) -> int:
        """Number of bits that represent one pixel."""
        return self.value & _IMAGE_BPP_MASK

    @property
    def is_compressed(self) -> bool:
        """True if the pixel data is run-length encoded."""
        return bool(self.value & _IMAGE_COMPRESSION_MASK)


class TextMode(IntEnum):
    """Whether text is drawn with or without its background."""

    TRANSPARENT = 0
    OPAQUE = 1


class Language(IntEnum):
    """Language identifiers understood by string-table processing."""

    ZH_PRC = 0x0804
    ZH_TW = 0x0404
    EN_US = 0x0409
    EN_UK = 0x0809
    EN_AUS = 0x0C09
    EN_CA = 0x1009
    EN_NZ = 0x1409
    FR = 0x040C
    DE = 0x0407
    HI = 0x0439
    IT = 0x0410
    JP = 0x0411
    KO = 0x0412
    ES_MX = 0x080A
    ES_SP = 0x0C0A
    SW_KE = 0x0441
    UR_IN = 0x0820
    UR_PK = 0x0420