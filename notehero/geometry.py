"""Rectangles, bitmap images and font descriptions used by the display layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from notehero.formats import FontFormat, ImageFormat

_INT16_MIN = -0x8000
_INT16_MAX = 0x7FFF
_UINT16_MAX = 0xFFFF
_UINT8_MAX = 0xFF
_FONT_GLYPHS = 96


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} out of range [{low}, {high}]: {value}")


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle whose minimum and maximum edges are inclusive."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    def __post_init__(self) -> None:
        for name in ("x_min", "y_min", "x_max", "y_max"):
            _check_range(name, getattr(self, name), _INT16_MIN, _INT16_MAX)
        if self.x_min > self.x_max:
            raise ValueError(f"x_min {self.x_min} is greater than x_max {self.x_max}")
        if self.y_min > self.y_max:
            raise ValueError(f"y_min {self.y_min} is greater than y_max {self.y_max}")

    @property
    def width(self) -> int:
        """Number of pixel columns covered by the rectangle."""
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        """Number of pixel rows covered by the rectangle."""
        return self.y_max - self.y_min + 1

    def contains(self, x: int, y: int) -> bool:
        """True if the point lies inside the rectangle or on its edge."""
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def overlaps(self, other: Rectangle) -> bool:
        """True if the two rectangles share at least one pixel."""
        return not (
            self.x_max < other.x_min
            or other.x_max < self.x_min
            or self.y_max < other.y_min
            or other.y_max < self.y_min
        )

    def intersection(self, other: Rectangle) -> Rectangle | None:
        """The rectangle common to both, or None if they do not overlap."""
        if not self.overlaps(other):
            return None
        return Rectangle(
            max(self.x_min, other.x_min),
            max(self.y_min, other.y_min),
            min(self.x_max, other.x_max),
            min(self.y_max, other.y_max),
        )


@dataclass(frozen=True)
class Image:
    """A palette-based bitmap image."""

    format: ImageFormat
    width: int
    height: int
    palette: tuple[int, ...] = ()
    pixels: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", ImageFormat(self.format))
        object.__setattr__(self, "palette", tuple(self.palette))
        object.__setattr__(self, "pixels", bytes(self.pixels))
        _check_range("width", self.width, 0, _UINT16_MAX)
        _check_range("height", self.height, 0, _UINT16_MAX)
        _check_range("palette size", len(self.palette), 0, _UINT16_MAX)
        for colour in self.palette:
            _check_range("palette colour", colour, 0, 0x00FFFFFF)

    @property
    def num_colors(self) -> int:
        """Number of colours in the palette."""
        return len(self.palette)


def _check_font_metrics(font: Font | FontEx) -> None:
    _check_range("max_width", font.max_width, 0, _UINT8_MAX)
    _check_range("height", font.height, 0, _UINT8_MAX)
    _check_range("baseline", font.baseline, 0, _UINT8_MAX)
    for offset in font.offsets:
        _check_range("glyph offset", offset, 0, _UINT16_MAX)


@dataclass(frozen=True)
class Font:
    """A font covering the 96 printable ASCII characters from space onwards."""

    format: FontFormat
    max_width: int
    height: int
    baseline: int
    offsets: tuple[int, ...]
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        fmt = FontFormat(self.format)
        if fmt.is_extended:
            raise ValueError(f"{fmt.name} is an extended format; use FontEx")
        object.__setattr__(self, "format", fmt)
        object.__setattr__(self, "offsets", tuple(self.offsets))
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.offsets) != _FONT_GLYPHS:
            raise ValueError(
                f"a font needs {_FONT_GLYPHS} glyph offsets, got {len(self.offsets)}"
            )
        _check_font_metrics(self)


@dataclass(frozen=True)
class FontEx:
    """A font covering a contiguous block of codepoints from first to last."""

    format: FontFormat
    max_width: int
    height: int
    baseline: int
    first: int
    last: int
    offsets: tuple[int, ...]
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        fmt = FontFormat(self.format)
        if not fmt.is_extended:
            raise ValueError(f"{fmt.name} is not an extended format; use Font")
        object.__setattr__(self, "format", fmt)
        object.__setattr__(self, "offsets", tuple(self.offsets))
        object.__setattr__(self, "data", bytes(self.data))
        _check_range("first", self.first, 0, _UINT8_MAX)
        _check_range("last", self.last, 0, _UINT8_MAX)
        if self.first > self.last:
            raise ValueError(f"first codepoint {self.first} is after last {self.last}")
        expected = self.last - self.first + 1
        if len(self.offsets) != expected:
            raise ValueError(
                f"codepoints {self.first}..{self.last} need {expected} offsets, "
                f"got {len(self.offsets)}"
            )
        _check_font_metrics(self)

    def has_codepoint(self, codepoint: int) -> bool:
        """True if the font holds a glyph for the codepoint."""
        return self.first <= codepoint <= self.last