"""Named 24-bit RGB colours and helpers for packing and unpacking them."""

from __future__ import annotations

from enum import IntEnum

RED_MASK = 0x00FF0000
RED_SHIFT = 16
GREEN_MASK = 0x0000FF00
GREEN_SHIFT = 8
BLUE_MASK = 0x000000FF
BLUE_SHIFT = 0

_MAX_RGB = 0x00FFFFFF


class Color(IntEnum):
    """The web-safe subset of the X11 colour names, as 0x00RRGGBB values."""

    ALICE_BLUE = 0x00F0F8FF
    ANTIQUE_WHITE = 0x00FAEBD7
    AQUA = 0x0000FFFF
    AQUAMARINE = 0x007FFFD4
    AZURE = 0x00F0FFFF
    BEIGE = 0x00F5F5DC
    BISQUE = 0x00FFE4C4
    BLACK = 0x00000000
    BLANCHED_ALMOND = 0x00FFEBCD
    BLUE = 0x000000FF
    BLUE_VIOLET = 0x008A2BE2
    BROWN = 0x00A52A2A
    BURLY_WOOD = 0x00DEB887
    CADET_BLUE = 0x005F9EA0
    CHARTREUSE = 0x007FFF00
    CHOCOLATE = 0x00D2691E
    CORAL = 0x00FF7F50
    CORNFLOWER_BLUE = 0x006495ED
    CORNSILK = 0x00FFF8DC
    CRIMSON = 0x00DC143C
    CYAN = 0x0000FFFF
    DARK_BLUE = 0x0000008B
    DARK_CYAN = 0x00008B8B
    DARK_GOLDENROD = 0x00B8860B
    DARK_GRAY = 0x00A9A9A9
    DARK_GREEN = 0x00006400
    DARK_KHAKI = 0x00BDB76B
    DARK_MAGENTA = 0x008B008B
    DARK_OLIVE_GREEN = 0x00556B2F
    DARK_ORANGE = 0x00FF8C00
    DARK_ORCHID = 0x009932CC
    DARK_RED = 0x008B0000
    DARK_SALMON = 0x00E9967A
    DARK_SEA_GREEN = 0x008FBC8F
    DARK_SLATE_BLUE = 0x00483D8B
    DARK_SLATE_GRAY = 0x002F4F4F
    DARK_TURQUOISE = 0x0000CED1
    DARK_VIOLET = 0x009400D3
    DEEP_PINK = 0x00FF1493
    DEEP_SKY_BLUE = 0x0000BFFF
    DIM_GRAY = 0x00696969
    DODGER_BLUE = 0x001E90FF
    FIRE_BRICK = 0x00B22222
    FLORAL_WHITE = 0x00FFFAF0
    FOREST_GREEN = 0x00228B22
    FUCHSIA = 0x00FF00FF
    GAINSBORO = 0x00DCDCDC
    GHOST_WHITE = 0x00F8F8FF
    GOLD = 0x00FFD700
    GOLDENROD = 0x00DAA520
    GRAY = 0x00808080
    GREEN = 0x00008000
    GREEN_YELLOW = 0x00ADFF2F
    HONEYDEW = 0x00F0FFF0
    HOT_PINK = 0x00FF69B4
    INDIAN_RED = 0x00CD5C5C
    INDIGO = 0x004B0082
    IVORY = 0x00FFFFF0
    KHAKI = 0x00F0E68C
    LAVENDER = 0x00E6E6FA
    LAVENDER_BLUSH = 0x00FFF0F5
    LAWN_GREEN = 0x007CFC00
    LEMON_CHIFFON = 0x00FFFACD
    LIGHT_BLUE = 0x00ADD8E6
    LIGHT_CORAL = 0x00F08080
    LIGHT_CYAN = 0x00E0FFFF
    LIGHT_GOLDENROD_YELLOW = 0x00FAFAD2
    LIGHT_GREEN = 0x0090EE90
    LIGHT_GRAY = 0x00D3D3D3
    LIGHT_PINK = 0x00FFB6C1
    LIGHT_SALMON = 0x00FFA07A
    LIGHT_SEA_GREEN = 0x0020B2AA
    LIGHT_SKY_BLUE = 0x0087CEFA
    LIGHT_SLATE_GRAY = 0x00778899
    LIGHT_STEEL_BLUE = 0x00B0C4DE
    LIGHT_YELLOW = 0x00FFFFE0
    LIME = 0x0000FF00
    LIME_GREEN = 0x0032CD32
    LINEN = 0x00FAF0E6
    MAGENTA = 0x00FF00FF
    MAROON = 0x00800000
    MEDIUM_AQUAMARINE = 0x0066CDAA
    MEDIUM_BLUE = 0x000000CD
    MEDIUM_ORCHID = 0x00BA55D3
    MEDIUM_PURPLE = 0x009370DB
    MEDIUM_SEA_GREEN = 0x003CB371
    MEDIUM_SLATE_BLUE = 0x007B68EE
    MEDIUM_SPRING_GREEN = 0x0000FA9A
    MEDIUM_TURQUOISE = 0x0048D1CC
    MEDIUM_VIOLET_RED = 0x00C71585
    MIDNIGHT_BLUE = 0x00191970
    MINT_CREAM = 0x00F5FFFA
    MISTY_ROSE = 0x00FFE4E1
    MOCCASIN = 0x00FFE4B5
    NAVAJO_WHITE = 0x00FFDEAD
    NAVY = 0x00000080
    OLD_LACE = 0x00FDF5E6
    OLIVE = 0x00808000
    OLIVE_DRAB = 0x006B8E23
    ORANGE = 0x00FFA500
    ORANGE_RED = 0x00FF4500
    ORCHID = 0x00DA70D6
    PALE_GOLDENROD = 0x00EEE8AA
    PALE_GREEN = 0x0098FB98
    PALE_TURQUOISE = 0x00AFEEEE
    PALE_VIOLET_RED = 0x00DB7093
    PAPAYA_WHIP = 0x00FFEFD5
    PEACH_PUFF = 0x00FFDAB9
    PERU = 0x00CD853F
    PINK = 0x00FFC0CB
    PLUM = 0x00DDA0DD
    POWDER_BLUE = 0x00B0E0E6
    PURPLE = 0x00800080
    RED = 0x00FF0000
    ROSY_BROWN = 0x00BC8F8F
    ROYAL_BLUE = 0x004169E1
    SADDLE_BROWN = 0x008B4513
    SALMON = 0x00FA8072
    SANDY_BROWN = 0x00F4A460
    SEA_GREEN = 0x002E8B57
    SEASHELL = 0x00FFF5EE
    SIENNA = 0x00A0522D
    SILVER = 0x00C0C0C0
    SKY_BLUE = 0x0087CEEB
    SLATE_BLUE = 0x006A5ACD
    SLATE_GRAY = 0x00708090
    SNOW = 0x00FFFAFA
    SPRING_GREEN = 0x0000FF7F
    STEEL_BLUE = 0x004682B4
    TAN = 0x00D2B48C
    TEAL = 0x00008080
    THISTLE = 0x00D8BFD8
    TOMATO = 0x00FF6347
    TURQUOISE = 0x0040E0D0
    VIOLET = 0x00EE82EE
    WHEAT = 0x00F5DEB3
    WHITE = 0x00FFFFFF
    WHITE_SMOKE = 0x00F5F5F5
    YELLOW = 0x00FFFF00
    YELLOW_GREEN = 0x009ACD32

    @property
    def red(self) -> int:
        """The red component, 0 to 255."""
        return (self.value & RED_MASK) >> RED_SHIFT

    @property
    def green(self) -> int:
        """The green component, 0 to 255."""
        return (self.value & GREEN_MASK) >> GREEN_SHIFT

    @property
    def blue(self) -> int:
        """The blue component, 0 to 255."""
        return (self.value & BLUE_MASK) >> BLUE_SHIFT


def split_rgb(value: int) -> tuple[int, int, int]:
    """Split a 0x00RRGGBB value into its (red, green, blue) components."""
    value = int(value)
    if not 0 <= value <= _MAX_RGB:
        raise ValueError(f"colour value out of range: {value:#x}")
    return (
        (value & RED_MASK) >> RED_SHIFT,
        (value & GREEN_MASK) >> GREEN_SHIFT,
        (value & BLUE_MASK) >> BLUE_SHIFT,
    )


def join_rgb(red: int, green: int, blue: int) -> int:
    """Pack red, green and blue components (each 0 to 255) into 0x00RRGGBB."""
    for name, component in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= component <= 0xFF:
            raise ValueError(f"{name} component out of range: {component}")
    return (red << RED_SHIFT) | (green << GREEN_SHIFT) | (blue << BLUE_SHIFT)