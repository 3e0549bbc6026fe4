"""Descriptions of simple on-screen widgets: buttons, check boxes and radio buttons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from notehero.colors import Color
from notehero.geometry import Font, FontEx, Image, Rectangle

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_RGB_MAX = 0x00FFFFFF

AnyFont = Union[Font, FontEx]


def _check_uint(name: str, value: int, high: int) -> None:
    if not 0 <= value <= high:
        raise ValueError(f"{name} out of range [0, {high}]: {value}")


def _check_color(name: str, value: int) -> None:
    if not 0 <= int(value) <= _RGB_MAX:
        raise ValueError(f"{name} is not a 24-bit colour: {value}")


@dataclass
class Button:
    """A rectangular push button with a border, a fill and a text label."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int
    text: str = ""
    text_x: int = 0
    text_y: int = 0
    border_width: int = 0
    selected: bool = False
    fill_color: int = Color.WHITE
    border_color: int = Color.BLACK
    selected_color: int = Color.BLACK
    text_color: int = Color.BLACK
    selected_text_color: int = Color.WHITE
    font: Optional[AnyFont] = None

    def __post_init__(self) -> None:
        for name in ("x_min", "x_max", "y_min", "y_max", "text_x", "text_y"):
            _check_uint(name, getattr(self, name), _UINT16_MAX)
        if self.x_min > self.x_max:
            raise ValueError(f"x_min {self.x_min} is greater than x_max {self.x_max}")
        if self.y_min > self.y_max:
            raise ValueError(f"y_min {self.y_min} is greater than y_max {self.y_max}")
        _check_uint("border_width", self.border_width, _UINT8_MAX)
        for name in (
            "fill_color",
            "border_color",
            "selected_color",
            "text_color",
            "selected_text_color",
        ):
            _check_color(name, getattr(self, name))

    def bounds(self) -> Rectangle:
        """The area the button covers, edges included."""
        return Rectangle(self.x_min, self.y_min, self.x_max, self.y_max)


@dataclass
class CheckBox:
    """A check box followed by a short text label."""

    x: int
    y: int
    text: str = ""
    num_chars: int = 0
    gap: int = 0
    selected: bool = False
    text_color: int = Color.BLACK
    background_color: int = Color.WHITE
    selected_color: int = Color.BLACK
    font: Optional[AnyFont] = None

    def __post_init__(self) -> None:
        _check_uint("x", self.x, _UINT16_MAX)
        _check_uint("y", self.y, _UINT16_MAX)
        _check_uint("gap", self.gap, _UINT8_MAX)
        _check_uint("num_chars", self.num_chars, _UINT8_MAX)
        for name in ("text_color", "background_color", "selected_color"):
            _check_color(name, getattr(self, name))

    def label(self) -> str:
        """The part of the text that is shown: its first num_chars characters."""
        return self.text[: self.num_chars]


@dataclass
class RadioButton:
    """A round selector followed by a short text label."""

    x: int
    y: int
    text: str = ""
    num_chars: int = 0
    gap: int = 0
    selected: bool = False
    text_color: int = Color.BLACK
    selected_color: int = Color.BLACK
    not_selected_color: int = Color.WHITE
    font: Optional[AnyFont] = None

    def __post_init__(self) -> None:
        _check_uint("x", self.x, _UINT16_MAX)
        _check_uint("y", self.y, _UINT16_MAX)
        _check_uint("gap", self.gap, _UINT8_MAX)
        _check_uint("num_chars", self.num_chars, _UINT8_MAX)
        for name in ("text_color", "selected_color", "not_selected_color"):
            _check_color(name, getattr(self, name))

    def label(self) -> str:
        """The part of the text that is shown: its first num_chars characters."""
        return self.text[: self.num_chars]


@dataclass
class ImageButton:
    """A button showing a bitmap image, with an optional border."""

    x: int
    y: int
    image_width: int
    image_height: int
    image: Optional[Image] = None
    border_width: int = 0
    selected: bool = False
    border_color: int = Color.BLACK
    selected_color: int = Color.BLACK

    def __post_init__(self) -> None:
        _check_uint("x", self.x, _UINT16_MAX)
        _check_uint("y", self.y, _UINT16_MAX)
        _check_uint("image_width", self.image_width, _UINT16_MAX)
        _check_uint("image_height", self.image_height, _UINT16_MAX)
        _check_uint("border_width", self.border_width, _UINT8_MAX)
        _check_color("border_color", self.border_color)
        _check_color("selected_color", self.selected_color)

    def bounds(self) -> Rectangle:
        """The area of the image, with its upper-left corner at (x, y)."""
        if self.image_width == 0 or self.image_height == 0:
            raise ValueError("an image button with no width or height has no area")
        return Rectangle(
            self.x,
            self.y,
            self.x + self.image_width - 1,
            self.y + self.image_height - 1,
        )