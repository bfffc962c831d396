"""Colors following the material design palette."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from functools import total_ordering

_NAMED_HEX = {
    "amber": "0xFFFFC107",
    "amber_accent": "0xFFFFD740",
    "black": "0xFF000000",
    "blue": "0xFF2196F3",
    "blue_accent": "0xFF448AFF",
    "blue_grey": "0xFF607D8B",
    "brown": "0xFF795548",
    "cyan": "0xFF00BCD4",
    "cyan_accent": "0xFF18FFFF",
    "deep_orange": "0xFFFF5722",
    "deep_orange_accent": "0xFFFF6E40",
    "deep_purple": "0xFF673AB7",
    "deep_purple_accent": "0xFF7C4DFF",
    "green": "0xFF4CAF50",
    "green_accent": "0xFF69F0AE",
    "grey": "FF9E9E9E",
    "indigo": "0xFF3F51B5",
    "indigo_accent": "0xFF536DFE",
    "light_blue": "0xFF03A9FA",
    "light_blue_accent": "0xFF40C4FF",
    "light_green": "0xFF8BC34A",
    "light_green_accent": "0xFFB2FF59",
    "lime": "0xFFCDDC39",
    "lime_accent": "0xFFEEFF41",
    "orange": "0xFFFF9800",
    "orange_accent": "0xFFFFAB40",
    "pink": "0xFFE91E63",
    "pink_accent": "0xFFFF4081",
    "purple": "0xFF9C27B0",
    "purple_accent": "0xFFE040FB",
    "red": "0xFFF44336",
    "red_accent": "0xFFFF5252",
    "teal": "0xFF009688",
    "teal_accent": "0xFF64FFDA",
    "transparent": "0xFFFFFFFF",
    "white": "0xFFFFFFFF",
    "yellow": "0xFFFFEB3B",
    "yellow_accent": "0xFFFFFF00",
}

_INHERIT = "inherit"
_ORGB = "orgb"
_HEX_DIGITS = "ABCDEF"


def _f32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 2**31 - 1 if value > 0 else -(2**31)
    return max(-(2**31), min(2**31 - 1, int(value)))


def _hex(value: int, bits: int) -> str:
    return format(value & ((1 << bits) - 1), "X")


def _i16(value: int) -> int:
    value = int(value)
    if not -(2**15) <= value < 2**15:
        raise ValueError(f"color channel out of range: {value}")
    return value


def _dec(digit: str) -> int:
    stripped = digit.strip()
    if not stripped:
        raise ValueError("empty hex digit")
    first = stripped[0]
    if first in _HEX_DIGITS:
        return 10 + _HEX_DIGITS.index(first)
    return int(digit) if digit.isascii() and digit.isdigit() else 0


@total_ordering
@dataclass(frozen=True, eq=False)
class Color:
    """A named palette color, ``inherit``, or an explicit opacity/red/green/blue color.

    Colors compare, hash and sort by their hex form.
    """

    name: str = "white"
    values: tuple[float, int, int, int] | None = None

    def __post_init__(self) -> None:
        if self.name == _ORGB:
            if self.values is None or len(self.values) != 4:
                raise ValueError("an orgb color needs four values")
        elif self.name != _INHERIT and self.name not in _NAMED_HEX:
            raise ValueError(f"unknown color: {self.name!r}")
        elif self.values is not None:
            raise ValueError(f"named color {self.name!r} takes no values")

    @classmethod
    def orgb(cls, opacity: float, red: int, green: int, blue: int) -> Color:
        """Build a color from opacity and red, green and blue channels."""
        return cls(_ORGB, (_f32(opacity), _i16(red), _i16(green), _i16(blue)))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``0xOORRGGBB``, returning a palette color when one matches."""
        text = text[:10]
        for name, hex_text in _NAMED_HEX.items():
            if hex_text == text:
                return cls(name)
        return cls.from_hex_to_orgb(text)

    @classmethod
    def from_hex_to_orgb(cls, text: str) -> Color:
        """Parse ``0xOORRGGBB`` into an explicit color; only upper-case digits count."""
        text = text[:10]
        if len(text) < 10:
            raise ValueError(f"hex color too short: {text!r}")

        def pair(index: int) -> int:
            return _dec(text[index]) * 16 + _dec(text[index + 1])

        return cls(_ORGB, (_f32(pair(2) / 255.0), pair(4), pair(6), pair(8)))

    def to_hex(self) -> str:
        """Render the color as a hex string."""
        if self.name == _ORGB:
            opacity, red, green, blue = self.values
            alpha = _to_i32(_f32(opacity * 255.0))
            return f"0x{_hex(alpha, 32)}{_hex(red, 16)}{_hex(green, 16)}{_hex(blue, 16)}"
        if self.name == _INHERIT:
            return "0xFFFFFFFF"
        return _NAMED_HEX[self.name]

    def to_orgb(self) -> Color:
        """Convert to an explicit opacity/red/green/blue color via the hex form."""
        return Color.from_hex_to_orgb(self.to_hex())

    def red(self, red: int) -> Color:
        """Return the color with the red channel replaced."""
        if self.name != _ORGB:
            return self.to_orgb().red(red)
        opacity, _, green, blue = self.values
        return Color(_ORGB, (opacity, _i16(red), green, blue))

    def green(self, green: int) -> Color:
        """Return the color with the green channel replaced."""
        if self.name != _ORGB:
            return self.to_orgb().green(green)
        opacity, red, _, blue = self.values
        return Color(_ORGB, (opacity, red, _i16(green), blue))

    def blue(self, blue: int) -> Color:
        """Return the color as an explicit color; the blue channel is kept as it was."""
        if self.name != _ORGB:
            return self.to_orgb().blue(blue)
        return self

    def transparent(self, transparency: float) -> Color:
        """Return the color with the opacity replaced."""
        if self.name != _ORGB:
            return self.to_orgb().transparent(transparency)
        _, red, green, blue = self.values
        return Color(_ORGB, (_f32(transparency), red, green, blue))

    def __str__(self) -> str:
        if self.name == _ORGB:
            opacity, red, green, blue = self.values
            return f"rgba({red}, {green}, {blue}, {opacity:.2f})"
        if self.name == _INHERIT:
            return "inherit"
        opacity, red, green, blue = self.to_orgb().values
        return f"rgba({red}, {green}, {blue}, {opacity:.1f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_hex() == other.to_hex()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_hex() < other.to_hex()

    def __hash__(self) -> int:
        return hash(self.to_hex())


for _name in (_INHERIT, *_NAMED_HEX):
    setattr(Color, _name.upper(), Color(_name))