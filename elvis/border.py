"""Border values: line style, box border and border radius."""

from __future__ import annotations

from dataclasses import dataclass, replace

from elvis.color import Color
from elvis.keywords import _Keyword
from elvis.unit import Unit, UnitKind

_ZERO = Unit(UnitKind.NONE, 0.0)


class BorderStyle(_Keyword):
    """The border line style; ``NONE`` is the default."""

    NONE = "none"
    HIDDEN = "hidden"
    DOTTED = "dotted"
    DASHED = "dashed"
    SOLID = "solid"
    DOUBLE = "double"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"


@dataclass(frozen=True)
class BoxBorder:
    """Width, style and color of one border."""

    width: Unit = _ZERO
    style: BorderStyle = BorderStyle.NONE
    color: Color = Color("black")

    @classmethod
    def with_width(cls, width: Unit) -> BoxBorder:
        """A default border with the given width."""
        return cls(width=width)

    def __str__(self) -> str:
        return f"{self.width} {self.style} {self.color}"

    def __lt__(self, other: object) -> bool:
        # Widths never order, so only style and color decide.
        if not isinstance(other, BoxBorder):
            return NotImplemented
        return (self.style, self.color) < (other.style, other.color)


@dataclass(frozen=True)
class BorderRadius:
    """The four corner radii, with optional second radii for elliptic corners."""

    top_left: Unit = _ZERO
    top_right: Unit = _ZERO
    bottom_left: Unit = _ZERO
    bottom_right: Unit = _ZERO
    second_top_left: Unit = _ZERO
    second_top_right: Unit = _ZERO
    second_bottom_left: Unit = _ZERO
    second_bottom_right: Unit = _ZERO

    def all(self, radius: Unit) -> BorderRadius:
        """Set the four first radii to ``radius``."""
        return replace(
            self,
            top_left=radius,
            top_right=radius,
            bottom_left=radius,
            bottom_right=radius,
        )

    def __str__(self) -> str:
        radius = f"{self.top_left} {self.top_right} {self.bottom_left} {self.bottom_right}"
        if (
            self.second_top_left == self.second_top_right
            and self.second_bottom_right == self.second_bottom_left
            and self.second_top_left == self.second_bottom_right
            and self.second_bottom_right == _ZERO
        ):
            return radius
        return (
            f"{radius} / {self.second_top_left} {self.second_top_right} "
            f"{self.second_bottom_left} {self.second_bottom_right}"
        )

    def __lt__(self, other: object) -> bool:
        # Radii are made of units, which never order.
        if not isinstance(other, BorderRadius):
            return NotImplemented
        return False