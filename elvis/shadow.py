"""Box shadow values."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Union

from elvis.color import Color
from elvis.unit import Unit

_KEYWORDS = ("none", "inherit", "initial", "inset", "unset")
_LISTS = ("customize", "derive")

_Value = Union[Unit, Color, "tuple[BoxShadow, ...]", None]


@total_ordering
@dataclass(frozen=True)
class BoxShadow:
    """A box shadow; equality is structural, ordering follows the rendered text."""

    kind: str = "none"
    value: _Value = None

    def __post_init__(self) -> None:
        if self.kind in _KEYWORDS:
            if self.value is not None:
                raise ValueError(f"box shadow {self.kind!r} takes no value")
        elif self.kind == "unit":
            if not isinstance(self.value, Unit):
                raise ValueError("a unit box shadow needs a Unit")
        elif self.kind == "color":
            if not isinstance(self.value, Color):
                raise ValueError("a color box shadow needs a Color")
        elif self.kind in _LISTS:
            object.__setattr__(self, "value", tuple(self.value or ()))
        else:
            raise ValueError(f"unknown box shadow: {self.kind!r}")

    @classmethod
    def unit(cls, value: Unit) -> BoxShadow:
        """A single length in a shadow."""
        return cls("unit", value)

    @classmethod
    def color(cls, value: Color) -> BoxShadow:
        """The color of a shadow."""
        return cls("color", value)

    @classmethod
    def customize(cls, parts: Iterable[BoxShadow]) -> BoxShadow:
        """offset-x, offset-y, blur-radius, spread-radius and color, separated by spaces."""
        return cls("customize", tuple(parts))

    @classmethod
    def derive(cls, shadows: Iterable[BoxShadow]) -> BoxShadow:
        """Several shadows, separated by commas."""
        return cls("derive", tuple(shadows))

    def __str__(self) -> str:
        if self.kind in _KEYWORDS:
            return self.kind
        if self.kind == "customize":
            return " ".join(str(part) for part in self.value)
        if self.kind == "derive":
            return ", ".join(str(shadow) for shadow in self.value)
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BoxShadow):
            return NotImplemented
        return str(self) < str(other)


BoxShadow.NONE = BoxShadow("none")
BoxShadow.INHERIT = BoxShadow("inherit")
BoxShadow.INITIAL = BoxShadow("initial")
BoxShadow.INSET = BoxShadow("inset")
BoxShadow.UNSET = BoxShadow("unset")