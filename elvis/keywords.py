"""Keyword values for display, text alignment, column rules and position."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering


@total_ordering
class _Keyword(Enum):
    """A CSS keyword; renders as its value and orders by declaration."""

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        members = list(type(self))
        return members.index(self) < members.index(other)


class Display(_Keyword):
    """The ``display`` property."""

    BLOCK = "block"
    INLINE_BLOCK = "inline-block"
    FLEX = "flex"
    GRID = "grid"


class TextAlign(_Keyword):
    """The ``text-align`` property; ``CENTER`` is the default."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    JUSTIFY = "juistyfy"
    START = "start"
    END = "end"
    INHERIT = "inherit"
    INITIAL = "initial"
    UNSET = "unset"


class MultiColumnLineStyle(_Keyword):
    """The line style between columns; ``NONE`` is the default."""

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


class Position(_Keyword):
    """The ``position`` property; ``RELATIVE`` is the default."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"