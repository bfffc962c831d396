"""Flex layout values."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from elvis.keywords import _Keyword
from elvis.unit import Unit


class FlexPosition(_Keyword):
    """Positions used by ``align-items`` and ``justify-content``; ``CENTER`` is the default."""

    CENTER = "center"
    END = "flex-end"
    START = "flex-start"
    SPACE_AROUND = "space-around"
    BETWEEN = "between"


class Alignment(_Keyword):
    """A child's placement as an ``align-items``/``justify-content`` pair; ``CENTER`` is the default."""

    BOTTOM_CENTER = (FlexPosition.END, FlexPosition.CENTER)
    BOTTOM_LEFT = (FlexPosition.END, FlexPosition.START)
    BOTTOM_RIGHT = (FlexPosition.END, FlexPosition.END)
    CENTER = (FlexPosition.CENTER, FlexPosition.CENTER)
    CENTER_LEFT = (FlexPosition.CENTER, FlexPosition.START)
    CENTER_RIGHT = (FlexPosition.CENTER, FlexPosition.END)
    TOP_CENTER = (FlexPosition.START, FlexPosition.CENTER)
    TOP_LEFT = (FlexPosition.START, FlexPosition.START)
    TOP_RIGHT = (FlexPosition.START, FlexPosition.END)

    @property
    def align_items(self) -> FlexPosition:
        return self.value[0]

    @property
    def justify_content(self) -> FlexPosition:
        return self.value[1]

    def __str__(self) -> str:
        return f"align-items: {self.align_items}; justify-content: {self.justify_content};"


_BASIS_KINDS = (
    "auto",
    "inherit",
    "fill",
    "max-content",
    "min-content",
    "fit-content",
    "number",
)


@total_ordering
@dataclass(frozen=True)
class FlexBasis:
    """The ``flex-basis`` property: a keyword or a width; ``inherit`` by default."""

    kind: str = "inherit"
    unit: Unit | None = None

    def __post_init__(self) -> None:
        if self.kind not in _BASIS_KINDS:
            raise ValueError(f"unknown flex basis: {self.kind!r}")
        if (self.kind == "number") != isinstance(self.unit, Unit):
            raise ValueError("only a number flex basis carries a unit")

    @classmethod
    def number(cls, unit: Unit) -> FlexBasis:
        """A basis of a specific width."""
        return cls("number", unit)

    def __str__(self) -> str:
        return str(self.unit) if self.kind == "number" else self.kind

    def __lt__(self, other: object) -> bool:
        # Units never order, so only the kind decides.
        if not isinstance(other, FlexBasis):
            return NotImplemented
        return _BASIS_KINDS.index(self.kind) < _BASIS_KINDS.index(other.kind)


FlexBasis.AUTO = FlexBasis("auto")
FlexBasis.INHERIT = FlexBasis("inherit")
FlexBasis.FILL = FlexBasis("fill")
FlexBasis.MAX_CONTENT = FlexBasis("max-content")
FlexBasis.MIN_CONTENT = FlexBasis("min-content")
FlexBasis.FIT_CONTENT = FlexBasis("fit-content")


class FlexDirection(_Keyword):
    """The ``flex-direction`` property; ``ROW`` is the default."""

    COLUMN = "column"
    COLUMN_REVERSE = "column-reverse"
    ROW = "row"
    ROW_REVERSE = "row-reverse"


class FlexWrap(_Keyword):
    """The ``flex-wrap`` property; ``WRAP`` is the default."""

    WRAP = "wrap"
    NO_WRAP = "no-wrap"
    WRAP_REVERSE = "wrap-reverse"