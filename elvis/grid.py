"""Grid layout values."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable

from elvis.keywords import _Keyword
from elvis.unit import Unit, UnitKind

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


def _plain(units: tuple[Unit, ...]) -> str:
    return "".join(f"{unit} " for unit in units)


_AUTO_KINDS = (
    "auto",
    "fixed",
    "inherit",
    "initial",
    "max-content",
    "min-content",
    "minmax",
    "plain",
    "unset",
)
_AUTO_ARITY = {"fixed": 1, "minmax": 2}


@total_ordering
@dataclass(frozen=True)
class GridAuto:
    """Sizes of implicit grid columns or rows; ``unset`` by default."""

    kind: str = "unset"
    units: tuple[Unit, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _AUTO_KINDS:
            raise ValueError(f"unknown grid auto: {self.kind!r}")
        units = tuple(self.units)
        if self.kind != "plain" and len(units) != _AUTO_ARITY.get(self.kind, 0):
            raise ValueError(f"wrong number of units for grid auto {self.kind!r}")
        object.__setattr__(self, "units", units)

    @classmethod
    def fixed(cls, unit: Unit) -> GridAuto:
        return cls("fixed", (unit,))

    @classmethod
    def min_max(cls, low: Unit, high: Unit) -> GridAuto:
        return cls("minmax", (low, high))

    @classmethod
    def plain(cls, units: Iterable[Unit]) -> GridAuto:
        return cls("plain", tuple(units))

    def __str__(self) -> str:
        if self.kind == "fixed":
            return str(self.units[0])
        if self.kind == "minmax":
            return f"minmax({self.units[0]}, {self.units[1]})"
        if self.kind == "plain":
            return _plain(self.units)
        return self.kind

    def _key(self) -> tuple[int, int]:
        # Units never order, so lists only order by length.
        return (_AUTO_KINDS.index(self.kind), len(self.units) if self.kind == "plain" else 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GridAuto):
            return NotImplemented
        return self._key() < other._key()


for _kind in ("auto", "inherit", "initial", "max-content", "min-content", "unset"):
    setattr(GridAuto, _kind.upper().replace("-", "_"), GridAuto(_kind))


class GridFlow(_Keyword):
    """The ``grid-auto-flow`` property; ``UNSET`` is the default."""

    COLUMN = "column"
    ROW = "row"
    DENSE = "dense"
    COLUMN_DENSE = "column dense"
    ROW_DENSE = "row dense"
    INHERIT = "inherit"
    INITIAL = "initial"
    UNSET = "unset"


_TEMPLATE_KINDS = (
    "fit-content",
    "inherit",
    "initial",
    "minmax",
    "none",
    "plain",
    "repeat",
    "subgrid",
    "unset",
)
_TEMPLATE_ARITY = {"fit-content": 1, "minmax": 2, "repeat": 1}
_TEMPLATE_TEXT = {"subgrid": "subgrid", "unset": "unit"}


@total_ordering
@dataclass(frozen=True)
class GridTemplate:
    """Template of grid columns or rows; one repeated fraction by default."""

    kind: str = "repeat"
    units: tuple[Unit, ...] = ()
    count: int = 1

    def __post_init__(self) -> None:
        if self.kind not in _TEMPLATE_KINDS:
            raise ValueError(f"unknown grid template: {self.kind!r}")
        units = tuple(self.units)
        if self.kind == "repeat":
            if not units:
                units = (Unit(UnitKind.FR, 1.0),)
            if not isinstance(self.count, int) or not _I32_MIN <= self.count <= _I32_MAX:
                raise ValueError(f"repeat count out of range: {self.count!r}")
        else:
            object.__setattr__(self, "count", 0)
        if self.kind != "plain" and len(units) != _TEMPLATE_ARITY.get(self.kind, 0):
            raise ValueError(f"wrong number of units for grid template {self.kind!r}")
        object.__setattr__(self, "units", units)

    @classmethod
    def fit_content(cls, unit: Unit) -> GridTemplate:
        return cls("fit-content", (unit,))

    @classmethod
    def min_max(cls, low: Unit, high: Unit) -> GridTemplate:
        return cls("minmax", (low, high))

    @classmethod
    def plain(cls, units: Iterable[Unit]) -> GridTemplate:
        return cls("plain", tuple(units))

    @classmethod
    def repeat(cls, count: int, unit: Unit) -> GridTemplate:
        return cls("repeat", (unit,), count)

    def __str__(self) -> str:
        if self.kind == "fit-content":
            return f"fit-content({self.units[0]})"
        if self.kind == "minmax":
            return f"minmax({self.units[0]}, {self.units[1]})"
        if self.kind == "plain":
            return _plain(self.units)
        if self.kind == "repeat":
            return f"({self.count}, {self.units[0]})"
        return _TEMPLATE_TEXT.get(self.kind, self.kind)

    def _key(self) -> tuple[int, int]:
        index = _TEMPLATE_KINDS.index(self.kind)
        if self.kind == "plain":
            return (index, len(self.units))
        return (index, self.count)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GridTemplate):
            return NotImplemented
        return self._key() < other._key()


for _kind in ("inherit", "initial", "none", "unset"):
    setattr(GridTemplate, _kind.upper(), GridTemplate(_kind))
GridTemplate.SUB_GRID = GridTemplate("subgrid")