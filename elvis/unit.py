"""CSS length and number units."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class UnitKind(Enum):
    """The kind of a unit; the value is the suffix written after the number."""

    AUTO = "auto"
    CH = "ch"
    CM = "cm"
    DPI = "dpi"
    DPCM = "dpcm"
    DPPX = "dppx"
    EM = "em"
    FR = "fr"
    IN = "in"
    MM = "mm"
    PC = "pc"
    PT = "pt"
    PX = "px"
    Q = "Q"
    REM = "rem"
    VH = "vh"
    VMAX = "vmax"
    VMIN = "vmin"
    VW = "vw"
    PERCENT = "%"
    NONE = ""


_SPECIAL = (UnitKind.AUTO, UnitKind.PERCENT, UnitKind.NONE)
_BY_SUFFIX = {kind.value.lower(): kind for kind in UnitKind if kind not in _SPECIAL}


def _parse_float(text: str) -> float | None:
    if not text or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _format_number(value: float, digits: int) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.{digits}f}"


@dataclass(frozen=True, eq=False)
class Unit:
    """A number with a CSS unit; units compare equal when they render alike."""

    kind: UnitKind = UnitKind.AUTO
    value: float = 0.0

    @classmethod
    def parse(cls, text: str) -> Unit:
        """Parse text such as ``"2px"``, ``"50%"`` or ``"auto"``."""
        trimmed = text.strip()
        split = next(
            (i for i, ch in enumerate(trimmed) if not ch.isnumeric() and ch != "."),
            0,
        )
        number, suffix = trimmed[:split], trimmed[split:]
        value = _parse_float(number.strip())
        if value is None:
            value = _parse_float(suffix.strip())
        if value is None:
            value = 1.0

        suffix = suffix.strip().lower()
        if suffix in ("auto", "inherit"):
            return cls(UnitKind.AUTO)
        if suffix == "%":
            percent = _parse_float(number)
            return cls(UnitKind.PERCENT, 100.0 if percent is None else percent)
        return cls(_BY_SUFFIX.get(suffix, UnitKind.NONE), value)

    def __str__(self) -> str:
        if self.kind is UnitKind.AUTO:
            return "auto"
        if self.kind is UnitKind.NONE:
            return _format_number(self.value, 0)
        return _format_number(self.value, 1) + self.kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    # Units are never ordered against each other.
    def _unordered(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return False

    __lt__ = _unordered
    __le__ = _unordered
    __gt__ = _unordered
    __ge__ = _unordered


@dataclass(frozen=True)
class VecUnit:
    """A space separated list of units, as used by margin and padding."""

    units: tuple[Unit, ...] = (Unit(UnitKind.NONE, 0.0),)

    def __init__(self, units: Iterable[Unit] = (Unit(UnitKind.NONE, 0.0),)) -> None:
        object.__setattr__(self, "units", tuple(units))

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __str__(self) -> str:
        return " ".join(str(unit) for unit in self.units)