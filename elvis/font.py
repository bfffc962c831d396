"""Font style and font family values."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable

from elvis.keywords import _Keyword


class FontStyle(_Keyword):
    """The ``font-style`` property."""

    ITALIC = "italic"
    NORMAL = "normal"

    @classmethod
    def parse(cls, text: str) -> FontStyle:
        """Parse a style name; anything but ``italic`` is normal."""
        return cls.ITALIC if text.lower() == "italic" else cls.NORMAL


_KINDS = ("mix", "helvetica", "neue", "arial", "derive")
_NAMES = {"helvetica": "Helvetica", "neue": "Neue", "arial": "Arial"}
_PARSE = {"Helvetica": "helvetica", "Neue": "neue"}


@total_ordering
@dataclass(frozen=True)
class FontFamily:
    """A font family: a named font, a mix of two families, or a list of families."""

    kind: str
    parts: tuple[FontFamily, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown font family: {self.kind!r}")
        parts = tuple(self.parts)
        if self.kind == "mix" and len(parts) != 2:
            raise ValueError("a mixed font family needs two families")
        if self.kind in _NAMES and parts:
            raise ValueError(f"font family {self.kind!r} takes no parts")
        object.__setattr__(self, "parts", parts)

    @classmethod
    def parse(cls, text: str) -> FontFamily:
        """Parse a family name; the case-folded lookup against capitalised names falls back to Arial."""
        return cls(_PARSE.get(text.lower(), "arial"))

    @classmethod
    def mix(cls, first: FontFamily, second: FontFamily) -> FontFamily:
        """Combine two families into one quoted name."""
        return cls("mix", (first, second))

    @classmethod
    def derive(cls, families: Iterable[FontFamily]) -> FontFamily:
        """A list of families."""
        return cls("derive", tuple(families))

    def __str__(self) -> str:
        if self.kind == "mix":
            first, second = self.parts
            return f'"{first} {second}",'
        if self.kind == "derive":
            rendered = [str(part) for part in self.parts]
            if len(rendered) == 1 and rendered[0].endswith(","):
                return rendered[0][:-1]
            return " ".join(rendered)
        return _NAMES[self.kind]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FontFamily):
            return NotImplemented
        return (_KINDS.index(self.kind), self.parts) < (
            _KINDS.index(other.kind),
            other.parts,
        )


FontFamily.HELVETICA = FontFamily("helvetica")
FontFamily.NEUE = FontFamily("neue")
FontFamily.ARIAL = FontFamily("arial")