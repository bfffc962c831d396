"""CSS style declarations and the properties they set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any

from elvis.border import BorderRadius, BorderStyle, BoxBorder
from elvis.color import Color
from elvis.flex import Alignment, FlexBasis, FlexDirection, FlexPosition, FlexWrap
from elvis.font import FontFamily, FontStyle
from elvis.grid import GridAuto, GridFlow, GridTemplate
from elvis.keywords import Display, MultiColumnLineStyle, Position, TextAlign
from elvis.shadow import BoxShadow
from elvis.unit import Unit, VecUnit


def camel_snake(camel: str) -> str:
    """Turn ``CamelCase`` into ``camel-case``, as CSS property names are written."""
    pieces = []
    for index, char in enumerate(camel.strip()):
        if index > 0 and char.isascii() and char.isupper():
            pieces.append("-")
        pieces.append(char)
    return "".join(pieces).lower()


class StyleProperty(Enum):
    """A CSS property together with the type of value it takes."""

    # Box
    WIDTH = ("Width", Unit)
    HEIGHT = ("Height", Unit)
    MAX_WIDTH = ("MaxWidth", Unit)
    MAX_HEIGHT = ("MaxHeight", Unit)
    OUTLINE_WIDTH = ("OutlineWidth", Unit)
    TOP = ("Top", Unit)
    RIGHT = ("Right", Unit)
    BOTTOM = ("Bottom", Unit)
    LEFT = ("Left", Unit)
    PADDING = ("Padding", VecUnit)
    PADDING_TOP = ("PaddingTop", Unit)
    PADDING_RIGHT = ("PaddingRight", Unit)
    PADDING_BOTTOM = ("PaddingBottom", Unit)
    PADDING_LEFT = ("PaddingLeft", Unit)
    MARGIN = ("Margin", VecUnit)
    MARGIN_TOP = ("MarginTop", Unit)
    MARGIN_RIGHT = ("MarginRight", Unit)
    MARGIN_BOTTOM = ("MarginBottom", Unit)
    MARGIN_LEFT = ("MarginLeft", Unit)
    # Border
    BORDER_TOP = ("BorderTop", BoxBorder)
    BORDER_RIGHT = ("BorderRight", BoxBorder)
    BORDER_BOTTOM = ("BorderBottom", BoxBorder)
    BORDER_LEFT = ("BorderLeft", BoxBorder)
    BORDER = ("Border", BoxBorder)
    # Typography
    FONT_WEIGHT = ("FontWeight", Unit)
    FONT_SIZE = ("FontSize", Unit)
    FONT_STRETCH = ("FontStretch", Unit)
    LINE_HEIGHT = ("LineHeight", Unit)
    # Color
    COLOR = ("Color", Color)
    BACKGROUND_COLOR = ("BackgroundColor", Color)
    # Flex
    ALIGN_ITEMS = ("AlignItems", FlexPosition)
    JUSTIFY_CONTENT = ("JustifyContent", FlexPosition)
    FLEX_GROW = ("FlexGrow", Unit)
    ORDER = ("Order", Unit)
    # Grid
    GRID_AUTO_COLUMNS = ("GridAutoColumns", GridAuto)
    GRID_AUTO_ROWS = ("GridAutoRows", GridAuto)
    GRID_AUTO_FLOW = ("GridAutoFlow", GridFlow)
    GRID_COLUMN_GAP = ("GridColumnGap", Unit)
    GRID_ROW_GAP = ("GridRowGap", Unit)
    GRID_TEMPLATE_COLUMNS = ("GridTemplateColumns", GridTemplate)
    GRID_TEMPLATE_ROWS = ("GridTemplateRows", GridTemplate)
    # Column
    COLUMN_COUNT = ("ColumnCount", Unit)
    COLUMN_GAP = ("ColumnGap", Unit)
    COLUMN_RULE_COLOR = ("ColumnRuleColor", Color)
    COLUMN_RULE_STYLE = ("ColumnRuleStyle", MultiColumnLineStyle)
    # Properties named after their value type
    FLEX_BASIS = ("FlexBasis", FlexBasis)
    FLEX_DIRECTION = ("FlexDirection", FlexDirection)
    FLEX_POSITION = ("FlexPosition", FlexPosition)
    FLEX_WRAP = ("FlexWrap", FlexWrap)
    BORDER_STYLE = ("BorderStyle", BorderStyle)
    GRID_AUTO = ("GridAuto", GridAuto)
    GRID_FLOW = ("GridFlow", GridFlow)
    GRID_TEMPLATE = ("GridTemplate", GridTemplate)
    FONT_STYLE = ("FontStyle", FontStyle)
    FONT_FAMILY = ("FontFamily", FontFamily)
    TEXT_ALIGN = ("TextAlign", TextAlign)
    BOX_SHADOW = ("BoxShadow", BoxShadow)
    POSITION = ("Position", Position)
    BORDER_RADIUS = ("BorderRadius", BorderRadius)
    DISPLAY = ("Display", Display)

    def __init__(self, title: str, value_type: type) -> None:
        self.title = title
        self.value_type = value_type

    @property
    def css_name(self) -> str:
        """The property name as written in CSS."""
        return camel_snake(self.title)


_ORDER = {prop: index for index, prop in enumerate(StyleProperty)}


def _value_lt(left: Any, right: Any) -> bool:
    if isinstance(left, VecUnit) and isinstance(right, VecUnit):
        # Units never order, so lists of them order by length alone.
        return len(left) < len(right)
    try:
        return bool(left < right)
    except TypeError:
        return False


@total_ordering
@dataclass(frozen=True)
class Style:
    """One CSS declaration; styles order by property, then by value."""

    prop: StyleProperty
    value: Any

    def __post_init__(self) -> None:
        expected = self.prop.value_type
        if expected is VecUnit and isinstance(self.value, (list, tuple)):
            object.__setattr__(self, "value", VecUnit(self.value))
        if not isinstance(self.value, expected):
            raise TypeError(
                f"{self.prop.title} takes {expected.__name__}, "
                f"not {type(self.value).__name__}"
            )

    def to_css(self) -> str:
        """Render as ``name: value``."""
        return f"{self.prop.css_name}: {self.value}"

    def __str__(self) -> str:
        return self.to_css()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        if self.prop is not other.prop:
            return _ORDER[self.prop] < _ORDER[other.prop]
        return _value_lt(self.value, other.value)


def alignment_styles(alignment: Alignment) -> list[Style]:
    """The ``align-items`` and ``justify-content`` styles of an alignment."""
    return [
        Style(StyleProperty.ALIGN_ITEMS, alignment.align_items),
        Style(StyleProperty.JUSTIFY_CONTENT, alignment.justify_content),
    ]