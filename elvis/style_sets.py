"""Groups of style settings that expand into lists of styles."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from elvis.border import BorderRadius, BorderStyle, BoxBorder
from elvis.color import Color
from elvis.flex import Alignment, FlexBasis, FlexDirection, FlexWrap
from elvis.grid import GridAuto, GridFlow, GridTemplate
from elvis.keywords import MultiColumnLineStyle
from elvis.style import Style, StyleProperty, alignment_styles
from elvis.unit import Unit, UnitKind

_ONE_PX = Unit(UnitKind.PX, 1.0)
_ZERO = Unit(UnitKind.NONE, 0.0)


def _optional_styles(*pairs: tuple[StyleProperty, Any]) -> list[Style]:
    return [Style(prop, value) for prop, value in pairs if value is not None]


@dataclass(frozen=True)
class Border:
    """Each side's border and each corner's radius."""

    top_color: Color = Color("black")
    top_style: BorderStyle = BorderStyle.NONE
    top_width: Unit = _ONE_PX

    right_color: Color = Color("black")
    right_style: BorderStyle = BorderStyle.NONE
    right_width: Unit = _ONE_PX

    bottom_color: Color = Color("black")
    bottom_style: BorderStyle = BorderStyle.NONE
    bottom_width: Unit = _ONE_PX

    left_color: Color = Color("black")
    left_style: BorderStyle = BorderStyle.NONE
    left_width: Unit = _ONE_PX

    top_left_radius: Unit = _ZERO
    top_right_radius: Unit = _ZERO
    bottom_right_radius: Unit = _ZERO
    bottom_left_radius: Unit = _ZERO

    second_top_left_radius: Unit = _ZERO
    second_top_right_radius: Unit = _ZERO
    second_bottom_right_radius: Unit = _ZERO
    second_bottom_left_radius: Unit = _ZERO

    def color_all(self, color: Color) -> Border:
        """Set the color of every side."""
        return replace(
            self, top_color=color, right_color=color, bottom_color=color, left_color=color
        )

    def radius_all(self, radius: Unit) -> Border:
        """Set the first radius of every corner."""
        return replace(
            self,
            top_left_radius=radius,
            top_right_radius=radius,
            bottom_right_radius=radius,
            bottom_left_radius=radius,
        )

    def width_all(self, width: Unit) -> Border:
        """Set the width of every side."""
        return replace(
            self, top_width=width, right_width=width, bottom_width=width, left_width=width
        )

    def style_all(self, style: BorderStyle) -> Border:
        """Set the line style of every side."""
        return replace(
            self, top_style=style, right_style=style, bottom_style=style, left_style=style
        )

    def to_styles(self) -> list[Style]:
        """Expand into a border-radius style followed by the border styles."""
        top = BoxBorder(self.top_width, self.top_style, self.top_color)
        right = BoxBorder(self.right_width, self.right_style, self.right_color)
        bottom = BoxBorder(self.bottom_width, self.bottom_style, self.bottom_color)
        left = BoxBorder(self.left_width, self.left_style, self.left_color)

        radius = BorderRadius(
            top_left=self.top_left_radius,
            top_right=self.top_right_radius,
            bottom_left=self.bottom_left_radius,
            bottom_right=self.bottom_right_radius,
            second_top_left=self.second_top_left_radius,
            second_top_right=self.second_top_right_radius,
            second_bottom_right=self.second_bottom_left_radius,
            second_bottom_left=self.second_bottom_right_radius,
        )
        styles = [Style(StyleProperty.BORDER_RADIUS, radius)]

        if top == right == bottom == left:
            styles.extend(
                [
                    Style(StyleProperty.BORDER_TOP, top),
                    Style(StyleProperty.BORDER_RIGHT, right),
                    Style(StyleProperty.BORDER_BOTTOM, bottom),
                    Style(StyleProperty.BORDER_LEFT, left),
                ]
            )
        else:
            styles.append(Style(StyleProperty.BORDER, top))
        return styles


@dataclass(frozen=True)
class MultiColumnStyle:
    """Settings of a multi-column layout."""

    color: Color | None = None
    count: Unit | None = None
    gap: Unit | None = None
    style: MultiColumnLineStyle | None = None

    def to_styles(self) -> list[Style]:
        """The styles of the settings that are given."""
        return _optional_styles(
            (StyleProperty.COLUMN_COUNT, self.count),
            (StyleProperty.COLUMN_GAP, self.gap),
            (StyleProperty.COLUMN_RULE_COLOR, self.color),
            (StyleProperty.COLUMN_RULE_STYLE, self.style),
        )


@dataclass(frozen=True)
class FlexStyle:
    """Settings of a flex layout; only the alignment turns into styles."""

    align: Alignment | None = None
    basis: FlexBasis | None = None
    direction: FlexDirection | None = None
    grow: Unit | None = None
    order: Unit | None = None
    wrap: FlexWrap | None = None

    def with_grow(self, grow: int) -> FlexStyle:
        """Set the flex grow factor."""
        return replace(self, grow=Unit(UnitKind.NONE, float(int(grow))))

    def with_order(self, order: int) -> FlexStyle:
        """Set the flex order."""
        return replace(self, order=Unit(UnitKind.NONE, float(int(order))))

    def to_styles(self) -> list[Style]:
        """The alignment styles, if an alignment is set."""
        return alignment_styles(self.align) if self.align is not None else []


@dataclass(frozen=True)
class GridStyle:
    """Settings of a grid layout."""

    col: GridAuto | None = None
    col_gap: Unit | None = None
    flow: GridFlow | None = None
    row: GridAuto | None = None
    row_gap: Unit | None = None
    template_col: GridTemplate | None = None
    template_row: GridTemplate | None = None

    def to_styles(self) -> list[Style]:
        """The styles of the settings that are given."""
        return _optional_styles(
            (StyleProperty.GRID_AUTO_COLUMNS, self.col),
            (StyleProperty.GRID_AUTO_ROWS, self.row),
            (StyleProperty.GRID_AUTO_FLOW, self.flow),
            (StyleProperty.GRID_COLUMN_GAP, self.col_gap),
            (StyleProperty.GRID_ROW_GAP, self.row_gap),
            (StyleProperty.GRID_TEMPLATE_COLUMNS, self.template_col),
            (StyleProperty.GRID_TEMPLATE_ROWS, self.template_row),
        )