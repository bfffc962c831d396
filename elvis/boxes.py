"""Box widgets: containers, positioned boxes and sized boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from elvis.color import Color
from elvis.flex import Alignment
from elvis.keywords import Position
from elvis.node import Node
from elvis.shadow import BoxShadow
from elvis.style import Style, StyleProperty, alignment_styles
from elvis.style_sets import Border
from elvis.unit import Unit, VecUnit


def _present(*pairs: tuple[StyleProperty, Any]) -> list[Style]:
    return [Style(prop, value) for prop, value in pairs if value is not None]


@dataclass
class Container:
    """A child with size, spacing, background, border and shadow settings."""

    child: Any = field(default_factory=Node)
    align: Alignment | None = None
    height: Unit | None = None
    max_height: Unit | None = None
    max_width: Unit | None = None
    width: Unit | None = None
    padding: VecUnit | list[Unit] | None = None
    margin: VecUnit | list[Unit] | None = None
    background_color: Color | None = None
    border: Border | None = None
    shadow: BoxShadow | None = None

    def to_node(self) -> Node:
        """A node with the child and the styles of the settings given."""
        styles = _present(
            (StyleProperty.HEIGHT, self.height),
            (StyleProperty.WIDTH, self.width),
            (StyleProperty.MAX_HEIGHT, self.max_height),
            (StyleProperty.MAX_WIDTH, self.max_width),
            (StyleProperty.PADDING, self.padding),
            (StyleProperty.MARGIN, self.margin),
            (StyleProperty.BACKGROUND_COLOR, self.background_color),
            (StyleProperty.BOX_SHADOW, self.shadow),
        )
        if self.align is not None:
            styles.extend(alignment_styles(self.align))
        if self.border is not None:
            styles.extend(self.border.to_styles())
        return Node(style=styles, children=[self.child])


@dataclass
class Positioned:
    """A child placed with a position and offsets."""

    child: Any = field(default_factory=Node)
    pos: Position | None = None
    top: Unit | None = None
    right: Unit | None = None
    bottom: Unit | None = None
    left: Unit | None = None

    def to_node(self) -> Node:
        """A node with the child and the sorted position styles."""
        styles = _present(
            (StyleProperty.POSITION, self.pos),
            (StyleProperty.TOP, self.top),
            (StyleProperty.RIGHT, self.right),
            (StyleProperty.BOTTOM, self.bottom),
            (StyleProperty.LEFT, self.left),
        )
        return Node(children=[self.child]).append_style(styles)


@dataclass
class SizedBox:
    """A child of a fixed size, often used for white space."""

    child: Any = field(default_factory=Node)
    height: Unit = field(default_factory=Unit)
    width: Unit = field(default_factory=Unit)
    max_height: Unit = field(default_factory=Unit)
    max_width: Unit = field(default_factory=Unit)

    def to_node(self) -> Node:
        """A node with the child and its four size styles."""
        return Node(
            children=[self.child],
            style=[
                Style(StyleProperty.HEIGHT, self.height),
                Style(StyleProperty.WIDTH, self.width),
                Style(StyleProperty.MAX_HEIGHT, self.max_height),
                Style(StyleProperty.MAX_WIDTH, self.max_width),
            ],
        )