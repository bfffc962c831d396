"""Common widgets: text, text fields, tiles, scaffolds, links and images."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from elvis.color import Color
from elvis.font import FontFamily, FontStyle
from elvis.keywords import TextAlign
from elvis.node import Attribute, Node, NodeClass, into_node
from elvis.style import Style, StyleProperty
from elvis.style_sets import Border
from elvis.unit import Unit, UnitKind

_FULL = Unit(UnitKind.PERCENT, 100.0)
_BOLD_WEIGHT = Unit(UnitKind.NONE, 700.0)


@dataclass
class Text:
    """A paragraph of plain text with optional typography settings."""

    text: str = ""
    bold: bool = False
    color: Color | None = None
    italic: bool = False
    size: Unit | None = None
    weight: Unit | None = None
    height: Unit | None = None
    stretch: Unit | None = None
    family: FontFamily | None = None
    align: TextAlign | None = None

    def to_node(self) -> Node:
        """A ``p`` node holding a ``plain`` child with the text."""
        child = Node(attr=Attribute(tag="plain", text=self.text))

        styles: list[Style] = []
        if self.italic:
            styles.append(Style(StyleProperty.FONT_STYLE, FontStyle.NORMAL))

        weight = _BOLD_WEIGHT if self.bold else self.weight
        styles.extend(
            Style(prop, value)
            for prop, value in (
                (StyleProperty.COLOR, self.color),
                (StyleProperty.FONT_WEIGHT, weight),
                (StyleProperty.FONT_SIZE, self.size),
                (StyleProperty.FONT_STRETCH, self.stretch),
                (StyleProperty.LINE_HEIGHT, self.height),
                (StyleProperty.FONT_FAMILY, self.family),
                (StyleProperty.TEXT_ALIGN, self.align),
            )
            if value is not None
        )

        node = Node(children=[child], style=styles)
        node.attr.tag = "p"
        return node


@dataclass
class ListTile:
    """A row of a leading widget, a text and a trailing widget, as used in lists."""

    leading: Any = field(default_factory=Node)
    text: Any = field(default_factory=Node)
    trailing: Any = field(default_factory=Node)

    def to_node(self) -> Node:
        """A flex row whose first child holds the leading widget and the text."""
        body = Node(
            children=[self.leading, self.text],
            style=[Style(StyleProperty.WIDTH, _FULL)],
        )
        return Node(children=[body, self.trailing], classes=[NodeClass.FLEX, NodeClass.ROW])


@dataclass
class TextField:
    """An input field between a leading and a trailing widget."""

    leading: Any = field(default_factory=Node)
    trailing: Any = field(default_factory=Node)
    text: Text = field(default_factory=Text)

    def to_node(self) -> Node:
        """A list tile whose text is an ``input`` node with a border."""
        styles = Border().to_styles() + [
            Style(StyleProperty.WIDTH, _FULL),
            Style(StyleProperty.OUTLINE_WIDTH, Unit(UnitKind.NONE, 0.0)),
        ]
        field_node = into_node(self.text)
        field_node.attr = Attribute(tag="input")
        field_node.append_style(styles)
        return ListTile(self.leading, field_node, self.trailing).to_node()


def _section(node: Node) -> Node:
    return Node(
        attr=replace(node.attr, tag="section"),
        classes=list(node.classes),
        style=list(node.style),
        children=list(node.children),
        state=node.state,
        gesture=node.gesture,
    )


@dataclass
class Scaffold:
    """The frame of an app: a header, a body and a footer."""

    header: Any = field(default_factory=Node)
    body: Any = field(default_factory=Node)
    footer: Any = field(default_factory=Node)

    def to_node(self) -> Node:
        """A full-size node with a ``section`` for each part that has children."""
        parts = (into_node(part) for part in (self.header, self.body, self.footer))
        sections = [_section(part) for part in parts if part.children]
        return Node(
            children=sections,
            style=[
                Style(StyleProperty.HEIGHT, _FULL),
                Style(StyleProperty.WIDTH, _FULL),
            ],
        )


@dataclass
class Link:
    """A hyperlink around a child widget."""

    child: Any = field(default_factory=Node)
    href: str = ""

    def to_node(self) -> Node:
        """An ``a`` node holding the child."""
        node = Node(children=[self.child])
        node.attr.tag = "a"
        node.attr.href = self.href
        return node


@dataclass
class Image:
    """An image source; leave out the child to show nothing over it."""

    src: str = ""
    child: Any = field(default_factory=Node)

    def to_node(self) -> Node:
        """A node with the image source and the child."""
        return Node(children=[self.child], attr=Attribute(src=self.src))