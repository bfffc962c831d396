"""Layout widgets: alignment, flex rows and columns, grids and lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from elvis.flex import Alignment
from elvis.node import Node, NodeClass
from elvis.style import alignment_styles
from elvis.style_sets import FlexStyle, GridStyle, MultiColumnStyle


@dataclass
class Align:
    """Places its child according to an alignment."""

    child: Any = field(default_factory=Node)
    align: Alignment = Alignment.CENTER

    def to_node(self) -> Node:
        """A node with the child and the alignment styles."""
        return Node(children=[self.child], style=alignment_styles(self.align))


@dataclass
class Center:
    """Centers its child in the available space."""

    child: Any = field(default_factory=Node)

    def to_node(self) -> Node:
        """A flex node with the center class."""
        return Node(children=[self.child], classes=[NodeClass.FLEX, NodeClass.CENTER])


@dataclass
class Col:
    """Lays out children in a column."""

    children: list[Any] = field(default_factory=list)

    def to_node(self) -> Node:
        """A flex node with the column class."""
        return Node(children=self.children, classes=[NodeClass.FLEX, NodeClass.COL])


@dataclass
class Row:
    """Lays out children in a row."""

    children: list[Any] = field(default_factory=list)

    def to_node(self) -> Node:
        """A flex node with the row class."""
        return Node(children=self.children, classes=[NodeClass.FLEX, NodeClass.ROW])


@dataclass
class Flex:
    """A single child in a flex box."""

    child: Any = field(default_factory=Node)
    style: FlexStyle = field(default_factory=FlexStyle)

    def to_node(self) -> Node:
        """A flex node with the child and the flex styles."""
        return Node(
            children=[self.child],
            classes=[NodeClass.FLEX],
            style=self.style.to_styles(),
        )


@dataclass
class MultiColumn:
    """Children laid out in several columns."""

    children: list[Any] = field(default_factory=list)
    style: MultiColumnStyle = field(default_factory=MultiColumnStyle)

    def to_node(self) -> Node:
        """A flex node with the children and the column styles."""
        return Node(
            children=self.children,
            classes=[NodeClass.FLEX, NodeClass.EMPTY],
            style=self.style.to_styles(),
        )


@dataclass
class Grid:
    """Children laid out in a grid."""

    children: list[Any] = field(default_factory=list)
    style: GridStyle = field(default_factory=GridStyle)

    def to_node(self) -> Node:
        """A flex node with the children and the grid styles."""
        return Node(
            children=self.children,
            classes=[NodeClass.FLEX, NodeClass.EMPTY],
            style=self.style.to_styles(),
        )


@dataclass
class List:
    """Children without any style."""

    children: list[Any] = field(default_factory=list)

    def to_node(self) -> Node:
        """A plain node with the children."""
        return Node(children=self.children)