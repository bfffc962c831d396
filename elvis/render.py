"""Rendering of node trees to HTML markup and CSS."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Any

from elvis.node import Node, NodeClass, into_node

SHARED_CSS = "\n".join(
    [
        "html, body {",
        "  margin: 0;",
        "  padding: 0;",
        "  height: 100%;",
        "  width: 100%;",
        "  overflow: hidden;",
        "}",
    ]
)

_CLASS_CSS = {
    "center": "\n".join(
        [
            "  align-items: center;",
            "  height: 100%;",
            "  justify-content: center;",
            "  width: 100%;",
        ]
    ),
    "col": "  flex-direction: column;",
    "flex": "\n".join(["  display: flex;", "  flex: 1;"]),
    "image": "\n".join(
        [
            "  background-position: center;",
            "  background-repeat: no-repeat;",
            "  background-size: cover;",
            "  height: 100%;",
            "  width: 100%;",
        ]
    ),
    "row": "  flex-direction: row;",
}


def parse_class(node_class: NodeClass) -> str:
    """The CSS class name of a node class."""
    return node_class.value


def render_element(node: Node) -> str:
    """Render a node and its children as HTML; a ``plain`` child sets the content."""
    tag = node.attr.tag or "div"
    class_name = " ".join([*(parse_class(c) for c in node.classes), node.attr.id]).strip()

    attributes = []
    if class_name:
        attributes.append(f' class="{escape(class_name)}"')
    if node.attr.src:
        attributes.append(f' src="{escape(node.attr.src)}"')
    if node.attr.href:
        attributes.append(f' href="{escape(node.attr.href)}"')

    contents: list[str] = []
    for child in node.children:
        if child.attr.tag == "plain":
            contents = [child.attr.text]
        else:
            contents.append(render_element(child))
    return f"<{tag}{''.join(attributes)}>{''.join(contents)}</{tag}>"


@dataclass
class StyleSheet:
    """CSS rules collected from a tree, keyed by selector."""

    table: dict[str, str] = field(default_factory=dict)

    def batch(self, node: Node) -> None:
        """Collect the styles and classes of ``node`` and its descendants."""
        if node.style:
            self._widget(node.attr.id, ";".join(style.to_css() for style in node.style))
        for node_class in node.classes:
            self._class(parse_class(node_class))
        for child in node.children:
            self.batch(child)

    def _widget(self, ident: str, css: str) -> None:
        style = "".join(f"  {part.strip()};\n" for part in css.split(";") if part)
        key = f".{ident}"
        if self.table.setdefault(key, "") != style:
            self.table[key] = style[:-1]

    def _class(self, name: str) -> None:
        if self.table.get(name, "") != "":
            return
        style = _CLASS_CSS.get(name, "")
        if style:
            self.table[f".{name}"] = style

    def _sheet(self, widgets: bool) -> str:
        text = ""
        for key, value in self.table.items():
            css = f"\n\n{key} {{\n{value}\n}}"
            if widgets:
                if key.startswith(".elvis") and css.strip() not in text:
                    text += css
            elif not key.startswith(".elvis") and key.startswith(".") and key not in text:
                text += css
        return text.strip()

    def class_css(self) -> str:
        """The rules of the shared layout classes."""
        return self._sheet(widgets=False)

    def widget_css(self) -> str:
        """The rules of individual widgets, selected by their ids."""
        return self._sheet(widgets=True)


class Page:
    """A page built from a widget tree, with ids assigned to every node."""

    def __init__(self, widget: Any) -> None:
        self.tree = into_node(widget)
        self.tree.assign_ids()
        self.style = StyleSheet()

    def render(self) -> str:
        """The HTML of the tree."""
        return render_element(self.tree)

    def document(self) -> str:
        """A whole HTML document with the page's style sheets and body."""
        self.style.batch(self.tree)
        return (
            "<html><head>"
            f'<style id="calling-elvis">{SHARED_CSS}</style>'
            f'<style id="elvis-shared">{self.style.class_css()}</style>'
            f'<style id="{escape(self.tree.attr.id)}">{self.style.widget_css()}</style>'
            f"</head><body>{self.render()}</body></html>"
        )