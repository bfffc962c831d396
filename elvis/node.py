"""The virtual UI tree: nodes, their attributes, classes, gestures and state."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Iterable

from elvis.errors import ElvisError
from elvis.flex import Alignment
from elvis.keywords import _Keyword
from elvis.style import Style, alignment_styles

_MASK = (1 << 64) - 1


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (64 - bits))) & _MASK


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _siphash13(data: bytes) -> int:
    """SipHash-1-3 with a zero key."""
    v0, v1 = 0x736F6D6570736575, 0x646F72616E646F6D
    v2, v3 = 0x6C7967656E657261, 0x7465646279746573
    full = len(data) - len(data) % 8
    for offset in range(0, full, 8):
        word = int.from_bytes(data[offset : offset + 8], "little")
        v3 ^= word
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= word
    last = ((len(data) & 0xFF) << 56) | int.from_bytes(data[full:], "little")
    v3 ^= last
    v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= last
    v2 ^= 0xFF
    for _ in range(3):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def node_id(path: Iterable[int]) -> str:
    """The id of the node at ``path``: ``elvis-`` and six hex digits of its hash."""
    return f"elvis-{_siphash13(bytes(path)):x}"[:12]


@dataclass(order=True)
class Attribute:
    """HTML attributes of a node."""

    id: str = ""
    tag: str = ""
    src: str = ""
    href: str = ""
    text: str = ""
    type: str = ""


class NodeClass(_Keyword):
    """Layout classes a node can carry."""

    CENTER = "center"
    FLEX = "flex"
    ROW = "row"
    COL = "col"
    EMPTY = ""

    @classmethod
    def parse(cls, text: str) -> NodeClass:
        """Parse a class name; unknown names give ``EMPTY``."""
        for member in (cls.CENTER, cls.FLEX, cls.ROW, cls.COL):
            if member.value == text:
                return member
        return cls.EMPTY


class Gesture(Enum):
    """Gestures a widget can react to."""

    TAP = "tap"
    LONG_TAP = "long_tap"


def into_node(widget: Any) -> Node:
    """Turn a node or a widget with ``to_node`` into a node."""
    if isinstance(widget, Node):
        return widget
    to_node = getattr(widget, "to_node", None)
    if callable(to_node):
        return to_node()
    raise TypeError(f"cannot turn {type(widget).__name__} into a node")


def _as_styles(value: Any) -> list[Style]:
    if value is None:
        return []
    if isinstance(value, Style):
        return [value]
    if isinstance(value, Alignment):
        return alignment_styles(value)
    to_styles = getattr(value, "to_styles", None)
    if callable(to_styles):
        return list(to_styles())
    styles = list(value)
    for style in styles:
        if not isinstance(style, Style):
            raise TypeError(f"expected a Style, not {type(style).__name__}")
    return styles


def _sorted_unique(items: list) -> list:
    result: list = []
    for item in sorted(items):
        if not result or not result[-1] == item:
            result.append(item)
    return result


@dataclass(eq=False)
class Node:
    """A node of the virtual UI tree.

    Nodes compare by attributes, styles, classes and children; state and
    gestures are ignored.
    """

    attr: Attribute = field(default_factory=Attribute)
    classes: list[NodeClass] = field(default_factory=list)
    style: list[Style] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    state: dict[bytes, bytes] | None = None
    gesture: dict[Gesture, Callable[[dict[bytes, bytes]], Any]] | None = None
    _parent: weakref.ref | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.classes = list(self.classes)
        self.style = _as_styles(self.style)
        self.children = [into_node(child) for child in self.children]

    @property
    def parent(self) -> Node | None:
        """The node this one was pushed into, if any."""
        if self._parent is None:
            return None
        parent = self._parent()
        if parent is None:
            raise ElvisError("the parent node no longer exists")
        return parent

    def _clone(self) -> Node:
        copy = Node(
            attr=replace(self.attr),
            classes=list(self.classes),
            style=list(self.style),
            children=list(self.children),
            state=None if self.state is None else dict(self.state),
            gesture=None if self.gesture is None else dict(self.gesture),
        )
        copy._parent = self._parent
        return copy

    def append_child(self, child: Any) -> Node:
        """Add a child at the end."""
        self.children.append(into_node(child))
        return self

    def append_children(self, children: Iterable[Any]) -> Node:
        """Add children at the end."""
        self.children.extend(into_node(child) for child in children)
        return self

    def append_class(self, classes: Iterable[NodeClass]) -> Node:
        """Add classes, keeping the list sorted and free of duplicates."""
        self.classes = _sorted_unique([*self.classes, *classes])
        return self

    def append_style(self, styles: Any) -> Node:
        """Add styles, keeping the list sorted and free of duplicates."""
        self.style = _sorted_unique([*self.style, *_as_styles(styles)])
        return self

    def assign_ids(self, path: Iterable[int] | None = None) -> None:
        """Give this node and its descendants ids derived from their path."""
        self._assign_ids(list(path or ()))

    def _assign_ids(self, path: list[int]) -> None:
        self.attr.id = node_id(path)
        path.append(0)
        for child in self.children:
            child._assign_ids(path)
            path[-1] = (path[-1] + 1) % 256

    def locate(self) -> list[int]:
        """Indices of this node and its ancestors within their parents, innermost first."""
        path: list[int] = []
        node = self
        while (parent := node.parent) is not None:
            index = next(
                (i for i, child in enumerate(parent.children) if child == node), None
            )
            if index is None:
                break
            path.append(index)
            node = parent
        return path

    def push(self, child: Node) -> None:
        """Add ``child`` as the last child and make this node its parent."""
        child._parent = weakref.ref(self)
        self.children.append(child)

    def remove(self, child: Node) -> None:
        """Remove every child equal to ``child``."""
        self.children = [node for node in self.children if not node == child]

    def drain(self) -> None:
        """Remove this node from its parent, if it has one."""
        parent = self.parent
        if parent is not None:
            parent.remove(self)

    def replace(self, other: Node) -> None:
        """Take over everything of ``other`` but keep this node's parent."""
        parent = self._parent
        self.attr = other.attr
        self.classes = other.classes
        self.style = other.style
        self.children = other.children
        self.state = other.state
        self.gesture = other.gesture
        self._parent = parent

    def wrap(self) -> Node:
        """The first child with this node's styles added to its own."""
        if not self.children:
            raise ElvisError("cannot wrap a node without children")
        child = self.children[0]._clone()
        return child.append_style(self.style)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if len(other.children) < len(self.children):
            return False
        same = (
            self.attr == other.attr
            and self.style == other.style
            and self.classes == other.classes
        )
        return same and all(
            mine == theirs for mine, theirs in zip(self.children, other.children)
        )

    __hash__ = None


class GestureDetector:
    """Wraps a widget and attaches gesture callbacks to it."""

    def __init__(self, child: Any) -> None:
        self.child = child
        self._handlers: dict[Gesture, Callable[[dict[bytes, bytes]], Any]] = {}

    def register(
        self, gesture: Gesture, callback: Callable[[dict[bytes, bytes]], Any]
    ) -> GestureDetector:
        """Register a callback; a gesture keeps the first callback registered."""
        self._handlers.setdefault(gesture, callback)
        return self

    def get(self, gesture: Gesture) -> Callable[[dict[bytes, bytes]], Any] | None:
        """The callback of a gesture, if any."""
        return self._handlers.get(gesture)

    def remove(self, gesture: Gesture) -> Callable[[dict[bytes, bytes]], Any] | None:
        """Remove and return the callback of a gesture."""
        return self._handlers.pop(gesture, None)

    def handlers(self) -> list[tuple[Gesture, Callable[[dict[bytes, bytes]], Any]]]:
        """All gestures with their callbacks."""
        return list(self._handlers.items())

    def to_node(self) -> Node:
        """The child node carrying the gestures and an empty state."""
        node = into_node(self.child)
        node.gesture = dict(self._handlers)
        node.state = {}
        return node


class State:
    """A widget with a byte-string key/value store."""

    def __init__(self, child: Any) -> None:
        self.child = into_node(child)
        self._store: dict[bytes, bytes] = {}

    def get(self, key: bytes) -> bytes:
        """The value stored under ``key``, or empty bytes."""
        return self._store.get(bytes(key), b"")

    def set(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key``."""
        self._store[bytes(key)] = bytes(value)

    def to_node(self) -> Node:
        """The child node carrying the state."""
        node = self.child
        node.state = dict(self._store)
        return node