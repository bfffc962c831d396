# elvis

Build user interfaces as trees of small widgets, then render them to HTML
and CSS.

A widget such as `Text`, `Center` or `Container` describes what you want.
Its `to_node()` method turns it into a `Node` tree made of tags,
attributes, classes and styles. A `Page` assigns ids to every node in the
tree, collects the styles into a `StyleSheet`, and writes the markup.

## Installation

```text
pip install .
```

To run the tests as well:

```text
pip install ".[test]"
pytest
```

## Hello, World!

```python
from elvis.layouts import Center
from elvis.render import Page
from elvis.widgets import Text

page = Page(Center(child=Text(text="Hello, World!")).to_node())
print(page.render())    # the HTML of the tree
print(page.document())  # a whole document with its style sheets
```

Widgets may be nested directly: wherever a child is expected, either a
`Node` or any object with a `to_node()` method is accepted.

## Values

Sizes, colours and other CSS values are plain Python objects that render
with `str()`:

```python
from elvis.color import Color
from elvis.unit import Unit, VecUnit

Unit.parse("12px")            # 12.0px
Unit.parse("50%")             # 50.0%
VecUnit([Unit.parse("1em"), Unit.parse("2em")])
Color.from_hex("0xFFF44336")  # Color.RED
Color.orgb(0.5, 255, 0, 0)    # a half-transparent red
Color.BLUE.red(10)            # the same colour as an explicit orgb value
```

The value modules are:

- `elvis.unit`: `Unit`, `UnitKind`, `VecUnit`
- `elvis.color`: `Color`, with the material palette as class attributes
  (`Color.AMBER`, `Color.WHITE`, ...)
- `elvis.font`: `FontStyle`, `FontFamily`
- `elvis.shadow`: `BoxShadow`
- `elvis.border`: `BorderStyle`, `BoxBorder`, `BorderRadius`
- `elvis.flex`: `FlexPosition`, `Alignment`, `FlexBasis`, `FlexDirection`,
  `FlexWrap`
- `elvis.grid`: `GridAuto`, `GridFlow`, `GridTemplate`
- `elvis.keywords`: `Display`, `TextAlign`, `MultiColumnLineStyle`,
  `Position`

## Styles

A `Style` pairs a `StyleProperty` with a value of the type that property
takes, and `Style.to_css()` writes it as a declaration:

```python
from elvis.style import Style, StyleProperty
from elvis.unit import Unit

Style(StyleProperty.MAX_WIDTH, Unit.parse("550px")).to_css()
# 'max-width: 550.0px'
```

`alignment_styles()` expands an `Alignment` into its `align-items` and
`justify-content` styles. The grouped settings in `elvis.style_sets`
(`Border`, `MultiColumnStyle`, `FlexStyle`, `GridStyle`) turn into lists of
styles with `to_styles()`.

## Widgets

- `elvis.widgets`: `Text`, `TextField`, `ListTile`, `Scaffold`, `Link`,
  `Image`
- `elvis.layouts`: `Align`, `Center`, `Col`, `Row`, `Flex`, `MultiColumn`,
  `Grid`, `List`
- `elvis.boxes`: `Container`, `Positioned`, `SizedBox`

```python
from elvis.boxes import Container
from elvis.color import Color
from elvis.unit import Unit
from elvis.widgets import Text

node = Container(
    child=Text(text="todos", bold=True),
    padding=[Unit.parse("16px")],
    background_color=Color.WHITE,
).to_node()
```

## The node tree

`elvis.node` holds `Node`, its `Attribute` and `NodeClass` values, and
helpers for building trees: `append_child`, `append_children`,
`append_class`, `append_style`, `push`, `remove`, `drain`, `replace`,
`locate`, `assign_ids` and `wrap` (the first child with the parent's styles
added). `node_id()` gives the id a node receives for a given path.

`GestureDetector` attaches callbacks for a `Gesture` to a widget's node,
and `State` attaches a byte-string key/value store.

## Rendering

`elvis.render` provides `render_element()`, which writes a node and its
children as HTML, `StyleSheet`, whose `batch()` collects CSS rules from a
tree and whose `class_css()` and `widget_css()` return them, and `Page`,
which combines both.

## Errors

Invalid values raise `ValueError` or `TypeError`. `elvis.errors` defines
`ElvisError` and its subclasses `FunctionError`, `DeserializeHtmlError` and
`RouterError`; `ElvisError` is raised, for instance, when wrapping a node
that has no children.

## What this package does not do

- It has no command-line tool, no project templates and no development
  server; pages are produced by calling `Page.render()` or
  `Page.document()` from your own code.
- It does not run in a browser. Gesture callbacks are stored on nodes but
  are not written into the HTML, and there is no page routing.