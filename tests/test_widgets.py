from elvis.color import Color
from elvis.font import FontStyle
from elvis.keywords import TextAlign
from elvis.node import Attribute, Node, NodeClass
from elvis.render import render_element
from elvis.style import Style, StyleProperty
from elvis.unit import Unit, UnitKind
from elvis.widgets import Image, Link, ListTile, Scaffold, Text, TextField

FULL = Unit(UnitKind.PERCENT, 100.0)


def test_text_node_structure():
    node = Text("hello").to_node()
    assert node.attr.tag == "p"
    assert len(node.children) == 1
    assert node.children[0].attr.tag == "plain"
    assert node.children[0].attr.text == "hello"
    assert node.style == []


def test_text_bold_sets_weight():
    node = Text("x", bold=True, weight=Unit(UnitKind.NONE, 100.0)).to_node()
    assert node.style == [Style(StyleProperty.FONT_WEIGHT, Unit(UnitKind.NONE, 700.0))]


def test_text_italic_style():
    node = Text("x", italic=True).to_node()
    assert node.style == [Style(StyleProperty.FONT_STYLE, FontStyle.NORMAL)]


def test_text_style_order():
    size = Unit(UnitKind.PX, 24.0)
    node = Text("x", align=TextAlign.CENTER, size=size, color=Color("red")).to_node()
    assert [s.prop for s in node.style] == [
        StyleProperty.COLOR,
        StyleProperty.FONT_SIZE,
        StyleProperty.TEXT_ALIGN,
    ]
    assert node.style[1].value == size


def test_text_renders_to_paragraph():
    assert render_element(Text("Hi").to_node()) == "<p>Hi</p>"


def test_list_tile_structure():
    leading, text, trailing = Text("a"), Text("b"), Text("c")
    node = ListTile(leading, text, trailing).to_node()
    assert node.classes == [NodeClass.FLEX, NodeClass.ROW]
    body, last = node.children
    assert body.style == [Style(StyleProperty.WIDTH, FULL)]
    assert body.children == [leading.to_node(), text.to_node()]
    assert last == trailing.to_node()


def test_text_field_input_node():
    node = TextField(text=Text("typed")).to_node()
    assert node.classes == [NodeClass.FLEX, NodeClass.ROW]
    field_node = node.children[0].children[1]
    assert field_node.attr == Attribute(tag="input")
    assert Style(StyleProperty.WIDTH, FULL) in field_node.style
    assert Style(StyleProperty.OUTLINE_WIDTH, Unit(UnitKind.NONE, 0.0)) in field_node.style
    props = [s.prop for s in field_node.style]
    assert StyleProperty.BORDER_RADIUS in props
    assert field_node.children[0].attr.text == "typed"


def test_scaffold_skips_empty_parts():
    header = Node(children=[Node()])
    node = Scaffold(header=header).to_node()
    assert len(node.children) == 1
    assert node.children[0].attr.tag == "section"
    assert header.attr.tag == ""
    assert node.style == [
        Style(StyleProperty.HEIGHT, FULL),
        Style(StyleProperty.WIDTH, FULL),
    ]


def test_scaffold_all_parts():
    node = Scaffold(header=Text("h"), body=Text("b"), footer=Text("f")).to_node()
    assert [c.attr.tag for c in node.children] == ["section"] * 3
    assert node.children[1].children[0].attr.text == "b"


def test_link_node():
    node = Link(Text("go"), href="/next").to_node()
    assert node.attr.tag == "a"
    assert node.attr.href == "/next"
    assert node.children == [Text("go").to_node()]


def test_image_node():
    node = Image(src="pic.png").to_node()
    assert node.attr == Attribute(src="pic.png")
    assert node.children == [Node()]