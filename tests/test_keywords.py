import pytest

from elvis.keywords import Display, MultiColumnLineStyle, Position, TextAlign


@pytest.mark.parametrize(
    "keyword, text",
    [
        (Display.INLINE_BLOCK, "inline-block"),
        (Display.GRID, "grid"),
        (TextAlign.JUSTIFY, "juistyfy"),
        (TextAlign.CENTER, "center"),
        (MultiColumnLineStyle.OUTSET, "outset"),
        (MultiColumnLineStyle.NONE, "none"),
        (Position.RELATIVE, "relative"),
        (Position.ABSOLUTE, "absolute"),
    ],
)
def test_keywords_render(keyword, text):
    assert str(keyword) == text


@pytest.mark.parametrize("kind", [Display, TextAlign, MultiColumnLineStyle, Position])
def test_order_follows_declaration(kind):
    members = list(kind)
    assert sorted(reversed(members)) == members
    assert members[0] < members[-1]
    assert members[-1] >= members[0]


def test_lookup_by_css_text():
    assert Display("flex") is Display.FLEX
    assert MultiColumnLineStyle("dashed") is MultiColumnLineStyle.DASHED


def test_different_kinds_do_not_compare():
    block = Display("block")
    assert block is Display.BLOCK
    with pytest.raises(TypeError):
        block < Position.ABSOLUTE