import pytest

from elvis.color import Color
from elvis.shadow import BoxShadow
from elvis.unit import Unit, UnitKind


def test_default_is_none():
    assert BoxShadow() == BoxShadow.NONE
    assert str(BoxShadow()) == "none"


@pytest.mark.parametrize(
    "shadow, text",
    [
        (BoxShadow.INSET, "inset"),
        (BoxShadow.INHERIT, "inherit"),
        (BoxShadow.INITIAL, "initial"),
        (BoxShadow.UNSET, "unset"),
    ],
)
def test_keywords_render(shadow, text):
    assert str(shadow) == text


def test_unit_and_color_render_like_their_values():
    px = Unit(UnitKind.PX, 2.0)
    assert str(BoxShadow.unit(px)) == str(px)
    assert str(BoxShadow.color(Color.BLACK)) == str(Color.BLACK)


def test_customize_joins_with_spaces():
    shadow = BoxShadow.customize([BoxShadow.INSET, BoxShadow.unit(Unit(UnitKind.PX, 2.0))])
    assert str(shadow) == "inset 2.0px"


def test_derive_joins_with_commas():
    shadow = BoxShadow.derive([BoxShadow.customize([BoxShadow.INSET]), BoxShadow.NONE])
    assert str(shadow) == "inset, none"


def test_equality_is_structural_not_textual():
    assert BoxShadow.unit(Unit(UnitKind.PX, 1.0)) == BoxShadow.unit(Unit(UnitKind.PX, 1.0))
    wrapped = BoxShadow.customize([BoxShadow.INSET])
    assert str(wrapped) == str(BoxShadow.INSET)
    assert wrapped != BoxShadow.INSET


def test_ordering_follows_rendered_text():
    shadows = [
        BoxShadow.UNSET,
        BoxShadow.INSET,
        BoxShadow.unit(Unit(UnitKind.PX, 5.0)),
        BoxShadow.NONE,
    ]
    assert [str(s) for s in sorted(shadows)] == sorted(str(s) for s in shadows)


def test_hashable_and_usable_in_sets():
    shadows = {BoxShadow.customize([BoxShadow.INSET]), BoxShadow.customize([BoxShadow.INSET])}
    assert len(shadows) == 1


def test_invalid_values_raise():
    with pytest.raises(ValueError):
        BoxShadow("glow")
    with pytest.raises(ValueError):
        BoxShadow("unit", Color.BLACK)
    with pytest.raises(ValueError):
        BoxShadow("none", Unit(UnitKind.PX, 1.0))