import pytest

from elvis.flex import Alignment, FlexBasis, FlexDirection, FlexPosition, FlexWrap
from elvis.unit import Unit, UnitKind


@pytest.mark.parametrize(
    "position, text",
    [
        (FlexPosition.CENTER, "center"),
        (FlexPosition.END, "flex-end"),
        (FlexPosition.START, "flex-start"),
        (FlexPosition.SPACE_AROUND, "space-around"),
        (FlexPosition.BETWEEN, "between"),
    ],
)
def test_flex_position_renders(position, text):
    assert str(FlexPosition(position.value)) == text


def test_alignment_renders_both_properties():
    center = Alignment(Alignment.CENTER.value)
    assert str(center) == "align-items: center; justify-content: center;"


def test_alignment_parts():
    top_right = Alignment(Alignment.TOP_RIGHT.value)
    bottom_center = Alignment(Alignment.BOTTOM_CENTER.value)
    assert top_right.align_items is FlexPosition.START
    assert top_right.justify_content is FlexPosition.END
    assert bottom_center.align_items is FlexPosition.END
    assert bottom_center.justify_content is FlexPosition.CENTER


def test_every_alignment_is_distinct():
    looked_up = [Alignment(a.value) for a in Alignment]
    assert len({(a.align_items, a.justify_content) for a in looked_up}) == 9


def test_alignment_orders_by_declaration():
    top_left = Alignment(Alignment.TOP_LEFT.value)
    center = Alignment(Alignment.CENTER.value)
    assert Alignment(Alignment.BOTTOM_CENTER.value) < Alignment.TOP_RIGHT
    assert sorted([top_left, center])[0] is Alignment.CENTER


def test_flex_basis_default_and_keywords():
    assert FlexBasis() == FlexBasis.INHERIT
    assert str(FlexBasis()) == "inherit"
    assert str(FlexBasis.FIT_CONTENT) == "fit-content"
    assert str(FlexBasis.MAX_CONTENT) == "max-content"


def test_flex_basis_number_renders_unit():
    px = Unit(UnitKind.PX, 4.0)
    assert str(FlexBasis.number(px)) == str(px)
    assert FlexBasis.number(px) == FlexBasis.number(Unit(UnitKind.PX, 4.0))


def test_flex_basis_ordering_ignores_unit():
    small = FlexBasis.number(Unit(UnitKind.PX, 1.0))
    large = FlexBasis.number(Unit(UnitKind.PX, 2.0))
    assert not small < large
    assert not large < small
    assert FlexBasis.AUTO < small


def test_flex_basis_rejects_bad_input():
    with pytest.raises(ValueError):
        FlexBasis("stretch")
    with pytest.raises(ValueError):
        FlexBasis("number")
    with pytest.raises(ValueError):
        FlexBasis("auto", Unit(UnitKind.PX, 1.0))


def test_direction_and_wrap_render():
    assert str(FlexDirection(FlexDirection.COLUMN_REVERSE.value)) == "column-reverse"
    assert str(FlexDirection(FlexDirection.ROW.value)) == "row"
    assert str(FlexWrap(FlexWrap.NO_WRAP.value)) == "no-wrap"
    assert str(FlexWrap(FlexWrap.WRAP_REVERSE.value)) == "wrap-reverse"
    assert FlexWrap(FlexWrap.WRAP.value) < FlexWrap.NO_WRAP