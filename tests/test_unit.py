import pytest

from elvis.unit import Unit, UnitKind, VecUnit


def test_parse_pixels():
    assert Unit.parse("2px") == Unit(UnitKind.PX, 2.0)


@pytest.mark.parametrize(
    "text, kind, value",
    [
        ("3rem", UnitKind.REM, 3.0),
        ("1.5em", UnitKind.EM, 1.5),
        ("4Q", UnitKind.Q, 4.0),
        ("50%", UnitKind.PERCENT, 50.0),
        ("12", UnitKind.NONE, 12.0),
        ("  7VW ", UnitKind.VW, 7.0),
        ("3fr", UnitKind.FR, 3.0),
    ],
)
def test_parse_kinds(text, kind, value):
    unit = Unit.parse(text)
    assert unit.kind is kind
    assert unit.value == value


@pytest.mark.parametrize("text", ["auto", "inherit", "AUTO"])
def test_parse_auto(text):
    assert Unit.parse(text).kind is UnitKind.AUTO


def test_parse_bare_percent_defaults_to_hundred():
    assert Unit.parse("%").value == 100.0


def test_parse_missing_number_defaults_to_one():
    unit = Unit.parse("px")
    assert unit.kind is UnitKind.PX
    assert unit.value == 1.0


def test_parse_unknown_suffix_is_plain_number():
    unit = Unit.parse("abc")
    assert unit.kind is UnitKind.NONE
    assert unit.value == 1.0


def test_default_is_auto():
    assert str(Unit()) == "auto"


def test_render_pixels_with_one_decimal():
    assert str(Unit(UnitKind.PX, 2.0)) == "2.0px"


def test_render_plain_number_without_decimals():
    assert str(Unit(UnitKind.NONE, 700.0)) == "700"


@pytest.mark.parametrize(
    "unit",
    [
        Unit(UnitKind.PX, 2.5),
        Unit(UnitKind.REM, 16.0),
        Unit(UnitKind.PERCENT, 100.0),
        Unit(UnitKind.Q, 3.0),
        Unit(UnitKind.NONE, 30.0),
        Unit(UnitKind.VMAX, 1.5),
        Unit(),
    ],
)
def test_render_parse_round_trip(unit):
    assert Unit.parse(str(unit)) == unit


def test_equality_follows_rendering():
    first = Unit(UnitKind.PX, 1.0)
    second = Unit(UnitKind.PX, 1.04)
    assert first == second
    assert hash(first) == hash(second)
    assert Unit(UnitKind.PX, 1.0) != Unit(UnitKind.EM, 1.0)


def test_units_are_never_ordered():
    small = Unit(UnitKind.PX, 1.0)
    large = Unit(UnitKind.PX, 9.0)
    assert not small < large
    assert not large < small
    assert not small <= large
    assert sorted([large, small]) == [large, small]


def test_vec_unit_default_renders_zero():
    assert str(VecUnit()) == "0"


def test_vec_unit_joins_with_spaces():
    units = [Unit(UnitKind.PX, 3.0), Unit(UnitKind.PX, 7.0), Unit()]
    vec = VecUnit(units)
    assert str(vec) == " ".join(str(unit) for unit in units)
    assert list(vec) == units
    assert len(vec) == len(units)


def test_vec_unit_equality():
    assert VecUnit([Unit(UnitKind.EM, 2.0)]) == VecUnit((Unit(UnitKind.EM, 2.0),))
    assert VecUnit([Unit(UnitKind.EM, 2.0)]) != VecUnit([Unit(UnitKind.EM, 3.0)])