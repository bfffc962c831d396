import pytest

from elvis.color import Color


def test_named_hex_values():
    assert Color.BLACK.to_hex() == "0xFF000000"
    assert Color.GREY.to_hex() == "FF9E9E9E"
    assert Color.INHERIT.to_hex() == "0xFFFFFFFF"


def test_default_is_white():
    assert Color().name == "white"
    assert Color() == Color.WHITE


@pytest.mark.parametrize(
    "name",
    ["amber", "black", "blue_grey", "deep_orange_accent", "grey", "teal", "yellow_accent"],
)
def test_named_color_hex_round_trip(name):
    color = Color(name)
    assert Color.from_hex(color.to_hex()).name == name


def test_white_hex_resolves_to_transparent():
    assert Color.from_hex(Color.WHITE.to_hex()).name == "transparent"


def test_orgb_hex_round_trip():
    color = Color.orgb(1.0, 0xAB, 0xCD, 0xEF)
    parsed = Color.from_hex(color.to_hex())
    assert parsed.name == "orgb"
    assert parsed.values == (1.0, 0xAB, 0xCD, 0xEF)


def test_lower_case_hex_digits_read_as_zero():
    assert Color.from_hex_to_orgb("0xffffffff").values == (0.0, 0, 0, 0)


def test_orgb_renders_two_decimals():
    assert str(Color.orgb(0.5, 1, 2, 3)) == "rgba(1, 2, 3, 0.50)"


def test_inherit_renders_keyword():
    assert str(Color("inherit")) == "inherit"
    assert str(Color.INHERIT) == "inherit"


def test_short_hex_raises():
    with pytest.raises(ValueError):
        Color.from_hex_to_orgb("0x12")
    with pytest.raises(ValueError):
        str(Color.GREY)


def test_replace_channels_on_orgb():
    color = Color.orgb(0.5, 1, 2, 3)
    assert color.red(9).values == (0.5, 9, 2, 3)
    assert color.green(9).values == (0.5, 1, 9, 3)
    assert color.transparent(0.25).values == (0.25, 1, 2, 3)


def test_replace_channel_on_named_color():
    assert Color.BLACK.red(200).values == (1.0, 200, 0, 0)


def test_equality_and_hash_follow_hex():
    white = Color.from_hex("0xFFFFFFFF")
    assert white == Color.WHITE == Color.INHERIT == Color.TRANSPARENT
    assert hash(white) == hash(Color.WHITE)
    assert Color.from_hex(Color.RED.to_hex()) == Color.RED
    assert Color.from_hex(Color.RED.to_hex()) != Color.BLUE


def test_sorting_follows_hex():
    colors = [Color.YELLOW, Color.BLACK, Color.PINK, Color.orgb(0.5, 1, 2, 3)]
    assert [c.to_hex() for c in sorted(colors)] == sorted(c.to_hex() for c in colors)


def test_invalid_colors_raise():
    with pytest.raises(ValueError):
        Color("no_such_color")
    with pytest.raises(ValueError):
        Color.orgb(1.0, 40000, 0, 0)