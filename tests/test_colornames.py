import pytest

from wireframe.colornames import COLOR_NAMES, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xff0000),
        ("snow", 0xfffafa),
        ("navy", 0x80),
        ("gray50", 0x7f7f7f),
        ("black", 0x0),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("GhostWhite") == 0xf8f8ff


def test_suffix_is_joined_with_space():
    assert lookup_color("ghost", "white") == lookup_color("ghost white")
    assert lookup_color("ghost", "white") == 0xf8f8ff


def test_first_entry_wins_for_duplicate_names():
    assert lookup_color("dark slate") == 0x2f4f4f
    assert lookup_color("light goldenrod") == 0xfafad2


def test_none_means_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_unknown_name_gives_zero():
    assert lookup_color("not a colour") == 0
    assert lookup_color("red", "ish") == 0


def test_hex_values():
    assert lookup_color("#ff00ff") == 0xff00ff
    assert lookup_color("#FFFFFF") == 0xffffff


def test_hex_ignores_suffix():
    assert lookup_color("#ff0000", "blue") == 0xff0000


def test_hex_without_digits_gives_zero():
    assert lookup_color("#") == 0
    assert lookup_color("#zz") == 0


def test_hex_stops_at_first_non_digit():
    assert lookup_color("#ffg") == lookup_color("#ff")


def test_overlong_joined_name_does_not_match():
    assert lookup_color("a" * 70, "red") == 0


def test_every_table_name_is_found():
    for name, _ in COLOR_NAMES:
        assert lookup_color(name.upper()) == lookup_color(name)
        first = next(color for other, color in COLOR_NAMES if other == name)
        assert lookup_color(name) == first