import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("gray100", 0xFFFFFF),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NoNe") == -1


def test_first_of_repeated_names_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_spaced_and_joined_names_agree():
    pairs = [
        ("navy blue", "navyblue"),
        ("misty rose", "mistyrose"),
        ("dark orange", "darkorange"),
        ("light green", "lightgreen"),
    ]
    for spaced, joined in pairs:
        assert lookup_color(spaced) == lookup_color(joined)


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_scale_is_monotonic_and_neutral():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_values_fit_in_rgb_range():
    for name in ("snow", "white", "thistle4", "darkred", "yellow"):
        assert 0 <= lookup_color(name) <= 0xFFFFFF


@pytest.mark.parametrize("name", ["", "notacolor", "gray101", "snow5", "#ff0000"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        lookup_color(name)


def test_only_ascii_letters_are_folded():
    with pytest.raises(KeyError):
        lookup_color("ſnow")