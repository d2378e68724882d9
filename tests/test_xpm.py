import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_lines,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
"b c None",
// pixels
"ab",
"ba"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_removes_block():
    text = "x /* y */ z"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "y" not in result
    assert result.startswith("x ") and result.endswith(" z")


def test_strip_comments_ignores_quoted_markers():
    text = '"a/*b" /* c */'
    result = strip_comments(text)
    assert result.startswith('"a/*b"')
    assert "c" not in result
    assert len(result) == len(text)


def test_strip_comments_line_comment():
    result = strip_comments("abc // gone\nnext")
    assert "gone" not in result
    assert result.endswith("next")
    assert result.startswith("abc ")


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert image == XpmImage(
        width=2,
        height=2,
        rows=((0xFF0000, TRANSPARENT), (TRANSPARENT, 0xFF0000)),
    )


def test_two_chars_per_pixel_and_named_colour():
    image = parse_xpm_lines(["2 1 2 2", "aa c #00FF00", "bb c blue", "aabb"])
    assert image.rows == ((0x00FF00, 0xFF),)


def test_two_word_colour_name():
    image = parse_xpm_lines(["1 1 1 1", "x c light blue", "x"])
    assert image.rows == ((0xADD8E6,),)


def test_colour_name_case_insensitive():
    image = parse_xpm_lines(["1 1 1 1", "x c RED", "x"])
    assert image.rows == ((0xFF0000,),)


def test_unknown_colour_is_black():
    image = parse_xpm_lines(["1 1 1 1", "x c nosuchcolour", "x"])
    assert image.rows == ((0,),)


def test_zero_width_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["0 1 1 1", "x c red", "x"])


def test_missing_colour_keyword_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "x m red", "x"])


def test_missing_rows_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 2 1 1", "x c red", "x"])


def test_short_row_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["3 1 1 1", "x c red", "xx"])


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")