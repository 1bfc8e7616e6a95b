import pytest

from cubscene.xpm import (
    XpmError,
    load_xpm,
    parse_color_spec,
    parse_xpm,
    parse_xpm_text,
    quoted_strings,
    strip_comments,
)

SAMPLE = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]

SAMPLE_FILE = """/* XPM */
static char *x[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c #FF0000",
"# c None",
// first row
".#",
"#."
};
"""


def test_parse_xpm_pixels():
    img = parse_xpm(SAMPLE)
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(1, 1) == 0xFF0000
    assert img.get_pixel(1, 0) == 0xFF000000
    assert img.get_pixel(0, 1) == 0xFF000000


def test_parse_xpm_text_matches_list_form():
    assert parse_xpm_text(SAMPLE_FILE).data == parse_xpm(SAMPLE).data


def test_load_xpm(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE)
    assert load_xpm(path).data == parse_xpm(SAMPLE).data


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


def test_named_colour():
    img = parse_xpm(["1 1 1 1", "a c white", "a"])
    assert img.get_pixel(0, 0) == 0xFFFFFF


def test_duplicate_key_last_wins_for_short_keys():
    img = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert img.get_pixel(0, 0) == parse_color_spec("blue", None)


def test_duplicate_key_first_wins_for_long_keys():
    img = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert img.get_pixel(0, 0) == parse_color_spec("red", None)


def test_unknown_pixel_key_is_black():
    img = parse_xpm(["2 1 1 1", "a c red", "ab"])
    assert img.get_pixel(1, 0) == 0


def test_all_ones_hex_is_transparent():
    img = parse_xpm(["1 1 1 1", "a c #FFFFFFFF", "a"])
    assert img.get_pixel(0, 0) == 0xFF000000


def test_parse_color_spec_values():
    assert parse_color_spec("#00ff00", None) == 0xFF00
    assert parse_color_spec("dark", "red") == 0x8B0000
    assert parse_color_spec("None", None) == -1
    assert parse_color_spec("nosuchcolour", None) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_strip_comments_keeps_length_and_quotes():
    text = '/* x */"a/*b*/" // tail\n"c"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert list(quoted_strings(stripped)) == ["a/*b*/", "c"]


def test_strip_comments_unterminated_block():
    assert strip_comments('"a" /* open').strip() == '"a"'


def test_quoted_strings_ignores_unterminated():
    assert list(quoted_strings('"a" "b" "c')) == ["a", "b"]