import pytest

from cubscene.colornames import COLOR_NAMES, TRANSPARENT, color_by_name


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("blue", 0xFF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, value):
    assert color_by_name(name) == value


def test_none_is_transparent():
    assert color_by_name("none") == TRANSPARENT
    assert color_by_name("None") == -1


def test_lookup_ignores_case():
    assert color_by_name("RED") == color_by_name("red")
    assert color_by_name("Ghost White") == color_by_name("ghost white")


def test_first_duplicate_wins():
    # "dark slate" appears first as dark slate gray, later as dark slate blue.
    assert color_by_name("dark slate") == color_by_name("darkslategray")
    assert color_by_name("light slate") == color_by_name("lightslategray")
    assert color_by_name("light goldenrod") == color_by_name("lightgoldenrodyellow")


def test_spaced_and_joined_names_agree():
    assert color_by_name("navy blue") == color_by_name("navyblue")
    assert color_by_name("misty rose") == color_by_name("mistyrose")


def test_grey_and_gray_spellings_agree():
    for level in range(101):
        assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_scale_endpoints():
    assert color_by_name("gray0") == color_by_name("black")
    assert color_by_name("gray100") == color_by_name("white")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        color_by_name("")


def test_all_values_in_range():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert value == TRANSPARENT or 0 <= value <= 0xFFFFFF


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["red"] = 0  # type: ignore[index]
    assert color_by_name("red") == 0xFF0000