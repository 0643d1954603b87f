import pytest

from solong.colors import COLOR_NAMES, text_to_rgb


def test_hex_value_is_parsed():
    assert text_to_rgb("#ff0000", None) == 0xFF0000


def test_hex_value_stops_at_invalid_digit():
    assert text_to_rgb("#12zz", None) == 0x12


def test_empty_hex_gives_zero():
    assert text_to_rgb("#", None) == 0


def test_named_color():
    assert text_to_rgb("red", None) == 0xFF0000


def test_lookup_is_case_insensitive():
    assert text_to_rgb("ReD", None) == text_to_rgb("red", None)


def test_two_word_name_joined_with_end():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_none_is_transparent():
    assert text_to_rgb("none", None) == -1


def test_unknown_name_gives_zero():
    assert text_to_rgb("no-such-colour", None) == 0


def test_first_duplicate_entry_wins():
    assert text_to_rgb("dark", "slate") == 0x2F4F4F


@pytest.mark.parametrize("name", ["gray", "grey", "white", "black", "navy"])
def test_table_and_lookup_agree(name):
    assert text_to_rgb(name.upper(), None) == COLOR_NAMES[name]


def test_gray_and_grey_spellings_match():
    for level in range(101):
        assert text_to_rgb(f"gray{level}", None) == text_to_rgb(f"GREY{level}", None)
    assert text_to_rgb("gray100", None) == 0xFFFFFF
    assert text_to_rgb("grey50", None) == 0x7F7F7F