import pytest

from solong.errors import (
    InvalidArgumentError,
    InvalidCharError,
    InvalidFileError,
    InvalidMapError,
    SoLongError,
    check_arg,
)


def test_check_arg_returns_path():
    assert check_arg(["so_long", "maps/level.ber"]) == "maps/level.ber"


def test_check_arg_accepts_bare_suffix():
    assert check_arg(["so_long", ".ber"]) == ".ber"


@pytest.mark.parametrize(
    "argv",
    [
        ["so_long"],
        ["so_long", "a.ber", "b.ber"],
        [],
        ["so_long", ""],
    ],
)
def test_check_arg_wrong_count(argv):
    with pytest.raises(InvalidArgumentError):
        check_arg(argv)


@pytest.mark.parametrize("name", ["map.txt", "map.ber.txt", "ber", "map.BER", "a"])
def test_check_arg_wrong_suffix(name):
    with pytest.raises(InvalidArgumentError):
        check_arg(["so_long", name])


def test_argument_error_is_game_error_with_message():
    with pytest.raises(SoLongError) as info:
        check_arg(["so_long", "map.txt"])
    assert str(info.value) == "Error, invalid argument"


@pytest.mark.parametrize(
    "cls, text",
    [
        (InvalidCharError, "Error, invalid characteres"),
        (InvalidMapError, "Error, invalid map"),
        (InvalidFileError, "Error, invalid fd"),
        (InvalidArgumentError, "Error, invalid argument"),
    ],
)
def test_default_messages(cls, text):
    assert str(cls()) == text


def test_custom_message_overrides_default():
    assert str(InvalidMapError("custom")) == "custom"