import io

import pytest

from solong.errors import InvalidFileError
from solong.lines import iter_lines, read_lines

TEXT = "1111\n1PCE\n1111"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 1024])
def test_iter_lines_same_for_every_buffer(size):
    assert list(iter_lines(io.StringIO(TEXT), size)) == ["1111\n", "1PCE\n", "1111"]


@pytest.mark.parametrize("size", [1, 4, 7, 100])
def test_iter_lines_round_trip(size):
    text = "a\n\nbc\ndef\n"
    assert "".join(iter_lines(io.StringIO(text), size)) == text


def test_trailing_newline_kept_on_last_line():
    assert list(iter_lines(io.StringIO("ab\ncd\n"), 3)) == ["ab\n", "cd\n"]


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""))) == []


def test_every_line_but_last_ends_with_newline():
    lines = list(iter_lines(io.StringIO("x\ny\nz"), 2))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO(TEXT), size))


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(TEXT)
    assert read_lines(path) == ["1111\n", "1PCE\n", "1111"]


def test_read_lines_keeps_carriage_returns(tmp_path):
    path = tmp_path / "map.ber"
    path.write_bytes(b"11\r\n11")
    assert read_lines(path) == ["11\r\n", "11"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(InvalidFileError):
        read_lines(tmp_path / "missing.ber")