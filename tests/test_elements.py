import io

import pytest

from adtlab.elements import (
    BUFFER_SIZE,
    INT_MAX,
    INT_MIN,
    compare_values,
    format_char,
    format_float,
    format_int,
    parse_char,
    parse_float,
    parse_int,
    parse_str,
    read_collection,
    read_line,
)


@pytest.mark.parametrize("text,expected", [("42", 42), (" -7", -7), ("+3", 3)])
def test_parse_int_valid(text, expected):
    assert parse_int(text) == expected


def test_parse_int_limits():
    assert parse_int(str(INT_MAX)) == INT_MAX
    assert parse_int(str(INT_MIN)) == INT_MIN


@pytest.mark.parametrize(
    "text",
    ["", "abc", "12x", "3 ", str(INT_MAX + 1), str(INT_MIN - 1), "9" * 25],
)
def test_parse_int_invalid(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int_error_messages():
    with pytest.raises(ValueError, match="not a decimal number"):
        parse_int("abc")
    with pytest.raises(ValueError, match="extra characters at end of input"):
        parse_int("12x")
    with pytest.raises(ValueError, match="greater than INT_MAX"):
        parse_int(str(INT_MAX + 1))
    with pytest.raises(ValueError, match="less than INT_MIN"):
        parse_int(str(INT_MIN - 1))
    with pytest.raises(ValueError, match="out of range of type long"):
        parse_int("9" * 25)


def test_parse_str_round_trip():
    assert parse_str("Madrid") == "Madrid"


def test_parse_char():
    assert parse_char("xyz") == "x"
    assert parse_char("") == "\0"


@pytest.mark.parametrize("text,expected", [("2.5", 2.5), ("-1e3", -1000.0), (".5", 0.5)])
def test_parse_float_valid(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1.5x", "1_0"])
def test_parse_float_invalid(text):
    with pytest.raises(ValueError, match="not a float number"):
        parse_float(text)


@pytest.mark.parametrize("a,b", [(1, 2), (1.5, 2.5), ("a", "b"), ("abc", "abd")])
def test_compare_values_sign(a, b):
    assert compare_values(a, b) < 0
    assert compare_values(b, a) > 0
    assert compare_values(a, a) == 0


def test_format_round_trips():
    assert parse_int(format_int(-17)) == -17
    assert parse_float(format_float(2.5)) == 2.5
    assert format_char(parse_char("q")) == "q"


def test_format_float_six_decimals():
    assert format_float(1.5) == "1.500000"


def test_read_line_strips_line_ends():
    stream = io.StringIO("abc\r\nxyz\nlast")
    assert read_line(stream) == "abc"
    assert read_line(stream) == "xyz"
    assert read_line(stream) == "last"
    assert read_line(stream) == ""


def test_read_line_splits_long_lines():
    stream = io.StringIO("a" * 600 + "\n")
    first = read_line(stream)
    second = read_line(stream)
    assert len(first) == BUFFER_SIZE - 1
    assert first + second == "a" * 600


def test_read_collection_fills_container(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("3\n1\n2\n", encoding="utf-8")
    items = []
    count = read_collection(items, str(path), parse_int, list.append, lambda c: not c)
    assert items == [3, 1, 2]
    assert count == len(items)


def test_read_collection_stops_at_blank_line(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("one\ntwo\n\nthree\n", encoding="utf-8")
    items = []
    read_collection(items, str(path), parse_str, list.append, lambda c: not c)
    assert items == ["one", "two"]


def test_read_collection_requires_empty_container(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1\n", encoding="utf-8")
    items = [0]
    with pytest.raises(ValueError):
        read_collection(items, str(path), parse_int, list.append, lambda c: not c)
    assert items == [0]


def test_read_collection_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_collection(
            [], str(tmp_path / "absent.txt"), parse_int, list.append, lambda c: not c
        )


def test_read_collection_propagates_conversion_error(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1\nnope\n", encoding="utf-8")
    items = []
    with pytest.raises(ValueError):
        read_collection(items, str(path), parse_int, list.append, lambda c: not c)
    assert items == [1]