import pytest
from hypothesis import given
from hypothesis import strategies as st

from cubutils.text import parse_int, skip_whitespace, trim_and_collapse_spaces


def test_skip_whitespace_removes_spaces_and_tabs():
    assert skip_whitespace("  \t NO ./north.xpm") == "NO ./north.xpm"


def test_skip_whitespace_keeps_newline():
    assert skip_whitespace(" \n x") == "\n x"


def test_skip_whitespace_all_blank():
    assert skip_whitespace(" \t \t") == ""


def test_trim_and_collapse_example():
    assert trim_and_collapse_spaces("  NO \t  ./path  ") == "NO ./path"


def test_trim_and_collapse_none():
    assert trim_and_collapse_spaces(None) is None


def test_trim_and_collapse_only_blanks():
    assert trim_and_collapse_spaces(" \t  ") == ""


@given(st.text(alphabet="ab ,\t", max_size=40))
def test_trim_and_collapse_invariants(line):
    result = trim_and_collapse_spaces(line)
    assert "\t" not in result
    assert "  " not in result
    assert not result.startswith(" ")
    assert not result.endswith(" ")
    assert result.split() == line.split()


@given(st.text(alphabet="ab \t", max_size=40))
def test_trim_and_collapse_idempotent(line):
    once = trim_and_collapse_spaces(line)
    assert trim_and_collapse_spaces(once) == once


def test_parse_int_plain():
    assert parse_int("42") == 42


def test_parse_int_negative_and_sign():
    assert parse_int("-17") == -17
    assert parse_int("+8") == 8


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_parse_int_overflow(text):
    with pytest.raises(ValueError):
        parse_int(text)


@pytest.mark.parametrize("text", ["12abc", "1,2", "12 x", "12\r"])
def test_parse_int_trailing_garbage(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int_trailing_blanks_and_newline():
    assert parse_int("  255 \t\n") == 255
    assert parse_int("7\nrest") == 7


def test_parse_int_from_start_offset():
    assert parse_int("F 220", 1) == 220


def test_parse_int_negative_start_rejected():
    with pytest.raises(ValueError):
        parse_int("1", -1)


def test_parse_int_empty_is_zero():
    assert parse_int("") == 0


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_parse_int_round_trip(n):
    assert parse_int(str(n)) == n
    assert parse_int(f" {n} \n") == n