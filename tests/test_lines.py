import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cubutils.lines import LineReader, read_lines


def test_read_line_keeps_newline():
    reader = LineReader(io.StringIO("NO ./a.xpm\nSO ./b.xpm\n"))
    assert reader.read_line() == "NO ./a.xpm\n"
    assert reader.read_line() == "SO ./b.xpm\n"
    assert reader.read_line() is None


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("111\n101"))
    assert reader.read_line() == "111\n"
    assert reader.read_line() == "101"
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


def test_empty_lines_are_returned():
    assert list(read_lines(io.StringIO("\n\nx\n"))) == ["\n", "\n", "x\n"]


def test_binary_stream():
    lines = list(read_lines(io.BytesIO(b"ab\ncd"), buffer_size=1))
    assert lines == [b"ab\n", b"cd"]


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_iteration_matches_read_line():
    data = "C 0,0,0\nF 1,2,3\n  1111\n"
    assert list(LineReader(io.StringIO(data))) == data.splitlines(keepends=True)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    with pytest.raises(OSError):
        LineReader(_FailingStream()).read_line()


@given(
    st.text(alphabet="ab1 \n", max_size=60),
    st.integers(min_value=1, max_value=12),
)
def test_round_trip(data, size):
    lines = list(read_lines(io.StringIO(data), buffer_size=size))
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)
    for line in lines[:-1]:
        assert line.endswith("\n")
        assert line.count("\n") == 1


@given(st.text(alphabet="xy\n", max_size=40))
def test_buffer_size_does_not_matter(data):
    small = list(read_lines(io.StringIO(data), buffer_size=1))
    large = list(read_lines(io.StringIO(data), buffer_size=1024))
    assert small == large