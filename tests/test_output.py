import os

import pytest

from pipex.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    """A pipe whose write end is handed to the code under test."""

    def __init__(self):
        self._read_fd, self.write_fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read_all(self):
        self._close_write()
        with os.fdopen(self._read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

    def _close_write(self):
        if self._write_open:
            os.close(self.write_fd)
            self._write_open = False

    def close(self):
        self._close_write()
        if self._read_open:
            os.close(self._read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_putchar_string(pipe):
    putchar_fd("x", pipe.write_fd)
    assert pipe.read_all() == b"x"


def test_putchar_integer_is_one_byte(pipe):
    putchar_fd(65, pipe.write_fd)
    assert pipe.read_all() == b"A"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putchar_rejects_other_types():
    with pytest.raises(TypeError):
        putchar_fd(1.5, 1)


def test_putstr_writes_text(pipe):
    putstr_fd("hello world", pipe.write_fd)
    assert pipe.read_all() == b"hello world"


def test_putstr_stops_at_nul(pipe):
    putstr_fd("abc\0def", pipe.write_fd)
    assert pipe.read_all() == b"abc"


def test_putstr_empty_writes_nothing(pipe):
    putstr_fd("", pipe.write_fd)
    assert pipe.read_all() == b""


def test_putendl_appends_newline(pipe):
    putendl_fd("line", pipe.write_fd)
    assert pipe.read_all() == b"line\n"


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, b"0"),
        (7, b"7"),
        (42, b"42"),
        (-42, b"-42"),
        (2147483647, b"2147483647"),
        (-2147483648, b"-2147483648"),
    ],
)
def test_putnbr_decimal(pipe, n, expected):
    putnbr_fd(n, pipe.write_fd)
    assert pipe.read_all() == expected


def test_putnbr_out_of_range():
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, 1)