"""Write characters, strings and integers to raw file descriptors."""

from __future__ import annotations

import os
from typing import Union

from pipex.numbers import itoa

Char = Union[str, int]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _text(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def putchar_fd(c: Char, fd: int) -> None:
    """Write one character to ``fd``; an integer is written as a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``, stopping at the first NUL character."""
    _write_all(fd, _text(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, (_text(s) + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write a signed 32-bit integer in decimal to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))