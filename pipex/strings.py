"""Text helpers with C-string semantics.

Text ends at the first NUL character, as a C string would. Functions that
find something return an index or None. Functions that build text return a
new string. The bounded copy and concatenate helpers return the resulting
text together with the length that the C interface reports.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

Char = Union[str, int]

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the code points of the first unequal pair,
    where the end of a string counts as code point 0, or 0 if none differ.
    """
    _non_negative("n", n)
    pairs = zip_longest(_cstr(s1)[:n], _cstr(s2)[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` entirely within the first ``length`` characters.

    An empty needle matches at index 0.
    """
    _non_negative("length", length)
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack)[:length].find(target)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``.
    """
    _non_negative("size", size)
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create: the
    length of ``src`` plus ``size`` when ``dst`` is longer than the buffer,
    otherwise plus the length of ``dst``.
    """
    _non_negative("size", size)
    head = _cstr(dst)
    tail = _cstr(src)
    if size == 0 or len(head) > size:
        total = len(tail) + size
    else:
        total = len(tail) + len(head)
    room = max(0, size - len(head) - 1)
    return head + tail[:room], total


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _cstr(s1) + _cstr(s2)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    text = _cstr(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    text = _cstr(s)
    trim = set(_cstr(chars))
    begin = 0
    end = len(text)
    while begin < end and text[begin] in trim:
        begin += 1
    while end > begin and text[end - 1] in trim:
        end -= 1
    return text[begin:end]


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty fields."""
    text = _cstr(s)
    delimiter = _char(sep)
    if delimiter == _NUL:
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character.

    Like a C string, the result ends at the first NUL that ``func`` returns.
    """
    mapped = []
    for index, ch in enumerate(_cstr(s)):
        out = func(index, ch)
        mapped.append(_char(out))
    return _cstr("".join(mapped))


def striteri(
    s: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> MutableSequence[str]:
    """Call ``func(index, s)`` for each character of a mutable character sequence.

    ``func`` may change ``s[index]`` in place. Iteration stops at a NUL
    character. The same sequence is returned.
    """
    index = 0
    while index < len(s) and s[index] not in (_NUL, 0):
        func(index, s)
        index += 1
    return s