"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. The predicates return booleans. The case converters return a value
of the same kind they were given. Only the ASCII range is considered, so
non-ASCII letters are never classified as letters and never change case.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: Char) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Convert an ASCII lowercase letter to uppercase; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Convert an ASCII uppercase letter to lowercase; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code