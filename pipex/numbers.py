"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    The result wraps to a signed 32-bit value.
    """
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer as decimal text."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def num_len(n: int) -> int:
    """Return the number of decimal digits of a non-negative integer; 0 for 0."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return len(str(n)) if n else 0