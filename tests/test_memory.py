import pytest

from pipex.memory import (
    ALLOCATION_LIMIT,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxx" + b"def")


def test_memset_wraps_value_to_a_byte():
    buf = bytearray(4)
    memset(buf, 256 + 9, 4)
    assert buf == bytearray([9] * 4)


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00llo")


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    src = b"abcdef"
    memcpy(dest, src, 4)
    assert dest == bytearray(src[:4] + b"..")


def test_memcpy_zero_length_changes_nothing():
    dest = bytearray(b"keep")
    memcpy(dest, b"xxxx", 0)
    assert dest == bytearray(b"keep")


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 5)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(original[:2] + original[0:4])


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(original[2:6] + original[4:6])


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None


def test_memchr_wraps_value():
    data = bytes([1, 2, 3])
    assert memchr(data, 256 + 2, 3) == data.index(2)


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_returns_byte_difference():
    a, b = b"abc", b"abz"
    assert memcmp(a, b, 3) == a[2] - b[2]
    assert memcmp(b, a, 3) == b[2] - a[2]


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert len(buf) == 4 * 3
    assert not any(buf)


def test_calloc_refuses_huge_allocation():
    with pytest.raises(MemoryError):
        calloc(ALLOCATION_LIMIT, 1)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)