import pytest

from sigtalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_same_buffer():
    original = bytearray(b"abcdef")
    buf = bytearray(original)
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert result[:3] == b"z" * 3
    assert result[3:] == original[3:]


def test_memset_uses_low_byte_of_value():
    buf = memset(bytearray(4), 256 + ord("q"), 4)
    assert buf == bytearray(b"q" * 4)


def test_memset_out_of_range_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bzero(bytearray(b"xxxxxx"), 4)
    assert not any(buf[:4])
    assert buf[4:] == b"xx"


def test_calloc_is_zeroed_with_requested_size():
    buf = calloc(4, 8)
    assert len(buf) == 4 * 8
    assert not any(buf)


def test_calloc_zero_count_is_empty():
    assert len(calloc(0, 2**70)) == 0


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2, 2**63)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_uses_low_byte():
    data = b"\x00ab"
    assert memchr(data, 256 + ord("a"), 3) == data.index(b"a")


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"\x05", b"\x02", 1) == 3


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"........")
    src = b"payload!"
    result = memcpy(dst, src, 4)
    assert result is dst
    assert dst[:4] == src[:4]
    assert dst[4:] == b"...."


def test_memcpy_both_none_is_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_out_of_range_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    assert memmove(buf, 2, 0, 5) == bytearray(b"121234589")


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    assert memmove(buf, 0, 2, 5) == bytearray(b"345676789")


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(5), 3, 0, 4)