import pytest

from pipex.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdefgh")
    result = memset(buf, ord("z"), 5)
    assert result is buf
    assert all(byte == ord("z") for byte in buf[:5])
    assert buf[5:] == b"fgh"


def test_memset_uses_low_byte_only():
    first = memset(bytearray(4), 0x141, 4)
    second = memset(bytearray(4), 0x41, 4)
    assert first == second


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(3), 0, 4)


def test_bzero():
    buf = bytearray(b"xyzw")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"w"


def test_memcpy_copies_and_returns_dst():
    dst = bytearray(b"........")
    src = b"hello"
    result = memcpy(dst, src, len(src))
    assert result is dst
    assert dst[:len(src)] == src
    assert dst[len(src):] == b"..."


def test_memcpy_zero_length_leaves_dst():
    dst = bytearray(b"keep")
    memcpy(dst, b"", 0)
    assert dst == b"keep"


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


@pytest.mark.parametrize("dst,src,n", [(2, 0, 4), (0, 2, 4), (1, 1, 3), (0, 3, 3)])
def test_memmove_copies_original_bytes(dst, src, n):
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, dst, src, n)
    assert buf[dst:dst + n] == original[src:src + n]


def test_memchr():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")
    assert memchr(data, ord("w"), 5) is None
    assert memchr(data, ord("q"), len(data)) is None


def test_memcmp():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_strlcpy_full_copy():
    dst = bytearray(10)
    src = b"hello"
    assert strlcpy(dst, src, len(dst)) == len(src)
    assert dst[:len(src)] == src
    assert dst[len(src)] == 0


def test_strlcpy_truncates():
    dst = bytearray(10)
    src = b"hello"
    size = 3
    assert strlcpy(dst, src, size) == len(src)
    assert dst[:size - 1] == src[:size - 1]
    assert dst[size - 1] == 0


def test_strlcpy_zero_size_leaves_dst():
    dst = bytearray(b"orig")
    assert strlcpy(dst, b"new", 0) == len(b"new")
    assert dst == b"orig"


def test_strlcat_appends():
    dst = bytearray(b"foo" + bytes(7))
    assert strlcat(dst, b"bar", len(dst)) == len(b"foo") + len(b"bar")
    assert dst.startswith(b"foo" + b"bar" + b"\x00")


def test_strlcat_truncates():
    dst = bytearray(b"foo" + bytes(7))
    size = 5
    assert strlcat(dst, b"bar", size) == len(b"foo") + len(b"bar")
    assert dst[:size - 1] == (b"foo" + b"bar")[:size - 1]
    assert dst[size - 1] == 0


def test_strlcat_small_size():
    dst = bytearray(b"foobar\x00")
    assert strlcat(dst, b"xyz", 4) == 4 + len(b"xyz")
    assert dst == b"foobar\x00"


def test_strlcat_none_with_zero_size():
    assert strlcat(None, b"abc", 0) == 0


def test_calloc():
    buf = calloc(3, 4)
    assert buf == bytes(12)
    assert calloc(0, 5) == bytearray()


def test_calloc_errors():
    with pytest.raises(ValueError):
        calloc(-1, 2)
    with pytest.raises(MemoryError):
        calloc(2**63, 4)