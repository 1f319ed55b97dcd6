import pytest

from jokerkit.cstrings import (
    memchr,
    memcmp,
    strchr,
    strcmp,
    strlen,
    strnlen,
    strrchr,
    strrsep,
    strsep,
)


def test_strlen_stops_at_nul():
    assert strlen(b"abc\0def") == len(b"abc")
    assert strlen("abc\0def") == len("abc")


def test_strlen_without_nul_is_full_length():
    data = bytearray(b"hello")
    assert strlen(data) == len(data)


def test_strnlen_caps_length():
    assert strnlen(b"hello\0", 2) == 2
    assert strnlen(b"hi\0", 10) == len(b"hi")


def test_strnlen_negative_raises():
    with pytest.raises(ValueError):
        strnlen(b"x", -1)


def test_strcmp_equal_ignores_after_nul():
    assert strcmp(b"abc", b"abc\0zzz") == 0


def test_strcmp_prefix_is_smaller():
    assert strcmp(b"ab", b"abc") == -1
    assert strcmp(b"abc", b"ab") == 1


def test_strcmp_antisymmetric():
    pairs = [(b"apple", b"apply"), ("z", "a"), (b"", b"x")]
    for lhs, rhs in pairs:
        assert strcmp(lhs, rhs) == -strcmp(rhs, lhs)


def test_strchr_finds_first():
    data = b"a/b/c"
    idx = strchr(data, "/")
    assert data[idx] == ord("/")
    assert b"/" not in data[:idx]


def test_strchr_not_found_and_after_nul():
    assert strchr(b"abc\0x", "x") is None
    assert strchr("abc", "q") is None


def test_strchr_nul_finds_terminator():
    assert strchr(b"abc\0x", 0) == strlen(b"abc\0x")
    assert strrchr("abc", "\0") == strlen("abc")


def test_strrchr_finds_last():
    data = "a/b/c"
    idx = strrchr(data, ord("/"))
    assert data[idx] == "/"
    assert "/" not in data[idx + 1:]
    assert idx != strchr(data, "/")


def test_memcmp_sign():
    assert memcmp(b"abcd", b"abce", 3) == 0
    assert memcmp(b"abcd", b"abce", 4) == -1
    assert memcmp(b"abce", b"abcd", 4) == 1


def test_memcmp_looks_past_nul():
    assert memcmp(b"a\0b", b"a\0c", 3) == -1


def test_memcmp_count_too_large_raises():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memchr_limits_search():
    data = b"\0\0xyz"
    idx = memchr(data, "x", len(data))
    assert data[idx] == ord("x")
    assert memchr(data, "x", idx) is None
    assert memchr(data, 0, len(data)) == 0


def test_memchr_count_too_large_raises():
    with pytest.raises(IndexError):
        memchr(b"ab", "a", 5)


def test_strsep_first_separator():
    path = b"usr\\bin/ls"
    idx = strsep(path)
    assert path[idx:idx + 1] == b"\\"
    assert strsep("file.txt") is None


def test_strrsep_last_separator():
    path = "/usr/bin\\ls"
    idx = strrsep(path)
    assert path[idx] == "\\"
    assert strsep(path) == 0
    assert strrsep("name") is None


def test_separators_after_nul_ignored():
    assert strrsep(b"a/b\0/c") == strsep(b"a/b\0/c")