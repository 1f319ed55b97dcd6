"""NUL-terminated string and memory search helpers.

Functions take ``bytes``-like objects or ``str``. A string ends at its
first NUL character, or at its end if it has none. Positions are returned
as indices; ``None`` means "not found".
"""

_STR_SEPARATORS = "/\\"
_BYTE_SEPARATORS = b"/\\"


def _terminated(data):
    if isinstance(data, str):
        end = data.find("\0")
    else:
        data = bytes(data)
        end = data.find(0)
    return data if end < 0 else data[:end]


def _needle(data, ch):
    if isinstance(data, str):
        return ch if isinstance(ch, str) else chr(ch)
    if isinstance(ch, str):
        return ord(ch)
    if isinstance(ch, (bytes, bytearray)):
        return ch[0]
    return ch & 0xFF


def _is_nul(needle):
    return needle == 0 or needle == "\0"


def _sign(lhs, rhs):
    return (lhs > rhs) - (lhs < rhs)


def strlen(data):
    """Length of the string up to its terminator."""
    return len(_terminated(data))


def strnlen(data, maxlen):
    """Length of the string, but at most ``maxlen``."""
    if maxlen < 0:
        raise ValueError(f"maxlen must not be negative: {maxlen}")
    return min(strlen(data), maxlen)


def strcmp(lhs, rhs):
    """Compare two strings; return -1, 0 or 1."""
    return _sign(_terminated(lhs), _terminated(rhs))


def strchr(data, ch):
    """Index of the first ``ch``; searching for NUL finds the terminator."""
    text = _terminated(data)
    needle = _needle(data, ch)
    if _is_nul(needle):
        return len(text)
    idx = text.find(needle)
    return None if idx < 0 else idx


def strrchr(data, ch):
    """Index of the last ``ch``; searching for NUL finds the terminator."""
    text = _terminated(data)
    needle = _needle(data, ch)
    if _is_nul(needle):
        return len(text)
    idx = text.rfind(needle)
    return None if idx < 0 else idx


def _check_count(count, *buffers):
    if count < 0 or any(count > len(buf) for buf in buffers):
        raise IndexError(f"count {count} is outside the buffer")


def memcmp(lhs, rhs, count):
    """Compare the first ``count`` items of two buffers; return -1, 0 or 1."""
    _check_count(count, lhs, rhs)
    return _sign(lhs[:count], rhs[:count])


def memchr(data, ch, count):
    """Index of ``ch`` within the first ``count`` items, NULs included."""
    _check_count(count, data)
    idx = data[:count].find(_needle(data, ch))
    return None if idx < 0 else idx


def _separator_positions(data):
    text = _terminated(data)
    seps = _STR_SEPARATORS if isinstance(text, str) else _BYTE_SEPARATORS
    return (i for i, c in enumerate(text) if c in seps)


def strsep(data):
    """Index of the first path separator ('/' or '\\')."""
    return next(_separator_positions(data), None)


def strrsep(data):
    """Index of the last path separator ('/' or '\\')."""
    return max(_separator_positions(data), default=None)