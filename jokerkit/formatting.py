"""printf-style formatting with the conversions of a small kernel libc.

Supported conversions are ``c s o p x X d i u n f b m r`` and ``%%``, with
the flags ``- + space # 0``, a width, a precision (digits or ``*``) and an
ignored ``h``/``l``/``L`` length qualifier. Integers are treated as 32-bit
values, as the kernel does.
"""

import enum
import operator

MAX_OUTPUT = 1024
"""Size of the kernel's formatting buffer; results must stay below it."""

_U32 = 0xFFFFFFFF
_UPPER_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER_DIGITS = _UPPER_DIGITS.lower()
_DECIMAL = "0123456789"


class _Flag(enum.IntFlag):
    NONE = 0
    ZEROPAD = 0x01
    SIGN = 0x02
    PLUS = 0x04
    SPACE = 0x08
    LEFT = 0x10
    SPECIAL = 0x20
    SMALL = 0x40
    DOUBLE = 0x80


_FLAG_CHARS = {
    "-": _Flag.LEFT,
    "+": _Flag.PLUS,
    " ": _Flag.SPACE,
    "#": _Flag.SPECIAL,
    "0": _Flag.ZEROPAD,
}


def _digits_of(value, base, digits):
    out = []
    while True:
        value, rem = divmod(value, base)
        out.append(digits[rem])
        if not value:
            break
    return "".join(reversed(out))


def _number(value, base, size, precision, flags):
    """Render one number the way the kernel's ``number`` routine does."""
    digits = _LOWER_DIGITS if flags & _Flag.SMALL else _UPPER_DIGITS
    if flags & _Flag.LEFT:
        flags &= ~_Flag.ZEROPAD
    pad = "0" if flags & _Flag.ZEROPAD else " "

    if flags & _Flag.DOUBLE:
        negative = value < 0
        if negative:
            value = -value
    else:
        value &= _U32
        negative = bool(flags & _Flag.SIGN) and value >= 0x80000000
        if negative:
            value = -value & _U32

    if negative:
        sign = "-"
    elif flags & _Flag.PLUS:
        sign = "+"
    elif flags & _Flag.SPACE:
        sign = " "
    else:
        sign = ""
    if sign:
        size -= 1

    if flags & _Flag.SPECIAL:
        if base == 16:
            size -= 2
        elif base == 8:
            size -= 1

    if flags & _Flag.DOUBLE:
        whole = int(value)
        fraction = int((value - whole) * 1000000) & _U32
        text = _digits_of(whole & _U32, base, digits) + "." + _digits_of(fraction, base, digits)
    else:
        text = _digits_of(value, base, digits)

    precision = max(precision, len(text))
    size -= precision

    out = []
    if not flags & (_Flag.ZEROPAD | _Flag.LEFT) and size > 0:
        out.append(" " * size)
        size = 0
    out.append(sign)
    if flags & _Flag.SPECIAL:
        if base == 8:
            out.append("0")
        elif base == 16:
            out.append("0" + digits[33])
    if not flags & _Flag.LEFT and size > 0:
        out.append(pad * size)
        size = 0
    out.append("0" * (precision - len(text)))
    out.append(text)
    if size > 0:
        out.append(" " * size)
    return "".join(out)


def _c_string(value):
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    end = value.find("\0")
    return value if end < 0 else value[:end]


def _byte_values(value, count, what):
    data = bytes(value)
    if len(data) < count:
        raise ValueError(f"{what} needs {count} bytes, got {len(data)}")
    return data[:count]


def _read_decimal(fmt, pos):
    start = pos
    while pos < len(fmt) and fmt[pos] in _DECIMAL:
        pos += 1
    return int(fmt[start:pos]), pos


def sprintf(fmt, *args):
    """Format ``args`` according to ``fmt`` and return the resulting string.

    ``%n`` stores the number of characters written so far into item 0 of
    its argument, which must support item assignment.
    """
    remaining = iter(args)

    def take():
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    written = 0

    def emit(text):
        nonlocal written
        out.append(text)
        written += len(text)

    pos = 0
    end = len(fmt)
    while pos < end:
        ch = fmt[pos]
        if ch != "%":
            emit(ch)
            pos += 1
            continue

        pos += 1
        flags = _Flag.NONE
        while pos < end and fmt[pos] in _FLAG_CHARS:
            flags |= _FLAG_CHARS[fmt[pos]]
            pos += 1

        field_width = -1
        if pos < end and fmt[pos] in _DECIMAL:
            field_width, pos = _read_decimal(fmt, pos)
        elif pos < end and fmt[pos] == "*":
            pos += 1
            field_width = operator.index(take())
            if field_width < 0:
                field_width = -field_width
                flags |= _Flag.LEFT

        precision = -1
        if pos < end and fmt[pos] == ".":
            pos += 1
            if pos < end and fmt[pos] in _DECIMAL:
                precision, pos = _read_decimal(fmt, pos)
            elif pos < end and fmt[pos] == "*":
                # The '*' is left in place and then read as the conversion.
                precision = operator.index(take())
            precision = max(precision, 0)

        if pos < end and fmt[pos] in "hlL":
            pos += 1

        conv = fmt[pos] if pos < end else ""

        if conv == "c":
            value = take()
            code = ord(value) if isinstance(value, str) else operator.index(value)
            padding = " " * max(field_width - 1, 0)
            char = chr(code & 0xFF)
            emit(char + padding if flags & _Flag.LEFT else padding + char)
        elif conv == "s":
            text = _c_string(take())
            if 0 <= precision < len(text):
                text = text[:precision]
            padding = " " * max(field_width - len(text), 0)
            emit(text + padding if flags & _Flag.LEFT else padding + text)
        elif conv == "o":
            emit(_number(operator.index(take()), 8, field_width, precision, flags))
        elif conv == "p":
            if field_width == -1:
                field_width = 8
                flags |= _Flag.ZEROPAD
            emit(_number(operator.index(take()), 16, field_width, precision, flags))
        elif conv in ("x", "X"):
            if conv == "x":
                flags |= _Flag.SMALL
            emit(_number(operator.index(take()), 16, field_width, precision, flags))
        elif conv in ("d", "i", "u"):
            if conv != "u":
                flags |= _Flag.SIGN
            emit(_number(operator.index(take()), 10, field_width, precision, flags))
        elif conv == "n":
            target = take()
            target[0] = written
        elif conv == "f":
            flags |= _Flag.SIGN | _Flag.DOUBLE
            emit(_number(float(take()), 10, field_width, precision, flags))
        elif conv == "b":
            emit(_number(operator.index(take()), 2, field_width, precision, flags))
        elif conv == "m":
            flags |= _Flag.SMALL | _Flag.ZEROPAD
            octets = _byte_values(take(), 6, "a MAC address")
            emit(":".join(_number(b, 16, 2, precision, flags) for b in octets))
        elif conv == "r":
            flags |= _Flag.SMALL
            octets = _byte_values(take(), 4, "an IP address")
            emit(".".join(_number(b, 10, field_width, precision, flags) for b in octets))
        else:
            if conv != "%":
                emit("%")
            if not conv:
                break
            emit(conv)
        pos += 1

    result = "".join(out)
    if len(result) >= MAX_OUTPUT:
        raise OverflowError(
            f"formatted output of {len(result)} characters exceeds {MAX_OUTPUT - 1}"
        )
    return result