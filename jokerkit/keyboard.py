"""Decoding of PC/AT keyboard scan codes (set 1) into characters."""

import enum

from jokerkit.fifo import Fifo

EXT_CODE = 0xE0
"""Prefix byte announcing an extended scan code."""

_BREAK_BIT = 0x80
_MAKE_MASK = 0x7F


class Key(enum.IntEnum):
    """Make codes of the keys, indexing the keymap."""

    NONE = 0x00
    ESC = 0x01
    K1 = 0x02
    K2 = 0x03
    K3 = 0x04
    K4 = 0x05
    K5 = 0x06
    K6 = 0x07
    K7 = 0x08
    K8 = 0x09
    K9 = 0x0A
    K0 = 0x0B
    MINUS = 0x0C
    EQUAL = 0x0D
    BACKSPACE = 0x0E
    TAB = 0x0F
    Q = 0x10
    W = 0x11
    E = 0x12
    R = 0x13
    T = 0x14
    Y = 0x15
    U = 0x16
    I = 0x17  # noqa: E741
    O = 0x18
    P = 0x19
    BRACKET_L = 0x1A
    BRACKET_R = 0x1B
    ENTER = 0x1C
    CTRL_L = 0x1D
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    G = 0x22
    H = 0x23
    J = 0x24
    K = 0x25
    L = 0x26
    SEMICOLON = 0x27
    QUOTE = 0x28
    BACKQUOTE = 0x29
    SHIFT_L = 0x2A
    BACKSLASH = 0x2B
    Z = 0x2C
    X = 0x2D
    C = 0x2E
    V = 0x2F
    B = 0x30
    N = 0x31
    M = 0x32
    COMMA = 0x33
    POINT = 0x34
    SLASH = 0x35
    SHIFT_R = 0x36
    STAR = 0x37
    ALT_L = 0x38
    SPACE = 0x39
    CAPSLOCK = 0x3A
    F1 = 0x3B
    F2 = 0x3C
    F3 = 0x3D
    F4 = 0x3E
    F5 = 0x3F
    F6 = 0x40
    F7 = 0x41
    F8 = 0x42
    F9 = 0x43
    F10 = 0x44
    NUMLOCK = 0x45
    SCRLOCK = 0x46
    PAD_7 = 0x47
    PAD_8 = 0x48
    PAD_9 = 0x49
    PAD_MINUS = 0x4A
    PAD_4 = 0x4B
    PAD_5 = 0x4C
    PAD_6 = 0x4D
    PAD_PLUS = 0x4E
    PAD_1 = 0x4F
    PAD_2 = 0x50
    PAD_3 = 0x51
    PAD_0 = 0x52
    PAD_POINT = 0x53
    KEY_54 = 0x54
    KEY_55 = 0x55
    KEY_56 = 0x56
    F11 = 0x57
    F12 = 0x58
    KEY_59 = 0x59
    WIN_L = 0x5A
    WIN_R = 0x5B
    CLIPBOARD = 0x5C
    KEY_5D = 0x5D
    KEY_5E = 0x5E
    PRINT_SCREEN = 0x5F


_INV = ("", "")


def _pairs(text):
    return [(text[i], text[i + 1]) for i in range(0, len(text), 2)]


# (plain character, character with shift); "" marks an invisible key.
_KEYMAP = tuple(
    [_INV, ("\x1b", "\x1b")]
    + _pairs("1!2@3#4$5%6^7&8*9(0)-_=+")
    + [("\b", "\b"), ("\t", "\t")]
    + _pairs("qQwWeErRtTyYuUiIoOpP[{]}")
    + [("\n", "\n"), _INV]
    + _pairs("aAsSdDfFgGhHjJkKlL;:'\"`~")
    + [_INV]
    + _pairs("\\|zZxXcCvVbBnNmM,<.>/?")
    + [_INV, ("*", "*"), _INV, (" ", " ")]
    + [_INV] * 13
    + [
        ("7", ""), ("8", ""), ("9", ""), ("-", "-"),
        ("4", ""), ("5", ""), ("6", ""), ("+", "+"),
        ("1", ""), ("2", ""), ("3", ""), ("0", ""),
        (".", "\x7f"),
    ]
    + [_INV] * 12
)
assert len(_KEYMAP) == Key.PRINT_SCREEN + 1


class KeyboardDecoder:
    """Turns a stream of scan-code bytes into typed characters.

    Characters are kept in a ring buffer of ``buffer_size`` slots (a power of
    two); when it fills, the oldest character is dropped.
    """

    def __init__(self, buffer_size=64):
        self._fifo = Fifo(buffer_size)
        # pressed[key] = [left/plain copy down, right/extended copy down]
        self._pressed = [[False, False] for _ in _KEYMAP]
        self.capslock = False
        self.numlock = False
        self.scrlock = False
        self._extended = False

    def is_pressed(self, key, extended=False):
        """Whether ``key`` (its extended copy if ``extended``) is held down."""
        return self._pressed[Key(key)][1 if extended else 0]

    @property
    def ctrl(self):
        return any(self._pressed[Key.CTRL_L])

    @property
    def alt(self):
        return any(self._pressed[Key.ALT_L])

    @property
    def shift(self):
        return self._pressed[Key.SHIFT_L][0] or self._pressed[Key.SHIFT_R][0]

    def leds(self):
        """The LED byte sent to the keyboard: caps, num and scroll lock bits."""
        return (self.capslock << 2) | (self.numlock << 1) | int(self.scrlock)

    def feed(self, scancode):
        """Process one scan-code byte; return the character it produced, if any."""
        if not 0 <= scancode <= 0xFF:
            raise ValueError(f"scan code must be one byte, not {scancode}")
        if scancode == EXT_CODE:
            self._extended = True
            return None

        extended = self._extended
        self._extended = False
        makecode = scancode & _MAKE_MASK
        if makecode > Key.PRINT_SCREEN:
            return None

        column = 1 if extended else 0
        if scancode & _BREAK_BIT:
            self._pressed[makecode][column] = False
            return None
        self._pressed[makecode][column] = True

        if makecode == Key.NUMLOCK:
            self.numlock = not self.numlock
        elif makecode == Key.CAPSLOCK:
            self.capslock = not self.capslock
        elif makecode == Key.SCRLOCK:
            self.scrlock = not self.scrlock

        plain, shifted = _KEYMAP[makecode]
        shift = self.shift
        if "a" <= plain <= "z":
            shift ^= self.capslock
        if extended and makecode != Key.SLASH:
            ch = shifted
        else:
            ch = shifted if shift else plain
        if not ch:
            return None
        self._fifo.put(ch)
        return ch

    def __len__(self):
        return len(self._fifo)

    def read(self, count):
        """Remove and return ``count`` buffered characters.

        Raises ``BlockingIOError`` and consumes nothing when fewer are buffered.
        """
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        if len(self._fifo) < count:
            raise BlockingIOError(
                f"{count} characters requested, {len(self._fifo)} buffered"
            )
        return "".join(self._fifo.get() for _ in range(count))