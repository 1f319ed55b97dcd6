# jokerkit

The support code of a small x86 kernel — bit allocation, ring buffers,
linked lists, C string and formatting routines, clock arithmetic, keyboard
decoding and interrupt-controller bookkeeping — as ordinary Python objects
that can be used and tested without any hardware. No dependencies beyond
the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `jokerkit.bitmap` | `Bitmap`: a bit set of `length` bytes whose bit numbers start at `offset`; `test`, `set`, and `scan` to claim the first run of clear bits |
| `jokerkit.fifo` | `Fifo`: a power-of-two ring buffer holding at most `length - 1` items, dropping the oldest when full |
| `jokerkit.dlist` | `ListNode`, `LinkedList`: a circular doubly linked list with a sentinel head; push/pop at both ends, insert before/after a node, `remove`, `in`, `len`, iteration |
| `jokerkit.bcd` | `bcd_to_bin`, `bin_to_bcd`, `div_round_up` |
| `jokerkit.cstrings` | NUL-terminated string helpers on `bytes` or `str`, returning indices or `None`: `strlen`, `strnlen`, `strcmp`, `strchr`, `strrchr`, `memcmp`, `memchr`, `strsep`, `strrsep` |
| `jokerkit.formatting` | `sprintf`: printf-style formatting with `c s o p x X d i u n f b m r` and `%%`, 32-bit integer semantics |
| `jokerkit.caltime` | `Tm`, `localtime`, `mktime`, `get_yday`, `is_leap_year`, `elapsed_leap_years`, `alarm_time` |
| `jokerkit.keyboard` | `Key`, `KeyboardDecoder`: set-1 scan codes to characters, with Shift, Caps/Num/Scroll Lock and the LED byte |
| `jokerkit.pic` | `Irq`, `Pic`: masks and handler dispatch of the cascaded 8259A controllers |

## Install

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from jokerkit.bitmap import Bitmap

pages = Bitmap(length=2, offset=256)   # 16 bits, numbered 256..271
start = pages.scan(3)                   # 256; bits 256..258 are now set
pages.set(257, False)
pages.test(257)                         # False
```

`scan` returns `None` when no run of the requested length is free; indices
outside the bitmap raise `IndexError`.

```python
from jokerkit.fifo import Fifo

fifo = Fifo(4)          # holds at most 3 items
for ch in b"abcd":
    fifo.put(ch)        # 97 is dropped to make room for 100
fifo.get()              # 98, i.e. ord('b')
```

```python
from jokerkit.formatting import sprintf

sprintf("%08x|%-5d|%s", 0xBEEF, 42, "ok")   # '0000beef|42   |ok'
sprintf("%r", bytes([192, 168, 0, 1]))       # '192.168.0.1'
```

Output of 1024 characters or more raises `OverflowError`, matching the
kernel's fixed formatting buffer.

```python
from jokerkit.keyboard import KeyboardDecoder

kbd = KeyboardDecoder(64)
for code in (0x2A, 0x1E, 0x9E, 0xAA):   # Shift down, A down, A up, Shift up
    kbd.feed(code)
kbd.read(1)                              # 'A'
```

`feed` returns the character a byte produced, or `None`. `read(count)`
raises `BlockingIOError` and consumes nothing when fewer than `count`
characters are buffered.

```python
from jokerkit.pic import Pic, Irq

pic = Pic()
pic.set_handler(Irq.KEYBOARD, lambda irq: f"key {irq}")
pic.set_enabled(Irq.KEYBOARD, True)
pic.dispatch(0x21)                       # 'key 1'
```

Vectors without a handler are counted in `pic.unhandled`; end-of-interrupt
acknowledgements are counted in `pic.eoi_sent`.

The calendar helpers keep the kernel's simplified arithmetic: years count
from 1900 (two-digit years below 70 mean 2000–2069), `mktime` and
`get_yday` take months numbered from 1, timestamps are unsigned 32-bit
seconds, and `localtime` approximates leap days the same way the kernel
does. `alarm_time` advances only the hour, minute and second fields,
wrapping the hour at 24.

## What it does not do

There is no I/O with real devices: `KeyboardDecoder` does not talk to a
keyboard controller (`leds()` only computes the LED byte), `Pic` keeps
masks and counters in memory rather than writing to ports, and the
calendar functions do not read a CMOS clock. There is no scheduler,
memory manager, file system or system-call layer, and no command-line
program.