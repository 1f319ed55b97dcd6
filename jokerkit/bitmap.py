"""A fixed-size bit set whose bit numbers start at an arbitrary offset."""

BITLEN = 8


class Bitmap:
    """Bit set of ``length`` bytes; bit numbers start at ``offset``.

    All bits start cleared.
    """

    def __init__(self, length, offset=0):
        if length < 0:
            raise ValueError(f"bitmap length must not be negative: {length}")
        self.length = length
        self.offset = offset
        self.bits = bytearray(length)

    def __repr__(self):
        return f"Bitmap(length={self.length}, offset={self.offset})"

    def _locate(self, index):
        if index < self.offset:
            raise IndexError(f"bit {index} is below bitmap offset {self.offset}")
        byte, bit = divmod(index - self.offset, BITLEN)
        if byte >= self.length:
            raise IndexError(f"bit {index} is beyond the end of the bitmap")
        return byte, bit

    def test(self, index):
        """Return whether bit ``index`` is set."""
        byte, bit = self._locate(index)
        return bool((self.bits[byte] >> bit) & 1)

    def set(self, index, value):
        """Set bit ``index`` to ``value``, which must be 0 or 1."""
        if value not in (0, 1):
            raise ValueError(f"bit value must be 0 or 1, not {value!r}")
        byte, bit = self._locate(index)
        if value:
            self.bits[byte] |= 1 << bit
        else:
            self.bits[byte] &= ~(1 << bit) & 0xFF

    def scan(self, count):
        """Claim the first run of ``count`` clear bits.

        The bits are set and the number of the first one is returned;
        ``None`` is returned when no such run exists.
        """
        if count < 1:
            raise ValueError(f"count must be positive, not {count}")
        run = 0
        for pos in range(self.length * BITLEN):
            if self.test(self.offset + pos):
                run = 0
            else:
                run += 1
            if run == count:
                start = pos - count + 1
                for claimed in range(start, start + count):
                    self.set(self.offset + claimed, True)
                return start + self.offset
        return None