"""A ring buffer that drops its oldest item when full."""


class Fifo:
    """Ring buffer of ``length`` slots; holds at most ``length - 1`` items.

    ``length`` must be a power of two no smaller than 2.
    """

    def __init__(self, length):
        if length < 2 or length & (length - 1):
            raise ValueError(f"fifo length must be a power of two >= 2, not {length}")
        self._buf = [None] * length
        self._mask = length - 1
        self._r = 0
        self._w = 0

    @property
    def length(self):
        return len(self._buf)

    def _next(self, idx):
        return (idx + 1) & self._mask

    def is_empty(self):
        return self._r == self._w

    def is_full(self):
        return self._next(self._w) == self._r

    def get(self):
        """Remove and return the oldest item."""
        if self.is_empty():
            raise IndexError("get from an empty fifo")
        item = self._buf[self._r]
        self._buf[self._r] = None
        self._r = self._next(self._r)
        return item

    def put(self, byte):
        """Append an item, discarding the oldest one if the buffer is full."""
        if self.is_full():
            self.get()
        self._buf[self._w] = byte
        self._w = self._next(self._w)

    def __len__(self):
        return (self._w - self._r) & self._mask