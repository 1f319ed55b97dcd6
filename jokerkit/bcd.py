"""Binary-coded decimal conversion and rounding helpers."""


def _check_byte(value):
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value must fit in one byte, not {value}")


def bcd_to_bin(value):
    """Convert a one-byte BCD value to an integer."""
    _check_byte(value)
    return (value & 0x0F) + (value >> 4) * 10


def bin_to_bcd(value):
    """Convert an integer to one byte of BCD (truncated to 8 bits)."""
    _check_byte(value)
    return ((value // 10) * 0x10 + value % 10) & 0xFF


def div_round_up(num, size):
    """Divide ``num`` by ``size``, rounding up."""
    return (num + size - 1) // size