"""Model of the cascaded 8259A programmable interrupt controllers."""

import enum

PIC_INT_VEC_START = 0x20
PIC_INT_VEC_END = 0x2F
IRQ_COUNT = PIC_INT_VEC_END + 1 - PIC_INT_VEC_START
_MASTER_IRQS = 8


class Irq(enum.IntEnum):
    """Interrupt request lines, counted from the first PIC vector."""

    CLOCK = 0
    KEYBOARD = 1
    CASCADE = 2
    SERIAL_2 = 3
    SERIAL_1 = 4
    PARALLEL_2 = 5
    SB16 = 5
    FLOPPY = 6
    PARALLEL_1 = 7
    RTC = 8
    REDIRECT = 9
    NIC = 11
    MOUSE = 12
    MATH = 13
    HARDDISK = 14
    HARDDISK2 = 15


def _check_irq(irq):
    if not 0 <= irq < IRQ_COUNT:
        raise ValueError(f"irq out of range: {irq}")


class Pic:
    """Master and slave interrupt masks with a handler table.

    After initialisation every line is masked. A set mask bit disables its line.
    """

    def __init__(self):
        self.master_mask = 0xFF
        self.slave_mask = 0xFF
        self._handlers = [None] * IRQ_COUNT
        self.unhandled = 0
        self.eoi_sent = {"master": 0, "slave": 0}

    def set_handler(self, irq, handler):
        """Install ``handler`` for ``irq``; each line takes one handler only."""
        _check_irq(irq)
        if self._handlers[irq] is not None:
            raise ValueError(f"irq {irq} already has a handler")
        self._handlers[irq] = handler

    def set_enabled(self, irq, enable):
        """Unmask or mask ``irq``, keeping the cascade line in step."""
        _check_irq(irq)
        if irq < _MASTER_IRQS:
            bit = 1 << irq
            if enable:
                self.master_mask &= ~bit & 0xFF
            else:
                self.master_mask |= bit
            return

        bit = 1 << (irq - _MASTER_IRQS)
        cascade = 1 << Irq.CASCADE
        if enable:
            self.slave_mask &= ~bit & 0xFF
            self.master_mask &= ~cascade & 0xFF
        else:
            self.slave_mask |= bit
            if self.slave_mask == 0xFF:
                self.master_mask |= cascade

    def is_enabled(self, irq):
        """Whether the mask bit of ``irq`` is clear."""
        _check_irq(irq)
        if irq < _MASTER_IRQS:
            return not self.master_mask & (1 << irq)
        return not self.slave_mask & (1 << (irq - _MASTER_IRQS))

    def dispatch(self, vector):
        """Acknowledge ``vector`` and run its handler with the irq number.

        Returns what the handler returned, or ``None`` when there is none.
        """
        irq = vector - PIC_INT_VEC_START
        if not 0 <= irq < IRQ_COUNT:
            raise ValueError(f"vector out of PIC range: {vector:#x}")
        self.eoi_sent["master"] += 1
        if irq >= _MASTER_IRQS:
            self.eoi_sent["slave"] += 1
        handler = self._handlers[irq]
        if handler is None:
            self.unhandled += 1
            return None
        return handler(irq)