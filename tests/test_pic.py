import pytest

from jokerkit.pic import PIC_INT_VEC_START, Irq, Pic


def test_everything_masked_initially():
    pic = Pic()
    assert pic.master_mask == 0xFF
    assert pic.slave_mask == 0xFF
    assert not any(pic.is_enabled(irq) for irq in range(16))


def test_enable_and_disable_master_line():
    pic = Pic()
    pic.set_enabled(Irq.KEYBOARD, True)
    assert pic.is_enabled(Irq.KEYBOARD)
    assert pic.master_mask == 0xFF & ~(1 << Irq.KEYBOARD)
    pic.set_enabled(Irq.KEYBOARD, False)
    assert not pic.is_enabled(Irq.KEYBOARD)
    assert pic.master_mask == 0xFF


def test_slave_line_opens_cascade():
    pic = Pic()
    pic.set_enabled(Irq.RTC, True)
    assert pic.is_enabled(Irq.RTC)
    assert pic.is_enabled(Irq.CASCADE)
    assert pic.slave_mask == 0xFF & ~1


def test_cascade_closes_only_when_slave_fully_masked():
    pic = Pic()
    pic.set_enabled(Irq.RTC, True)
    pic.set_enabled(Irq.HARDDISK, True)
    pic.set_enabled(Irq.RTC, False)
    assert pic.is_enabled(Irq.CASCADE)
    pic.set_enabled(Irq.HARDDISK, False)
    assert not pic.is_enabled(Irq.CASCADE)
    assert pic.slave_mask == 0xFF


def test_dispatch_calls_handler_with_irq():
    pic = Pic()
    seen = []
    pic.set_handler(Irq.KEYBOARD, lambda irq: seen.append(irq) or "done")
    assert pic.dispatch(PIC_INT_VEC_START + Irq.KEYBOARD) == "done"
    assert seen == [Irq.KEYBOARD]
    assert pic.unhandled == 0


def test_dispatch_without_handler_counts():
    pic = Pic()
    assert pic.dispatch(PIC_INT_VEC_START) is None
    assert pic.dispatch(PIC_INT_VEC_START) is None
    assert pic.unhandled == 2


def test_eoi_goes_to_both_chips_for_slave_vectors():
    pic = Pic()
    pic.dispatch(PIC_INT_VEC_START + Irq.CLOCK)
    assert pic.eoi_sent == {"master": 1, "slave": 0}
    pic.dispatch(PIC_INT_VEC_START + Irq.RTC)
    assert pic.eoi_sent == {"master": 2, "slave": 1}


def test_second_handler_for_same_irq_rejected():
    pic = Pic()
    pic.set_handler(Irq.CLOCK, lambda irq: None)
    with pytest.raises(ValueError):
        pic.set_handler(Irq.CLOCK, lambda irq: None)


@pytest.mark.parametrize("vector", [PIC_INT_VEC_START - 1, PIC_INT_VEC_START + 16])
def test_dispatch_out_of_range(vector):
    with pytest.raises(ValueError):
        Pic().dispatch(vector)


@pytest.mark.parametrize("irq", [-1, 16])
def test_irq_out_of_range(irq):
    pic = Pic()
    with pytest.raises(ValueError):
        pic.set_handler(irq, lambda i: None)
    with pytest.raises(ValueError):
        pic.set_enabled(irq, True)
    with pytest.raises(ValueError):
        pic.is_enabled(irq)


def test_irq_aliases_share_a_line():
    pic = Pic()
    pic.set_enabled(Irq.SB16, True)
    assert pic.is_enabled(Irq.PARALLEL_2)
    assert pic.master_mask == 0xFF & ~(1 << 5)
    pic.set_handler(Irq.PARALLEL_2, lambda irq: None)
    with pytest.raises(ValueError):
        pic.set_handler(Irq.SB16, lambda irq: None)


def test_rtc_is_first_slave_line():
    pic = Pic()
    pic.set_enabled(Irq.RTC, True)
    assert pic.slave_mask == 0xFE
    assert pic.master_mask == 0xFF & ~(1 << Irq.CASCADE)