import pytest

from glcdpack.uart import (
    BaudRate,
    RxBuffer,
    baud_for_mode,
    format_bin,
    format_dec,
    format_hex,
    format_line,
)


def test_baud_divisors_match_register_values():
    assert BaudRate(16) is BaudRate.BR115200
    assert BaudRate(416) is BaudRate.BR4800
    assert BaudRate(207).bps == 9600


@pytest.mark.parametrize(
    "mode, rate",
    [
        ("1", BaudRate.BR4800),
        ("2", BaudRate.BR9600),
        ("3", BaudRate.BR19200),
        ("4", BaudRate.BR38400),
        ("5", BaudRate.BR57600),
        ("6", BaudRate.BR115200),
    ],
)
def test_baud_for_mode(mode, rate):
    assert baud_for_mode(mode) is rate
    assert baud_for_mode(ord(mode)) is rate


@pytest.mark.parametrize("mode", ["0", "7", "a", 0xFF, -1])
def test_baud_for_invalid_mode_is_none(mode):
    assert baud_for_mode(mode) is None


def test_format_hex_is_upper_case():
    assert format_hex(0xAB) == "AB"


def test_format_dec_pads_to_three_digits():
    assert format_dec(7) == "007"


def test_format_bin_is_lsb_first():
    assert format_bin(1) == "10000000"


@pytest.mark.parametrize("value", range(256))
def test_formats_round_trip(value):
    assert int(format_hex(value), 16) == value
    assert int(format_dec(value)) == value
    assert int(format_bin(value)[::-1], 2) == value
    assert len(format_hex(value)) == 2
    assert len(format_dec(value)) == 3
    assert len(format_bin(value)) == 8


@pytest.mark.parametrize("formatter", [format_hex, format_dec, format_bin])
@pytest.mark.parametrize("value", [-1, 256])
def test_formats_reject_out_of_range(formatter, value):
    with pytest.raises(ValueError):
        formatter(value)


def test_format_line_appends_line_ending():
    assert format_line("Ready to serve!") == "Ready to serve!\n\r"


def test_buffer_is_fifo():
    buf = RxBuffer()
    for byte in b"abc":
        buf.push(byte)
    assert len(buf) == 3
    assert bytes([buf.pop(), buf.pop(), buf.pop()]) == b"abc"
    assert len(buf) == 0


def test_buffer_wraps_around_many_times():
    buf = RxBuffer(4)
    out = []
    for byte in range(50):
        buf.push(byte)
        buf.push(byte + 100)
        out.append(buf.pop())
        out.append(buf.pop())
    assert out == [v for b in range(50) for v in (b, b + 100)]


def test_buffer_overflow_drops_oldest():
    buf = RxBuffer(3)
    for byte in [1, 2, 3, 4]:
        buf.push(byte)
    assert len(buf) == 3
    assert [buf.pop() for _ in range(3)] == [2, 3, 4]


def test_clear_empties_buffer():
    buf = RxBuffer()
    buf.push(9)
    buf.clear()
    assert len(buf) == 0
    with pytest.raises(IndexError):
        buf.pop()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        RxBuffer().pop()


def test_push_rejects_non_byte():
    with pytest.raises(ValueError):
        RxBuffer().push(300)


def test_invalid_depth():
    with pytest.raises(ValueError):
        RxBuffer(0)