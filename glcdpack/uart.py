"""Serial port helpers: baud-rate divisors, number formatting and the receive FIFO."""

from __future__ import annotations

from collections import deque
from enum import IntEnum

BUF_DEPTH = 256


class BaudRate(IntEnum):
    """Baud-rate generator divisors (double-speed mode, 16 MHz clock)."""

    BR4800 = 416
    BR9600 = 207
    BR19200 = 103
    BR38400 = 51
    BR57600 = 34
    BR115200 = 16

    @property
    def bps(self) -> int:
        """The bit rate this divisor produces."""
        return int(self.name[2:])


DEFAULT_BAUD = BaudRate.BR115200

_MODES = {
    "1": BaudRate.BR4800,
    "2": BaudRate.BR9600,
    "3": BaudRate.BR19200,
    "4": BaudRate.BR38400,
    "5": BaudRate.BR57600,
    "6": BaudRate.BR115200,
}


def baud_for_mode(mode: str | int) -> BaudRate | None:
    """Map a baud mode character '1'..'6' to its rate; None for anything else."""
    if isinstance(mode, int):
        if not 0 <= mode <= 0x10FFFF:
            return None
        mode = chr(mode)
    return _MODES.get(mode)


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


def format_hex(value: int) -> str:
    """Two upper-case hex digits for a byte."""
    return f"{_check_byte(value):02X}"


def format_dec(value: int) -> str:
    """Three decimal digits, zero padded, for a byte."""
    return f"{_check_byte(value):03d}"


def format_bin(value: int) -> str:
    """Eight binary digits for a byte, least significant bit first."""
    return f"{_check_byte(value):08b}"[::-1]


def format_line(text: str) -> str:
    """The text followed by the line ending the device sends."""
    return f"{text}\n\r"


class RxBuffer:
    """FIFO of received bytes; when full, the oldest unread byte is lost."""

    def __init__(self, depth: int = BUF_DEPTH) -> None:
        if depth <= 0:
            raise ValueError("buffer depth must be positive")
        self.depth = depth
        self._items: deque[int] = deque(maxlen=depth)

    def push(self, byte: int) -> None:
        """Append a received byte."""
        self._items.append(_check_byte(byte))

    def pop(self) -> int:
        """Remove and return the oldest byte; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty receive buffer")
        return self._items.popleft()

    def clear(self) -> None:
        """Discard everything buffered."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)