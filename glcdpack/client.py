"""Host-side driver that sends text and drawing commands to a backpack."""

from __future__ import annotations

import time
from typing import Callable, Protocol

from .uart import DEFAULT_BAUD, baud_for_mode

ESCAPE = 0x7C
CLEAR_SCREEN = 0x00
RUN_DEMO = 0x04
TOGGLE_REVERSE = 0x12
TOGGLE_SPLASH = 0x13
SET_BACKLIGHT = 0x02
SET_BAUD = 0x07
SET_X = 0x18
SET_Y = 0x19
SET_PIXEL = 0x10
DRAW_LINE = 0x0C
DRAW_CIRCLE = 0x03
DRAW_BOX = 0x0F
ERASE_BLOCK = 0x05

DRAW_FLAG = 0x01
DEFAULT_MODE = ord("6")
RESTORE_MESSAGE = "Baud restored to 115200!"

_RATES = {ord(mode): baud_for_mode(mode).bps for mode in "123456"}
_FALLBACK_RATES = (4800, 9600, 19200, 38400, 57600)


class Port(Protocol):
    def write(self, data: bytes) -> object: ...


def _byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


class GraphicLcd:
    """Talks to a backpack over a byte port such as an open serial port.

    If the port has a ``baudrate`` attribute it is kept in step with the
    rate the display is told to use. The draw commands always send the
    draw flag; ``set`` is accepted but the device is asked to draw.
    """

    def __init__(self, port: Port, sleep: Callable[[float], None] = time.sleep) -> None:
        self.port = port
        self.sleep = sleep
        self.baudrate = DEFAULT_BAUD.bps
        self._begin(DEFAULT_BAUD.bps)

    def _begin(self, rate: int) -> None:
        self.baudrate = rate
        if hasattr(self.port, "baudrate"):
            self.port.baudrate = rate

    def _send(self, data: bytes) -> None:
        self.port.write(data)

    def _command(self, *values: int) -> None:
        self._send(bytes([ESCAPE, *(_byte(v) for v in values)]))

    def print_str(self, text: str) -> None:
        """Send text to be drawn at the cursor."""
        self._send(text.encode("latin-1"))

    def print_num(self, num: int) -> None:
        """Send an integer as decimal text."""
        self._send(str(int(num)).encode("ascii"))

    def next_line(self) -> None:
        """Send a line ending."""
        self._send(b"\r\n")

    def clear_screen(self) -> None:
        self._command(CLEAR_SCREEN)

    def toggle_reverse_mode(self) -> None:
        self._command(TOGGLE_REVERSE)

    def toggle_splash(self) -> None:
        self._command(TOGGLE_SPLASH)

    def set_backlight(self, duty: int) -> None:
        """Set the backlight level, 0-100."""
        self._command(SET_BACKLIGHT, duty)

    def set_baud(self, baud: int) -> None:
        """Change the display's rate with a mode byte '1'..'6' (49-54), then follow it."""
        self._command(SET_BAUD, baud)
        self.sleep(0.1)
        rate = _RATES.get(baud)
        if rate is not None:
            self._begin(rate)

    def restore_default_baud(self) -> None:
        """Tell the display to go back to 115200 at every other rate, then confirm."""
        for rate in _FALLBACK_RATES:
            self._begin(rate)
            self._command(SET_BAUD, DEFAULT_MODE)
        self._begin(DEFAULT_BAUD.bps)
        self.sleep(0.01)
        self._command(CLEAR_SCREEN)
        self.print_str(RESTORE_MESSAGE)
        self.sleep(5.0)

    def demo(self) -> None:
        self._command(RUN_DEMO)

    def set_x(self, pos_x: int) -> None:
        self._command(SET_X, pos_x)

    def set_y(self, pos_y: int) -> None:
        self._command(SET_Y, pos_y)

    def set_home(self) -> None:
        self._command(SET_X, 0)
        self._command(SET_Y, 0)

    def set_pixel(self, x: int, y: int, set: int = 1) -> None:
        self._command(SET_PIXEL, x, y, DRAW_FLAG)
        self.sleep(0.01)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, set: int = 1) -> None:
        self._command(DRAW_LINE, x1, y1, x2, y2, DRAW_FLAG)
        self.sleep(0.01)

    def draw_box(self, x1: int, y1: int, x2: int, y2: int, set: int = 1) -> None:
        self._command(DRAW_BOX, x1, y1, x2, y2, DRAW_FLAG)
        self.sleep(0.01)

    def draw_circle(self, x: int, y: int, rad: int, set: int = 1) -> None:
        self._command(DRAW_CIRCLE, x, y, rad, DRAW_FLAG)
        self.sleep(0.01)

    def erase_block(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._command(ERASE_BLOCK, x1, y1, x2, y2)
        self.sleep(0.01)