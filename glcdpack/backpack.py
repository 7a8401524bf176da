"""The backpack itself: start-up sequence and the main receive loop."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable

from .lcd import Lcd
from .pixels import DisplayType
from .settings import Settings
from .uart import BUF_DEPTH, DEFAULT_BAUD, BaudRate, RxBuffer, baud_for_mode
from .ui import ESCAPE, Command, UserInterface

SPLASH_DELAY = 1.0
FALLBACK_BAUD_MODE = "6"

_ARG_COUNTS = {
    Command.ADJ_BL_LEVEL: 1,
    Command.ADJ_BAUD_RATE: 1,
    Command.ADJ_TEXT_X: 1,
    Command.ADJ_TEXT_Y: 1,
    Command.DRAW_PIXEL: 3,
    Command.DRAW_LINE: 5,
    Command.DRAW_CIRCLE: 4,
    Command.DRAW_BOX: 5,
    Command.ERASE_BLOCK: 4,
    Command.DRAW_SPRITE: 5,
}


def _arg_count(code: int) -> int:
    try:
        return _ARG_COUNTS.get(Command(code), 0)
    except ValueError:
        return 0


def _drawable(byte: int) -> bool:
    return ord(" ") <= byte <= ord("~") or byte in (ord("\r"), ord("\b"))


def _no_sleep(_seconds: float) -> None:
    return None


class Backpack:
    """A serial graphic LCD backpack: settings, display and command loop."""

    def __init__(
        self,
        display: DisplayType = DisplayType.SMALL,
        settings: Settings | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.sleep = sleep
        self.lcd = Lcd(display, self.settings.reverse())
        self.ui = UserInterface(self.lcd, self.settings, sleep)
        self._rx = RxBuffer(BUF_DEPTH)
        self._pending: list[int] | None = None

    @property
    def baud(self) -> BaudRate:
        """The rate the serial port is currently running at."""
        return self.ui.baud

    @property
    def backlight(self) -> int:
        """The current backlight level, 0-100."""
        return self.ui.backlight

    def boot(self, early_input: bytes = b"") -> None:
        """Run the start-up sequence.

        ``early_input`` is whatever arrives during the splash pause; any
        byte at all keeps the port at 115200 and stores that rate.
        """
        self.ui.backlight = self.settings.backlight_level()
        self.ui.baud = DEFAULT_BAUD
        self.lcd.reverse = self.settings.reverse()
        self.lcd.configure()
        self.lcd.clear_screen()
        if self.settings.splash():
            self.lcd.draw_logo()
        self.sleep(SPLASH_DELAY)
        self.feed(early_input)
        if len(self._rx) == 0:
            rate = baud_for_mode(self.settings.baud_rate())
            if rate is not None:
                self.ui.baud = rate
        else:
            self.settings.set_baud_rate(FALLBACK_BAUD_MODE)
        self.lcd.clear_screen()
        self._rx.clear()
        self._pending = None

    def feed(self, data: bytes | bytearray) -> None:
        """Queue received bytes."""
        for byte in data:
            self._rx.push(byte)

    def process(self) -> None:
        """Act on everything queued; an incomplete command waits for more bytes."""
        while len(self._rx):
            byte = self._rx.pop()
            if self._pending is None:
                if byte == ESCAPE:
                    self._pending = []
                elif _drawable(byte):
                    self.lcd.draw_char(byte)
                continue
            self._pending.append(byte)
            if len(self._pending) - 1 < _arg_count(self._pending[0]):
                continue
            code, *args = self._pending
            self._pending = None
            self.ui.handle(code, iter(args).__next__)

    def pixel_at(self, x: int, y: int) -> bool:
        """True when the dot at (x, y) is set in display memory."""
        return self.lcd.pixel_at(x, y)

    def render(self) -> str:
        """The screen as text, one line per row."""
        return self.lcd.render()


def main(argv: list[str] | None = None) -> int:
    """Feed a byte stream to an emulated backpack and print the screen."""
    parser = argparse.ArgumentParser(
        prog="glcdpack",
        description="Run a byte stream through an emulated serial graphic LCD backpack.",
    )
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    parser.add_argument("--large", action="store_true", help="emulate the 160x128 panel")
    parser.add_argument("--reverse", action="store_true", help="start in reverse mode")
    args = parser.parse_args(argv)

    if args.input == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(args.input).read_bytes()

    settings = Settings()
    if args.reverse:
        settings.toggle_reverse()
    display = DisplayType.LARGE if args.large else DisplayType.SMALL
    backpack = Backpack(display, settings, _no_sleep)
    backpack.boot()
    for start in range(0, len(data), BUF_DEPTH):
        backpack.feed(data[start:start + BUF_DEPTH])
        backpack.process()
    print(backpack.render())
    return 0