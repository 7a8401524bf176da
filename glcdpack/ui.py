"""Command interpreter for the sequences that follow the '|' escape byte."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable

from .demo import run_demo
from .fonts import SPRITE_COUNT
from .lcd import Lcd
from .pixels import Pixel
from .settings import Settings
from .uart import DEFAULT_BAUD, BaudRate, baud_for_mode

ESCAPE = 0x7C
MAX_BACKLIGHT = 100


class Command(IntEnum):
    """Command bytes accepted after the escape byte."""

    CLEAR_SCREEN = 0x00
    RUN_DEMO = 0x04
    TOGGLE_BGND = 0x12
    TOGGLE_SPLASH = 0x13
    ADJ_BL_LEVEL = 0x02
    ADJ_BAUD_RATE = 0x07
    ADJ_TEXT_X = 0x18
    ADJ_TEXT_Y = 0x19
    DRAW_PIXEL = 0x10
    DRAW_LINE = 0x0C
    DRAW_CIRCLE = 0x03
    DRAW_BOX = 0x0F
    ERASE_BLOCK = 0x05
    DRAW_SPRITE = 0x0B


ReadByte = Callable[[], int]


def _pixel(flag: int) -> Pixel:
    """A zero flag byte erases; anything else draws."""
    return Pixel.OFF if flag == 0 else Pixel.ON


class UserInterface:
    """Runs commands against a display and the persistent settings.

    ``backlight`` mirrors the PWM compare level and ``baud`` the serial
    port's current rate.
    """

    def __init__(
        self, lcd: Lcd, settings: Settings, sleep: Callable[[float], None] = time.sleep
    ) -> None:
        self.lcd = lcd
        self.settings = settings
        self.sleep = sleep
        self.backlight = settings.backlight_level()
        self.baud: BaudRate = DEFAULT_BAUD

    def handle(self, command: int | str, read_byte: ReadByte) -> Command | None:
        """Execute one command, pulling its argument bytes from ``read_byte``.

        Returns the command run, or None when the byte is not a command.
        """
        code = ord(command) if isinstance(command, str) else command
        try:
            cmd = Command(code)
        except ValueError:
            return None
        getattr(self, f"_{cmd.name.lower()}")(read_byte)
        return cmd

    @staticmethod
    def _args(read_byte: ReadByte, count: int) -> list[int]:
        return [read_byte() & 0xFF for _ in range(count)]

    def _clear_screen(self, read_byte: ReadByte) -> None:
        self.lcd.clear_screen()

    def _run_demo(self, read_byte: ReadByte) -> None:
        self.lcd.clear_screen()
        run_demo(self.lcd, self.sleep)
        self.lcd.reverse = not self.lcd.reverse
        self.lcd.clear_screen()
        run_demo(self.lcd, self.sleep)
        self.lcd.reverse = not self.lcd.reverse
        self.lcd.clear_screen()

    def _toggle_bgnd(self, read_byte: ReadByte) -> None:
        self.lcd.reverse = not self.lcd.reverse
        self.settings.toggle_reverse()
        self.lcd.clear_screen()

    def _toggle_splash(self, read_byte: ReadByte) -> None:
        self.settings.toggle_splash()

    def _adj_bl_level(self, read_byte: ReadByte) -> None:
        (level,) = self._args(read_byte, 1)
        level = min(level, MAX_BACKLIGHT)
        self.backlight = level
        self.settings.set_backlight_level(level)

    def _adj_baud_rate(self, read_byte: ReadByte) -> None:
        (mode,) = self._args(read_byte, 1)
        self.settings.set_baud_rate(mode)
        rate = baud_for_mode(mode)
        if rate is not None:
            self.baud = rate

    def _adj_text_x(self, read_byte: ReadByte) -> None:
        (x,) = self._args(read_byte, 1)
        if x <= self.lcd.x_dim - 6:
            self.lcd.text_origin[0] = x
            self.lcd.cursor_pos[0] = x
            self.lcd.text_length = 0

    def _adj_text_y(self, read_byte: ReadByte) -> None:
        (y,) = self._args(read_byte, 1)
        if y <= self.lcd.y_dim - 8:
            self.lcd.text_origin[1] = y
            self.lcd.cursor_pos[1] = y
            self.lcd.text_length = 0

    def _draw_pixel(self, read_byte: ReadByte) -> None:
        x, y, flag = self._args(read_byte, 3)
        self.lcd.draw_pixel(x, y, _pixel(flag))

    def _draw_line(self, read_byte: ReadByte) -> None:
        x1, y1, x2, y2, flag = self._args(read_byte, 5)
        self.lcd.draw_line(x1, y1, x2, y2, _pixel(flag))

    def _draw_circle(self, read_byte: ReadByte) -> None:
        x, y, radius, flag = self._args(read_byte, 4)
        self.lcd.draw_circle(x, y, radius, _pixel(flag))

    def _draw_box(self, read_byte: ReadByte) -> None:
        x1, y1, x2, y2, flag = self._args(read_byte, 5)
        self.lcd.draw_box(x1, y1, x2, y2, _pixel(flag))

    def _erase_block(self, read_byte: ReadByte) -> None:
        x1, y1, x2, y2 = self._args(read_byte, 4)
        self.lcd.erase_block(x1, y1, x2, y2)

    def _draw_sprite(self, read_byte: ReadByte) -> None:
        x, y, sprite, angle, flag = self._args(read_byte, 5)
        if sprite < SPRITE_COUNT:
            self.lcd.draw_sprite(x, y, sprite, angle, _pixel(flag))