"""The built-in demonstration: a few lines of text, a sprite checkerboard,
concentric circles and a chomper clearing the screen."""

from __future__ import annotations

import time
from typing import Callable

from .lcd import Lcd
from .pixels import Pixel

WANT_YOU_GONE = (
    "Well here we are again.",
    "It's always such a pleasure.",
    "Remember how you tried to kill me twice?",
    "Oh how we laughed and laughed!",
    "Except I wasn't laughing.",
    "Under the circumstances, I've been SHOCKINGLY nice.",
)

SOLID_SPRITE = 127
GHOST_SPRITE = 0
CHOMPER_OPEN = 4
CHOMPER_SHUT = 5

LINE_PAUSE = 0.75
BOARD_PAUSE = 0.5
CIRCLE_PAUSE = 0.25
STEP_PAUSE = 0.2

Sleep = Callable[[float], None]


def _print_lines(lcd: Lcd, sleep: Sleep) -> None:
    for index, line in enumerate(WANT_YOU_GONE):
        for char in line:
            lcd.draw_char(char)
        lcd.draw_char("\r")
        sleep(LINE_PAUSE)
        if index in (3, 4):
            sleep(LINE_PAUSE)
            lcd.clear_screen()
            lcd.cursor_pos[0] = 0
            lcd.cursor_pos[1] = lcd.y_dim // 2 - 8


def _cells(lcd: Lcd):
    """Yield the rows of 8x8 cell origins covering the screen."""
    for y in range(0, lcd.y_dim - 7, 8):
        yield y, range(0, lcd.x_dim - 7, 8)


def _checkerboard(lcd: Lcd) -> None:
    lit = True
    for y, xs in _cells(lcd):
        for x in xs:
            lcd.draw_sprite(x, y, SOLID_SPRITE, "0", Pixel.ON if lit else Pixel.OFF)
            lit = not lit
        lit = not lit


def _circles(lcd: Lcd, sleep: Sleep) -> None:
    for radius in range(2, lcd.x_dim // 2, 8):
        lcd.draw_circle(lcd.x_dim // 2, lcd.y_dim // 2, radius, Pixel.ON)
        sleep(CIRCLE_PAUSE)


def _chase(lcd: Lcd, sleep: Sleep) -> None:
    mouth_open = True
    for y, xs in _cells(lcd):
        for x in xs:
            lcd.draw_sprite(x, y, CHOMPER_OPEN if mouth_open else CHOMPER_SHUT, "0", Pixel.ON)
            mouth_open = not mouth_open
            lcd.draw_sprite(x + 10, y, GHOST_SPRITE, "0", Pixel.ON)
            sleep(STEP_PAUSE)
            lcd.erase_block(x, y, x + 7, y + 7)
            lcd.erase_block(x + 10, y, x + 17, y + 7)


def run_demo(lcd: Lcd, sleep: Sleep = time.sleep) -> None:
    """Play the demonstration on an already configured display."""
    _print_lines(lcd, sleep)
    _checkerboard(lcd)
    sleep(BOARD_PAUSE)
    _circles(lcd, sleep)
    _chase(lcd, sleep)