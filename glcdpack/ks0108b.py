"""Emulation of a 128x64 panel driven by a pair of ks0108b controllers.

The panel is two 64-column halves, each with 8 pages of 8 pixel rows.
A data byte is one column of one page; bit 0 is the top pixel. The
emulation keeps display memory as 8 pages of 128 columns and tracks the
column pointer the way the backpack's driver does.
"""

from __future__ import annotations

from .pixels import Pixel

WIDTH = 128
HEIGHT = 64
PAGES = HEIGHT // 8


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


class KS0108B:
    """A ks0108b-driven 128x64 panel and the driver operations on it."""

    def __init__(self, reverse: bool = False) -> None:
        self.reverse = bool(reverse)
        self.display_enabled = False
        self.start_line = 0
        self.column = 0
        self.page = 0
        self._memory = [bytearray(WIDTH) for _ in range(PAGES)]

    def reset(self) -> None:
        """Pulse reset: display off and start line back to the top."""
        self.display_enabled = False
        self.start_line = 0

    def display_on(self) -> None:
        """Enable the display output."""
        self.display_enabled = True

    def set_start_line(self) -> None:
        """Make the top memory line the top line of the display."""
        self.start_line = 0

    def set_column(self, address: int) -> None:
        """Point both halves at a column 0..127."""
        if not 0 <= address < WIDTH:
            raise ValueError(f"column {address} out of range 0-{WIDTH - 1}")
        self.column = address

    def set_page(self, address: int) -> None:
        """Select a page; only the low three bits are used."""
        self.page = address & 0x07

    def write_data(self, data: int) -> None:
        """Write one column byte at the pointer and advance, wrapping at the edge."""
        self._memory[self.page][self.column] = _check_byte(data)
        self.column += 1
        if self.column > WIDTH - 1:
            self.set_column(0)

    def read_data(self, x: int) -> int:
        """Read the column byte at x on the current page."""
        if not 0 <= x < WIDTH:
            raise ValueError(f"column {x} out of range 0-{WIDTH - 1}")
        return self._memory[self.page][x]

    def clear(self) -> None:
        """Fill the screen with the background and home the pointers."""
        fill = 0xFF if self.reverse else 0x00
        for page in range(PAGES):
            self.set_page(page)
            self.set_column(0)
            for _ in range(WIDTH):
                self.write_data(fill)
        self.set_page(0)
        self.set_column(0)

    def read_block(self, x: int, y: int) -> bytes:
        """Read eight column bytes around (x, y), combining two pages.

        The shifts follow the backpack's driver exactly, including which
        page bits end up in the result.
        """
        offset = y % 8
        columns = [(x + i) & 0x7F for i in range(8)]
        self.set_page(y // 8)
        block = [(self.read_data(c) << (8 - offset)) & 0xFF for c in columns]
        self.set_page(y // 8 + 1)
        return bytes(
            value | (self.read_data(c) >> offset) for value, c in zip(block, columns)
        )

    def draw_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Turn one pixel on or off with a read-modify-write of its column byte."""
        if not 0 <= y < HEIGHT:
            raise ValueError(f"row {y} out of range 0-{HEIGHT - 1}")
        self.set_column(x)
        self.set_page(y // 8)
        current = self.read_data(x)
        bit = 1 << (y % 8)
        lit = Pixel.OFF if self.reverse else Pixel.ON
        if pixel is lit:
            current |= bit
        else:
            current &= ~bit & 0xFF
        self.set_column(x)
        self.write_data(current)

    def pixel_at(self, x: int, y: int) -> bool:
        """True when the memory bit for (x, y) is set."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise ValueError(f"point ({x}, {y}) is off the panel")
        return bool(self._memory[y // 8][x] >> (y % 8) & 0x01)