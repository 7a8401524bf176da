"""Display-independent drawing layer: text terminal, lines, circles, sprites.

All coordinates are treated as unsigned bytes, as the backpack's firmware
does, so negative or oversized values wrap and then fall off the panel.
Lines, boxes and circles always light their pixels; the pixel argument is
accepted for symmetry with the serial protocol but does not change them.
"""

from __future__ import annotations

from typing import Callable, Union

from .fonts import FIRST_CHAR, LAST_CHAR, glyph, logo_columns, sprite_data, sprite_mask
from .ks0108b import KS0108B
from .pixels import DisplayType, Pixel
from .t6963 import T6963

CHAR_ADVANCE = 6
LINE_HEIGHT = 8

Controller = Union[KS0108B, T6963]

_ROTATIONS: dict[str, Callable[[int, int], tuple[int, int]]] = {
    "0": lambda i, j: (i, 7 - j),
    "3": lambda i, j: (j, i),
    "6": lambda i, j: (7 - i, j),
    "9": lambda i, j: (7 - j, 7 - i),
}


def _u8(value: int) -> int:
    return value & 0xFF


class Lcd:
    """Drawing front end for either panel type, with a pseudo text terminal."""

    def __init__(self, display: DisplayType = DisplayType.SMALL, reverse: bool = False) -> None:
        self.display = display
        self.controller: Controller = (
            KS0108B(reverse) if display is DisplayType.SMALL else T6963(reverse)
        )
        self._reverse = bool(reverse)
        self.cursor_pos = [0, 0]
        self.text_origin = [0, 0]
        self.text_length = 0
        self.x_dim = 128
        self.y_dim = 64

    @property
    def reverse(self) -> bool:
        """True in light-background mode."""
        return self._reverse

    @reverse.setter
    def reverse(self, value: bool) -> None:
        self._reverse = bool(value)
        self.controller.reverse = self._reverse

    def configure(self) -> None:
        """Bring up the controller and record the panel dimensions."""
        if self.display is DisplayType.SMALL:
            self.controller.reset()
            self.controller.display_on()
            self.controller.clear()
            self.x_dim, self.y_dim = 128, 64
        else:
            self.controller.display_init()
            self.x_dim, self.y_dim = 160, 128

    def clear_screen(self) -> None:
        """Home the text cursor and fill the panel with the background."""
        self.cursor_pos[0] = self.text_origin[0]
        self.cursor_pos[1] = self.text_origin[1]
        self.text_length = 0
        self.controller.clear()

    def draw_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Set one pixel; points off the panel are silently skipped."""
        x, y = _u8(x), _u8(y)
        if x < self.x_dim and y < self.y_dim:
            self.controller.draw_pixel(x, y, pixel)

    def draw_line(self, p1x: int, p1y: int, p2x: int, p2y: int, pixel: Pixel = Pixel.ON) -> None:
        """Draw a Bresenham line between two points."""
        p1x, p1y, p2x, p2y = _u8(p1x), _u8(p1y), _u8(p2x), _u8(p2y)
        if p1x > p2x:
            p1x, p2x = p2x, p1x
            p1y, p2y = p2y, p1y

        if p1x == p2x:
            if p1y > p2y:
                p1y, p2y = p2y, p1y
            for y in range(p1y, p2y + 1):
                self.draw_pixel(p1x, y, Pixel.ON)
            return
        if p1y == p2y:
            for x in range(p1x, p2x + 1):
                self.draw_pixel(x, p1y, Pixel.ON)
            return

        dy = p2y - p1y
        dx = p2x - p1x
        dy2 = dy << 1
        dx2 = dx << 1
        dy2_minus_dx2 = dy2 - dx2
        dy2_plus_dx2 = dy2 + dx2
        x, y = p1x, p1y

        if dy >= 0:
            if dy <= dx:
                f = dy2 - dx
                while x <= p2x:
                    self.draw_pixel(x, y, Pixel.ON)
                    if f <= 0:
                        f += dy2
                    else:
                        y += 1
                        f += dy2_minus_dx2
                    x += 1
            else:
                f = dx2 - dy
                while y <= p2y:
                    self.draw_pixel(x, y, Pixel.ON)
                    if f <= 0:
                        f += dx2
                    else:
                        x += 1
                        f -= dy2_minus_dx2
                    y += 1
        elif dx >= -dy:
            f = -dy2 - dx
            while x <= p2x:
                self.draw_pixel(x, y, Pixel.ON)
                if f <= 0:
                    f -= dy2
                else:
                    y -= 1
                    f -= dy2_plus_dx2
                x += 1
        else:
            f = dx2 + dy
            while y >= p2y:
                self.draw_pixel(x, y, Pixel.ON)
                if f <= 0:
                    f += dx2
                else:
                    x += 1
                    f += dy2_plus_dx2
                y -= 1

    def draw_circle(self, x0: int, y0: int, r: int, pixel: Pixel = Pixel.ON) -> None:
        """Draw a midpoint circle; only on-panel points are rendered."""
        x0, y0, r = _u8(x0), _u8(y0), _u8(r)
        x, y = r, 0
        x_change = 1 - (r << 1)
        y_change = 0
        radius_error = 0
        while x >= y:
            for px, py in (
                (x, y), (y, x), (-x, y), (-y, x),
                (-x, -y), (-y, -x), (x, -y), (y, -x),
            ):
                self.draw_pixel(px + x0, py + y0, Pixel.ON)
            y += 1
            radius_error += y_change
            y_change += 2
            if (radius_error << 1) + x_change > 0:
                x -= 1
                radius_error += x_change
                x_change += 2

    def draw_box(self, p1x: int, p1y: int, p2x: int, p2y: int, pixel: Pixel = Pixel.ON) -> None:
        """Draw the outline of the box with the given diagonal corners."""
        self.draw_line(p1x, p1y, p1x, p2y, pixel)
        self.draw_line(p1x, p1y, p2x, p1y, pixel)
        self.draw_line(p2x, p2y, p1x, p2y, pixel)
        self.draw_line(p2x, p2y, p2x, p1y, pixel)

    def _blank_cell(self) -> None:
        cx, cy = self.cursor_pos
        for x in range(cx, cx + 5):
            for y in range(cy, cy + LINE_HEIGHT):
                self.draw_pixel(x, y, Pixel.OFF)

    def _carriage_return(self) -> None:
        while self.cursor_pos[0] <= self.x_dim - CHAR_ADVANCE:
            self.cursor_pos[0] = _u8(self.cursor_pos[0] + CHAR_ADVANCE)
            self.text_length = (self.text_length + 1) & 0xFFFF
        self.cursor_pos[0] = self.text_origin[0]
        self.cursor_pos[1] = _u8(self.cursor_pos[1] + LINE_HEIGHT)
        if self.cursor_pos[1] >= self.y_dim - 7:
            self.cursor_pos[1] = self.text_origin[1]

    def _backspace(self) -> None:
        if self.text_length == 0:
            return
        self.text_length -= 1
        if self.cursor_pos[0] == self.text_origin[0]:
            if self.cursor_pos[1] == self.text_origin[1]:
                while self.cursor_pos[1] < self.y_dim - LINE_HEIGHT:
                    self.cursor_pos[1] = _u8(self.cursor_pos[1] + LINE_HEIGHT)
            else:
                self.cursor_pos[1] = _u8(self.cursor_pos[1] - LINE_HEIGHT)
            while self.cursor_pos[0] <= self.x_dim - CHAR_ADVANCE:
                self.cursor_pos[0] = _u8(self.cursor_pos[0] + CHAR_ADVANCE)
            self.cursor_pos[0] = _u8(self.cursor_pos[0] - CHAR_ADVANCE)
        else:
            self.cursor_pos[0] = _u8(self.cursor_pos[0] - CHAR_ADVANCE)
        self._blank_cell()

    def draw_char(self, char: str | int) -> None:
        """Render a character at the cursor; handles '\\r' and '\\b'."""
        code = char if isinstance(char, int) else ord(char)
        if code == ord("\r"):
            self._carriage_return()
        elif code == ord("\b"):
            self._backspace()

        if not ord(FIRST_CHAR) <= code <= ord(LAST_CHAR):
            return
        self.text_length = (self.text_length + 1) & 0xFFFF
        cx, cy = self.cursor_pos
        for column, bits in enumerate(glyph(code)):
            for row in range(LINE_HEIGHT):
                state = Pixel.ON if bits >> row & 0x01 else Pixel.OFF
                self.draw_pixel(cx + column, cy + row, state)
        self.cursor_pos[0] = _u8(cx + CHAR_ADVANCE)
        if self.cursor_pos[0] >= self.x_dim - CHAR_ADVANCE:
            self.cursor_pos[0] = self.text_origin[0]
            self.cursor_pos[1] = _u8(self.cursor_pos[1] + LINE_HEIGHT)
            if self.cursor_pos[1] >= self.y_dim - 7:
                self.cursor_pos[1] = self.text_origin[1]

    def draw_logo(self) -> None:
        """Draw the 10x16 splash logo centred on the panel."""
        x = _u8(self.x_dim // 2 - 10)
        y = _u8(self.y_dim // 2 - 8)
        lit, dark = (Pixel.OFF, Pixel.ON) if self.reverse else (Pixel.ON, Pixel.OFF)
        logo = logo_columns()
        for half, top in ((logo[:10], y), (logo[10:], y + 8)):
            for i, bits in enumerate(half):
                for j in range(8):
                    self.draw_pixel(x + i, top + j, lit if bits >> j & 0x01 else dark)

    def erase_block(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Turn off every pixel in the box spanned by two corners, inclusive."""
        x0, y0, x1, y1 = _u8(x0), _u8(y0), _u8(x1), _u8(y1)
        x0, x1 = min(x0, x1), max(x0, x1)
        y0, y1 = min(y0, y1), max(y0, y1)
        for j in range(y0, y1 + 1):
            for i in range(x0, x1 + 1):
                self.draw_pixel(i, j, Pixel.OFF)

    def get_data_block(self, x: int, y: int) -> bytes:
        """Read the 8x8 block at (x, y) from the controller as column bytes."""
        return self.controller.read_block(_u8(x), _u8(y))

    def draw_sprite(
        self, x: int, y: int, sprite: int, angle: str | int, pixel: Pixel = Pixel.ON
    ) -> None:
        """Draw an 8x8 sprite over the background, rotated by a clock angle."""
        data = sprite_data(sprite)
        mask = sprite_mask(sprite)
        background = self.get_data_block(x, y)
        block = []
        for bg, m, s in zip(background, mask, data):
            if self.reverse:
                bg ^= 0xFF
            block.append((bg & m) | s)

        key = chr(angle) if isinstance(angle, int) else angle
        place = _ROTATIONS.get(key)
        if place is None:
            return
        want_on = pixel is Pixel.ON
        for i, bits in enumerate(block):
            for j in range(8):
                dx, dy = place(i, j)
                state = Pixel.ON if bool(bits >> j & 0x01) == want_on else Pixel.OFF
                self.draw_pixel(x + dx, y + dy, state)

    def pixel_at(self, x: int, y: int) -> bool:
        """True when the dot at (x, y) is set in the panel's memory."""
        if not (0 <= x < self.x_dim and 0 <= y < self.y_dim):
            raise ValueError(f"point ({x}, {y}) is off the screen")
        return self.controller.pixel_at(x, y)

    def render(self) -> str:
        """The screen as text: '#' for set dots, '.' for clear, one line per row."""
        return "\n".join(
            "".join("#" if self.pixel_at(x, y) else "." for x in range(self.x_dim))
            for y in range(self.y_dim)
        )