"""Emulation of a 160x128 panel driven by a t6963 controller.

The controller keeps graphics memory as rows one pixel high, each
``graphics_area`` bytes wide. Within a byte, bit 7 is the leftmost pixel.
Commands take their arguments from the data bytes written just before
them, the way the real controller's bus protocol works.
"""

from __future__ import annotations

from collections import deque

from .pixels import Pixel

WIDTH = 160
HEIGHT = 128
BYTES_PER_LINE = WIDTH // 8
GRAPHICS_BYTES = BYTES_PER_LINE * HEIGHT
MEMORY_SIZE = 0x10000

PIX_DK = 0x00
PIX_LT = 0x08

CMD_SET_POINTER = 0x24
CMD_GRAPHICS_HOME = 0x42
CMD_GRAPHICS_AREA = 0x43
CMD_MODE_SET = 0x80
CMD_DISPLAY_MODE = 0x98
CMD_WRITE_INC = 0xC0
CMD_READ_INC = 0xC1
CMD_READ_KEEP = 0xC5
CMD_BIT_SET_RESET = 0xF0

STATUS_READY = 0x03


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


class T6963:
    """A t6963-driven 160x128 panel and the driver operations on it."""

    def __init__(self, reverse: bool = False) -> None:
        self.reverse = bool(reverse)
        self.pointer = 0
        self.graphics_home = 0
        self.graphics_area = BYTES_PER_LINE
        self.mode = 0
        self.display_mode = 0
        self._args: deque[int] = deque(maxlen=2)
        self._latch = 0
        self._memory = bytearray(MEMORY_SIZE)

    def _take_args(self, count: int, command: int) -> list[int]:
        if len(self._args) < count:
            raise ValueError(
                f"command 0x{command:02X} needs {count} data byte(s), "
                f"got {len(self._args)}"
            )
        args = list(self._args)[-count:]
        self._args.clear()
        return args

    def write_data(self, data: int) -> None:
        """Place a data byte on the bus as an argument for the next command."""
        self._args.append(_check_byte(data))

    def read_data(self) -> int:
        """Return the byte fetched by the last read command."""
        return self._latch

    def write_cmd(self, command: int) -> None:
        """Execute a command using the data bytes written before it."""
        _check_byte(command)
        if command == CMD_SET_POINTER:
            low, high = self._take_args(2, command)
            self.pointer = low | (high << 8)
        elif command == CMD_GRAPHICS_HOME:
            low, high = self._take_args(2, command)
            self.graphics_home = low | (high << 8)
        elif command == CMD_GRAPHICS_AREA:
            columns, _ = self._take_args(2, command)
            self.graphics_area = columns
        elif command & 0xF0 == 0x80:
            self.mode = command
        elif command & 0xF0 == 0x90:
            self.display_mode = command
        elif command == CMD_WRITE_INC:
            (value,) = self._take_args(1, command)
            self._memory[self.pointer] = value
            self.pointer = (self.pointer + 1) % MEMORY_SIZE
        elif command == CMD_READ_INC:
            self._latch = self._memory[self.pointer]
            self.pointer = (self.pointer + 1) % MEMORY_SIZE
        elif command == CMD_READ_KEEP:
            self._latch = self._memory[self.pointer]
        elif command & 0xF0 == CMD_BIT_SET_RESET:
            mask = 1 << (command & 0x07)
            if command & PIX_LT:
                self._memory[self.pointer] |= mask
            else:
                self._memory[self.pointer] &= ~mask & 0xFF
        else:
            self._args.clear()

    def read_status(self) -> int:
        """Status byte; the emulated controller is always ready."""
        return STATUS_READY

    def set_pointer(self, x: int, y: int) -> None:
        """Point at the memory byte holding pixel (x, y)."""
        address = (y * BYTES_PER_LINE + (x >> 3)) & 0xFFFF
        self.write_data(address & 0xFF)
        self.write_data(address >> 8)
        self.write_cmd(CMD_SET_POINTER)

    def display_init(self) -> None:
        """Set graphics home and area, mode and display mode."""
        self.write_data(0x00)
        self.write_data(0x00)
        self.write_cmd(CMD_GRAPHICS_HOME)
        self.write_data(BYTES_PER_LINE)
        self.write_data(0x00)
        self.write_cmd(CMD_GRAPHICS_AREA)
        self.write_cmd(CMD_MODE_SET)
        self.write_cmd(CMD_DISPLAY_MODE)

    def clear(self) -> None:
        """Fill the graphics area with the background colour."""
        fill = 0xFF if self.reverse else 0x00
        self.set_pointer(0, 0)
        for _ in range(GRAPHICS_BYTES):
            self.write_data(fill)
            self.write_cmd(CMD_WRITE_INC)

    def bit_set_reset(self, bit: int, sr: int) -> None:
        """Set (sr=PIX_LT) or reset (sr=PIX_DK) one bit of the pointed byte."""
        if not 0 <= bit <= 7:
            raise ValueError(f"bit index {bit} out of range 0-7")
        if sr not in (PIX_DK, PIX_LT):
            raise ValueError(f"set/reset flag must be 0x00 or 0x08, got {sr:#x}")
        self.write_cmd(CMD_BIT_SET_RESET | sr | bit)

    def draw_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Turn one pixel on or off, honouring reverse mode."""
        self.set_pointer(x, y)
        bit = 7 - (x % 8)
        lit = Pixel.OFF if self.reverse else Pixel.ON
        self.bit_set_reset(bit, PIX_LT if pixel is lit else PIX_DK)

    def read_block(self, x: int, y: int) -> bytes:
        """Read an 8x8 block at (x, y) as eight column bytes.

        Rows are gathered and shifted as the backpack's driver does; its
        transpose ORs bit j of row j into every output byte, so all eight
        bytes come back equal.
        """
        shift = x % 8
        rows = []
        for i in range(8):
            self.set_pointer(x, (y + i) & 0xFF)
            self.write_cmd(CMD_READ_INC)
            first = self.read_data()
            self.write_cmd(CMD_READ_KEEP)
            second = self.read_data()
            rows.append(((first << shift) & 0xFF) | (second >> (8 - shift)))
        combined = 0
        for j, row in enumerate(rows):
            combined |= row & (1 << j)
        return bytes([combined] * 8)

    def pixel_at(self, x: int, y: int) -> bool:
        """True when the memory bit for (x, y) is set."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise ValueError(f"point ({x}, {y}) is off the panel")
        address = (self.graphics_home + y * self.graphics_area + (x >> 3)) % MEMORY_SIZE
        return bool(self._memory[address] >> (7 - x % 8) & 0x01)