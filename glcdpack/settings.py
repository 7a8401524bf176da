"""Persistent settings stored in a small non-volatile byte image.

A freshly erased store holds 0xFF everywhere; the encodings below are
chosen so that state means: splash on, reverse off, baud rate invalid
(which falls back to 115200) and full backlight.
"""

from __future__ import annotations

SPLASH = 0x00
REVERSE = 0x01
BAUDRATE = 0x02
BACKLIGHT = 0x03

SIZE = 4
ERASED = 0xFF

_BAUD_MODES = "123456"


class Settings:
    """The sticky configuration of the backpack."""

    def __init__(self, data: bytes | bytearray | None = None) -> None:
        if data is None:
            data = bytes([ERASED] * SIZE)
        if len(data) != SIZE:
            raise ValueError(f"settings image must be {SIZE} bytes, got {len(data)}")
        self._data = bytearray(data)

    def toggle_splash(self) -> None:
        """Flip whether the logo is shown at start-up."""
        self._data[SPLASH] ^= 0x01

    def splash(self) -> bool:
        """True when the logo should be shown at start-up."""
        return bool(self._data[SPLASH] & 0x01)

    def toggle_reverse(self) -> None:
        """Flip reverse mode; the stored bit is the complement of the mode."""
        self._data[REVERSE] = (self._data[REVERSE] & 0x01) ^ 0x01

    def reverse(self) -> bool:
        """True when the display starts in light-background mode."""
        return bool(~self._data[REVERSE] & 0x01)

    def set_baud_rate(self, mode: str | int) -> None:
        """Store a baud mode '1'..'6'; anything else is ignored."""
        char = chr(mode) if isinstance(mode, int) else mode
        if len(char) == 1 and char in _BAUD_MODES:
            self._data[BAUDRATE] = ord(char)

    def baud_rate(self) -> str:
        """The stored baud mode character, possibly not a valid mode."""
        return chr(self._data[BAUDRATE])

    def set_backlight_level(self, level: int) -> None:
        """Store the backlight level byte unchanged."""
        self._data[BACKLIGHT] = level & 0xFF

    def backlight_level(self) -> int:
        """The stored backlight level byte."""
        return self._data[BACKLIGHT]

    def to_bytes(self) -> bytes:
        """The raw settings image."""
        return bytes(self._data)