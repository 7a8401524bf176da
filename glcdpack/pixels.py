"""Display kinds and pixel states shared across the backpack."""

from __future__ import annotations

from enum import Enum


class DisplayType(Enum):
    """The two controllers the backpack can drive."""

    SMALL = 0  # 128x64, ks0108b controller
    LARGE = 1  # 160x128, t6963 controller


class Pixel(Enum):
    """Whether a drawing command lights a pixel or clears it."""

    ON = 0
    OFF = 1

    def inverted(self) -> "Pixel":
        """Return the opposite pixel state."""
        return Pixel.OFF if self is Pixel.ON else Pixel.ON