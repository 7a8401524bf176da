"""Glyph, sprite and logo bitmaps used by the renderer.

Glyphs are five columns wide; bit 0 of each column byte is the top pixel.
Sprites are eight columns of eight pixels, with a mask whose set bits let
the background show through.
"""

from __future__ import annotations

FIRST_CHAR = " "
LAST_CHAR = "~"
GLYPH_WIDTH = 5
SPRITE_COUNT = 128
SPRITE_SIZE = 8

_FONT = (
    (0x00, 0x00, 0x00, 0x00, 0x00),  # space
    (0x00, 0x6F, 0x6F, 0x00, 0x00),  # !
    (0x00, 0x07, 0x00, 0x07, 0x00),  # "
    (0x14, 0x7F, 0x14, 0x7F, 0x14),  # #
    (0x00, 0x26, 0x6B, 0x2A, 0x10),  # $
    (0x43, 0x33, 0x08, 0x64, 0x63),  # %
    (0x32, 0x4D, 0x49, 0x36, 0x50),  # &
    (0x00, 0x00, 0x07, 0x00, 0x00),  # '
    (0x00, 0x1C, 0x22, 0x41, 0x00),  # (
    (0x00, 0x41, 0x22, 0x1C, 0x00),  # )
    (0x11, 0x0A, 0x1F, 0x0A, 0x11),  # *
    (0x10, 0x10, 0x7C, 0x10, 0x10),  # +
    (0x00, 0x00, 0xA0, 0x60, 0x00),  # ,
    (0x10, 0x10, 0x10, 0x10, 0x10),  # -
    (0x00, 0x00, 0x60, 0x60, 0x00),  # .
    (0x40, 0x30, 0x08, 0x06, 0x01),  # /
    (0x3E, 0x51, 0x49, 0x45, 0x3E),  # 0
    (0x00, 0x42, 0x7F, 0x40, 0x00),  # 1
    (0x42, 0x61, 0x51, 0x49, 0x46),  # 2
    (0x22, 0x41, 0x49, 0x49, 0x36),  # 3
    (0x08, 0x0C, 0x0A, 0x7F, 0x08),  # 4
    (0x27, 0x45, 0x45, 0x45, 0x39),  # 5
    (0x3C, 0x4A, 0x49, 0x49, 0x30),  # 6
    (0x01, 0x61, 0x19, 0x07, 0x01),  # 7
    (0x36, 0x49, 0x49, 0x49, 0x36),  # 8
    (0x06, 0x49, 0x49, 0x29, 0x1E),  # 9
    (0x00, 0x00, 0x6C, 0x6C, 0x00),  # :
    (0x00, 0x00, 0xAC, 0x6C, 0x00),  # ;
    (0x08, 0x14, 0x22, 0x41, 0x00),  # <
    (0x14, 0x14, 0x14, 0x14, 0x14),  # =
    (0x00, 0x41, 0x22, 0x14, 0x08),  # >
    (0x02, 0x01, 0x51, 0x09, 0x06),  # ?
    (0x3E, 0x41, 0x5D, 0x5D, 0x46),  # @
    (0x7C, 0x12, 0x11, 0x12, 0x7C),  # A
    (0x7F, 0x49, 0x49, 0x49, 0x36),  # B
    (0x3E, 0x41, 0x41, 0x41, 0x22),  # C
    (0x7F, 0x41, 0x41, 0x41, 0x3E),  # D
    (0x7F, 0x49, 0x49, 0x49, 0x41),  # E
    (0x7F, 0x09, 0x09, 0x09, 0x01),  # F
    (0x3E, 0x41, 0x41, 0x51, 0x72),  # G
    (0x7F, 0x08, 0x08, 0x08, 0x7F),  # H
    (0x41, 0x41, 0x7F, 0x41, 0x41),  # I
    (0x21, 0x41, 0x3F, 0x01, 0x01),  # J
    (0x7F, 0x08, 0x14, 0x22, 0x41),  # K
    (0x7F, 0x40, 0x40, 0x40, 0x40),  # L
    (0x7F, 0x02, 0x04, 0x02, 0x7F),  # M
    (0x7F, 0x06, 0x08, 0x30, 0x7F),  # N
    (0x3E, 0x41, 0x41, 0x41, 0x3E),  # O
    (0x7F, 0x09, 0x09, 0x09, 0x06),  # P
    (0x3E, 0x41, 0x41, 0x61, 0x7E),  # Q
    (0x7F, 0x09, 0x19, 0x29, 0x46),  # R
    (0x26, 0x49, 0x49, 0x49, 0x32),  # S
    (0x01, 0x01, 0x7F, 0x01, 0x01),  # T
    (0x3F, 0x40, 0x40, 0x40, 0x3F),  # U
    (0x1F, 0x20, 0x40, 0x20, 0x1F),  # V
    (0x3F, 0x40, 0x30, 0x40, 0x3F),  # W
    (0x63, 0x14, 0x08, 0x14, 0x63),  # X
    (0x03, 0x04, 0x78, 0x04, 0x03),  # Y
    (0x61, 0x51, 0x49, 0x45, 0x43),  # Z
    (0x00, 0x00, 0x7F, 0x41, 0x00),  # [
    (0x00, 0x00, 0x00, 0x00, 0x00),  # backslash (blank)
    (0x01, 0x06, 0x08, 0x30, 0x40),  # ]
    (0x04, 0x02, 0x01, 0x02, 0x04),  # ^
    (0x80, 0x80, 0x80, 0x80, 0x80),  # _
    (0x01, 0x02, 0x04, 0x00, 0x00),  # `
    (0x20, 0x54, 0x54, 0x54, 0x78),  # a
    (0x7F, 0x48, 0x44, 0x44, 0x38),  # b
    (0x38, 0x44, 0x44, 0x44, 0x28),  # c
    (0x38, 0x44, 0x44, 0x48, 0x7F),  # d
    (0x38, 0x54, 0x54, 0x54, 0x18),  # e
    (0x08, 0x7E, 0x09, 0x01, 0x02),  # f
    (0x18, 0xA4, 0xA4, 0xA4, 0x78),  # g
    (0x7F, 0x08, 0x08, 0x08, 0x70),  # h
    (0x00, 0x48, 0x7A, 0x40, 0x00),  # i
    (0x40, 0x80, 0x80, 0x88, 0x7A),  # j
    (0x7F, 0x10, 0x10, 0x28, 0x44),  # k
    (0x00, 0x41, 0x7F, 0x40, 0x00),  # l
    (0x7C, 0x04, 0x38, 0x04, 0x78),  # m
    (0x7C, 0x04, 0x04, 0x04, 0x78),  # n
    (0x38, 0x44, 0x44, 0x44, 0x38),  # o
    (0xFC, 0x24, 0x24, 0x24, 0x18),  # p
    (0x18, 0x24, 0x24, 0xFC, 0x80),  # q
    (0x7C, 0x08, 0x04, 0x04, 0x08),  # r
    (0x48, 0x54, 0x54, 0x54, 0x20),  # s
    (0x00, 0x08, 0x3C, 0x48, 0x20),  # t
    (0x3C, 0x40, 0x40, 0x40, 0x7C),  # u
    (0x0C, 0x30, 0x40, 0x30, 0x0C),  # v
    (0x1C, 0x60, 0x18, 0x60, 0x1C),  # w
    (0x44, 0x28, 0x10, 0x28, 0x44),  # x
    (0x1C, 0xA0, 0xA0, 0xA0, 0x7C),  # y
    (0x44, 0x64, 0x54, 0x4C, 0x44),  # z
    (0x00, 0x08, 0x36, 0x41, 0x41),  # {
    (0x20, 0x40, 0xFF, 0x40, 0x20),  # | (arrow)
    (0x41, 0x41, 0x36, 0x08, 0x00),  # }
    (0x10, 0x08, 0x18, 0x10, 0x08),  # ~
)

_LOGO = bytes(
    (
        0x80, 0xC0, 0x40, 0x0C, 0x3E,
        0xFE, 0xF2, 0xE0, 0xF0, 0xE0,
        0xFF, 0x7F, 0x3F, 0x1F, 0x1F,
        0x1F, 0x1F, 0x0F, 0x07, 0x03,
    )
)

_SOLID = (0xFF,) * SPRITE_SIZE

_SPRITES = (
    (0x00, 0x3F, 0x42, 0x91, 0x82, 0x91, 0x42, 0x3F),  # ghost
    (0x81, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x81),  # four corners
    (0x10, 0x20, 0x40, 0xFF, 0xFF, 0x40, 0x20, 0x10),  # up arrow
    (0x10, 0x20, 0x40, 0xFF, 0x00, 0x00, 0x00, 0x00),  # half up arrow
    (0x3C, 0x42, 0x81, 0xA1, 0x89, 0x99, 0x66, 0x24),  # chomper right, open
    (0x3C, 0x42, 0x81, 0xA1, 0x81, 0x89, 0x4A, 0x3C),  # chomper right, shut
    (0x24, 0x66, 0x99, 0x89, 0xA1, 0x81, 0x42, 0x3C),  # chomper left, open
    (0x3C, 0x4A, 0x89, 0x81, 0xA1, 0x81, 0x42, 0x3C),  # chomper left, shut
) + (_SOLID,) * (SPRITE_COUNT - 8)

_MASKS = (
    (0xFF, 0xC0, 0x81, 0x00, 0x01, 0x00, 0x81, 0xC0),
    (0x7E, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x7E),
    (0xEF, 0xDF, 0xBF, 0x00, 0x00, 0xBF, 0xDF, 0xEF),
    (0xEF, 0xDF, 0xBF, 0x00, 0xFF, 0xFF, 0xFF, 0xFF),
    (0xC3, 0x81, 0x00, 0x00, 0x00, 0x00, 0x99, 0xDB),
    (0xC3, 0x81, 0x00, 0x00, 0x00, 0x00, 0x81, 0xC3),
    (0xDB, 0x99, 0x00, 0x00, 0x00, 0x00, 0x81, 0xC3),
    (0xC3, 0x81, 0x00, 0x00, 0x00, 0x00, 0x81, 0xC3),
) + (_SOLID,) * (SPRITE_COUNT - 8)


def _char_code(char: str | int) -> int:
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def glyph(char: str | int) -> bytes:
    """Return the five column bytes of a printable ASCII character."""
    code = _char_code(char)
    if not ord(FIRST_CHAR) <= code <= ord(LAST_CHAR):
        raise ValueError(f"no glyph for character code {code}")
    return bytes(_FONT[code - ord(FIRST_CHAR)])


def _check_sprite(index: int) -> None:
    if not 0 <= index < SPRITE_COUNT:
        raise ValueError(f"sprite index {index} out of range 0-{SPRITE_COUNT - 1}")


def sprite_data(index: int) -> bytes:
    """Return the eight column bytes of a sprite."""
    _check_sprite(index)
    return bytes(_SPRITES[index])


def sprite_mask(index: int) -> bytes:
    """Return the eight mask bytes of a sprite; set bits keep the background."""
    _check_sprite(index)
    return bytes(_MASKS[index])


def logo_columns() -> bytes:
    """Return the 20 logo bytes: ten top-half columns, then ten bottom-half."""
    return _LOGO