import pytest

from glcdpack.fonts import glyph, logo_columns, sprite_data, sprite_mask


def test_space_is_blank():
    assert glyph(" ") == bytes([0x00, 0x00, 0x00, 0x00, 0x00])


def test_letter_a_matches_table():
    assert glyph("A") == bytes([0x7C, 0x12, 0x11, 0x12, 0x7C])


def test_tilde_is_last_glyph():
    assert glyph("~") == bytes([0x10, 0x08, 0x18, 0x10, 0x08])


def test_glyph_accepts_character_code():
    assert glyph(ord("B")) == glyph("B")


def test_every_printable_has_five_columns():
    lengths = {len(glyph(chr(code))) for code in range(ord(" "), ord("~") + 1)}
    assert lengths == {5}


def test_zero_and_letter_o_differ():
    assert glyph("0") != glyph("O")
    assert glyph("O") == glyph("O")


@pytest.mark.parametrize("char", ["\x1f", "\x7f", "\r", "\b"])
def test_unprintable_characters_raise(char):
    with pytest.raises(ValueError):
        glyph(char)


def test_multi_character_string_raises():
    with pytest.raises(ValueError):
        glyph("ab")


def test_ghost_sprite_and_mask():
    assert sprite_data(0) == bytes([0x00, 0x3F, 0x42, 0x91, 0x82, 0x91, 0x42, 0x3F])
    assert sprite_mask(0) == bytes([0xFF, 0xC0, 0x81, 0x00, 0x01, 0x00, 0x81, 0xC0])


def test_unused_sprites_are_solid_blocks():
    for index in range(8, 128):
        assert sprite_data(index) == bytes([0xFF] * 8)
        assert sprite_mask(index) == bytes([0xFF] * 8)


def test_open_and_shut_sprites_differ():
    assert sprite_data(4) != sprite_data(5)


@pytest.mark.parametrize("index", [-1, 128, 300])
def test_sprite_index_out_of_range(index):
    with pytest.raises(ValueError):
        sprite_data(index)
    with pytest.raises(ValueError):
        sprite_mask(index)


def test_logo_layout():
    logo = logo_columns()
    assert len(logo) == 20
    assert logo[0] == 0x80
    assert logo[10] == 0xFF
    assert logo[-1] == 0x03