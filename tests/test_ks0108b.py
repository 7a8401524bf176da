import pytest

from glcdpack.ks0108b import HEIGHT, KS0108B, WIDTH
from glcdpack.pixels import Pixel


def _all_pixels(panel):
    return {panel.pixel_at(x, y) for x in range(WIDTH) for y in range(HEIGHT)}


def test_clear_normal_blanks_everything():
    panel = KS0108B(False)
    panel.draw_pixel(5, 5, Pixel.ON)
    panel.clear()
    assert _all_pixels(panel) == {False}
    assert (panel.page, panel.column) == (0, 0)


def test_clear_reverse_sets_everything():
    panel = KS0108B(True)
    panel.clear()
    assert _all_pixels(panel) == {True}


def test_draw_pixel_normal_mode():
    panel = KS0108B(False)
    panel.clear()
    panel.draw_pixel(70, 13, Pixel.ON)
    assert panel.pixel_at(70, 13) is True
    assert panel.pixel_at(70, 12) is False
    panel.draw_pixel(70, 13, Pixel.OFF)
    assert _all_pixels(panel) == {False}


def test_draw_pixel_reverse_mode_inverts():
    panel = KS0108B(True)
    panel.clear()
    panel.draw_pixel(3, 40, Pixel.ON)
    assert panel.pixel_at(3, 40) is False
    panel.draw_pixel(3, 40, Pixel.OFF)
    assert _all_pixels(panel) == {True}


def test_draw_pixel_keeps_neighbours():
    panel = KS0108B(False)
    panel.clear()
    panel.draw_pixel(10, 16, Pixel.ON)
    panel.draw_pixel(10, 23, Pixel.ON)
    assert panel.pixel_at(10, 16) and panel.pixel_at(10, 23)


def test_write_data_advances_and_wraps():
    panel = KS0108B(False)
    panel.set_page(2)
    panel.set_column(126)
    panel.write_data(0x01)
    assert panel.column == 127
    panel.write_data(0x02)
    assert panel.column == 0
    assert panel.read_data(126) == 0x01
    assert panel.read_data(127) == 0x02


def test_write_then_read_round_trip():
    panel = KS0108B(False)
    panel.set_page(5)
    panel.set_column(0)
    data = bytes(range(0, 256, 2))
    for byte in data:
        panel.write_data(byte)
    assert bytes(panel.read_data(x) for x in range(WIDTH)) == data


def test_set_page_uses_low_bits():
    panel = KS0108B(False)
    panel.set_page(8)
    assert panel.page == 0
    panel.set_page(0xBB)
    assert panel.page == 3


def test_set_column_out_of_range():
    with pytest.raises(ValueError):
        KS0108B(False).set_column(WIDTH)


def test_write_data_rejects_non_byte():
    with pytest.raises(ValueError):
        KS0108B(False).write_data(256)


def test_pixel_at_off_panel():
    with pytest.raises(ValueError):
        KS0108B(False).pixel_at(0, HEIGHT)


def test_read_block_on_page_boundary_takes_following_page():
    panel = KS0108B(False)
    panel.set_page(1)
    panel.set_column(20)
    pattern = bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66, 0x77, 0x88])
    for byte in pattern:
        panel.write_data(byte)
    assert panel.read_block(20, 0) == pattern


def test_read_block_on_last_page_wraps_to_first():
    panel = KS0108B(False)
    panel.set_page(0)
    panel.set_column(0)
    pattern = bytes([0xA5] * 8)
    for byte in pattern:
        panel.write_data(byte)
    assert panel.read_block(0, 56) == pattern


def test_read_block_of_blank_panel_is_blank():
    panel = KS0108B(False)
    panel.clear()
    assert panel.read_block(40, 19) == bytes(8)


def test_display_on_and_reset():
    panel = KS0108B(False)
    panel.display_on()
    assert panel.display_enabled is True
    panel.reset()
    assert panel.display_enabled is False
    assert panel.start_line == 0