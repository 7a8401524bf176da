import pytest

from glcdpack.pixels import DisplayType, Pixel


def test_on_inverts_to_off():
    assert Pixel.ON.inverted() is Pixel.OFF


def test_off_inverts_to_on():
    assert Pixel.OFF.inverted() is Pixel.ON


@pytest.mark.parametrize("pixel", list(Pixel))
def test_inversion_is_an_involution(pixel):
    looked_up = Pixel(pixel.value)
    assert looked_up.inverted().inverted() is pixel
    assert looked_up.inverted() is not pixel


def test_display_types_are_distinct():
    small = DisplayType(DisplayType.SMALL.value)
    large = DisplayType(DisplayType.LARGE.value)
    assert small is DisplayType.SMALL
    assert large is DisplayType.LARGE
    assert small != large
    assert set(DisplayType) == {small, large}