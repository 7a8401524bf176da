from glcdpack.demo import WANT_YOU_GONE, run_demo
from glcdpack.lcd import Lcd
from glcdpack.pixels import DisplayType


def make_lcd(reverse=False):
    lcd = Lcd(DisplayType.SMALL, reverse)
    lcd.configure()
    lcd.clear_screen()
    return lcd


class Recorder:
    def __init__(self, lcd):
        self.lcd = lcd
        self.calls = []
        self.screens = []

    def __call__(self, seconds):
        self.calls.append(seconds)
        self.screens.append(self.lcd.render())


def test_screen_is_blank_after_demo():
    lcd = make_lcd()
    run_demo(lcd, Recorder(lcd))
    assert "#" not in lcd.render()


def test_reverse_screen_is_background_after_demo():
    lcd = make_lcd(reverse=True)
    run_demo(lcd, lambda seconds: None)
    assert "." not in lcd.render()


def test_pause_lengths():
    lcd = make_lcd()
    recorder = Recorder(lcd)
    run_demo(lcd, recorder)
    assert recorder.calls[0] == 0.75
    assert set(recorder.calls) == {0.75, 0.5, 0.25, 0.2}
    assert recorder.calls.count(0.5) == 1


def test_first_line_drawn_before_first_pause():
    lcd = make_lcd()
    recorder = Recorder(lcd)
    run_demo(lcd, recorder)

    expected = make_lcd()
    for char in WANT_YOU_GONE[0] + "\r":
        expected.draw_char(char)
    assert recorder.screens[0] == expected.render()


def test_text_moves_to_middle_after_clear():
    lcd = make_lcd()
    recorder = Recorder(lcd)
    run_demo(lcd, recorder)
    # pauses: lines 0-3, the extra pause after line 3, then line 4
    rows = recorder.screens[5].split("\n")
    top = lcd.y_dim // 2 - 8
    assert all("#" not in row for row in rows[:top])
    assert any("#" in row for row in rows[top:top + 8])