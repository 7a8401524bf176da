from glcdpack.backpack import Backpack, main
from glcdpack.lcd import Lcd
from glcdpack.pixels import DisplayType
from glcdpack.settings import Settings
from glcdpack.uart import BaudRate


def _blank(width, height, char="."):
    return "\n".join(char * width for _ in range(height))


def _booted(settings=None, display=DisplayType.SMALL, early=b""):
    backpack = Backpack(display, settings, sleep=lambda _s: None)
    backpack.boot(early)
    return backpack


def test_boot_leaves_blank_screen():
    backpack = _booted()
    assert backpack.render() == _blank(128, 64)


def test_boot_reverse_fills_screen():
    settings = Settings()
    settings.toggle_reverse()
    backpack = _booted(settings)
    assert backpack.render() == _blank(128, 64, "#")


def test_boot_large_display_dimensions():
    backpack = _booted(display=DisplayType.LARGE)
    assert backpack.render() == _blank(160, 128)


def test_boot_pauses_for_splash():
    calls = []
    backpack = Backpack(DisplayType.SMALL, Settings(), sleep=calls.append)
    backpack.boot()
    assert calls == [1.0]


def test_boot_uses_stored_baud_rate():
    settings = Settings()
    settings.set_baud_rate("3")
    backpack = _booted(settings)
    assert backpack.baud is BaudRate.BR19200


def test_boot_erased_baud_falls_back_to_default():
    backpack = _booted(Settings())
    assert backpack.baud is BaudRate.BR115200


def test_early_input_restores_default_baud():
    settings = Settings()
    settings.set_baud_rate("2")
    backpack = _booted(settings, early=b"x")
    assert settings.baud_rate() == "6"
    assert backpack.baud is BaudRate.BR115200
    backpack.process()
    assert backpack.render() == _blank(128, 64)


def test_printable_text_is_drawn():
    backpack = _booted()
    backpack.feed(b"A")
    backpack.process()
    expected = Lcd(DisplayType.SMALL)
    expected.configure()
    expected.clear_screen()
    expected.draw_char("A")
    assert backpack.render() == expected.render()


def test_unprintable_bytes_are_ignored():
    backpack = _booted()
    backpack.feed(b"\x01\x02\x7f")
    backpack.process()
    assert backpack.render() == _blank(128, 64)
    assert backpack.lcd.cursor_pos == [0, 0]


def test_command_split_across_feeds():
    backpack = _booted()
    backpack.feed(b"|\x10")
    backpack.process()
    assert not backpack.pixel_at(5, 6)
    backpack.feed(b"\x05\x06\x01")
    backpack.process()
    assert backpack.pixel_at(5, 6)


def test_backlight_from_settings_and_command():
    settings = Settings()
    settings.set_backlight_level(40)
    backpack = _booted(settings)
    assert backpack.backlight == 40
    backpack.feed(b"|\x02\xc8")
    backpack.process()
    assert backpack.backlight == 100
    assert settings.backlight_level() == 100


def test_escaped_clear_screen_wipes_drawing():
    backpack = _booted()
    backpack.feed(b"|\x10\x01\x01\x01")
    backpack.process()
    assert backpack.pixel_at(1, 1)
    backpack.feed(b"|\x00")
    backpack.process()
    assert backpack.render() == _blank(128, 64)


def test_main_small(tmp_path, capsys):
    path = tmp_path / "input.bin"
    path.write_bytes(b"Hi")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 64
    assert all(len(line) == 128 for line in lines)
    assert any("#" in line for line in lines)


def test_main_large(tmp_path, capsys):
    path = tmp_path / "input.bin"
    path.write_bytes(b"")
    assert main([str(path), "--large"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 128
    assert all(line == "." * 160 for line in lines)