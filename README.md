# glcdpack

A software model of a serial graphic LCD backpack: a small controller that
takes bytes from a serial line and draws text, lines, circles, boxes and
sprites on a monochrome graphic LCD. The package also has a host-side client
that builds the byte sequences such a backpack understands.

Both display sizes are modelled (`glcdpack.pixels.DisplayType`):

* `DisplayType.SMALL`: 128×64 panel, `glcdpack.ks0108b.KS0108B`
* `DisplayType.LARGE`: 160×128 panel, `glcdpack.t6963.T6963`

There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## The `glcdpack` command

`glcdpack` boots an emulated backpack with factory settings, runs a byte
stream through it and prints the resulting screen as text, `#` for a set dot
and `.` for a clear one, one line per pixel row.

```
glcdpack commands.bin            # read the stream from a file
printf 'Hello\r' | glcdpack      # or from standard input ('-' is the default)
glcdpack --large commands.bin    # emulate the 160x128 panel
glcdpack --reverse commands.bin  # start in reverse (light background) mode
```

## Using the emulator from Python

```python
from glcdpack.backpack import Backpack
from glcdpack.pixels import DisplayType
from glcdpack.settings import Settings

pack = Backpack(DisplayType.SMALL, Settings(bytes([0xFF] * 4)), sleep=lambda s: None)
pack.boot(b"")
pack.feed(b"Hello, world!\r")
pack.process()
print(pack.render())
```

`Backpack.boot(early_input)` runs the start-up sequence: it configures the
display, draws the splash logo if the settings ask for it, and then picks the
serial rate. If `early_input` holds any byte, the rate stays at 115200 and
mode `'6'` is stored; otherwise the stored mode is used. `Backpack.baud` and
`Backpack.backlight` report the current rate and backlight level.

`feed()` queues bytes and `process()` acts on them. A command whose argument
bytes have not all arrived waits for the next `feed()`.

Printable characters (space to `~`) are drawn as 5×8 glyphs on a 6×8 grid.
Carriage return moves to the next text line, and backspace erases the last
character. Text wraps at the right edge and the bottom. A `|` byte starts a
command, and the byte after it picks the command (`glcdpack.ui.Command`):

| Byte | Command |
|------|---------|
| 0x00 | clear screen |
| 0x04 | run demo |
| 0x12 | toggle reverse mode (stored) |
| 0x13 | toggle splash screen (stored) |
| 0x02 | backlight level, 1 byte (clamped to 100) |
| 0x07 | baud rate, 1 byte (`'1'`–`'6'`, others ignored) |
| 0x18 | text origin x, 1 byte |
| 0x19 | text origin y, 1 byte |
| 0x10 | pixel: x, y, on/off |
| 0x0c | line: x1, y1, x2, y2, on/off |
| 0x03 | circle: x, y, radius, on/off |
| 0x0f | box: x1, y1, x2, y2, on/off |
| 0x05 | erase block: x1, y1, x2, y2 |
| 0x0b | sprite: x, y, index, angle (`'0'`, `'3'`, `'6'`, `'9'`), on/off |

An on/off byte of zero means off. Lines, circles and boxes always light their
pixels whatever that byte says. Sprite indexes of 128 and above are ignored.
Unknown command bytes are ignored.

The drawing layer, `glcdpack.lcd.Lcd`, can also be used directly:

```python
from glcdpack.lcd import Lcd
from glcdpack.pixels import DisplayType, Pixel

lcd = Lcd(DisplayType.LARGE, reverse=False)
lcd.configure()
lcd.draw_circle(80, 64, 30, Pixel.ON)
lcd.draw_sprite(10, 10, 4, "0", Pixel.ON)
print(lcd.render())
```

`glcdpack.demo.run_demo(lcd, sleep)` plays the built-in demonstration on a
configured `Lcd`. The demonstration shows text, a sprite checkerboard,
concentric circles and a chomper sprite that clears the screen.

Bitmaps for glyphs, sprites and the logo come from `glcdpack.fonts`
(`glyph`, `sprite_data`, `sprite_mask`, `logo_columns`). Serial helpers
(`BaudRate`, `baud_for_mode`, `format_hex`, `format_dec`, `format_bin`,
`format_line`, `RxBuffer`) live in `glcdpack.uart`.

Persistent settings (splash, reverse mode, baud mode, backlight level) live in
`glcdpack.settings.Settings`. It reads and writes a four-byte image with
`to_bytes()`. An image of all `0xFF` means splash on, reverse off, an invalid
baud mode, and a backlight level of 255.

## Talking to a backpack

`glcdpack.client.GraphicLcd` writes command sequences to any object with a
`write` method, such as an open serial port or an in-memory buffer. If the
port has a `baudrate` attribute, `set_baud()` and `restore_default_baud()`
keep it in step with the display's rate.

```python
import io
from glcdpack.client import GraphicLcd

port = io.BytesIO()
lcd = GraphicLcd(port, sleep=lambda s: None)
lcd.clear_screen()
lcd.draw_box(0, 0, 127, 63, 1)
lcd.print_str("Ready")
```

The `set_pixel`, `draw_line`, `draw_box` and `draw_circle` methods always send
the draw flag. Their `set` argument is accepted but not sent.

## What it does not do

The emulator does not open or listen on a serial port. It reads a byte stream
that you hand it, from Python or through the `glcdpack` command. Backlight
level and baud rate are recorded as values only. The settings image lives in
memory, and neither the package nor the command saves it to disk.